"""Command line interface for shunt."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

from .core.errors import ExpressionError
from .core.logging import get_logger, setup_logging
from .parser import Context, InfixExpression

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shunt",
        description="Evaluate an arithmetic expression.",
    )
    parser.add_argument(
        "expression",
        help="Expression to evaluate, e.g. '3 + 4 * 2 / (1 - 5) ^ 2 ^ 3'.",
    )
    parser.add_argument(
        "--var",
        dest="variables",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Bind a variable (repeatable).",
    )
    parser.add_argument(
        "--variables",
        dest="variables_file",
        type=Path,
        help="YAML file with 'variables' (and optional 'constants') mappings.",
    )
    parser.add_argument(
        "--postfix",
        action="store_true",
        help="Print the postfix (RPN) form instead of evaluating.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log pipeline details to stderr.",
    )
    return parser


def _parse_binding(binding: str) -> tuple[str, float]:
    name, sep, value = binding.partition("=")
    if not sep or not name.strip():
        raise ValueError(f"Invalid variable binding '{binding}', expected NAME=VALUE")
    try:
        return name.strip(), float(value)
    except ValueError:
        raise ValueError(f"Value of '{name.strip()}' is not a number: '{value}'") from None


def _build_context(args: argparse.Namespace) -> Context:
    context = Context.from_yaml(args.variables_file) if args.variables_file else Context.numeric()
    bindings = dict(_parse_binding(binding) for binding in args.variables)
    return context.with_variables(bindings) if bindings else context


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else "WARNING", log_format="text")

    try:
        context = _build_context(args)
        infix = InfixExpression(args.expression, context)
        postfix = infix.to_postfix()
        logger.debug(
            "Converted expression",
            extra_data={"tokens": len(infix.tokens), "postfix": postfix.to_string()},
        )
        output = postfix.to_string() if args.postfix else repr(postfix.evaluate())
    except (ExpressionError, OSError, ValueError, yaml.YAMLError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
