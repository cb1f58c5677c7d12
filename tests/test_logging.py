"""Tests for structured logging."""

import json
import logging
import math
import sys

import pytest

from shunt.core.logging import (
    StructuredFormatter,
    TextFormatter,
    get_logger,
    setup_logging,
)


def _record(extra_data=None, exc_info=None):
    record = logging.LogRecord(
        name="shunt.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Expression evaluated",
        args=(),
        exc_info=exc_info,
    )
    if extra_data is not None:
        record.extra_data = extra_data
    return record


class TestStructuredFormatter:
    """Test JSON log records."""

    def test_fields(self):
        data = json.loads(StructuredFormatter().format(_record({"result": 3.0})))
        assert data["level"] == "INFO"
        assert data["logger"] == "shunt.test"
        assert data["message"] == "Expression evaluated"
        assert data["result"] == 3.0

    def test_non_finite_values_are_serialized(self):
        line = StructuredFormatter().format(_record({"result": math.inf}))
        assert json.loads(line)["result"] == math.inf

    def test_exception(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = _record(exc_info=sys.exc_info())
        data = json.loads(StructuredFormatter().format(record))
        assert "RuntimeError: boom" in data["exception"]


class TestTextFormatter:
    """Test plain text log records."""

    def test_message_only(self):
        assert TextFormatter().format(_record()) == "INFO shunt.test: Expression evaluated"

    def test_extra_data_appended(self):
        line = TextFormatter().format(_record({"tokens": 3, "postfix": "1.0 2.0 +"}))
        assert line == "INFO shunt.test: Expression evaluated tokens=3 postfix='1.0 2.0 +'"


class TestSetupLogging:
    """Test root logger configuration."""

    def test_adapter_passes_extra_data(self, capsys):
        setup_logging("DEBUG", log_format="json")
        get_logger("shunt.test").debug("Converted", extra_data={"tokens": 5})
        data = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert data["message"] == "Converted"
        assert data["tokens"] == 5

    def test_level_filters(self, capsys):
        setup_logging("WARNING", log_format="text")
        get_logger("shunt.test").info("hidden")
        assert capsys.readouterr().err == ""

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown log format"):
            setup_logging("INFO", log_format="xml")
