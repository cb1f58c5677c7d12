"""
FastAPI backend for expression evaluation.

Thin HTTP layer over the shunt pipeline:
- POST /evaluate evaluates an expression, optionally with variables
- POST /postfix returns the postfix (RPN) form of an expression
"""

import math
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..core.config import settings
from ..core.logging import get_logger, setup_logging
from ..parser import InfixExpression, evaluate, evaluate_with_variables
from .errors import register_error_handlers
from .models import EvaluateRequest, EvaluateResponse, PostfixRequest, PostfixResponse

# Setup logging
setup_logging()
logger = get_logger(__name__)


# Lifecycle management
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    logger.info(
        "Starting Shunt API",
        extra_data={
            "environment": settings.ENVIRONMENT,
            "debug": settings.DEBUG
        }
    )
    yield
    logger.info("Shutting down Shunt API")


# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="REST API for arithmetic expression evaluation",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan
)

# Register error handlers
register_error_handlers(app)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# API Routes

@app.get("/")
async def read_root():
    """API root endpoint"""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "endpoints": {
            "evaluate": "/evaluate",
            "postfix": "/postfix",
            "health": "/health"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT
    }


@app.post("/evaluate", response_model=EvaluateResponse)
async def evaluate_expression(request: EvaluateRequest):
    """Evaluate an expression"""
    logger.info(
        "Evaluating expression",
        extra_data={
            "length": len(request.expression),
            "num_variables": len(request.variables)
        }
    )

    if request.variables:
        result = evaluate_with_variables(request.expression, request.variables)
    else:
        result = evaluate(request.expression)

    return EvaluateResponse(
        expression=request.expression,
        result=result if math.isfinite(result) else None,
        text=repr(result)
    )


@app.post("/postfix", response_model=PostfixResponse)
async def postfix_expression(request: PostfixRequest):
    """Convert an expression to postfix order without evaluating it"""
    logger.info(
        "Converting expression",
        extra_data={"length": len(request.expression)}
    )

    postfix = InfixExpression(request.expression).to_postfix()
    return PostfixResponse(
        expression=request.expression,
        postfix=[token.symbol for token in postfix.tokens]
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "shunt.api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
