"""
Main FastAPI application entry point.
"""
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from agrifusion.api import api_router
from agrifusion.api.utils import error_response
from agrifusion.core.config import settings
from agrifusion.core.logging import setup_logging
from agrifusion.middleware import RequestIdMiddleware
from agrifusion.services.llm import get_llm_client
from agrifusion.services.series import InvalidParameterError

setup_logging()
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup and shutdown events.
    """
    client = get_llm_client()
    logger.info(
        "Starting AgriFusion Backend",
        version=settings.app_version,
        debug=settings.api_debug,
        port=settings.api_port,
        llm_provider=client.provider_name,
    )
    if client.is_fallback:
        logger.warning("No live LLM provider configured; advice endpoints will serve fallback responses")

    yield

    logger.info("Shutting down AgriFusion Backend")


app = FastAPI(
    title=settings.app_name,
    description="AgriFusion - AI-powered farming advice, market trends and buyer timing",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestIdMiddleware)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors in the standard error envelope."""
    if exc.status_code == 404:
        return error_response(404, "Route not found")
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and query parameters are client errors."""
    logger.info("Request validation failed", path=request.url.path, errors=len(exc.errors()))
    return error_response(
        400,
        "Invalid request parameters",
        details=jsonable_encoder(exc.errors()),
    )


@app.exception_handler(InvalidParameterError)
async def invalid_parameter_handler(request: Request, exc: InvalidParameterError):
    return error_response(400, str(exc))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unhandled exceptions."""
    logger.error(
        "Unhandled exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return error_response(500, "Something went wrong!")


@app.get("/", tags=["Health"])
async def root():
    """API information and the main endpoints."""
    return {
        "message": "Welcome to AgriFusion Backend!",
        "version": settings.app_version,
        "endpoints": {
            "farmer": "/api/farmer/advice",
            "market": "/api/market/trends",
            "buyer": "/api/buyer/timing",
        },
    }


app.include_router(api_router, prefix="/api")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests."""
    logger.debug(
        "Request",
        method=request.method,
        path=request.url.path,
    )
    response = await call_next(request)
    logger.debug(
        "Response",
        method=request.method,
        path=request.url.path,
        status=response.status_code,
    )
    return response


if __name__ == "__main__":
    import uvicorn

    logger.info("API documentation available", url=f"http://localhost:{settings.api_port}/docs")
    uvicorn.run(
        "agrifusion.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
    )
