"""Wedding API - Main application entry point."""
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wedding.api import api_router
from wedding.api.health import router as health_router
from wedding import __version__
from wedding.config import settings
from wedding.exceptions import WeddingError
from wedding.logging_config import setup_logging

# Initialize logging
setup_logging()

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Map application exceptions to JSON error responses."""

    @app.exception_handler(WeddingError)
    async def handle_wedding_error(request: Request, exc: WeddingError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path}: {exc.message} {exc.context}")
        else:
            logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.code, "detail": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        # Malformed bodies are client errors like any other validation failure
        return JSONResponse(
            status_code=400,
            content={"error": "validation_error", "detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        detail = "Internal server error" if settings.is_prod else str(exc)
        return JSONResponse(
            status_code=500,
            content={"error": "internal_error", "detail": detail},
        )


app = FastAPI(
    title="Wedding",
    description="Wedding party coordination - guests, music requests, hotel rooms",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include API routes
app.include_router(api_router, prefix="/api")

# Include health routes (not under /api prefix)
app.include_router(health_router)


@app.get("/")
def root():
    """Root endpoint - API info."""
    return {
        "name": "Wedding",
        "version": __version__,
        "docs": "/docs",
    }
