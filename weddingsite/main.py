"""
FastAPI entrypoint for the wedding site backend.
"""
import logging
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from weddingsite.core.config import settings
from weddingsite.core.exceptions import AppError
from weddingsite.core.utils import format_error
from weddingsite.api.middleware import SessionMiddleware
from weddingsite.api.router import api_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Weddingsite API",
    description="Backend API for wedding event pages and guest feed",
    version="1.0.0"
)

# Session gate for page paths
app.add_middleware(SessionMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Surface domain errors with their status and a short message."""
    return JSONResponse(status_code=exc.status_code, content=format_error(exc.message, exc.details))


def _error_details(exc: RequestValidationError):
    # Echoed input may hold credentials
    return [{key: value for key, value in error.items() if key != "input"} for error in exc.errors()]


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing request fields are validation errors."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=format_error("Validation failed", jsonable_encoder(_error_details(exc))),
    )


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    """Unexpected failures never leak storage detail to the client."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=format_error("Internal Server Error"),
    )


# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"message": "Weddingsite API is running"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
