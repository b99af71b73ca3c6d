# src/thread_stage/main.py
"""Main entry point for the Thread Stage application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from thread_stage.api.v1 import topics_router
from thread_stage.core.errors import (
    ConsistencyViolationError,
    InvalidPageError,
    NotFoundError,
    UnimplementedError,
)
from thread_stage.core.settings import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Thread Stage API",
    description="Group discussion topics and reply threads",
    version=settings.app_version,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

# Include API routers
app.include_router(topics_router, prefix="/api/v1")


@app.exception_handler(NotFoundError)
async def not_found_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(UnimplementedError)
async def unimplemented_handler(_request: Request, exc: UnimplementedError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": f"not supported: {exc}"},
    )


@app.exception_handler(InvalidPageError)
async def invalid_page_handler(_request: Request, exc: InvalidPageError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content={"detail": str(exc)},
    )


@app.exception_handler(ConsistencyViolationError)
async def consistency_handler(
    request: Request, exc: ConsistencyViolationError
) -> JSONResponse:
    logger.error("consistency violation on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("thread_stage.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
