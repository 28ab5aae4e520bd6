"""
FastAPI application for the YouTube Video Summarizer.
"""

import time
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from caption_summarizer.config import config
from caption_summarizer.api.routes import router
from caption_summarizer.utils.error_handling import build_error_response
from caption_summarizer.utils.logger import logging

# FastAPI application
app = FastAPI(
    title=config.APP_NAME,
    version=config.APP_VERSION,
    description="An API for summarizing YouTube videos from their English captions",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Report configuration problems on application startup."""
    config.initialize()
    logging.info(f"{config.APP_NAME} v{config.APP_VERSION} started")


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Middleware to add processing time header to responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render framework HTTP errors (404, 405, ...) as ``{"error": ...}``."""
    error = "Method not allowed" if exc.status_code == 405 else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=build_error_response(error),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reject malformed request bodies with 400."""
    return JSONResponse(
        status_code=400,
        content=build_error_response("Invalid request body", str(exc.errors())),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled exceptions."""
    logging.error(f"Unhandled error on {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=500,
        content=build_error_response("An unexpected error occurred", str(exc)),
    )


# Include API router
app.include_router(router)


# Root
@app.get("/")
async def root():
    """Root endpoint returning basic API information."""
    return {
        "name": config.APP_NAME,
        "version": config.APP_VERSION,
        "description": "YouTube Video Summarizer API",
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}
