"""FastAPI application entry point for InkJournal Cloud."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import settings
from .routes import api_router
from .services.journal import close_text_recognizer, count_journals

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger("inkjournal")

# Create FastAPI app
app = FastAPI(
    title="InkJournal Cloud API",
    description="Handwritten notes: stroke smoothing, handwriting recognition and PDF export",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router)


@app.on_event("startup")
async def startup_event():
    """Prepare note storage and report the recognition setup."""
    logger.info(f"Starting InkJournal Cloud API v{__version__}")

    settings.storage_dir.mkdir(parents=True, exist_ok=True)
    logger.info(
        f"Note storage at {settings.storage_dir} "
        f"({count_journals(settings.storage_dir)} user journals)"
    )

    smoothing = settings.smoothing_config()
    if smoothing.enabled:
        logger.info(f"Stroke smoothing on, window size {smoothing.window_size}")
    else:
        logger.info("Stroke smoothing off")

    if settings.recognition_enabled:
        logger.info(f"Recognition engine at {settings.recognition_url} ({settings.recognition_language})")
    else:
        logger.warning("Recognition disabled - notes will be saved with empty text")

    if not settings.get_valid_api_keys():
        logger.warning("No API keys configured - running in development mode")


@app.on_event("shutdown")
async def shutdown_event():
    """Close the recognition engine client."""
    close_text_recognizer()
    logger.info("InkJournal Cloud API stopped")


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "InkJournal Cloud API",
        "version": __version__,
        "status": "operational",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "version": __version__,
        "recognition": "enabled" if settings.recognition_enabled else "disabled",
    }


def run():
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
