"""FastAPI application entry point."""

import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config.settings import get_settings
from .api.routes import health_router, prompt_router
from .api.dependencies import initialize_services

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Image Prompt Service",
    description="Upload an image and get a creative prompt for AI image generation",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health_router)
app.include_router(prompt_router)


@app.on_event("startup")
async def startup_event() -> None:
    """Application startup event."""
    settings = get_settings()
    logger.info("=" * 50)
    logger.info("Image Prompt Service Starting")
    logger.info(f"Gemini Model: {settings.gemini_model}")
    logger.info(f"API Key Configured: {bool(settings.api_key)}")
    logger.info("=" * 50)

    # Fails with ConfigurationError when API_KEY is missing
    await initialize_services()


@app.on_event("shutdown")
async def shutdown_event() -> None:
    """Application shutdown event."""
    logger.info("Image Prompt Service Shutting Down")


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "image_prompt_service.main:app",
        host=settings.prompt_service_host,
        port=settings.prompt_service_port,
        reload=True,
    )
