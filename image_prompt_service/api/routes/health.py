"""Health check endpoint."""

from fastapi import APIRouter, Depends

from ..dependencies import get_prompt_generator
from ... import __version__
from ...domain.interfaces.prompt_generator import PromptGenerator

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    generator: PromptGenerator = Depends(get_prompt_generator),
) -> dict:
    """
    Health check endpoint.

    Reports whether the generation service answers.

    Returns:
        Health status
    """
    generator_ok = await generator.health_check()
    return {
        "status": "healthy" if generator_ok else "degraded",
        "service": "image-prompt-service",
        "generator": "available" if generator_ok else "unavailable",
    }


@router.get("/")
async def root() -> dict:
    """Service information."""
    return {
        "service": "image-prompt-service",
        "version": __version__,
        "description": "Turns an uploaded image into a prompt for AI image generation",
    }
