"""API routes."""

from .health import router as health_router
from .prompt import router as prompt_router

__all__ = [
    "health_router",
    "prompt_router",
]
