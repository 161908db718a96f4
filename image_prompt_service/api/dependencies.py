"""FastAPI dependency injection setup."""

import logging

from ..domain.interfaces.prompt_generator import PromptGenerator
from ..domain.services.prompt_lifecycle import PromptLifecycle
from ..infrastructure.genai.gemini_prompt_generator import GeminiPromptGenerator

logger = logging.getLogger(__name__)

# Singleton instances
_prompt_generator: PromptGenerator | None = None
_prompt_lifecycle: PromptLifecycle | None = None


def get_prompt_generator() -> PromptGenerator:
    """
    Get the prompt generator singleton.

    Returns:
        PromptGenerator implementation

    Raises:
        ConfigurationError: If the API key is missing
    """
    global _prompt_generator
    if _prompt_generator is None:
        _prompt_generator = GeminiPromptGenerator()
    return _prompt_generator


def get_prompt_lifecycle() -> PromptLifecycle:
    """
    Get the lifecycle of the single active session.

    Returns:
        PromptLifecycle bound to the prompt generator
    """
    global _prompt_lifecycle
    if _prompt_lifecycle is None:
        _prompt_lifecycle = PromptLifecycle(get_prompt_generator())
        logger.info("Prompt lifecycle initialized")
    return _prompt_lifecycle


def set_prompt_generator(generator: PromptGenerator) -> None:
    """Install a specific prompt generator (and a fresh lifecycle around it)."""
    global _prompt_generator, _prompt_lifecycle
    _prompt_generator = generator
    _prompt_lifecycle = None


async def initialize_services() -> None:
    """
    Initialize all services.

    This should be called during application startup. A missing credential
    raises ConfigurationError and aborts startup.
    """
    get_prompt_lifecycle()
    logger.info("All services initialized")


def reset_dependencies() -> None:
    """Reset all dependencies (useful for testing)."""
    global _prompt_generator, _prompt_lifecycle
    _prompt_generator = None
    _prompt_lifecycle = None
