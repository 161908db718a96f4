import pytest

from image_prompt_service.api.dependencies import initialize_services, reset_dependencies
from image_prompt_service.config.settings import Settings
from image_prompt_service.domain.errors import ConfigurationError
from image_prompt_service.infrastructure.genai import gemini_prompt_generator


@pytest.mark.asyncio
async def test_startup_halts_without_api_key(monkeypatch):
    reset_dependencies()
    monkeypatch.setattr(gemini_prompt_generator, "get_settings", lambda: Settings(api_key=None))

    with pytest.raises(ConfigurationError):
        await initialize_services()


@pytest.mark.asyncio
async def test_startup_builds_lifecycle_with_api_key(monkeypatch):
    reset_dependencies()
    monkeypatch.setattr(gemini_prompt_generator, "get_settings", lambda: Settings(api_key="test-key"))
    monkeypatch.setattr(gemini_prompt_generator.genai, "Client", lambda api_key: object())

    await initialize_services()
