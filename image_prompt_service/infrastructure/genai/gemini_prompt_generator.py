"""Gemini implementation of PromptGenerator."""

import base64
import logging

from google import genai
from google.genai import types

from ...config.settings import Settings, get_settings
from ...domain.entities.image import EncodedImage
from ...domain.errors import ConfigurationError, EmptyResponseError, ServiceError
from ...domain.interfaces.prompt_generator import PromptGenerator

logger = logging.getLogger(__name__)


class GeminiPromptGenerator(PromptGenerator):
    """
    Prompt generator using a Gemini multimodal model.

    Uses the google-genai SDK with an API key. Each call sends the image as
    inline data followed by the instruction text. No retries are made; a
    failed call surfaces as ServiceError.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """
        Initialize the Gemini client.

        Raises:
            ConfigurationError: If no API key is configured
        """
        settings = settings or get_settings()
        if not settings.api_key:
            raise ConfigurationError("API_KEY environment variable not set")

        self._client = genai.Client(api_key=settings.api_key)
        self._model = settings.gemini_model
        logger.info(f"Initialized GeminiPromptGenerator with model: {self._model}")

    async def describe(self, image: EncodedImage, instruction: str) -> str | None:
        """
        Ask Gemini to describe an image.

        Args:
            image: Encoded image to send as inline data
            instruction: Instruction text sent after the image

        Returns:
            Trimmed text of the response

        Raises:
            EmptyResponseError: If the response carries no text
            ServiceError: If the API call fails
        """
        try:
            image_part = types.Part.from_bytes(
                data=base64.b64decode(image.base64_payload),
                mime_type=image.mime_type,
            )
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=[image_part, instruction],
            )
            text = response.text
        except Exception as e:
            logger.error(f"Error generating prompt from image: {e}")
            raise ServiceError(f"service error: {e}", e)

        if not text or not text.strip():
            raise EmptyResponseError("the service returned an empty response")
        return text.strip()

    async def health_check(self) -> bool:
        """Check if the Gemini service is available."""
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents="Say 'ok'",
            )
            return response is not None
        except Exception as e:
            logger.warning(f"Health check failed: {e}")
            return False
