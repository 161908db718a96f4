"""Abstract interface for image-to-prompt generation."""

from abc import ABC, abstractmethod

from ..entities.image import EncodedImage


class PromptGenerator(ABC):
    """
    Abstract interface for the external multimodal generation service.

    Implementations send one encoded image together with a natural-language
    instruction and return the free-form text answer. The service is a black
    box that may fail for any transport or quota reason.
    """

    @abstractmethod
    async def describe(self, image: EncodedImage, instruction: str) -> str | None:
        """
        Describe an image following the given instruction.

        Args:
            image: Encoded image (base64 payload + MIME type)
            instruction: Instruction sent alongside the image

        Returns:
            Text returned by the service, or None if it returned no text

        Raises:
            ServiceError: If the call fails
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if the generation service is healthy.

        Returns:
            True if service is available, False otherwise
        """
        pass
