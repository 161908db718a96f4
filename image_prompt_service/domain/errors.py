"""Error taxonomy for the image-to-prompt service."""


class PromptServiceError(Exception):
    """Base exception for all image-to-prompt errors."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error

    @property
    def message(self) -> str:
        """User-visible message."""
        return str(self)


class EncodingError(PromptServiceError):
    """Raised when an uploaded image cannot be read or encoded."""


class ValidationError(PromptServiceError):
    """Raised when generation is requested without a ready image."""


class ServiceError(PromptServiceError):
    """Raised when the external generation service fails."""


class EmptyResponseError(ServiceError):
    """Raised when the service answers successfully but without any text."""


class ConfigurationError(PromptServiceError):
    """Raised when required configuration (the API credential) is missing."""
