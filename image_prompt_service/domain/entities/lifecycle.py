"""Lifecycle state and the snapshot observed by the user-facing surface."""

from dataclasses import dataclass
from enum import Enum

from .generation_result import GenerationResult


class LifecycleState(str, Enum):
    """States of the prompt request lifecycle."""

    IDLE = "idle"
    IMAGE_READY = "image_ready"
    GENERATING = "generating"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class LifecycleSnapshot:
    """
    Immutable view of the lifecycle at one point in time.

    Attributes:
        state: Current lifecycle state
        preview_url: Data URL of the encoded image, if one is loaded
        mime_type: MIME type of the loaded image
        filename: File name of the loaded image
        result: Result of the last completed attempt
        error: Most recent user-visible error message
    """

    state: LifecycleState
    preview_url: str | None = None
    mime_type: str | None = None
    filename: str | None = None
    result: GenerationResult | None = None
    error: str | None = None

    @property
    def prompt_text(self) -> str | None:
        """Generated prompt, when the last attempt succeeded."""
        return getattr(self.result, "prompt_text", None)

    def to_dict(self) -> dict:
        """Convert snapshot to dictionary representation."""
        return {
            "state": self.state.value,
            "preview_url": self.preview_url,
            "mime_type": self.mime_type,
            "filename": self.filename,
            "result": self.result.to_dict() if self.result else None,
            "prompt_text": self.prompt_text,
            "error": self.error,
        }
