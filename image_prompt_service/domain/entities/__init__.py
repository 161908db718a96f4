"""Domain entities."""

from .image import UploadedImage, EncodedImage
from .generation_result import GenerationResult, GenerationSuccess, GenerationFailure
from .lifecycle import LifecycleState, LifecycleSnapshot

__all__ = [
    "UploadedImage",
    "EncodedImage",
    "GenerationResult",
    "GenerationSuccess",
    "GenerationFailure",
    "LifecycleState",
    "LifecycleSnapshot",
]
