"""Domain services: image encoding and the prompt request lifecycle."""

from .image_encoder import encode_file, encode_image, read_image
from .prompt_lifecycle import PromptLifecycle

__all__ = ["encode_file", "encode_image", "read_image", "PromptLifecycle"]
