"""Google GenAI implementations."""

from .gemini_prompt_generator import GeminiPromptGenerator

__all__ = ["GeminiPromptGenerator"]
