"""Domain interfaces (ports) - abstract contracts for infrastructure."""

from .prompt_generator import PromptGenerator

__all__ = ["PromptGenerator"]
