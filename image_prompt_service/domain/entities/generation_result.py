"""Outcome of a single prompt generation attempt."""

from dataclasses import dataclass
from typing import Literal, Union


@dataclass(frozen=True)
class GenerationSuccess:
    """The service returned a usable prompt."""

    prompt_text: str
    kind: Literal["success"] = "success"

    def to_dict(self) -> dict:
        return {"kind": self.kind, "prompt_text": self.prompt_text}


@dataclass(frozen=True)
class GenerationFailure:
    """The attempt failed; message is shown to the user."""

    message: str
    kind: Literal["failure"] = "failure"

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


GenerationResult = Union[GenerationSuccess, GenerationFailure]
