"""Image-to-prompt API endpoints."""

import logging
from typing import Literal

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from pydantic import BaseModel, Field

from ..dependencies import get_prompt_lifecycle
from ...domain.entities.generation_result import GenerationFailure
from ...domain.entities.lifecycle import LifecycleSnapshot
from ...domain.errors import EncodingError, ValidationError
from ...domain.services.prompt_lifecycle import PromptLifecycle

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/prompt", tags=["prompt"])


# Response Models
class GenerationResultData(BaseModel):
    """Result of the last generation attempt."""
    kind: Literal["success", "failure"] = Field(..., description="Outcome of the attempt")
    prompt_text: str | None = Field(None, description="Generated prompt (success only)")
    message: str | None = Field(None, description="Failure message (failure only)")


class LifecycleResponse(BaseModel):
    """Observable state of the prompt session."""
    state: Literal["idle", "image_ready", "generating", "success", "failed"] = Field(
        ..., description="Current lifecycle state"
    )
    preview_url: str | None = Field(None, description="Data URL of the uploaded image")
    mime_type: str | None = Field(None, description="MIME type of the uploaded image")
    filename: str | None = Field(None, description="File name of the uploaded image")
    result: GenerationResultData | None = Field(None, description="Last generation result")
    prompt_text: str | None = Field(None, description="Generated prompt, if any")
    error: str | None = Field(None, description="Most recent error message")

    @classmethod
    def from_snapshot(cls, snapshot: LifecycleSnapshot) -> "LifecycleResponse":
        return cls(**snapshot.to_dict())


@router.get("", response_model=LifecycleResponse)
async def get_state(
    lifecycle: PromptLifecycle = Depends(get_prompt_lifecycle),
) -> LifecycleResponse:
    """Return the current state of the prompt session."""
    return LifecycleResponse.from_snapshot(lifecycle.snapshot())


@router.post("/upload", response_model=LifecycleResponse)
async def upload_image(
    file: UploadFile = File(..., description="Image to describe"),
    lifecycle: PromptLifecycle = Depends(get_prompt_lifecycle),
) -> LifecycleResponse:
    """
    Upload an image, replacing any previously uploaded one.

    Returns:
        Session state with the image preview

    Raises:
        400 if the file is not an image or cannot be read
    """
    try:
        snapshot = await lifecycle.upload(file.file, file.content_type, file.filename)
    except EncodingError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    logger.info(f"Image uploaded: {file.filename} ({snapshot.mime_type})")
    return LifecycleResponse.from_snapshot(snapshot)


@router.post("/generate", response_model=LifecycleResponse)
async def generate_prompt(
    lifecycle: PromptLifecycle = Depends(get_prompt_lifecycle),
) -> LifecycleResponse:
    """
    Generate a prompt for the uploaded image.

    Returns:
        Session state holding the generated prompt. If the session was reset
        while the call was running, the (idle) state after the reset.

    Raises:
        400 if no image has been uploaded
        409 if a generation is already running
        502 if the generation service failed
    """
    if lifecycle.is_generating:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A prompt is already being generated",
        )

    try:
        result = await lifecycle.generate()
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

    if isinstance(result, GenerationFailure):
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=result.message)

    return LifecycleResponse.from_snapshot(lifecycle.snapshot())


@router.post("/reset", response_model=LifecycleResponse)
async def reset_session(
    lifecycle: PromptLifecycle = Depends(get_prompt_lifecycle),
) -> LifecycleResponse:
    """Discard the uploaded image and any result."""
    return LifecycleResponse.from_snapshot(lifecycle.reset())
