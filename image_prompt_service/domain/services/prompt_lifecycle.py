"""Prompt request lifecycle - the state machine behind upload, generate and reset."""

import asyncio
import logging
from typing import BinaryIO, Callable

from ..entities.generation_result import GenerationFailure, GenerationResult, GenerationSuccess
from ..entities.image import EncodedImage, UploadedImage
from ..entities.lifecycle import LifecycleSnapshot, LifecycleState
from ..errors import EncodingError, ServiceError, ValidationError
from ..interfaces.prompt_generator import PromptGenerator
from ..prompts import PROMPT_INSTRUCTION
from .image_encoder import encode_file

logger = logging.getLogger(__name__)

NO_IMAGE_MESSAGE = "Please upload an image first."
EMPTY_RESPONSE_MESSAGE = "the service returned an empty response"
SERVICE_ERROR_PREFIX = "service error: "

Listener = Callable[[LifecycleSnapshot], None]


class PromptLifecycle:
    """
    Observable state machine for a single image-to-prompt session.

    States: idle -> image_ready -> generating -> success | failed.
    At most one generation attempt is in flight. Reset never cancels the
    outstanding call; instead every attempt gets an id and its completion is
    dropped unless the lifecycle is still generating for that same id.

    Listeners registered with subscribe() receive a LifecycleSnapshot after
    every change.
    """

    def __init__(self, generator: PromptGenerator, instruction: str = PROMPT_INSTRUCTION) -> None:
        self._generator = generator
        self._instruction = instruction
        self._state = LifecycleState.IDLE
        self._image: UploadedImage | None = None
        self._encoded: EncodedImage | None = None
        self._result: GenerationResult | None = None
        self._error: str | None = None
        self._attempt = 0
        self._listeners: list[Listener] = []

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def image(self) -> UploadedImage | None:
        return self._image

    @property
    def encoded_image(self) -> EncodedImage | None:
        return self._encoded

    @property
    def result(self) -> GenerationResult | None:
        return self._result

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def is_generating(self) -> bool:
        return self._state is LifecycleState.GENERATING

    def snapshot(self) -> LifecycleSnapshot:
        """Return an immutable view of the current state."""
        return LifecycleSnapshot(
            state=self._state,
            preview_url=self._encoded.data_url if self._encoded else None,
            mime_type=self._encoded.mime_type if self._encoded else None,
            filename=self._image.filename if self._image else None,
            result=self._result,
            error=self._error,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener for state changes.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                logger.warning(f"Lifecycle listener {listener!r} failed: {e}")

    def _clear_image(self) -> None:
        self._image = None
        self._encoded = None

    async def upload(
        self,
        file: BinaryIO,
        mime_type: str | None = None,
        filename: str | None = None,
    ) -> LifecycleSnapshot:
        """
        Load a new image, replacing any previous one.

        An upload while a generation is in flight supersedes that attempt.

        Raises:
            EncodingError: If the image cannot be read; the lifecycle is idle afterwards
        """
        # The previous image is dropped before reading so generate() is
        # rejected while the new file is still pending.
        self._attempt += 1
        self._clear_image()
        self._result = None
        self._error = None
        self._state = LifecycleState.IDLE

        try:
            image, encoded = await encode_file(file, mime_type, filename)
        except EncodingError as e:
            logger.warning(f"Image upload rejected: {e}")
            self._clear_image()
            self._state = LifecycleState.IDLE
            self._error = e.message
            self._notify()
            raise

        self._attempt += 1
        self._image = image
        self._encoded = encoded
        self._result = None
        self._error = None
        self._state = LifecycleState.IMAGE_READY
        self._notify()
        return self.snapshot()

    async def generate(self) -> GenerationResult | None:
        """
        Generate a prompt for the loaded image.

        Returns:
            The committed result, or None if a generation was already in
            flight or the response arrived after a reset/new upload

        Raises:
            ValidationError: If no image has been uploaded
        """
        if self._state is LifecycleState.GENERATING:
            logger.info("Generation already in progress, ignoring request")
            return None

        if self._encoded is None:
            self._error = NO_IMAGE_MESSAGE
            self._notify()
            raise ValidationError(NO_IMAGE_MESSAGE)

        self._attempt += 1
        attempt = self._attempt
        encoded = self._encoded
        self._state = LifecycleState.GENERATING
        self._result = None
        self._error = None
        self._notify()

        logger.info(f"Generating prompt (attempt {attempt}, {encoded.mime_type})")
        try:
            outcome = await self._call_service(encoded)
        except asyncio.CancelledError:
            if attempt == self._attempt and self._state is LifecycleState.GENERATING:
                logger.info(f"Generation attempt {attempt} cancelled")
                self._state = LifecycleState.IMAGE_READY
                self._notify()
            raise

        if attempt != self._attempt or self._state is not LifecycleState.GENERATING:
            logger.info(f"Discarding stale response for attempt {attempt}")
            return None

        self._result = outcome
        if isinstance(outcome, GenerationSuccess):
            self._state = LifecycleState.SUCCESS
            logger.info(f"Prompt generated ({len(outcome.prompt_text)} chars)")
        else:
            self._state = LifecycleState.FAILED
            self._error = outcome.message
        self._notify()
        return outcome

    async def _call_service(self, encoded: EncodedImage) -> GenerationResult:
        try:
            text = await self._generator.describe(encoded, self._instruction)
        except ServiceError as e:
            logger.error(f"Prompt generation failed: {e}")
            return GenerationFailure(e.message)
        except Exception as e:
            logger.error(f"Prompt generation failed: {e}")
            return GenerationFailure(f"{SERVICE_ERROR_PREFIX}{e}")

        if not text or not text.strip():
            logger.error("Prompt generation returned an empty response")
            return GenerationFailure(EMPTY_RESPONSE_MESSAGE)
        return GenerationSuccess(text.strip())

    def reset(self) -> LifecycleSnapshot:
        """Return to idle, dropping the image, result and error."""
        self._attempt += 1
        self._clear_image()
        self._result = None
        self._error = None
        self._state = LifecycleState.IDLE
        self._notify()
        return self.snapshot()
