import asyncio
import io
import time

import pytest

from image_prompt_service.api.dependencies import reset_dependencies
from image_prompt_service.domain.entities.image import EncodedImage
from image_prompt_service.domain.interfaces.prompt_generator import PromptGenerator

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class FakePromptGenerator(PromptGenerator):
    """Prompt generator returning a canned response or raising a canned error."""

    def __init__(self, response: str | None = "A moody cyberpunk alley", error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[tuple[EncodedImage, str]] = []
        self.healthy = True

    async def describe(self, image: EncodedImage, instruction: str) -> str | None:
        self.calls.append((image, instruction))
        if self.error is not None:
            raise self.error
        return self.response

    async def health_check(self) -> bool:
        return self.healthy


class BlockingPromptGenerator(FakePromptGenerator):
    """Prompt generator that holds every call until release() is called."""

    def __init__(self, response: str | None = "A moody cyberpunk alley", error: Exception | None = None):
        super().__init__(response, error)
        self.started = asyncio.Event()
        self._release = asyncio.Event()

    def release(self) -> None:
        self._release.set()

    async def describe(self, image: EncodedImage, instruction: str) -> str | None:
        self.calls.append((image, instruction))
        self.started.set()
        await self._release.wait()
        if self.error is not None:
            raise self.error
        return self.response


class BrokenFile:
    """File-like object whose read always fails."""

    def read(self, *args):
        raise OSError("disk error")


@pytest.fixture(autouse=True)
def clean_dependencies():
    """Reset dependency singletons before and after each test."""
    reset_dependencies()
    yield
    reset_dependencies()


@pytest.fixture
def png_bytes() -> bytes:
    """Roughly 10KB of PNG-looking data."""
    return PNG_SIGNATURE + bytes(range(256)) * 40


@pytest.fixture
def png_file(png_bytes):
    return io.BytesIO(png_bytes)


class SlowFile(io.BytesIO):
    """BytesIO whose read takes a while, leaving an upload pending."""

    def __init__(self, data: bytes, delay: float = 0.3):
        super().__init__(data)
        self.delay = delay

    def read(self, *args):
        time.sleep(self.delay)
        return super().read(*args)
