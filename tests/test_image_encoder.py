import base64
import io

import pytest

from image_prompt_service.domain.entities.image import UploadedImage
from image_prompt_service.domain.errors import EncodingError
from image_prompt_service.domain.services.image_encoder import (
    READ_FAILED_MESSAGE,
    encode_file,
    encode_image,
    read_image,
    resolve_mime_type,
)

from .conftest import BrokenFile


def test_encode_is_deterministic(png_bytes):
    image = UploadedImage(raw_bytes=png_bytes, mime_type="image/png")

    first = encode_image(image)
    second = encode_image(image)

    assert first == second
    assert first.mime_type == "image/png"


def test_encode_is_lossless(png_bytes):
    encoded = encode_image(UploadedImage(raw_bytes=png_bytes, mime_type="image/png"))

    assert base64.b64decode(encoded.base64_payload) == png_bytes
    assert encoded.decode() == png_bytes


def test_encode_uses_standard_base64():
    encoded = encode_image(UploadedImage(raw_bytes=b"\xfb\xff\xfe", mime_type="image/gif"))

    assert encoded.base64_payload == "+//+"
    assert encoded.data_url == "data:image/gif;base64,+//+"


def test_encode_empty_image():
    encoded = encode_image(UploadedImage(raw_bytes=b"", mime_type="image/webp"))

    assert encoded.base64_payload == ""
    assert encoded.decode() == b""


@pytest.mark.asyncio
async def test_encode_file(png_file, png_bytes):
    image, encoded = await encode_file(png_file, "image/png", "cat.png")

    assert image.raw_bytes == png_bytes
    assert image.filename == "cat.png"
    assert encoded.mime_type == "image/png"
    assert encoded.decode() == png_bytes


@pytest.mark.asyncio
async def test_read_failure_raises_encoding_error():
    with pytest.raises(EncodingError) as exc_info:
        await read_image(BrokenFile(), "image/png", "broken.png")

    assert exc_info.value.message == READ_FAILED_MESSAGE
    assert isinstance(exc_info.value.original_error, OSError)


@pytest.mark.asyncio
async def test_text_stream_is_rejected():
    with pytest.raises(EncodingError):
        await read_image(io.StringIO("not bytes"), "image/png")


def test_mime_type_guessed_from_filename():
    assert resolve_mime_type(None, "photo.jpg") == "image/jpeg"
    assert resolve_mime_type("", "drawing.png") == "image/png"


@pytest.mark.parametrize("mime_type,filename", [
    ("text/plain", "notes.txt"),
    ("application/pdf", None),
    (None, None),
    (None, "archive.zip"),
])
def test_non_image_types_are_rejected(mime_type, filename):
    with pytest.raises(EncodingError) as exc_info:
        resolve_mime_type(mime_type, filename)

    assert "Unsupported file type" in exc_info.value.message
