"""Image encoder - turns an uploaded file into a base64 payload plus MIME type."""

import asyncio
import base64
import logging
import mimetypes
from typing import BinaryIO

from ..entities.image import EncodedImage, UploadedImage
from ..errors import EncodingError

logger = logging.getLogger(__name__)

READ_FAILED_MESSAGE = "Failed to read image file."


def resolve_mime_type(mime_type: str | None, filename: str | None = None) -> str:
    """
    Resolve the MIME type of an upload.

    Falls back to guessing from the file name when no type was declared.
    Only image/* types are accepted.

    Raises:
        EncodingError: If the type is unknown or not an image
    """
    if not mime_type and filename:
        mime_type, _ = mimetypes.guess_type(filename)
    if not mime_type or not mime_type.startswith("image/"):
        raise EncodingError(f"Unsupported file type: {mime_type or 'unknown'}. Please upload an image.")
    return mime_type


def encode_image(image: UploadedImage) -> EncodedImage:
    """Encode raw image bytes as standard base64 text, keeping the MIME type."""
    payload = base64.b64encode(image.raw_bytes).decode("ascii")
    return EncodedImage(base64_payload=payload, mime_type=image.mime_type)


def _read_all(file: BinaryIO) -> bytes:
    data = file.read()
    if isinstance(data, bytearray):
        data = bytes(data)
    if not isinstance(data, bytes):
        raise ValueError(f"expected binary content, got {type(data).__name__}")
    return data


async def read_image(
    file: BinaryIO,
    mime_type: str | None,
    filename: str | None = None,
) -> UploadedImage:
    """
    Read a binary file-like object into an UploadedImage.

    The blocking read runs in a worker thread so the event loop is not held up.

    Raises:
        EncodingError: If the type is unsupported or the file cannot be read
    """
    resolved = resolve_mime_type(mime_type, filename)
    try:
        raw_bytes = await asyncio.to_thread(_read_all, file)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to read image {filename or '<stream>'}: {e}")
        raise EncodingError(READ_FAILED_MESSAGE, e)
    return UploadedImage(raw_bytes=raw_bytes, mime_type=resolved, filename=filename)


async def encode_file(
    file: BinaryIO,
    mime_type: str | None,
    filename: str | None = None,
) -> tuple[UploadedImage, EncodedImage]:
    """
    Read and encode an image file.

    Returns:
        The uploaded image and its encoding

    Raises:
        EncodingError: If the file cannot be read or is not an image
    """
    image = await read_image(file, mime_type, filename)
    encoded = encode_image(image)
    logger.info(f"Encoded image {filename or '<stream>'} ({image.size} bytes, {image.mime_type})")
    return image, encoded
