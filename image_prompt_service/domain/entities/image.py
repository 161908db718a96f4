"""Image entities - raw uploaded image and its transport-safe encoding."""

import base64
from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedImage:
    """
    Image as selected by the user.

    Attributes:
        raw_bytes: Binary content of the file
        mime_type: Declared content type (e.g. "image/png")
        filename: Original file name, if known
    """

    raw_bytes: bytes
    mime_type: str
    filename: str | None = None

    @property
    def size(self) -> int:
        """Size of the image in bytes."""
        return len(self.raw_bytes)


@dataclass(frozen=True)
class EncodedImage:
    """Base64 text payload of an image plus its MIME type."""

    base64_payload: str
    mime_type: str

    @property
    def data_url(self) -> str:
        """Data URL suitable for an inline preview."""
        return f"data:{self.mime_type};base64,{self.base64_payload}"

    def decode(self) -> bytes:
        """Decode the payload back to the original bytes."""
        return base64.b64decode(self.base64_payload, validate=True)
