"""Self-contained image assets built from API response items."""

import base64
import binascii
import io
import logging
from dataclasses import dataclass

from PIL import Image

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = "jpeg"

MIME_EXTENSIONS = {
    "image/jpeg": "jpeg",
    "image/jpg": "jpeg",
    "image/png": "png",
    "image/webp": "webp",
    "image/gif": "gif",
}


def extension_for_mime(mime_type: str | None) -> str:
    """Map a MIME type to a file extension, defaulting to jpeg."""
    if not mime_type:
        return DEFAULT_EXTENSION
    mime_type = mime_type.split(";", 1)[0].strip().lower()
    if mime_type in MIME_EXTENSIONS:
        return MIME_EXTENSIONS[mime_type]
    if mime_type.startswith("image/") and mime_type[6:].isalnum():
        return mime_type[6:]
    return DEFAULT_EXTENSION


@dataclass(frozen=True)
class ImageAsset:
    """A displayable, downloadable image produced by one API response item.

    The payload is held as a ``data:`` URL so the asset is addressable without
    touching disk.

    Attributes
    ----------
    data_url : str
        ``data:<mime>;base64,<payload>``
    mime_type : str
        Encoding reported by the API (or the requested fallback)
    aspect_ratio : str
        Aspect ratio the image was requested with, for rendering
    index : int
        Zero-based position in the generation result
    """

    data_url: str
    mime_type: str
    aspect_ratio: str
    index: int = 0

    @classmethod
    def from_bytes(
        cls, payload: bytes, mime_type: str, aspect_ratio: str, index: int = 0
    ) -> "ImageAsset":
        """Wrap raw image bytes into a data-URL asset."""
        encoded = base64.b64encode(payload).decode("ascii")
        return cls(
            data_url=f"data:{mime_type};base64,{encoded}",
            mime_type=mime_type,
            aspect_ratio=aspect_ratio,
            index=index,
        )

    @property
    def extension(self) -> str:
        return extension_for_mime(self.mime_type)

    def to_bytes(self) -> bytes:
        """Decode the embedded payload.

        Raises:
            ValueError: If the data URL is not base64-encoded
        """
        header, _, payload = self.data_url.partition(",")
        if not header.endswith(";base64"):
            raise ValueError("Asset data URL is not base64-encoded")
        try:
            return base64.b64decode(payload, validate=True)
        except binascii.Error as e:
            raise ValueError(f"Asset payload is not valid base64: {e}") from e

    def to_pil(self) -> Image.Image:
        """Decode the payload into a PIL image for display."""
        image = Image.open(io.BytesIO(self.to_bytes()))
        image.load()
        return image
