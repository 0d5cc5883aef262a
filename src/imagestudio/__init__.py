"""Image Studio - Text-to-image generation with the Imagen API."""

__version__ = "0.1.0"

from imagestudio.core.config import StudioConfig, config
from imagestudio.core.image_client import ImageClient

__all__ = [
    "ImageClient",
    "StudioConfig",
    "config",
]
