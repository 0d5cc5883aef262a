"""Core functionality for image generation.

This module provides the core components for Image Studio:

- **StudioConfig**: Configuration management using Pydantic Settings
- **config**: Global configuration instance (loads from environment variables)
- **ImageClient**: Sends text-to-image requests to the Imagen API
- **ImageAsset**: Self-contained data-URL image produced from a response item
- **Error taxonomy**: ConfigurationError, AuthError, RateLimitError,
  UpstreamError, EmptyResponseError

Architecture Overview
---------------------
1. **Configuration Layer** (config.py):
   - Environment-based configuration using Pydantic Settings
   - All settings prefixed with IMAGESTUDIO_ in .env files
   - Holds the API key passed explicitly into the client

2. **Client Layer** (image_client.py, assets.py):
   - One ``generate_images`` call per request through google-genai
   - Response items mapped into ImageAsset instances

3. **Errors** (errors.py):
   - User-facing exception classes and the upstream error classifier

Usage Example
-------------
    from imagestudio.core import ImageClient, config

    client = ImageClient(config)
    assets = await client.generate("a lighthouse at dawn", count=1, aspect_ratio="1:1")
"""

from imagestudio.core.assets import ImageAsset, extension_for_mime
from imagestudio.core.config import StudioConfig, config
from imagestudio.core.errors import (
    AuthError,
    ConfigurationError,
    EmptyResponseError,
    ImageGenerationError,
    RateLimitError,
    UpstreamError,
    classify_api_error,
)
from imagestudio.core.image_client import ImageClient

__all__ = [
    "AuthError",
    "ConfigurationError",
    "EmptyResponseError",
    "ImageAsset",
    "ImageClient",
    "ImageGenerationError",
    "RateLimitError",
    "StudioConfig",
    "UpstreamError",
    "classify_api_error",
    "config",
    "extension_for_mime",
]
