"""Configuration management for Image Studio.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the IMAGESTUDIO_
prefix, allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (IMAGESTUDIO_* prefix)
2. .env file in the project root
3. Default values defined in StudioConfig

The API key is the one exception to the prefix rule: it is also accepted as
``GEMINI_API_KEY`` or plain ``API_KEY`` so that an existing Google AI Studio
setup works unchanged.

Example .env file:
    IMAGESTUDIO_API_KEY=your-google-ai-studio-key
    IMAGESTUDIO_MODEL_ID=imagen-3.0-generate-002
    IMAGESTUDIO_OUTPUT_MIME_TYPE=image/jpeg
    IMAGESTUDIO_DOWNLOADS_DIR=downloads

Credentials
-----------
The config object *is* the credentials holder. It is built once at process
start and passed explicitly into :class:`~imagestudio.core.image_client.ImageClient`.
A missing key is not a startup failure: the UI still launches, and every
generation attempt reports a configuration error until the key is set and
the application restarted.

Usage Example
-------------
    from imagestudio.core.config import config

    if config.has_credentials():
        print(f"Using {config.model_id}")
"""

import logging
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class StudioConfig(BaseSettings):
    """Main configuration for Image Studio.

    Attributes
    ----------
    Credentials:
        api_key : str | None
            Google AI Studio API key. ``None`` or blank means unconfigured.

    Generation Settings:
        model_id : str
            Imagen model used for text-to-image requests
        output_mime_type : Literal["image/jpeg", "image/png"]
            Encoding requested from the API; also the fallback MIME label for
            images returned without one

    Paths:
        downloads_dir : Path
            Directory where images are written before being offered for download

    Server Settings:
        server_name : str
            Server bind address (0.0.0.0 for local network)
        server_port : int
            Server port (1024-65535)
        share : bool
            Create public gradio.live link (keep False for local-only)
        log_level : str
            Root logging level for the entry points

    Examples
    --------
        >>> custom_config = StudioConfig(api_key="test-key", output_mime_type="image/png")
        >>> custom_config.has_credentials()
        True
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="IMAGESTUDIO_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Credentials
    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("api_key", "IMAGESTUDIO_API_KEY", "GEMINI_API_KEY", "API_KEY"),
        description="Google AI Studio API key",
    )

    # Generation settings
    model_id: str = Field(
        default="imagen-3.0-generate-002",
        description="Imagen model identifier",
    )
    output_mime_type: Literal["image/jpeg", "image/png"] = Field(
        default="image/jpeg",
        description="Requested output encoding (also the fallback MIME label)",
    )

    # Paths
    downloads_dir: Path = Field(
        default=Path("downloads"),
        description="Directory for images offered as downloads",
    )

    # Server settings
    server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root logging level",
    )

    def __init__(self, **kwargs):
        """Initialize configuration and create the downloads directory.

        Args:
            **kwargs: Configuration overrides (typically from environment variables)
        """
        super().__init__(**kwargs)

        self.downloads_dir.mkdir(parents=True, exist_ok=True)

        if not self.has_credentials():
            logger.warning(
                "API key is not available. Image generation will not work. "
                "Set IMAGESTUDIO_API_KEY (or GEMINI_API_KEY) in your environment."
            )

    def has_credentials(self) -> bool:
        """Return True when a non-blank API key is configured."""
        return bool(self.api_key and self.api_key.strip())


# Global configuration instance
# Loaded once at import time from IMAGESTUDIO_* variables and .env. Only the
# entry points read it; library code receives a StudioConfig explicitly.
config = StudioConfig()
