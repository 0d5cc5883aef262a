"""Client for the Imagen text-to-image API.

The :class:`ImageClient` sends exactly one ``generate_images`` request per
call through the ``google-genai`` SDK and normalizes the response into an
ordered list of :class:`~imagestudio.core.assets.ImageAsset`.

Response Mapping
----------------
Each returned item is mapped independently:

- Items carrying image bytes become a data-URL asset, labelled with the MIME
  type the API reported, or with the requested ``output_mime_type`` when the
  API reported none.
- Items without bytes are skipped with a warning. One malformed item never
  fails the whole request.

If nothing usable remains the call fails with
:class:`~imagestudio.core.errors.EmptyResponseError`.

Error Handling
--------------
Credentials are checked before the SDK client is created, so a missing key
never results in a network call. Everything the SDK or transport raises is
passed through :func:`~imagestudio.core.errors.classify_api_error`.

There are no retries, no timeout beyond the transport default and no
streaming.

Usage Example
-------------
    from imagestudio.core.config import config
    from imagestudio.core.image_client import ImageClient

    client = ImageClient(config)
    assets = await client.generate("a red fox in snow", count=2, aspect_ratio="16:9")
"""

import logging
from typing import Any

from google import genai
from google.genai import types

from .assets import ImageAsset
from .config import StudioConfig
from .errors import ConfigurationError, EmptyResponseError, classify_api_error

logger = logging.getLogger(__name__)


class ImageClient:
    """Sends generation requests and maps responses into image assets.

    Args:
        config: Configuration carrying the API key and request defaults
        sdk_client: Pre-built ``genai.Client`` (tests inject a mock here).
            When omitted, one is created on the first request.
    """

    def __init__(self, config: StudioConfig, sdk_client: Any | None = None):
        self.config = config
        self._sdk_client = sdk_client

    def _get_sdk_client(self) -> Any:
        """Return the SDK client, creating it on first use.

        Raises:
            ConfigurationError: If no API key is configured
        """
        if not self.config.has_credentials():
            raise ConfigurationError()
        if self._sdk_client is not None:
            return self._sdk_client
        logger.info("Creating Gemini API client")
        self._sdk_client = genai.Client(api_key=self.config.api_key)
        return self._sdk_client

    def build_request_config(self, count: int, aspect_ratio: str) -> types.GenerateImagesConfig:
        """Build the per-request generation settings."""
        return types.GenerateImagesConfig(
            number_of_images=count,
            aspect_ratio=aspect_ratio,
            output_mime_type=self.config.output_mime_type,
        )

    async def generate(self, prompt: str, count: int, aspect_ratio: str) -> list[ImageAsset]:
        """Generate images for a prompt.

        Args:
            prompt: Text description, already trimmed and non-empty
            count: Number of images requested (1-4)
            aspect_ratio: One of "1:1", "9:16", "16:9"

        Returns:
            Assets in API response order, malformed items removed

        Raises:
            ConfigurationError: No API key is configured
            AuthError: The API rejected the credentials
            RateLimitError: Quota or rate limit reached
            EmptyResponseError: No usable images in the response
            UpstreamError: Any other API or transport failure
        """
        client = self._get_sdk_client()
        logger.info(
            f"Requesting {count} image(s) from {self.config.model_id} "
            f"(aspect ratio {aspect_ratio})"
        )

        try:
            response = await client.aio.models.generate_images(
                model=self.config.model_id,
                prompt=prompt,
                config=self.build_request_config(count, aspect_ratio),
            )
        except Exception as e:
            logger.error(f"Error generating image via Gemini API: {e}", exc_info=True)
            raise classify_api_error(e) from e

        assets = self.map_response(response, aspect_ratio)
        if not assets:
            raise EmptyResponseError()

        logger.info(f"Received {len(assets)} image(s)")
        return assets

    def map_response(self, response: Any, aspect_ratio: str) -> list[ImageAsset]:
        """Convert a ``GenerateImagesResponse`` into assets.

        Args:
            response: SDK response (or any object with ``generated_images``)
            aspect_ratio: Aspect ratio to tag each asset with

        Returns:
            List of assets; items without image bytes are dropped
        """
        generated = getattr(response, "generated_images", None) or []
        assets: list[ImageAsset] = []

        for position, item in enumerate(generated):
            image = getattr(item, "image", None)
            payload = getattr(image, "image_bytes", None) if image is not None else None
            if not payload:
                logger.warning(f"Image entry {position} was returned without image bytes, skipping")
                continue

            mime_type = getattr(image, "mime_type", None) or self.config.output_mime_type
            assets.append(
                ImageAsset.from_bytes(payload, mime_type, aspect_ratio, index=len(assets))
            )

        return assets
