"""Generation form controller.

The controller owns the transient form fields (prompt, image count, aspect
ratio) and the current :data:`~imagestudio.ui.models.UIState`. It is the only
place the state changes:

    Idle / Error / Populated  --submit-->  Loading  --done-->  Populated | Error
    Loading  --cancelled-->  Idle

Blank prompts and missing credentials are rejected before the state ever
enters Loading, so the client is never invoked for them. A submit while a
request is already in flight is ignored.
"""

import asyncio
import logging
from pathlib import Path

from imagestudio.core.assets import ImageAsset
from imagestudio.core.config import StudioConfig
from imagestudio.core.errors import (
    ConfigurationError,
    EmptyResponseError,
    ImageGenerationError,
)
from imagestudio.core.image_client import ImageClient

from .downloads import download_filename, save_asset_for_download
from .models import (
    DEFAULT_ASPECT_RATIO,
    DEFAULT_IMAGE_COUNT,
    UNKNOWN_ERROR_MESSAGE,
    Error,
    GenerationRequest,
    Idle,
    Loading,
    Populated,
    UIState,
)
from .validation import (
    ValidationError,
    build_generation_request,
    clamp_image_count,
)

logger = logging.getLogger(__name__)


class GenerationController:
    """Form state and submission logic for one UI session.

    Args:
        config: Configuration carrying the credentials
        client: Image client to use. When omitted, one is created from
            ``config`` on the first submission that passes validation.

    Attributes
    ----------
    prompt : str
        Current prompt text, as typed
    count : int
        Number of images to request, always in [1, 4]
    aspect_ratio : str
        Selected aspect ratio key
    state : UIState
        Current view state
    last_request : GenerationRequest | None
        Request that produced the current Populated state
    last_error : Exception | None
        Exception behind the current Error state
    downloads_dir : Path
        Where exported assets are written
    """

    def __init__(self, config: StudioConfig, client: ImageClient | None = None):
        self.config = config
        self.client = client
        self.prompt = ""
        self.count = DEFAULT_IMAGE_COUNT
        self.aspect_ratio = DEFAULT_ASPECT_RATIO
        self.state: UIState = Idle()
        self.last_request: GenerationRequest | None = None
        self.last_error: Exception | None = None
        self.downloads_dir: Path = config.downloads_dir

    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, Loading)

    def set_prompt(self, prompt: str | None) -> str:
        self.prompt = prompt or ""
        return self.prompt

    def set_count(self, value) -> int:
        """Store the count, clamped into [1, 4]."""
        self.count = clamp_image_count(value)
        return self.count

    def set_aspect_ratio(self, aspect_ratio: str) -> str:
        """Store the aspect ratio. Unsupported values are rejected on submit."""
        self.aspect_ratio = aspect_ratio
        return self.aspect_ratio

    def _fail(self, error: Exception) -> UIState:
        self.last_error = error
        self.state = Error(str(error) or UNKNOWN_ERROR_MESSAGE)
        return self.state

    def begin_submit(self) -> GenerationRequest | None:
        """Validate the form and enter Loading.

        Returns:
            The validated request, or None when the submission was rejected
            (blank prompt, unsupported aspect ratio, missing credentials, or a
            request already in flight). Rejections other than the in-flight
            case leave the state as Error.
        """
        if self.is_loading:
            logger.warning("Generation already in progress, ignoring submit")
            return None

        try:
            request = build_generation_request(self.prompt, self.count, self.aspect_ratio)
        except ValidationError as e:
            logger.warning(f"Validation error: {e}")
            self._fail(e)
            return None

        if not self.config.has_credentials():
            logger.warning("Submit rejected: API key is not configured")
            self._fail(ConfigurationError())
            return None

        self.last_request = None
        self.last_error = None
        self.state = Loading()
        return request

    async def complete_submit(self, request: GenerationRequest) -> UIState:
        """Run the request started by :meth:`begin_submit`.

        Args:
            request: Request returned by begin_submit

        Returns:
            Populated on success, Error otherwise
        """
        if self.client is None:
            self.client = ImageClient(self.config)

        try:
            assets = await self.client.generate(
                request.prompt, request.count, request.aspect_ratio
            )
        except asyncio.CancelledError:
            self.cancel_submit()
            raise
        except ImageGenerationError as e:
            logger.warning(f"Image generation failed: {e}")
            return self._fail(e)
        except Exception as e:
            logger.error(f"Unexpected error generating images: {e}", exc_info=True)
            return self._fail(e)

        if not assets:
            return self._fail(EmptyResponseError())

        self.last_request = request
        self.state = Populated(tuple(assets))
        logger.info(f"Generation complete: {len(assets)} image(s)")
        return self.state

    def cancel_submit(self) -> UIState:
        """Return to Idle if a request was abandoned while Loading."""
        if self.is_loading:
            logger.warning("Generation cancelled")
            self.state = Idle()
        return self.state

    async def submit(self) -> UIState:
        """Validate the form and run one generation request.

        Returns:
            The resulting state (also stored on ``self.state``)
        """
        request = self.begin_submit()
        if request is None:
            return self.state
        return await self.complete_submit(request)

    def get_asset(self, index: int) -> ImageAsset:
        """Return a generated asset by position.

        Raises:
            ValidationError: If there are no results or the index is out of range
        """
        if not isinstance(self.state, Populated):
            raise ValidationError("No generated images to download")
        if index < 0 or index >= len(self.state.assets):
            raise ValidationError(f"No image at position {index + 1}")
        return self.state.assets[index]

    def download_filename(self, asset: ImageAsset) -> str:
        """Filename for downloading an asset of the current result."""
        prompt = self.last_request.prompt if self.last_request else self.prompt
        return download_filename(prompt, asset)

    def export_asset(self, index: int, directory: Path | None = None) -> Path:
        """Write one generated asset to the downloads directory.

        Args:
            index: Zero-based asset position
            directory: Target directory (default: ``self.downloads_dir``)

        Returns:
            Path of the written file
        """
        asset = self.get_asset(index)
        prompt = self.last_request.prompt if self.last_request else self.prompt
        return save_asset_for_download(asset, prompt, directory or self.downloads_dir)
