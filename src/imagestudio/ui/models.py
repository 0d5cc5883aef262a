"""Data models for Image Studio UI state and parameters."""

import logging
from dataclasses import dataclass

from imagestudio.core.assets import ImageAsset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationRequest:
    """Validated parameters for one generation request.

    Instances are only built by the controller after validation, so the
    prompt is trimmed and non-empty, the count is already clamped, and the
    aspect ratio is one of ASPECT_RATIOS.
    """

    prompt: str
    count: int
    aspect_ratio: str


@dataclass(frozen=True)
class Idle:
    """Nothing requested yet."""

    kind = "idle"


@dataclass(frozen=True)
class Loading:
    """A request is in flight."""

    kind = "loading"


@dataclass(frozen=True)
class Error:
    """The last submission failed.

    Attributes
    ----------
    message : str
        User-facing failure description
    """

    message: str
    kind = "error"


@dataclass(frozen=True)
class Populated:
    """The last submission produced images.

    Attributes
    ----------
    assets : tuple[ImageAsset, ...]
        Generated images in API response order (never empty)
    """

    assets: tuple[ImageAsset, ...]
    kind = "populated"


UIState = Idle | Loading | Error | Populated


# Constants for UI
ASPECT_RATIOS = {
    "1:1": "Square (1:1)",
    "9:16": "Portrait (9:16)",
    "16:9": "Landscape (16:9)",
}
DEFAULT_ASPECT_RATIO = "1:1"

MIN_IMAGES = 1
MAX_IMAGES = 4
DEFAULT_IMAGE_COUNT = 1

PROMPT_REQUIRED_MESSAGE = "Please enter a prompt to generate image(s)."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred during image generation."
