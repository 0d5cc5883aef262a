"""Validation utilities for Image Studio UI inputs."""

import logging
import math

from .models import (
    ASPECT_RATIOS,
    MAX_IMAGES,
    MIN_IMAGES,
    PROMPT_REQUIRED_MESSAGE,
    GenerationRequest,
)

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """User-friendly validation error.

    This exception is raised when user input fails validation.
    The message is intended to be displayed directly to the user.
    """

    pass


def clamp_image_count(value) -> int:
    """Coerce a raw count input into the supported range.

    Non-numeric input (including None, empty strings and NaN) becomes 1
    before clamping. Fractional values are truncated. Integers are clamped
    directly so arbitrarily large ones still map to the upper bound, and
    infinities clamp by sign.

    Args:
        value: Raw value from the number input

    Returns:
        Integer in [MIN_IMAGES, MAX_IMAGES]
    """
    if isinstance(value, int):
        return max(MIN_IMAGES, min(MAX_IMAGES, value))

    try:
        number = float(value)
    except OverflowError:
        # Numeric types too large for a float, e.g. Fraction(10**400)
        return MIN_IMAGES if str(value).lstrip().startswith("-") else MAX_IMAGES
    except (TypeError, ValueError):
        return MIN_IMAGES

    if math.isnan(number):
        return MIN_IMAGES
    if math.isinf(number):
        return MAX_IMAGES if number > 0 else MIN_IMAGES
    count = int(number)
    return max(MIN_IMAGES, min(MAX_IMAGES, count))


def validate_prompt(prompt: str | None) -> str:
    """Return the trimmed prompt.

    Raises:
        ValidationError: If the prompt is blank
    """
    trimmed = (prompt or "").strip()
    if not trimmed:
        raise ValidationError(PROMPT_REQUIRED_MESSAGE)
    return trimmed


def validate_aspect_ratio(aspect_ratio: str) -> str:
    """Check that the aspect ratio is one of the supported options.

    Raises:
        ValidationError: If the aspect ratio is unknown
    """
    if aspect_ratio not in ASPECT_RATIOS:
        supported = ", ".join(ASPECT_RATIOS)
        raise ValidationError(f"Unsupported aspect ratio '{aspect_ratio}'. Choose one of: {supported}")
    return aspect_ratio


def build_generation_request(prompt: str | None, count, aspect_ratio: str) -> GenerationRequest:
    """Validate raw form values and build a GenerationRequest.

    Args:
        prompt: Raw prompt text
        count: Raw count value (clamped, never rejected)
        aspect_ratio: Aspect ratio key

    Returns:
        Validated GenerationRequest

    Raises:
        ValidationError: If the prompt is blank or the aspect ratio unknown
    """
    return GenerationRequest(
        prompt=validate_prompt(prompt),
        count=clamp_image_count(count),
        aspect_ratio=validate_aspect_ratio(aspect_ratio),
    )
