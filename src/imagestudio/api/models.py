"""Pydantic request and response models for the Image Studio API.

These models define the JSON schema for every API endpoint.  FastAPI uses
them for automatic request validation, serialisation, and OpenAPI
documentation generation.

Models
------
GenerateRequest
    Payload for ``POST /api/generate``.
GeneratedImage
    One image in a generation response.
GenerateResponse
    Response body for ``POST /api/generate``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from imagestudio.ui.models import DEFAULT_ASPECT_RATIO, DEFAULT_IMAGE_COUNT
from imagestudio.ui.validation import clamp_image_count


class GenerateRequest(BaseModel):
    """Request body for the ``POST /api/generate`` endpoint.

    Attributes:
        prompt: Text description of the image.  Blank prompts are rejected
            with 422 by the route, not by schema validation, so the message
            matches the UI.
        count: Number of images (1–4).  Out-of-range or non-numeric values
            are clamped rather than rejected, like the UI number input.
        aspect_ratio: One of ``"1:1"``, ``"9:16"``, ``"16:9"``.
    """

    prompt: str = Field(
        default="",
        description="Text prompt describing the image to generate.",
    )
    count: int = Field(
        default=DEFAULT_IMAGE_COUNT,
        description="Number of images to generate (clamped to 1–4).",
    )
    aspect_ratio: str = Field(
        default=DEFAULT_ASPECT_RATIO,
        description="Aspect ratio: '1:1', '9:16' or '16:9'.",
    )

    @field_validator("count", mode="before")
    @classmethod
    def _clamp_count(cls, value):
        return clamp_image_count(value)


class GeneratedImage(BaseModel):
    """One generated image.

    Attributes:
        index: Zero-based position in the result.
        data_url: ``data:<mime>;base64,...`` payload.
        mime_type: Image encoding.
        aspect_ratio: Aspect ratio the image was requested with.
        filename: Suggested download filename derived from the prompt.
    """

    index: int
    data_url: str
    mime_type: str
    aspect_ratio: str
    filename: str


class GenerateResponse(BaseModel):
    """Response body for ``POST /api/generate``.

    Attributes:
        success: Always ``True`` (failures are reported as HTTP errors).
        prompt: The trimmed prompt that was sent.
        count: The clamped count that was requested.
        aspect_ratio: The requested aspect ratio.
        images: Generated images in API response order.
    """

    success: bool = True
    prompt: str
    count: int
    aspect_ratio: str
    images: list[GeneratedImage]
