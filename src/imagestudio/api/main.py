"""Image Studio — FastAPI Application.

This module is the main entry point for the web application.  It defines
the FastAPI ``app`` instance, the JSON API routes, mounts the Gradio UI at
``/``, and provides the ``main()`` CLI function that launches the uvicorn
server.

Endpoints
---------
========  ====================  ==========================================
Method    Path                  Purpose
========  ====================  ==========================================
GET       ``/``                 Gradio UI
GET       ``/api/health``       Liveness and credentials status
GET       ``/api/config``       Model, aspect ratios and count limits
POST      ``/api/generate``     Generate 1–4 images for a prompt
========  ====================  ==========================================

Error Mapping
-------------
``POST /api/generate`` runs the same :class:`GenerationController` as the UI
and maps the failure behind its Error state to an HTTP status:

=======================  ======
Failure                  Status
=======================  ======
ValidationError          422
ConfigurationError       503
RateLimitError           429
AuthError                502
EmptyResponseError       502
UpstreamError / other    502
=======================  ======

Usage
-----
CLI (installed entry point)::

    imagestudio

Direct invocation::

    python -m imagestudio.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import gradio as gr
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from imagestudio import __version__
from imagestudio.api.models import GeneratedImage, GenerateRequest, GenerateResponse
from imagestudio.core.config import config
from imagestudio.core.errors import ConfigurationError, RateLimitError
from imagestudio.core.image_client import ImageClient
from imagestudio.ui.app import create_ui
from imagestudio.ui.controller import GenerationController
from imagestudio.ui.models import ASPECT_RATIOS, MAX_IMAGES, MIN_IMAGES, Error, Populated
from imagestudio.ui.validation import ValidationError

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: dict[type[Exception], int] = {
    ValidationError: 422,
    ConfigurationError: 503,
    RateLimitError: 429,
}
DEFAULT_ERROR_STATUS = 502


# ---------------------------------------------------------------------------
# Application lifecycle.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application startup and shutdown lifecycle.

    On startup:
        Stores the configuration and a shared :class:`ImageClient` on
        ``app.state``.  The SDK client inside it is created lazily on the
        first request, so a missing API key does not prevent startup.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    app.state.config = config
    app.state.image_client = ImageClient(config)
    logger.info(
        f"ImageClient initialised (model={config.model_id}, "
        f"credentials configured={config.has_credentials()})."
    )

    yield

    app.state.image_client = None
    logger.info("ImageClient released on shutdown.")


# ---------------------------------------------------------------------------
# FastAPI application instance.
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Image Studio",
    description="Text-to-image generation API backed by Imagen.",
    version=__version__,
    lifespan=lifespan,
)

# Allow cross-origin requests so a separately served frontend can call the
# JSON API during development.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _status_for(error: Exception | None) -> int:
    """Return the HTTP status code for a controller failure."""
    for error_type, status_code in ERROR_STATUS_CODES.items():
        if isinstance(error, error_type):
            return status_code
    return DEFAULT_ERROR_STATUS


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/api/health")
async def health() -> dict:
    """Report liveness and whether generation can work."""
    return {
        "status": "ok",
        "version": __version__,
        "credentials_configured": app.state.config.has_credentials(),
    }


@app.get("/api/config")
async def get_config() -> dict:
    """Return the options the frontend needs to build the form.

    Returns:
        Dictionary with keys ``version``, ``model_id``, ``aspect_ratios``
        (list of ``{id, label}``), ``min_images``, ``max_images`` and
        ``output_mime_type``.
    """
    return {
        "version": __version__,
        "model_id": app.state.config.model_id,
        "aspect_ratios": [{"id": key, "label": label} for key, label in ASPECT_RATIOS.items()],
        "min_images": MIN_IMAGES,
        "max_images": MAX_IMAGES,
        "output_mime_type": app.state.config.output_mime_type,
    }


@app.post("/api/generate", response_model=GenerateResponse)
async def generate_images(req: GenerateRequest) -> GenerateResponse:
    """Generate images for a prompt.

    Args:
        req: Validated :class:`GenerateRequest` payload.

    Returns:
        :class:`GenerateResponse` with the images as data URLs.

    Raises:
        HTTPException: See the module docstring for the status mapping.
    """
    controller = GenerationController(app.state.config, client=app.state.image_client)
    controller.set_prompt(req.prompt)
    controller.set_count(req.count)
    controller.set_aspect_ratio(req.aspect_ratio)

    state = await controller.submit()

    if isinstance(state, Error):
        raise HTTPException(status_code=_status_for(controller.last_error), detail=state.message)
    if not isinstance(state, Populated):
        raise HTTPException(status_code=DEFAULT_ERROR_STATUS, detail="Generation did not complete")

    request = controller.last_request
    images = [
        GeneratedImage(
            index=asset.index,
            data_url=asset.data_url,
            mime_type=asset.mime_type,
            aspect_ratio=asset.aspect_ratio,
            filename=controller.download_filename(asset),
        )
        for asset in state.assets
    ]
    logger.info(f"API generation returned {len(images)} image(s)")
    return GenerateResponse(
        prompt=request.prompt,
        count=request.count,
        aspect_ratio=request.aspect_ratio,
        images=images,
    )


# Mount the Gradio UI last so the /api routes above take precedence.
demo = create_ui()
app = gr.mount_gradio_app(
    app,
    demo,
    path="/",
    allowed_paths=[str(config.downloads_dir.resolve())],
)


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host and port from :data:`~imagestudio.core.config.config` (which
    loads from ``IMAGESTUDIO_SERVER_NAME`` and ``IMAGESTUDIO_SERVER_PORT``
    environment variables).  Defaults to ``0.0.0.0:7860``.

    This function is registered as the ``imagestudio`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    uvicorn.run(
        "imagestudio.api.main:app",
        host=config.server_name,
        port=config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
