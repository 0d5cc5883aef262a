"""Gradio event handlers for the generation tab.

Handlers take raw component values plus the session's controller, delegate
to the controller, and render the resulting state back into component
updates. They never change the UI state themselves.
"""

import logging
from collections.abc import AsyncIterator

import gradio as gr

from .components import generate_button_label, render_gallery, render_status
from .controller import GenerationController
from .state import initialize_controller
from .validation import ValidationError

logger = logging.getLogger(__name__)


def _session_id(request: gr.Request | None) -> str | None:
    return getattr(request, "session_hash", None) if request is not None else None


def render_outputs(controller: GenerationController) -> tuple:
    """Render the controller's state into generate-event outputs.

    Returns:
        Tuple of (gallery, status, prompt_update, count_update,
        aspect_ratio_update, generate_btn_update, download_btn_update,
        controller)
    """
    busy = controller.is_loading
    return (
        render_gallery(controller.state),
        render_status(controller.state, controller.count),
        gr.update(interactive=not busy),
        gr.update(interactive=not busy),
        gr.update(interactive=not busy),
        gr.update(interactive=not busy, value=generate_button_label(controller.count)),
        gr.update(visible=False, value=None),
        controller,
    )


def update_count(
    value, controller: GenerationController | None, request: gr.Request = None
) -> tuple[int, gr.update, GenerationController]:
    """Clamp the image count on every edit.

    Args:
        value: Raw number input value
        controller: Session controller (may be None before first use)

    Returns:
        Tuple of (clamped_count, generate_btn_update, controller)
    """
    controller = initialize_controller(controller, _session_id(request))
    count = controller.set_count(value)
    return count, gr.update(value=generate_button_label(count)), controller


async def generate_images(
    prompt: str,
    count,
    aspect_ratio: str,
    controller: GenerationController | None,
    request: gr.Request = None,
) -> AsyncIterator[tuple]:
    """Generate images from the form values.

    Yields the Loading view first (inputs disabled) and the final view once
    the request completes. Rejected submissions yield a single Error view.

    Args:
        prompt: Prompt text
        count: Raw image count
        aspect_ratio: Aspect ratio key
        controller: Session controller

    Yields:
        Output tuples, see :func:`render_outputs`
    """
    controller = initialize_controller(controller, _session_id(request))
    controller.set_prompt(prompt)
    controller.set_count(count)
    controller.set_aspect_ratio(aspect_ratio)

    generation_request = controller.begin_submit()
    try:
        yield render_outputs(controller)

        if generation_request is None:
            return

        await controller.complete_submit(generation_request)
        yield render_outputs(controller)
    finally:
        # Closed by Gradio mid-request (e.g. the user left the page)
        if generation_request is not None:
            controller.cancel_submit()


def select_image(
    controller: GenerationController | None,
    evt: gr.SelectData,
    request: gr.Request = None,
) -> tuple[gr.update, GenerationController]:
    """Prepare the selected gallery image for download.

    Args:
        controller: Session controller
        evt: Gallery selection event (carries the image index)

    Returns:
        Tuple of (download_btn_update, controller)
    """
    controller = initialize_controller(controller, _session_id(request))

    try:
        path = controller.export_asset(evt.index)
    except ValidationError as e:
        logger.warning(f"Download unavailable: {e}")
        return gr.update(visible=False, value=None), controller
    except (OSError, ValueError) as e:
        logger.error(f"Error preparing download: {e}", exc_info=True)
        gr.Warning(f"Could not prepare download: {e}")
        return gr.update(visible=False, value=None), controller

    return (
        gr.update(value=str(path), label=f"Download {path.name}", visible=True),
        controller,
    )
