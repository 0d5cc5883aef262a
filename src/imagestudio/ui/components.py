"""Reusable UI components and state rendering for the Image Studio interface."""

from typing import Any

import gradio as gr

from .models import (
    ASPECT_RATIOS,
    DEFAULT_ASPECT_RATIO,
    DEFAULT_IMAGE_COUNT,
    MAX_IMAGES,
    MIN_IMAGES,
    Error,
    Idle,
    Loading,
    Populated,
    UIState,
)


def _plural(count: int) -> str:
    return "s" if count > 1 else ""


def generate_button_label(count: int) -> str:
    """Label for the generate button, e.g. "Generate Images"."""
    return f"Generate Image{_plural(count)}"


def render_status(state: UIState, count: int = DEFAULT_IMAGE_COUNT) -> str:
    """Render the status Markdown for a UI state.

    Args:
        state: Current controller state
        count: Requested image count (for pluralisation while idle/loading)

    Returns:
        Markdown string
    """
    if isinstance(state, Loading):
        return f"⏳ *Generating your masterpiece{_plural(count)}...*"
    if isinstance(state, Error):
        return f"❌ **Error**\n\n{state.message}"
    if isinstance(state, Populated):
        total = len(state.assets)
        return f"✅ **Generated Image{_plural(total)}:** {total}"
    return f"*Your generated image{_plural(count)} will appear here.*"


def render_gallery(state: UIState) -> list[tuple[Any, str]]:
    """Gallery items for a UI state.

    Only a Populated state shows images; every other state clears the gallery.

    Returns:
        List of (PIL image, caption) tuples in result order
    """
    if not isinstance(state, Populated):
        return []
    return [
        (asset.to_pil(), f"Image {asset.index + 1} · {asset.aspect_ratio}")
        for asset in state.assets
    ]


class GenerationFormUI:
    """Prompt, image count, aspect ratio, and the generate button.

    The inputs are disabled by the handlers while a request is in flight.
    """

    def __init__(self):
        self.prompt = gr.Textbox(
            label="Enter your creative prompt:",
            placeholder="e.g., A futuristic cityscape at sunset, neon lights, flying cars",
            lines=3,
        )

        with gr.Row():
            self.count = gr.Number(
                label="Number of Images:",
                value=DEFAULT_IMAGE_COUNT,
                minimum=MIN_IMAGES,
                maximum=MAX_IMAGES,
                precision=0,
                step=1,
            )
            self.aspect_ratio = gr.Dropdown(
                label="Aspect Ratio:",
                choices=[(label, key) for key, label in ASPECT_RATIOS.items()],
                value=DEFAULT_ASPECT_RATIO,
            )

        self.generate_btn = gr.Button(
            generate_button_label(DEFAULT_IMAGE_COUNT),
            variant="primary",
        )

    def get_inputs(self) -> list[gr.components.Component]:
        """Return the form inputs in handler argument order."""
        return [self.prompt, self.count, self.aspect_ratio]


class ResultsUI:
    """Status line, result gallery, and the download button."""

    def __init__(self):
        self.status = gr.Markdown(value=render_status(Idle()))

        self.gallery = gr.Gallery(
            label="Generated Images",
            columns=4,
            rows=1,
            height=400,
            object_fit="contain",
            show_label=False,
        )

        self.download_btn = gr.DownloadButton(
            label="Download image",
            visible=False,
        )
