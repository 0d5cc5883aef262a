"""Gradio UI for Image Studio."""

import logging

import gradio as gr

from imagestudio.core.config import config

from .components import GenerationFormUI, ResultsUI
from .handlers import generate_images, select_image, update_count
from .state import cleanup_controller

# Configure logging
logging.basicConfig(
    level=config.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_ui() -> gr.Blocks:
    """Create the Gradio UI.

    Returns:
        Gradio Blocks app
    """
    app = gr.Blocks(title="AI Creative Studio")

    with app:
        # Session state - one controller per user, created on first event
        controller_state = gr.State(None, delete_callback=cleanup_controller)

        gr.Markdown(
            """
            # AI Creative Studio
            ### Text-to-image generation with Imagen
            """
        )

        if not config.has_credentials():
            gr.Markdown(
                "⚠️ **API key is not configured.** Set `IMAGESTUDIO_API_KEY` "
                "(or `GEMINI_API_KEY`) and restart to enable generation."
            )

        create_generation_tab(controller_state)

    return app


def create_generation_tab(controller_state: gr.State) -> None:
    """Create the generation form and results area.

    Args:
        controller_state: Session state holding the GenerationController
    """
    form = GenerationFormUI()
    results = ResultsUI()

    # Clamp the count on user edits only; programmatic updates don't re-fire
    form.count.input(
        fn=update_count,
        inputs=[form.count, controller_state],
        outputs=[form.count, form.generate_btn, controller_state],
    )

    generate_outputs = [
        results.gallery,
        results.status,
        form.prompt,
        form.count,
        form.aspect_ratio,
        form.generate_btn,
        results.download_btn,
        controller_state,
    ]
    form.generate_btn.click(
        fn=generate_images,
        inputs=form.get_inputs() + [controller_state],
        outputs=generate_outputs,
    )
    form.prompt.submit(
        fn=generate_images,
        inputs=form.get_inputs() + [controller_state],
        outputs=generate_outputs,
    )

    results.gallery.select(
        fn=select_image,
        inputs=[controller_state],
        outputs=[results.download_btn, controller_state],
    )


def main():
    """Main entry point for the standalone Gradio UI."""
    logger.info("Starting AI Creative Studio...")
    logger.info(f"Model: {config.model_id}, credentials configured: {config.has_credentials()}")

    app = create_ui()

    logger.info(f"Launching Gradio UI on {config.server_name}:{config.server_port}")

    app.launch(
        server_name=config.server_name,
        server_port=config.server_port,
        share=config.share,
        show_error=True,
        inbrowser=False,
        allowed_paths=[str(config.downloads_dir.resolve())],
    )


if __name__ == "__main__":
    main()
