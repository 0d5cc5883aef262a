"""Session state management for the Image Studio UI.

Each browser session gets its own :class:`GenerationController`, created
lazily on the first event that needs it and torn down when Gradio discards
the session.
"""

import logging
import shutil

from imagestudio.core.config import StudioConfig, config

from .controller import GenerationController

logger = logging.getLogger(__name__)


def initialize_controller(
    controller: GenerationController | None = None,
    session_id: str | None = None,
    app_config: StudioConfig | None = None,
) -> GenerationController:
    """Initialize or return the session's controller.

    Args:
        controller: Existing controller or None
        session_id: Gradio session hash; downloads for the session are
            written to a subdirectory of that name
        app_config: Configuration to use (default: global config)

    Returns:
        Ready-to-use GenerationController
    """
    if controller is not None:
        return controller

    app_config = app_config or config
    logger.info("Creating new GenerationController")
    controller = GenerationController(app_config)
    if session_id:
        controller.downloads_dir = app_config.downloads_dir / session_id
    return controller


def cleanup_controller(controller: GenerationController | None) -> None:
    """Release session resources.

    Removes the session's download directory (never the shared root) and
    drops the client.

    Args:
        controller: Controller to clean up; None is ignored
    """
    if controller is None:
        return

    logger.info("Cleaning up GenerationController resources")
    if controller.downloads_dir != controller.config.downloads_dir:
        shutil.rmtree(controller.downloads_dir, ignore_errors=True)
    controller.client = None
