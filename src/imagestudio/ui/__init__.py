"""Gradio user interface for Image Studio.

Modules
-------
models
    Form request, UI state variants, and UI constants.
validation
    Input validation and count clamping.
controller
    GenerationController, the owner of form fields and UI state.
downloads
    Download filename derivation and asset export.
components
    Gradio component groups and state rendering.
handlers
    Gradio event handlers.
state
    Per-session controller lifecycle.
app
    Blocks layout and the ``imagestudio-ui`` entry point.
"""
