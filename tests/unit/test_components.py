"""Unit tests for state rendering helpers."""

from PIL import Image

from imagestudio.core.assets import ImageAsset
from imagestudio.ui.components import (
    generate_button_label,
    render_gallery,
    render_status,
)
from imagestudio.ui.models import Error, Idle, Loading, Populated


class TestGenerateButtonLabel:
    def test_singular(self):
        assert generate_button_label(1) == "Generate Image"

    def test_plural(self):
        assert generate_button_label(3) == "Generate Images"


class TestRenderStatus:
    """Tests for render_status."""

    def test_idle_placeholder(self):
        assert render_status(Idle(), 1) == "*Your generated image will appear here.*"
        assert render_status(Idle(), 2) == "*Your generated images will appear here.*"

    def test_loading(self):
        assert "Generating your masterpieces" in render_status(Loading(), 4)

    def test_error_shows_message(self):
        status = render_status(Error("API request limit reached."))
        assert status.startswith("❌ **Error**")
        assert "API request limit reached." in status

    def test_populated_shows_count(self, sample_asset):
        status = render_status(Populated((sample_asset, sample_asset)))
        assert "Generated Images" in status
        assert "2" in status


class TestRenderGallery:
    """Tests for render_gallery."""

    def test_non_populated_states_clear_gallery(self):
        assert render_gallery(Idle()) == []
        assert render_gallery(Loading()) == []
        assert render_gallery(Error("x")) == []

    def test_populated_items_in_order(self, png_bytes):
        assets = tuple(
            ImageAsset.from_bytes(png_bytes, "image/png", "9:16", index=i) for i in range(3)
        )

        items = render_gallery(Populated(assets))

        assert len(items) == 3
        assert all(isinstance(image, Image.Image) for image, _ in items)
        assert [caption for _, caption in items] == [
            "Image 1 · 9:16",
            "Image 2 · 9:16",
            "Image 3 · 9:16",
        ]
