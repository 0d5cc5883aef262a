"""Shared pytest fixtures for Image Studio tests."""

import io
import shutil
import tempfile
from pathlib import Path
from types import SimpleNamespace
from typing import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from PIL import Image

from imagestudio.core.assets import ImageAsset
from imagestudio.core.config import StudioConfig
from imagestudio.core.image_client import ImageClient
from imagestudio.ui.controller import GenerationController


def make_generated_image(payload: bytes | None, mime_type: str | None = "image/png"):
    """Build an object shaped like ``google.genai.types.GeneratedImage``."""
    return SimpleNamespace(image=SimpleNamespace(image_bytes=payload, mime_type=mime_type))


def make_response(*items):
    """Build an object shaped like ``google.genai.types.GenerateImagesResponse``."""
    return SimpleNamespace(generated_images=list(items))


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config(temp_dir: Path) -> StudioConfig:
    """Configuration with a fake API key and temporary directories."""
    return StudioConfig(
        _env_file=None,
        api_key="test-api-key",
        downloads_dir=str(temp_dir / "downloads"),
        output_mime_type="image/jpeg",
    )


@pytest.fixture
def unconfigured_config(temp_dir: Path) -> StudioConfig:
    """Configuration without credentials."""
    return StudioConfig(
        _env_file=None,
        api_key=None,
        downloads_dir=str(temp_dir / "downloads"),
    )


@pytest.fixture
def png_bytes() -> bytes:
    """A tiny valid PNG image."""
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color=(200, 30, 30)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def jpeg_bytes() -> bytes:
    """A tiny valid JPEG image."""
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color=(30, 30, 200)).save(buffer, format="JPEG")
    return buffer.getvalue()


@pytest.fixture
def mock_sdk_client(png_bytes: bytes) -> MagicMock:
    """Mock ``genai.Client`` returning one PNG image by default."""
    sdk = MagicMock()
    sdk.aio.models.generate_images = AsyncMock(
        return_value=make_response(make_generated_image(png_bytes))
    )
    return sdk


@pytest.fixture
def image_client(test_config: StudioConfig, mock_sdk_client: MagicMock) -> ImageClient:
    """ImageClient wired to the mock SDK."""
    return ImageClient(test_config, sdk_client=mock_sdk_client)


@pytest.fixture
def fake_client() -> MagicMock:
    """Stand-in for ImageClient with an AsyncMock ``generate``."""
    client = MagicMock(spec=ImageClient)
    client.generate = AsyncMock(return_value=[])
    return client


@pytest.fixture
def controller(test_config: StudioConfig, fake_client: MagicMock) -> GenerationController:
    """Controller with credentials and a fake client."""
    return GenerationController(test_config, client=fake_client)


@pytest.fixture
def sample_asset(png_bytes: bytes) -> ImageAsset:
    """A PNG asset at index 0."""
    return ImageAsset.from_bytes(png_bytes, "image/png", "1:1", index=0)


@pytest.fixture
def generated_image():
    """Factory for fake ``GeneratedImage`` items."""
    return make_generated_image


@pytest.fixture
def images_response():
    """Factory for fake ``GenerateImagesResponse`` objects."""
    return make_response
