"""Fixtures for integration tests."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from imagestudio.api.main import app
from imagestudio.core.image_client import ImageClient


@pytest.fixture
def test_client(test_config, mock_sdk_client) -> Generator[TestClient, None, None]:
    """TestClient with the lifespan run and the SDK replaced by a mock.

    The lifespan installs the global configuration; the fixture then swaps in
    the test configuration and an ImageClient wired to the mock SDK.
    """
    with TestClient(app) as client:
        app.state.config = test_config
        app.state.image_client = ImageClient(test_config, sdk_client=mock_sdk_client)
        yield client


@pytest.fixture
def unconfigured_client(unconfigured_config, mock_sdk_client) -> Generator[TestClient, None, None]:
    """TestClient whose configuration has no API key."""
    with TestClient(app) as client:
        app.state.config = unconfigured_config
        app.state.image_client = ImageClient(unconfigured_config, sdk_client=mock_sdk_client)
        yield client
