"""
pytest configuration for ward tests.

Adds the project root to the Python path and provides shared fixtures.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))

from adapters.camera.lnpr_client import CameraClient  # noqa: E402
from config import CameraSettings  # noqa: E402


def _response(status_code=200, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


@pytest.fixture
def make_response():
    """Factory for stand-ins of requests.Response."""
    return _response


@pytest.fixture
def settings():
    return CameraSettings(host="192.168.1.64", username="admin", password="secret")


@pytest.fixture
def session():
    mock_session = MagicMock()
    mock_session.get.return_value = _response(200, "OK\n")
    return mock_session


@pytest.fixture
def client(settings, session):
    return CameraClient(settings, session=session)
