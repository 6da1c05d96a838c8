"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from dirserve.config.settings import Settings
from dirserve.container import DependencyContainer
from dirserve.main import create_app


@pytest.fixture
def temp_directory():
    """
    Create a temporary served root for testing listings.

    Layout:
        notes.txt
        drafts/v1 final.md

    Returns:
        Canonical path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_dir = os.path.realpath(temp_dir)

        with open(os.path.join(temp_dir, "notes.txt"), "w") as f:
            f.write("Some notes.")

        drafts = os.path.join(temp_dir, "drafts")
        os.makedirs(drafts)
        with open(os.path.join(drafts, "v1 final.md"), "w") as f:
            f.write("# Final\n")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def settings(temp_directory):
    """Settings serving the temporary directory."""
    return Settings(serve_dir=temp_directory, host="127.0.0.1", port=8000)


@pytest.fixture
def dependency_container(settings, mock_logger):
    """
    Create a dependency container with a mocked logger for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(settings)
    container._logger = mock_logger
    return container


@pytest.fixture
def client(settings):
    """Test client for an app serving the temporary directory."""
    return TestClient(create_app(settings))
