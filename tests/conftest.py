"""Pytest configuration and fixtures for Spirit tests."""

import pytest
from pathlib import Path
from unittest.mock import MagicMock

from models.device import Device


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def devices():
    """Three devices as returned by the API."""
    return [
        Device(id='AA:01', model='H6159', name='Desk lamp'),
        Device(id='AA:02', model='H6008', name='Shelf'),
        Device(id='AA:03', model='H6163', name='Kitchen strip'),
    ]


@pytest.fixture
def mock_client(devices):
    """A GoveeClient stand-in that returns the device fixture."""
    client = MagicMock()
    client.devices.return_value = devices
    return client
