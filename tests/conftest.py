"""
Pytest configuration and shared fixtures for msbuildkit tests.
"""

import pytest

from msbuildkit.config import InstallerConfig
from tests.mocks import InMemoryNode

NOW = 1_700_000_000


@pytest.fixture
def windows_node():
    """Windows node with an empty filesystem."""
    return InMemoryNode(name="win-agent", environment={"OS": "Windows_NT"})


@pytest.fixture
def linux_node():
    """Non-Windows node."""
    return InMemoryNode(name="linux-agent", environment={"OS": "Linux"})


@pytest.fixture
def install_root(windows_node):
    """Custom install root on the Windows node."""
    return windows_node.file("D:\\BuildTools")


@pytest.fixture
def installer_config():
    """Default 2022 installer configuration."""
    return InstallerConfig(selected_version="2022")
