"""
Unit tests for node provisioning locks.
"""

import pytest
from unittest.mock import patch

from filelock import Timeout

from msbuildkit.core.exceptions import NodeLockTimeout
from msbuildkit.core.locking import NodeLockManager, get_default_lock_dir


class TestNodeLockManager:
    """Test NodeLockManager class."""

    def test_creates_lock_dir(self, tmp_path):
        """Test lock directory is created."""
        lock_dir = tmp_path / "locks"

        NodeLockManager(lock_dir)

        assert lock_dir.is_dir()

    def test_lock_path_is_sanitized(self, tmp_path):
        """Test node names are turned into safe file names."""
        manager = NodeLockManager(tmp_path)

        assert manager.lock_path("agent-01") == tmp_path / "agent-01.lock"
        assert manager.lock_path("win/agent:02") == tmp_path / "win_agent_02.lock"
        assert manager.lock_path("") == tmp_path / "node.lock"

    def test_lock_can_be_reacquired(self, tmp_path):
        """Test the lock is released after the block."""
        manager = NodeLockManager(tmp_path)

        with manager.node_lock("agent-01", timeout=1):
            assert manager.lock_path("agent-01").exists()
        with manager.node_lock("agent-01", timeout=1):
            pass

    def test_released_on_error(self, tmp_path):
        """Test the lock is released when the block raises."""
        manager = NodeLockManager(tmp_path)

        with pytest.raises(RuntimeError):
            with manager.node_lock("agent-01", timeout=1):
                raise RuntimeError("install failed")

        with manager.node_lock("agent-01", timeout=1):
            pass

    def test_timeout_raises_node_lock_timeout(self, tmp_path):
        """Test filelock timeouts become NodeLockTimeout."""
        manager = NodeLockManager(tmp_path)

        with patch("msbuildkit.core.locking.FileLock") as file_lock:
            file_lock.return_value.acquire.side_effect = Timeout("lock")
            with pytest.raises(NodeLockTimeout, match="agent-01"):
                with manager.node_lock("agent-01", timeout=0.1):
                    pytest.fail("lock should not be acquired")

    def test_default_lock_dir(self):
        """Test default lock directory lives under the user's home."""
        assert get_default_lock_dir().name == "locks"
        assert "msbuildkit" in str(get_default_lock_dir())
