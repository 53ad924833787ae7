"""
Per-node mutual exclusion for provisioning.

The installer logic performs unsynchronized read-modify-write cycles on
config.json and .vsconfig, so at most one provisioning attempt may run per
node at a time. This module provides that guarantee for callers on the same
machine with file-based locks.

Usage:
    from msbuildkit.core.locking import NodeLockManager

    lock_manager = NodeLockManager()
    with lock_manager.node_lock("build-agent-01", timeout=600):
        installer.perform_installation(node)
"""

import logging
import platform
import re
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from filelock import FileLock, Timeout

from msbuildkit.core.exceptions import NodeLockTimeout

logger = logging.getLogger(__name__)

DEFAULT_LOCK_TIMEOUT = 3600.0


def get_default_lock_dir() -> Path:
    """
    Get the directory for lock files.

    Returns:
        Path to per-user lock directory
    """
    if platform.system() == "Windows":
        base = Path.home() / "AppData" / "Local" / "msbuildkit"
    else:
        base = Path.home() / ".msbuildkit"

    return base / "locks"


class NodeLockManager:
    """
    Manages provisioning locks, one lock file per node.

    Attributes:
        lock_dir: Directory where lock files are stored
    """

    def __init__(self, lock_dir: Optional[Path] = None):
        """
        Initialize lock manager.

        Args:
            lock_dir: Directory for lock files (default: per-user directory)
        """
        self.lock_dir = Path(lock_dir) if lock_dir else get_default_lock_dir()
        self.lock_dir.mkdir(parents=True, exist_ok=True)

    def lock_path(self, node_name: str) -> Path:
        """Lock file path for a node."""
        safe_name = re.sub(r"[^A-Za-z0-9_.-]", "_", node_name) or "node"
        return self.lock_dir / f"{safe_name}.lock"

    @contextmanager
    def node_lock(
        self, node_name: str, timeout: float = DEFAULT_LOCK_TIMEOUT
    ) -> Iterator[None]:
        """
        Hold the provisioning lock for a node.

        Args:
            node_name: Node to lock
            timeout: Seconds to wait for the lock (-1 waits forever)

        Raises:
            NodeLockTimeout: If the lock cannot be acquired within timeout
        """
        lock_file = self.lock_path(node_name)
        lock = FileLock(str(lock_file), timeout=timeout)

        logger.debug(f"Acquiring provisioning lock for {node_name}: {lock_file}")
        try:
            lock.acquire()
        except Timeout as e:
            raise NodeLockTimeout(
                f"Could not acquire provisioning lock for {node_name} "
                f"within {timeout}s. Another provisioning attempt may be running."
            ) from e

        try:
            yield
        finally:
            lock.release()
            logger.debug(f"Released provisioning lock for {node_name}")
