"""
Local implementation of the node transport contracts.

`LocalNode` and `LocalFilePath` back the `Node` and `RemoteFileHandle`
interfaces with the machine msbuildkit runs on. They are what the CLI uses
when provisioning the current worker.

Usage:
    from msbuildkit.core.remote import LocalNode

    node = LocalNode()
    root = node.file(r"C:\\BuildTools")
    config = root.child("config.json")
    if config.exists():
        print(config.read_text())
"""

import logging
import os
import re
import socket
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Mapping, Optional

from msbuildkit.core.interfaces import Node, RemoteFileHandle

logger = logging.getLogger(__name__)

_DRIVE_PATTERN = re.compile(r"^[A-Za-z]:")
_SEPARATORS = "\\/"
_SEPARATOR_RUN = re.compile(r"[\\/]+")


def is_windows_path(path: str) -> bool:
    """Whether a path string uses Windows conventions."""
    return "\\" in path or bool(_DRIVE_PATTERN.match(path))


def join_remote_path(base: str, name: str) -> str:
    """
    Join a child name onto a node path.

    Separators around the join point are collapsed into one, and separators
    inside the name are rewritten to match the base: a backslash for Windows
    paths and a slash otherwise.

    Args:
        base: Parent path
        name: Child name, may carry leading or trailing separators

    Returns:
        Joined path string

    Example:
        >>> join_remote_path("C:\\\\Tools\\\\", "\\\\MSBuild\\\\Current\\\\Bin")
        'C:\\\\Tools\\\\MSBuild\\\\Current\\\\Bin'
    """
    name = name.strip(_SEPARATORS)
    if not name:
        return base
    sep = "\\" if is_windows_path(base) else "/"
    name = _SEPARATOR_RUN.sub(lambda _: sep, name)
    return base.rstrip(_SEPARATORS) + sep + name


class LocalFilePath(RemoteFileHandle):
    """RemoteFileHandle backed by the local filesystem."""

    def __init__(self, remote: str):
        self._remote = remote

    @property
    def remote(self) -> str:
        return self._remote

    @property
    def path(self) -> Path:
        return Path(self._remote)

    def exists(self) -> bool:
        return self.path.exists()

    def read_text(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def write_text(self, content: str, encoding: str) -> None:
        """Write text atomically using temp file + rename."""
        target = self.path
        target.parent.mkdir(parents=True, exist_ok=True)

        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding=encoding, newline="") as f:
                f.write(content)
            temp_path.replace(target)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

    @contextmanager
    def write(self) -> Iterator[BinaryIO]:
        target = self.path
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "wb") as stream:
            yield stream

    def delete(self) -> None:
        self.path.unlink(missing_ok=True)

    def child(self, name: str) -> "LocalFilePath":
        return LocalFilePath(join_remote_path(self._remote, name))

    def __eq__(self, other) -> bool:
        if not isinstance(other, LocalFilePath):
            return NotImplemented
        return self._remote == other._remote

    def __hash__(self) -> int:
        return hash(self._remote)

    def __repr__(self) -> str:
        return f"LocalFilePath({self._remote!r})"

    def __str__(self) -> str:
        return self._remote


class LocalNode(Node):
    """Node representing the machine msbuildkit runs on."""

    def __init__(self, name: Optional[str] = None):
        self._name = name or socket.gethostname()

    @property
    def name(self) -> str:
        return self._name

    def file(self, path: str) -> LocalFilePath:
        return LocalFilePath(path)

    def get_environment(self) -> Mapping[str, str]:
        return dict(os.environ)

    def __repr__(self) -> str:
        return f"LocalNode({self._name!r})"
