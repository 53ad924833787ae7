"""
Core interfaces for msbuildkit.

This module defines the abstract transport contracts the installer logic
depends on. A node is a worker machine; a remote file handle is a path on
that node. The installer never talks to a filesystem or an environment
directly, it only goes through these two interfaces.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, ContextManager, Mapping


class RemoteFileHandle(ABC):
    """
    Abstract reference to a path on a specific node.

    Handles are cheap to create and are never cached beyond one call.
    """

    @property
    @abstractmethod
    def remote(self) -> str:
        """Path string on the node."""
        pass

    @abstractmethod
    def exists(self) -> bool:
        """
        Check whether the path exists on the node.

        Returns:
            True if the path exists, False otherwise
        """
        pass

    @abstractmethod
    def read_text(self) -> str:
        """
        Read the whole file as text.

        Returns:
            File content

        Raises:
            OSError: If the file cannot be read
        """
        pass

    @abstractmethod
    def write_text(self, content: str, encoding: str) -> None:
        """
        Write text to the file, replacing prior content.

        Args:
            content: Text to write
            encoding: Character encoding (e.g., "UTF-8")
        """
        pass

    @abstractmethod
    def write(self) -> ContextManager[BinaryIO]:
        """
        Open a binary write stream, creating parent folders as needed.

        Returns:
            Context manager yielding a writable binary stream
        """
        pass

    @abstractmethod
    def delete(self) -> None:
        """Delete the file. Deleting a missing file is a no-op."""
        pass

    @abstractmethod
    def child(self, name: str) -> "RemoteFileHandle":
        """
        Derive a child path.

        Args:
            name: Relative name, may carry leading or trailing separators

        Returns:
            Handle for the child path on the same node
        """
        pass


class Node(ABC):
    """
    Abstract worker machine the Build Tools are provisioned onto.

    A node provides the environment lookup used for platform gating and the
    factory for file handles bound to its connection.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Node name, used for logging and locking."""
        pass

    @abstractmethod
    def file(self, path: str) -> RemoteFileHandle:
        """
        Create a handle for a path on this node.

        Args:
            path: Path string in the node's native format

        Returns:
            RemoteFileHandle bound to this node
        """
        pass

    @abstractmethod
    def get_environment(self) -> Mapping[str, str]:
        """
        Get the environment variables of this node.

        Returns:
            Environment variable map

        Raises:
            OSError: If the environment cannot be retrieved
        """
        pass


__all__ = [
    "RemoteFileHandle",
    "Node",
]
