"""
Mock implementations for testing msbuildkit components.

This package provides in-memory implementations of the node transport to
enable isolated, deterministic testing.
"""

from .remote import InMemoryNode, InMemoryFilePath

__all__ = [
    "InMemoryNode",
    "InMemoryFilePath",
]
