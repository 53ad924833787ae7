"""
Core functionality for msbuildkit.

This package contains the transport contracts, the local transport, platform
gating, downloading, locking, and the exception hierarchy.
"""

from .exceptions import (
    MsBuildKitError,
    ConfigurationError,
    DownloadError,
    UnsupportedVersionError,
    ConfigCacheError,
    MalformedConfigError,
    ConfigRecordNotFoundError,
    InstallerExecutionError,
    NodeLockTimeout,
)

from .interfaces import (
    RemoteFileHandle,
    Node,
)

from .remote import (
    LocalFilePath,
    LocalNode,
    join_remote_path,
)

from .platform import check_if_os_is_windows

from .download import download_file

from .locking import NodeLockManager

__all__ = [
    "MsBuildKitError",
    "ConfigurationError",
    "DownloadError",
    "UnsupportedVersionError",
    "ConfigCacheError",
    "MalformedConfigError",
    "ConfigRecordNotFoundError",
    "InstallerExecutionError",
    "NodeLockTimeout",
    "RemoteFileHandle",
    "Node",
    "LocalFilePath",
    "LocalNode",
    "join_remote_path",
    "check_if_os_is_windows",
    "download_file",
    "NodeLockManager",
]
