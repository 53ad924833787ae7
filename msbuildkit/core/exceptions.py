"""
Centralized exception hierarchy for msbuildkit.

This module defines all custom exceptions used across the codebase
to provide clear exception semantics.
"""

from typing import Optional


# ============================================================================
# Base Exceptions
# ============================================================================


class MsBuildKitError(Exception):
    """Base exception for all msbuildkit errors."""

    pass


class ConfigurationError(MsBuildKitError):
    """Raised when the installer configuration is invalid."""

    pass


# ============================================================================
# Download Exceptions
# ============================================================================


class DownloadError(MsBuildKitError):
    """Exception raised when download fails."""

    pass


class UnsupportedVersionError(MsBuildKitError):
    """Raised when no download URL is known for a Build Tools version."""

    def __init__(self, version: str):
        self.version = version
        super().__init__(f"Unsupported Build Tools version: {version!r}")


# ============================================================================
# Config Cache Exceptions
# ============================================================================


class ConfigCacheError(MsBuildKitError):
    """Base exception for config.json freshness record errors."""

    pass


class MalformedConfigError(ConfigCacheError):
    """Raised when config.json cannot be parsed or has the wrong shape."""

    pass


class ConfigRecordNotFoundError(ConfigCacheError):
    """Raised when config.json is required but does not exist."""

    def __init__(self, location: str):
        self.location = location
        super().__init__(f"Config record not found: {location}")


# ============================================================================
# Installer Exceptions
# ============================================================================


class InstallerExecutionError(MsBuildKitError):
    """Raised when the Build Tools installer cannot be run or fails."""

    def __init__(self, message: str, exit_code: Optional[int] = None):
        self.exit_code = exit_code
        super().__init__(message)


class NodeLockTimeout(MsBuildKitError):
    """Raised when a node provisioning lock cannot be acquired within timeout."""

    pass
