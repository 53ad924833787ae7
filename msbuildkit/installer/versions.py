"""
Download locations of the Build Tools bootstrapper per Visual Studio version.
"""

import logging
from typing import Dict, List

from msbuildkit.core.exceptions import UnsupportedVersionError

logger = logging.getLogger(__name__)

VERSION_URLS: Dict[str, str] = {
    "2022": "https://aka.ms/vs/17/release/vs_buildtools.exe",
    "2019": "https://aka.ms/vs/16/release/vs_buildtools.exe",
    "2017": "https://aka.ms/vs/15/release/vs_buildtools.exe",
}


def get_url_for_version(version: str) -> str:
    """
    Get the bootstrapper URL for a version label.

    Args:
        version: Version label (e.g., "2022")

    Returns:
        Download URL

    Raises:
        UnsupportedVersionError: If the version label is unknown
    """
    try:
        return VERSION_URLS[version]
    except KeyError:
        logger.error(
            f"No download URL for version {version!r}, "
            f"supported: {', '.join(supported_versions())}"
        )
        raise UnsupportedVersionError(version) from None


def supported_versions() -> List[str]:
    """List supported version labels, newest first."""
    return sorted(VERSION_URLS, reverse=True)
