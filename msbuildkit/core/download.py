"""
Network download of the Build Tools bootstrapper.

Streams an HTTP(S) response body into a file handle on a node. A download is
a single attempt: there is no retry and no resume of partial files.
"""

import logging

import requests
from requests.exceptions import RequestException

from msbuildkit.core.exceptions import DownloadError
from msbuildkit.core.interfaces import RemoteFileHandle

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192
DEFAULT_TIMEOUT = 30


def download_file(
    uri: str, target: RemoteFileHandle, timeout: int = DEFAULT_TIMEOUT
) -> None:
    """
    Download a URL into a file handle.

    The write stream on `target` is closed whether the download succeeds or
    fails. Partially written content is left in place.

    Args:
        uri: URL to download from
        target: File handle to write the response body to
        timeout: Connect/read timeout in seconds

    Raises:
        DownloadError: On network errors, non-success status, or write errors
        ValueError: If the URI is empty

    Example:
        >>> from msbuildkit.core.remote import LocalFilePath
        >>> download_file(
        ...     "https://aka.ms/vs/17/release/vs_buildtools.exe",
        ...     LocalFilePath(r"C:\\BuildTools\\vs_BuildTools.exe"),
        ... )
    """
    if not uri:
        raise ValueError("URL cannot be empty")

    logger.info(f"Downloading from {uri}")

    downloaded = 0
    try:
        with requests.get(
            uri, stream=True, timeout=timeout, allow_redirects=True
        ) as response:
            response.raise_for_status()
            with target.write() as stream:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        stream.write(chunk)
                        downloaded += len(chunk)
    except RequestException as e:
        raise DownloadError(f"Download of {uri} failed: {e}") from e
    except OSError as e:
        raise DownloadError(f"Failed to write {target.remote}: {e}") from e

    logger.info(f"Download complete: {target.remote} ({downloaded} bytes)")
