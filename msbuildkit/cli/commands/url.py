"""
URL command implementation.

Prints the bootstrapper download URL for a Build Tools version.
"""

import logging

from msbuildkit.installer.versions import get_url_for_version

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the url command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    print(get_url_for_version(args.build_tools_version))
    return 0
