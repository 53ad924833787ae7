"""
Platform gating for Build Tools provisioning.

The Build Tools installer only runs on Windows. Nodes are classified by the
`OS` environment variable Windows sets for every process.
"""

import logging

from msbuildkit.core.interfaces import Node

logger = logging.getLogger(__name__)

WINDOWS_OS_VALUE = "Windows_NT"


def check_if_os_is_windows(node: Node) -> bool:
    """
    Check whether a node runs Windows.

    Args:
        node: Node to classify

    Returns:
        True only if the node environment has OS set to exactly "Windows_NT"

    Raises:
        OSError: If the environment cannot be retrieved from the node
    """
    env = node.get_environment()
    if "OS" not in env:
        logger.debug(f"Node {node.name} has no OS environment variable")
        return False
    return env["OS"] == WINDOWS_OS_VALUE
