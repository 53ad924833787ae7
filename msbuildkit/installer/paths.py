"""
Install locations of the Visual Studio Build Tools on a node.

All functions are pure: they only build handles through the node's handle
factory and never touch the node's filesystem.
"""

from typing import Optional

from msbuildkit.core.interfaces import Node, RemoteFileHandle

PROGRAM_FILES_X86 = "C:\\Program Files (x86)"
MSBUILD_BIN_SUBPATH = "\\MSBuild\\Current\\Bin"
BUILD_TOOLS_EXE_NAME = "vs_BuildTools.exe"


def build_tools_install_path(
    node: Node, version: str, override_path: Optional[str]
) -> RemoteFileHandle:
    """
    Get the Build Tools install root.

    Args:
        node: Target node
        version: Build Tools version label, used verbatim (e.g., "2022")
        override_path: Custom install root; ignored when empty

    Returns:
        Handle to the install root

    Example:
        >>> build_tools_install_path(node, "2019", None).remote
        'C:\\\\Program Files (x86)\\\\Microsoft Visual Studio\\\\2019\\\\BuildTools\\\\'
    """
    if override_path:
        return node.file(override_path)
    return node.file(
        f"{PROGRAM_FILES_X86}\\Microsoft Visual Studio\\{version}\\BuildTools\\"
    )


def ms_build_bin_path(
    node: Node, version: str, override_path: Optional[str]
) -> RemoteFileHandle:
    """Get the folder holding MSBuild.exe for an install root."""
    return build_tools_install_path(node, version, override_path).child(
        MSBUILD_BIN_SUBPATH
    )


def build_tools_exe_path(install_root: RemoteFileHandle) -> RemoteFileHandle:
    """Get the location the Build Tools bootstrapper is downloaded to."""
    return install_root.child(BUILD_TOOLS_EXE_NAME)
