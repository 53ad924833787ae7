"""
Staging of the component-configuration file (.vsconfig).

The .vsconfig file lists the optional Build Tools components to install.
When present it drives "modify" runs of the installer.
"""

import logging
from typing import Optional

from msbuildkit.core.interfaces import RemoteFileHandle

logger = logging.getLogger(__name__)

VSCONFIG_FILE_NAME = ".vsconfig"
VSCONFIG_ENCODING = "UTF-8"


def vsconfig_file(workspace: RemoteFileHandle) -> RemoteFileHandle:
    """Get the .vsconfig handle for a workspace."""
    return workspace.child(VSCONFIG_FILE_NAME)


def use_config_file(vsconfig: Optional[str], workspace: RemoteFileHandle) -> bool:
    """
    Materialize or remove the .vsconfig file.

    Args:
        vsconfig: Desired file content; None or empty removes the file
        workspace: Folder holding the .vsconfig file

    Returns:
        True if a component-configuration file is in effect
    """
    target = vsconfig_file(workspace)

    if not vsconfig:
        target.delete()
        return False

    if target.exists() and target.read_text() == vsconfig:
        logger.debug(f"{target.remote} is up to date")
        return True

    logger.info(f"Writing component configuration to {target.remote}")
    target.write_text(vsconfig, VSCONFIG_ENCODING)
    return True


def vsconfig_differs(vsconfig: Optional[str], workspace: RemoteFileHandle) -> bool:
    """
    Check whether staging `vsconfig` would change the file on disk.

    Removing the file is not reported as a change.
    """
    if not vsconfig:
        return False
    target = vsconfig_file(workspace)
    return not target.exists() or target.read_text() != vsconfig
