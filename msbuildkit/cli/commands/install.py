"""
Install command implementation.

Installs, updates or modifies the Build Tools on the local machine.
"""

import logging

from msbuildkit.cli.utils import load_installer_config
from msbuildkit.core.locking import NodeLockManager
from msbuildkit.core.remote import LocalNode
from msbuildkit.installer.provisioner import MsBuildInstaller

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the install command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, 2 if the machine is not Windows)
    """
    config = load_installer_config(args)
    node = LocalNode()
    lock_manager = NodeLockManager(args.lock_dir)

    with lock_manager.node_lock(node.name, timeout=args.lock_timeout):
        bin_path = MsBuildInstaller(config).perform_installation(node)

    if bin_path is None:
        logger.error("The Build Tools can only be installed on Windows")
        return 2

    print(bin_path.remote)
    return 0
