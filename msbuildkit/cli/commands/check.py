"""
Check command implementation.

Reports the installation state of the Build Tools without changing it.
"""

import logging

from msbuildkit.cli.utils import load_installer_config
from msbuildkit.core.platform import check_if_os_is_windows
from msbuildkit.core.remote import LocalNode
from msbuildkit.installer.config_cache import config_file, needs_modify, needs_update
from msbuildkit.installer.paths import build_tools_install_path, ms_build_bin_path
from msbuildkit.installer.provisioner import MsBuildInstaller
from msbuildkit.installer.versions import get_url_for_version
from msbuildkit.installer.vsconfig import vsconfig_differs

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the check command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 if up to date, 1 if work is pending, 2 if not Windows)
    """
    config = load_installer_config(args)
    node = LocalNode()

    windows = check_if_os_is_windows(node)
    print(f"Node:           {node.name}")
    print(f"Windows:        {'yes' if windows else 'no'}")
    if not windows:
        return 2

    override = MsBuildInstaller(config).override_path()
    install_root = build_tools_install_path(node, config.selected_version, override)
    installed = config_file(install_root).exists()
    update = needs_update(install_root)
    modify = installed and (
        vsconfig_differs(config.vsconfig, install_root) or needs_modify(install_root)
    )

    print(f"Version:        {config.selected_version}")
    print(f"Download URL:   {get_url_for_version(config.selected_version)}")
    print(f"Install root:   {install_root.remote}")
    print(f"MSBuild bin:    {ms_build_bin_path(node, config.selected_version, override).remote}")
    print(f"Installed:      {'yes' if installed else 'no'}")
    print(f"Needs update:   {'yes' if update else 'no'}")
    print(f"Needs modify:   {'yes' if modify else 'no'}")

    return 1 if update or modify else 0
