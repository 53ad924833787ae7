"""
Provisioning of the Visual Studio Build Tools onto a node.

`MsBuildInstaller` ties the installer pieces together: platform gating,
freshness check, bootstrapper download, .vsconfig staging, installer run and
record update. It performs at most one installer run per call and never
retries. Callers must not provision the same node concurrently.

Example:
    >>> from msbuildkit.config import InstallerConfig
    >>> from msbuildkit.core.remote import LocalNode
    >>> installer = MsBuildInstaller(InstallerConfig(selected_version="2022"))
    >>> bin_path = installer.perform_installation(LocalNode())
    >>> print(bin_path)
    C:\\Program Files (x86)\\Microsoft Visual Studio\\2022\\BuildTools\\MSBuild\\Current\\Bin
"""

import logging
import time
from typing import Callable, List, Optional

from msbuildkit.config import InstallerConfig
from msbuildkit.core.download import download_file
from msbuildkit.core.exceptions import InstallerExecutionError
from msbuildkit.core.interfaces import Node, RemoteFileHandle
from msbuildkit.core.platform import check_if_os_is_windows
from msbuildkit.installer.arguments import (
    INSTALL_PATH_FLAG,
    ensure_arguments,
    extract_install_path,
    split_arguments,
)
from msbuildkit.installer.config_cache import (
    config_file,
    mark_needs_modify,
    mark_updated,
    needs_modify,
    needs_update,
)
from msbuildkit.installer.paths import (
    build_tools_exe_path,
    build_tools_install_path,
    ms_build_bin_path,
)
from msbuildkit.installer.runner import InstallerRunner, SubprocessRunner, is_success
from msbuildkit.installer.versions import get_url_for_version
from msbuildkit.installer.vsconfig import (
    use_config_file,
    vsconfig_differs,
    vsconfig_file,
)

logger = logging.getLogger(__name__)

REQUIRED_ARGUMENTS = ["--quiet", "--wait", "--norestart", "--nocache"]
MSBUILD_WORKLOAD = "Microsoft.VisualStudio.Workload.MSBuildTools"


class MsBuildInstaller:
    """
    Installs, updates and modifies the Build Tools on a node.

    Attributes:
        config: Installer configuration for this provisioning attempt
        runner: Runs the downloaded installer
    """

    def __init__(
        self,
        config: InstallerConfig,
        runner: Optional[InstallerRunner] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.config = config
        self.runner = runner or SubprocessRunner()
        self.clock = clock

    def override_path(self) -> Optional[str]:
        """Install root override, --installPath in the arguments wins."""
        return (
            extract_install_path(self.config.additional_arguments)
            or self.config.install_path
        )

    def perform_installation(self, node: Node) -> Optional[RemoteFileHandle]:
        """
        Bring the Build Tools on a node up to date.

        Args:
            node: Node to provision

        Returns:
            The MSBuild bin folder, or None if the node is not Windows

        Raises:
            DownloadError: If the bootstrapper cannot be downloaded
            UnsupportedVersionError: If the version has no download URL
            InstallerExecutionError: If the installer fails
            MalformedConfigError: If config.json cannot be parsed
        """
        if not check_if_os_is_windows(node):
            logger.warning(
                f"Skipping {node.name}: Build Tools can only be installed on Windows"
            )
            return None

        version = self.config.selected_version
        override = self.override_path()
        install_root = build_tools_install_path(node, version, override)
        bin_path = ms_build_bin_path(node, version, override)

        installed = config_file(install_root).exists()
        if installed and vsconfig_differs(self.config.vsconfig, install_root):
            logger.info("Component configuration changed, scheduling modify")
            mark_needs_modify(install_root)

        now = self.clock()
        if (
            installed
            and not needs_update(install_root, now)
            and not needs_modify(install_root)
        ):
            logger.info(f"Build Tools {version} on {node.name} are up to date")
            return bin_path

        exe = build_tools_exe_path(install_root)
        download_file(get_url_for_version(version), exe)

        uses_config = use_config_file(self.config.vsconfig, install_root)
        modify = installed and uses_config and needs_modify(install_root)
        command = self.compose_command(exe, install_root, installed, uses_config, modify)

        exit_code = self.runner.run(node, command, cwd=install_root)
        if not is_success(exit_code):
            raise InstallerExecutionError(
                f"Build Tools installer failed on {node.name} with exit code {exit_code}",
                exit_code=exit_code,
            )
        if exit_code != 0:
            logger.warning(f"A reboot of {node.name} is required to finish the installation")

        mark_updated(install_root, now)
        logger.info(f"Build Tools {version} provisioned on {node.name}")
        return bin_path

    def compose_command(
        self,
        exe: RemoteFileHandle,
        install_root: RemoteFileHandle,
        installed: bool,
        uses_config: bool,
        modify: bool,
    ) -> List[str]:
        """
        Build the installer command line.

        Args:
            exe: Downloaded bootstrapper
            install_root: Install root
            installed: Whether the Build Tools are already installed
            uses_config: Whether a .vsconfig file is in effect
            modify: Whether to run a modify instead of an update

        Returns:
            Executable followed by its arguments
        """
        user_arguments = ensure_arguments(
            self.config.additional_arguments, REQUIRED_ARGUMENTS
        )
        user_tokens = split_arguments(user_arguments)

        command = [exe.remote]
        if installed:
            command.append("modify" if modify else "update")
        if INSTALL_PATH_FLAG not in user_tokens:
            command.extend([INSTALL_PATH_FLAG, install_root.remote])

        if not installed:
            if uses_config:
                command.extend(["--config", vsconfig_file(install_root).remote])
            else:
                command.extend(["--add", MSBUILD_WORKLOAD])
        elif modify:
            command.extend(["--config", vsconfig_file(install_root).remote])

        command.extend(user_tokens)
        return command
