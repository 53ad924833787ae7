"""
Build Tools installer module for msbuildkit.

This module provides functionality for:
- Install path resolution
- Installer argument composition
- Version to download URL mapping
- config.json freshness records
- .vsconfig component-configuration staging
- Installer execution and provisioning orchestration
"""

from msbuildkit.installer.paths import (
    build_tools_install_path,
    ms_build_bin_path,
    build_tools_exe_path,
)
from msbuildkit.installer.arguments import (
    split_arguments,
    extract_install_path,
    ensure_arguments,
)
from msbuildkit.installer.versions import (
    VERSION_URLS,
    get_url_for_version,
    supported_versions,
)
from msbuildkit.installer.config_cache import (
    ConfigRecord,
    FRESHNESS_WINDOW_SECONDS,
    needs_update,
    needs_modify,
    read_config_record,
    write_config_record,
    mark_updated,
    mark_needs_modify,
)
from msbuildkit.installer.vsconfig import (
    use_config_file,
    vsconfig_differs,
)
from msbuildkit.installer.runner import (
    InstallerRunner,
    SubprocessRunner,
)
from msbuildkit.installer.provisioner import MsBuildInstaller

__all__ = [
    "build_tools_install_path",
    "ms_build_bin_path",
    "build_tools_exe_path",
    "split_arguments",
    "extract_install_path",
    "ensure_arguments",
    "VERSION_URLS",
    "get_url_for_version",
    "supported_versions",
    "ConfigRecord",
    "FRESHNESS_WINDOW_SECONDS",
    "needs_update",
    "needs_modify",
    "read_config_record",
    "write_config_record",
    "mark_updated",
    "mark_needs_modify",
    "use_config_file",
    "vsconfig_differs",
    "InstallerRunner",
    "SubprocessRunner",
    "MsBuildInstaller",
]
