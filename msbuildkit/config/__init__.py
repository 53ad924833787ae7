"""
Installer configuration for msbuildkit.
"""

from msbuildkit.config.parser import (
    DEFAULT_CONFIG_NAME,
    DEFAULT_VERSION,
    InstallerConfig,
    parse_config,
    parse_config_data,
    read_vsconfig_file,
)

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "DEFAULT_VERSION",
    "InstallerConfig",
    "parse_config",
    "parse_config_data",
    "read_vsconfig_file",
]
