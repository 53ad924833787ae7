"""
Shared utilities for CLI commands.
"""

import logging
from pathlib import Path

from msbuildkit.config import (
    DEFAULT_CONFIG_NAME,
    DEFAULT_VERSION,
    InstallerConfig,
    parse_config,
    read_vsconfig_file,
)

logger = logging.getLogger(__name__)


def load_installer_config(args) -> InstallerConfig:
    """
    Build the installer configuration from a config file and CLI overrides.

    The file given with --config is required; ./msbuildkit.yaml is used when
    present. Command-line options override file values.

    Args:
        args: Parsed command-line arguments

    Returns:
        InstallerConfig

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    config_file = args.config
    if config_file is None:
        default_config = Path.cwd() / DEFAULT_CONFIG_NAME
        if default_config.exists():
            config_file = default_config

    if config_file is not None:
        config = parse_config(config_file)
    else:
        logger.debug("No config file found, using defaults")
        config = InstallerConfig(selected_version=DEFAULT_VERSION)

    vsconfig = None
    if args.vsconfig_file is not None:
        vsconfig = read_vsconfig_file(args.vsconfig_file)

    return config.with_overrides(
        selected_version=args.build_tools_version,
        install_path=args.install_path,
        additional_arguments=args.additional_arguments,
        vsconfig=vsconfig,
    )
