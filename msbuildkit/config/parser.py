"""YAML configuration parser for msbuildkit.

This module provides parsing and validation for msbuildkit.yaml files:

    selected_version: "2022"
    install_path: D:\\BuildTools
    additional_arguments: --locale en-US
    vsconfig_file: components.vsconfig
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

import yaml

from msbuildkit.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "msbuildkit.yaml"
DEFAULT_VERSION = "2022"

_KNOWN_KEYS = {
    "selected_version",
    "install_path",
    "additional_arguments",
    "vsconfig",
    "vsconfig_file",
}


@dataclass(frozen=True)
class InstallerConfig:
    """Configuration of one provisioning attempt."""

    selected_version: str
    install_path: Optional[str] = None
    additional_arguments: Optional[str] = None
    vsconfig: Optional[str] = None  # raw .vsconfig content

    def __post_init__(self):
        if not isinstance(self.selected_version, str) or not self.selected_version:
            raise ConfigurationError("selected_version must be a non-empty string")
        for name in ("install_path", "additional_arguments", "vsconfig"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(f"{name} must be a string")

    def with_overrides(self, **overrides) -> "InstallerConfig":
        """Copy with the given non-None fields replaced."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


def parse_config(config_path: Path) -> InstallerConfig:
    """
    Parse an msbuildkit.yaml configuration file.

    Args:
        config_path: Path to msbuildkit.yaml

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigurationError: If configuration is invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax: {e}") from e

    if data is None:
        raise ConfigurationError("Configuration file is empty")

    logger.debug(f"Loaded configuration from {config_path}")
    return parse_config_data(data, base_dir=config_path.parent)


def parse_config_data(data: dict, base_dir: Optional[Path] = None) -> InstallerConfig:
    """
    Validate a configuration mapping.

    Args:
        data: Parsed YAML document
        base_dir: Directory relative vsconfig_file paths are resolved against

    Returns:
        InstallerConfig

    Raises:
        ConfigurationError: If configuration is invalid
    """
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration must be a mapping")

    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        logger.warning(f"Ignoring unknown configuration keys: {', '.join(sorted(unknown))}")

    if "vsconfig" in data and "vsconfig_file" in data:
        raise ConfigurationError("Use either vsconfig or vsconfig_file, not both")

    version = data.get("selected_version", DEFAULT_VERSION)
    # YAML reads an unquoted 2022 as an integer
    if isinstance(version, int) and not isinstance(version, bool):
        version = str(version)

    vsconfig = data.get("vsconfig")
    if data.get("vsconfig_file"):
        vsconfig = read_vsconfig_file(Path(data["vsconfig_file"]), base_dir)

    return InstallerConfig(
        selected_version=version,
        install_path=data.get("install_path"),
        additional_arguments=data.get("additional_arguments"),
        vsconfig=vsconfig,
    )


def read_vsconfig_file(path: Path, base_dir: Optional[Path] = None) -> str:
    """
    Read .vsconfig content from a local file.

    Raises:
        ConfigurationError: If the file cannot be read
    """
    if base_dir is not None and not path.is_absolute():
        path = base_dir / path
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read vsconfig file {path}: {e}") from e
