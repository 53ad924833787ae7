"""
Freshness record of a Build Tools installation.

Each install root carries a small `config.json` side-car:

    {"lastUpdated": 1700000000, "needsModify": false}

`lastUpdated` is the unix time of the last successful install/update cycle
and only ever moves forward. `needsModify` asks the next provisioning attempt
to run the installer in "modify" mode against the staged .vsconfig.

A record that cannot be parsed is a hard failure. Treating it as stale or
as "no modify needed" would silently skip provisioning.
"""

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

from msbuildkit.core.exceptions import ConfigRecordNotFoundError, MalformedConfigError
from msbuildkit.core.interfaces import RemoteFileHandle

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"
FRESHNESS_WINDOW_SECONDS = 24 * 60 * 60


@dataclass(frozen=True)
class ConfigRecord:
    """
    Persisted freshness record.

    Attributes:
        last_updated: Unix seconds of the last successful install/update
        needs_modify: Whether a modify run against .vsconfig is pending
    """

    last_updated: int
    needs_modify: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "lastUpdated": self.last_updated,
            "needsModify": self.needs_modify,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConfigRecord":
        """
        Build a record from a parsed config.json document.

        Raises:
            MalformedConfigError: If lastUpdated is missing or a field has the wrong type
        """
        return cls(
            last_updated=_last_updated(data),
            needs_modify=_needs_modify(data),
        )


def config_file(install_root: RemoteFileHandle) -> RemoteFileHandle:
    """Get the config.json handle for an install root."""
    return install_root.child(CONFIG_FILE_NAME)


def _load(target: RemoteFileHandle) -> Dict[str, Any]:
    text = target.read_text()
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedConfigError(f"Invalid JSON in {target.remote}: {e}") from e
    if not isinstance(data, dict):
        raise MalformedConfigError(
            f"Expected a JSON object in {target.remote}, got {type(data).__name__}"
        )
    return data


def _last_updated(data: Dict[str, Any]) -> int:
    if "lastUpdated" not in data:
        raise MalformedConfigError("config.json is missing 'lastUpdated'")
    value = data["lastUpdated"]
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedConfigError(
            f"'lastUpdated' must be an integer, got {value!r}"
        )
    return value


def _needs_modify(data: Dict[str, Any]) -> bool:
    value = data.get("needsModify", False)
    if not isinstance(value, bool):
        raise MalformedConfigError(f"'needsModify' must be a boolean, got {value!r}")
    return value


def needs_update(install_root: RemoteFileHandle, now: Optional[float] = None) -> bool:
    """
    Check whether an install root is due for an install/update run.

    Args:
        install_root: Build Tools install root
        now: Current unix time (default: time.time())

    Returns:
        True if config.json is missing or older than the freshness window

    Raises:
        MalformedConfigError: If config.json exists but cannot be parsed
    """
    target = config_file(install_root)
    if not target.exists():
        logger.debug(f"No config record at {target.remote}, update needed")
        return True

    data = _load(target)
    last_updated = _last_updated(data)

    current = int(time.time() if now is None else now)
    return current - last_updated > FRESHNESS_WINDOW_SECONDS


def needs_modify(install_root: RemoteFileHandle) -> bool:
    """
    Check whether a modify run is pending for an install root.

    Only called once an installation is known to exist.

    Args:
        install_root: Build Tools install root

    Returns:
        The persisted needsModify flag (False when absent)

    Raises:
        ConfigRecordNotFoundError: If config.json does not exist
        MalformedConfigError: If config.json cannot be parsed
    """
    target = config_file(install_root)
    if not target.exists():
        raise ConfigRecordNotFoundError(target.remote)
    return _needs_modify(_load(target))


def read_config_record(install_root: RemoteFileHandle) -> Optional[ConfigRecord]:
    """
    Read the freshness record.

    Returns:
        The record, or None if config.json does not exist

    Raises:
        MalformedConfigError: If config.json cannot be parsed
    """
    target = config_file(install_root)
    if not target.exists():
        return None
    return ConfigRecord.from_dict(_load(target))


def write_config_record(install_root: RemoteFileHandle, record: ConfigRecord) -> None:
    """Persist the freshness record as UTF-8 JSON."""
    target = config_file(install_root)
    target.write_text(json.dumps(record.to_dict()), "UTF-8")
    logger.debug(f"Wrote config record to {target.remote}: {record.to_dict()}")


def mark_updated(
    install_root: RemoteFileHandle, now: Optional[float] = None
) -> ConfigRecord:
    """
    Record a successful install/update cycle.

    Advances lastUpdated (never backwards) and clears needsModify.

    Returns:
        The record written
    """
    current = int(time.time() if now is None else now)
    previous = read_config_record(install_root)
    if previous is not None and previous.last_updated > current:
        logger.warning(
            f"Clock is behind the recorded update time {previous.last_updated}, "
            f"keeping it"
        )
        current = previous.last_updated

    record = ConfigRecord(last_updated=current, needs_modify=False)
    write_config_record(install_root, record)
    return record


def mark_needs_modify(install_root: RemoteFileHandle) -> ConfigRecord:
    """
    Request a modify run on the next provisioning attempt.

    Raises:
        ConfigRecordNotFoundError: If config.json does not exist
        MalformedConfigError: If config.json cannot be parsed
    """
    previous = read_config_record(install_root)
    if previous is None:
        raise ConfigRecordNotFoundError(config_file(install_root).remote)

    record = ConfigRecord(last_updated=previous.last_updated, needs_modify=True)
    write_config_record(install_root, record)
    return record
