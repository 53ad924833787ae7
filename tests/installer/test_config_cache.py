"""
Unit tests for the config.json freshness record.
"""

import json
import time

import pytest
from unittest.mock import Mock

from msbuildkit.core.exceptions import ConfigRecordNotFoundError, MalformedConfigError
from msbuildkit.installer.config_cache import (
    FRESHNESS_WINDOW_SECONDS,
    ConfigRecord,
    config_file,
    mark_needs_modify,
    mark_updated,
    needs_modify,
    needs_update,
    read_config_record,
    write_config_record,
)

NOW = 1_700_000_000


def write_raw(install_root, text):
    install_root.node.put_text(config_file(install_root).remote, text)


class TestConfigRecord:
    """Tests for ConfigRecord dataclass."""

    def test_to_dict(self):
        """Test JSON field names."""
        assert ConfigRecord(123, True).to_dict() == {"lastUpdated": 123, "needsModify": True}

    def test_from_dict_defaults_needs_modify(self):
        """Test absent needsModify reads as False."""
        assert ConfigRecord.from_dict({"lastUpdated": 5}) == ConfigRecord(5, False)

    def test_from_dict_requires_last_updated(self):
        """Test absent lastUpdated is malformed."""
        with pytest.raises(MalformedConfigError, match="lastUpdated"):
            ConfigRecord.from_dict({"needsModify": True})


class TestNeedsUpdate:
    """Tests for needs_update."""

    def test_missing_file_needs_update(self, install_root):
        """Test missing config.json requests an update."""
        assert needs_update(install_root, NOW) is True

    def test_within_24_hours(self, install_root):
        """Test a recent record is fresh."""
        write_raw(install_root, json.dumps({"lastUpdated": int(time.time())}))

        assert needs_update(install_root) is False

    def test_more_than_24_hours(self, install_root):
        """Test an old record is stale."""
        write_raw(install_root, '{"lastUpdated":1619300929}')

        assert needs_update(install_root) is True

    def test_exact_window_is_fresh(self, install_root):
        """Test the boundary itself does not trigger an update."""
        write_raw(install_root, json.dumps({"lastUpdated": NOW - FRESHNESS_WINDOW_SECONDS}))

        assert needs_update(install_root, NOW) is False
        assert needs_update(install_root, NOW + 1) is True

    def test_malformed_json_raises(self, install_root):
        """Test invalid JSON is a hard failure."""
        write_raw(install_root, "{not json")

        with pytest.raises(MalformedConfigError, match="Invalid JSON"):
            needs_update(install_root, NOW)

    def test_non_object_raises(self, install_root):
        """Test a JSON array is malformed."""
        write_raw(install_root, "[1, 2]")

        with pytest.raises(MalformedConfigError, match="JSON object"):
            needs_update(install_root, NOW)

    def test_missing_last_updated_raises(self, install_root):
        """Test a record without lastUpdated is malformed."""
        write_raw(install_root, '{"needsModify": false}')

        with pytest.raises(MalformedConfigError, match="lastUpdated"):
            needs_update(install_root, NOW)

    def test_missing_last_updated_message_matches_record(self, install_root):
        """Test needs_update and from_dict report a missing lastUpdated alike."""
        write_raw(install_root, '{"needsModify": false}')

        with pytest.raises(MalformedConfigError) as from_check:
            needs_update(install_root, NOW)
        with pytest.raises(MalformedConfigError) as from_record:
            ConfigRecord.from_dict({"needsModify": False})

        assert str(from_check.value) == str(from_record.value)

    @pytest.mark.parametrize("value", ['"1619300929"', "true", "1.5", "null"])
    def test_wrong_type_raises(self, install_root, value):
        """Test non-integer lastUpdated is malformed."""
        write_raw(install_root, '{"lastUpdated": %s}' % value)

        with pytest.raises(MalformedConfigError):
            needs_update(install_root, NOW)

    def test_read_error_propagates(self):
        """Test transport errors are not masked."""
        root = Mock()
        root.child.return_value.exists.return_value = True
        root.child.return_value.read_text.side_effect = OSError("unreachable")

        with pytest.raises(OSError, match="unreachable"):
            needs_update(root, NOW)

    def test_reads_config_json_child(self):
        """Test the record is read from <root>/config.json."""
        root = Mock()
        root.child.return_value.exists.return_value = False

        needs_update(root, NOW)

        root.child.assert_called_once_with("config.json")


class TestNeedsModify:
    """Tests for needs_modify."""

    def test_true(self, install_root):
        """Test needsModify true."""
        write_raw(install_root, '{"needsModify":true}')

        assert needs_modify(install_root) is True

    def test_false(self, install_root):
        """Test needsModify false."""
        write_raw(install_root, '{"lastUpdated": 1, "needsModify": false}')

        assert needs_modify(install_root) is False

    def test_absent_defaults_to_false(self, install_root):
        """Test missing key reads as False."""
        write_raw(install_root, '{"lastUpdated": 1}')

        assert needs_modify(install_root) is False

    def test_missing_file_raises(self, install_root):
        """Test missing config.json is an error for this check."""
        with pytest.raises(ConfigRecordNotFoundError):
            needs_modify(install_root)

    def test_malformed_json_raises(self, install_root):
        """Test invalid JSON is a hard failure."""
        write_raw(install_root, "")

        with pytest.raises(MalformedConfigError):
            needs_modify(install_root)

    def test_non_boolean_raises(self, install_root):
        """Test needsModify must be a boolean."""
        write_raw(install_root, '{"needsModify": "yes"}')

        with pytest.raises(MalformedConfigError, match="needsModify"):
            needs_modify(install_root)

    def test_read_only(self, install_root):
        """Test the checks never write."""
        write_raw(install_root, '{"lastUpdated": 1, "needsModify": true}')

        needs_modify(install_root)
        needs_update(install_root, NOW)

        assert install_root.node.writes == []


class TestRecordWriting:
    """Tests for writing the record after provisioning."""

    def test_write_and_read(self, install_root):
        """Test written record reads back."""
        write_config_record(install_root, ConfigRecord(NOW, True))

        assert read_config_record(install_root) == ConfigRecord(NOW, True)
        assert json.loads(install_root.node.text(config_file(install_root).remote)) == {
            "lastUpdated": NOW,
            "needsModify": True,
        }

    def test_read_missing_returns_none(self, install_root):
        """Test missing record reads as None."""
        assert read_config_record(install_root) is None

    def test_mark_updated_creates_record(self, install_root):
        """Test first successful install writes a record."""
        record = mark_updated(install_root, NOW)

        assert record == ConfigRecord(NOW, False)
        assert needs_update(install_root, NOW) is False

    def test_mark_updated_clears_needs_modify(self, install_root):
        """Test a successful cycle resets needsModify."""
        write_config_record(install_root, ConfigRecord(NOW - 100, True))

        mark_updated(install_root, NOW)

        assert needs_modify(install_root) is False
        assert read_config_record(install_root).last_updated == NOW

    def test_mark_updated_never_moves_backwards(self, install_root):
        """Test lastUpdated is monotonically non-decreasing."""
        write_config_record(install_root, ConfigRecord(NOW, False))

        record = mark_updated(install_root, NOW - 3600)

        assert record.last_updated == NOW

    def test_mark_needs_modify_keeps_last_updated(self, install_root):
        """Test requesting a modify does not refresh the record."""
        write_config_record(install_root, ConfigRecord(NOW - 10, False))

        mark_needs_modify(install_root)

        assert read_config_record(install_root) == ConfigRecord(NOW - 10, True)

    def test_mark_needs_modify_without_record_raises(self, install_root):
        """Test a modify can only be requested for an existing install."""
        with pytest.raises(ConfigRecordNotFoundError):
            mark_needs_modify(install_root)
