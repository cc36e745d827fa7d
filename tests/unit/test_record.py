"""Tests for the stored management record."""

# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
from localworker.state.record import KEY, ManagementRecord


class TestManagementRecord:
    """Conversion between records and stored data."""

    def test_make_instance_uses_fixed_key(self):
        """New records carry the singleton key and no settings."""
        record = ManagementRecord.make_instance()
        assert record.ID == KEY == 32
        assert record.max_runs == 0
        assert record.factory_process_name_prefix is None

    def test_to_dict_lists_extra_args(self):
        """Extra args are stored as a plain list."""
        record = ManagementRecord(extra_args=("-a", "-b"))
        assert record.to_dict()["extra_args"] == ["-a", "-b"]

    def test_from_dict_ignores_unknown_keys(self):
        """Stored keys from other versions are dropped."""
        record = ManagementRecord.from_dict({"ID": KEY, "max_runs": 4, "colour": "blue"})
        assert record.max_runs == 4
        assert not hasattr(record, "colour")

    def test_from_dict_coerces_numeric_strings(self):
        """Integers stored as text are accepted."""
        record = ManagementRecord.from_dict({"wait_seconds": " 15 ", "sleep_ms": "x"})
        assert record.wait_seconds == 15
        assert record.sleep_ms == 0

    def test_from_dict_resets_wrong_shapes(self):
        """Values of the wrong type become "not configured"."""
        record = ManagementRecord.from_dict(
            {"registry_port": True, "java_binary": ["/bin/java"], "extra_args": {"a": 1}}
        )
        assert record.registry_port == 0
        assert record.java_binary is None
        assert record.extra_args is None

    def test_from_dict_stringifies_args(self):
        """Argument lists are normalized to strings."""
        record = ManagementRecord.from_dict({"extra_args": ["-n", 3]})
        assert record.extra_args == ["-n", "3"]

    def test_from_dict_defaults_key(self):
        """Missing keys fall back to the singleton key."""
        assert ManagementRecord.from_dict({}).ID == KEY
