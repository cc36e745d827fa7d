# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Persisted form of the local worker factory settings."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, ClassVar

# Fixed key of the single management record
KEY = 32


@dataclass
class ManagementRecord:  # pylint: disable=too-many-instance-attributes
    """Raw stored settings; zero, None and empty values mean "not configured"."""

    ID: int = KEY
    default_lifetime: int = 0
    max_runs: int = 0
    factory_process_name_prefix: str | None = None
    execute_workflow_script: str | None = None
    extra_args: list[str] | None = None
    wait_seconds: int = 0
    sleep_ms: int = 0
    server_worker_jar: str | None = None
    java_binary: str | None = None
    registry_host: str | None = None
    registry_port: int = 0

    SETTINGS: ClassVar[tuple[str, ...]] = (
        "default_lifetime",
        "max_runs",
        "factory_process_name_prefix",
        "execute_workflow_script",
        "extra_args",
        "wait_seconds",
        "sleep_ms",
        "server_worker_jar",
        "java_binary",
        "registry_host",
        "registry_port",
    )

    @classmethod
    def make_instance(cls) -> ManagementRecord:
        """Create an empty record carrying the fixed key."""
        return cls(ID=KEY)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        if data["extra_args"] is not None:
            data["extra_args"] = list(data["extra_args"])
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ManagementRecord:
        """Build a record from stored data.

        Unknown keys are ignored and values of the wrong shape are reset to
        their "not configured" value, so readers fall back to defaults.
        """
        record = cls()
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            if f.name == "extra_args":
                value = _as_args(value)
            elif f.default == 0:
                value = _as_int(value)
            elif value is not None and not isinstance(value, str):
                value = None
            setattr(record, f.name, value)
        record.ID = _as_int(data.get("ID", KEY)) or KEY
        return record


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return 0


def _as_args(value: Any) -> list[str] | None:
    if not isinstance(value, (list, tuple)):
        return None
    return [str(item) for item in value]
