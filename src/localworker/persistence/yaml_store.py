# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""YAML-backed persistence backend.

Supports default path at ~/.localworker/state.yaml and override via the
LOCALWORKER_STATE environment variable. Records live under a top-level
``records`` mapping keyed by record type name and then by record key.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from localworker.logging import get_logger
from localworker.persistence.base import BackendUnavailableError, PersistentContext

logger = get_logger(__name__)

DEFAULT_STATE_RELATIVE = Path(".localworker/state.yaml")
ENV_OVERRIDE = "LOCALWORKER_STATE"


def resolve_state_path(path: str | Path | None = None) -> Path:
    """Resolve the state file path honoring the environment override."""
    if path:
        return Path(path).expanduser()
    env_path = os.getenv(ENV_OVERRIDE)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / DEFAULT_STATE_RELATIVE


def _is_record(key: Any, value: Any) -> bool:
    """Skip entries that were not written by this backend."""
    return isinstance(key, int) and not isinstance(key, bool) and isinstance(value, dict)


class YamlContext(PersistentContext):
    """Store records in a single YAML file, rewritten on every commit.

    Args:
        path (str | Path | None): State file location; resolved with
            :func:`resolve_state_path` when omitted.

    Raises:
        BackendUnavailableError: If an existing state file cannot be parsed
    """

    backend_name = "yaml"

    def __init__(self, path: str | Path | None = None) -> None:
        super().__init__()
        self.path = resolve_state_path(path)
        # Fail on open rather than on first transaction
        self._read_all()

    def _read_all(self) -> dict[str, dict[int, dict[str, Any]]]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            msg = f"Failed to read state file {self.path}: {e}"
            raise BackendUnavailableError(msg) from e
        if not isinstance(data, dict):
            msg = f"State file {self.path} must contain a mapping, got {type(data).__name__}"
            raise BackendUnavailableError(msg)
        records = data.get("records") or {}
        if not isinstance(records, dict):
            return {}
        return {
            str(type_name): {
                key: dict(value) for key, value in by_key.items() if _is_record(key, value)
            }
            for type_name, by_key in records.items()
            if isinstance(by_key, dict)
        }

    def _write_all(self, data: dict[str, dict[int, dict[str, Any]]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            yaml.safe_dump({"records": data}, f, sort_keys=True)
        os.replace(tmp_path, self.path)
        logger.debug("Wrote state file %s", self.path)
