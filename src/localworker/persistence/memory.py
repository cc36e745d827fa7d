# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""In-process persistence backend."""

from __future__ import annotations

import copy
from typing import Any

from localworker.persistence.base import PersistentContext


class MemoryContext(PersistentContext):
    """Keep records in a dict; transactions swap in a working copy on commit."""

    backend_name = "memory"

    def __init__(self, records: dict[str, dict[int, dict[str, Any]]] | None = None) -> None:
        super().__init__()
        self._records: dict[str, dict[int, dict[str, Any]]] = copy.deepcopy(records or {})

    def _read_all(self) -> dict[str, dict[int, dict[str, Any]]]:
        return copy.deepcopy(self._records)

    def _write_all(self, data: dict[str, dict[int, dict[str, Any]]]) -> None:
        self._records = copy.deepcopy(data)

    def snapshot(self) -> dict[str, dict[int, dict[str, Any]]]:
        """Return a copy of the committed records."""
        with self._lock:
            return copy.deepcopy(self._records)
