# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Persistence backends for localworker state."""

from __future__ import annotations

from localworker.persistence.base import (
    BackendUnavailableError,
    PersistenceError,
    PersistentContext,
)
from localworker.persistence.memory import MemoryContext
from localworker.persistence.yaml_store import YamlContext, resolve_state_path

__all__ = [
    "BackendUnavailableError",
    "MemoryContext",
    "PersistenceError",
    "PersistentContext",
    "YamlContext",
    "resolve_state_path",
]
