# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Local worker factory state."""

from __future__ import annotations

from localworker.state.defaults import EnvironmentDefaults
from localworker.state.record import KEY, ManagementRecord
from localworker.state.worker_state import LocalWorkerState

__all__ = [
    "KEY",
    "EnvironmentDefaults",
    "LocalWorkerState",
    "ManagementRecord",
]
