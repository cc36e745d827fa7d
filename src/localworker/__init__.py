# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Persistent state of a local workflow worker factory."""

from localworker.__about__ import __version__

__all__ = ["__version__"]
