# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT

"""Eyecandy UI abstractions for localworker CLI.

Rich-based rendering helpers for displaying worker factory settings.
"""

from localworker.eyecandy.table_renderer import TableRenderer

__all__ = ["TableRenderer"]
