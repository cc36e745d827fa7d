"""Tests for CLI utility helpers."""

# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
from unittest.mock import patch

import pytest

from localworker.utils.cli import check_cli_availability, split_args


def test_check_cli_availability_found():
    """Found tools return their path."""
    with patch("shutil.which", return_value="/usr/bin/java"):
        assert check_cli_availability("java") == "/usr/bin/java"


def test_check_cli_availability_missing_raises():
    """Missing tools raise when an error message is given."""
    with patch("shutil.which", return_value=None):
        assert check_cli_availability("java") is None
        with pytest.raises(FileNotFoundError, match="java not found"):
            check_cli_availability("java", "java not found")


def test_split_args():
    """Arguments are split shell-style."""
    assert split_args("-Xmx1g  '-Dname=a b' --flag") == ("-Xmx1g", "-Dname=a b", "--flag")
    assert split_args("") == ()
