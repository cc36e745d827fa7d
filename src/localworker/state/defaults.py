# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Fallback values for local worker factory settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from localworker.utils.cli import check_cli_availability

# Resource, relative to the package, implementing the forked worker subprocess
SUBPROCESS_IMPLEMENTATION_JAR = "util/server.worker.jar"

DEFAULT_LIFETIME = 20
DEFAULT_MAX_RUNS = 5
DEFAULT_PREFIX = "ForkRunFactory."
DEFAULT_EXTRA_ARGS: tuple[str, ...] = ()
DEFAULT_WAIT_SECONDS = 40
DEFAULT_SLEEP_MS = 1000

# Well-known RMI registry port
REGISTRY_PORT = 1099
MAX_REGISTRY_PORT = 65534

EXECUTE_SCRIPT_ENV = "LOCALWORKER_EXECUTE_SCRIPT"
WORKER_JAR_ENV = "LOCALWORKER_WORKER_JAR"
JAVA_HOME_ENV = "JAVA_HOME"

_PACKAGE_ROOT = Path(__file__).resolve().parent.parent


def _default_java_binary(environ: Mapping[str, str]) -> str:
    java_home = environ.get(JAVA_HOME_ENV)
    if java_home:
        return str(Path(java_home) / "bin" / "java")
    return check_cli_availability("java") or "java"


@dataclass(frozen=True)
class EnvironmentDefaults:
    """Defaults taken from the process environment, read once at startup."""

    execute_workflow_script: str | None
    server_worker_jar: str
    java_binary: str

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> EnvironmentDefaults:
        """Build defaults from ``environ`` (``os.environ`` when omitted)."""
        env = os.environ if environ is None else environ
        return cls(
            execute_workflow_script=env.get(EXECUTE_SCRIPT_ENV) or None,
            server_worker_jar=env.get(WORKER_JAR_ENV)
            or str(_PACKAGE_ROOT / SUBPROCESS_IMPLEMENTATION_JAR),
            java_binary=_default_java_binary(env),
        )
