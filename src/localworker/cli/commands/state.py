# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Worker factory state commands.

This module provides commands for showing and changing the persisted settings
used when forking workflow run factories.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import rich_click as click

from localworker.eyecandy.table_renderer import TableRenderer
from localworker.logging import logger
from localworker.persistence.yaml_store import YamlContext, resolve_state_path
from localworker.state.worker_state import LocalWorkerState
from localworker.utils.cli import split_args


@dataclass(frozen=True)
class SettingSpec:
    """How a setting is parsed from the command line and what it means."""

    name: str
    parse: Callable[[str], Any]
    unset_value: Any
    description: str


def _parse_int(value: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        msg = f"expected an integer, got {value!r}"
        raise click.BadParameter(msg, param_hint="VALUE") from e


SETTINGS: dict[str, SettingSpec] = {
    spec.name: spec
    for spec in (
        SettingSpec("default_lifetime", _parse_int, 0, "Default run lifetime, in minutes"),
        SettingSpec("max_runs", _parse_int, 0, "Maximum number of runs existing at once"),
        SettingSpec("factory_process_name_prefix", str, None, "Prefix for RMI names"),
        SettingSpec("execute_workflow_script", str, None, "Script that runs a workflow"),
        SettingSpec("extra_args", split_args, None, "Extra subprocess arguments"),
        SettingSpec("wait_seconds", _parse_int, 0, "Subprocess startup wait, in seconds"),
        SettingSpec("sleep_ms", _parse_int, 0, "Startup polling interval, in milliseconds"),
        SettingSpec("server_worker_jar", str, None, "Worker implementation JAR"),
        SettingSpec("java_binary", str, None, "Java binary for the subprocess"),
        SettingSpec("registry_host", str, None, "RMI registry host"),
        SettingSpec("registry_port", _parse_int, 0, "RMI registry port"),
    )
}

_store_option = click.option(
    "--store",
    "-s",
    type=click.Path(dir_okay=False),
    default=None,
    help="State file (defaults to $LOCALWORKER_STATE or ~/.localworker/state.yaml)",
)


def _open_state(store: str | None) -> LocalWorkerState:
    """Create the worker state backed by the YAML state file, when readable."""
    worker_state = LocalWorkerState()
    worker_state.attach_backend(lambda: YamlContext(store))
    return worker_state


def _open_writable_state(store: str | None) -> LocalWorkerState:
    """Like _open_state, but refuse to continue when changes cannot be saved."""
    worker_state = _open_state(store)
    if not worker_state.persistent:
        msg = f"State file {resolve_state_path(store)} is unreadable; nothing was saved"
        raise click.ClickException(msg)
    return worker_state


def _show(worker_state: LocalWorkerState, store: str | None) -> None:
    title = "Local Worker State"
    if worker_state.persistent:
        title += f" ({resolve_state_path(store)})"
    TableRenderer().render_key_values(title, worker_state.effective_settings())


@click.group()
def state() -> None:
    """Show and change local worker factory settings."""


@state.command()
@_store_option
def show(store: str | None) -> None:
    """Show the effective settings."""
    _show(_open_state(store), store)


@state.command(name="set")
@click.argument("field", type=click.Choice(list(SETTINGS)))
@click.argument("value")
@_store_option
def set_cmd(field: str, value: str, store: str | None) -> None:
    """Set FIELD to VALUE and save it."""
    spec = SETTINGS[field]
    parsed = spec.parse(value)
    worker_state = _open_writable_state(store)
    setattr(worker_state, field, parsed)
    logger.info("✅ %s set to %r", field, getattr(worker_state, field))


@state.command()
@click.argument("field", type=click.Choice(list(SETTINGS)))
@_store_option
def unset(field: str, store: str | None) -> None:
    """Clear FIELD so that its default applies."""
    worker_state = _open_writable_state(store)
    setattr(worker_state, field, SETTINGS[field].unset_value)
    logger.info("✅ %s reset, now %r", field, getattr(worker_state, field))


@state.command()
def fields() -> None:
    """List the settable fields."""
    TableRenderer().render_list(
        ["Field", "Description"],
        [{"Field": spec.name, "Description": spec.description} for spec in SETTINGS.values()],
    )
