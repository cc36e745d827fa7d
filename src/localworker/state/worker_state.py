# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""The persistent state of a local worker factory.

Settings are loaded lazily from the attached backend on first read and
written through to it on every change. Readers always see effective values:
unset or out-of-range raw values are replaced by their defaults.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence
from typing import TYPE_CHECKING

from localworker.logging import get_logger
from localworker.persistence.base import PersistenceError, PersistentContext
from localworker.state.defaults import (
    DEFAULT_EXTRA_ARGS,
    DEFAULT_LIFETIME,
    DEFAULT_MAX_RUNS,
    DEFAULT_PREFIX,
    DEFAULT_SLEEP_MS,
    DEFAULT_WAIT_SECONDS,
    MAX_REGISTRY_PORT,
    REGISTRY_PORT,
    EnvironmentDefaults,
)
from localworker.state.record import KEY, ManagementRecord

if TYPE_CHECKING:
    from collections.abc import Callable

logger = get_logger(__name__)


class LocalWorkerState:  # pylint: disable=too-many-instance-attributes,too-many-public-methods
    """Mutable settings for forking workflow run factories.

    Args:
        defaults (EnvironmentDefaults | None): Environment-derived fallbacks
            (read from the process environment when None)
        context (PersistentContext | None): Backend to attach right away
    """

    def __init__(
        self,
        defaults: EnvironmentDefaults | None = None,
        context: PersistentContext | None = None,
    ) -> None:
        self.defaults = defaults or EnvironmentDefaults.from_environment()
        self._lock = threading.RLock()
        self._ctx: PersistentContext | None = None
        self._loaded = False
        self._record = ManagementRecord.make_instance()
        if context is not None:
            self.attach_backend(context)

    # ------------------------------------------------------------------
    # Backend lifecycle

    def attach_backend(self, context: PersistentContext | Callable[[], PersistentContext]) -> bool:
        """Attach a persistence backend, or a factory that opens one.

        A factory that fails with :class:`PersistenceError` leaves the state
        without persistence; it keeps working on in-memory values only.

        Returns:
            bool: True if a backend is now attached
        """
        if not isinstance(context, PersistentContext):
            try:
                context = context()
            except PersistenceError as e:
                logger.warning("Persistence unavailable, settings will not be saved: %s", e)
                return False
        with self._lock:
            self._ctx = context
            self._loaded = False
        logger.debug("Attached %s backend", context.backend_name)
        return True

    @property
    def persistent(self) -> bool:
        """Whether a backend is attached."""
        return self._ctx is not None

    def load(self) -> None:
        """Load the stored record once; later calls do nothing."""
        with self._lock:
            ctx = self._ctx
            if self._loaded or ctx is None:
                return

            def act() -> None:
                stored = ctx.get_by_id(ManagementRecord, KEY)
                if stored is None:
                    return
                for name in ManagementRecord.SETTINGS:
                    setattr(self._record, name, getattr(stored, name))

            ctx.in_transaction(act)
            self._loaded = True
            logger.debug("Loaded local worker state from %s backend", ctx.backend_name)

    def _store(self) -> None:
        ctx = self._ctx
        if ctx is None:
            return

        def act() -> None:
            stored = ctx.get_by_id(ManagementRecord, KEY)
            if stored is None:
                stored = ctx.persist(ManagementRecord.make_instance())
            for name in ManagementRecord.SETTINGS:
                setattr(stored, name, getattr(self._record, name))

        ctx.in_transaction(act)
        self._loaded = True

    def _get(self, name: str):
        with self._lock:
            self.load()
            return getattr(self._record, name)

    def _set(self, name: str, value) -> None:
        with self._lock:
            # Stores write the whole record; load first so unread settings survive
            self.load()
            setattr(self._record, name, value)
            self._store()

    # ------------------------------------------------------------------
    # Settings

    @property
    def default_lifetime(self) -> int:
        """How long a workflow run should live by default, in minutes."""
        value = self._get("default_lifetime")
        return DEFAULT_LIFETIME if value < 1 else value

    @default_lifetime.setter
    def default_lifetime(self, value: int) -> None:
        self._set("default_lifetime", value)

    @property
    def max_runs(self) -> int:
        """Maximum number of runs to exist at once, including idle ones."""
        value = self._get("max_runs")
        return DEFAULT_MAX_RUNS if value < 1 else value

    @max_runs.setter
    def max_runs(self, value: int) -> None:
        self._set("max_runs", value)

    @property
    def factory_process_name_prefix(self) -> str:
        """Prefix to use for RMI names."""
        value = self._get("factory_process_name_prefix")
        return DEFAULT_PREFIX if value is None else value

    @factory_process_name_prefix.setter
    def factory_process_name_prefix(self, value: str | None) -> None:
        self._set("factory_process_name_prefix", value)

    @property
    def execute_workflow_script(self) -> str | None:
        """Full path of the script used to start running a workflow."""
        value = self._get("execute_workflow_script")
        return self.defaults.execute_workflow_script if value is None else value

    @execute_workflow_script.setter
    def execute_workflow_script(self, value: str | None) -> None:
        self._set("execute_workflow_script", value)

    @property
    def extra_args(self) -> tuple[str, ...]:
        """The extra arguments to pass to the subprocess."""
        value = self._get("extra_args")
        return DEFAULT_EXTRA_ARGS if value is None else tuple(value)

    @extra_args.setter
    def extra_args(self, value: Sequence[str] | None) -> None:
        if isinstance(value, str):
            msg = "extra_args must be a sequence of strings, not a single string"
            raise TypeError(msg)
        self._set("extra_args", None if value is None else list(value))

    @property
    def wait_seconds(self) -> int:
        """How long to wait for subprocess startup, in seconds."""
        value = self._get("wait_seconds")
        return DEFAULT_WAIT_SECONDS if value < 1 else value

    @wait_seconds.setter
    def wait_seconds(self, value: int) -> None:
        self._set("wait_seconds", value)

    @property
    def sleep_ms(self) -> int:
        """Polling interval to use during startup, in milliseconds."""
        value = self._get("sleep_ms")
        return DEFAULT_SLEEP_MS if value < 1 else value

    @sleep_ms.setter
    def sleep_ms(self, value: int) -> None:
        self._set("sleep_ms", value)

    @property
    def server_worker_jar(self) -> str:
        """Full path to the worker process's implementation JAR."""
        value = self._get("server_worker_jar")
        return self.defaults.server_worker_jar if value is None else value

    @server_worker_jar.setter
    def server_worker_jar(self, value: str | None) -> None:
        self._set("server_worker_jar", value)

    @property
    def java_binary(self) -> str:
        """Full path to the Java binary used to run the subprocess."""
        value = self._get("java_binary")
        return self.defaults.java_binary if value is None else value

    @java_binary.setter
    def java_binary(self, value: str | None) -> None:
        self._set("java_binary", value)

    @property
    def registry_host(self) -> str | None:
        value = self._get("registry_host")
        return value or None

    @registry_host.setter
    def registry_host(self, value: str | None) -> None:
        self._set("registry_host", "" if value is None else value)

    @property
    def registry_port(self) -> int:
        value = self._get("registry_port")
        return value if 1 <= value <= MAX_REGISTRY_PORT else REGISTRY_PORT

    @registry_port.setter
    def registry_port(self, value: int) -> None:
        if value < 1 or value > MAX_REGISTRY_PORT:
            value = REGISTRY_PORT
        self._set("registry_port", value)

    def effective_settings(self) -> dict[str, object]:
        """Return every setting's effective value, keyed by setting name."""
        with self._lock:
            return {name: getattr(self, name) for name in ManagementRecord.SETTINGS}
