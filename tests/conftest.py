"""Test configuration and global fixtures for localworker tests."""

# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
import pytest

from localworker.persistence.base import BackendUnavailableError, PersistenceError
from localworker.persistence.memory import MemoryContext
from localworker.state.defaults import EnvironmentDefaults


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep tests away from the real home directory and ambient settings."""
    for var in (
        "LOCALWORKER_STATE",
        "LOCALWORKER_LOG_LEVEL",
        "LOCALWORKER_EXECUTE_SCRIPT",
        "LOCALWORKER_WORKER_JAR",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("JAVA_HOME", "/opt/jdk")


@pytest.fixture
def env_defaults():
    """Fixed environment-derived defaults."""
    return EnvironmentDefaults(
        execute_workflow_script="/opt/taverna/executeWorkflow.sh",
        server_worker_jar="/opt/taverna/util/server.worker.jar",
        java_binary="/opt/jdk/bin/java",
    )


@pytest.fixture
def memory_context():
    """Empty in-memory backend."""
    return MemoryContext()


@pytest.fixture
def counting_context():
    """In-memory backend that counts transactions."""
    return CountingContext()


class CountingContext(MemoryContext):
    """MemoryContext recording how many transactions were opened."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.transactions = 0

    def in_transaction(self, action):
        self.transactions += 1
        return super().in_transaction(action)


class FailingContext(MemoryContext):
    """Backend whose transactions always fail."""

    def in_transaction(self, action):
        msg = "disk on fire"
        raise PersistenceError(msg)


@pytest.fixture
def failing_context():
    """Backend that raises on every transaction."""
    return FailingContext()


@pytest.fixture
def unavailable_backend():
    """Backend factory that cannot open its store."""

    def _open():
        msg = "cannot open state store"
        raise BackendUnavailableError(msg)

    return _open
