# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Base classes and interfaces for persistence backends.

A backend stores records keyed by ``(type name, key)``. Work happens inside
``in_transaction``: records fetched with ``get_by_id`` or added with
``persist`` are live for the rest of the transaction, and whatever state
they are in when the action returns is what gets committed.
"""

from __future__ import annotations

import abc
import copy
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Protocol, TypeVar

from localworker.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

logger = get_logger(__name__)

T = TypeVar("T")


class PersistentRecord(Protocol):
    """What a backend needs from a record type."""

    ID: int

    def to_dict(self) -> dict[str, Any]: ...

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Any: ...


R = TypeVar("R", bound=PersistentRecord)


@dataclass
class _Transaction:
    """Working state of an open transaction."""

    data: dict[str, dict[int, dict[str, Any]]]
    live: dict[tuple[str, int], Any] = field(default_factory=dict)


class PersistentContext(abc.ABC):
    """Abstract base class for transactional record stores."""

    backend_name: ClassVar[str] = "abstract"

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._txn: _Transaction | None = None

    @abc.abstractmethod
    def _read_all(self) -> dict[str, dict[int, dict[str, Any]]]:
        """Return a private copy of every stored record, grouped by type name."""

    @abc.abstractmethod
    def _write_all(self, data: dict[str, dict[int, dict[str, Any]]]) -> None:
        """Replace the stored records with ``data``."""

    def in_transaction(self, action: Callable[[], T]) -> T:
        """Run ``action`` inside a transaction and return its result.

        Nested calls on the same thread join the outer transaction. Any
        exception raised by the action rolls the transaction back and is
        re-raised unchanged.
        """
        with self._lock:
            if self._txn is not None:
                return action()

            self._txn = _Transaction(data=self._read_all())
            try:
                result = action()
                self._commit(self._txn)
            except BaseException:
                logger.debug("Rolling back %s transaction", self.backend_name)
                raise
            finally:
                self._txn = None
            return result

    def get_by_id(self, record_type: type[R], key: int) -> R | None:
        """Fetch the live record of ``record_type`` with ``key``, or None."""
        txn = self._require_transaction()
        slot = (record_type.__name__, key)
        if slot in txn.live:
            return txn.live[slot]
        raw = txn.data.get(record_type.__name__, {}).get(key)
        if raw is None:
            return None
        record = record_type.from_dict(copy.deepcopy(raw))
        txn.live[slot] = record
        return record

    def persist(self, record: R) -> R:
        """Add a new record to the store and return it as a live record."""
        txn = self._require_transaction()
        slot = (type(record).__name__, record.ID)
        txn.live[slot] = record
        return record

    def _require_transaction(self) -> _Transaction:
        if self._txn is None:
            msg = f"No active transaction on {self.backend_name} backend"
            raise PersistenceError(msg)
        return self._txn

    def _commit(self, txn: _Transaction) -> None:
        for (type_name, key), record in txn.live.items():
            txn.data.setdefault(type_name, {})[key] = record.to_dict()
        if txn.live:
            self._write_all(txn.data)


class PersistenceError(Exception):
    """Base exception for persistence-related errors."""


class BackendUnavailableError(PersistenceError):
    """Raised when a backend cannot be opened."""
