"""Unit of work: repositories sharing one transaction."""

from __future__ import annotations

import sqlite3
from typing import Any, Callable, Optional

__all__ = ["TransactionError", "UnitOfWork"]

RepositoryFactory = Callable[[sqlite3.Connection], Any]


class TransactionError(Exception):
    """Raised when a transaction is misused or cannot be finished."""


class UnitOfWork:
    """Hands out registered repositories bound to a shared transaction."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection
        self.tx: Optional[sqlite3.Connection] = None
        self.repositories: dict[str, RepositoryFactory] = {}

    def register(self, name: str, factory: RepositoryFactory) -> None:
        self.repositories[name] = factory

    def unregister(self, name: str) -> None:
        self.repositories.pop(name, None)

    def _begin(self) -> None:
        self.connection.execute("BEGIN")
        self.tx = self.connection

    def get_repository(self, name: str) -> Any:
        """Build repository ``name``, starting a transaction if none is open."""
        try:
            factory = self.repositories[name]
        except KeyError:
            raise KeyError(f"repository {name!r} is not registered") from None
        if self.tx is None:
            self._begin()
        return factory(self.tx)

    def do(self, fn: Callable[[UnitOfWork], Any]) -> None:
        """Run ``fn`` in a new transaction, committing or rolling back."""
        if self.tx is not None:
            raise TransactionError("transaction already started")
        self._begin()
        try:
            fn(self)
        except Exception as err:
            try:
                self.rollback()
            except TransactionError as rollback_err:
                raise TransactionError(
                    f"original error: {err}, rollback error: {rollback_err}"
                ) from err
            raise
        self.commit_or_rollback()

    def commit_or_rollback(self) -> None:
        """Commit the open transaction; roll it back if the commit fails."""
        if self.tx is None:
            raise TransactionError("transaction not started")
        try:
            self.tx.commit()
        except sqlite3.Error as err:
            try:
                self.rollback()
            except TransactionError as rollback_err:
                raise TransactionError(
                    f"commit error: {err}, rollback error: {rollback_err}"
                ) from err
            raise
        self.tx = None

    def rollback(self) -> None:
        """Roll back the open transaction."""
        if self.tx is None:
            raise TransactionError("transaction not started")
        try:
            self.tx.rollback()
        except sqlite3.Error as err:
            raise TransactionError(f"rollback failed: {err}") from err
        self.tx = None