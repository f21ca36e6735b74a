"""Common base for the database repositories."""

from __future__ import annotations

from typing import Any, Generic, Protocol, Sequence, TypeVar, Union


class Row(Protocol):
    """A result row, readable by column position or by column name."""

    def __getitem__(self, key: Union[int, str]) -> Any: ...


class DatabaseTransaction(Protocol):
    """An open transaction that runs SQL text and escapes string literals."""

    def execute(self, query: str) -> Sequence[Row]: ...

    def escape(self, text: str) -> str: ...


TransactionT = TypeVar("TransactionT", bound=DatabaseTransaction)


class DatabasePool(Protocol[TransactionT]):
    """A source of database transactions."""

    def create_transaction(self) -> TransactionT: ...


class Repository(Generic[TransactionT]):
    """Base for repositories that run their queries on a pool's transactions."""

    def __init__(self, database_pool: DatabasePool[TransactionT]) -> None:
        self._database_pool = database_pool

    def create_transaction(self) -> TransactionT:
        """Open a new transaction on the underlying pool."""
        return self._database_pool.create_transaction()