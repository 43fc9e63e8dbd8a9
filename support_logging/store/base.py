"""Record store contract consumed by the engines."""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from support_logging.models import LogRecord

Predicate = Callable[[LogRecord], bool]


class RecordStore(ABC):
    """Awaitable record storage.

    Implementations keep insertion order, serialize their own operations so
    that scan() and delete_where() each observe a single snapshot, and raise
    StoreError for every backend failure.
    """

    @abstractmethod
    async def insert(self, record: LogRecord) -> None:
        ...

    @abstractmethod
    async def scan(self, predicate: Predicate,
                   limit: Optional[int] = None) -> list[LogRecord]:
        """Return matching records in insertion order, at most `limit` of them."""

    @abstractmethod
    async def delete_where(self, predicate: Predicate) -> int:
        """Remove every matching record and return how many were removed."""

    @abstractmethod
    async def count(self) -> int:
        ...
