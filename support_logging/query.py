"""Criteria search over the record store."""

import logging

from support_logging.criteria import Criteria
from support_logging.errors import ErrorKind, Result, StoreError
from support_logging.matcher import build_predicate
from support_logging.store.base import RecordStore

logger = logging.getLogger(__name__)


class QueryEngine:
    """Runs criteria searches. The result-count ceiling is the caller's concern."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    async def search(self, criteria: Criteria, limit: int) -> Result:
        """Return a Result holding at most `limit` matching records in store order."""
        if not isinstance(limit, int) or limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")

        logger.debug("Searching with %s (limit=%d)", criteria, limit)
        try:
            records = await self.store.scan(build_predicate(criteria), limit=limit)
        except StoreError as e:
            logger.error("Error fetching log records: %s", e, exc_info=True)
            return Result.fail(ErrorKind.SERVICE_FAULT, "record store unavailable", e)

        return Result.success(records[:limit])

    async def count(self) -> Result:
        """Return a Result holding the number of stored records."""
        try:
            total = await self.store.count()
        except StoreError as e:
            logger.error("Error counting log records: %s", e, exc_info=True)
            return Result.fail(ErrorKind.SERVICE_FAULT, "record store unavailable", e)
        return Result.success(total)
