"""Service facade — wires the engines to one store and enforces the read ceiling."""

import logging

from support_logging.criteria import Criteria
from support_logging.errors import ErrorKind, Result
from support_logging.ingest import IngestPath
from support_logging.models import LogRecord
from support_logging.mutation import MutationEngine
from support_logging.query import QueryEngine
from support_logging.store.base import RecordStore

logger = logging.getLogger(__name__)


class LoggingService:
    def __init__(self, store: RecordStore, max_limit: int = 100, time_func=None):
        self.store = store
        self.max_limit = max_limit
        self.query = QueryEngine(store)
        self.mutation = MutationEngine(store)
        self.ingest = IngestPath(store, time_func=time_func)

    async def search(self, criteria: Criteria, limit: int) -> Result:
        """Search unless `limit` exceeds the configured ceiling.

        An oversized request is rejected outright, never truncated.
        """
        if limit > self.max_limit:
            logger.info("Rejected search: limit %d exceeds max %d", limit, self.max_limit)
            return Result.fail(
                ErrorKind.LIMIT_EXCEEDED,
                f"limit {limit} exceeds the maximum of {self.max_limit}",
            )
        return await self.query.search(criteria, limit)

    async def remove_matching(self, criteria: Criteria) -> Result:
        return await self.mutation.remove_matching(criteria)

    async def accept(self, record: LogRecord) -> Result:
        return await self.ingest.accept(record)

    async def count(self) -> Result:
        return await self.query.count()
