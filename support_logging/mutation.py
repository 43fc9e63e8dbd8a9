"""Criteria-driven bulk deletion."""

import logging

from support_logging.criteria import Criteria
from support_logging.errors import ErrorKind, Result, StoreError
from support_logging.matcher import build_predicate
from support_logging.store.base import RecordStore

logger = logging.getLogger(__name__)


class MutationEngine:
    """Removes every record matching a Criteria.

    There is no ceiling here: a capped delete would leave part of the
    matching set behind.
    """

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    async def remove_matching(self, criteria: Criteria) -> Result:
        logger.debug("Removing records matching %s", criteria)
        try:
            removed = await self.store.delete_where(build_predicate(criteria))
        except StoreError as e:
            logger.error("Error removing log records: %s", e, exc_info=True)
            return Result.fail(ErrorKind.SERVICE_FAULT, "record store unavailable", e)

        logger.info("Removed %d log records", removed)
        return Result.success(removed)
