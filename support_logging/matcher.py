"""Criteria matching — pure predicate over log records."""

from typing import Callable

from support_logging.criteria import Criteria
from support_logging.models import LogRecord


def matches(record: LogRecord, criteria: Criteria) -> bool:
    """True if record satisfies every constrained dimension of criteria.

    Time bounds are inclusive. Within levels, origin services, labels and
    keywords any one supplied value is enough; across dimensions all must hold.
    Keywords are literal, case-sensitive substrings of the message.
    """
    if criteria.start is not None and record.timestamp < criteria.start:
        return False
    if criteria.end is not None and record.timestamp > criteria.end:
        return False
    if criteria.levels and record.level not in criteria.levels:
        return False
    if criteria.origin_services and record.origin_service not in criteria.origin_services:
        return False
    if criteria.labels and criteria.labels.isdisjoint(record.labels):
        return False
    if criteria.message_keywords and not any(
        keyword in record.message for keyword in criteria.message_keywords
    ):
        return False
    return True


def build_predicate(criteria: Criteria) -> Callable[[LogRecord], bool]:
    """Bind criteria into a one-argument predicate for a record store."""
    if criteria.is_unconstrained:
        return lambda record: True

    def predicate(record: LogRecord) -> bool:
        return matches(record, criteria)

    return predicate
