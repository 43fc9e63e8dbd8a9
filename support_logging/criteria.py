"""Immutable filter specification for searches and bulk deletes.

Every dimension is optional. Multi-valued dimensions are normalized at
construction: an empty collection is stored as None, so an explicitly empty
filter means "match any" exactly like an absent one. It never means "match
none". Callers that expect the latter must skip the call themselves.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional

from support_logging.models import LogLevel


def _normalize(values) -> Optional[frozenset]:
    if values is None:
        return None
    if isinstance(values, (str, Enum)):
        values = (values,)
    result = frozenset(values)
    return result or None


@dataclass(frozen=True)
class Criteria:
    start: Optional[int] = None
    end: Optional[int] = None
    levels: Optional[frozenset] = None
    origin_services: Optional[frozenset] = None
    labels: Optional[frozenset] = None
    message_keywords: Optional[frozenset] = None

    def __post_init__(self):
        levels = _normalize(self.levels)
        if levels is not None:
            levels = frozenset(LogLevel.parse(level) for level in levels)
        object.__setattr__(self, "levels", levels)
        object.__setattr__(self, "origin_services", _normalize(self.origin_services))
        object.__setattr__(self, "labels", _normalize(self.labels))
        object.__setattr__(self, "message_keywords", _normalize(self.message_keywords))

    @property
    def is_unconstrained(self) -> bool:
        return (
            self.start is None
            and self.end is None
            and self.levels is None
            and self.origin_services is None
            and self.labels is None
            and self.message_keywords is None
        )

    def with_start(self, start: Optional[int]) -> "Criteria":
        return replace(self, start=start)

    def with_end(self, end: Optional[int]) -> "Criteria":
        return replace(self, end=end)

    def with_time_range(self, start: Optional[int], end: Optional[int]) -> "Criteria":
        return replace(self, start=start, end=end)

    def with_levels(self, levels: Optional[Iterable]) -> "Criteria":
        return replace(self, levels=levels)

    def with_origin_services(self, origin_services: Optional[Iterable[str]]) -> "Criteria":
        return replace(self, origin_services=origin_services)

    def with_labels(self, labels: Optional[Iterable[str]]) -> "Criteria":
        return replace(self, labels=labels)

    def with_message_keywords(self, keywords: Optional[Iterable[str]]) -> "Criteria":
        return replace(self, message_keywords=keywords)
