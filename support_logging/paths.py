"""URL path grammar for the /api/v1/logs family.

A path is zero or more filter segments followed by a numeric tail:

    [logLevels/<csv>] [originServices/<csv>] [labels/<csv>] [keywords/<csv>] <tail>

Reads take `<limit>` or `<start>/<end>/<limit>` as the tail; deletes take
`<start>/<end>`. Filter segments may appear in any order, each at most once.
"""

from support_logging.criteria import Criteria
from support_logging.models import LogLevel

FILTER_FIELDS = {
    "logLevels": "levels",
    "originServices": "origin_services",
    "labels": "labels",
    "keywords": "message_keywords",
}


class PathError(ValueError):
    """The request path does not follow the grammar."""


def _split_csv(value: str) -> list[str]:
    return [item for item in (part.strip() for part in value.split(",")) if item]


def _parse_int(value: str, name: str) -> int:
    # int() alone would also take "1_0", " 7" and non-ASCII digits
    digits = value[1:] if value.startswith("-") else value
    if not (digits.isascii() and digits.isdigit()):
        raise PathError(f"{name} must be an integer, got {value!r}")
    return int(value)


def _parse_filters(segments: list[str]) -> tuple[dict, list[str]]:
    filters = {}
    i = 0
    while i < len(segments) and segments[i] in FILTER_FIELDS:
        name = segments[i]
        field_name = FILTER_FIELDS[name]
        if field_name in filters:
            raise PathError(f"duplicate filter segment: {name}")
        if i + 1 >= len(segments):
            raise PathError(f"missing value for {name}")
        values = _split_csv(segments[i + 1])
        if name == "logLevels":
            try:
                values = [LogLevel.parse(v) for v in values]
            except ValueError as e:
                raise PathError(str(e)) from None
        filters[field_name] = values
        i += 2
    return filters, segments[i:]


def _segments(path: str) -> list[str]:
    return [s for s in path.strip("/").split("/") if s]


def parse_read_path(path: str) -> tuple[Criteria, int]:
    """Parse a search path into (Criteria, limit)."""
    filters, tail = _parse_filters(_segments(path))
    if len(tail) == 1:
        start = end = None
        limit = _parse_int(tail[0], "limit")
    elif len(tail) == 3:
        start = _parse_int(tail[0], "start")
        end = _parse_int(tail[1], "end")
        limit = _parse_int(tail[2], "limit")
    else:
        raise PathError("expected <limit> or <start>/<end>/<limit> after the filters")

    if limit < 1:
        raise PathError(f"limit must be positive, got {limit}")
    return Criteria(start=start, end=end, **filters), limit


def parse_delete_path(path: str) -> Criteria:
    """Parse a delete path into a Criteria; a time window is required."""
    filters, tail = _parse_filters(_segments(path))
    if len(tail) != 2:
        raise PathError("expected <start>/<end> after the filters")
    start = _parse_int(tail[0], "start")
    end = _parse_int(tail[1], "end")
    return Criteria(start=start, end=end, **filters)
