"""Error taxonomy and the result type returned at every engine boundary."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    LIMIT_EXCEEDED = "limit_exceeded"
    SERVICE_FAULT = "service_fault"


class StoreError(Exception):
    """Raised by a record store for any I/O, decoding or backend failure."""


class ResultError(Exception):
    """Raised by Result.unwrap() on a failed result."""

    def __init__(self, failure: "Failure"):
        super().__init__(f"{failure.kind.value}: {failure.message}")
        self.failure = failure


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str
    cause: Optional[BaseException] = None


@dataclass(frozen=True)
class Result:
    """Either a value or a Failure, never both."""

    value: Any = None
    failure: Optional[Failure] = None

    @classmethod
    def success(cls, value) -> "Result":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str,
             cause: Optional[BaseException] = None) -> "Result":
        return cls(failure=Failure(kind, message, cause))

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self):
        if self.failure is not None:
            raise ResultError(self.failure)
        return self.value
