"""Records and tagged operation results."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class CurrencyRecord:
    """Detached copy of a live currency row."""

    code: str
    rate: float


class Outcome(str, Enum):
    """Why an operation did or did not take effect."""

    OK = "ok"
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    STORAGE_ERROR = "storage_error"


@dataclass(frozen=True)
class Result:
    outcome: Outcome
    value: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK


OK = Result(Outcome.OK)
INVALID_INPUT = Result(Outcome.INVALID_INPUT)
NOT_FOUND = Result(Outcome.NOT_FOUND)
ALREADY_EXISTS = Result(Outcome.ALREADY_EXISTS)


def storage_error(exc: Exception) -> Result:
    return Result(Outcome.STORAGE_ERROR, error=str(exc))
