"""
Value types passed between the fetcher, the extractor and their callers.
"""

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class MovementRecord:
    """One scheduled vessel movement, as read from a single table row."""

    date: str
    time: str
    maneuver: str
    berth: str
    vessel: str
    status: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    def __str__(self):
        return (
            f"{self.date} {self.time} {self.maneuver} "
            f"berth={self.berth} vessel={self.vessel} status={self.status}"
        )


FIELD_NAMES = tuple(f.name for f in fields(MovementRecord))


@dataclass(frozen=True)
class ColumnIndexMap:
    """Position of each semantic column in the located table.

    Built from the header row in one pass; a field stays None when no
    header matched it.
    """

    date: Optional[int] = None
    time: Optional[int] = None
    maneuver: Optional[int] = None
    berth: Optional[int] = None
    vessel: Optional[int] = None
    status: Optional[int] = None

    def missing_fields(self) -> List[str]:
        return [name for name in FIELD_NAMES if getattr(self, name) is None]


@dataclass(frozen=True)
class FetchAttemptState:
    attempt: int
    max_attempts: int
    backoff: float

    @property
    def is_last(self) -> bool:
        return self.attempt >= self.max_attempts


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    attempts: int = 1

    ok = True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: Exception
    retryable: bool = False

    ok = False

    def unwrap(self) -> Any:
        raise self.error


Result = Union[Success, Failure]
