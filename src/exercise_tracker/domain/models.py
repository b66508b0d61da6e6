"""Domain models for the exercise tracker."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    username: str


@dataclass(frozen=True)
class ExerciseRecord:
    """A single logged exercise."""

    user_id: UUID
    description: str
    duration: int
    date: datetime


@dataclass(frozen=True)
class ExerciseLogEntry:
    """Projection of an exercise record returned by log queries."""

    description: str
    duration: int
    date: datetime


@dataclass(frozen=True)
class ExerciseLogQuery:
    """Filter for an exercise log lookup.

    Date bounds are inclusive and independently optional. ``limit`` caps the
    number of entries when it is a positive integer.
    """

    user_id: UUID
    from_date: datetime | None = None
    to_date: datetime | None = None
    limit: int | None = None

    @property
    def effective_limit(self) -> int | None:
        if self.limit is not None and self.limit > 0:
            return self.limit
        return None


@dataclass(frozen=True)
class ExerciseLog:
    """A user's exercise history."""

    user: UserRecord
    entries: list[ExerciseLogEntry]

    @property
    def count(self) -> int:
        return len(self.entries)
