"""Exercise logging and history queries."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from exercise_tracker.domain.models import (
    ExerciseLog,
    ExerciseLogEntry,
    ExerciseLogQuery,
    ExerciseRecord,
    UserRecord,
)
from exercise_tracker.services.users import UserService


class ExerciseRepository(Protocol):
    """Persistence interface for exercise records."""

    def add_exercise(self, record: ExerciseRecord) -> None:
        """Insert an exercise record."""

    def list_exercises(self, query: ExerciseLogQuery) -> list[ExerciseLogEntry]:
        """Return exercise entries matching the query."""


@dataclass
class ExerciseService:
    """Application service for a user's exercise log."""

    user_service: UserService
    repository: ExerciseRepository

    def add_exercise(
        self,
        user_id: UUID,
        description: str,
        duration: int,
        date: datetime | None = None,
    ) -> tuple[UserRecord, ExerciseRecord]:
        """Log an exercise for an existing user.

        The user is resolved before the insert. A missing ``date`` means now.
        """
        user = self.user_service.get_user(user_id)
        record = ExerciseRecord(
            user_id=user.id,
            description=description,
            duration=duration,
            date=date or datetime.now(tz=UTC),
        )
        self.repository.add_exercise(record)
        return user, record

    def get_exercise_log(self, query: ExerciseLogQuery) -> ExerciseLog:
        """Return the filtered exercise history for the query's user."""
        user = self.user_service.get_user(query.user_id)
        entries = self.repository.list_exercises(query)
        return ExerciseLog(user=user, entries=entries)
