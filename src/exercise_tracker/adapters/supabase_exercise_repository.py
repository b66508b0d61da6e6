"""Supabase repository for exercise records."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from exercise_tracker.domain.models import (
    ExerciseLogEntry,
    ExerciseLogQuery,
    ExerciseRecord,
)
from exercise_tracker.exceptions import StoreError
from exercise_tracker.services.exercises import ExerciseRepository

TABLE = "exerciselog"


@dataclass
class SupabaseExerciseRepository(ExerciseRepository):
    """Supabase implementation for exercise records."""

    client: Client

    def add_exercise(self, record: ExerciseRecord) -> None:
        """Insert an exercise row."""
        response = (
            self.client.table(TABLE)
            .insert(
                {
                    "user_id": str(record.user_id),
                    "description": record.description,
                    "duration": record.duration,
                    "date": record.date.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise StoreError("Failed to create exercise in Supabase")

    def list_exercises(self, query: ExerciseLogQuery) -> list[ExerciseLogEntry]:
        """Return exercises for a user, oldest first."""
        request = (
            self.client.table(TABLE)
            .select("description, duration, date")
            .eq("user_id", str(query.user_id))
        )
        if query.from_date is not None:
            request = request.gte("date", query.from_date.isoformat())
        if query.to_date is not None:
            request = request.lte("date", query.to_date.isoformat())
        request = request.order("date", desc=False)
        limit = query.effective_limit
        if limit is not None:
            request = request.limit(limit)
        response = request.execute()
        return [_parse_entry(row) for row in response.data or []]


def _parse_entry(row: dict[str, object]) -> ExerciseLogEntry:
    return ExerciseLogEntry(
        description=str(row.get("description", "")),
        duration=int(row.get("duration", 0)),
        date=datetime.fromisoformat(str(row["date"])),
    )
