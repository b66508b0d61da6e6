"""Shared test fixtures."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

import pytest

from exercise_tracker.config import Settings
from exercise_tracker.containers import AppContainer
from exercise_tracker.domain.models import (
    ExerciseLogEntry,
    ExerciseLogQuery,
    ExerciseRecord,
    UserRecord,
)
from exercise_tracker.services.exercises import ExerciseRepository, ExerciseService
from exercise_tracker.services.users import UserRepository, UserService


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserRecord] = field(default_factory=dict)
    lookups: list[str] = field(default_factory=list)

    def get_by_username(self, username: str) -> UserRecord | None:
        self.lookups.append(username)
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        return self.users.get(user_id)

    def create_user(self, username: str) -> UserRecord:
        user = UserRecord(id=uuid4(), username=username)
        self.users[user.id] = user
        return user

    def list_users(self) -> list[UserRecord]:
        return list(self.users.values())


@dataclass
class InMemoryExerciseRepository(ExerciseRepository):
    """In-memory exercise repository applying the same filters as the store."""

    records: list[ExerciseRecord] = field(default_factory=list)
    queries: list[ExerciseLogQuery] = field(default_factory=list)

    def add_exercise(self, record: ExerciseRecord) -> None:
        self.records.append(record)

    def list_exercises(self, query: ExerciseLogQuery) -> list[ExerciseLogEntry]:
        self.queries.append(query)
        matches = [
            record
            for record in self.records
            if record.user_id == query.user_id
            and (query.from_date is None or record.date >= query.from_date)
            and (query.to_date is None or record.date <= query.to_date)
        ]
        matches.sort(key=lambda record: record.date)
        limit = query.effective_limit
        if limit is not None:
            matches = matches[:limit]
        return [
            ExerciseLogEntry(
                description=record.description,
                duration=record.duration,
                date=record.date,
            )
            for record in matches
        ]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def exercise_repository() -> InMemoryExerciseRepository:
    return InMemoryExerciseRepository()


@pytest.fixture
def user_service(user_repository: InMemoryUserRepository) -> UserService:
    return UserService(user_repository)


@pytest.fixture
def exercise_service(
    user_service: UserService, exercise_repository: InMemoryExerciseRepository
) -> ExerciseService:
    return ExerciseService(user_service=user_service, repository=exercise_repository)


@pytest.fixture
def container(
    settings: Settings,
    user_service: UserService,
    exercise_service: ExerciseService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=user_service,
        exercise_service=exercise_service,
        close_resources=close_resources,
    )
