"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from exercise_tracker.domain.models import UserRecord
from exercise_tracker.exceptions import UserNotFoundError

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the exact username, if present."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""

    def create_user(self, username: str) -> UserRecord:
        """Create and return a new user record."""

    def list_users(self) -> list[UserRecord]:
        """Return all users in insertion order."""


@dataclass
class UserService:
    """Application service for user registration and lookup."""

    repository: UserRepository

    def create_user(self, username: str) -> UserRecord:
        """Return the user for ``username``, creating it on first registration.

        The lookup and insert are separate store calls, so two concurrent
        registrations of a new username can both insert.
        """
        existing = self.repository.get_by_username(username)
        if existing:
            return existing

        created = self.repository.create_user(username)
        logger.info("Registered user %s", created.id)
        return created

    def get_user(self, user_id: UUID) -> UserRecord:
        """Return the user for ``user_id`` or raise ``UserNotFoundError``."""
        user = self.repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def list_users(self) -> list[UserRecord]:
        """Return every registered user."""
        return self.repository.list_users()
