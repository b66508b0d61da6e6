"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from exercise_tracker.domain.models import UserRecord
from exercise_tracker.exceptions import StoreError
from exercise_tracker.services.users import UserRepository


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the exact username, if present."""
        response = (
            self.client.table("users")
            .select("id, username")
            .eq("username", username)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user for an id, if present."""
        response = (
            self.client.table("users")
            .select("id, username")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, username: str) -> UserRecord:
        """Create a new user row and return it."""
        response = self.client.table("users").insert({"username": username}).execute()
        if not response.data:
            raise StoreError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def list_users(self) -> list[UserRecord]:
        """Return all users in insertion order."""
        response = (
            self.client.table("users")
            .select("*")
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_user(row) for row in response.data or []]


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(id=UUID(str(row["id"])), username=str(row["username"]))
