"""Exceptions raised by the exercise tracker.

Each exception carries the HTTP status the error handlers report for it.
"""


class ExerciseTrackerError(Exception):
    """Base exception for all application errors."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ExerciseTrackerError):
    """Request input failed validation.

    ``errors`` maps field names to messages, in the order they were found.
    """

    status_code = 400

    def __init__(self, errors: dict[str, str]) -> None:
        first = next(iter(errors.values()), "Bad Request")
        super().__init__(first)
        self.errors = errors


class InvalidIdentifierError(ExerciseTrackerError):
    """An identifier is not in the store's identifier format."""

    status_code = 400


class UserNotFoundError(ExerciseTrackerError):
    """No user exists for the given identifier."""

    status_code = 404

    def __init__(self, user_id: object) -> None:
        super().__init__("unknown userId")
        self.user_id = user_id


class StoreError(ExerciseTrackerError):
    """The store did not acknowledge a write."""
