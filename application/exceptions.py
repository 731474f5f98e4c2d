"""
Application-layer exceptions.

These exceptions are used across the application and infrastructure layers.
Client-facing errors carry the HTTP status and message returned to the
caller; backend/main.py maps them to ``{"error": message}`` responses.

Store faults raised by repository adapters (``PersistenceError``) are never
returned to the caller as-is. Use cases convert them to ``ServerError``.
"""


class ExerciseTrackerError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500
    default_message: str = "Server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingFieldError(ExerciseTrackerError):
    """A required field is absent or blank."""

    status_code = 400
    default_message = "Required field is missing"


class InvalidIdentifierError(ExerciseTrackerError):
    """A record identifier is not in the store's identifier format."""

    status_code = 400
    default_message = "Invalid user ID"


class InvalidDateError(ExerciseTrackerError):
    """A date value could not be parsed as a calendar date."""

    status_code = 400
    default_message = "Invalid date format"


class InvalidNumberError(ExerciseTrackerError):
    """A numeric value could not be parsed as an integer."""

    status_code = 400
    default_message = "Invalid number"


class NotFoundError(ExerciseTrackerError):
    """The referenced record does not exist."""

    status_code = 404
    default_message = "Not found"


class ServerError(ExerciseTrackerError):
    """Any persistence fault. The message never includes fault detail."""

    status_code = 500
    default_message = "Server error"

    def __init__(self):
        super().__init__(self.default_message)


class PersistenceError(Exception):
    """Error raised by a repository when the backing store fails.

    Wraps client/transport errors from the store so the application layer
    does not depend on the store's exception types.
    """

    pass


class DuplicateRecordError(PersistenceError):
    """Insert rejected by a uniqueness constraint."""

    pass
