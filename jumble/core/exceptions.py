"""Custom exception hierarchy for the jumble engine."""

from .constants import GuessStatus


class JumbleError(Exception):
    """Base exception for engine failures."""


class DictionaryLoadError(JumbleError):
    """Raised when the word list is missing, unreadable or empty."""


class ConfigurationError(JumbleError):
    """Raised when game or generator parameters are out of range."""


class NoWordAvailableError(JumbleError):
    """Raised when the dictionary has no word of the requested length."""


class SessionError(JumbleError):
    """Base class for session lookups that cannot be satisfied."""

    status: GuessStatus = GuessStatus.SESSION_NOT_FOUND

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.status.message)


class InvalidSessionIdError(SessionError):
    """Raised when the session id is missing or blank."""

    status = GuessStatus.INVALID_SESSION_ID


class SessionNotFoundError(SessionError):
    """Raised when no session is registered under the id."""

    status = GuessStatus.SESSION_NOT_FOUND
