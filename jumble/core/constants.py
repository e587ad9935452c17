"""Shared constants and enumerations for the jumble engine."""

from __future__ import annotations

from enum import Enum
from typing import Dict


DEFAULT_MIN_LENGTH = 3
GAME_WORD_LENGTH = 6
MIN_GAME_WORD_LENGTH = 3
MAX_SUBWORD_SOURCE_LENGTH = 12

SCRAMBLE_ATTEMPTS = 100
RESCRAMBLE_ATTEMPTS = 10

DEFAULT_WORD_LIST = "words.txt"


class GuessStatus(str, Enum):
    """Result kinds reported back to game callers."""

    CREATED = "CREATED"
    GUESSED_CORRECTLY = "GUESSED_CORRECTLY"
    GUESSED_INCORRECTLY = "GUESSED_INCORRECTLY"
    ALREADY_GUESSED = "ALREADY_GUESSED"
    ALL_GUESSED = "ALL_GUESSED"
    TOO_SHORT = "TOO_SHORT"
    NO_GAME = "NO_GAME"
    INVALID_SESSION_ID = "INVALID_SESSION_ID"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"

    @property
    def message(self) -> str:
        return self.describe()

    def describe(self, min_length: int = DEFAULT_MIN_LENGTH) -> str:
        return STATUS_MESSAGES[self].format(min_length=min_length)


STATUS_MESSAGES: Dict[GuessStatus, str] = {
    GuessStatus.CREATED: "Created new game.",
    GuessStatus.GUESSED_CORRECTLY: "Guessed correctly.",
    GuessStatus.GUESSED_INCORRECTLY: "Guessed incorrectly.",
    GuessStatus.ALREADY_GUESSED: "You already guessed this word.",
    GuessStatus.ALL_GUESSED: "All words guessed.",
    GuessStatus.TOO_SHORT: "Must be at least {min_length} characters.",
    GuessStatus.NO_GAME: "No game in progress.",
    GuessStatus.INVALID_SESSION_ID: "Invalid Game ID.",
    GuessStatus.SESSION_NOT_FOUND: "Game board/state not found.",
}
