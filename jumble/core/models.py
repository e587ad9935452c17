"""Data models for puzzles, sessions and guess outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from ..data.normalization import normalize_word
from .constants import GuessStatus

if TYPE_CHECKING:
    from ..engine.scrambler import Scrambler


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class GameState:
    """A single puzzle: the answer word, its scramble and the sub-words to find."""

    original: str
    scramble: str
    sub_words: Dict[str, bool] = field(default_factory=dict)

    @property
    def guessed_words(self) -> List[str]:
        return sorted(word for word, guessed in self.sub_words.items() if guessed)

    @property
    def total_words(self) -> int:
        return len(self.sub_words)

    @property
    def remaining_words(self) -> int:
        return self.total_words - len(self.guessed_words)

    @property
    def is_complete(self) -> bool:
        return self.remaining_words == 0

    def is_guessed(self, word: Optional[str]) -> bool:
        return bool(self.sub_words.get(normalize_word(word)))

    def update_guess_word(self, word: Optional[str]) -> bool:
        """Mark ``word`` as guessed if it is one of the sub-words.

        Repeats are not rejected here; callers check :meth:`is_guessed` first.
        """

        key = normalize_word(word)
        if key not in self.sub_words:
            return False
        self.sub_words[key] = True
        return True

    def rescramble(self, scrambler: "Scrambler") -> str:
        self.scramble = scrambler.rescramble(self.original, self.scramble)
        return self.scramble


@dataclass
class GameSession:
    """Store record binding an opaque id to one :class:`GameState`."""

    id: str
    state: GameState
    created_at: datetime = field(default_factory=utc_now)
    modified_at: datetime = field(default_factory=utc_now)

    def touch(self) -> None:
        self.modified_at = utc_now()


@dataclass
class GuessResult:
    """Outcome of creating a game or submitting a guess."""

    status: GuessStatus
    id: Optional[str] = None
    original: Optional[str] = None
    scramble: Optional[str] = None
    guess_word: Optional[str] = None
    total_words: Optional[int] = None
    remaining_words: Optional[int] = None
    guessed_words: List[str] = field(default_factory=list)
    min_length: Optional[int] = None

    @property
    def message(self) -> str:
        if self.min_length is None:
            return self.status.message
        return self.status.describe(self.min_length)

    @classmethod
    def from_state(
        cls,
        status: GuessStatus,
        state: GameState,
        session_id: Optional[str] = None,
        guess_word: Optional[str] = None,
    ) -> "GuessResult":
        return cls(
            status=status,
            id=session_id,
            original=state.original,
            scramble=state.scramble,
            guess_word=guess_word,
            total_words=state.total_words,
            remaining_words=state.remaining_words,
            guessed_words=state.guessed_words,
        )

    def to_jsonable(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "result": self.message,
            "status": self.status.value,
            "id": self.id,
            "original_word": self.original,
            "scramble_word": self.scramble,
            "guess_word": self.guess_word,
            "total_words": self.total_words,
            "remaining_words": self.remaining_words,
            "guessed_words": list(self.guessed_words),
        }
        # Results without a puzzle omit the puzzle fields.
        return {key: value for key, value in payload.items() if value is not None}
