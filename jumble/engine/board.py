"""Session-scoped game board holding a single puzzle without an id."""

from __future__ import annotations

from typing import Optional

from ..core.constants import GuessStatus
from ..core.models import GameState, GuessResult
from ..data.normalization import normalize_word
from ..utils.logger import get_logger
from .game import GameFactory

LOGGER = get_logger(__name__)


class GameBoard:
    """One player's board: start, rescramble, guess and leave.

    Unlike :class:`~jumble.engine.service.GameService` the board rejects
    guesses shorter than the minimum sub-word length before touching the
    puzzle.
    """

    def __init__(self, factory: GameFactory, min_guess_length: Optional[int] = None) -> None:
        self.factory = factory
        # Defaults to the factory's sub-word minimum.
        self.min_guess_length = (
            factory.config.min_length if min_guess_length is None else min_guess_length
        )
        self.state: Optional[GameState] = None
        self.word = ""

    @property
    def in_progress(self) -> bool:
        return self.state is not None and not self.state.is_complete

    def new(self) -> GameState:
        self.state = self.factory.create()
        self.word = ""
        return self.state

    def rescramble(self) -> Optional[str]:
        if self.state is None:
            return None
        return self.state.rescramble(self.factory.scrambler)

    def guess(self, word: Optional[str]) -> GuessResult:
        if self.state is None:
            LOGGER.warning("Guess submitted without a game in progress")
            return GuessResult(status=GuessStatus.NO_GAME)

        state = self.state
        self.rescramble()
        self.word = normalize_word(word)
        LOGGER.debug("Player guessed word: %s", self.word)

        if len(self.word) < self.min_guess_length:
            status = GuessStatus.TOO_SHORT
        elif state.is_guessed(self.word):
            status = GuessStatus.ALREADY_GUESSED
        elif state.update_guess_word(self.word):
            status = GuessStatus.GUESSED_CORRECTLY
        else:
            status = GuessStatus.GUESSED_INCORRECTLY

        if state.is_complete:
            if status is GuessStatus.GUESSED_CORRECTLY:
                LOGGER.info("Player guessed all words")
            status = GuessStatus.ALL_GUESSED
        result = GuessResult.from_state(status, state, guess_word=self.word)
        result.min_length = self.min_guess_length
        return result

    def goodbye(self) -> None:
        self.state = None
        self.word = ""
