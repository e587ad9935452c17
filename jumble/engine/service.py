"""Stateless game API: new games and guesses addressed by session id."""

from __future__ import annotations

from typing import Optional

from ..core.constants import GuessStatus
from ..core.exceptions import SessionError
from ..core.models import GuessResult
from ..utils.logger import get_logger
from .game import GameFactory
from .session_store import SessionStore

LOGGER = get_logger(__name__)


class GameService:
    def __init__(self, factory: GameFactory, store: Optional[SessionStore] = None) -> None:
        self.factory = factory
        self.store = store or SessionStore(scrambler=factory.scrambler)

    def create_new_game(self) -> GuessResult:
        state = self.factory.create()
        session_id = self.store.create_session(state)
        return GuessResult.from_state(GuessStatus.CREATED, state, session_id=session_id)

    def process_guess(self, session_id: Optional[str], word: Optional[str]) -> GuessResult:
        """Apply a guess; unknown or blank ids come back as not-found results."""

        try:
            return self.store.apply_guess(session_id, word)
        except SessionError as exc:
            LOGGER.warning("Guess rejected for session %r: %s", session_id, exc)
            return GuessResult(status=exc.status)
