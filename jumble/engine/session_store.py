"""In-memory registry of game sessions keyed by an opaque id.

Guesses against the same session are serialised by a per-session lock while
the registry lock is only held for dictionary access, so sessions never wait
on each other's game logic.
"""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Tuple

from ..core.constants import GuessStatus
from ..core.exceptions import InvalidSessionIdError, SessionNotFoundError
from ..core.models import GameSession, GameState, GuessResult, utc_now
from ..data.normalization import normalize_word
from ..utils.logger import get_logger
from .scrambler import Scrambler

LOGGER = get_logger(__name__)


@dataclass
class StoreConfig:
    """Eviction policy. ``None`` disables the corresponding limit."""

    max_idle_seconds: Optional[float] = None
    max_sessions: Optional[int] = None


class SessionStore:
    """Thread-safe map from session id to :class:`GameSession`."""

    def __init__(
        self,
        scrambler: Optional[Scrambler] = None,
        config: Optional[StoreConfig] = None,
    ) -> None:
        self.scrambler = scrambler or Scrambler()
        self.config = config or StoreConfig()
        self._sessions: Dict[str, GameSession] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._sessions)

    def session_ids(self) -> List[str]:
        with self._registry_lock:
            return list(self._sessions)

    def create_session(self, state: GameState) -> str:
        """Register ``state`` under a fresh id and return the id."""

        with self._registry_lock:
            session_id = uuid.uuid4().hex
            while session_id in self._sessions:
                session_id = uuid.uuid4().hex
            self._sessions[session_id] = GameSession(id=session_id, state=state)
            self._locks[session_id] = threading.Lock()
            self._enforce_capacity(keep=session_id)
        LOGGER.info("Session created: %s", session_id)
        return session_id

    def get(self, session_id: Optional[str]) -> GameSession:
        return self._lookup(session_id)[0]

    def delete(self, session_id: Optional[str]) -> bool:
        if not session_id or not session_id.strip():
            return False
        with self._registry_lock:
            removed = self._discard(session_id.strip())
        if removed:
            LOGGER.info("Session deleted: %s", session_id)
        return removed

    def apply_guess(self, session_id: Optional[str], word: Optional[str]) -> GuessResult:
        """Rescramble the puzzle, apply ``word`` and report the outcome.

        A word that was already found is reported as ``ALREADY_GUESSED`` and
        leaves the remaining count unchanged. Raises
        :class:`InvalidSessionIdError` or :class:`SessionNotFoundError`.
        """

        session, lock = self._lookup(session_id)
        with lock:
            state = session.state
            guess = normalize_word(word)
            state.rescramble(self.scrambler)

            if state.is_guessed(guess):
                status = GuessStatus.ALREADY_GUESSED
            elif state.update_guess_word(guess):
                status = GuessStatus.GUESSED_CORRECTLY
            else:
                status = GuessStatus.GUESSED_INCORRECTLY
            if state.is_complete:
                status = GuessStatus.ALL_GUESSED

            session.touch()
            result = GuessResult.from_state(status, state, session_id=session.id, guess_word=guess)

        LOGGER.debug(
            "Session %s guess %r -> %s (%d/%d remaining)",
            session.id, guess, status.value, result.remaining_words, result.total_words,
        )
        return result

    def evict_expired(self, now: Optional[datetime] = None) -> int:
        """Drop sessions idle for longer than ``max_idle_seconds``."""

        if self.config.max_idle_seconds is None:
            return 0
        cutoff = (now or utc_now()) - timedelta(seconds=self.config.max_idle_seconds)
        with self._registry_lock:
            expired = [sid for sid, session in self._sessions.items() if session.modified_at < cutoff]
            for sid in expired:
                self._discard(sid)
        if expired:
            LOGGER.info("Evicted %d idle sessions", len(expired))
        return len(expired)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _lookup(self, session_id: Optional[str]) -> Tuple[GameSession, threading.Lock]:
        if session_id is None or not session_id.strip():
            raise InvalidSessionIdError()
        key = session_id.strip()
        with self._registry_lock:
            session = self._sessions.get(key)
            if session is None:
                raise SessionNotFoundError()
            return session, self._locks[key]

    def _discard(self, session_id: str) -> bool:
        self._locks.pop(session_id, None)
        return self._sessions.pop(session_id, None) is not None

    def _enforce_capacity(self, keep: str) -> None:
        limit = self.config.max_sessions
        if limit is None:
            return
        while len(self._sessions) > limit:
            victim = min(
                (session for sid, session in self._sessions.items() if sid != keep),
                key=lambda session: session.modified_at,
                default=None,
            )
            if victim is None:
                return
            self._discard(victim.id)
            LOGGER.info("Evicted least recently used session %s", victim.id)
