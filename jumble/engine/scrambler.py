"""Random letter reordering with bounded retries."""

from __future__ import annotations

import random
from typing import Optional

from ..core.constants import RESCRAMBLE_ATTEMPTS, SCRAMBLE_ATTEMPTS
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class Scrambler:
    """Shuffles a word's letters into an ordering different from the input."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_attempts: int = SCRAMBLE_ATTEMPTS,
        rescramble_attempts: int = RESCRAMBLE_ATTEMPTS,
    ) -> None:
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts
        self.rescramble_attempts = rescramble_attempts

    def scramble(self, word: Optional[str]) -> Optional[str]:
        """Return a permutation of ``word`` that differs from it.

        Words shorter than two letters, and words whose letters are all the
        same, have no distinct permutation and come back unchanged.
        """

        if not word or len(word) < 2:
            return word
        if len(set(word)) == 1:
            LOGGER.debug("No distinct scramble exists for %r", word)
            return word

        letters = list(word)
        for _ in range(self.max_attempts):
            self.rng.shuffle(letters)
            candidate = "".join(letters)
            if candidate != word:
                return candidate

        LOGGER.warning("Shuffle budget exhausted for %r; rotating instead", word)
        return self._rotate(word)

    def rescramble(self, original: str, previous: Optional[str]) -> str:
        """Scramble ``original`` again, preferring a result unlike ``previous``.

        Best effort: after ``rescramble_attempts`` tries the last scramble is
        accepted even if it equals ``previous``.
        """

        scrambled = self.scramble(original)
        for _ in range(self.rescramble_attempts - 1):
            if scrambled != previous:
                break
            scrambled = self.scramble(original)
        return scrambled

    @staticmethod
    def _rotate(word: str) -> str:
        # A word with two distinct letters always differs from some rotation.
        for shift in range(1, len(word)):
            rotated = word[shift:] + word[:shift]
            if rotated != word:
                return rotated
        return word
