"""Puzzle construction: pick a word, scramble it, list its sub-words."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_MIN_LENGTH, GAME_WORD_LENGTH, MIN_GAME_WORD_LENGTH
from ..core.exceptions import ConfigurationError, NoWordAvailableError
from ..core.models import GameState
from ..data.dictionary import WordDictionary
from ..utils.logger import get_logger
from .scrambler import Scrambler
from .subwords import SubWordGenerator

LOGGER = get_logger(__name__)


@dataclass
class GameConfig:
    word_length: Optional[int] = GAME_WORD_LENGTH
    min_length: int = DEFAULT_MIN_LENGTH
    seed: Optional[int] = None
    pick_attempts: int = 20


class GameFactory:
    """Builds fresh :class:`GameState` puzzles from a dictionary."""

    def __init__(
        self,
        dictionary: WordDictionary,
        config: Optional[GameConfig] = None,
        scrambler: Optional[Scrambler] = None,
        generator: Optional[SubWordGenerator] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.dictionary = dictionary
        self.scrambler = scrambler or Scrambler(random.Random(self.config.seed))
        self.generator = generator or SubWordGenerator(dictionary)

    def create(self, length: Optional[int] = None, min_length: Optional[int] = None) -> GameState:
        """Create a puzzle whose answer has ``length`` letters.

        ``length`` and ``min_length`` fall back to the factory configuration.
        Raises :class:`ConfigurationError` for out-of-range values and
        :class:`NoWordAvailableError` when no word of that length exists.
        """

        length = self.config.word_length if length is None else length
        min_length = self.config.min_length if min_length is None else min_length
        self._validate(length, min_length)

        original = self._pick_word(length)
        scramble = self.scrambler.scramble(original)
        sub_words = {word: False for word in sorted(self.generator.sub_words(original, min_length))}
        LOGGER.info(
            "New game: %d-letter word with %d sub-words (min length %d)",
            length, len(sub_words), min_length,
        )
        return GameState(original=original, scramble=scramble, sub_words=sub_words)

    def _pick_word(self, length: int) -> str:
        # Words like "aaa" have no scramble distinct from themselves.
        for _ in range(self.config.pick_attempts):
            original = self.dictionary.random_word(length)
            if original is None:
                break
            if len(set(original)) > 1:
                return original
        raise NoWordAvailableError(f"No {length}-letter word available for a new game")

    @staticmethod
    def _validate(length: Optional[int], min_length: Optional[int]) -> None:
        if length is None:
            raise ConfigurationError("length must not be None")
        if min_length < 1:
            raise ConfigurationError(f"Invalid min_length={min_length}, expect positive integer")
        if length < MIN_GAME_WORD_LENGTH:
            raise ConfigurationError(
                f"Invalid length={length}, expect at least {MIN_GAME_WORD_LENGTH}"
            )
        if min_length > length:
            raise ConfigurationError(
                f"min_length={min_length} must not exceed length={length}"
            )
