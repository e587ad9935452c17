"""Dictionary loading and word queries."""

from __future__ import annotations

import bisect
import random
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Set

from ..core.exceptions import DictionaryLoadError
from ..io.word_source import read_word_lines
from ..utils.logger import get_logger
from .normalization import (
    is_letters,
    is_positive_int,
    is_single_letter,
    normalize_word,
)

LOGGER = get_logger(__name__)

# Shared by every dictionary that is not given its own generator.
_PROCESS_RNG = random.Random()


@dataclass
class DictionaryConfig:
    """Configuration for dictionary loading."""

    source: Path | str | None = None
    rng: Optional[random.Random] = None
    timeout_seconds: float = 30.0


class WordDictionary:
    """Read-only index over a newline-delimited word list.

    The index is built once in ``__init__`` and never mutated afterwards, so a
    single instance can be shared by any number of reader threads.
    """

    def __init__(
        self,
        config: Optional[DictionaryConfig] = None,
        words: Optional[Iterable[str]] = None,
    ) -> None:
        self.config = config or DictionaryConfig()
        self._rng = self.config.rng or _PROCESS_RNG
        self._words: Set[str] = set()
        self._sorted: List[str] = []
        self._by_length: Dict[int, List[str]] = {}
        self._by_first: Dict[str, List[str]] = {}
        if words is None:
            self._load()
        else:
            self._index(words)

    @classmethod
    def from_words(
        cls, words: Iterable[str], rng: Optional[random.Random] = None
    ) -> "WordDictionary":
        """Build a dictionary from an in-memory iterable of words."""

        return cls(DictionaryConfig(rng=rng), words=words)

    # ------------------------------------------------------------------
    # Loading & indexing
    # ------------------------------------------------------------------
    def _load(self) -> None:
        lines = read_word_lines(self.config.source, timeout_seconds=self.config.timeout_seconds)
        self._index(lines)
        if not self._words:
            raise DictionaryLoadError(f"Word list {self.config.source or 'bundled'} has no words")
        LOGGER.info("Dictionary loaded: %d words", len(self._words))

    def _index(self, lines: Iterable[str]) -> None:
        words: Set[str] = set()
        skipped = 0
        for line in lines:
            word = normalize_word(line)
            if not word:
                continue
            if not is_letters(word):
                skipped += 1
                LOGGER.debug("Skipping non-letter entry %r", line)
                continue
            words.add(word)
        if skipped:
            LOGGER.info("Skipped %d entries containing non-letter characters", skipped)

        by_length: Dict[int, List[str]] = defaultdict(list)
        by_first: Dict[str, List[str]] = defaultdict(list)
        ordered = sorted(words)
        for word in ordered:
            by_length[len(word)].append(word)
            by_first[word[0]].append(word)

        self._words = words
        self._sorted = ordered
        self._by_length = dict(by_length)
        self._by_first = dict(by_first)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.exists(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self._sorted)

    def exists(self, word: Optional[str]) -> bool:
        key = normalize_word(word)
        if not key:
            return False
        return key in self._words

    def words_with_prefix(self, prefix: Optional[str]) -> Set[str]:
        """Return every word starting with ``prefix`` (case-insensitive).

        Blank prefixes or prefixes with non-letters yield an empty set.
        """

        key = normalize_word(prefix)
        if not is_letters(key):
            return set()
        return set(self._prefix_range(key))

    def has_prefix(self, prefix: str) -> bool:
        """True when some word starts with the already-normalized ``prefix``."""

        index = bisect.bisect_left(self._sorted, prefix)
        return index < len(self._sorted) and self._sorted[index].startswith(prefix)

    def search(
        self,
        start_char: Optional[str] = None,
        end_char: Optional[str] = None,
        length: Optional[int] = None,
    ) -> Set[str]:
        """Return words matching every valid filter.

        A character filter counts only when it is a single letter and a length
        filter only when it is a positive integer; invalid filters are ignored.
        With no valid filter at all the result is empty.
        """

        use_start = is_single_letter(start_char)
        use_end = is_single_letter(end_char)
        use_length = is_positive_int(length)
        if not (use_start or use_end or use_length):
            return set()

        candidates: Iterable[str]
        if use_start:
            candidates = self._by_first.get(start_char.lower(), [])
        elif use_length:
            candidates = self._by_length.get(length, [])
        else:
            candidates = self._sorted

        if use_end:
            suffix = end_char.lower()
            candidates = [word for word in candidates if word.endswith(suffix)]
        if use_length:
            candidates = [word for word in candidates if len(word) == length]
        return set(candidates)

    def random_word(self, length: Optional[int] = None) -> Optional[str]:
        """Pick a word uniformly at random, optionally of an exact ``length``."""

        candidates = self._sorted if length is None else self._by_length.get(length, [])
        if not candidates:
            return None
        return self._rng.choice(candidates)

    def palindromes(self) -> Set[str]:
        return {word for word in self._sorted if len(word) > 1 and word == word[::-1]}

    def lengths(self) -> List[int]:
        return sorted(self._by_length)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _prefix_range(self, prefix: str) -> List[str]:
        start = bisect.bisect_left(self._sorted, prefix)
        end = start
        while end < len(self._sorted) and self._sorted[end].startswith(prefix):
            end += 1
        return self._sorted[start:end]
