"""Sub-word enumeration: dictionary words built from a word's letters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Set

from ..core.constants import DEFAULT_MIN_LENGTH, MAX_SUBWORD_SOURCE_LENGTH
from ..core.exceptions import ConfigurationError
from ..data.dictionary import WordDictionary
from ..data.normalization import is_letters, normalize_word
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass
class SubWordConfig:
    max_word_length: int = MAX_SUBWORD_SOURCE_LENGTH
    prune_prefixes: bool = True


class SubWordGenerator:
    """Finds every dictionary word spelled with a subset of a word's letters.

    Arrangements are produced from the sorted letter multiset, skipping a
    letter equal to its left sibling unless that sibling is already in use, so
    repeated letters never yield the same arrangement twice. With
    ``prune_prefixes`` a branch is abandoned as soon as no dictionary word
    starts with it; the result is the same, only the search is smaller.
    """

    def __init__(self, dictionary: WordDictionary, config: Optional[SubWordConfig] = None) -> None:
        self.dictionary = dictionary
        self.config = config or SubWordConfig()

    def sub_words(self, word: Optional[str], min_length: Optional[int] = None) -> Set[str]:
        min_len = DEFAULT_MIN_LENGTH if min_length is None else min_length
        normalized = normalize_word(word)
        if not is_letters(normalized) or min_len < 1 or len(normalized) < min_len:
            return set()
        if len(normalized) > self.config.max_word_length:
            raise ConfigurationError(
                f"Word {normalized!r} is longer than {self.config.max_word_length} letters"
            )

        candidates = set(self.arrangements(normalized, min_len))
        candidates.discard(normalized)
        found = {candidate for candidate in candidates if self.dictionary.exists(candidate)}
        LOGGER.debug(
            "Sub-words of %s (min %d): %d candidates, %d in dictionary",
            normalized, min_len, len(candidates), len(found),
        )
        return found

    def arrangements(self, word: str, min_length: int) -> Iterator[str]:
        """Yield distinct letter arrangements of ``word`` with length >= ``min_length``."""

        letters = sorted(word)
        used = [False] * len(letters)
        current: List[str] = []
        prune = self.config.prune_prefixes

        def extend() -> Iterator[str]:
            if len(current) >= min_length:
                yield "".join(current)
            if len(current) == len(letters):
                return
            for index, letter in enumerate(letters):
                if used[index]:
                    continue
                if index > 0 and letter == letters[index - 1] and not used[index - 1]:
                    continue
                current.append(letter)
                if not prune or self.dictionary.has_prefix("".join(current)):
                    used[index] = True
                    yield from extend()
                    used[index] = False
                current.pop()

        yield from extend()
