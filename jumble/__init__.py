"""Jumble: a word-puzzle engine over a static dictionary.

This package exposes the public API surface via:

- ``jumble.data.dictionary.WordDictionary``: loads the word list and answers
  existence, prefix, search, random-word and palindrome queries.
- ``jumble.engine.subwords.SubWordGenerator``: finds dictionary words spelled
  from a subset of a word's letters.
- ``jumble.engine.scrambler.Scrambler``: reorders a word's letters.
- ``jumble.engine.game.GameFactory``: builds new puzzles.
- ``jumble.engine.session_store.SessionStore`` and
  ``jumble.engine.service.GameService``: concurrent games addressed by id.
- ``jumble.engine.board.GameBoard``: a single player's board.
"""

from .data.dictionary import DictionaryConfig, WordDictionary
from .engine.board import GameBoard
from .engine.game import GameConfig, GameFactory
from .engine.scrambler import Scrambler
from .engine.service import GameService
from .engine.session_store import SessionStore, StoreConfig
from .engine.subwords import SubWordConfig, SubWordGenerator

__all__ = [
    "DictionaryConfig",
    "WordDictionary",
    "GameBoard",
    "GameConfig",
    "GameFactory",
    "Scrambler",
    "GameService",
    "SessionStore",
    "StoreConfig",
    "SubWordConfig",
    "SubWordGenerator",
]

__version__ = "0.1.0"
