"""CLI entrypoint for the jumble word-puzzle engine."""

from __future__ import annotations

import argparse
import json
import random
import sys
from typing import Any, Dict, Iterable, List, Optional, TextIO

from jumble.core.constants import DEFAULT_MIN_LENGTH, GAME_WORD_LENGTH
from jumble.core.exceptions import JumbleError
from jumble.data.dictionary import DictionaryConfig, WordDictionary
from jumble.engine.board import GameBoard
from jumble.engine.game import GameConfig, GameFactory
from jumble.engine.scrambler import Scrambler
from jumble.engine.service import GameService
from jumble.engine.subwords import SubWordGenerator
from jumble.utils.logger import configure_logging, level_from_name
from jumble.utils.pretty import format_columns, pretty_print_board, print_result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Scramble words, search a dictionary and play the jumble game",
    )
    parser.add_argument(
        "--dictionary",
        type=str,
        default=None,
        help="Word list path or http(s) URL (defaults to the bundled list)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")

    commands = parser.add_subparsers(dest="command", required=True)

    scramble = commands.add_parser("scramble", help="Reorder the letters of a word")
    scramble.add_argument("word")

    exists = commands.add_parser("exists", help="Check whether a word is in the dictionary")
    exists.add_argument("word")

    prefix = commands.add_parser("prefix", help="List words starting with a prefix")
    prefix.add_argument("prefix")

    search = commands.add_parser("search", help="Search by first letter, last letter and length")
    search.add_argument("--start", dest="start_char", default=None, help="First letter")
    search.add_argument("--end", dest="end_char", default=None, help="Last letter")
    search.add_argument("--length", type=int, default=None, help="Exact word length")

    commands.add_parser("palindromes", help="List palindrome words")

    sub_words = commands.add_parser("subwords", help="List words built from a word's letters")
    sub_words.add_argument("word")
    sub_words.add_argument(
        "--min-length",
        type=int,
        default=DEFAULT_MIN_LENGTH,
        help="Minimum sub-word length (default 3)",
    )

    random_word = commands.add_parser("random", help="Pick a random word")
    random_word.add_argument("--length", type=int, default=None, help="Exact word length")

    new_game = commands.add_parser("new", help="Create a game and print its payload")
    _add_game_arguments(new_game)

    play = commands.add_parser("play", help="Play a game interactively")
    _add_game_arguments(play)
    return parser


def _add_game_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--length",
        type=int,
        default=GAME_WORD_LENGTH,
        help="Length of the word to unscramble (default 6)",
    )
    parser.add_argument(
        "--min-length",
        type=int,
        default=DEFAULT_MIN_LENGTH,
        help="Minimum sub-word length (default 3)",
    )


def emit(value: Any, as_json: bool, stream: TextIO) -> None:
    if as_json:
        if isinstance(value, (set, frozenset)):
            value = sorted(value)
        print(json.dumps(value, ensure_ascii=False, indent=2), file=stream)
    elif isinstance(value, (set, frozenset, list)):
        print(format_columns(value), file=stream)
    else:
        print(value, file=stream)


def play(board: GameBoard, lines: Iterable[str], stream: TextIO) -> None:
    """Drive ``board`` from ``lines`` until the player quits or finds every word.

    ``:new`` starts over, ``:shuffle`` rescrambles and ``:quit`` leaves.
    """

    state = board.new()
    pretty_print_board(state, label="New game!", stream=stream)
    if not board.in_progress:
        print(f"No sub-words to find in {state.original!r}.", file=stream)
        lines = []
    for line in lines:
        command = line.strip()
        if command in {":quit", ":q"}:
            break
        if command == ":new":
            pretty_print_board(board.new(), label="New game!", stream=stream)
            continue
        if command == ":shuffle":
            board.rescramble()
        else:
            print_result(board.guess(command), stream=stream)
        pretty_print_board(board.state, stream=stream)
        if not board.in_progress:
            print(f"The word was {board.state.original!r}.", file=stream)
            break
    board.goodbye()


def run(args: argparse.Namespace, stream: TextIO = sys.stdout, lines: Optional[Iterable[str]] = None) -> int:
    rng = random.Random(args.seed)
    dictionary = WordDictionary(DictionaryConfig(source=args.dictionary, rng=rng))
    command = args.command

    if command == "scramble":
        emit(Scrambler(rng).scramble(args.word), args.json, stream)
    elif command == "exists":
        emit(dictionary.exists(args.word), args.json, stream)
    elif command == "prefix":
        emit(dictionary.words_with_prefix(args.prefix), args.json, stream)
    elif command == "search":
        emit(dictionary.search(args.start_char, args.end_char, args.length), args.json, stream)
    elif command == "palindromes":
        emit(dictionary.palindromes(), args.json, stream)
    elif command == "subwords":
        emit(SubWordGenerator(dictionary).sub_words(args.word, args.min_length), args.json, stream)
    elif command == "random":
        emit(dictionary.random_word(args.length), args.json, stream)
    else:
        factory = GameFactory(
            dictionary,
            GameConfig(word_length=args.length, min_length=args.min_length),
            scrambler=Scrambler(rng),
        )
        if command == "new":
            payload: Dict[str, Any] = GameService(factory).create_new_game().to_jsonable()
            emit(payload, True, stream)
        else:
            play(GameBoard(factory), lines if lines is not None else sys.stdin, stream)
    return 0


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level_from_name(args.log_level))
    try:
        return run(args)
    except JumbleError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
