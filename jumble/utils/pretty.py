"""Pretty-print helpers for game boards and word lists."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, List

if TYPE_CHECKING:
    from ..core.models import GameState, GuessResult


def format_letters(word: str) -> str:
    return " ".join(word.upper())


def format_columns(words: Iterable[str], width: int = 72) -> str:
    """Lay ``words`` out in sorted, evenly spaced columns."""

    ordered = sorted(words, key=lambda w: (len(w), w))
    if not ordered:
        return "(none)"
    cell = max(len(word) for word in ordered) + 2
    per_line = max(1, width // cell)
    lines: List[str] = []
    for start in range(0, len(ordered), per_line):
        chunk = ordered[start : start + per_line]
        lines.append("".join(f"{word:<{cell}}" for word in chunk).rstrip())
    return "\n".join(lines)


def format_board(state: GameState) -> str:
    found = state.guessed_words
    lines = [
        f"Letters: {format_letters(state.scramble)}",
        f"Found {len(found)}/{state.total_words} words, {state.remaining_words} remaining",
    ]
    if found:
        lines.append(format_columns(found))
    return "\n".join(lines)


def pretty_print_board(state: GameState, *, label: str | None = None, stream=None) -> None:
    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(state), file=stream)


def print_result(result: GuessResult, *, stream=None) -> None:
    stream = stream or sys.stdout
    if result.guess_word:
        print(f"{result.guess_word!r}: {result.message}", file=stream)
    else:
        print(result.message, file=stream)
