"""Shared helpers for word normalization."""

from __future__ import annotations

import re
from typing import Optional

LETTERS_RE = re.compile(r"[A-Za-z]+")


def normalize_word(text: Optional[str]) -> str:
    """Return the trimmed lower-case form of ``text`` (empty for ``None``)."""

    if not text:
        return ""
    return text.strip().lower()


def is_letters(text: Optional[str]) -> bool:
    """True when ``text`` is non-empty and made only of ASCII letters."""

    if not text:
        return False
    return bool(LETTERS_RE.fullmatch(text))


def is_single_letter(value: object) -> bool:
    return isinstance(value, str) and len(value) == 1 and value.isalpha()


def is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


__all__ = ["normalize_word", "is_letters", "is_single_letter", "is_positive_int", "LETTERS_RE"]
