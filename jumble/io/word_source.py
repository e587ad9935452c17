"""Word-list sources: packaged resource, local file or remote URL."""

from __future__ import annotations

from pathlib import Path
from typing import List

import requests

from ..core.constants import DEFAULT_WORD_LIST
from ..core.exceptions import DictionaryLoadError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

PACKAGED_WORD_LIST = Path(__file__).resolve().parent.parent / "data" / DEFAULT_WORD_LIST


def is_remote(source: Path | str | None) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def read_word_lines(source: Path | str | None = None, timeout_seconds: float = 30.0) -> List[str]:
    """Return the raw lines of the word list at ``source``.

    ``None`` selects the word list bundled with the package.
    """

    if is_remote(source):
        return fetch_remote_lines(str(source), timeout_seconds=timeout_seconds)
    return read_local_lines(Path(source) if source is not None else PACKAGED_WORD_LIST)


def read_local_lines(path: Path) -> List[str]:
    if not path.is_file():
        raise DictionaryLoadError(f"Missing word list: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryLoadError(f"Cannot read word list {path}: {exc}") from exc
    LOGGER.debug("Read word list from %s", path)
    return text.splitlines()


def fetch_remote_lines(url: str, timeout_seconds: float = 30.0) -> List[str]:
    try:
        response = requests.get(url, timeout=timeout_seconds)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise DictionaryLoadError(f"Word list download failed: {exc}") from exc

    text = response.text
    if not text:
        raise DictionaryLoadError(f"Word list at {url} is empty")
    LOGGER.info("Downloaded word list from %s (%d bytes)", url, len(text))
    return text.splitlines()
