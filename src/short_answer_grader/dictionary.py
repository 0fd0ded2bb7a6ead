from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, List

from .config import GraderConfig

LOGGER = logging.getLogger(__name__)


class WordDictionary:
    """Read-only set of known words with exact, case-sensitive membership."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._words = frozenset(words)

    def contains(self, word: str) -> bool:
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"WordDictionary({len(self._words)} words)"


EMPTY_DICTIONARY = WordDictionary()


def dictionary_search_paths(config: GraderConfig) -> List[Path]:
    """
    Return the word-list candidates in the order they are tried.

    Parameters
    ----------
    config:
        ``dictionary_path`` is tried first when set, then
        ``dictionary_filename`` inside each of ``dictionary_search_dirs``
        (relative directories resolve against the working directory), then
        ``system_word_list``.
    """
    candidates: List[Path] = []
    if config.dictionary_path:
        candidates.append(Path(config.dictionary_path))
    for directory in config.dictionary_search_dirs:
        candidates.append(Path(directory) / config.dictionary_filename)
    if config.system_word_list:
        candidates.append(Path(config.system_word_list))
    return candidates


def read_word_list(path: Path) -> WordDictionary:
    """Read a newline-delimited word list, skipping blank lines."""
    with path.open("r", encoding="utf-8") as handle:
        words = [line.strip() for line in handle]
    return WordDictionary(word for word in words if word)


def load_dictionary(config: GraderConfig | None = None) -> WordDictionary:
    """Load the first readable word list; fall back to an empty dictionary."""
    config = config or GraderConfig()
    candidates = dictionary_search_paths(config)
    for path in candidates:
        try:
            dictionary = read_word_list(path)
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.debug("Unable to read word list %s: %s", path, exc)
            continue
        LOGGER.info("Loaded %d dictionary words from %s", len(dictionary), path)
        return dictionary

    LOGGER.warning(
        "Couldn't read a dictionary file (tried %s); every mismatched word "
        "will be treated as a possible typo.",
        ", ".join(str(path) for path in candidates) or "no paths",
    )
    return EMPTY_DICTIONARY
