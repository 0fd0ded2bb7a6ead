from __future__ import annotations

import re
from typing import List

PUNCTUATION_RE = re.compile(r"[^\w\s]", re.UNICODE)
WHITESPACE_RE = re.compile(r"\s+", re.UNICODE)


def normalize_text(value: str) -> str:
    """Lowercase, strip punctuation and collapse whitespace so answers compare by words."""
    normalized = value.lower()
    normalized = PUNCTUATION_RE.sub("", normalized)
    normalized = WHITESPACE_RE.sub(" ", normalized)
    return normalized.strip()


def normalize_word(word: str) -> str:
    """Normalize a single raw token; punctuation-only tokens become empty."""
    return PUNCTUATION_RE.sub("", word.lower())


def split_raw_words(value: str) -> List[str]:
    """Split text on whitespace runs, keeping every token unmodified."""
    return value.split()
