from __future__ import annotations

from typing import Sequence

from .models import HighlightSpan


def char_offset_of_word(raw_words: Sequence[str], word_index: int) -> int:
    """
    Return the character offset where ``raw_words[word_index]`` starts.

    Offsets assume the raw words are joined by exactly one space.
    """
    assert 0 <= word_index < len(raw_words), (
        f"word index {word_index} outside 0..{len(raw_words) - 1}"
    )
    return sum(len(word) for word in raw_words[:word_index]) + word_index


def word_span(raw_words: Sequence[str], word_index: int) -> HighlightSpan:
    """Return the half-open span covering one raw word."""
    start = char_offset_of_word(raw_words, word_index)
    return (start, start + len(raw_words[word_index]))


def insertion_point(raw_words: Sequence[str], word_index: int) -> HighlightSpan:
    """
    Return a zero-width span where a word at ``word_index`` would start.

    ``word_index == len(raw_words)`` points at the end of the joined text.
    """
    if word_index == len(raw_words):
        end = sum(len(word) for word in raw_words) + max(0, len(raw_words) - 1)
        return (end, end)
    start = char_offset_of_word(raw_words, word_index)
    return (start, start)
