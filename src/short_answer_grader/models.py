from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Tuple

from .textutils import normalize_word, split_raw_words

# Half-open (start, end) character offsets into one answer's raw text.
HighlightSpan = Tuple[int, int]


class BlameKind(str, Enum):
    """The single most significant mistake reported for a candidate answer."""

    TYPO = "typo"
    MISSING = "missing"
    WRONG_WORD = "wrong_word"


class MistakeKind(str, Enum):
    """Outcome tag of one grading pass."""

    NONE = "none"
    TYPO = "typo"
    MISSING = "missing"
    WRONG_WORD = "wrong_word"
    EXTRA_WORD = "extra_word"

    @property
    def blame(self) -> BlameKind | None:
        if self is MistakeKind.TYPO:
            return BlameKind.TYPO
        if self is MistakeKind.MISSING:
            return BlameKind.MISSING
        if self is MistakeKind.WRONG_WORD:
            return BlameKind.WRONG_WORD
        return None


@dataclass(frozen=True, slots=True)
class Answer:
    """Raw and normalized word views of one answer string."""

    text: str
    raw_words: Tuple[str, ...]
    normalized_words: Tuple[str, ...]
    raw_indices: Tuple[int, ...]

    @classmethod
    def from_text(cls, text: str) -> "Answer":
        raw_words = split_raw_words(text)
        normalized: List[str] = []
        indices: List[int] = []
        for idx, raw in enumerate(raw_words):
            word = normalize_word(raw)
            if not word:
                continue
            normalized.append(word)
            indices.append(idx)
        return cls(
            text=text,
            raw_words=tuple(raw_words),
            normalized_words=tuple(normalized),
            raw_indices=tuple(indices),
        )

    def __len__(self) -> int:
        return len(self.normalized_words)

    @property
    def is_empty(self) -> bool:
        return not self.normalized_words

    def raw_index(self, word_index: int) -> int:
        """Map a normalized word index to its raw word index."""
        if word_index == len(self.normalized_words):
            # One past the last word: the insertion point after the answer.
            return len(self.raw_words)
        return self.raw_indices[word_index]


@dataclass(frozen=True, slots=True)
class HighlightPair:
    """A located discrepancy in the reference and candidate texts."""

    reference: HighlightSpan | None = None
    candidate: HighlightSpan | None = None

    def to_list(self) -> List[List[int]]:
        return [
            list(self.reference) if self.reference is not None else [],
            list(self.candidate) if self.candidate is not None else [],
        ]


@dataclass(frozen=True, slots=True)
class GradeResult:
    """Verdict for one candidate answer."""

    correct: bool
    blame: BlameKind | None = None
    highlights: Tuple[HighlightPair, ...] = field(default_factory=tuple)

    def to_list(self) -> List[Any]:
        """Return the ``[correct, blame, highlights]`` rendering."""
        blame = self.blame.value if self.blame is not None else None
        return [self.correct, blame, [pair.to_list() for pair in self.highlights]]

    def to_dict(self) -> dict[str, Any]:
        return {
            "correct": self.correct,
            "blame": self.blame.value if self.blame is not None else None,
            "highlights": [
                {
                    "reference": _span_or_none(pair.reference),
                    "candidate": _span_or_none(pair.candidate),
                }
                for pair in self.highlights
            ],
        }

    def __str__(self) -> str:
        correct, blame, highlights = self.to_list()
        return f"[{correct}, {blame!r}, {highlights}]"


def _span_or_none(span: HighlightSpan | None) -> List[int] | None:
    return list(span) if span is not None else None
