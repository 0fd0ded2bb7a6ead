from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from .config import GraderConfig
from .dictionary import EMPTY_DICTIONARY, WordDictionary, load_dictionary
from .edit_distance import damerau_levenshtein
from .models import Answer, BlameKind, GradeResult, HighlightPair, MistakeKind
from .offsets import insertion_point, word_span

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GradeOutcome:
    """Tagged result of one comparison pass before blame resolution."""

    kind: MistakeKind
    correct: bool = False
    highlights: Tuple[HighlightPair, ...] = field(default_factory=tuple)

    def to_result(self) -> GradeResult:
        blame = self.kind.blame
        highlights = self.highlights
        if blame is None and self.kind is not MistakeKind.EXTRA_WORD:
            highlights = ()
        return GradeResult(correct=self.correct, blame=blame, highlights=highlights)


class Grader:
    """
    Grade a candidate answer against a reference answer.

    The dictionary decides whether a mismatched candidate word is a real word
    (a wrong-word substitution) or a misspelling. An empty dictionary
    recognizes nothing, so every mismatch goes through the typo check.
    """

    def __init__(
        self,
        dictionary: WordDictionary | None = None,
        config: GraderConfig | None = None,
    ) -> None:
        self.config = config or GraderConfig()
        if self.config.typo_max_distance < 0:
            raise ValueError("typo_max_distance must be non-negative.")
        self.dictionary = dictionary if dictionary is not None else EMPTY_DICTIONARY

    @classmethod
    def from_config(cls, config: GraderConfig | None = None) -> "Grader":
        """Build a grader whose dictionary comes from the configured word lists."""
        config = config or GraderConfig()
        return cls(load_dictionary(config), config)

    def grade(self, reference: str, candidate: str) -> GradeResult:
        """Compare ``candidate`` to ``reference`` and locate the main mistake."""
        reference_answer = Answer.from_text(reference)
        candidate_answer = Answer.from_text(candidate)

        if reference_answer.is_empty:
            result = _grade_empty_reference(candidate_answer)
        elif candidate_answer.is_empty:
            result = _grade_empty_candidate(reference_answer)
        else:
            result = self.compare(reference_answer, candidate_answer).to_result()

        LOGGER.debug(
            "Graded %r against %r: correct=%s blame=%s",
            candidate,
            reference,
            result.correct,
            result.blame.value if result.blame is not None else None,
        )
        return result

    def compare(self, reference: Answer, candidate: Answer) -> GradeOutcome:
        """Dispatch on the word-count difference between two non-empty answers."""
        difference = len(reference) - len(candidate)
        if difference < 0:
            return locate_extra_word(reference, candidate)
        if difference == 1:
            return locate_missing_word(reference, candidate)
        if difference > 1:
            # Several missing words are not localized.
            return GradeOutcome(MistakeKind.NONE)
        return self.classify_words(reference, candidate)

    def classify_words(self, reference: Answer, candidate: Answer) -> GradeOutcome:
        """
        Scan equal-length answers word by word.

        Two mismatches end the scan early:

        * a non-dictionary word further than ``typo_max_distance`` edits from
          the reference word is reported alone as a wrong word, discarding
          everything found before it;
        * a second dictionary-word substitution withdraws the wrong-word
          blame, since it cannot be pinned on a single word.
        """
        typo = False
        wrong_word = False
        mismatched = False
        highlights: List[HighlightPair] = []

        for idx, (expected, actual) in enumerate(
            zip(reference.normalized_words, candidate.normalized_words)
        ):
            if expected == actual:
                continue
            mismatched = True
            if not self.dictionary.contains(actual):
                distance = damerau_levenshtein(actual, expected)
                if distance > self.config.typo_max_distance:
                    return GradeOutcome(
                        MistakeKind.WRONG_WORD,
                        highlights=(_word_pair(reference, candidate, idx),),
                    )
                typo = True
            elif wrong_word:
                wrong_word = False
                break
            else:
                wrong_word = True
            highlights.append(_word_pair(reference, candidate, idx))

        if not mismatched:
            return GradeOutcome(MistakeKind.NONE, correct=True)
        if typo:
            kind = MistakeKind.TYPO
        elif wrong_word:
            kind = MistakeKind.WRONG_WORD
        else:
            kind = MistakeKind.NONE
        return GradeOutcome(kind, highlights=tuple(highlights))


def locate_extra_word(reference: Answer, candidate: Answer) -> GradeOutcome:
    """Highlight the first candidate word that departs from the reference."""
    extra_idx = 0
    while (
        extra_idx < len(reference)
        and candidate.normalized_words[extra_idx]
        == reference.normalized_words[extra_idx]
    ):
        extra_idx += 1
    span = word_span(candidate.raw_words, candidate.raw_index(extra_idx))
    return GradeOutcome(
        MistakeKind.EXTRA_WORD, highlights=(HighlightPair(candidate=span),)
    )


def locate_missing_word(reference: Answer, candidate: Answer) -> GradeOutcome:
    """Find the reference word the candidate dropped; candidate is one word short."""
    expected = reference.normalized_words
    actual = candidate.normalized_words

    if actual[0] == expected[1]:
        missing_idx = 0
    else:
        missing_idx = next(
            (idx for idx in range(1, len(actual)) if actual[idx] != expected[idx]),
            len(expected) - 1,
        )

    pair = HighlightPair(
        reference=word_span(reference.raw_words, reference.raw_index(missing_idx)),
        candidate=insertion_point(candidate.raw_words, candidate.raw_index(missing_idx)),
    )
    return GradeOutcome(MistakeKind.MISSING, highlights=(pair,))


def grade(
    reference: str, candidate: str, dictionary: WordDictionary | None = None
) -> GradeResult:
    """Grade with a one-off Grader; no word list is loaded from disk."""
    return Grader(dictionary).grade(reference, candidate)


def _grade_empty_reference(candidate: Answer) -> GradeResult:
    if candidate.is_empty:
        return GradeResult(correct=True)
    span = word_span(candidate.raw_words, candidate.raw_index(0))
    return GradeResult(correct=False, highlights=(HighlightPair(candidate=span),))


def _grade_empty_candidate(reference: Answer) -> GradeResult:
    if len(reference) != 1:
        # Which of several words went missing is ambiguous.
        return GradeResult(correct=False)
    pair = HighlightPair(
        reference=word_span(reference.raw_words, reference.raw_index(0)),
        candidate=(0, 0),
    )
    return GradeResult(correct=False, blame=BlameKind.MISSING, highlights=(pair,))


def _word_pair(reference: Answer, candidate: Answer, word_index: int) -> HighlightPair:
    return HighlightPair(
        reference=word_span(reference.raw_words, reference.raw_index(word_index)),
        candidate=word_span(candidate.raw_words, candidate.raw_index(word_index)),
    )
