"""
short_answer_grader package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import GraderConfig, config_from_dict, config_from_yaml, load_config
from .dictionary import WordDictionary, load_dictionary
from .edit_distance import damerau_levenshtein
from .grader import Grader, grade
from .models import BlameKind, GradeResult, HighlightPair
from .textutils import normalize_text

__all__ = [
    "GraderConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "WordDictionary",
    "load_dictionary",
    "damerau_levenshtein",
    "Grader",
    "grade",
    "BlameKind",
    "GradeResult",
    "HighlightPair",
    "normalize_text",
]

__version__ = "0.1.0"
