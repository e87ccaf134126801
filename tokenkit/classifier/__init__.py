"""
Character classification for the boundary rules.

Maps code points to a small set of categories (letter, digit, whitespace,
punctuation, combining mark, joiner, other) using precomputed tables.
"""

from typing import Iterable

from tokenkit.classifier.classifier import CharacterClassifier
from tokenkit.classifier.types import CharClass, CONTRACTION_MARKS, NEWLINES


def create_classifier(keep_contractions: bool = False) -> CharacterClassifier:
    """
    Factory function to create a character classifier.

    Args:
        keep_contractions: Report apostrophes as JOINER so contractions
            such as "isn't" stay whole

    Returns:
        Configured CharacterClassifier instance
    """
    join_marks: Iterable[str] = CONTRACTION_MARKS if keep_contractions else ()
    return CharacterClassifier(join_marks=join_marks)


__all__ = [
    "create_classifier",
    "CharacterClassifier",
    "CharClass",
    "CONTRACTION_MARKS",
    "NEWLINES",
]
