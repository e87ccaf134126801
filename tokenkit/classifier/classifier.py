from functools import lru_cache
from typing import Iterable, List, Tuple, Union
import logging
import unicodedata

from tokenkit.classifier.types import CharClass
from tokenkit.errors import ConfigurationError

# Configure logging
logger = logging.getLogger(__name__)

# Code points below this limit are classified from a table built at import
_TABLE_SIZE = 0x3000

_MAJOR_CATEGORIES = {
    "L": CharClass.LETTER,
    "N": CharClass.DIGIT,
    "P": CharClass.PUNCTUATION,
    "M": CharClass.MARK,
}


def _category_class(char: str) -> CharClass:
    if char.isspace():
        return CharClass.WHITESPACE
    category = unicodedata.category(char)
    return _MAJOR_CATEGORIES.get(category[0], CharClass.OTHER)


_BASE_TABLE: Tuple[CharClass, ...] = tuple(
    _category_class(chr(cp)) for cp in range(_TABLE_SIZE)
)


@lru_cache(maxsize=4096)
def _lookup(char: str) -> CharClass:
    return _category_class(char)


class CharacterClassifier:
    """
    Classifies code points into the categories the boundary rules work with.

    The classifier is immutable after construction and can be shared freely
    between threads. Join marks (for example the apostrophe in contractions)
    are reported as ``CharClass.JOINER`` only when passed explicitly.
    """

    def __init__(self, join_marks: Iterable[str] = ()):
        """
        Initialize the classifier.

        Args:
            join_marks: Single characters to report as JOINER instead of
                their Unicode category

        Raises:
            ConfigurationError: If a join mark is not a single character
        """
        marks = frozenset(join_marks)
        for mark in marks:
            if not isinstance(mark, str) or len(mark) != 1:
                raise ConfigurationError(
                    f"Join marks must be single characters, got {mark!r}"
                )
        self._join_marks = marks
        logger.debug(f"Initialized CharacterClassifier with join_marks={sorted(marks)}")

    @property
    def join_marks(self) -> frozenset:
        return self._join_marks

    def classify(self, code_point: Union[str, int]) -> CharClass:
        """
        Classify a single code point.

        Args:
            code_point: A one-character string or an integer code point

        Returns:
            The character's CharClass

        Raises:
            ValueError: If the argument is not a single valid code point

        Examples:
            >>> classifier = CharacterClassifier()
            >>> classifier.classify("a")
            <CharClass.LETTER: 'letter'>
            >>> classifier.classify(0x20)
            <CharClass.WHITESPACE: 'whitespace'>
        """
        if isinstance(code_point, int):
            if not 0 <= code_point <= 0x10FFFF:
                raise ValueError(f"Invalid code point: {code_point}")
            char = chr(code_point)
        elif isinstance(code_point, str) and len(code_point) == 1:
            char = code_point
        else:
            raise ValueError("Expected a single character or an integer code point")

        if char in self._join_marks:
            return CharClass.JOINER

        cp = ord(char)
        if cp < _TABLE_SIZE:
            return _BASE_TABLE[cp]
        return _lookup(char)

    def classify_text(self, text: str) -> List[CharClass]:
        """Classify every code point of ``text``."""
        return [self.classify(char) for char in text]
