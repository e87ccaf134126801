from typing import AbstractSet, Iterable, List, Optional, Tuple
import logging

from tokenkit.classifier.classifier import CharacterClassifier
from tokenkit.classifier.types import CharClass
from tokenkit.extractor.types import Token

# Configure logging
logger = logging.getLogger(__name__)

_KEPT_BY_ALPHANUMERIC_STRIP = (CharClass.LETTER, CharClass.DIGIT, CharClass.MARK)


class TokenNormalizer:
    """
    Applies the token filters in their fixed order:

    1. lowercasing
    2. stripping non-alphanumeric code points
    3. dropping purely numeric tokens
    4. dropping stopwords (exact match against the already-normalized form)

    A token that ends up empty is dropped.
    """

    def __init__(
        self,
        classifier: Optional[CharacterClassifier] = None,
        lowercase: bool = False,
        strip_non_alphanumeric: bool = False,
        strip_numeric: bool = False,
        stopwords: AbstractSet[str] = frozenset(),
        numeric_separators: str = ".,",
    ):
        self._classifier = classifier or CharacterClassifier()
        self._lowercase = lowercase
        self._strip_non_alphanumeric = strip_non_alphanumeric
        self._strip_numeric = strip_numeric
        self._stopwords = frozenset(stopwords)
        self._numeric_separators = numeric_separators
        logger.debug(
            f"Initialized TokenNormalizer with lowercase={lowercase}, "
            f"strip_non_alphanumeric={strip_non_alphanumeric}, "
            f"strip_numeric={strip_numeric}, stopwords={len(self._stopwords)}"
        )

    def normalize(self, text: str) -> Optional[str]:
        """
        Normalize a single token.

        Args:
            text: Raw token text

        Returns:
            The normalized text, or None if the token is dropped

        Examples:
            >>> TokenNormalizer(lowercase=True, stopwords={"the"}).normalize("The")
            >>> TokenNormalizer(lowercase=True).normalize("Dog")
            'dog'
        """
        if self._lowercase:
            text = text.lower()

        if self._strip_non_alphanumeric:
            text = "".join(
                char
                for char in text
                if self._classifier.classify(char) in _KEPT_BY_ALPHANUMERIC_STRIP
            )

        if not text:
            return None

        if self._strip_numeric and self.is_numeric(text):
            return None

        if text in self._stopwords:
            return None

        return text

    def is_numeric(self, text: str) -> bool:
        """True if ``text`` holds only digits and numeric separators."""
        has_digit = False
        for char in text:
            if self._classifier.classify(char) == CharClass.DIGIT:
                has_digit = True
            elif char not in self._numeric_separators:
                return False
        return has_digit

    def to_tokens(self, text: str, spans: Iterable[Tuple[int, int]]) -> List[Token]:
        """Normalize each span of ``text`` and build the surviving tokens."""
        tokens = []
        for start, end in spans:
            normalized = self.normalize(text[start:end])
            if normalized is not None:
                tokens.append(Token(text=normalized, start=start, end=end))
        return tokens
