from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional, Tuple
import logging

from tokenkit.classifier.classifier import CharacterClassifier
from tokenkit.classifier.types import CharClass
from tokenkit.extractor.normalizer import TokenNormalizer
from tokenkit.extractor.types import Token

# Configure logging
logger = logging.getLogger(__name__)

_EDGE_CLASSES = (CharClass.PUNCTUATION, CharClass.JOINER)


class SegmentExtractor(ABC):
    """Abstract base class for segment extraction strategies."""

    def __init__(
        self,
        normalizer: Optional[TokenNormalizer] = None,
        classifier: Optional[CharacterClassifier] = None,
        strip_punctuation: bool = False,
    ):
        """
        Initialize the extractor.

        Args:
            normalizer: Token filters applied to each span
            classifier: Character classifier used for edge stripping
            strip_punctuation: Strip leading/trailing punctuation from spans
        """
        self._classifier = classifier or CharacterClassifier()
        self._normalizer = normalizer or TokenNormalizer(classifier=self._classifier)
        self._strip_punctuation = strip_punctuation

    @abstractmethod
    def spans(self, text: str) -> Iterator[Tuple[int, int]]:
        """
        Yield candidate ``(start, end)`` spans of ``text``, left to right.

        Args:
            text: Input text to segment

        Returns:
            Iterator of spans
        """
        pass

    def extract(self, text: str) -> List[Token]:
        """
        Extract normalized tokens from ``text``.

        Args:
            text: Input text string

        Returns:
            Tokens in document order
        """
        tokens = self.tokens_from_spans(text, self.spans(text))
        logger.debug(
            f"{type(self).__name__} extracted {len(tokens)} tokens from {len(text)} code points"
        )
        return tokens

    def tokens_from_spans(
        self,
        text: str,
        spans: Iterable[Tuple[int, int]],
        keep_whitespace: bool = False,
    ) -> List[Token]:
        """
        Turn raw spans into tokens.

        Whitespace-only spans are discarded unless ``keep_whitespace`` is set,
        edge punctuation is stripped if configured, and spans that end up
        empty after normalization are dropped.
        """
        kept = []
        for start, end in spans:
            if self._strip_punctuation:
                start, end = self._strip_edges(text, start, end)
            if start >= end:
                continue
            if not keep_whitespace and self._is_whitespace(text, start, end):
                continue
            kept.append((start, end))
        return self._normalizer.to_tokens(text, kept)

    def _strip_edges(self, text: str, start: int, end: int) -> Tuple[int, int]:
        classify = self._classifier.classify
        while start < end and classify(text[start]) in _EDGE_CLASSES:
            start += 1
        while end > start and classify(text[end - 1]) in _EDGE_CLASSES:
            end -= 1
        return start, end

    def _is_whitespace(self, text: str, start: int, end: int) -> bool:
        classify = self._classifier.classify
        return all(classify(text[i]) == CharClass.WHITESPACE for i in range(start, end))
