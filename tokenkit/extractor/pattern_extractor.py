from typing import Iterator, Optional, Tuple
import logging

import regex

from tokenkit.extractor.base import SegmentExtractor
from tokenkit.extractor.normalizer import TokenNormalizer
from tokenkit.extractor.patterns import HYPHENATED_WORD

# Configure logging
logger = logging.getLogger(__name__)


class PatternExtractExtractor(SegmentExtractor):
    """
    Keeps only the spans matching an inclusion pattern.

    The pattern is compiled in POSIX mode, so among candidate matches
    starting at the leftmost position the longest one wins regardless of
    the order of alternatives.
    """

    def __init__(
        self,
        pattern: str = HYPHENATED_WORD,
        normalizer: Optional[TokenNormalizer] = None,
        strip_punctuation: bool = False,
        **kwargs,
    ):
        """
        Initialize the extractor.

        Args:
            pattern: Inclusion regular expression
            normalizer: Token filters applied to each match
            strip_punctuation: Strip leading/trailing punctuation from matches
            **kwargs: Passed on to SegmentExtractor

        Raises:
            regex.error: If the pattern does not compile
        """
        super().__init__(
            normalizer=normalizer, strip_punctuation=strip_punctuation, **kwargs
        )
        self._pattern = regex.compile(pattern, regex.POSIX)
        logger.debug(f"Initialized PatternExtractExtractor with pattern={pattern!r}")

    def spans(self, text: str) -> Iterator[Tuple[int, int]]:
        """
        Yield the spans of non-empty matches.

        Examples:
            >>> list(PatternExtractExtractor().spans("isn't it."))
            [(0, 5), (6, 8)]
        """
        for match in self._pattern.finditer(text):
            start, end = match.span()
            if end > start:
                yield start, end
