from typing import Iterator, Optional, Tuple
import logging

import regex

from tokenkit.boundary.scanner import BoundaryScanner
from tokenkit.extractor.base import SegmentExtractor
from tokenkit.extractor.normalizer import TokenNormalizer
from tokenkit.extractor.patterns import WHITESPACE

# Configure logging
logger = logging.getLogger(__name__)


class BoundarySplitExtractor(SegmentExtractor):
    """Cuts a document at every offset reported by the boundary scanner."""

    def __init__(
        self,
        scanner: Optional[BoundaryScanner] = None,
        normalizer: Optional[TokenNormalizer] = None,
        strip_punctuation: bool = False,
    ):
        """
        Initialize the extractor.

        Args:
            scanner: Boundary scanner producing the cut offsets
            normalizer: Token filters applied to each segment
            strip_punctuation: Strip leading/trailing punctuation from segments
        """
        self._scanner = scanner or BoundaryScanner()
        super().__init__(
            normalizer=normalizer,
            classifier=self._scanner.classifier,
            strip_punctuation=strip_punctuation,
        )

    def spans(self, text: str) -> Iterator[Tuple[int, int]]:
        """
        Yield the segments between consecutive boundaries.

        Examples:
            >>> list(BoundarySplitExtractor().spans("Hello, world"))
            [(0, 5), (5, 6), (6, 7), (7, 12)]
        """
        return iter(self._scanner.segments(text))


class PatternSplitExtractor(SegmentExtractor):
    """Cuts a document at every match of a separator pattern."""

    def __init__(
        self,
        pattern: str = WHITESPACE,
        normalizer: Optional[TokenNormalizer] = None,
        strip_punctuation: bool = False,
        **kwargs,
    ):
        """
        Initialize the extractor.

        Args:
            pattern: Separator regular expression; matches are discarded
            normalizer: Token filters applied to each piece
            strip_punctuation: Strip leading/trailing punctuation from pieces
            **kwargs: Passed on to SegmentExtractor

        Raises:
            regex.error: If the pattern does not compile
        """
        super().__init__(
            normalizer=normalizer, strip_punctuation=strip_punctuation, **kwargs
        )
        self._pattern = regex.compile(pattern)
        logger.debug(f"Initialized PatternSplitExtractor with pattern={pattern!r}")

    def spans(self, text: str) -> Iterator[Tuple[int, int]]:
        """
        Yield the pieces between separator matches.

        Examples:
            >>> list(PatternSplitExtractor().spans("fir-tree and sons"))
            [(0, 8), (9, 12), (13, 17)]
        """
        last = 0
        for match in self._pattern.finditer(text):
            start, end = match.span()
            if start > last:
                yield last, start
            last = max(last, end)
        if last < len(text):
            yield last, len(text)
