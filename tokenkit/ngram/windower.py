from typing import List, Optional, Sequence, Tuple
import logging

from tokenkit.errors import ConfigurationError
from tokenkit.extractor.types import Token

# Configure logging
logger = logging.getLogger(__name__)


class NGramWindower:
    """
    Slides windows of every width from ``n_min`` to ``n`` over a stream of
    items with stride 1.

    Windows are ordered by start position, then by width, so at a given
    start the narrowest window comes first. For a stream of length L exactly
    ``max(0, L - w + 1)`` windows of width ``w`` are produced.
    """

    def __init__(self, n: int, n_min: Optional[int] = None, delimiter: str = " "):
        """
        Initialize the windower.

        Args:
            n: Largest window width
            n_min: Smallest window width (default: n)
            delimiter: String placed between word items of a window

        Raises:
            ConfigurationError: If a width is not a positive integer or n_min > n
        """
        if n_min is None:
            n_min = n
        for name, value in (("n", n), ("n_min", n_min)):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
        if n_min > n:
            raise ConfigurationError(f"n_min ({n_min}) must not exceed n ({n})")
        if not isinstance(delimiter, str):
            raise ConfigurationError("delimiter must be a string")

        self.n = n
        self.n_min = n_min
        self.delimiter = delimiter
        logger.debug(f"Initialized NGramWindower with n_min={n_min}, n={n}")

    @staticmethod
    def count(length: int, width: int) -> int:
        """Number of windows of ``width`` over a stream of ``length`` items."""
        return max(0, length - width + 1)

    def windows(self, length: int) -> List[Tuple[int, int]]:
        """
        Compute the ``(start, width)`` pairs for a stream of ``length`` items.

        Examples:
            >>> NGramWindower(n=2, n_min=1).windows(3)
            [(0, 1), (0, 2), (1, 1), (1, 2), (2, 1)]
        """
        if length < self.n_min:
            return []
        return [
            (start, width)
            for start in range(length)
            for width in range(self.n_min, self.n + 1)
            if start + width <= length
        ]

    def window_tokens(
        self, tokens: Sequence[Token], joiner: Optional[str] = None
    ) -> List[Token]:
        """
        Build one token per window over ``tokens``.

        Args:
            tokens: Item tokens in document order
            joiner: String placed between items (default: the delimiter);
                pass "" to concatenate characters

        Returns:
            Window tokens spanning from the first item's start to the last
            item's end
        """
        joiner = self.delimiter if joiner is None else joiner
        if len(tokens) < self.n_min:
            logger.debug(
                f"Token stream too short for {self.n_min}-grams: {len(tokens)} < {self.n_min}"
            )
            return []

        return [
            Token(
                text=joiner.join(token.text for token in tokens[start : start + width]),
                start=tokens[start].start,
                end=tokens[start + width - 1].end,
            )
            for start, width in self.windows(len(tokens))
        ]
