from typing import Iterator, List, Tuple
import logging

from tokenkit.classifier.types import CharClass
from tokenkit.extractor.base import SegmentExtractor
from tokenkit.extractor.types import Token

# Configure logging
logger = logging.getLogger(__name__)


class CharacterExtractor(SegmentExtractor):
    """
    One token per character.

    Combining marks stay attached to the character they follow, so "e" plus
    a combining acute accent is a single token. Whitespace is skipped.
    """

    def spans(self, text: str) -> Iterator[Tuple[int, int]]:
        return self._char_spans(text, 0, len(text))

    def extract_runs(
        self, text: str, ignore_word_boundaries: bool = False
    ) -> List[List[Token]]:
        """
        Extract character tokens grouped into runs for windowing.

        Args:
            text: Input text string
            ignore_word_boundaries: Return a single run over the whole text,
                whitespace characters included

        Returns:
            One list of character tokens per whitespace-delimited run
            (or a single list when word boundaries are ignored)

        Examples:
            >>> runs = CharacterExtractor().extract_runs("to be")
            >>> [[t.text for t in run] for run in runs]
            [['t', 'o'], ['b', 'e']]
        """
        if ignore_word_boundaries:
            run = self.tokens_from_spans(
                text, self._char_spans(text, 0, len(text)), keep_whitespace=True
            )
            return [run] if run else []

        runs = []
        for start, end in self._word_runs(text):
            run = self.tokens_from_spans(text, self._char_spans(text, start, end))
            if run:
                runs.append(run)
        logger.debug(f"Split {len(text)} code points into {len(runs)} character runs")
        return runs

    def _char_spans(self, text: str, start: int, end: int) -> Iterator[Tuple[int, int]]:
        classify = self._classifier.classify
        i = start
        while i < end:
            j = i + 1
            if classify(text[i]) != CharClass.WHITESPACE:
                while j < end and classify(text[j]) == CharClass.MARK:
                    j += 1
            yield i, j
            i = j

    def _word_runs(self, text: str) -> Iterator[Tuple[int, int]]:
        classify = self._classifier.classify
        start = None
        for i, char in enumerate(text):
            if classify(char) == CharClass.WHITESPACE:
                if start is not None:
                    yield start, i
                    start = None
            elif start is None:
                start = i
        if start is not None:
            yield start, len(text)
