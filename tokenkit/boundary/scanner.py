from typing import List, Optional, Tuple
import logging

from tokenkit.boundary.rules import BOUNDARY_RULES
from tokenkit.boundary.types import BoundaryRules, ScanState
from tokenkit.classifier.classifier import CharacterClassifier
from tokenkit.classifier.types import CharClass, NEWLINES

# Configure logging
logger = logging.getLogger(__name__)


class BoundaryScanner:
    """
    Finds token boundaries in a document by applying the boundary rule
    table in priority order.

    Boundaries are code-point offsets. The text start and end are always
    boundaries for non-empty text; empty text has none. Between two code
    points the first rule in ``BOUNDARY_RULES`` that returns a decision wins,
    otherwise the position is a break.
    """

    def __init__(
        self,
        classifier: Optional[CharacterClassifier] = None,
        rules: Optional[BoundaryRules] = None,
    ):
        """
        Initialize the scanner.

        Args:
            classifier: Character classifier (default: no join marks)
            rules: Configurable rule switches (default: BoundaryRules())
        """
        self._classifier = classifier or CharacterClassifier()
        self._rules = rules or BoundaryRules()
        logger.debug(
            f"Initialized BoundaryScanner with {len(BOUNDARY_RULES)} rules, "
            f"join_alphanumeric={self._rules.join_alphanumeric}"
        )

    @property
    def classifier(self) -> CharacterClassifier:
        return self._classifier

    @property
    def rules(self) -> BoundaryRules:
        return self._rules

    def scan(self, text: str) -> List[int]:
        """
        Compute the sorted boundary offsets of a document.

        Args:
            text: Input text string

        Returns:
            Sorted, duplicate-free list of offsets

        Examples:
            >>> BoundaryScanner().scan("Hi there")
            [0, 2, 3, 8]
        """
        if not text:
            return []

        state = ScanState(text, self._effective_classes(text), self._rules)
        boundaries = [0]
        for i in range(1, len(text)):
            if self._is_break(state, i):
                boundaries.append(i)
        boundaries.append(len(text))
        return boundaries

    def segments(self, text: str) -> List[Tuple[int, int]]:
        """Return the ``(start, end)`` spans between consecutive boundaries."""
        boundaries = self.scan(text)
        return list(zip(boundaries, boundaries[1:]))

    def _is_break(self, state: ScanState, i: int) -> bool:
        for rule in BOUNDARY_RULES:
            decision = rule.decide(state, i)
            if decision is not None:
                return decision
        return True

    def _effective_classes(self, text: str) -> List[CharClass]:
        """
        Classify the text, letting combining marks take the class of the
        character they extend.
        """
        classes = self._classifier.classify_text(text)
        for i in range(1, len(classes)):
            if classes[i] != CharClass.MARK:
                continue
            prev = classes[i - 1]
            if prev != CharClass.WHITESPACE and text[i - 1] not in NEWLINES:
                classes[i] = prev
        return classes
