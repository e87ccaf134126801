"""
Word-boundary scanning over classified code points.
"""

from tokenkit.boundary.rules import BOUNDARY_RULES
from tokenkit.boundary.scanner import BoundaryScanner
from tokenkit.boundary.types import BoundaryRule, BoundaryRules, ScanState
from tokenkit.classifier import create_classifier


def create_scanner(
    keep_contractions: bool = False,
    join_alphanumeric: bool = False,
    numeric_separators: str = ".,",
) -> BoundaryScanner:
    """
    Factory function to create a boundary scanner.

    Args:
        keep_contractions: Keep "letter apostrophe letter" together
        join_alphanumeric: Keep adjacent letters and digits together
        numeric_separators: Characters allowed between digits of one number

    Returns:
        Configured BoundaryScanner instance
    """
    return BoundaryScanner(
        classifier=create_classifier(keep_contractions=keep_contractions),
        rules=BoundaryRules(
            join_alphanumeric=join_alphanumeric,
            numeric_separators=numeric_separators,
        ),
    )


__all__ = [
    "create_scanner",
    "BoundaryScanner",
    "BoundaryRule",
    "BoundaryRules",
    "BOUNDARY_RULES",
    "ScanState",
]
