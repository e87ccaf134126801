from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Callable, List, NamedTuple, Optional

from tokenkit.classifier.types import CharClass


class BoundaryRules(BaseModel):
    """Switches for the configurable no-break rules."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    join_alphanumeric: bool = Field(
        False, description="Keep letters and digits together, e.g. '3a'"
    )
    numeric_separators: str = Field(
        ".,", description="Separators allowed between digits, e.g. '3,456.789'"
    )

    @field_validator("numeric_separators")
    @classmethod
    def validate_separators(cls, v: str) -> str:
        """Separators must not be letters, digits or whitespace."""
        for char in v:
            if char.isalnum() or char.isspace():
                raise ValueError(f"Invalid numeric separator: {char!r}")
        return v


class ScanState(NamedTuple):
    """Read-only view of a document handed to each rule."""

    text: str
    classes: List[CharClass]
    rules: BoundaryRules


class BoundaryRule(NamedTuple):
    """
    A single entry of the boundary rule table.

    ``decide`` looks at the position between ``text[i - 1]`` and ``text[i]``
    and returns True (break), False (no break) or None (rule does not apply).
    """

    name: str
    decide: Callable[[ScanState, int], Optional[bool]]
