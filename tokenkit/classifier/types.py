from enum import Enum


class CharClass(str, Enum):
    """Character categories used by the boundary rules."""

    LETTER = "letter"
    DIGIT = "digit"
    WHITESPACE = "whitespace"
    PUNCTUATION = "punctuation"
    MARK = "mark"
    JOINER = "joiner"
    OTHER = "other"


# Apostrophe and right single quotation mark
CONTRACTION_MARKS = frozenset("'’")

# Characters that end a line; "\r\n" is handled as a pair by the scanner
NEWLINES = frozenset("\n\r\x0b\x0c\x85\u2028\u2029")
