from typing import Optional, Tuple

from tokenkit.boundary.types import BoundaryRule, ScanState
from tokenkit.classifier.types import CharClass, NEWLINES

_RUN_CLASSES = (CharClass.LETTER, CharClass.DIGIT)
_ALPHANUMERIC = {CharClass.LETTER, CharClass.DIGIT}


def _no_break_crlf(state: ScanState, i: int) -> Optional[bool]:
    if state.text[i - 1] == "\r" and state.text[i] == "\n":
        return False
    return None


def _break_around_newline(state: ScanState, i: int) -> Optional[bool]:
    if state.text[i - 1] in NEWLINES or state.text[i] in NEWLINES:
        return True
    return None


def _no_break_in_run(state: ScanState, i: int) -> Optional[bool]:
    prev, cur = state.classes[i - 1], state.classes[i]
    if prev == cur and cur in _RUN_CLASSES:
        return False
    return None


def _no_break_in_contraction(state: ScanState, i: int) -> Optional[bool]:
    classes = state.classes
    # letter JOINER letter, checked from both sides of the joiner
    if classes[i] == CharClass.JOINER:
        if classes[i - 1] == CharClass.LETTER and _class_at(state, i + 1) == CharClass.LETTER:
            return False
    elif classes[i - 1] == CharClass.JOINER and classes[i] == CharClass.LETTER:
        if _class_at(state, i - 2) == CharClass.LETTER:
            return False
    return None


def _no_break_alphanumeric(state: ScanState, i: int) -> Optional[bool]:
    if not state.rules.join_alphanumeric:
        return None
    if {state.classes[i - 1], state.classes[i]} == _ALPHANUMERIC:
        return False
    return None


def _no_break_in_number(state: ScanState, i: int) -> Optional[bool]:
    separators = state.rules.numeric_separators
    if not separators:
        return None
    text, classes = state.text, state.classes
    if text[i] in separators:
        if classes[i - 1] == CharClass.DIGIT and _class_at(state, i + 1) == CharClass.DIGIT:
            return False
    elif text[i - 1] in separators and classes[i] == CharClass.DIGIT:
        if _class_at(state, i - 2) == CharClass.DIGIT:
            return False
    return None


def _no_break_in_whitespace(state: ScanState, i: int) -> Optional[bool]:
    if state.classes[i - 1] == CharClass.WHITESPACE and state.classes[i] == CharClass.WHITESPACE:
        return False
    return None


def _class_at(state: ScanState, i: int) -> Optional[CharClass]:
    if 0 <= i < len(state.classes):
        return state.classes[i]
    return None


# Evaluated in order; the first rule returning a decision wins and any
# position no rule decides is a break.
BOUNDARY_RULES: Tuple[BoundaryRule, ...] = (
    BoundaryRule("crlf", _no_break_crlf),
    BoundaryRule("newline", _break_around_newline),
    BoundaryRule("letter_or_digit_run", _no_break_in_run),
    BoundaryRule("contraction", _no_break_in_contraction),
    BoundaryRule("alphanumeric", _no_break_alphanumeric),
    BoundaryRule("numeric_separator", _no_break_in_number),
    BoundaryRule("whitespace_run", _no_break_in_whitespace),
)
