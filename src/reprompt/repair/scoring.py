"""Content-quality score for a cleaned candidate."""

import string

from reprompt.core.constants import (
    REPLACEMENT_CHAR,
    SCORE_ALNUM,
    SCORE_BORDER,
    SCORE_OTHER,
    SCORE_PUNCTUATION,
    SCORE_REPLACEMENT,
    SCORE_WHITESPACE,
)
from reprompt.repair.borders import is_border_char


ASCII_PUNCTUATION = frozenset(string.punctuation)


def char_score(char: str) -> int:
    if char == REPLACEMENT_CHAR:
        return SCORE_REPLACEMENT
    if is_border_char(char):
        return SCORE_BORDER
    if char.isalnum():
        return SCORE_ALNUM
    if char in ASCII_PUNCTUATION:
        return SCORE_PUNCTUATION
    if char.isspace():
        return SCORE_WHITESPACE
    return SCORE_OTHER


def score_text(text: str) -> int:
    """Higher means more readable content and fewer leftover artifacts."""
    return sum(char_score(char) for char in text)
