"""Remove framing borders from a single line of content."""

import re

from reprompt.core.constants import BOM, VERTICAL_GLYPHS
from reprompt.repair.borders import is_border_char


# One vertical border, at most one padding space each side, optional
# closing border. Used when the line is indented before its border.
CONTENT_WRAPPER_PATTERN = re.compile(
    rf'''
    ^
    \s*                     # indentation
    [{VERTICAL_GLYPHS}]     # opening border
    \x20?                   # padding
    (?P<content>.*?)
    \x20?                   # padding
    [{VERTICAL_GLYPHS}]?    # closing border
    \s*
    $
    ''',
    re.VERBOSE,
)


def unwrap_framed(line: str) -> str | None:
    """
    Extract the content between a line's left and right border runs.

    Returns None when the line does not start with a border character.
    Indentation after the first padding space is kept; trailing padding
    is dropped.
    """
    line = line.lstrip(BOM).rstrip()

    left = 0
    while left < len(line) and is_border_char(line[left]):
        left += 1
    if left == 0:
        return None

    if left < len(line) and line[left] == ' ':
        left += 1

    right = len(line)
    while right > left and is_border_char(line[right - 1]):
        right -= 1
    while right > left and line[right - 1].isspace():
        right -= 1

    if right <= left:
        return ''
    return line[left:right]


def match_content_wrapper(line: str) -> str | None:
    """Return the wrapped content of a lightly framed line, or None."""
    match = CONTENT_WRAPPER_PATTERN.match(line)
    if match is None:
        return None
    return match.group('content').rstrip()


def scrub_inline(text: str) -> str:
    """
    Collapse border runs left inside content into single spaces.

    No space is emitted at the start of the output or after an existing
    space. Trailing whitespace is trimmed.
    """
    out: list[str] = []
    i = 0
    while i < len(text):
        if is_border_char(text[i]):
            while i < len(text) and is_border_char(text[i]):
                i += 1
            if out and not out[-1].isspace():
                out.append(' ')
            continue
        out.append(text[i])
        i += 1
    return ''.join(out).rstrip()
