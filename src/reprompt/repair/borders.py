"""
Border classification for characters and lines.

Terminal UIs frame their output with box-drawing and block glyphs. The
predicates here decide whether a character, or a whole physical line, is
framing rather than content. They are deliberately statistical: real
captures mix borders with titles, padding and corrupted fragments.
"""

import re
import unicodedata
from dataclasses import dataclass

from reprompt.core.constants import (
    BLOCK_ELEMENTS_RANGE,
    BOX_DRAWING_RANGE,
    CORNER_GLYPHS,
    HORIZONTAL_GLYPHS,
    MOJIBAKE_BORDER_LETTERS,
    NAMED_BORDER_GLYPHS,
    NEVER_BORDER,
)


TITLED_BORDER_PATTERN = re.compile(
    rf'^[\s{CORNER_GLYPHS}].*[{HORIZONTAL_GLYPHS}]{{3,}}.*[{CORNER_GLYPHS}]$'
)


def is_border_char(char: str) -> bool:
    """True if char is a box, block, line/corner glyph or a mojibake lead letter."""
    if char in NEVER_BORDER:
        return False
    code = ord(char)
    if BOX_DRAWING_RANGE[0] <= code <= BOX_DRAWING_RANGE[1]:
        return True
    if BLOCK_ELEMENTS_RANGE[0] <= code <= BLOCK_ELEMENTS_RANGE[1]:
        return True
    return char in NAMED_BORDER_GLYPHS or char in MOJIBAKE_BORDER_LETTERS


def _is_control(char: str) -> bool:
    return unicodedata.category(char).startswith('C')


@dataclass
class LineStats:
    """Character counts over the non-control characters of a trimmed line."""
    printable: int = 0
    border: int = 0
    alnum: int = 0
    longest_border_run: int = 0
    starts_with_border: bool = False
    ends_with_border: bool = False

    @property
    def framed(self) -> bool:
        return self.starts_with_border and self.ends_with_border

    # Each rule below is sufficient on its own.

    def mostly_border(self) -> bool:
        return self.border * 4 >= self.printable * 3

    def framed_border_outnumbers_text(self) -> bool:
        return self.framed and self.border > self.alnum

    def framed_half_border(self) -> bool:
        return self.framed and self.border * 2 >= self.printable

    def framed_with_long_run(self) -> bool:
        return (
            self.framed
            and self.longest_border_run >= 3
            and self.border * 2 > self.printable
        )


def line_stats(line: str) -> LineStats:
    """Collect border statistics for a line (trimmed first)."""
    stats = LineStats()
    chars = [c for c in line.strip() if not _is_control(c)]
    if not chars:
        return stats

    run = 0
    for char in chars:
        stats.printable += 1
        if is_border_char(char):
            stats.border += 1
            run += 1
            stats.longest_border_run = max(stats.longest_border_run, run)
        else:
            run = 0
            if char.isalnum():
                stats.alnum += 1

    stats.starts_with_border = is_border_char(chars[0])
    stats.ends_with_border = is_border_char(chars[-1])
    return stats


def is_border_dominated(line: str) -> bool:
    """True if the line is mostly framing and carries no meaningful content."""
    if not line.strip():
        return False
    stats = line_stats(line)
    if stats.printable == 0:
        return False
    return (
        stats.mostly_border()
        or stats.framed_border_outnumbers_text()
        or stats.framed_half_border()
        or stats.framed_with_long_run()
    )


def is_pure_border_line(line: str) -> bool:
    """True if the line holds only whitespace and border glyphs (at least one)."""
    has_border = False
    for char in line:
        if char.isspace():
            continue
        if not is_border_char(char):
            return False
        has_border = True
    return has_border


def is_titled_border_line(line: str) -> bool:
    """True for a horizontal rule with a title, e.g. '╭─── Output ───╮'."""
    return TITLED_BORDER_PATTERN.match(line.rstrip()) is not None
