"""Line-by-line assembly of cleaned text."""

from enum import Enum, auto
from typing import Iterator

from reprompt.core.constants import MAX_CONSECUTIVE_BLANKS
from reprompt.repair.borders import (
    is_border_dominated,
    is_pure_border_line,
    is_titled_border_line,
)
from reprompt.repair.unwrap import match_content_wrapper, scrub_inline, unwrap_framed


class LineKind(Enum):
    """How a physical line was interpreted."""
    PURE_BORDER = auto()
    TITLED_BORDER = auto()
    BORDER_DOMINATED = auto()
    FRAMED = auto()
    WRAPPED = auto()
    PLAIN = auto()

    @property
    def dropped(self) -> bool:
        return self in (
            LineKind.PURE_BORDER,
            LineKind.TITLED_BORDER,
            LineKind.BORDER_DOMINATED,
        )


def classify_line(line: str) -> tuple[LineKind, str]:
    """
    Classify one physical line and return the text to emit for it.

    Checks run in priority order; the text is empty for dropped lines.
    """
    if is_pure_border_line(line):
        return LineKind.PURE_BORDER, ''
    if is_titled_border_line(line):
        return LineKind.TITLED_BORDER, ''
    if is_border_dominated(line):
        return LineKind.BORDER_DOMINATED, ''

    content = unwrap_framed(line)
    if content is not None:
        return LineKind.FRAMED, scrub_inline(content)

    content = match_content_wrapper(line)
    if content is not None:
        return LineKind.WRAPPED, scrub_inline(content)

    # Pipes in markdown tables and code stay as they are
    return LineKind.PLAIN, scrub_inline(line)


def split_lines(text: str) -> Iterator[str]:
    """Split on LF only, dropping the CR of CRLF endings."""
    for line in text.split('\n'):
        yield line[:-1] if line.endswith('\r') else line


def assemble(text: str) -> str:
    """Clean every line of text and join the survivors."""
    lines: list[str] = []
    blank_run = 0

    for line in split_lines(text):
        kind, content = classify_line(line)
        if kind.dropped:
            continue

        if not content.strip():
            if blank_run >= MAX_CONSECUTIVE_BLANKS:
                continue
            blank_run += 1
        else:
            blank_run = 0
        lines.append(content)

    return '\n'.join(lines).rstrip()
