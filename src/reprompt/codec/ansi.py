"""Strip ANSI escape sequences from text."""

import re

from reprompt.core.constants import BEL, CSI_C1, ESC


# ESC (or the C1 CSI byte), optional intermediates, up to 4 digits per
# parameter group, then a command byte. OSC strings (titles, hyperlinks)
# run until BEL or ESC \.
ANSI_PATTERN = re.compile(
    rf'{ESC}\][^{BEL}{ESC}]*(?:{BEL}|{ESC}\\)'
    rf'|[{ESC}{CSI_C1}][\[\]()#;?]*(?:[0-9]{{1,4}}(?:;[0-9]{{0,4}})*)?[0-9A-PR-TZcf-nq-uy=><~]'
)


def strip_ansi(text: str) -> str:
    """Remove escape sequences, leaving every other character in place."""
    if not text:
        return text
    return ANSI_PATTERN.sub('', text)
