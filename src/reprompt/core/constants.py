"""Shared constants for terminal text sanitizing."""

# ANSI escape markers
ESC = "\x1b"
CSI_C1 = "\x9b"  # Single-byte C1 equivalent of ESC [
BEL = "\x07"

BOM = "\ufeff"
REPLACEMENT_CHAR = "\ufffd"

# Windows-1252 to Unicode mapping (bytes 0x00-0xFF)
# Source: https://en.wikipedia.org/wiki/Windows-1252
# None marks the five undefined positions.
CP1252_TO_UNICODE: tuple[str | None, ...] = (
    # 0x00-0x7F: identical to ASCII
    *(chr(b) for b in range(0x80)),
    # 0x80-0x9F: Windows-specific punctuation and letters
    '€', None,     '‚', 'ƒ', '„', '…', '†', '‡',
    'ˆ', '‰', 'Š', '‹', 'Œ', None,     'Ž', None,
    None,     '‘', '’', '“', '”', '•', '–', '—',
    '˜', '™', 'š', '›', 'œ', None,     'ž', 'Ÿ',
    # 0xA0-0xFF: identical to ISO-8859-1
    *(chr(b) for b in range(0xA0, 0x100)),
)

# Unicode blocks drawn by terminal UIs
BOX_DRAWING_RANGE = (0x2500, 0x257F)
BLOCK_ELEMENTS_RANGE = (0x2580, 0x259F)

# Line and corner glyphs outside the box-drawing block
NAMED_BORDER_GLYPHS = frozenset(
    "⌈⌉⌊⌋"              # ceiling/floor corners
    "⎡⎢⎣⎤⎥⎦"  # square bracket pieces
    "⎸⎹⎺⎻⎼⎽"  # box lines and scan lines
    "⎾⎿⏋⏌"              # dentistry corners
    "¦"                                # broken bar
)

# Lead bytes of UTF-8 box glyphs (0xE2) and padding (0xC2) as rendered
# through a Western codepage.
MOJIBAKE_BORDER_LETTERS = frozenset("\u00e2\u00c2")  # â Â

# '?' shows up in corrupted border fragments but is real punctuation
NEVER_BORDER = frozenset("?")

CORNER_GLYPHS = (
    "╭╮╰╯┌┐└┘╔╗╚╝╓╖╙╜╒╕╘╛"
    "├┤┬┴┼╠╣╦╩╬╞╡╟╢╤╧╥╨╪╫"
)
HORIZONTAL_GLYPHS = "─━═┄┅┈┉╌╍╼╾"
VERTICAL_GLYPHS = "│║┃"

# Pipeline tuning
MAX_CONSECUTIVE_BLANKS = 2

# Candidate scores
SCORE_REPLACEMENT = -10
SCORE_BORDER = -2
SCORE_ALNUM = 4
SCORE_PUNCTUATION = 2
SCORE_WHITESPACE = 1
SCORE_OTHER = -1
