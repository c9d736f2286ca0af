"""Windows-1252 (Western) character set conversion."""

from reprompt.core.constants import CP1252_TO_UNICODE


# Build reverse mapping
UNICODE_TO_CP1252: dict[str, int] = {
    char: idx for idx, char in enumerate(CP1252_TO_UNICODE) if char is not None
}


def encode_cp1252_strict(text: str) -> bytes | None:
    """
    Convert a Unicode string back to Windows-1252 bytes.

    Returns None if any character has no byte in the table, which includes
    the C1 controls sitting in the codepage gaps.
    """
    result = bytearray()
    for char in text:
        byte = UNICODE_TO_CP1252.get(char)
        if byte is None:
            return None
        result.append(byte)
    return bytes(result)


def encode_latin1_strict(text: str) -> bytes | None:
    """Convert a Unicode string to ISO-8859-1 bytes, or None if it does not fit."""
    result = bytearray()
    for char in text:
        code = ord(char)
        if code > 0xFF:
            return None
        result.append(code)
    return bytes(result)
