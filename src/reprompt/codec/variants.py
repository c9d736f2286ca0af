"""
Alternative readings of captured text.

Terminal bridges sometimes hand over UTF-8 bytes that were decoded one
byte at a time with a Western codepage, so a border like '│' arrives as
'â”‚'. Each recovery here reverses that exactly: map every character back
to its byte, then decode the bytes as UTF-8. A reading is only offered
when that decode succeeds.
"""

from typing import Callable

from reprompt.codec.cp1252 import encode_cp1252_strict, encode_latin1_strict
from reprompt.core.constants import BOM


# Tried in order after the baseline
RECOVERY_ENCODERS: tuple[Callable[[str], bytes | None], ...] = (
    encode_cp1252_strict,
    encode_latin1_strict,
)


def recover_utf8(text: str, encoder: Callable[[str], bytes | None]) -> str | None:
    """Reinterpret text as mis-decoded UTF-8. Returns None if that is impossible."""
    data = encoder(text)
    if data is None:
        return None
    try:
        recovered = data.decode('utf-8')
    except UnicodeDecodeError:
        return None
    return recovered.lstrip(BOM)


def generate_variants(raw: str) -> list[str]:
    """
    Produce the candidate readings of raw text.

    The first entry is always the raw text itself with any leading byte-order
    mark removed. Recovered readings follow, each kept only when it differs
    from every earlier candidate.
    """
    baseline = raw.lstrip(BOM)
    variants = [baseline]

    for encoder in RECOVERY_ENCODERS:
        candidate = recover_utf8(baseline, encoder)
        if candidate is not None and candidate not in variants:
            variants.append(candidate)

    return variants
