"""Encoding recovery and escape-sequence handling."""

from reprompt.codec.ansi import strip_ansi
from reprompt.codec.cp1252 import encode_cp1252_strict
from reprompt.codec.variants import generate_variants

__all__ = ["strip_ansi", "encode_cp1252_strict", "generate_variants"]
