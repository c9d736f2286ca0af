"""
Repair module - strip terminal UI framing from captured text.

Removes box-drawing borders and padding drawn around content while
leaving content that merely contains pipes, such as markdown tables or
code, untouched.
"""

from reprompt.repair.cleaner import clean, clean_text, CleanResult

__all__ = ["clean", "clean_text", "CleanResult"]
