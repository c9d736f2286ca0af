"""
reprompt: clean text captured from terminal UIs

Strips box-drawing frames, ANSI escape sequences and Western-codepage
mojibake from text copied out of chat agents and dashboards, then writes
it back to the clipboard only when it is safe to do so.

Quick Start:
    >>> import reprompt
    >>> reprompt.clean_text("╭──────╮\\n│ hi   │\\n╰──────╯")
    'hi'

Features:
    - Remove pure and titled border lines, framed content borders
    - Strip ANSI/VT escape sequences
    - Recover UTF-8 text that was decoded as Windows-1252 or Latin-1
    - Pick the best reading by content-quality score
    - Transactional clipboard update with verify and rollback
"""

__version__ = "0.1.0"

# Cleaning
from reprompt.repair.cleaner import clean, clean_text, CleanResult

# Resource access and transaction
from reprompt.core.transaction import CommitOutcome, ResourceTransaction
from reprompt.io.resource import MemoryResource, ResourceAccess
from reprompt.io.clipboard import select_backend
from reprompt.session import run_session, SessionResult

__all__ = [
    # Version
    "__version__",
    # Cleaning
    "clean",
    "clean_text",
    "CleanResult",
    # Resources
    "ResourceAccess",
    "MemoryResource",
    "select_backend",
    # Transaction
    "ResourceTransaction",
    "CommitOutcome",
    "run_session",
    "SessionResult",
]
