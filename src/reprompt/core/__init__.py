"""Core types: constants, errors, settings and the resource transaction."""

from reprompt.core.errors import (
    CriticalFailureError,
    RepromptError,
    ResourceAccessError,
    SnapshotError,
    TransactionError,
    TransactionStateError,
    ValidationError,
    VerifyError,
    WriteError,
)
from reprompt.core.settings import Settings, ValidationPolicy
from reprompt.core.transaction import CommitOutcome, ResourceTransaction, TransactionState

__all__ = [
    "CommitOutcome",
    "CriticalFailureError",
    "RepromptError",
    "ResourceAccessError",
    "ResourceTransaction",
    "Settings",
    "SnapshotError",
    "TransactionError",
    "TransactionState",
    "TransactionStateError",
    "ValidationError",
    "ValidationPolicy",
    "VerifyError",
    "WriteError",
]
