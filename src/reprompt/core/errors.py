"""Exception hierarchy for reprompt."""


class RepromptError(Exception):
    """Base class for every error raised by reprompt."""


class ResourceAccessError(RepromptError):
    """The external text resource could not be read or written."""


class TransactionError(RepromptError):
    """Base class for transaction failures."""


class SnapshotError(TransactionError):
    """The resource could not be read when the transaction was created."""


class ValidationError(TransactionError):
    """The cleaned candidate was judged unsafe to write."""


class TransactionStateError(TransactionError):
    """A transaction operation was called out of order or reused."""


class _RollbackCapable(TransactionError):
    def __init__(self, message: str, rolled_back: bool = False):
        super().__init__(message)
        self.rolled_back = rolled_back


class WriteError(_RollbackCapable):
    """Writing the cleaned text failed."""


class VerifyError(_RollbackCapable):
    """The resource did not hold the cleaned text after writing."""


class CriticalFailureError(TransactionError):
    """
    Rollback failed after a write or verify failure.

    The resource may now hold neither the original nor the cleaned text.
    """

    def __init__(self, message: str, cause: TransactionError):
        super().__init__(message)
        self.cause = cause
