"""One read, clean and maybe-write pass over a resource."""

from dataclasses import dataclass

from reprompt.core.settings import ValidationPolicy
from reprompt.core.transaction import CommitOutcome, ResourceTransaction
from reprompt.io.resource import ResourceAccess
from reprompt.repair.cleaner import CleanResult, clean


@dataclass
class SessionResult:
    outcome: CommitOutcome
    clean_result: CleanResult | None = None

    @property
    def changed(self) -> bool:
        """True if new content was written to the resource."""
        return self.outcome is CommitOutcome.WRITTEN


def run_session(
    resource: ResourceAccess,
    policy: ValidationPolicy | None = None,
) -> SessionResult:
    """
    Clean the resource's content in place.

    Transaction errors propagate; the caller decides how to report them.
    """
    txn = ResourceTransaction.create(resource, policy)
    if not txn.original.strip():
        return SessionResult(CommitOutcome.SKIPPED)

    cleaned, result = clean(txn.original)
    txn.set_modified(cleaned)
    txn.validate()
    outcome = txn.commit()
    return SessionResult(outcome, result)
