"""
Snapshot / validate / commit / verify / rollback around the shared resource.

The resource (usually the clipboard) has no transactional primitives of its
own, so safety comes from this protocol:

    txn = ResourceTransaction.create(resource)
    txn.set_modified(cleaned)
    txn.validate()
    txn.commit()

A failed write or readback restores the original text. If even that
fails, CriticalFailureError is raised and the resource state is unknown.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import TYPE_CHECKING, NoReturn

from reprompt.core.constants import REPLACEMENT_CHAR
from reprompt.core.errors import (
    CriticalFailureError,
    ResourceAccessError,
    SnapshotError,
    TransactionStateError,
    ValidationError,
    VerifyError,
    WriteError,
)
from reprompt.core.settings import ValidationPolicy

if TYPE_CHECKING:
    from reprompt.io.resource import ResourceAccess

logger = logging.getLogger(__name__)


class TransactionState(Enum):
    CREATED = auto()
    MODIFIED = auto()
    VALIDATED = auto()
    COMMITTED = auto()
    ABORTED = auto()
    CRITICAL_FAILURE = auto()


class CommitOutcome(Enum):
    """How a session ended without error."""
    WRITTEN = auto()
    UNCHANGED = auto()  # cleaned text equals the original, nothing written
    SKIPPED = auto()  # resource held no content


def _normalize(text: str) -> str:
    # Platforms may rewrite line endings or pad the end on round trip
    return text.replace('\r\n', '\n').rstrip()


class ResourceTransaction:
    """One read-clean-write cycle against a ResourceAccess backend."""

    def __init__(
        self,
        resource: ResourceAccess,
        original: str,
        policy: ValidationPolicy | None = None,
    ):
        self._resource = resource
        self._original = original
        self._modified: str | None = None
        self._policy = policy or ValidationPolicy()
        self._state = TransactionState.CREATED

    @classmethod
    def create(
        cls,
        resource: ResourceAccess,
        policy: ValidationPolicy | None = None,
    ) -> ResourceTransaction:
        """Snapshot the resource. Raises SnapshotError if it cannot be read."""
        try:
            original = resource.read()
        except ResourceAccessError as exc:
            raise SnapshotError(f"could not read resource: {exc}") from exc
        return cls(resource, original, policy)

    @property
    def state(self) -> TransactionState:
        return self._state

    @property
    def original(self) -> str:
        return self._original

    @property
    def modified(self) -> str | None:
        return self._modified

    def _require(self, state: TransactionState, operation: str) -> None:
        if self._state is not state:
            raise TransactionStateError(
                f"cannot {operation} in state {self._state.name}"
            )

    def set_modified(self, text: str) -> None:
        """Record the cleaned candidate. Allowed once."""
        self._require(TransactionState.CREATED, "set modified text")
        self._modified = text
        self._state = TransactionState.MODIFIED

    def validate(self) -> None:
        """
        Reject candidates that are unsafe to write.

        Raises ValidationError if the candidate contains a replacement
        character, or if it is blank while the original had substantial
        content. A very large shrink is only logged.
        """
        self._require(TransactionState.MODIFIED, "validate")
        modified = self._modified or ''
        policy = self._policy

        if REPLACEMENT_CHAR in modified:
            self._state = TransactionState.ABORTED
            raise ValidationError("cleaned text contains decoding failures")

        if len(self._original.strip()) > policy.min_content_length and not modified.strip():
            self._state = TransactionState.ABORTED
            raise ValidationError("cleaning removed all content")

        original_size = len(self._original)
        if original_size > policy.shrink_warning_min_size:
            reduction = 1 - len(modified) / original_size
            if reduction > policy.shrink_warning_ratio:
                logger.warning(
                    "cleaned text is %.0f%% smaller than the original (%d -> %d chars)",
                    reduction * 100, original_size, len(modified),
                )

        self._state = TransactionState.VALIDATED

    def commit(self) -> CommitOutcome:
        """
        Write the validated candidate and verify it landed.

        Returns CommitOutcome.UNCHANGED without writing when nothing changed.
        Raises WriteError or VerifyError (with rolled_back=True) after a
        successful restore of the original, CriticalFailureError otherwise.
        """
        self._require(TransactionState.VALIDATED, "commit")
        modified = self._modified or ''

        if modified == self._original:
            self._state = TransactionState.COMMITTED
            return CommitOutcome.UNCHANGED

        try:
            self._resource.write(modified)
        except ResourceAccessError as exc:
            self._rollback(WriteError(f"write failed: {exc}"), exc)

        try:
            readback = self._resource.read()
        except ResourceAccessError as exc:
            self._rollback(VerifyError(f"readback failed: {exc}"), exc)

        if _normalize(readback) != _normalize(modified):
            self._rollback(VerifyError("resource content differs from what was written"))

        self._state = TransactionState.COMMITTED
        return CommitOutcome.WRITTEN

    def _rollback(
        self,
        error: WriteError | VerifyError,
        cause: Exception | None = None,
    ) -> NoReturn:
        logger.warning("%s; restoring original content", error)
        try:
            self._resource.write(self._original)
        except ResourceAccessError as exc:
            self._state = TransactionState.CRITICAL_FAILURE
            logger.critical("rollback failed, resource state is unknown: %s", exc)
            raise CriticalFailureError(
                f"{error}; restoring the original also failed: {exc}", error
            ) from exc

        self._state = TransactionState.ABORTED
        error.rolled_back = True
        raise error from cause
