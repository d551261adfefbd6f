"""Custom exception hierarchy for ledger-engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ledger_engine.models.enums import MatchRejectReason, ValidationErrorKind


class LedgerError(Exception):
    """Base exception for all ledger-engine errors."""


class EntityNotFoundError(LedgerError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a foreign key reference is violated."""


class DuplicateEntityError(LedgerError):
    """Raised when an entity id or account number is already registered."""


class InvalidEntityStateError(LedgerError):
    """Raised when an entity is in an invalid state for the operation."""


class JournalValidationError(LedgerError):
    """Raised when a candidate journal is rejected.

    Parameters
    ----------
    kind : ValidationErrorKind
        Machine-readable cause, so callers can render a precise message.
    message : str
        Human-readable description.
    entry_index : int | None
        Position of the offending line, when the cause is line-specific.
    """

    def __init__(
        self,
        kind: ValidationErrorKind,
        message: str,
        entry_index: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.entry_index = entry_index


class MatchRejectedError(LedgerError):
    """Raised when a bank line and a ledger entry cannot be reconciled."""

    def __init__(self, reason: MatchRejectReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason


class ClassificationAmbiguousError(LedgerError):
    """Raised in strict mode when an account type matches several categories."""


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""


class SinkError(LedgerError):
    """Raised when a sink operation fails."""
