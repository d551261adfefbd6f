"""Balanced-transaction checks applied before a journal is accepted."""

from collections.abc import Collection

from ledger_engine.exceptions import JournalValidationError
from ledger_engine.models.enums import ValidationErrorKind
from ledger_engine.models.journal import Journal
from ledger_engine.money import ZERO

MIN_ENTRIES = 2


def validate_journal(journal: Journal, known_account_ids: Collection[int]) -> None:
    """Validate a candidate journal.

    Lines with both sides zero are ignored, matching the entry form which
    drops them on submit. A journal made only of such lines has no amount
    and is rejected as ``ZERO_AMOUNT``. Infinite and NaN amounts are
    rejected as ``INVALID_LINE`` before anything else is compared. The
    checks run in a fixed order so the reported cause is deterministic:

    1. at least two non-empty lines (``TOO_FEW_ENTRIES``)
    2. no negative amounts and no line with both sides set (``INVALID_LINE``)
    3. every line references a known account (``MISSING_ACCOUNT``)
    4. total debit is positive (``ZERO_AMOUNT``)
    5. total debit equals total credit exactly (``UNBALANCED``)

    Parameters
    ----------
    journal : Journal
        Candidate journal; not modified.
    known_account_ids : Collection[int]
        Ids of the accounts registered for the company.

    Raises
    ------
    JournalValidationError
        With ``kind`` set to the first failing check.
    """
    for index, entry in enumerate(journal.entries):
        if not (entry.debit.is_finite() and entry.credit.is_finite()):
            raise JournalValidationError(
                ValidationErrorKind.INVALID_LINE,
                f"Line {index} has a non-finite amount",
                entry_index=index,
            )

    lines = [(index, entry) for index, entry in enumerate(journal.entries) if not entry.is_empty]

    if journal.entries and not lines:
        raise JournalValidationError(
            ValidationErrorKind.ZERO_AMOUNT,
            "Journal total must be greater than zero",
        )

    if len(lines) < MIN_ENTRIES:
        raise JournalValidationError(
            ValidationErrorKind.TOO_FEW_ENTRIES,
            f"Journal needs at least {MIN_ENTRIES} non-empty lines, got {len(lines)}",
        )

    for index, entry in lines:
        if entry.debit < 0 or entry.credit < 0:
            raise JournalValidationError(
                ValidationErrorKind.INVALID_LINE,
                f"Line {index} has a negative amount",
                entry_index=index,
            )
        if entry.debit > 0 and entry.credit > 0:
            raise JournalValidationError(
                ValidationErrorKind.INVALID_LINE,
                f"Line {index} has both a debit and a credit",
                entry_index=index,
            )

    for index, entry in lines:
        if entry.account_id not in known_account_ids:
            raise JournalValidationError(
                ValidationErrorKind.MISSING_ACCOUNT,
                f"Line {index} references unknown account {entry.account_id}",
                entry_index=index,
            )

    total_debit = sum((entry.debit for _, entry in lines), ZERO)
    total_credit = sum((entry.credit for _, entry in lines), ZERO)

    if total_debit <= 0:
        raise JournalValidationError(
            ValidationErrorKind.ZERO_AMOUNT,
            "Journal total must be greater than zero",
        )

    if total_debit != total_credit:
        raise JournalValidationError(
            ValidationErrorKind.UNBALANCED,
            f"Debits ({total_debit}) do not equal credits ({total_credit})",
        )


def check_journal(
    journal: Journal, known_account_ids: Collection[int]
) -> JournalValidationError | None:
    """Return the validation error for ``journal``, or None when it is valid."""
    try:
        validate_journal(journal, known_account_ids)
    except JournalValidationError as e:
        return e
    return None
