"""Bank reconciliation: pair statement lines with ledger entries 1:1."""

import logging
import threading
from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal

from ledger_engine.engine.balances import chronological_key
from ledger_engine.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidEntityStateError,
    MatchRejectedError,
)
from ledger_engine.models.bank import BankStatementLine
from ledger_engine.models.enums import MatchRejectReason
from ledger_engine.models.journal import JournalEntry
from ledger_engine.models.reports import ReconciliationMatch, ReconciliationSummary
from ledger_engine.money import ZERO

logger = logging.getLogger(__name__)


def signed_amount(entry: JournalEntry) -> Decimal:
    """Entry amount as it appears on the bank statement (``debit - credit``)."""
    return entry.debit - entry.credit


def match_transactions(
    bank_line: BankStatementLine,
    entry: JournalEntry,
    matched_entry_ids: set[int] | None = None,
) -> ReconciliationMatch:
    """Reconcile a bank line with a ledger entry.

    The amounts must be exactly equal, with the bank amount compared to
    ``debit - credit`` of the entry. Neither record may already be part of a
    match. On acceptance the bank line is flagged ``matched`` and the entry
    id is added to ``matched_entry_ids``, so a second attempt against
    either record is refused. A rejected pair leaves both untouched.

    Parameters
    ----------
    bank_line : BankStatementLine
        Statement line; flagged on acceptance.
    entry : JournalEntry
        Posted ledger entry.
    matched_entry_ids : set[int] | None
        Ids of entries already consumed; updated on acceptance.

    Raises
    ------
    MatchRejectedError
        With the reason the pair was refused.
    InvalidEntityStateError
        If the entry has not been posted (no id).
    """
    if entry.id is None:
        raise InvalidEntityStateError("Cannot reconcile an entry that has not been posted")

    if bank_line.matched:
        raise MatchRejectedError(
            MatchRejectReason.BANK_LINE_MATCHED,
            f"Bank line {bank_line.id} is already matched",
        )
    if matched_entry_ids is not None and entry.id in matched_entry_ids:
        raise MatchRejectedError(
            MatchRejectReason.ENTRY_MATCHED,
            f"Journal entry {entry.id} is already matched",
        )

    ledger_amount = signed_amount(entry)
    if bank_line.amount != ledger_amount:
        raise MatchRejectedError(
            MatchRejectReason.AMOUNT_MISMATCH,
            f"Bank amount {bank_line.amount} does not equal ledger amount {ledger_amount}",
        )

    bank_line.matched = True
    if matched_entry_ids is not None:
        matched_entry_ids.add(entry.id)
    return ReconciliationMatch(
        bank_line_id=bank_line.id,
        entry_id=entry.id,
        amount=ledger_amount,
        matched_at=datetime.now(),
    )


class Reconciler:
    """Stateful matcher for one bank account.

    Matching is serialized so a bank line or entry is consumed at most once,
    even when several callers reconcile concurrently.

    Parameters
    ----------
    bank_lines : Iterable[BankStatementLine]
        Statement lines to reconcile; more can be added later.
    """

    def __init__(self, bank_lines: Iterable[BankStatementLine] = ()):
        self._lock = threading.Lock()
        self._bank_lines: dict[int, BankStatementLine] = {}
        self._matched_entry_ids: set[int] = set()
        self.matches: list[ReconciliationMatch] = []
        for line in bank_lines:
            self.add_bank_line(line)

    def add_bank_line(self, line: BankStatementLine) -> None:
        with self._lock:
            if line.id in self._bank_lines:
                raise DuplicateEntityError(f"Bank line {line.id} already loaded")
            self._bank_lines[line.id] = line

    def get_bank_line(self, bank_line_id: int) -> BankStatementLine:
        line = self._bank_lines.get(bank_line_id)
        if line is None:
            raise EntityNotFoundError(f"Bank line {bank_line_id} not found")
        return line

    @property
    def bank_lines(self) -> list[BankStatementLine]:
        return list(self._bank_lines.values())

    @property
    def matched_entry_ids(self) -> frozenset[int]:
        return frozenset(self._matched_entry_ids)

    def match(self, bank_line_id: int, entry: JournalEntry) -> ReconciliationMatch:
        """Match a bank line to an entry and mark both as consumed."""
        with self._lock:
            line = self.get_bank_line(bank_line_id)
            result = match_transactions(line, entry, self._matched_entry_ids)
            self.matches.append(result)

        logger.info(
            "Matched bank line %d to entry %d (%s)",
            line.id,
            result.entry_id,
            result.amount,
            extra={"bank_line_id": line.id, "entry_id": result.entry_id, "amount": result.amount},
        )
        return result

    def unmatched_bank_lines(self) -> list[BankStatementLine]:
        return sorted(
            (line for line in self._bank_lines.values() if not line.matched),
            key=lambda line: (line.transaction_date, line.id),
        )

    def unmatched_entries(self, entries: Iterable[JournalEntry]) -> list[JournalEntry]:
        return sorted(
            (e for e in entries if e.id not in self._matched_entry_ids),
            key=chronological_key,
        )

    def suggest_matches(
        self, entries: Iterable[JournalEntry]
    ) -> list[tuple[BankStatementLine, JournalEntry]]:
        """Greedy equal-amount pairing of unmatched lines and entries.

        Bank lines are taken in date order and each is paired with the
        earliest unused entry of the same signed amount. Nothing is matched;
        callers confirm pairs through :meth:`match`.
        """
        candidates = self.unmatched_entries(entries)
        used: set[int] = set()
        pairs: list[tuple[BankStatementLine, JournalEntry]] = []
        for line in self.unmatched_bank_lines():
            for entry in candidates:
                if entry.id in used or entry.id is None:
                    continue
                if signed_amount(entry) == line.amount:
                    used.add(entry.id)
                    pairs.append((line, entry))
                    break
        return pairs

    def summary(self, entries: Iterable[JournalEntry]) -> ReconciliationSummary:
        entries = list(entries)
        return ReconciliationSummary(
            statement_total=sum((line.amount for line in self._bank_lines.values()), ZERO),
            ledger_total=sum((signed_amount(e) for e in entries), ZERO),
            matched_count=len(self.matches),
            unmatched_bank_lines=len(self.unmatched_bank_lines()),
            unmatched_entries=len(self.unmatched_entries(entries)),
        )
