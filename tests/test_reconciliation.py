"""Tests for bank reconciliation."""

import threading
from datetime import date
from decimal import Decimal

import pytest

from ledger_engine.engine.reconciliation import Reconciler, match_transactions
from ledger_engine.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidEntityStateError,
    MatchRejectedError,
)
from ledger_engine.models import BankStatementLine, JournalEntry
from ledger_engine.models.enums import MatchRejectReason


def _line(line_id: int, amount: str, day: int = 1) -> BankStatementLine:
    return BankStatementLine(
        id=line_id,
        transaction_date=date(2024, 1, day),
        description=f"Line {line_id}",
        amount=Decimal(amount),
    )


def _entry(entry_id: int | None, debit: str = "0", credit: str = "0", day: int = 1) -> JournalEntry:
    return JournalEntry(
        account_id=3,
        debit=Decimal(debit),
        credit=Decimal(credit),
        id=entry_id,
        transaction_date=date(2024, 1, day),
    )


class TestMatchTransactions:
    """Tests for match_transactions."""

    def test_deposit_matches_debit(self) -> None:
        result = match_transactions(_line(1, "500.00"), _entry(10, debit="500"))

        assert result.bank_line_id == 1
        assert result.entry_id == 10
        assert result.amount == Decimal("500")

    def test_withdrawal_matches_credit(self) -> None:
        result = match_transactions(_line(1, "-75.25"), _entry(10, credit="75.25"))

        assert result.amount == Decimal("-75.25")

    def test_amount_mismatch(self) -> None:
        with pytest.raises(MatchRejectedError) as exc_info:
            match_transactions(_line(1, "500.00"), _entry(10, debit="499.99"))

        assert exc_info.value.reason == MatchRejectReason.AMOUNT_MISMATCH

    def test_sign_matters(self) -> None:
        with pytest.raises(MatchRejectedError) as exc_info:
            match_transactions(_line(1, "500.00"), _entry(10, credit="500"))

        assert exc_info.value.reason == MatchRejectReason.AMOUNT_MISMATCH

    def test_bank_line_already_matched(self) -> None:
        line = _line(1, "500")
        line.matched = True

        with pytest.raises(MatchRejectedError) as exc_info:
            match_transactions(line, _entry(10, debit="500"))

        assert exc_info.value.reason == MatchRejectReason.BANK_LINE_MATCHED

    def test_entry_already_matched(self) -> None:
        with pytest.raises(MatchRejectedError) as exc_info:
            match_transactions(_line(1, "500"), _entry(10, debit="500"), matched_entry_ids={10})

        assert exc_info.value.reason == MatchRejectReason.ENTRY_MATCHED

    def test_unposted_entry_rejected(self) -> None:
        with pytest.raises(InvalidEntityStateError):
            match_transactions(_line(1, "500"), _entry(None, debit="500"))

    def test_acceptance_consumes_both_records(self) -> None:
        line = _line(1, "500")
        matched: set[int] = set()

        match_transactions(line, _entry(10, debit="500"), matched)

        assert line.matched is True
        assert matched == {10}

    def test_bank_line_matched_once(self) -> None:
        line = _line(1, "500")
        match_transactions(line, _entry(10, debit="500"))

        with pytest.raises(MatchRejectedError) as exc_info:
            match_transactions(line, _entry(11, debit="500"))

        assert exc_info.value.reason == MatchRejectReason.BANK_LINE_MATCHED

    def test_entry_matched_once(self) -> None:
        entry = _entry(10, debit="500")
        matched: set[int] = set()
        match_transactions(_line(1, "500"), entry, matched)

        with pytest.raises(MatchRejectedError) as exc_info:
            match_transactions(_line(2, "500"), entry, matched)

        assert exc_info.value.reason == MatchRejectReason.ENTRY_MATCHED

    def test_rejection_leaves_inputs(self) -> None:
        line = _line(1, "500")
        matched: set[int] = set()

        with pytest.raises(MatchRejectedError):
            match_transactions(line, _entry(10, debit="400"), matched)

        assert line.matched is False
        assert matched == set()


class TestReconciler:
    """Tests for Reconciler."""

    def test_match_marks_both_sides(self) -> None:
        reconciler = Reconciler([_line(1, "500")])
        entry = _entry(10, debit="500")

        reconciler.match(1, entry)

        assert reconciler.get_bank_line(1).matched
        assert reconciler.matched_entry_ids == {10}
        assert len(reconciler.matches) == 1

    def test_rejected_match_leaves_state(self) -> None:
        reconciler = Reconciler([_line(1, "500")])

        with pytest.raises(MatchRejectedError):
            reconciler.match(1, _entry(10, debit="400"))

        assert not reconciler.get_bank_line(1).matched
        assert reconciler.matched_entry_ids == frozenset()
        assert reconciler.matches == []

    def test_line_consumed_once(self) -> None:
        reconciler = Reconciler([_line(1, "500")])
        reconciler.match(1, _entry(10, debit="500"))

        with pytest.raises(MatchRejectedError) as exc_info:
            reconciler.match(1, _entry(11, debit="500"))

        assert exc_info.value.reason == MatchRejectReason.BANK_LINE_MATCHED

    def test_entry_consumed_once(self) -> None:
        reconciler = Reconciler([_line(1, "500"), _line(2, "500")])
        entry = _entry(10, debit="500")
        reconciler.match(1, entry)

        with pytest.raises(MatchRejectedError) as exc_info:
            reconciler.match(2, entry)

        assert exc_info.value.reason == MatchRejectReason.ENTRY_MATCHED

    def test_duplicate_bank_line(self) -> None:
        reconciler = Reconciler([_line(1, "500")])

        with pytest.raises(DuplicateEntityError):
            reconciler.add_bank_line(_line(1, "20"))

    def test_unknown_bank_line(self) -> None:
        with pytest.raises(EntityNotFoundError):
            Reconciler().match(99, _entry(10, debit="1"))

    def test_unmatched_lists(self) -> None:
        reconciler = Reconciler([_line(2, "30", day=5), _line(1, "500", day=2), _line(3, "-20", day=2)])
        entries = [_entry(11, credit="20", day=2), _entry(10, debit="500", day=1)]
        reconciler.match(1, entries[1])

        assert [line.id for line in reconciler.unmatched_bank_lines()] == [3, 2]
        assert [e.id for e in reconciler.unmatched_entries(entries)] == [11]

    def test_suggest_matches_greedy(self) -> None:
        reconciler = Reconciler([_line(1, "100", day=1), _line(2, "100", day=2), _line(3, "-40", day=3)])
        entries = [
            _entry(12, debit="100", day=2),
            _entry(10, debit="100", day=1),
            _entry(11, credit="40", day=3),
            _entry(13, debit="7", day=4),
        ]

        pairs = reconciler.suggest_matches(entries)

        assert [(line.id, entry.id) for line, entry in pairs] == [(1, 10), (2, 12), (3, 11)]
        assert reconciler.matches == []

    def test_suggest_skips_matched(self) -> None:
        reconciler = Reconciler([_line(1, "100"), _line(2, "100")])
        entries = [_entry(10, debit="100"), _entry(11, debit="100")]
        reconciler.match(1, entries[0])

        pairs = reconciler.suggest_matches(entries)

        assert [(line.id, entry.id) for line, entry in pairs] == [(2, 11)]

    def test_summary(self) -> None:
        reconciler = Reconciler([_line(1, "500"), _line(2, "-12.50")])
        entries = [_entry(10, debit="500"), _entry(11, credit="80")]
        reconciler.match(1, entries[0])

        summary = reconciler.summary(entries)

        assert summary.statement_total == Decimal("487.50")
        assert summary.ledger_total == Decimal("420")
        assert summary.difference == Decimal("67.50")
        assert summary.matched_count == 1
        assert summary.unmatched_bank_lines == 1
        assert summary.unmatched_entries == 1

    def test_concurrent_matching_consumes_entry_once(self) -> None:
        """Racing callers cannot pair one entry with two bank lines."""
        lines = [_line(i, "100") for i in range(1, 21)]
        reconciler = Reconciler(lines)
        entry = _entry(10, debit="100")
        barrier = threading.Barrier(len(lines))
        outcomes: list[str] = []
        outcomes_lock = threading.Lock()

        def worker(line_id: int) -> None:
            barrier.wait()
            try:
                reconciler.match(line_id, entry)
                result = "matched"
            except MatchRejectedError:
                result = "rejected"
            with outcomes_lock:
                outcomes.append(result)

        threads = [threading.Thread(target=worker, args=(line.id,)) for line in lines]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert outcomes.count("matched") == 1
        assert outcomes.count("rejected") == len(lines) - 1
        assert len(reconciler.matches) == 1
