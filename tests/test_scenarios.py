"""Tests for scenarios."""

from datetime import date
from unittest.mock import MagicMock

from ledger_engine.config import LedgerConfig
from ledger_engine.engine.statements import build_balance_sheet, build_trial_balance
from ledger_engine.models import BalanceStatus
from ledger_engine.scenarios import SmallBusinessScenario


class TestSmallBusinessScenario:
    """Tests for SmallBusinessScenario."""

    def test_generate_scenario(self, seed: int) -> None:
        """Test small business scenario generation."""
        scenario = SmallBusinessScenario(
            num_journals=40,
            start_date=date(2024, 1, 1),
            end_date=date(2024, 3, 31),
            seed=seed,
        )
        store = scenario.generate()

        summary = store.summary()
        assert summary["accounts"] == 35
        assert summary["journals"] == 41
        assert summary["entries"] >= 82
        assert summary["bank_lines"] > 0

    def test_books_balance(self, seed: int) -> None:
        """Generated books satisfy the accounting equation."""
        store = SmallBusinessScenario(num_journals=60, seed=seed).generate()
        snapshot = store.snapshot()

        sheet = build_balance_sheet(snapshot.accounts, snapshot.journals)
        trial = build_trial_balance(snapshot.accounts, snapshot.journals)

        assert sheet.status == BalanceStatus.BALANCED
        assert sheet.warnings == []
        assert sheet.unclassified == []
        assert trial.status == BalanceStatus.BALANCED
        assert store.verify_balances() == {}

    def test_standard_policy_books_balance(self, seed: int) -> None:
        config = LedgerConfig(capital_debit_normal=False)
        store = SmallBusinessScenario(num_journals=30, config=config, seed=seed).generate()
        snapshot = store.snapshot()

        assert build_balance_sheet(snapshot.accounts, snapshot.journals).balanced
        assert store.balance_of(store.get_account_by_number("3101").id) > 0

    def test_auto_reconcile(self, seed: int) -> None:
        store = SmallBusinessScenario(num_journals=30, bank_match_rate=1.0, seed=seed).generate()

        assert len(store.reconciler.matches) > 0
        for match in store.reconciler.matches:
            assert store.reconciler.get_bank_line(match.bank_line_id).matched
            assert store.get_entry(match.entry_id).net_debit == match.amount

    def test_no_auto_reconcile(self, seed: int) -> None:
        store = SmallBusinessScenario(num_journals=10, auto_reconcile=False, seed=seed).generate()

        assert store.reconciler.matches == []

    def test_deterministic_amounts(self, seed: int) -> None:
        """The same seed produces the same journals apart from reference ids."""

        def fingerprint(num: int) -> list[tuple]:
            store = SmallBusinessScenario(num_journals=num, seed=seed).generate()
            return [
                (j.transaction_date, tuple((e.account_id, e.debit, e.credit) for e in j.entries))
                for j in store.journals
            ]

        assert fingerprint(20) == fingerprint(20)

    def test_events_published(self, seed: int) -> None:
        sink = MagicMock()
        store = SmallBusinessScenario(num_journals=5, auto_reconcile=False, sink=sink, seed=seed).generate()

        topics = [call.args[0] for call in sink.write_batch.call_args_list]
        assert topics.count("dev.ledger.journals") == len(store.journals)

    def test_currency_places_applied(self, seed: int) -> None:
        config = LedgerConfig(currency_places=0)
        store = SmallBusinessScenario(num_journals=20, config=config, seed=seed).generate()

        for journal in store.journals:
            for entry in journal.entries:
                assert entry.debit == entry.debit.to_integral_value()
                assert entry.credit == entry.credit.to_integral_value()
        for line in store.reconciler.bank_lines:
            assert line.amount == line.amount.to_integral_value()
