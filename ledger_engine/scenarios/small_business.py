"""Small-business scenario: a year of bookkeeping with a reconciled bank feed."""

import logging
import random
from datetime import date
from decimal import Decimal
from typing import Any

from ledger_engine.config import LedgerConfig
from ledger_engine.engine.policy import policy_for
from ledger_engine.generators import (
    BankStatementGenerator,
    ChartOfAccountsGenerator,
    FakerPool,
    JournalGenerator,
)
from ledger_engine.store import LedgerStore

logger = logging.getLogger(__name__)


class SmallBusinessScenario:
    """Populate a ledger store with a complete, consistent data set.

    This scenario creates:
    - A standard numbered chart of accounts
    - An opening owner investment funding the cash accounts
    - Random balanced journals across the period
    - A bank statement mirroring most cash entries plus unrecorded fees
    - Optionally, matches for every equal-amount bank line and entry
    """

    def __init__(
        self,
        num_journals: int = 200,
        start_date: date = date(2024, 1, 1),
        end_date: date = date(2024, 12, 31),
        opening_capital: Decimal = Decimal("50000.00"),
        bank_match_rate: float = 0.9,
        auto_reconcile: bool = True,
        extra_bank_accounts: int = 0,
        config: LedgerConfig | None = None,
        sink: Any = None,
        seed: int | None = None,
    ) -> None:
        """Initialize small-business scenario.

        Parameters
        ----------
        num_journals : int
            Number of journals posted after the opening investment.
        start_date, end_date : date
            Period covered by the journals.
        opening_capital : Decimal
            Owner investment posted on ``start_date``.
        bank_match_rate : float
            Share of cash entries that appear on the bank statement.
        auto_reconcile : bool
            Confirm every suggested bank match after generation.
        extra_bank_accounts : int
            Additional cash accounts added to the chart.
        config : LedgerConfig | None
            Selects the normal-balance policy, currency unit and event topic
            prefix.
        sink : Any
            Optional sink receiving store events.
        seed : int | None
            Random seed for reproducibility.
        """
        self.num_journals = num_journals
        self.start_date = start_date
        self.end_date = end_date
        self.opening_capital = opening_capital
        self.auto_reconcile = auto_reconcile
        self.config = config or LedgerConfig()
        self.seed = seed if seed is not None else self.config.seed

        if self.seed is not None:
            random.seed(self.seed)

        self.store = LedgerStore(
            policy=policy_for(self.config),
            sink=sink,
            topic_prefix=self.config.output.topic_prefix,
        )
        pool = FakerPool(seed=self.seed)
        self._chart_gen = ChartOfAccountsGenerator(
            seed=self.seed, pool=pool, extra_bank_accounts=extra_bank_accounts
        )
        quantum = self.config.quantum
        self._journal_gen = JournalGenerator(seed=self.seed, pool=pool, quantum=quantum)
        self._bank_gen = BankStatementGenerator(
            seed=self.seed, pool=pool, match_rate=bank_match_rate, quantum=quantum
        )

    def generate(self) -> LedgerStore:
        """Generate all data for the scenario.

        Returns
        -------
        LedgerStore
            Store containing the chart, posted journals and bank statement.
        """
        logger.info(
            "Starting small business scenario: %d journals from %s to %s",
            self.num_journals,
            self.start_date,
            self.end_date,
        )

        accounts = self._chart_gen.generate()
        for account in accounts:
            self.store.add_account(account)

        self.store.post_journal(
            self._journal_gen.generate_opening(accounts, self.start_date, self.opening_capital)
        )
        for journal in self._journal_gen.generate_batch(
            accounts, self.num_journals, self.start_date, self.end_date
        ):
            self.store.post_journal(journal)

        for line in self._bank_gen.generate(self.store.cash_entries()):
            self.store.add_bank_line(line)

        if self.auto_reconcile:
            for line, entry in self.store.suggest_matches():
                self.store.match(line.id, entry.id)

        summary = self.store.summary()
        logger.info(
            "Generated ledger: %d accounts, %d journals, %d entries, %d bank lines, %d matches",
            summary["accounts"],
            summary["journals"],
            summary["entries"],
            summary["bank_lines"],
            summary["matches"],
        )
        return self.store
