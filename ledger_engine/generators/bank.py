"""Bank statement generator."""

import random
from collections.abc import Iterable
from datetime import date, timedelta
from decimal import Decimal

from ledger_engine.generators.base import BaseGenerator
from ledger_engine.generators.pool import FakerPool
from ledger_engine.models import BankStatementLine, JournalEntry
from ledger_engine.money import CENT, quantize, to_money


class BankStatementGenerator(BaseGenerator):
    """Generate bank statement lines that mirror posted cash entries.

    Each cash entry appears on the statement with probability
    ``match_rate``, with the same signed amount and a clearing delay of up
    to ``max_delay_days``. ``noise_lines`` unmatched lines (bank fees and
    interest the books have not recorded yet) are added on top.
    """

    NOISE_DESCRIPTIONS = (
        ("MONTHLY SERVICE FEE", -1),
        ("WIRE TRANSFER FEE", -1),
        ("INTEREST PAID", 1),
        ("ATM WITHDRAWAL", -1),
    )

    def __init__(
        self,
        seed: int | None = None,
        pool: FakerPool | None = None,
        match_rate: float = 0.9,
        noise_lines: int = 3,
        max_delay_days: int = 3,
        quantum: Decimal = CENT,
    ) -> None:
        super().__init__(seed, pool=pool)
        if not 0.0 <= match_rate <= 1.0:
            raise ValueError("match_rate must be between 0 and 1")
        self.match_rate = match_rate
        self.noise_lines = noise_lines
        self.max_delay_days = max_delay_days
        self.quantum = quantum

    def generate(
        self,
        cash_entries: Iterable[JournalEntry],
        start_id: int = 1,
        statement_date: date | None = None,
    ) -> list[BankStatementLine]:
        """Generate a statement for the given cash entries.

        Parameters
        ----------
        cash_entries : Iterable[JournalEntry]
            Posted entries on cash accounts.
        start_id : int
            Id of the first line.
        statement_date : date | None
            Date given to noise lines (default: latest entry date or today).

        Returns
        -------
        list[BankStatementLine]
            Lines in date order.
        """
        lines: list[tuple[date, str, Decimal]] = []
        latest: date | None = None

        for entry in cash_entries:
            if entry.transaction_date is None or entry.is_empty:
                continue
            latest = max(latest, entry.transaction_date) if latest else entry.transaction_date
            if random.random() >= self.match_rate:
                continue
            cleared = entry.transaction_date + timedelta(days=random.randint(0, self.max_delay_days))
            label = entry.description or self.pool.company()
            lines.append((cleared, label.upper(), entry.debit - entry.credit))

        noise_date = statement_date or latest or date.today()
        for _ in range(self.noise_lines):
            description, sign = random.choice(self.NOISE_DESCRIPTIONS)
            amount = quantize(to_money(random.uniform(1, 75)), self.quantum)
            lines.append((noise_date, description, amount * sign))

        lines.sort(key=lambda line: line[0])
        return [
            BankStatementLine(
                id=start_id + offset,
                transaction_date=day,
                description=description,
                amount=amount,
            )
            for offset, (day, description, amount) in enumerate(lines)
        ]
