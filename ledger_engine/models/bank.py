"""Bank statement model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from ledger_engine.money import to_money


@dataclass
class BankStatementLine:
    """One line of an uploaded bank statement.

    ``amount`` is signed from the company's side: deposits positive,
    withdrawals negative, so it compares directly with ``debit - credit``
    of a cash-account entry.
    """

    id: int
    transaction_date: date
    description: str
    amount: Decimal
    matched: bool = False

    def __post_init__(self) -> None:
        self.amount = to_money(self.amount)
