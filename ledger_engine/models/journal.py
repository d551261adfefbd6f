"""Journal and journal entry models."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from ledger_engine.money import ZERO, to_money


@dataclass
class JournalEntry:
    """One debit-or-credit line of a journal.

    ``transaction_date`` mirrors the owning journal's date; it is stamped
    when the entry is attached to a :class:`Journal`.
    """

    account_id: int
    debit: Decimal = ZERO
    credit: Decimal = ZERO
    description: str = ""
    id: int | None = None
    journal_id: int | None = None
    transaction_date: date | None = None

    def __post_init__(self) -> None:
        self.debit = to_money(self.debit)
        self.credit = to_money(self.credit)

    @property
    def net_debit(self) -> Decimal:
        """Signed amount, debit-positive (``debit - credit``)."""
        return self.debit - self.credit

    @property
    def is_empty(self) -> bool:
        return self.debit == 0 and self.credit == 0


@dataclass
class Journal:
    """A single multi-line accounting transaction."""

    transaction_date: date
    reference_id: str
    description: str
    entries: list[JournalEntry] = field(default_factory=list)
    id: int | None = None
    company_id: int | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        self.attach_entries()

    def attach_entries(self) -> None:
        """Stamp journal id and date on every line."""
        for entry in self.entries:
            entry.journal_id = self.id
            entry.transaction_date = self.transaction_date

    @property
    def total_debit(self) -> Decimal:
        return sum((e.debit for e in self.entries), ZERO)

    @property
    def total_credit(self) -> Decimal:
        return sum((e.credit for e in self.entries), ZERO)

    @property
    def is_balanced(self) -> bool:
        return self.total_debit == self.total_credit and self.total_debit > 0
