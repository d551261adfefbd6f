"""Balanced journal generator."""

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from ledger_engine.exceptions import ConfigurationError
from ledger_engine.generators.base import BaseGenerator
from ledger_engine.generators.pool import FakerPool
from ledger_engine.models import Account, AccountType, Journal, JournalEntry
from ledger_engine.money import CENT, quantize, to_money


@dataclass(frozen=True)
class JournalTemplate:
    """A business event posted as one debit and one credit account type."""

    description: str
    debit_type: AccountType
    credit_type: AccountType
    scale: float = 1.0


TEMPLATES: tuple[JournalTemplate, ...] = (
    JournalTemplate("Cash sale", AccountType.CASH, AccountType.SALES_REVENUE),
    JournalTemplate("Invoice for services", AccountType.ACCOUNTS_RECEIVABLE, AccountType.SERVICE_REVENUE),
    JournalTemplate("Customer payment received", AccountType.CASH, AccountType.ACCOUNTS_RECEIVABLE),
    JournalTemplate("Inventory purchase on credit", AccountType.INVENTORY, AccountType.ACCOUNTS_PAYABLE),
    JournalTemplate("Supplier payment", AccountType.ACCOUNTS_PAYABLE, AccountType.CASH),
    JournalTemplate("Cost of goods sold", AccountType.COST_OF_GOODS_SOLD, AccountType.INVENTORY, 0.6),
    JournalTemplate("Monthly rent", AccountType.RENT_EXPENSE, AccountType.CASH),
    JournalTemplate("Payroll", AccountType.WAGES_EXPENSE, AccountType.CASH, 2.0),
    JournalTemplate("Utilities bill", AccountType.UTILITIES_EXPENSE, AccountType.ACCOUNTS_PAYABLE, 0.3),
    JournalTemplate("Office supplies", AccountType.GENERAL_AND_ADMINISTRATIVE_EXPENSES, AccountType.CASH, 0.2),
    JournalTemplate("Depreciation charge", AccountType.DEPRECIATION_EXPENSE, AccountType.ACCUMULATED_DEPRECIATION, 0.5),
    JournalTemplate("Owner withdrawal", AccountType.DRAWINGS, AccountType.CASH, 0.5),
    JournalTemplate("Customer deposit", AccountType.CASH, AccountType.UNEARNED_REVENUE, 0.5),
    JournalTemplate("Bank interest", AccountType.CASH, AccountType.INTEREST_INCOME, 0.05),
)

OPENING_TEMPLATE = JournalTemplate("Owner investment", AccountType.CASH, AccountType.OWNERS_CAPITAL)


class JournalGenerator(BaseGenerator):
    """Generate balanced journals against an existing chart of accounts.

    Amounts follow a Pareto distribution, like most real ledgers: many
    small postings and a few large ones. With ``split_probability`` the
    debit side is spread over two lines, giving three-line journals. Amounts
    are rounded to ``quantum``, the smallest currency unit.
    """

    def __init__(
        self,
        seed: int | None = None,
        pool: FakerPool | None = None,
        base_amount: float = 100.0,
        max_amount: float = 50000.0,
        split_probability: float = 0.15,
        quantum: Decimal = CENT,
    ) -> None:
        super().__init__(seed, pool=pool)
        self.quantum = quantum
        self.base_amount = base_amount
        self.max_amount = max_amount
        self.split_probability = split_probability

    def _index(self, accounts: Iterable[Account]) -> dict[AccountType | str, list[Account]]:
        by_type: dict[AccountType | str, list[Account]] = {}
        for account in accounts:
            by_type.setdefault(account.account_type, []).append(account)
        return by_type

    def _amount(self, scale: float) -> Decimal:
        amount = min(random.paretovariate(1.5) * self.base_amount * scale, self.max_amount)
        return max(quantize(to_money(amount), self.quantum), self.quantum)

    def _build(
        self,
        template: JournalTemplate,
        by_type: dict[AccountType | str, list[Account]],
        transaction_date: date,
        amount: Decimal | None = None,
        allow_split: bool = True,
    ) -> Journal:
        amount = amount if amount is not None else self._amount(template.scale)
        debit_account = random.choice(by_type[template.debit_type])
        credit_account = random.choice(by_type[template.credit_type])
        counterparty = self.pool.company()

        entries: list[JournalEntry] = []
        if allow_split and amount >= 2 * self.quantum and random.random() < self.split_probability:
            first = quantize(amount * Decimal(str(round(random.uniform(0.2, 0.8), 2))), self.quantum)
            first = min(max(first, self.quantum), amount - self.quantum)
            second_account = random.choice(by_type[template.debit_type])
            entries.append(JournalEntry(account_id=debit_account.id, debit=first, description=counterparty))
            entries.append(
                JournalEntry(account_id=second_account.id, debit=amount - first, description=counterparty)
            )
        else:
            entries.append(JournalEntry(account_id=debit_account.id, debit=amount, description=counterparty))
        entries.append(JournalEntry(account_id=credit_account.id, credit=amount, description=counterparty))

        return Journal(
            transaction_date=transaction_date,
            reference_id=self.pool.reference(),
            description=f"{template.description} - {counterparty}",
            entries=entries,
        )

    def generate(self, accounts: Iterable[Account], transaction_date: date | None = None) -> Journal:
        """Generate a single balanced journal.

        Parameters
        ----------
        accounts : Iterable[Account]
            Chart to post against; only templates whose account types are
            present are used.
        transaction_date : date | None
            Journal date (default: today).

        Returns
        -------
        Journal
            Unposted journal (no ids assigned).

        Raises
        ------
        ConfigurationError
            If no template can be posted against the chart.
        """
        by_type = self._index(accounts)
        usable = [t for t in TEMPLATES if t.debit_type in by_type and t.credit_type in by_type]
        if not usable:
            raise ConfigurationError("Chart of accounts has no account types usable for journals")
        template = random.choice(usable)
        return self._build(template, by_type, transaction_date or date.today())

    def generate_opening(
        self,
        accounts: Iterable[Account],
        transaction_date: date,
        amount: Decimal | int | str = Decimal("50000.00"),
    ) -> Journal:
        """Owner investment that funds the cash accounts."""
        by_type = self._index(accounts)
        if OPENING_TEMPLATE.debit_type not in by_type or OPENING_TEMPLATE.credit_type not in by_type:
            raise ConfigurationError("Chart of accounts needs Cash and Owner's Capital accounts")
        return self._build(
            OPENING_TEMPLATE, by_type, transaction_date, to_money(amount), allow_split=False
        )

    def generate_batch(
        self,
        accounts: Iterable[Account],
        count: int,
        start: date,
        end: date,
    ) -> Iterator[Journal]:
        """Yield ``count`` journals dated uniformly in ``[start, end]``, in date order."""
        accounts = list(accounts)
        span = (end - start).days
        if span < 0:
            raise ValueError("end must not be before start")
        dates = sorted(start + timedelta(days=random.randint(0, span)) for _ in range(count))
        for day in dates:
            yield self.generate(accounts, day)
