"""Pytest configuration and fixtures."""

from collections.abc import Callable
from datetime import date
from decimal import Decimal

import pytest

from ledger_engine.models import Account, AccountType, Journal, JournalEntry

JournalFactory = Callable[..., Journal]


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def chart() -> list[Account]:
    """Small chart of accounts covering every statement category."""
    return [
        Account(id=1, number="1", name="Assets", account_type=AccountType.ASSET),
        Account(id=2, number="11", name="Current Assets", account_type=AccountType.CURRENT_ASSETS),
        Account(id=3, number="1101", name="Cash", account_type=AccountType.CASH),
        Account(id=4, number="1102", name="Accounts Receivable", account_type=AccountType.ACCOUNTS_RECEIVABLE),
        Account(id=5, number="1204", name="Accumulated Depreciation", account_type=AccountType.ACCUMULATED_DEPRECIATION),
        Account(id=6, number="2101", name="Accounts Payable", account_type=AccountType.ACCOUNTS_PAYABLE),
        Account(id=7, number="3101", name="Owner's Capital", account_type=AccountType.OWNERS_CAPITAL),
        Account(id=8, number="3103", name="Drawings", account_type=AccountType.DRAWINGS),
        Account(id=9, number="4101", name="Sales Revenue", account_type=AccountType.SALES_REVENUE),
        Account(id=10, number="5102", name="Rent Expense", account_type=AccountType.RENT_EXPENSE),
        Account(id=11, number="5105", name="Depreciation Expense", account_type=AccountType.DEPRECIATION_EXPENSE),
    ]


@pytest.fixture
def accounts_by_id(chart: list[Account]) -> dict[int, Account]:
    """Chart indexed by account id."""
    return {a.id: a for a in chart}


@pytest.fixture
def make_journal() -> JournalFactory:
    """Build a posted-looking journal with sequential entry ids.

    Lines are ``(account_id, debit, credit)`` tuples.
    """
    next_entry_id = [1]

    def factory(
        journal_id: int,
        day: date,
        lines: list[tuple[int, str | int, str | int]],
        reference_id: str = "",
        description: str = "",
    ) -> Journal:
        entries = []
        for account_id, debit, credit in lines:
            entries.append(
                JournalEntry(
                    account_id=account_id,
                    debit=Decimal(str(debit)),
                    credit=Decimal(str(credit)),
                    id=next_entry_id[0],
                )
            )
            next_entry_id[0] += 1
        return Journal(
            transaction_date=day,
            reference_id=reference_id or f"JRN-{journal_id:04d}",
            description=description or f"Journal {journal_id}",
            entries=entries,
            id=journal_id,
        )

    return factory


@pytest.fixture
def journals(make_journal: JournalFactory) -> list[Journal]:
    """Seven balanced journals across January and February 2024.

    Expected balances (legacy policy): cash 10400, receivable 700,
    accumulated depreciation 200, payable 400, capital -10000,
    drawings 300, sales 2200, rent 1200, depreciation 200.
    """
    return [
        make_journal(1, date(2024, 1, 1), [(3, 10000, 0), (7, 0, 10000)], description="Owner investment"),
        make_journal(2, date(2024, 1, 5), [(3, 1500, 0), (9, 0, 1500)], description="Cash sale"),
        make_journal(3, date(2024, 1, 10), [(10, 800, 0), (3, 0, 800)], description="Monthly rent"),
        make_journal(4, date(2024, 1, 15), [(4, 700, 0), (9, 0, 700)], description="Invoice"),
        make_journal(5, date(2024, 1, 20), [(11, 200, 0), (5, 0, 200)], description="Depreciation"),
        make_journal(6, date(2024, 2, 1), [(8, 300, 0), (3, 0, 300)], description="Owner withdrawal"),
        make_journal(7, date(2024, 2, 5), [(10, 400, 0), (6, 0, 400)], description="Rent on credit"),
    ]


@pytest.fixture
def entries(journals: list[Journal]) -> list[JournalEntry]:
    """All entries of the sample journals."""
    return [e for j in journals for e in j.entries]
