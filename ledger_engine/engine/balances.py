"""Balance computation: fold journal entries into signed account balances."""

import logging
from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from ledger_engine.engine.policy import DEFAULT_POLICY, NormalBalancePolicy
from ledger_engine.models.account import Account
from ledger_engine.models.base import DateRange
from ledger_engine.models.journal import Journal, JournalEntry
from ledger_engine.models.reports import RunningBalanceLine
from ledger_engine.money import ZERO

logger = logging.getLogger(__name__)


def chronological_key(entry: JournalEntry) -> tuple[date, int]:
    """Sort key: transaction date, then entry id (creation sequence)."""
    return (entry.transaction_date or date.min, entry.id if entry.id is not None else -1)


def entries_for_account(
    account_id: int,
    entries: Iterable[JournalEntry],
    date_range: DateRange | None = None,
) -> list[JournalEntry]:
    """Entries posted to ``account_id`` inside ``date_range``."""
    return [
        e
        for e in entries
        if e.account_id == account_id
        and (date_range is None or date_range.contains(e.transaction_date))
    ]


def iter_entries(journals: Iterable[Journal]) -> Iterable[JournalEntry]:
    for journal in journals:
        yield from journal.entries


def net_debit(entries: Iterable[JournalEntry]) -> Decimal:
    """``Σdebit − Σcredit`` over the given entries."""
    return sum((e.debit - e.credit for e in entries), ZERO)


def compute_balance(
    account: Account,
    entries: Iterable[JournalEntry],
    date_range: DateRange | None = None,
    policy: NormalBalancePolicy = DEFAULT_POLICY,
) -> Decimal:
    """Signed balance of one account.

    Debit-normal accounts return ``Σdebit − Σcredit``, credit-normal
    accounts ``Σcredit − Σdebit``. Entries posted to other accounts are
    ignored.

    Parameters
    ----------
    account : Account
        Account whose type decides the sign.
    entries : Iterable[JournalEntry]
        Entries referencing the account (others are filtered out).
    date_range : DateRange | None
        Optional inclusive window for bounded reports.
    policy : NormalBalancePolicy
        Normal-balance rules; defaults to the legacy dashboard rules.

    Returns
    -------
    Decimal
        The account balance.
    """
    relevant = entries_for_account(account.id, entries, date_range)
    return policy.orient(account, net_debit(relevant))


def compute_running_balance(
    account: Account,
    entries: Iterable[JournalEntry],
    date_range: DateRange | None = None,
    policy: NormalBalancePolicy = DEFAULT_POLICY,
) -> list[RunningBalanceLine]:
    """Per-entry running balance in chronological order.

    Entries are ordered by transaction date and, within a date, by entry id,
    so the sequence is reproducible whatever the input order.
    """
    relevant = sorted(entries_for_account(account.id, entries, date_range), key=chronological_key)

    lines: list[RunningBalanceLine] = []
    running = ZERO
    for entry in relevant:
        delta = policy.orient(account, entry.net_debit)
        running += delta
        lines.append(RunningBalanceLine(entry=entry, delta=delta, running_balance=running))
    return lines


def compute_net_debits(
    journals: Iterable[Journal],
    date_range: DateRange | None = None,
) -> dict[int, Decimal]:
    """Debit-positive net per account id in a single pass."""
    nets: dict[int, Decimal] = {}
    for entry in iter_entries(journals):
        if date_range is not None and not date_range.contains(entry.transaction_date):
            continue
        nets[entry.account_id] = nets.get(entry.account_id, ZERO) + entry.net_debit
    return nets


def compute_balances(
    accounts: Iterable[Account],
    journals: Iterable[Journal],
    date_range: DateRange | None = None,
    policy: NormalBalancePolicy = DEFAULT_POLICY,
) -> dict[int, Decimal]:
    """Signed balance of every account; accounts without postings get zero."""
    nets = compute_net_debits(journals, date_range)
    balances: dict[int, Decimal] = {}
    known: set[int] = set()
    for account in accounts:
        known.add(account.id)
        balances[account.id] = policy.orient(account, nets.get(account.id, ZERO))

    orphans = set(nets) - known
    if orphans:
        logger.warning("Entries reference unknown accounts: %s", sorted(orphans))
    return balances
