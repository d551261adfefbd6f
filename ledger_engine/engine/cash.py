"""Cash position derived from postings to cash accounts."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from ledger_engine.engine.balances import chronological_key, iter_entries
from ledger_engine.models.account import Account
from ledger_engine.models.enums import AccountType, CashDirection
from ledger_engine.models.journal import Journal
from ledger_engine.models.reports import CashFlowSummary, CashMovement
from ledger_engine.money import ZERO

CASH_ACCOUNT_TYPES = frozenset({AccountType.CASH, AccountType.CURRENT_ASSETS})


def is_cash_account(account: Account) -> bool:
    return account.account_type in CASH_ACCOUNT_TYPES


def build_cash_movements(
    accounts: Iterable[Account],
    journals: Iterable[Journal],
) -> list[CashMovement]:
    """List cash-account entries with the combined cash balance after each.

    Debit lines are inflows and credit lines outflows. The running balance
    is ``debit - credit`` summed over all cash accounts in (date, entry id)
    order.
    """
    cash_ids = {a.id for a in accounts if is_cash_account(a)}
    entries = sorted(
        (e for e in iter_entries(journals) if e.account_id in cash_ids and not e.is_empty),
        key=chronological_key,
    )

    movements: list[CashMovement] = []
    balance = ZERO
    for entry in entries:
        balance += entry.net_debit
        inflow = entry.debit > 0
        movements.append(
            CashMovement(
                entry_id=entry.id,
                account_id=entry.account_id,
                transaction_date=entry.transaction_date,
                description=entry.description,
                amount=entry.debit if inflow else entry.credit,
                direction=CashDirection.INFLOW if inflow else CashDirection.OUTFLOW,
                balance_after=balance,
            )
        )
    return movements


def summarize_cash_flow(
    movements: Iterable[CashMovement],
    since: date | None = None,
) -> CashFlowSummary:
    """Total inflow and outflow, optionally from ``since`` onwards."""
    summary = CashFlowSummary()
    for movement in movements:
        if since is not None and (movement.transaction_date is None or movement.transaction_date < since):
            continue
        if movement.direction == CashDirection.INFLOW:
            summary.total_inflow += movement.amount
        else:
            summary.total_outflow += movement.amount
    return summary


def cash_balances(accounts: Iterable[Account], journals: Iterable[Journal]) -> dict[int, Decimal]:
    """``debit - credit`` per cash account; accounts without postings get zero."""
    balances = {a.id: ZERO for a in accounts if is_cash_account(a)}
    for entry in iter_entries(journals):
        if entry.account_id in balances:
            balances[entry.account_id] += entry.net_debit
    return balances
