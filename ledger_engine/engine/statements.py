"""Financial statements built from accounts and journals.

All builders are pure functions of their inputs: calling one twice on the
same accounts and journals returns equal results.
"""

import logging
from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from ledger_engine.engine.balances import (
    chronological_key,
    compute_net_debits,
    iter_entries,
)
from ledger_engine.engine.hierarchy import build_hierarchy
from ledger_engine.engine.policy import DEFAULT_POLICY, NormalBalancePolicy
from ledger_engine.exceptions import ClassificationAmbiguousError
from ledger_engine.models.account import Account
from ledger_engine.models.base import DateRange
from ledger_engine.models.enums import StatementCategory
from ledger_engine.models.journal import Journal
from ledger_engine.models.reports import (
    AccountNode,
    BalanceSheet,
    BalanceSheetLine,
    ChartNode,
    ClassificationAmbiguous,
    LedgerReport,
    LedgerReportLine,
    TrialBalance,
    TrialBalanceRow,
)
from ledger_engine.money import ZERO

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = Decimal("0.01")

# Sides on which each statement category reports a positive balance.
_DEBIT_PRESENTED = frozenset({StatementCategory.ASSET, StatementCategory.EXPENSE})


def _present(category: StatementCategory, net_debit: Decimal) -> Decimal:
    return net_debit if category in _DEBIT_PRESENTED else -net_debit


def report_title(account: Account | None = None) -> str:
    if account is not None:
        return f"General Ledger Report: {account.name} ({account.number})"
    return "General Ledger Report (All Accounts)"


def build_ledger_report(
    accounts: Iterable[Account],
    journals: Iterable[Journal],
    date_range: DateRange | None = None,
    account: Account | None = None,
    policy: NormalBalancePolicy = DEFAULT_POLICY,
) -> LedgerReport:
    """Build the general ledger report.

    Parameters
    ----------
    accounts : Iterable[Account]
        Registry used to resolve account names.
    journals : Iterable[Journal]
        Posted journals.
    date_range : DateRange | None
        Inclusive window on the journal date.
    account : Account | None
        Restrict to one account; adds a running and closing balance.
    policy : NormalBalancePolicy
        Decides the sign of the running balance in single-account mode.

    Returns
    -------
    LedgerReport
        Lines in (date, entry id) order with totals and balance status.
    """
    journals = list(journals)
    names = {a.id: a.name for a in accounts}
    by_id = {j.id: j for j in journals}

    entries = [
        e
        for e in iter_entries(journals)
        if (date_range is None or date_range.contains(e.transaction_date))
        and (account is None or e.account_id == account.id)
    ]
    entries.sort(key=chronological_key)

    lines: list[LedgerReportLine] = []
    running = ZERO
    total_debit = ZERO
    total_credit = ZERO
    for entry in entries:
        journal = by_id.get(entry.journal_id)
        line = LedgerReportLine(
            transaction_date=entry.transaction_date,
            journal_id=entry.journal_id,
            reference_id=journal.reference_id if journal else "",
            journal_description=journal.description if journal else "",
            entry_id=entry.id,
            account_id=entry.account_id,
            account_name=names.get(entry.account_id, ""),
            description=entry.description,
            debit=entry.debit,
            credit=entry.credit,
        )
        if account is not None:
            running += policy.orient(account, entry.net_debit)
            line.running_balance = running
        total_debit += entry.debit
        total_credit += entry.credit
        lines.append(line)

    report = LedgerReport(
        title=report_title(account),
        start=date_range.start if date_range else None,
        end=date_range.end if date_range else None,
        lines=lines,
        total_debit=total_debit,
        total_credit=total_credit,
        account=account,
        closing_balance=running if account is not None else None,
    )
    logger.debug("%s: %d lines, status %s", report.title, len(lines), report.status.value)
    return report


def build_trial_balance(
    accounts: Iterable[Account],
    journals: Iterable[Journal],
    as_of: date | None = None,
) -> TrialBalance:
    """Place each account's net in the debit or credit column.

    A positive debit-side net goes to the debit column, a negative one to
    the credit column. Accounts without activity show zero in both.
    """
    date_range = DateRange.as_of(as_of) if as_of else None
    nets = compute_net_debits(journals, date_range)

    rows: list[TrialBalanceRow] = []
    for account in sorted(accounts, key=lambda a: a.number):
        net = nets.get(account.id, ZERO)
        rows.append(
            TrialBalanceRow(
                account=account,
                debit=net if net > 0 else ZERO,
                credit=-net if net < 0 else ZERO,
            )
        )

    return TrialBalance(
        as_of=as_of,
        rows=rows,
        total_debit=sum((r.debit for r in rows), ZERO),
        total_credit=sum((r.credit for r in rows), ZERO),
    )


def build_balance_sheet(
    accounts: Iterable[Account],
    journals: Iterable[Journal],
    as_of: date | None = None,
    tolerance: Decimal = DEFAULT_TOLERANCE,
    strict: bool = False,
) -> BalanceSheet:
    """Build the balance sheet and verify the accounting equation.

    Each account is placed in exactly one category from its classification.
    Line balances are presented on the category's natural side: assets and
    expenses as ``debit - credit``, everything else as ``credit - debit``.
    Contra-assets are subtracted from total assets and net income
    (revenue less expense) is added to equity.

    Parameters
    ----------
    accounts : Iterable[Account]
        Account registry.
    journals : Iterable[Journal]
        Posted journals; entries dated after ``as_of`` are ignored.
    as_of : date | None
        Statement date; None means all postings.
    tolerance : Decimal
        The sheet is balanced when ``|assets - (liabilities + equity)|`` is
        strictly below this value.
    strict : bool
        Raise on an ambiguous account type instead of recording a warning.

    Returns
    -------
    BalanceSheet

    Raises
    ------
    ClassificationAmbiguousError
        In strict mode, when an account type matches several categories.
    """
    date_range = DateRange.as_of(as_of) if as_of else None
    nets = compute_net_debits(journals, date_range)

    sections: dict[StatementCategory, list[BalanceSheetLine]] = {c: [] for c in StatementCategory}
    warnings: list[ClassificationAmbiguous] = []
    unclassified: list[Account] = []
    known: set[int] = set()

    for account in sorted(accounts, key=lambda a: a.number):
        known.add(account.id)
        classification = account.classification
        category = classification.category

        if category is None:
            logger.warning(
                "Account %s (%s) has unrecognised type %r; left off the balance sheet",
                account.number,
                account.name,
                account.type_label,
            )
            unclassified.append(account)
            continue

        if classification.is_ambiguous:
            if strict:
                raise ClassificationAmbiguousError(
                    f"Account {account.number} type {account.type_label!r} matches "
                    f"{', '.join(c.value for c in classification.candidates)}"
                )
            warnings.append(
                ClassificationAmbiguous(
                    account_id=account.id,
                    account_number=account.number,
                    type_label=account.type_label,
                    candidates=classification.candidates,
                    resolved_to=category,
                )
            )
            logger.warning(
                "Account %s type %r is ambiguous (%s); classified as %s",
                account.number,
                account.type_label,
                ", ".join(c.value for c in classification.candidates),
                category.value,
            )

        balance = _present(category, nets.get(account.id, ZERO))
        sections[category].append(BalanceSheetLine(account=account, balance=balance))

    orphans = set(nets) - known
    if orphans:
        logger.warning("Skipping entries for unknown accounts: %s", sorted(orphans))

    def total(category: StatementCategory) -> Decimal:
        return sum((line.balance for line in sections[category]), ZERO)

    total_revenue = total(StatementCategory.REVENUE)
    total_expense = total(StatementCategory.EXPENSE)

    sheet = BalanceSheet(
        as_of=as_of,
        assets=sections[StatementCategory.ASSET],
        contra_assets=sections[StatementCategory.CONTRA_ASSET],
        liabilities=sections[StatementCategory.LIABILITY],
        equity=sections[StatementCategory.EQUITY],
        total_revenue=total_revenue,
        total_expense=total_expense,
        total_assets=total(StatementCategory.ASSET) - total(StatementCategory.CONTRA_ASSET),
        total_liabilities=total(StatementCategory.LIABILITY),
        total_equity=total(StatementCategory.EQUITY) + (total_revenue - total_expense),
        tolerance=tolerance,
        warnings=warnings,
        unclassified=unclassified,
    )

    if not sheet.balanced:
        logger.warning(
            "Balance sheet as of %s is out of balance by %s",
            as_of or "today",
            sheet.difference,
        )
    return sheet


def build_chart_view(
    accounts: Iterable[Account],
    journals: Iterable[Journal],
    date_range: DateRange | None = None,
    rollup: bool = False,
    policy: NormalBalancePolicy = DEFAULT_POLICY,
) -> list[ChartNode]:
    """Chart-of-accounts tree annotated with balances.

    Every node carries its own balance. With ``rollup`` it also carries
    ``rolled_up_balance``: the net of the node and all descendants, signed
    by the node's normal balance.
    """
    nets = compute_net_debits(journals, date_range)

    def convert(node: AccountNode) -> tuple[ChartNode, Decimal]:
        own_net = nets.get(node.account.id, ZERO)
        children: list[ChartNode] = []
        subtree_net = own_net
        for child in node.children:
            chart_child, child_net = convert(child)
            children.append(chart_child)
            subtree_net += child_net
        chart = ChartNode(
            account=node.account,
            balance=policy.orient(node.account, own_net),
            rolled_up_balance=policy.orient(node.account, subtree_net) if rollup else None,
            children=children,
        )
        return chart, subtree_net

    return [convert(root)[0] for root in build_hierarchy(accounts)]
