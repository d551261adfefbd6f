"""Result types produced by the statement, cash and reconciliation engines."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from ledger_engine.models.account import Account
from ledger_engine.models.enums import BalanceStatus, CashDirection, StatementCategory
from ledger_engine.models.journal import Journal, JournalEntry
from ledger_engine.money import ZERO


@dataclass
class AccountNode:
    """Chart-of-accounts tree node."""

    account: Account
    children: list["AccountNode"] = field(default_factory=list)

    @property
    def is_parent(self) -> bool:
        return bool(self.children)


@dataclass
class ChartNode:
    """Chart-of-accounts node with balances."""

    account: Account
    balance: Decimal
    rolled_up_balance: Decimal | None = None
    children: list["ChartNode"] = field(default_factory=list)


@dataclass(frozen=True)
class RunningBalanceLine:
    entry: JournalEntry
    delta: Decimal
    running_balance: Decimal


@dataclass
class LedgerReportLine:
    """One row of the general ledger report."""

    transaction_date: date | None
    journal_id: int | None
    reference_id: str
    journal_description: str
    entry_id: int | None
    account_id: int
    account_name: str
    description: str
    debit: Decimal
    credit: Decimal
    running_balance: Decimal | None = None


@dataclass
class LedgerReport:
    """General ledger report for all accounts or one account."""

    title: str
    start: date | None
    end: date | None
    lines: list[LedgerReportLine]
    total_debit: Decimal
    total_credit: Decimal
    account: Account | None = None
    closing_balance: Decimal | None = None

    @property
    def difference(self) -> Decimal:
        return self.total_debit - self.total_credit

    @property
    def status(self) -> BalanceStatus:
        if self.total_debit == self.total_credit:
            return BalanceStatus.BALANCED
        return BalanceStatus.NOT_BALANCED


@dataclass
class TrialBalanceRow:
    account: Account
    debit: Decimal
    credit: Decimal


@dataclass
class TrialBalance:
    as_of: date | None
    rows: list[TrialBalanceRow]
    total_debit: Decimal
    total_credit: Decimal

    @property
    def difference(self) -> Decimal:
        return self.total_debit - self.total_credit

    @property
    def status(self) -> BalanceStatus:
        if self.total_debit == self.total_credit:
            return BalanceStatus.BALANCED
        return BalanceStatus.NOT_BALANCED


@dataclass(frozen=True)
class ClassificationAmbiguous:
    """Warning: an account type label matched several statement categories."""

    account_id: int
    account_number: str
    type_label: str
    candidates: tuple[StatementCategory, ...]
    resolved_to: StatementCategory


@dataclass
class BalanceSheetLine:
    account: Account
    balance: Decimal


@dataclass
class BalanceSheet:
    """Balance sheet with its verification result."""

    as_of: date | None
    assets: list[BalanceSheetLine]
    contra_assets: list[BalanceSheetLine]
    liabilities: list[BalanceSheetLine]
    equity: list[BalanceSheetLine]
    total_revenue: Decimal
    total_expense: Decimal
    total_assets: Decimal
    total_liabilities: Decimal
    total_equity: Decimal
    tolerance: Decimal
    warnings: list[ClassificationAmbiguous] = field(default_factory=list)
    unclassified: list[Account] = field(default_factory=list)

    @property
    def net_income(self) -> Decimal:
        return self.total_revenue - self.total_expense

    @property
    def liabilities_plus_equity(self) -> Decimal:
        return self.total_liabilities + self.total_equity

    @property
    def difference(self) -> Decimal:
        return self.total_assets - self.liabilities_plus_equity

    @property
    def balanced(self) -> bool:
        return abs(self.difference) < self.tolerance

    @property
    def status(self) -> BalanceStatus:
        return BalanceStatus.BALANCED if self.balanced else BalanceStatus.NOT_BALANCED


@dataclass(frozen=True)
class ReconciliationMatch:
    bank_line_id: int
    entry_id: int
    amount: Decimal
    matched_at: datetime


@dataclass
class ReconciliationSummary:
    statement_total: Decimal
    ledger_total: Decimal
    matched_count: int
    unmatched_bank_lines: int
    unmatched_entries: int

    @property
    def difference(self) -> Decimal:
        return self.statement_total - self.ledger_total


@dataclass
class CashMovement:
    """Cash-account entry with the combined cash balance after it."""

    entry_id: int | None
    account_id: int
    transaction_date: date | None
    description: str
    amount: Decimal
    direction: CashDirection
    balance_after: Decimal


@dataclass
class CashFlowSummary:
    total_inflow: Decimal = ZERO
    total_outflow: Decimal = ZERO

    @property
    def net_cash_flow(self) -> Decimal:
        return self.total_inflow - self.total_outflow


@dataclass(frozen=True)
class LedgerSnapshot:
    """Immutable view of the registry and journal log at one version."""

    version: int
    accounts: tuple[Account, ...]
    journals: tuple[Journal, ...]
