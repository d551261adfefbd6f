"""Ledger domain models."""

from ledger_engine.models.account import Account
from ledger_engine.models.bank import BankStatementLine
from ledger_engine.models.base import DateRange, Event
from ledger_engine.models.classification import AccountClassification, classify_type
from ledger_engine.models.enums import (
    AccountType,
    BalanceStatus,
    CashDirection,
    MatchRejectReason,
    NormalBalance,
    StatementCategory,
    ValidationErrorKind,
)
from ledger_engine.models.journal import Journal, JournalEntry
from ledger_engine.models.reports import (
    AccountNode,
    BalanceSheet,
    BalanceSheetLine,
    CashFlowSummary,
    CashMovement,
    ChartNode,
    ClassificationAmbiguous,
    LedgerReport,
    LedgerReportLine,
    LedgerSnapshot,
    ReconciliationMatch,
    ReconciliationSummary,
    RunningBalanceLine,
    TrialBalance,
    TrialBalanceRow,
)

__all__ = [
    "Account",
    "AccountClassification",
    "AccountNode",
    "AccountType",
    "BalanceSheet",
    "BalanceSheetLine",
    "BalanceStatus",
    "BankStatementLine",
    "CashDirection",
    "CashFlowSummary",
    "CashMovement",
    "ChartNode",
    "ClassificationAmbiguous",
    "DateRange",
    "Event",
    "Journal",
    "JournalEntry",
    "LedgerReport",
    "LedgerReportLine",
    "LedgerSnapshot",
    "MatchRejectReason",
    "NormalBalance",
    "ReconciliationMatch",
    "ReconciliationSummary",
    "RunningBalanceLine",
    "StatementCategory",
    "TrialBalance",
    "TrialBalanceRow",
    "ValidationErrorKind",
    "classify_type",
]
