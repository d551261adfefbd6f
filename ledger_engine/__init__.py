"""Double-entry ledger engine.

Turns dated, multi-line journals into per-account balances, a hierarchical
chart of accounts and verified financial statements, and reconciles ledger
entries against bank statements.
"""

from ledger_engine.config import KafkaConfig, LedgerConfig, OutputConfig
from ledger_engine.engine import (
    DEFAULT_POLICY,
    LEGACY_POLICY,
    STANDARD_POLICY,
    NormalBalancePolicy,
    Reconciler,
    build_balance_sheet,
    build_cash_movements,
    build_chart_view,
    build_hierarchy,
    build_ledger_report,
    build_trial_balance,
    cash_balances,
    check_journal,
    compute_balance,
    compute_balances,
    compute_running_balance,
    find_parent_number,
    is_cash_account,
    match_transactions,
    policy_for,
    summarize_cash_flow,
    validate_journal,
    walk_hierarchy,
)
from ledger_engine.exceptions import (
    ClassificationAmbiguousError,
    ConfigurationError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidEntityStateError,
    JournalValidationError,
    LedgerError,
    MatchRejectedError,
    ReferentialIntegrityError,
    SinkError,
)
from ledger_engine.models import (
    Account,
    AccountNode,
    AccountType,
    BalanceSheet,
    BalanceStatus,
    BankStatementLine,
    ChartNode,
    ClassificationAmbiguous,
    DateRange,
    Journal,
    JournalEntry,
    LedgerReport,
    LedgerSnapshot,
    MatchRejectReason,
    NormalBalance,
    ReconciliationMatch,
    StatementCategory,
    TrialBalance,
    ValidationErrorKind,
)
from ledger_engine.store import LedgerStore

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_POLICY",
    "LEGACY_POLICY",
    "STANDARD_POLICY",
    "Account",
    "AccountNode",
    "AccountType",
    "BalanceSheet",
    "BalanceStatus",
    "BankStatementLine",
    "ChartNode",
    "ClassificationAmbiguous",
    "ClassificationAmbiguousError",
    "ConfigurationError",
    "DateRange",
    "DuplicateEntityError",
    "EntityNotFoundError",
    "InvalidEntityStateError",
    "Journal",
    "JournalEntry",
    "JournalValidationError",
    "KafkaConfig",
    "LedgerConfig",
    "LedgerError",
    "LedgerReport",
    "LedgerSnapshot",
    "LedgerStore",
    "MatchRejectReason",
    "MatchRejectedError",
    "NormalBalance",
    "NormalBalancePolicy",
    "OutputConfig",
    "ReconciliationMatch",
    "Reconciler",
    "ReferentialIntegrityError",
    "SinkError",
    "StatementCategory",
    "TrialBalance",
    "ValidationErrorKind",
    "build_balance_sheet",
    "build_cash_movements",
    "build_chart_view",
    "build_hierarchy",
    "build_ledger_report",
    "build_trial_balance",
    "cash_balances",
    "check_journal",
    "compute_balance",
    "compute_balances",
    "compute_running_balance",
    "find_parent_number",
    "is_cash_account",
    "match_transactions",
    "policy_for",
    "summarize_cash_flow",
    "validate_journal",
    "walk_hierarchy",
]
