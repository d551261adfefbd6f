"""Pure ledger computations: hierarchy, balances, validation, statements, reconciliation."""

from ledger_engine.engine.balances import (
    compute_balance,
    compute_balances,
    compute_running_balance,
)
from ledger_engine.engine.cash import (
    build_cash_movements,
    cash_balances,
    is_cash_account,
    summarize_cash_flow,
)
from ledger_engine.engine.hierarchy import build_hierarchy, find_parent_number, walk_hierarchy
from ledger_engine.engine.policy import (
    DEFAULT_POLICY,
    LEGACY_POLICY,
    STANDARD_POLICY,
    NormalBalancePolicy,
    policy_for,
)
from ledger_engine.engine.reconciliation import Reconciler, match_transactions
from ledger_engine.engine.statements import (
    build_balance_sheet,
    build_chart_view,
    build_ledger_report,
    build_trial_balance,
)
from ledger_engine.engine.validation import check_journal, validate_journal

__all__ = [
    "DEFAULT_POLICY",
    "LEGACY_POLICY",
    "STANDARD_POLICY",
    "NormalBalancePolicy",
    "Reconciler",
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
    "walk_hierarchy",
    "is_cash_account",
    "match_transactions",
    "policy_for",
    "summarize_cash_flow",
    "validate_journal",
]
