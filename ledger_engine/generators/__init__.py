"""Faker-driven sample data generators."""

from ledger_engine.generators.bank import BankStatementGenerator
from ledger_engine.generators.chart import STANDARD_CHART, ChartOfAccountsGenerator
from ledger_engine.generators.journal import JournalGenerator
from ledger_engine.generators.pool import FakerPool, UUIDPool

__all__ = [
    "STANDARD_CHART",
    "BankStatementGenerator",
    "ChartOfAccountsGenerator",
    "FakerPool",
    "JournalGenerator",
    "UUIDPool",
]
