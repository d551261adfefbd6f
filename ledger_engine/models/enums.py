"""Enumeration types for ledger entities."""

from enum import Enum


class NormalBalance(str, Enum):
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class StatementCategory(str, Enum):
    ASSET = "ASSET"
    CONTRA_ASSET = "CONTRA_ASSET"
    LIABILITY = "LIABILITY"
    EQUITY = "EQUITY"
    REVENUE = "REVENUE"
    EXPENSE = "EXPENSE"


class AccountType(str, Enum):
    """Chart-of-accounts taxonomy.

    Values are the display labels used by the account-management screens, so
    labels coming back from the store map onto members with
    ``AccountType(label)``.
    """

    # Assets
    ASSET = "Asset"
    CURRENT_ASSETS = "Current Assets"
    CASH = "Cash"
    ACCOUNTS_RECEIVABLE = "Accounts Receivable"
    INVENTORY = "Inventory"
    PREPAID_EXPENSES = "Prepaid Expenses"
    NON_CURRENT_ASSETS = "Non-Current Assets"
    FIXED_ASSETS = "Fixed Assets"
    MACHINERY = "Machinery"
    BUILDINGS = "Buildings"
    VEHICLES = "Vehicles"
    ACCUMULATED_DEPRECIATION = "Accumulated Depreciation"

    # Expenses
    EXPENSE = "Expense"
    COST_OF_GOODS_SOLD = "Cost of Goods Sold"
    RENT_EXPENSE = "Rent Expense"
    WAGES_EXPENSE = "Wages Expense"
    UTILITIES_EXPENSE = "Utilities Expense"
    DEPRECIATION_EXPENSE = "Depreciation Expense"
    GENERAL_AND_ADMINISTRATIVE_EXPENSES = "General and Administrative Expenses"

    # Liabilities
    LIABILITY = "Liability"
    CURRENT_LIABILITIES = "Current Liabilities"
    NON_CURRENT_LIABILITIES = "Non-Current Liabilities"
    ACCOUNTS_PAYABLE = "Accounts Payable"
    WAGES_PAYABLE = "Wages Payable"
    UNEARNED_REVENUE = "Unearned Revenue"
    NOTES_PAYABLE = "Notes Payable"
    BONDS_PAYABLE = "Bonds Payable"

    # Equity
    EQUITY = "Equity"
    OWNERS_CAPITAL = "Owner's Capital"
    RETAINED_EARNINGS = "Retained Earnings"
    DRAWINGS = "Drawings"

    # Revenue
    REVENUE = "Revenue"
    SALES_REVENUE = "Sales Revenue"
    SERVICE_REVENUE = "Service Revenue"
    INTEREST_INCOME = "Interest Income"

    @property
    def normal_balance(self) -> NormalBalance:
        return ACCOUNT_TYPE_TAGS[self][0]

    @property
    def statement_category(self) -> StatementCategory:
        return ACCOUNT_TYPE_TAGS[self][1]

    @classmethod
    def from_label(cls, label: str) -> "AccountType | None":
        """Return the member whose label matches, ignoring case and padding."""
        wanted = label.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None


_D, _C = NormalBalance.DEBIT, NormalBalance.CREDIT

# Owner's Capital is tagged with the textbook credit side here; the debit-side
# behaviour of the dashboards is applied by ``LEGACY_POLICY``.
ACCOUNT_TYPE_TAGS: dict[AccountType, tuple[NormalBalance, StatementCategory]] = {
    AccountType.ASSET: (_D, StatementCategory.ASSET),
    AccountType.CURRENT_ASSETS: (_D, StatementCategory.ASSET),
    AccountType.CASH: (_D, StatementCategory.ASSET),
    AccountType.ACCOUNTS_RECEIVABLE: (_D, StatementCategory.ASSET),
    AccountType.INVENTORY: (_D, StatementCategory.ASSET),
    AccountType.PREPAID_EXPENSES: (_D, StatementCategory.ASSET),
    AccountType.NON_CURRENT_ASSETS: (_D, StatementCategory.ASSET),
    AccountType.FIXED_ASSETS: (_D, StatementCategory.ASSET),
    AccountType.MACHINERY: (_D, StatementCategory.ASSET),
    AccountType.BUILDINGS: (_D, StatementCategory.ASSET),
    AccountType.VEHICLES: (_D, StatementCategory.ASSET),
    AccountType.ACCUMULATED_DEPRECIATION: (_C, StatementCategory.CONTRA_ASSET),
    AccountType.EXPENSE: (_D, StatementCategory.EXPENSE),
    AccountType.COST_OF_GOODS_SOLD: (_D, StatementCategory.EXPENSE),
    AccountType.RENT_EXPENSE: (_D, StatementCategory.EXPENSE),
    AccountType.WAGES_EXPENSE: (_D, StatementCategory.EXPENSE),
    AccountType.UTILITIES_EXPENSE: (_D, StatementCategory.EXPENSE),
    AccountType.DEPRECIATION_EXPENSE: (_D, StatementCategory.EXPENSE),
    AccountType.GENERAL_AND_ADMINISTRATIVE_EXPENSES: (_D, StatementCategory.EXPENSE),
    AccountType.LIABILITY: (_C, StatementCategory.LIABILITY),
    AccountType.CURRENT_LIABILITIES: (_C, StatementCategory.LIABILITY),
    AccountType.NON_CURRENT_LIABILITIES: (_C, StatementCategory.LIABILITY),
    AccountType.ACCOUNTS_PAYABLE: (_C, StatementCategory.LIABILITY),
    AccountType.WAGES_PAYABLE: (_C, StatementCategory.LIABILITY),
    AccountType.UNEARNED_REVENUE: (_C, StatementCategory.LIABILITY),
    AccountType.NOTES_PAYABLE: (_C, StatementCategory.LIABILITY),
    AccountType.BONDS_PAYABLE: (_C, StatementCategory.LIABILITY),
    AccountType.EQUITY: (_C, StatementCategory.EQUITY),
    AccountType.OWNERS_CAPITAL: (_C, StatementCategory.EQUITY),
    AccountType.RETAINED_EARNINGS: (_C, StatementCategory.EQUITY),
    AccountType.DRAWINGS: (_D, StatementCategory.EQUITY),
    AccountType.REVENUE: (_C, StatementCategory.REVENUE),
    AccountType.SALES_REVENUE: (_C, StatementCategory.REVENUE),
    AccountType.SERVICE_REVENUE: (_C, StatementCategory.REVENUE),
    AccountType.INTEREST_INCOME: (_C, StatementCategory.REVENUE),
}


class ValidationErrorKind(str, Enum):
    UNBALANCED = "UNBALANCED"
    MISSING_ACCOUNT = "MISSING_ACCOUNT"
    ZERO_AMOUNT = "ZERO_AMOUNT"
    TOO_FEW_ENTRIES = "TOO_FEW_ENTRIES"
    INVALID_LINE = "INVALID_LINE"


class MatchRejectReason(str, Enum):
    AMOUNT_MISMATCH = "AMOUNT_MISMATCH"
    BANK_LINE_MATCHED = "BANK_LINE_MATCHED"
    ENTRY_MATCHED = "ENTRY_MATCHED"


class BalanceStatus(str, Enum):
    BALANCED = "BALANCED"
    NOT_BALANCED = "NOT_BALANCED"


class CashDirection(str, Enum):
    INFLOW = "INFLOW"
    OUTFLOW = "OUTFLOW"
