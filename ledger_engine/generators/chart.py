"""Chart-of-accounts generator."""

from ledger_engine.generators.base import BaseGenerator
from ledger_engine.generators.pool import FakerPool
from ledger_engine.models import Account, AccountType

# (number, name, type) of a small-business chart; prefixes encode ancestry
STANDARD_CHART: tuple[tuple[str, str, AccountType], ...] = (
    ("1", "Assets", AccountType.ASSET),
    ("11", "Current Assets", AccountType.CURRENT_ASSETS),
    ("1101", "Cash on Hand", AccountType.CASH),
    ("1102", "Operating Bank Account", AccountType.CASH),
    ("1103", "Accounts Receivable", AccountType.ACCOUNTS_RECEIVABLE),
    ("1104", "Inventory", AccountType.INVENTORY),
    ("1105", "Prepaid Expenses", AccountType.PREPAID_EXPENSES),
    ("12", "Non-Current Assets", AccountType.NON_CURRENT_ASSETS),
    ("1201", "Machinery", AccountType.MACHINERY),
    ("1202", "Buildings", AccountType.BUILDINGS),
    ("1203", "Vehicles", AccountType.VEHICLES),
    ("1204", "Accumulated Depreciation", AccountType.ACCUMULATED_DEPRECIATION),
    ("2", "Liabilities", AccountType.LIABILITY),
    ("21", "Current Liabilities", AccountType.CURRENT_LIABILITIES),
    ("2101", "Accounts Payable", AccountType.ACCOUNTS_PAYABLE),
    ("2102", "Wages Payable", AccountType.WAGES_PAYABLE),
    ("2103", "Unearned Revenue", AccountType.UNEARNED_REVENUE),
    ("22", "Non-Current Liabilities", AccountType.NON_CURRENT_LIABILITIES),
    ("2201", "Notes Payable", AccountType.NOTES_PAYABLE),
    ("2202", "Bonds Payable", AccountType.BONDS_PAYABLE),
    ("3", "Equity", AccountType.EQUITY),
    ("3101", "Owner's Capital", AccountType.OWNERS_CAPITAL),
    ("3102", "Retained Earnings", AccountType.RETAINED_EARNINGS),
    ("3103", "Owner's Drawings", AccountType.DRAWINGS),
    ("4", "Revenue", AccountType.REVENUE),
    ("4101", "Sales Revenue", AccountType.SALES_REVENUE),
    ("4102", "Service Revenue", AccountType.SERVICE_REVENUE),
    ("4103", "Interest Income", AccountType.INTEREST_INCOME),
    ("5", "Expenses", AccountType.EXPENSE),
    ("5101", "Cost of Goods Sold", AccountType.COST_OF_GOODS_SOLD),
    ("5102", "Rent Expense", AccountType.RENT_EXPENSE),
    ("5103", "Wages Expense", AccountType.WAGES_EXPENSE),
    ("5104", "Utilities Expense", AccountType.UTILITIES_EXPENSE),
    ("5105", "Depreciation Expense", AccountType.DEPRECIATION_EXPENSE),
    ("5106", "General and Administrative Expenses", AccountType.GENERAL_AND_ADMINISTRATIVE_EXPENSES),
)


class ChartOfAccountsGenerator(BaseGenerator):
    """Generate a numbered chart of accounts.

    The standard chart is always produced. ``extra_bank_accounts`` adds
    cash accounts under "Current Assets" named after random banks, numbered
    after the last standard cash account.
    """

    def __init__(
        self,
        seed: int | None = None,
        pool: FakerPool | None = None,
        extra_bank_accounts: int = 0,
    ) -> None:
        super().__init__(seed, pool=pool)
        if not 0 <= extra_bank_accounts <= 89:
            raise ValueError("extra_bank_accounts must be between 0 and 89")
        self.extra_bank_accounts = extra_bank_accounts

    def generate(self, start_id: int = 1, company_id: int | None = None) -> list[Account]:
        """Generate the chart.

        Parameters
        ----------
        start_id : int
            Id given to the first account; the rest follow sequentially.
        company_id : int | None
            Company scope stamped on every account.

        Returns
        -------
        list[Account]
            Accounts ordered by number.
        """
        rows = list(STANDARD_CHART)
        for i in range(self.extra_bank_accounts):
            rows.append((f"11{10 + i:02d}", f"{self.pool.company()} Checking", AccountType.CASH))

        rows.sort(key=lambda row: row[0])
        return [
            Account(
                id=start_id + offset,
                number=number,
                name=name,
                account_type=account_type,
                company_id=company_id,
            )
            for offset, (number, name, account_type) in enumerate(rows)
        ]
