"""Resolve account type labels to normal balance and statement category.

Members of :class:`AccountType` carry explicit tags. Labels outside the
taxonomy (custom types created by users) fall back to the keyword rules the
balance-sheet screen has always applied. A label can satisfy more than one
rule ("Capital Asset Payable"); the first category in ``CATEGORY_PRECEDENCE``
wins and the remaining candidates are kept on the classification so reports
can surface the ambiguity instead of hiding it.
"""

from dataclasses import dataclass

from ledger_engine.models.enums import AccountType, NormalBalance, StatementCategory

CATEGORY_PRECEDENCE: tuple[StatementCategory, ...] = (
    StatementCategory.CONTRA_ASSET,
    StatementCategory.ASSET,
    StatementCategory.LIABILITY,
    StatementCategory.EQUITY,
    StatementCategory.REVENUE,
    StatementCategory.EXPENSE,
)

CATEGORY_KEYWORDS: dict[StatementCategory, tuple[str, ...]] = {
    StatementCategory.CONTRA_ASSET: ("accumulated depreciation",),
    StatementCategory.ASSET: ("asset", "cash"),
    StatementCategory.LIABILITY: ("liability", "liabilities", "payable"),
    StatementCategory.EQUITY: ("equity", "capital"),
    StatementCategory.REVENUE: ("revenue", "sales", "income"),
    StatementCategory.EXPENSE: ("expense", "cogs"),
}

_DEBIT_SIDE = (StatementCategory.ASSET, StatementCategory.EXPENSE)


@dataclass(frozen=True)
class AccountClassification:
    """Normal balance and statement category of one account type."""

    normal_balance: NormalBalance
    category: StatementCategory | None
    candidates: tuple[StatementCategory, ...] = ()

    @property
    def is_ambiguous(self) -> bool:
        return len(self.candidates) > 1


def keyword_categories(label: str) -> tuple[StatementCategory, ...]:
    """Return every category whose keywords appear in ``label``."""
    text = label.lower()
    matches = [
        category
        for category in CATEGORY_PRECEDENCE
        if any(word in text for word in CATEGORY_KEYWORDS[category])
    ]
    # "Accumulated Depreciation - Fixed Assets" is a contra account, not an asset
    if StatementCategory.CONTRA_ASSET in matches and StatementCategory.ASSET in matches:
        matches.remove(StatementCategory.ASSET)
    return tuple(matches)


def classify_type(account_type: AccountType | str) -> AccountClassification:
    """Classify a taxonomy member or a free-form type label."""
    if isinstance(account_type, AccountType):
        return AccountClassification(
            normal_balance=account_type.normal_balance,
            category=account_type.statement_category,
            candidates=(account_type.statement_category,),
        )

    candidates = keyword_categories(account_type)
    category = candidates[0] if candidates else None
    normal = NormalBalance.DEBIT if category in _DEBIT_SIDE else NormalBalance.CREDIT
    return AccountClassification(normal_balance=normal, category=category, candidates=candidates)
