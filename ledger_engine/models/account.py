"""Account model for the chart of accounts."""

from dataclasses import dataclass, field
from datetime import datetime

from ledger_engine.models.classification import AccountClassification, classify_type
from ledger_engine.models.enums import AccountType, NormalBalance, StatementCategory


@dataclass
class Account:
    """Chart-of-accounts entry.

    ``number`` is a variable-length code whose prefixes encode ancestry
    ("1" > "11" > "1101"). ``account_type`` accepts a taxonomy member or the
    label stored by the account-management screens; known labels are
    converted to members and the classification is fixed at construction.
    """

    id: int
    number: str
    name: str
    account_type: AccountType | str
    company_id: int | None = None
    created_at: datetime | None = None
    classification: AccountClassification = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.account_type, str) and not isinstance(self.account_type, AccountType):
            member = AccountType.from_label(self.account_type)
            if member is not None:
                self.account_type = member
        self.classification = classify_type(self.account_type)

    @property
    def type_label(self) -> str:
        if isinstance(self.account_type, AccountType):
            return self.account_type.value
        return self.account_type

    @property
    def category(self) -> StatementCategory | None:
        return self.classification.category

    @property
    def default_normal_balance(self) -> NormalBalance:
        return self.classification.normal_balance
