"""Normal-balance policies.

The ledger screens have always shown Owner's Capital as a debit-normal
account, against the usual convention. That behaviour is kept as
``LEGACY_POLICY`` (the default) rather than baked into the type tags, so a
company can switch to ``STANDARD_POLICY`` once the intended behaviour is
confirmed.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from ledger_engine.config import LedgerConfig
from ledger_engine.models.account import Account
from ledger_engine.models.enums import AccountType, NormalBalance


@dataclass(frozen=True, eq=False)
class NormalBalancePolicy:
    """Normal-balance side per account, with per-type overrides."""

    name: str
    overrides: dict[AccountType, NormalBalance] = field(default_factory=dict)

    def normal_balance(self, account: Account) -> NormalBalance:
        override = self.overrides.get(account.account_type)
        if override is not None:
            return override
        return account.default_normal_balance

    def is_debit_normal(self, account: Account) -> bool:
        return self.normal_balance(account) == NormalBalance.DEBIT

    def orient(self, account: Account, net_debit: Decimal) -> Decimal:
        """Turn a debit-positive net into the account's signed balance."""
        return net_debit if self.is_debit_normal(account) else -net_debit


STANDARD_POLICY = NormalBalancePolicy(name="standard")

LEGACY_POLICY = NormalBalancePolicy(
    name="legacy",
    overrides={AccountType.OWNERS_CAPITAL: NormalBalance.DEBIT},
)

DEFAULT_POLICY = LEGACY_POLICY


def policy_for(config: LedgerConfig) -> NormalBalancePolicy:
    """Select the policy named by ``config.capital_debit_normal``."""
    return LEGACY_POLICY if config.capital_debit_normal else STANDARD_POLICY
