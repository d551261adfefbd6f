"""In-memory ledger store with referential integrity and serialized posting."""

import logging
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any

from ledger_engine.engine.balances import chronological_key, compute_net_debits
from ledger_engine.engine.cash import is_cash_account
from ledger_engine.engine.policy import DEFAULT_POLICY, NormalBalancePolicy
from ledger_engine.engine.reconciliation import Reconciler
from ledger_engine.engine.validation import validate_journal
from ledger_engine.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidEntityStateError,
    JournalValidationError,
    ReferentialIntegrityError,
    SinkError,
)
from ledger_engine.models import (
    Account,
    AccountType,
    BankStatementLine,
    DateRange,
    Event,
    Journal,
    JournalEntry,
    LedgerSnapshot,
    ReconciliationMatch,
)
from ledger_engine.money import ZERO
from ledger_engine.sinks.serialization import to_dict

logger = logging.getLogger(__name__)

EVENT_SOURCE = "ledger-engine"


@dataclass
class LedgerStore:
    """Account registry and append-only journal log for one company.

    Posting and reconciliation are serialized by a lock. Each accepted
    journal updates a materialized debit-positive net per account, which
    :meth:`verify_balances` checks against a full recomputation.

    Parameters
    ----------
    company_id : int | None
        Company scope stamped on accounts and journals.
    policy : NormalBalancePolicy
        Normal-balance rules used by :meth:`balance_of`.
    sink : Any
        Optional sink with ``write_batch(topic, records)``; receives one
        event per posted journal and per reconciliation match.
    topic_prefix : str
        Prefix for event topics (``<prefix>.journals``).
    """

    company_id: int | None = None
    policy: NormalBalancePolicy = DEFAULT_POLICY
    sink: Any = None
    topic_prefix: str = "dev.ledger"

    accounts: dict[int, Account] = field(default_factory=dict)
    journals: list[Journal] = field(default_factory=list)
    reconciler: Reconciler = field(default_factory=Reconciler)

    # Indexes
    _by_number: dict[str, int] = field(default_factory=dict, repr=False)
    _journal_ids: set[int] = field(default_factory=set, repr=False)
    _entries: dict[int, JournalEntry] = field(default_factory=dict, repr=False)
    _account_entries: dict[int, list[int]] = field(default_factory=dict, repr=False)
    _net_debits: dict[int, Decimal] = field(default_factory=dict, repr=False)

    _next_account_id: int = field(default=1, repr=False)
    _next_journal_id: int = field(default=1, repr=False)
    _next_entry_id: int = field(default=1, repr=False)
    _version: int = field(default=0, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def version(self) -> int:
        return self._version

    # Account registry

    def add_account(self, account: Account) -> Account:
        """Register an account; its id and number must be unused."""
        with self._lock:
            if account.id in self.accounts:
                raise DuplicateEntityError(f"Account id {account.id} already registered")
            if account.number in self._by_number:
                raise DuplicateEntityError(f"Account number {account.number} already registered")

            if account.company_id is None:
                account.company_id = self.company_id
            if account.created_at is None:
                account.created_at = datetime.now()

            self.accounts[account.id] = account
            self._by_number[account.number] = account.id
            self._account_entries[account.id] = []
            self._net_debits[account.id] = ZERO
            self._next_account_id = max(self._next_account_id, account.id + 1)
            self._version += 1

        logger.debug("Registered account %s %s (%s)", account.number, account.name, account.type_label)
        return account

    def create_account(self, number: str, name: str, account_type: AccountType | str) -> Account:
        """Register a new account with the next free id."""
        return self.add_account(
            Account(id=self._next_account_id, number=number, name=name, account_type=account_type)
        )

    def get_account(self, account_id: int) -> Account:
        account = self.accounts.get(account_id)
        if account is None:
            raise EntityNotFoundError(f"Account {account_id} not found")
        return account

    def get_account_by_number(self, number: str) -> Account:
        account_id = self._by_number.get(number)
        if account_id is None:
            raise EntityNotFoundError(f"Account number {number} not found")
        return self.accounts[account_id]

    def is_referenced(self, account_id: int) -> bool:
        return bool(self._account_entries.get(account_id))

    def remove_account(self, account_id: int) -> Account:
        """Delete an account that no posted entry references."""
        with self._lock:
            account = self.get_account(account_id)
            if self.is_referenced(account_id):
                raise InvalidEntityStateError(
                    f"Account {account.number} is referenced by posted entries and cannot be deleted"
                )
            del self.accounts[account_id]
            del self._by_number[account.number]
            del self._account_entries[account_id]
            del self._net_debits[account_id]
            self._version += 1
        return account

    # Journals

    def post_journal(self, journal: Journal) -> Journal:
        """Validate and append a journal.

        Empty lines are dropped, ids are assigned to the journal and its
        entries and the journal date is stamped on every entry. Nothing is
        written when validation fails.

        Raises
        ------
        JournalValidationError
            If the journal is not a valid balanced transaction.
        DuplicateEntityError
            If a journal with the same id was already accepted.
        SinkError
            If the posted event could not be published; the journal stays
            posted.
        """
        with self._lock:
            if journal.id is not None and journal.id in self._journal_ids:
                raise DuplicateEntityError(f"Journal {journal.id} already posted")

            try:
                validate_journal(journal, self.accounts.keys())
            except JournalValidationError as e:
                logger.warning(
                    "Rejected journal %s: %s",
                    journal.reference_id,
                    e,
                    extra={"reference_id": journal.reference_id, "reason": e.kind},
                )
                raise

            if journal.id is None:
                journal.id = self._next_journal_id
            self._next_journal_id = max(self._next_journal_id, journal.id + 1)
            if journal.company_id is None:
                journal.company_id = self.company_id
            if journal.created_at is None:
                journal.created_at = datetime.now()

            journal.entries = [e for e in journal.entries if not e.is_empty]
            for entry in journal.entries:
                entry.id = self._next_entry_id
                self._next_entry_id += 1
            journal.attach_entries()

            self.journals.append(journal)
            self._journal_ids.add(journal.id)
            for entry in journal.entries:
                self._entries[entry.id] = entry
                self._account_entries[entry.account_id].append(entry.id)
                self._net_debits[entry.account_id] += entry.net_debit
            self._version += 1

        logger.info(
            "Posted journal %d (%s): %d lines, %s",
            journal.id,
            journal.reference_id,
            len(journal.entries),
            journal.total_debit,
            extra={
                "company_id": journal.company_id,
                "journal_id": journal.id,
                "reference_id": journal.reference_id,
                "amount": journal.total_debit,
            },
        )
        self._publish("journal.posted", "journals", str(journal.id), to_dict(journal))
        return journal

    def get_journal(self, journal_id: int) -> Journal:
        for journal in self.journals:
            if journal.id == journal_id:
                return journal
        raise EntityNotFoundError(f"Journal {journal_id} not found")

    def get_entry(self, entry_id: int) -> JournalEntry:
        entry = self._entries.get(entry_id)
        if entry is None:
            raise EntityNotFoundError(f"Journal entry {entry_id} not found")
        return entry

    def entries_for_account(
        self, account_id: int, date_range: DateRange | None = None
    ) -> list[JournalEntry]:
        """Entries posted to an account, in (date, entry id) order."""
        if account_id not in self.accounts:
            raise EntityNotFoundError(f"Account {account_id} not found")
        entries = [self._entries[i] for i in self._account_entries[account_id]]
        if date_range is not None:
            entries = [e for e in entries if date_range.contains(e.transaction_date)]
        return sorted(entries, key=chronological_key)

    def cash_entries(self) -> list[JournalEntry]:
        """Entries posted to cash accounts, in (date, entry id) order."""
        entries = [
            self._entries[i]
            for account in self.accounts.values()
            if is_cash_account(account)
            for i in self._account_entries[account.id]
        ]
        return sorted(entries, key=chronological_key)

    # Balances

    def balance_of(self, account_id: int) -> Decimal:
        """Signed balance from the materialized net."""
        account = self.get_account(account_id)
        return self.policy.orient(account, self._net_debits[account_id])

    def balances(self) -> dict[int, Decimal]:
        return {account_id: self.balance_of(account_id) for account_id in self.accounts}

    def verify_balances(self) -> dict[int, Decimal]:
        """Compare materialized nets with a recomputation from the journal log.

        Returns
        -------
        dict[int, Decimal]
            ``materialized - recomputed`` for every account that drifted;
            empty when the store is consistent.
        """
        with self._lock:
            recomputed = compute_net_debits(self.journals)
            drift = {
                account_id: net - recomputed.get(account_id, ZERO)
                for account_id, net in self._net_debits.items()
                if net != recomputed.get(account_id, ZERO)
            }
        if drift:
            logger.warning("Materialized balances drifted for accounts %s", sorted(drift))
        return drift

    # Reconciliation

    def add_bank_line(self, line: BankStatementLine) -> BankStatementLine:
        self.reconciler.add_bank_line(line)
        return line

    def match(self, bank_line_id: int, entry_id: int) -> ReconciliationMatch:
        """Reconcile a bank line with a posted cash entry."""
        entry = self.get_entry(entry_id)
        account = self.get_account(entry.account_id)
        if not is_cash_account(account):
            raise ReferentialIntegrityError(
                f"Entry {entry_id} is posted to {account.number}, which is not a cash account"
            )
        with self._lock:
            result = self.reconciler.match(bank_line_id, entry)
            self._version += 1
        self._publish("bank_line.matched", "reconciliations", str(bank_line_id), to_dict(result))
        return result

    def suggest_matches(self) -> list[tuple[BankStatementLine, JournalEntry]]:
        return self.reconciler.suggest_matches(self.cash_entries())

    # Snapshots

    def snapshot(self) -> LedgerSnapshot:
        """Consistent view of accounts and journals at the current version."""
        with self._lock:
            return LedgerSnapshot(
                version=self._version,
                accounts=tuple(sorted(self.accounts.values(), key=lambda a: a.number)),
                journals=tuple(self.journals),
            )

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "accounts": len(self.accounts),
            "journals": len(self.journals),
            "entries": len(self._entries),
            "bank_lines": len(self.reconciler.bank_lines),
            "matches": len(self.reconciler.matches),
        }

    def _publish(self, event_type: str, topic: str, subject: str, data: dict) -> None:
        if self.sink is None:
            return
        event = Event(
            event_id=uuid.uuid4().hex,
            event_type=event_type,
            event_time=datetime.now(),
            source=EVENT_SOURCE,
            subject=subject,
            data=data,
            metadata={"company_id": self.company_id, "version": self._version},
        )
        try:
            self.sink.write_batch(f"{self.topic_prefix}.{topic}", [event])
        except Exception as e:
            logger.error(
                "Failed to publish %s for %s: %s",
                event_type,
                subject,
                e,
                extra={"company_id": self.company_id},
            )
            raise SinkError(f"Failed to publish {event_type} for {subject}") from e
