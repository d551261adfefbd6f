"""In-memory ledger store maintaining account and journal relationships."""

from ledger_engine.store.ledger import LedgerStore

__all__ = ["LedgerStore"]
