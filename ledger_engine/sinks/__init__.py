"""Output sinks for ledger events and reports."""

from ledger_engine.sinks.console import ConsoleSink
from ledger_engine.sinks.json_file import JsonFileSink
from ledger_engine.sinks.kafka import KafkaSink

__all__ = ["ConsoleSink", "JsonFileSink", "KafkaSink"]
