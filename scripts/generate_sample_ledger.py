#!/usr/bin/env python3
"""Generate a sample ledger and dump its data to JSON files.

The script builds a small-business ledger (chart of accounts, a year of
journals and a bank statement), then writes:
- accounts.json, journals.json, bank_lines.json

Posted-journal and reconciliation events go to JSON Lines files, or to
Kafka with ``--kafka-bootstrap``. Trial balance, balance sheet, cash flow
and reconciliation results are printed as a summary, followed by the chart
of accounts with balances.
"""

import argparse
import logging
import sys
from dataclasses import replace
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ledger_engine.config import LedgerConfig
from ledger_engine.engine import (
    build_balance_sheet,
    build_cash_movements,
    build_chart_view,
    build_trial_balance,
    summarize_cash_flow,
)
from ledger_engine.logging import setup_logging
from ledger_engine.models import ChartNode
from ledger_engine.scenarios import SmallBusinessScenario
from ledger_engine.sinks import JsonFileSink, KafkaSink

logger = logging.getLogger(__name__)


def parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not an ISO date: {value!r}") from e


def print_chart(nodes: list[ChartNode], depth: int = 0) -> None:
    for node in nodes:
        indent = "  " * depth
        label = f"{indent}{node.account.number} {node.account.name}"
        balance = node.balance if node.rolled_up_balance is None else node.rolled_up_balance
        print(f"{label:46}{balance:>14}")
        print_chart(node.children, depth + 1)


def main() -> None:
    """Main entry point."""
    config = LedgerConfig.from_env()

    parser = argparse.ArgumentParser(description="Generate a sample ledger")
    parser.add_argument(
        "--journals",
        type=int,
        default=200,
        help="Number of journals to post (default: 200)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed if config.seed is not None else 42,
        help="Random seed (default: SEED or 42)",
    )
    parser.add_argument(
        "--start",
        type=parse_date,
        default=date(2024, 1, 1),
        help="First journal date (default: 2024-01-01)",
    )
    parser.add_argument(
        "--end",
        type=parse_date,
        default=date(2024, 12, 31),
        help="Last journal date and balance sheet date (default: 2024-12-31)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.output.json_output_dir,
        help="Directory for JSON output (default: OUTPUT_DIR or ./output)",
    )
    parser.add_argument(
        "--kafka-bootstrap",
        default=None,
        help="Publish events to this Kafka cluster instead of JSON Lines files",
    )
    parser.add_argument(
        "--standard-policy",
        action="store_true",
        help="Treat Owner's Capital as credit-normal",
    )
    parser.add_argument(
        "--rollup",
        action="store_true",
        default=config.rollup_hierarchy,
        help="Show parent accounts with their sub-accounts included",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        help="Log level (default: LOG_LEVEL or INFO)",
    )

    args = parser.parse_args()
    if args.end < args.start:
        parser.error("--end must not be before --start")

    setup_logging(args.log_level)
    if args.standard_policy:
        config.capital_debit_normal = False

    files = JsonFileSink(args.output_dir, pretty=config.output.pretty_json)
    if args.kafka_bootstrap:
        event_sink = KafkaSink(replace(config.kafka, bootstrap_servers=args.kafka_bootstrap))
    else:
        event_sink = files

    try:
        store = SmallBusinessScenario(
            num_journals=args.journals,
            start_date=args.start,
            end_date=args.end,
            config=config,
            sink=event_sink,
            seed=args.seed,
        ).generate()
    finally:
        if event_sink is not files:
            event_sink.close()

    snapshot = store.snapshot()
    accounts, journals = snapshot.accounts, snapshot.journals

    files.write_document("accounts", list(accounts))
    files.write_document("journals", list(journals))
    files.write_document("bank_lines", store.reconciler.bank_lines)

    trial_balance = build_trial_balance(accounts, journals, as_of=args.end)
    balance_sheet = build_balance_sheet(
        accounts,
        journals,
        as_of=args.end,
        tolerance=config.balance_tolerance,
        strict=config.strict_classification,
    )
    cash_flow = summarize_cash_flow(build_cash_movements(accounts, journals))
    reconciliation = store.reconciler.summary(store.cash_entries())

    print("\n" + "=" * 60)
    print("Ledger Summary")
    print("=" * 60)
    for name, count in store.summary().items():
        print(f"{name + ':':18}{count}")
    print(f"{'trial balance:':18}{trial_balance.status.value}")
    print(f"{'balance sheet:':18}{balance_sheet.status.value} (difference {balance_sheet.difference})")
    print(f"{'net cash flow:':18}{cash_flow.net_cash_flow}")
    print(f"{'unreconciled:':18}{reconciliation.unmatched_bank_lines} bank lines")
    print("\nChart of Accounts")
    print_chart(build_chart_view(accounts, journals, rollup=args.rollup, policy=store.policy))
    print(f"\nAll files saved to: {args.output_dir}")
    print("=" * 60)


if __name__ == "__main__":
    main()
