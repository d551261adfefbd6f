"""Chart-of-accounts hierarchy derived from account number prefixes."""

import logging
from collections.abc import Iterable, Iterator

from ledger_engine.models.account import Account
from ledger_engine.models.reports import AccountNode

logger = logging.getLogger(__name__)


def find_parent_number(number: str, numbers: set[str] | dict[str, object]) -> str | None:
    """Return the longest registered proper prefix of ``number``.

    The search strips one trailing character at a time and stops at the
    first registered prefix. Prefixes of length one are still tested, so
    "1101" finds "1" when neither "110" nor "11" exist.
    """
    candidate = number[:-1]
    while candidate not in numbers and len(candidate) > 1:
        candidate = candidate[:-1]
    if candidate and candidate in numbers:
        return candidate
    return None


def build_hierarchy(accounts: Iterable[Account]) -> list[AccountNode]:
    """Build the chart-of-accounts forest.

    Accounts are ordered by number, so children always appear in number
    order and the result does not depend on input order. An account with
    no registered prefix becomes a root; the builder never rejects input.

    Parameters
    ----------
    accounts : Iterable[Account]
        Full account registry of one company.

    Returns
    -------
    list[AccountNode]
        Root nodes in number order.
    """
    ordered = sorted(accounts, key=lambda a: a.number)
    nodes: dict[str, AccountNode] = {}
    for account in ordered:
        nodes[account.number] = AccountNode(account=account)

    roots: list[AccountNode] = []
    for account in ordered:
        node = nodes[account.number]
        parent_number = find_parent_number(account.number, nodes)
        if parent_number is None:
            roots.append(node)
        else:
            nodes[parent_number].children.append(node)

    logger.debug("Built hierarchy: %d accounts, %d roots", len(ordered), len(roots))
    return roots


def walk_hierarchy(nodes: list[AccountNode], depth: int = 0) -> Iterator[tuple[int, AccountNode]]:
    """Depth-first traversal yielding ``(depth, node)``."""
    for node in nodes:
        yield depth, node
        yield from walk_hierarchy(node.children, depth + 1)
