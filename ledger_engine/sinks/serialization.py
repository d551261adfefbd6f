"""JSON-ready records for ledger entities, reports and events.

Amounts are written as decimal strings so they keep their exact digits
(``Decimal("10.50")`` becomes ``"10.50"``), enums as their labels and dates
in ISO format. Journals also carry their debit and credit totals.
"""

from collections.abc import Mapping
from dataclasses import fields, is_dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

from ledger_engine.models.journal import Journal


def to_dict(record: Any) -> dict:
    """Convert a sink record (dataclass or mapping) to a JSON-ready dict.

    Raises
    ------
    TypeError
        If ``record`` is neither a dataclass instance nor a mapping.
    """
    if is_dataclass(record) and not isinstance(record, type):
        return dataclass_to_dict(record)
    if isinstance(record, Mapping):
        return serialize_value(record)
    raise TypeError(f"Cannot write {type(record).__name__} as a record")


def dataclass_to_dict(obj: Any) -> dict:
    """Serialize every field of a dataclass, nested records included."""
    data = {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, Journal):
        data["total_debit"] = str(obj.total_debit)
        data["total_credit"] = str(obj.total_credit)
    return data


def serialize_value(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    # datetime is a date subclass
    if isinstance(value, date):
        return value.isoformat()
    if is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    if isinstance(value, Mapping):
        return {str(key): serialize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    return value
