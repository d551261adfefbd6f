"""Base models shared across the engine."""

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class DateRange:
    """Inclusive date window; either end may be open."""

    start: date | None = None
    end: date | None = None

    def __post_init__(self) -> None:
        if self.start and self.end and self.start > self.end:
            raise ValueError(f"start {self.start} is after end {self.end}")

    def contains(self, day: date | None) -> bool:
        if day is None:
            return self.is_unbounded
        if self.start is not None and day < self.start:
            return False
        if self.end is not None and day > self.end:
            return False
        return True

    @property
    def is_unbounded(self) -> bool:
        return self.start is None and self.end is None

    @classmethod
    def as_of(cls, day: date | None) -> "DateRange":
        """Everything up to and including ``day``."""
        return cls(end=day)


@dataclass
class Event:
    """Standard event envelope for streaming."""

    event_id: str
    event_type: str  # entity.action (e.g., journal.posted)
    event_time: datetime
    source: str  # Service/system that generated
    subject: str  # Entity ID affected
    data: dict
    metadata: dict = field(default_factory=dict)
