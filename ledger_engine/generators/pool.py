"""Pre-generated value pools for fast sample-data generation.

Replaces per-call Faker invocations with ``random.choice()`` lookups from
pools populated once at construction.

Usage::

    pool = FakerPool(seed=42)
    vendor = pool.company()     # random.choice from 500 companies
    ref    = pool.reference()   # "JRN-3F9A1C0B"
"""

from __future__ import annotations

import os
import random
import uuid as _uuid

from faker import Faker


class UUIDPool:
    """Batch-generated UUIDs using os.urandom for minimal syscall overhead.

    Parameters
    ----------
    batch_size : int
        Number of UUIDs to generate per batch (default 8192).
    """

    __slots__ = ("_batch_size", "_pool", "_index")

    def __init__(self, batch_size: int = 8192) -> None:
        self._batch_size = batch_size
        self._pool: list[str] = []
        self._index = 0
        self._refill()

    def _refill(self) -> None:
        """Generate a new batch of UUIDs."""
        raw = os.urandom(16 * self._batch_size)
        self._pool = [
            _uuid.UUID(bytes=raw[i : i + 16], version=4).hex
            for i in range(0, len(raw), 16)
        ]
        self._index = 0

    def next(self) -> str:
        """Return next UUID hex string, refilling pool when exhausted."""
        if self._index >= len(self._pool):
            self._refill()
        val = self._pool[self._index]
        self._index += 1
        return val


class FakerPool:
    """Pre-generated pools of Faker values for fast random selection.

    Parameters
    ----------
    locale : str
        Faker locale (default ``en_US``).
    seed : int | None
        Random seed for reproducibility.
    pool_sizes : dict[str, int] | None
        Override default pool sizes per field.
    """

    DEFAULT_SIZES: dict[str, int] = {
        "name": 1000,
        "company": 500,
        "catch_phrase": 300,
    }

    def __init__(
        self,
        locale: str = "en_US",
        seed: int | None = None,
        pool_sizes: dict[str, int] | None = None,
    ) -> None:
        sizes = {**self.DEFAULT_SIZES, **(pool_sizes or {})}
        fake = Faker(locale)
        if seed is not None:
            fake.seed_instance(seed)
            random.seed(seed)

        self._names: list[str] = [fake.name() for _ in range(sizes["name"])]
        self._companies: list[str] = [fake.company() for _ in range(sizes["company"])]
        self._catch_phrases: list[str] = [fake.catch_phrase() for _ in range(sizes["catch_phrase"])]

        # Reference ids are random, not seeded
        self._uuid_pool = UUIDPool(batch_size=1024)

    def uuid(self) -> str:
        """Return a unique UUID4 hex string."""
        return self._uuid_pool.next()

    def reference(self, prefix: str = "JRN") -> str:
        """Return a short document reference such as ``JRN-3F9A1C0B``."""
        return f"{prefix}-{self.uuid()[:8].upper()}"

    def name(self) -> str:
        """Return a random full name."""
        return random.choice(self._names)

    def company(self) -> str:
        """Return a random company name."""
        return random.choice(self._companies)

    def catch_phrase(self) -> str:
        """Return a random product-style phrase."""
        return random.choice(self._catch_phrases)
