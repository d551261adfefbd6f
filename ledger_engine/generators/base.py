"""Base generator class for all sample-data generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker

from ledger_engine.generators.pool import FakerPool


class BaseGenerator(ABC):
    """Base class for all data generators.

    Provides common initialization: Faker instance creation,
    seed-based reproducibility, and an optional shared FakerPool.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    pool : FakerPool | None
        Pre-generated value pool shared between generators.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        pool: FakerPool | None = None,
    ) -> None:
        self.fake = Faker(locale)
        self.pool = pool or FakerPool(locale=locale, seed=seed)
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)
