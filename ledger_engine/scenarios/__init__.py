"""Scenarios for generating realistic ledger data sets."""

from ledger_engine.scenarios.small_business import SmallBusinessScenario

__all__ = ["SmallBusinessScenario"]
