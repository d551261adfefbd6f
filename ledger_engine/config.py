"""Configuration management for ledger-engine."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from ledger_engine.exceptions import ConfigurationError
from ledger_engine.money import to_money


@dataclass
class KafkaConfig:
    """Kafka producer configuration for ledger event publishing."""

    bootstrap_servers: str = "localhost:9092"
    acks: str = "all"
    batch_size: int = 16384
    linger_ms: int = 5
    compression: str = "snappy"
    retries: int = 3

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "batch.size": self.batch_size,
            "linger.ms": self.linger_ms,
            "compression.type": self.compression,
            "retries": self.retries,
        }


@dataclass
class OutputConfig:
    """Output configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False
    topic_prefix: str = "dev.ledger"


@dataclass
class LedgerConfig:
    """Main configuration for ledger-engine.

    ``balance_tolerance`` applies to aggregate checks such as the balance
    sheet equation. Journal validation always uses exact equality.
    ``capital_debit_normal`` keeps Owner's Capital on the debit side, as the
    dashboards have always shown it; set it to False for the textbook rule.
    """

    balance_tolerance: Decimal = Decimal("0.01")
    currency_places: int = 2
    capital_debit_normal: bool = True
    strict_classification: bool = False
    rollup_hierarchy: bool = False
    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    seed: int | None = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.balance_tolerance = to_money(self.balance_tolerance)
        if not self.balance_tolerance.is_finite() or self.balance_tolerance < 0:
            raise ConfigurationError("balance_tolerance must be a finite, non-negative amount")
        if self.currency_places < 0:
            raise ConfigurationError("currency_places must not be negative")

    @property
    def quantum(self) -> Decimal:
        """Smallest currency unit, e.g. ``Decimal("0.01")``."""
        return Decimal(1).scaleb(-self.currency_places)

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        import os

        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            acks=os.getenv("KAFKA_ACKS", "all"),
        )

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
            topic_prefix=os.getenv("TOPIC_PREFIX", "dev.ledger"),
        )

        tolerance_str = os.getenv("LEDGER_BALANCE_TOLERANCE", "0.01")
        try:
            tolerance = Decimal(tolerance_str)
        except InvalidOperation as exc:
            raise ConfigurationError(
                f"LEDGER_BALANCE_TOLERANCE is not a number: {tolerance_str!r}"
            ) from exc

        places_str = os.getenv("LEDGER_CURRENCY_PLACES", "2")
        if not places_str.isdigit():
            raise ConfigurationError(
                f"LEDGER_CURRENCY_PLACES must be a non-negative integer: {places_str!r}"
            )

        return cls(
            balance_tolerance=tolerance,
            currency_places=int(places_str),
            capital_debit_normal=_env_flag("LEDGER_CAPITAL_DEBIT_NORMAL", True),
            strict_classification=_env_flag("LEDGER_STRICT_CLASSIFICATION", False),
            rollup_hierarchy=_env_flag("LEDGER_ROLLUP_HIERARCHY", False),
            kafka=kafka,
            output=output,
            seed=int(os.getenv("SEED")) if os.getenv("SEED") else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def _env_flag(name: str, default: bool) -> bool:
    import os

    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")
