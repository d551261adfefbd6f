"""Tests for config and logging."""

import json
import logging
import os
import sys
from decimal import Decimal
from pathlib import Path
from unittest.mock import patch

import pytest

from ledger_engine.config import KafkaConfig, LedgerConfig, OutputConfig
from ledger_engine.engine.policy import LEGACY_POLICY, STANDARD_POLICY, policy_for
from ledger_engine.exceptions import ConfigurationError
from ledger_engine.logging import JsonFormatter, TextFormatter, get_logger, setup_logging
from ledger_engine.models.enums import ValidationErrorKind


class TestKafkaConfig:
    """Tests for KafkaConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = KafkaConfig()

        assert config.bootstrap_servers == "localhost:9092"
        assert config.acks == "all"
        assert config.batch_size == 16384
        assert config.linger_ms == 5
        assert config.compression == "snappy"
        assert config.retries == 3

    def test_to_dict(self) -> None:
        """Test conversion to confluent-kafka config dict."""
        result = KafkaConfig(bootstrap_servers="kafka:9092", acks="1").to_dict()

        assert result["bootstrap.servers"] == "kafka:9092"
        assert result["acks"] == "1"
        assert result["batch.size"] == 16384
        assert result["linger.ms"] == 5
        assert result["compression.type"] == "snappy"
        assert result["retries"] == 3


class TestOutputConfig:
    """Tests for OutputConfig."""

    def test_default_values(self) -> None:
        config = OutputConfig()

        assert config.json_output_dir == Path("output")
        assert config.pretty_json is False
        assert config.topic_prefix == "dev.ledger"


class TestLedgerConfig:
    """Tests for LedgerConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        config = LedgerConfig()

        assert config.balance_tolerance == Decimal("0.01")
        assert config.currency_places == 2
        assert config.capital_debit_normal is True
        assert config.strict_classification is False
        assert config.rollup_hierarchy is False
        assert config.seed is None
        assert config.log_level == "INFO"

    def test_quantum(self) -> None:
        assert LedgerConfig().quantum == Decimal("0.01")
        assert LedgerConfig(currency_places=3).quantum == Decimal("0.001")
        assert LedgerConfig(currency_places=0).quantum == Decimal("1")

    def test_negative_tolerance_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            LedgerConfig(balance_tolerance=Decimal("-0.01"))

    @pytest.mark.parametrize("tolerance", ["NaN", "Infinity"])
    def test_non_finite_tolerance_rejected(self, tolerance: str) -> None:
        with pytest.raises(ConfigurationError):
            LedgerConfig(balance_tolerance=Decimal(tolerance))

    def test_float_tolerance_converted(self) -> None:
        assert LedgerConfig(balance_tolerance=0.05).balance_tolerance == Decimal("0.05")

    def test_negative_places_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            LedgerConfig(currency_places=-1)

    def test_from_env_default(self) -> None:
        """Test creating config from an empty environment."""
        with patch.dict(os.environ, {}, clear=True):
            config = LedgerConfig.from_env()

        assert config.kafka.bootstrap_servers == "localhost:9092"
        assert config.kafka.acks == "all"
        assert config.output.json_output_dir == Path("output")
        assert config.balance_tolerance == Decimal("0.01")
        assert config.capital_debit_normal is True
        assert config.seed is None
        assert config.log_level == "INFO"

    def test_from_env_custom(self) -> None:
        """Test creating config from custom environment variables."""
        env = {
            "KAFKA_BOOTSTRAP_SERVERS": "kafka-cluster:9092",
            "KAFKA_ACKS": "1",
            "OUTPUT_DIR": "/data/ledger",
            "PRETTY_JSON": "true",
            "TOPIC_PREFIX": "prod.ledger",
            "LEDGER_BALANCE_TOLERANCE": "0.005",
            "LEDGER_CURRENCY_PLACES": "3",
            "LEDGER_CAPITAL_DEBIT_NORMAL": "false",
            "LEDGER_STRICT_CLASSIFICATION": "yes",
            "LEDGER_ROLLUP_HIERARCHY": "1",
            "SEED": "42",
            "LOG_LEVEL": "DEBUG",
        }
        with patch.dict(os.environ, env, clear=True):
            config = LedgerConfig.from_env()

        assert config.kafka.bootstrap_servers == "kafka-cluster:9092"
        assert config.kafka.acks == "1"
        assert config.output.json_output_dir == Path("/data/ledger")
        assert config.output.pretty_json is True
        assert config.output.topic_prefix == "prod.ledger"
        assert config.balance_tolerance == Decimal("0.005")
        assert config.currency_places == 3
        assert config.capital_debit_normal is False
        assert config.strict_classification is True
        assert config.rollup_hierarchy is True
        assert config.seed == 42
        assert config.log_level == "DEBUG"

    def test_from_env_invalid_tolerance(self) -> None:
        with patch.dict(os.environ, {"LEDGER_BALANCE_TOLERANCE": "a lot"}, clear=True):
            with pytest.raises(ConfigurationError, match="LEDGER_BALANCE_TOLERANCE"):
                LedgerConfig.from_env()

    def test_from_env_invalid_places(self) -> None:
        with patch.dict(os.environ, {"LEDGER_CURRENCY_PLACES": "-2"}, clear=True):
            with pytest.raises(ConfigurationError, match="LEDGER_CURRENCY_PLACES"):
                LedgerConfig.from_env()

    def test_policy_selection(self) -> None:
        """Capital flag selects the normal-balance policy."""
        assert policy_for(LedgerConfig()) is LEGACY_POLICY
        assert policy_for(LedgerConfig(capital_debit_normal=False)) is STANDARD_POLICY


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self) -> None:
        """Test default logging setup."""
        setup_logging()

        assert logging.getLogger("ledger_engine").level == logging.INFO

    def test_setup_logging_debug(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_invalid_level(self) -> None:
        """Test logging with invalid level defaults to INFO."""
        setup_logging(level="INVALID")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_json_format(self) -> None:
        """Test JSON format logging."""
        setup_logging(format_type="json")

        logger = logging.getLogger()
        assert any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers)

    def test_setup_logging_standard_format(self) -> None:
        setup_logging()

        logger = logging.getLogger()
        assert any(isinstance(h.formatter, TextFormatter) for h in logger.handlers)

    def test_setup_logging_unknown_format(self) -> None:
        with pytest.raises(ConfigurationError):
            setup_logging(format_type="xml")

    def test_setup_logging_replaces_handlers(self) -> None:
        """Test that setup_logging replaces existing handlers."""
        logger = logging.getLogger()
        logger.addHandler(logging.StreamHandler())
        logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(logger.handlers) == 1

    def test_external_loggers_quieted(self) -> None:
        """Test that external library loggers are quieted."""
        setup_logging(level="DEBUG")

        assert logging.getLogger("confluent_kafka").level == logging.WARNING
        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, **kwargs) -> logging.LogRecord:
        defaults = dict(
            name="test.logger",
            level=logging.INFO,
            pathname="/path/to/file.py",
            lineno=42,
            msg="Test message",
            args=(),
            exc_info=None,
        )
        defaults.update(kwargs)
        return logging.LogRecord(**defaults)

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "Test message"
        assert "timestamp" in data

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(
            JsonFormatter().format(self._record(level=logging.ERROR, exc_info=exc_info))
        )

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_format_with_ledger_context(self) -> None:
        """Ledger fields become top-level keys and amounts stay exact."""
        record = self._record()
        record.journal_id = 7
        record.amount = Decimal("12.50")
        record.reason = ValidationErrorKind.UNBALANCED

        data = json.loads(JsonFormatter().format(record))

        assert data["journal_id"] == 7
        assert data["amount"] == "12.50"
        assert data["reason"] == ValidationErrorKind.UNBALANCED.value
        assert "bank_line_id" not in data


class TestTextFormatter:
    """Tests for TextFormatter."""

    def _record(self) -> logging.LogRecord:
        return logging.LogRecord(
            name="ledger_engine.store.ledger",
            level=logging.INFO,
            pathname="/path/to/file.py",
            lineno=10,
            msg="Matched bank line %d",
            args=(4,),
            exc_info=None,
        )

    def test_plain_message(self) -> None:
        line = TextFormatter().format(self._record())

        assert line.endswith("| INFO     | ledger_engine.store.ledger | Matched bank line 4")

    def test_context_appended(self) -> None:
        record = self._record()
        record.bank_line_id = 4
        record.entry_id = 19
        record.amount = Decimal("-75.25")

        line = TextFormatter().format(record)

        assert line.endswith("Matched bank line 4 | entry_id=19 bank_line_id=4 amount=-75.25")


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger(self) -> None:
        logger = get_logger("test.module")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"

    def test_get_logger_same_instance(self) -> None:
        assert get_logger("test.same") is get_logger("test.same")


class TestPackageInit:
    """Tests for ledger_engine __init__.py."""

    def test_version_exported(self) -> None:
        from ledger_engine import __version__

        assert isinstance(__version__, str)

    def test_entry_points_exported(self) -> None:
        import ledger_engine

        for name in (
            "build_hierarchy",
            "compute_balance",
            "compute_running_balance",
            "validate_journal",
            "build_balance_sheet",
            "match_transactions",
        ):
            assert callable(getattr(ledger_engine, name))
