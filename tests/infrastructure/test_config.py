"""Tests for settings loading and logging setup."""

import logging
from pathlib import Path

import pytest

from checkout.domain.exceptions import ValidationError
from checkout.domain.model.value_objects import Money
from checkout.infrastructure.config import DEFAULT_DATA_DIR, load_settings
from checkout.infrastructure.logging_setup import configure_logging

_VARS = ("CHECKOUT_DATA_DIR", "CHECKOUT_LOG_LEVEL", "CHECKOUT_PAYMENT_LIMIT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:

    def test_defaults(self):
        settings = load_settings()
        assert settings.data_dir == DEFAULT_DATA_DIR
        assert settings.log_level == logging.WARNING
        assert settings.payment_limit == Money.of("10000")

    def test_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CHECKOUT_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("CHECKOUT_LOG_LEVEL", "debug")
        monkeypatch.setenv("CHECKOUT_PAYMENT_LIMIT", "250.5")

        settings = load_settings()

        assert settings.data_dir == Path(tmp_path)
        assert settings.stock_file == Path(tmp_path) / "stock.json"
        assert settings.log_level == logging.DEBUG
        assert settings.payment_limit == Money.of("250.50")

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("CHECKOUT_LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError, match="CHECKOUT_LOG_LEVEL"):
            load_settings()

    def test_bad_payment_limit(self, monkeypatch):
        monkeypatch.setenv("CHECKOUT_PAYMENT_LIMIT", "-5")
        with pytest.raises(ValidationError, match="CHECKOUT_PAYMENT_LIMIT"):
            load_settings()


class TestConfigureLogging:

    def test_is_idempotent(self):
        logger = logging.getLogger("checkout")
        before = list(logger.handlers)
        try:
            configure_logging(logging.INFO)
            configure_logging(logging.INFO)
            added = [h for h in logger.handlers if h not in before]
            assert len(added) == 1
            assert logger.level == logging.INFO
        finally:
            for handler in logger.handlers[:]:
                if handler not in before:
                    logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)
