"""
Unit tests for FillConfig environment overrides.
"""

import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "app"))

from autofill.config import FillConfig
from autofill.errors import ConfigError

ENV_VARS = [
    "AUTOFILL_IMPLICIT_WAIT", "AUTOFILL_WAIT_FOR_AJAX", "AUTOFILL_AJAX_TIMEOUT_MS",
    "AUTOFILL_STRING_KIND", "AUTOFILL_LOCALE", "AUTOFILL_RANDOM_SEED",
    "AUTOFILL_DATE_FORMAT", "AUTOFILL_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestFromEnv:
    """Test building config from the environment."""

    def test_defaults(self):
        """Test an empty environment gives the dataclass defaults."""
        assert FillConfig.from_env() == FillConfig()

    def test_overrides(self, monkeypatch):
        """Test every variable is read."""
        monkeypatch.setenv("AUTOFILL_IMPLICIT_WAIT", "1.5")
        monkeypatch.setenv("AUTOFILL_WAIT_FOR_AJAX", "yes")
        monkeypatch.setenv("AUTOFILL_AJAX_TIMEOUT_MS", "3000")
        monkeypatch.setenv("AUTOFILL_STRING_KIND", "Contextual")
        monkeypatch.setenv("AUTOFILL_LOCALE", "de_DE")
        monkeypatch.setenv("AUTOFILL_RANDOM_SEED", "42")
        monkeypatch.setenv("AUTOFILL_DATE_FORMAT", "%d.%m.%Y")
        monkeypatch.setenv("AUTOFILL_LOG_LEVEL", "debug")

        config = FillConfig.from_env()

        assert config.implicit_wait_seconds == 1.5
        assert config.always_wait_for_ajax is True
        assert config.ajax_timeout_ms == 3000
        assert config.text_string_kind == "contextual"
        assert config.faker_locale == "de_DE"
        assert config.random_seed == 42
        assert config.short_date_format == "%d.%m.%Y"
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("raw,expected", [
        ("1", True), ("true", True), ("ON", True), ("0", False), ("no", False),
    ])
    def test_booleans(self, monkeypatch, raw, expected):
        """Test accepted spellings of booleans."""
        monkeypatch.setenv("AUTOFILL_WAIT_FOR_AJAX", raw)
        assert FillConfig.from_env().always_wait_for_ajax is expected

    def test_blank_value_uses_default(self, monkeypatch):
        """Test whitespace-only values are ignored."""
        monkeypatch.setenv("AUTOFILL_AJAX_TIMEOUT_MS", "  ")
        assert FillConfig.from_env().ajax_timeout_ms == 10000

    def test_bad_number(self, monkeypatch):
        """Test non-numeric values are rejected."""
        monkeypatch.setenv("AUTOFILL_RANDOM_SEED", "abc")
        with pytest.raises(ConfigError, match="AUTOFILL_RANDOM_SEED"):
            FillConfig.from_env()
