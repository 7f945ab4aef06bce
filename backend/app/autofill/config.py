"""
Autofill Configuration

Defaults for a fill session, with environment overrides.
"""

import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigError

ENV_PREFIX = "AUTOFILL_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env(name: str) -> Optional[str]:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _env_bool(name: str, default: bool) -> bool:
    value = _env(name)
    if value is None:
        return default
    return value.lower() in _TRUE_VALUES


def _env_number(name: str, default, cast):
    value = _env(name)
    if value is None:
        return default
    try:
        return cast(value)
    except ValueError as e:
        raise ConfigError(f"{ENV_PREFIX}{name} must be a number, got '{value}'") from e


@dataclass
class FillConfig:
    """Configuration for fill sessions"""
    # Seconds to block after a submit; negative disables the wait
    implicit_wait_seconds: float = 0.0
    always_wait_for_ajax: bool = False
    ajax_timeout_ms: int = 10000
    # StringKind value used when a text control falls back to generated data
    text_string_kind: str = "alphanumeric"
    faker_locale: str = "en_US"
    random_seed: Optional[int] = None
    # strftime pattern for date seeds; None means US short date (M/D/YYYY)
    short_date_format: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "FillConfig":
        """Build a config from defaults plus AUTOFILL_* environment variables"""
        defaults = cls()
        return cls(
            implicit_wait_seconds=_env_number("IMPLICIT_WAIT", defaults.implicit_wait_seconds, float),
            always_wait_for_ajax=_env_bool("WAIT_FOR_AJAX", defaults.always_wait_for_ajax),
            ajax_timeout_ms=_env_number("AJAX_TIMEOUT_MS", defaults.ajax_timeout_ms, int),
            text_string_kind=(_env("STRING_KIND") or defaults.text_string_kind).lower(),
            faker_locale=_env("LOCALE") or defaults.faker_locale,
            random_seed=_env_number("RANDOM_SEED", defaults.random_seed, int),
            short_date_format=_env("DATE_FORMAT") or defaults.short_date_format,
            log_level=(_env("LOG_LEVEL") or defaults.log_level).upper(),
        )
