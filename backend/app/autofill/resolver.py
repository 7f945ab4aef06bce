"""
Value Resolver

Resolves the value a control should receive, from one of three sources:
1. The simple seed itself (same value for every control)
2. The structured seed, looked up by the control's id/name
3. The random data generator, when the seed has nothing for the control
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .automation import AutomationLayer
from .config import FillConfig
from .data_generator import RandomDataGenerator, StringKind
from .errors import ConfigError
from .lookup import SeedLookup
from .seed import SeedMode, classify_seed, coerce_to_string

logger = logging.getLogger(__name__)


class ValueSource(Enum):
    """Where a resolved value came from"""
    SEED_SIMPLE = "seed_simple"
    SEED_LOOKUP = "seed_lookup"
    GENERATED = "generated"


@dataclass(frozen=True)
class FillDecision:
    """Value to apply to one control (str, or bool for checkboxes)"""
    value: Any
    source: ValueSource


def _preview(value: Any, limit: int = 40) -> str:
    text = str(value)
    return text if len(text) <= limit else text[:limit] + "..."


class ValueResolver:
    """
    Resolves fill values for the controls of one fill session.

    The seed mode is classified once here and reused for every control.
    """

    def __init__(
        self,
        seed: Any,
        automation: AutomationLayer,
        lookup: SeedLookup,
        generator: RandomDataGenerator,
        config: Optional[FillConfig] = None
    ):
        self.seed = seed
        self.automation = automation
        self.seed_lookup = lookup
        self.generator = generator
        self.config = config or FillConfig()
        self.mode = classify_seed(seed)

        try:
            self.text_kind = StringKind(self.config.text_string_kind)
        except ValueError as e:
            raise ConfigError(f"Unknown string kind '{self.config.text_string_kind}'") from e

    @property
    def is_simple(self) -> bool:
        return self.mode is SeedMode.SIMPLE

    # ==================== Keys & coercion ====================

    def key_for(self, element: Any) -> Optional[str]:
        """id when it is non-empty, otherwise name; None when neither is set"""
        element_id = self.automation.get_attribute(element, "id")
        if element_id:
            return element_id
        name = self.automation.get_attribute(element, "name")
        return name or None

    def coerce(self, value: Any) -> str:
        return coerce_to_string(value, self.seed, self.config.short_date_format)

    def lookup(self, key: Optional[str]) -> Any:
        """Raw structured lookup; None means the seed has no value for the key"""
        if not key:
            return None
        return self.seed_lookup.lookup(self.seed, None, key)

    def resolve(self, key: Optional[str]) -> Optional[str]:
        """
        Seed-derived string for a key.

        A simple seed ignores the key. None tells the caller to fall back to
        generated data.
        """
        if self.is_simple:
            return self.coerce(self.seed)

        value = self.lookup(key)
        if value is None:
            return None
        return self.coerce(value)

    # ==================== Per control kind ====================

    def resolve_text(self, element: Any) -> FillDecision:
        if self.is_simple:
            decision = FillDecision(self.coerce(self.seed), ValueSource.SEED_SIMPLE)
        else:
            key = self.key_for(element)
            value = self.resolve(key)
            if value is not None:
                decision = FillDecision(value, ValueSource.SEED_LOOKUP)
            else:
                generated = self.generator.generate_string(key, self.text_kind)
                decision = FillDecision(self.coerce(generated), ValueSource.GENERATED)

        logger.debug("Text value '%s' (%s)", _preview(decision.value), decision.source.value)
        return decision

    def resolve_checkbox(self, element: Any) -> FillDecision:
        """
        Checked state for a checkbox.

        Only "true"/"false" (any case) from the seed count; anything else
        falls through to a random boolean. The lookup runs against the seed
        whatever its mode, so a scalar seed never decides a checkbox.
        """
        raw = self.lookup(self.key_for(element))
        if raw is not None:
            text = str(raw).lower()
            if text == "true":
                return FillDecision(True, ValueSource.SEED_LOOKUP)
            if text == "false":
                return FillDecision(False, ValueSource.SEED_LOOKUP)

        return FillDecision(self.generator.generate_bool(), ValueSource.GENERATED)

    def resolve_select(self, element: Any) -> Optional[str]:
        """
        Seed value to match against a select's options.

        A simple seed never picks an option; the caller goes straight to a
        random option.
        """
        if self.is_simple:
            return None
        return self.resolve(self.key_for(element))

    def resolve_radio_group(self, group_name: str) -> Optional[str]:
        """Seed value to match against the value attribute of a group's radios"""
        if self.is_simple:
            value = self.coerce(self.seed)
        else:
            value = self.resolve(group_name)
        return value or None
