"""
Form Filler

Entry point for tests: fill a form from a selector or a list of elements,
optionally seeded, then submit it.

    filler = FormFiller(PlaywrightAutomation(page))
    filler.auto_fill("#signup", {"email": "jane@example.com"}).then_submit()
"""

import logging
from typing import Any, List, Optional, Sequence, Union

from .automation import AutomationLayer
from .config import FillConfig
from .data_generator import RandomDataGenerator, StringKind, create_generator
from .engine import auto_fill
from .errors import UsageError
from .lookup import AttributeLookup, SeedLookup
from .submit import ThenSubmit

logger = logging.getLogger(__name__)

Target = Union[str, Sequence[Any]]


class FormFiller:
    """Fills forms through an automation layer"""

    def __init__(
        self,
        automation: AutomationLayer,
        generator: Optional[RandomDataGenerator] = None,
        lookup: Optional[SeedLookup] = None,
        config: Optional[FillConfig] = None
    ):
        self.automation = automation
        self.config = config or FillConfig()
        self.generator = generator or create_generator(self.config.faker_locale, self.config.random_seed)
        self.lookup = lookup or AttributeLookup()

    def auto_fill(self, target: Target, seed: Any = None) -> ThenSubmit:
        """
        Fill every control in target.

        Args:
            target: CSS selector, or the elements/containers to fill
            seed: scalar applied to every control, or an object queried by
                  control id/name; None fills everything with generated data

        Returns:
            ThenSubmit anchored on the first element
        """
        elements = self._elements_for(target)
        return auto_fill(
            self.automation,
            elements,
            seed,
            generator=self.generator,
            lookup=self.lookup,
            config=self.config,
            owner=self
        )

    def auto_fill_as(
        self,
        target: Target,
        kind: Union[StringKind, str] = StringKind.ALPHANUMERIC,
        request_name: Optional[str] = None
    ) -> ThenSubmit:
        """Generate one value of the given kind and fill every control with it"""
        elements = self._elements_for(target)
        value = self.generator.generate_string(request_name, StringKind(kind))
        logger.debug("Filling as %s with generated value", StringKind(kind).value)
        return self.auto_fill(elements, value)

    def _elements_for(self, target: Target) -> List[Any]:
        if isinstance(target, str):
            elements = list(self.automation.query(target))
            if not elements:
                raise UsageError(f"Selector '{target}' matched no elements")
            return elements

        elements = list(target)
        if not elements:
            raise UsageError("No elements to autofill")
        return elements
