"""
Fill Session Orchestrator

Drives one autofill pass over a collection of elements:

    START -> DISCOVERING -> APPLYING -> RESOLVING_RADIOS -> DONE

Discovery classifies every element (expanding containers) and collects radio
groups. Leaf controls are then filled in discovery order, and radio groups are
resolved last, once their membership is complete. Any error raised by the
automation layer aborts the pass as is; nothing is retried.
"""

import logging
from enum import Enum
from typing import Any, List, Optional, Sequence

from .applicator import ControlApplicator, FillSummary
from .automation import AutomationLayer
from .config import FillConfig
from .controls import Control, ControlKind, discover
from .data_generator import RandomDataGenerator, create_generator
from .errors import UsageError
from .lookup import AttributeLookup, SeedLookup
from .radio_groups import RadioGroupAggregator
from .resolver import ValueResolver
from .submit import ThenSubmit

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """Phase of a fill session"""
    START = "start"
    DISCOVERING = "discovering"
    APPLYING = "applying"
    RESOLVING_RADIOS = "resolving_radios"
    DONE = "done"


class FillSession:
    """One autofill pass; not reusable once DONE"""

    def __init__(
        self,
        automation: AutomationLayer,
        seed: Any = None,
        generator: Optional[RandomDataGenerator] = None,
        lookup: Optional[SeedLookup] = None,
        config: Optional[FillConfig] = None
    ):
        self.automation = automation
        self.config = config or FillConfig()
        self.generator = generator or create_generator(self.config.faker_locale, self.config.random_seed)
        self.resolver = ValueResolver(
            seed,
            automation=automation,
            lookup=lookup or AttributeLookup(),
            generator=self.generator,
            config=self.config
        )
        self.summary = FillSummary()
        self.applicator = ControlApplicator(automation, self.resolver, self.generator, self.summary)
        self.radio_groups = RadioGroupAggregator(automation)
        self.state = SessionState.START

    def run(self, elements: Sequence[Any]) -> FillSummary:
        if self.state is not SessionState.START:
            raise RuntimeError(f"Fill session already ran (state: {self.state.value})")
        if not elements:
            raise UsageError("No elements to autofill")

        logger.info("Autofilling %d element(s) with %s seed", len(elements), self.resolver.mode.value)

        self.state = SessionState.DISCOVERING
        leaves = self._discover(elements)
        groups = self.radio_groups.finalize()

        self.state = SessionState.APPLYING
        for control in leaves:
            self._apply(control)

        self.state = SessionState.RESOLVING_RADIOS
        for name, members in groups:
            self.applicator.resolve_radio_group(name, members)

        self.state = SessionState.DONE
        logger.info("Autofill complete: %s", self.summary.to_dict())
        return self.summary

    def _discover(self, elements: Sequence[Any]) -> List[Control]:
        """Leaf controls to fill, in order; radios go to their groups instead"""
        leaves: List[Control] = []
        for control in discover(self.automation, elements):
            logger.debug("Discovered <%s> as %s", control.tag, control.kind.value)
            if control.kind is ControlKind.RADIO:
                if not self.radio_groups.add(control):
                    self.summary.skipped += 1
            elif control.kind is ControlKind.IGNORED:
                self.summary.skipped += 1
            else:
                leaves.append(control)
        return leaves

    def _apply(self, control: Control) -> None:
        if control.kind is ControlKind.SELECT:
            self.applicator.apply_select(control)
        elif control.kind is ControlKind.CHECKBOX:
            self.applicator.apply_checkbox(control)
        elif control.kind is ControlKind.TEXT:
            self.applicator.apply_text(control)


def auto_fill(
    automation: AutomationLayer,
    elements: Sequence[Any],
    seed: Any = None,
    generator: Optional[RandomDataGenerator] = None,
    lookup: Optional[SeedLookup] = None,
    config: Optional[FillConfig] = None,
    owner: Any = None
) -> ThenSubmit:
    """
    Fill the given elements and return a continuation anchored on the first one.

    Raises UsageError before touching the page when there are no elements.
    """
    elements = list(elements)
    if not elements:
        raise UsageError("No elements to autofill")

    session = FillSession(automation, seed, generator=generator, lookup=lookup, config=config)
    summary = session.run(elements)
    return ThenSubmit(automation, elements[0], session.config, summary, owner=owner)
