"""
Control Applicator

Applies resolved values to controls through the automation layer. Each
method writes to a control at most once.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Sequence

from .automation import VALUE_ATTRIBUTE, AutomationLayer, SelectOption
from .controls import Control
from .data_generator import RandomDataGenerator
from .resolver import ValueResolver

logger = logging.getLogger(__name__)


@dataclass
class FillSummary:
    """What a fill session did, for reporting only"""
    text_filled: int = 0
    selects_set: int = 0
    selects_unset: int = 0
    checkboxes_clicked: int = 0
    checkboxes_unchanged: int = 0
    radio_groups_resolved: int = 0
    radio_groups_unset: int = 0
    skipped: int = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


def match_option(options: Sequence[SelectOption], value: str) -> Optional[SelectOption]:
    """Option whose value equals the string, else the first whose text does"""
    for option in options:
        if option.value == value:
            return option
    for option in options:
        if option.text == value:
            return option
    return None


class ControlApplicator:
    """Executes fill decisions against controls"""

    def __init__(
        self,
        automation: AutomationLayer,
        resolver: ValueResolver,
        generator: RandomDataGenerator,
        summary: Optional[FillSummary] = None
    ):
        self.automation = automation
        self.resolver = resolver
        self.generator = generator
        self.summary = summary or FillSummary()

    def apply_text(self, control: Control) -> None:
        """Clear the control, then type the resolved value"""
        decision = self.resolver.resolve_text(control.element)
        self.automation.clear(control.element)
        self.automation.send_keys(control.element, decision.value)
        self.summary.text_filled += 1

    def apply_checkbox(self, control: Control) -> None:
        """Click only when the current checked state differs from the resolved one"""
        decision = self.resolver.resolve_checkbox(control.element)
        if self.automation.is_selected(control.element) != decision.value:
            self.automation.click(control.element)
            self.summary.checkboxes_clicked += 1
        else:
            self.summary.checkboxes_unchanged += 1

    def apply_select(self, control: Control) -> None:
        """
        Select the option matching the seed (value first, then text);
        otherwise a random option that has a non-empty value.
        """
        element = control.element
        options = self.automation.options(element)
        value = self.resolver.resolve_select(element)

        if value is not None:
            option = match_option(options, value)
            if option is not None:
                if option.value == value:
                    self.automation.select_by_value(element, value)
                else:
                    self.automation.select_by_text(element, value)
                self.summary.selects_set += 1
                return
            logger.debug("No option matches '%s', picking one at random", value)

        candidates = [option for option in options if option.value]
        picked = self.generator.pick_one(candidates)
        if picked is None:
            logger.debug("Select has no option with a value; leaving it unchanged")
            self.summary.selects_unset += 1
            return

        self.automation.select_by_value(element, picked.value)
        self.summary.selects_set += 1

    def resolve_radio_group(self, name: str, members: Sequence[Any]) -> None:
        """
        Click one radio of the group: the first whose value matches the
        seed, otherwise one picked by the generator.
        """
        value = self.resolver.resolve_radio_group(name)
        if value is not None:
            for member in members:
                if self.automation.get_attribute(member, VALUE_ATTRIBUTE) == value:
                    self.automation.click(member)
                    self.summary.radio_groups_resolved += 1
                    logger.debug("Radio group '%s' matched seed value '%s'", name, value)
                    return

        picked = self.generator.pick_one(members)
        if picked is None:
            logger.debug("Radio group '%s' left without a selection", name)
            self.summary.radio_groups_unset += 1
            return

        self.automation.click(picked)
        self.summary.radio_groups_resolved += 1
