"""
Radio Group Aggregation

Radio buttons are not filled while the form is being walked. They are
collected by name first and only resolved once every member of every group
is known.
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Tuple

from .automation import AutomationLayer
from .controls import Control, ControlKind

logger = logging.getLogger(__name__)


class AggregatorPhase(Enum):
    COLLECTING = "collecting"
    FINALIZED = "finalized"


class RadioGroupAggregator:
    """Collects same-name radio controls; read-only once finalized"""

    def __init__(self, automation: AutomationLayer):
        self.automation = automation
        self.phase = AggregatorPhase.COLLECTING
        self._groups: Dict[str, List[Any]] = {}

    def add(self, control: Control) -> bool:
        """
        Add a radio control to the group named by its name attribute.

        Returns False when the radio has no name; such controls cannot be
        grouped and are left alone.
        """
        if self.phase is not AggregatorPhase.COLLECTING:
            raise RuntimeError("Radio groups are finalized; no more members can be added")
        if control.kind is not ControlKind.RADIO:
            raise ValueError(f"Expected a radio control, got {control.kind.value}")

        name = self.automation.get_attribute(control.element, "name")
        if not name:
            logger.debug("Skipping radio without a name")
            return False

        self._groups.setdefault(name, []).append(control.element)
        return True

    def finalize(self) -> Tuple[Tuple[str, Tuple[Any, ...]], ...]:
        """Close collection and return the groups in first-seen order"""
        self.phase = AggregatorPhase.FINALIZED
        return tuple((name, tuple(members)) for name, members in self._groups.items())

    def __len__(self) -> int:
        return len(self._groups)
