"""
Then-Submit Continuation

Returned by every autofill call. It is anchored on the first element that was
filled and can submit the form that element belongs to.
"""

import logging
import time
from typing import TYPE_CHECKING, Any, Optional

from .automation import AutomationLayer
from .config import FillConfig

if TYPE_CHECKING:
    from .applicator import FillSummary

logger = logging.getLogger(__name__)


def wait_after_action(automation: AutomationLayer, config: FillConfig) -> None:
    """Implicit wait, then an optional wait for background requests"""
    if config.implicit_wait_seconds > 0:
        time.sleep(config.implicit_wait_seconds)
    if config.always_wait_for_ajax:
        automation.wait_for_ajax(config.ajax_timeout_ms)


class ThenSubmit:
    """Continuation of an autofill call"""

    def __init__(
        self,
        automation: AutomationLayer,
        anchor: Any,
        config: FillConfig,
        summary: "FillSummary",
        owner: Optional[Any] = None
    ):
        self.automation = automation
        self.anchor = anchor
        self.config = config
        self.summary = summary
        self.owner = owner

    def then_submit(self) -> Any:
        """Submit the anchor's form and return the object that started the fill"""
        logger.info("Submitting autofilled form")
        self.automation.submit(self.anchor)
        wait_after_action(self.automation, self.config)
        return self.owner
