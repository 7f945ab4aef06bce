"""
Automation Layer Contract

The autofill engine never talks to a browser directly. Everything it needs
from the page goes through an AutomationLayer, so the decision logic can run
against a real browser binding or an in-memory fake.

Errors raised by an implementation are propagated by the engine unchanged.
"""

from dataclasses import dataclass
from typing import Any, Hashable, List, Optional

# Tags the engine knows how to fill
FILLABLE_SELECTOR = "input, select, textarea, datalist"

VALUE_ATTRIBUTE = "value"
TYPE_ATTRIBUTE = "type"


@dataclass(frozen=True)
class SelectOption:
    """One <option> of a select control"""
    value: Optional[str]
    text: str


class AutomationLayer:
    """
    Operations the autofill engine performs on a page.

    A control is whatever handle the implementation uses for an element
    (a Playwright Locator, a fake object in tests, ...).
    """

    # ==================== Discovery ====================

    def query(self, selector: str) -> List[Any]:
        """Find all controls on the page matching a CSS selector"""
        raise NotImplementedError

    def find_descendants(self, root: Any, selector: str) -> List[Any]:
        """Find all descendants of root matching a CSS selector, in document order"""
        raise NotImplementedError

    def tag_name(self, control: Any) -> str:
        """Lower-case tag name of the control"""
        raise NotImplementedError

    def get_attribute(self, control: Any, name: str) -> Optional[str]:
        raise NotImplementedError

    def element_key(self, control: Any) -> Hashable:
        """Key that is equal for two handles to the same DOM element"""
        return control

    # ==================== State ====================

    def is_selected(self, control: Any) -> bool:
        """Checked state of a checkbox/radio"""
        raise NotImplementedError

    def options(self, control: Any) -> List[SelectOption]:
        """Options of a select control, in document order"""
        raise NotImplementedError

    # ==================== Actions ====================

    def clear(self, control: Any) -> None:
        raise NotImplementedError

    def send_keys(self, control: Any, text: str) -> None:
        raise NotImplementedError

    def click(self, control: Any) -> None:
        raise NotImplementedError

    def select_by_value(self, control: Any, value: str) -> None:
        raise NotImplementedError

    def select_by_text(self, control: Any, text: str) -> None:
        raise NotImplementedError

    def submit(self, control: Any) -> None:
        """Submit the form that owns the control"""
        raise NotImplementedError

    def wait_for_ajax(self, timeout_ms: int) -> None:
        """Block until outstanding background requests have finished"""
        raise NotImplementedError
