"""
Playwright Automation Binding

Implements the AutomationLayer contract with Playwright's synchronous API.
Controls are Locator objects; each one resolves to a single element.
"""

import logging
from typing import List, Optional

from playwright.sync_api import Locator, Page

from .automation import AutomationLayer, SelectOption

logger = logging.getLogger(__name__)

# Option value follows DOM semantics: an option without a value attribute reports its text
_OPTIONS_SCRIPT = "el => Array.from(el.options).map(o => ({value: o.value, text: o.text}))"

# Tags the element with a per-page sequence number the first time it is seen
_ELEMENT_KEY_SCRIPT = """
el => {
    if (el.__autofillKey === undefined) {
        window.__autofillSeq = (window.__autofillSeq || 0) + 1;
        el.__autofillKey = window.__autofillSeq;
    }
    return el.__autofillKey;
}
"""

_SUBMIT_SCRIPT = """
el => {
    const form = el.form || el.closest('form');
    if (!form) {
        throw new Error('element is not inside a form');
    }
    if (form.requestSubmit) {
        form.requestSubmit();
    } else {
        form.submit();
    }
}
"""


class PlaywrightAutomation(AutomationLayer):
    """Automation layer backed by a Playwright Page"""

    def __init__(self, page: Page):
        self.page = page

    def query(self, selector: str) -> List[Locator]:
        return self.page.locator(selector).all()

    def find_descendants(self, root: Locator, selector: str) -> List[Locator]:
        return root.locator(selector).all()

    def tag_name(self, control: Locator) -> str:
        return control.evaluate("el => el.tagName.toLowerCase()")

    def get_attribute(self, control: Locator, name: str) -> Optional[str]:
        return control.get_attribute(name)

    def element_key(self, control: Locator) -> int:
        return control.evaluate(_ELEMENT_KEY_SCRIPT)

    def is_selected(self, control: Locator) -> bool:
        return control.is_checked()

    def options(self, control: Locator) -> List[SelectOption]:
        raw = control.evaluate(_OPTIONS_SCRIPT)
        return [SelectOption(value=o.get("value"), text=o.get("text") or "") for o in raw]

    def clear(self, control: Locator) -> None:
        control.clear()

    def send_keys(self, control: Locator, text: str) -> None:
        control.press_sequentially(text)

    def click(self, control: Locator) -> None:
        control.click()

    def select_by_value(self, control: Locator, value: str) -> None:
        control.select_option(value=value)

    def select_by_text(self, control: Locator, text: str) -> None:
        control.select_option(label=text)

    def submit(self, control: Locator) -> None:
        logger.debug("Submitting form owning %s", control)
        control.evaluate(_SUBMIT_SCRIPT)

    def wait_for_ajax(self, timeout_ms: int) -> None:
        self.page.wait_for_load_state("networkidle", timeout=timeout_ms)
