"""
Pytest configuration and shared fixtures for autofill tests.
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import Mock
from typing import Any, Dict, List, Optional

# Add backend app to path
sys.path.insert(0, str(Path(__file__).parent.parent / "app"))

from autofill.automation import AutomationLayer, SelectOption
from autofill.data_generator import RandomDataGenerator

FILLABLE_TAGS = {"input", "select", "textarea", "datalist"}
WRITE_OPERATIONS = {"clear", "send_keys", "click", "select_by_value", "select_by_text", "submit"}


# ==================== In-memory DOM ====================

class FakeControl:
    """A DOM element as seen through the automation layer"""

    def __init__(self, tag: str, checked: bool = False,
                 options: Optional[List[SelectOption]] = None,
                 children: Optional[List["FakeControl"]] = None,
                 **attributes: str):
        self.tag = tag
        self.attributes: Dict[str, str] = attributes
        self.checked = checked
        self.options = options or []
        self.children = children or []
        self.text = ""
        self.selected_value: Optional[str] = None

    def descendants(self):
        for child in self.children:
            yield child
            yield from child.descendants()

    def __repr__(self):
        label = self.attributes.get("id") or self.attributes.get("name") or ""
        return f"<{self.tag} {label}>"


class FakeAutomation(AutomationLayer):
    """Automation layer over FakeControl objects; records every call"""

    def __init__(self, page: Optional[Dict[str, List[FakeControl]]] = None):
        self.page = page or {}
        self.calls: List[tuple] = []

    def _record(self, operation: str, control: Any, argument: Any = None):
        self.calls.append((operation, control, argument))

    @property
    def writes(self) -> List[tuple]:
        return [c for c in self.calls if c[0] in WRITE_OPERATIONS]

    def writes_to(self, control: FakeControl) -> List[tuple]:
        return [c for c in self.writes if c[1] is control]

    def query(self, selector):
        self._record("query", None, selector)
        return list(self.page.get(selector, []))

    def find_descendants(self, root, selector):
        self._record("find_descendants", root, selector)
        return [d for d in root.descendants() if d.tag in FILLABLE_TAGS]

    def tag_name(self, control):
        self._record("tag_name", control)
        return control.tag

    def get_attribute(self, control, name):
        self._record("get_attribute", control, name)
        return control.attributes.get(name)

    def is_selected(self, control):
        self._record("is_selected", control)
        return control.checked

    def options(self, control):
        self._record("options", control)
        return list(control.options)

    def clear(self, control):
        self._record("clear", control)
        control.text = ""

    def send_keys(self, control, text):
        self._record("send_keys", control, text)
        control.text += text

    def click(self, control):
        self._record("click", control)
        if control.attributes.get("type") == "checkbox":
            control.checked = not control.checked
        else:
            control.checked = True

    def select_by_value(self, control, value):
        self._record("select_by_value", control, value)
        control.selected_value = value

    def select_by_text(self, control, text):
        self._record("select_by_text", control, text)
        control.selected_value = next(o.value for o in control.options if o.text == text)

    def submit(self, control):
        self._record("submit", control)

    def wait_for_ajax(self, timeout_ms):
        self._record("wait_for_ajax", None, timeout_ms)


# ==================== Fixtures ====================

@pytest.fixture
def automation():
    """Empty in-memory automation layer."""
    return FakeAutomation()


@pytest.fixture
def make_control():
    """Factory for fake DOM elements."""
    return FakeControl


@pytest.fixture
def generator():
    """Scripted generator: first item, fixed string, True."""
    gen = Mock(spec=RandomDataGenerator)
    gen.pick_one = Mock(side_effect=lambda items: next(iter(list(items)), None))
    gen.generate_string = Mock(return_value="generated")
    gen.generate_bool = Mock(return_value=True)
    return gen


@pytest.fixture
def mock_page():
    """Create a mock Playwright page object."""
    page = Mock()
    page.url = "https://example.com/form"

    mock_locator = Mock()
    mock_locator.all = Mock(return_value=[mock_locator])
    mock_locator.locator = Mock(return_value=mock_locator)
    mock_locator.evaluate = Mock(return_value="input")
    mock_locator.get_attribute = Mock(return_value="text")
    mock_locator.is_checked = Mock(return_value=False)
    mock_locator.clear = Mock()
    mock_locator.press_sequentially = Mock()
    mock_locator.click = Mock()
    mock_locator.select_option = Mock()

    page.locator = Mock(return_value=mock_locator)
    page.wait_for_load_state = Mock()

    return page


@pytest.fixture
def make_automation():
    """Factory for automation layers over a {selector: [elements]} page."""
    return FakeAutomation
