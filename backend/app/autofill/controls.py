"""
Element Classification & Routing

Every element handed to a fill session is classified once into a
ControlKind. Leaf controls are filled directly; anything else is treated as a
container and expanded into its fillable descendants.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Hashable, Iterable, Iterator, Optional, Set

from .automation import FILLABLE_SELECTOR, TYPE_ATTRIBUTE, AutomationLayer

logger = logging.getLogger(__name__)

TEXT_LIKE_TAGS = {"input", "textarea", "datalist"}
IGNORED_INPUT_TYPES = {"hidden", "submit"}


class ControlKind(Enum):
    """What the engine does with an element"""
    SELECT = "select"
    TEXT = "text"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    IGNORED = "ignored"
    CONTAINER = "container"


@dataclass(frozen=True)
class Control:
    """An element together with the kind it was classified as"""
    element: Any
    kind: ControlKind
    tag: str
    input_type: Optional[str] = None

    @property
    def is_leaf(self) -> bool:
        return self.kind is not ControlKind.CONTAINER


def classify(automation: AutomationLayer, element: Any) -> Control:
    """Decide the ControlKind of an element from its tag and type attribute"""
    tag = (automation.tag_name(element) or "").lower()

    if tag == "select":
        return Control(element, ControlKind.SELECT, tag)

    if tag not in TEXT_LIKE_TAGS:
        return Control(element, ControlKind.CONTAINER, tag)

    input_type = (automation.get_attribute(element, TYPE_ATTRIBUTE) or "").lower() or None

    if input_type == "radio":
        kind = ControlKind.RADIO
    elif input_type in IGNORED_INPUT_TYPES:
        kind = ControlKind.IGNORED
    elif input_type == "checkbox":
        kind = ControlKind.CHECKBOX
    else:
        kind = ControlKind.TEXT

    return Control(element, kind, tag, input_type)


def discover(automation: AutomationLayer, elements: Iterable[Any]) -> Iterator[Control]:
    """
    Yield the leaf controls of the given elements in discovery order.

    A container is expanded with a single descendant query; what that query
    returns is treated as leaves. Containers without fillable descendants
    yield nothing. An element reached more than once (passed directly and
    inside a container, or twice) is only yielded the first time.
    """
    seen: Set[Hashable] = set()

    def first_visit(element: Any) -> bool:
        key = automation.element_key(element)
        if key in seen:
            return False
        seen.add(key)
        return True

    for element in elements:
        if not first_visit(element):
            logger.debug("Skipping element already discovered")
            continue

        control = classify(automation, element)
        if control.is_leaf:
            yield control
            continue

        descendants = automation.find_descendants(element, FILLABLE_SELECTOR)
        if not descendants:
            logger.debug("Skipping <%s>: no fillable descendants", control.tag)
            continue

        for descendant in descendants:
            if not first_visit(descendant):
                continue
            child = classify(automation, descendant)
            if child.is_leaf:
                yield child
