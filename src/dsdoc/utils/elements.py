"""
XML element helpers shared by the designspace parser and writer

Designspace files group every list in a singular wrapper element holding
repeated children (``<axes><axis/>...</axes>``). ``unwrap_sequence`` and
``wrap_sequence`` implement that pattern once for all fields.
"""

import re
from typing import Callable, List, Optional, TypeVar

from fontTools.misc import etree as ET

T = TypeVar("T")

INDENT = "  "

_TRUE_VALUES = {"1", "true"}
_FALSE_VALUES = {"0", "false"}
_LIST_SEPARATOR = re.compile(r"[\s,]+")


class ElementError(Exception):
    """Raised when an element does not have the expected shape"""

    def __init__(self, element: str, details: str, attribute: Optional[str] = None):
        super().__init__(details)
        self.element = element
        self.details = details
        self.attribute = attribute


def unwrap_sequence(
    parent,
    wrapper: str,
    item: str,
    parse: Callable[[object], T],
    required: bool = True,
) -> List[T]:
    """Parse the repeated ``item`` children of ``parent/wrapper``

    A missing wrapper is an error unless ``required`` is False, in which case
    it yields an empty list. Children with other tags are ignored.
    """
    container = parent.find(wrapper)
    if container is None:
        if required:
            raise ElementError(parent.tag, f"missing required <{wrapper}> element")
        return []
    return [parse(child) for child in container.findall(item)]


def wrap_sequence(parent, wrapper: str, items, build: Callable[[object, T], None]):
    """Append ``<wrapper>`` to ``parent`` and call ``build`` for every item"""
    container = ET.SubElement(parent, wrapper)
    for item in items:
        build(container, item)
    return container


def required_attr(element, name: str) -> str:
    value = element.get(name)
    if value is None:
        raise ElementError(element.tag, "missing required attribute", attribute=name)
    return value


def optional_str(element, name: str) -> Optional[str]:
    return element.get(name)


def _to_float(element, name: str, raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise ElementError(element.tag, f"expected a number, got {raw!r}", attribute=name)


def required_float(element, name: str) -> float:
    return _to_float(element, name, required_attr(element, name))


def optional_float(element, name: str) -> Optional[float]:
    raw = element.get(name)
    if raw is None:
        return None
    return _to_float(element, name, raw)


def optional_bool(element, name: str, default: bool = False) -> bool:
    raw = element.get(name)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ElementError(element.tag, f"expected a boolean, got {raw!r}", attribute=name)


def optional_float_list(element, name: str) -> Optional[List[float]]:
    """Parse a space- or comma-delimited number list"""
    raw = element.get(name)
    if raw is None:
        return None
    return [_to_float(element, name, part) for part in _LIST_SEPARATOR.split(raw.strip()) if part]


def format_number(value: float) -> str:
    """Format a coordinate: whole numbers without a fractional part"""
    if float(value).is_integer() and abs(value) < 1e16:
        return "%d" % value
    return repr(float(value))


def set_attrs(element, *pairs) -> None:
    """Set (name, value) attributes in order, skipping None values"""
    for name, value in pairs:
        if value is not None:
            element.set(name, value)


def indent(element, level: int = 0) -> None:
    """Pretty-print ``element`` in place with two-space indentation

    Text of leaf elements is left untouched so plist strings keep their
    whitespace.
    """
    padding = "\n" + level * INDENT
    if len(element):
        if not element.text or not element.text.strip():
            element.text = padding + INDENT
        for child in element:
            indent(child, level + 1)
        if not child.tail or not child.tail.strip():
            child.tail = padding
    if level and (not element.tail or not element.tail.strip()):
        element.tail = padding
