"""
Plist-in-XML codec for lib dictionaries

Document and instance ``<lib>`` elements carry an arbitrary plist ``<dict>``.
Its contents are decoded into plain Python values (str, int, float, bool,
list, dict, bytes, datetime) without interpretation, and written back the
same way.
"""

from typing import Any, Dict

from fontTools.misc import etree as ET
from fontTools.misc import plistlib

from .elements import ElementError

# Plist integers are signed or unsigned 64-bit values
INTEGER_MIN = -(1 << 63)
INTEGER_LIMIT = 1 << 64


def lib_from_element(parent, tag: str = "lib") -> Dict[str, Any]:
    """Decode ``parent/lib/dict``; a missing ``<lib>`` gives an empty dict"""
    lib_element = parent.find(tag)
    if lib_element is None or len(lib_element) == 0:
        return {}

    dict_element = lib_element[0]
    if dict_element.tag != "dict":
        raise ElementError(tag, f"expected a <dict> child, found <{dict_element.tag}>")

    try:
        value = plistlib.fromtree(dict_element, use_builtin_types=True)
    except (ValueError, TypeError, KeyError) as e:
        raise ElementError(tag, f"invalid plist data: {e}") from e
    _check_integers(tag, value)
    return value


def _check_integers(tag: str, value) -> None:
    """Reject integers that have no 64-bit plist representation"""
    if isinstance(value, dict):
        for item in value.values():
            _check_integers(tag, item)
    elif isinstance(value, list):
        for item in value:
            _check_integers(tag, item)
    elif isinstance(value, int) and not isinstance(value, bool):
        if not INTEGER_MIN <= value < INTEGER_LIMIT:
            raise ElementError(tag, f"integer out of range for a plist: {value}")


def lib_to_element(parent, lib: Dict[str, Any], tag: str = "lib"):
    """Append ``<lib><dict>...</dict></lib>`` to ``parent``

    Keys are written in insertion order. Raises TypeError or ValueError when
    a value has no plist representation.
    """
    lib_element = ET.SubElement(parent, tag)
    lib_element.append(
        plistlib.totree(lib, sort_keys=False, use_builtin_types=True, pretty_print=False)
    )
    return lib_element
