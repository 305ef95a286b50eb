"""
Designspace Writer for dsdoc

This module serializes a DesignSpaceDocument back to .designspace XML: two
space indentation, a UTF-8 XML declaration and a single trailing newline.
Every list regains its wrapper element, including an empty <instances/>.
"""

import os

from fontTools.misc import etree as ET

from ..core.models import Axis, AxisMapping, DesignSpaceDocument, Dimension, Instance, Source
from ..exceptions import DesignSpaceSerializeError, DesignSpaceWriteError
from ..utils.elements import format_number, indent, set_attrs, wrap_sequence
from ..utils.logging import DSDocLogger
from ..utils.plist import lib_to_element

XML_DECLARATION = "<?xml version='1.0' encoding='UTF-8'?>"
STREAM_NAME = "<stream>"


def _number(value):
    return None if value is None else format_number(value)


class DesignSpaceWriter:
    """Write DesignSpaceDocument to designspace XML"""

    def __init__(self):
        self.path = STREAM_NAME

    def write(self, document: DesignSpaceDocument) -> str:
        """Generate the designspace XML string for ``document``

        Raises:
            DesignSpaceSerializeError: If a value cannot be represented
        """
        try:
            root = self._build_document(document)
            indent(root)
            body = ET.tostring(root, encoding="unicode")
        except (TypeError, ValueError, OverflowError) as e:
            raise DesignSpaceSerializeError(self.path, str(e)) from e

        return f"{XML_DECLARATION}\n{body}\n"

    def write_bytes(self, document: DesignSpaceDocument) -> bytes:
        return self.write(document).encode("utf-8")

    def write_file(self, document: DesignSpaceDocument, target) -> None:
        """Write ``document`` to a path or a writable binary stream

        Streams are written but not closed.

        Raises:
            DesignSpaceWriteError: If the file or stream cannot be written
            DesignSpaceSerializeError: If a value cannot be represented
        """
        if hasattr(target, "write"):
            name = getattr(target, "name", None)
            self.path = name if isinstance(name, str) else STREAM_NAME
        else:
            self.path = os.fspath(target)

        content = self.write_bytes(document)

        try:
            if hasattr(target, "write"):
                target.write(content)
            else:
                with open(self.path, "wb") as f:
                    f.write(content)
        except OSError as e:
            raise DesignSpaceWriteError(self.path, str(e)) from e

        DSDocLogger.debug(f"Wrote {self.path} ({len(content)} bytes)")

    def _build_document(self, document: DesignSpaceDocument):
        root = ET.Element("designspace")
        root.set("format", str(float(document.format)))

        wrap_sequence(root, "axes", document.axes, self._build_axis)
        wrap_sequence(root, "sources", document.sources, self._build_source)
        wrap_sequence(root, "instances", document.instances, self._build_instance)
        lib_to_element(root, document.lib)
        return root

    def _build_axis(self, parent, axis: Axis) -> None:
        element = ET.SubElement(parent, "axis")
        set_attrs(
            element,
            ("name", axis.name),
            ("tag", axis.tag),
            ("default", format_number(axis.default)),
            ("hidden", "1" if axis.hidden else None),
            ("minimum", _number(axis.minimum)),
            ("maximum", _number(axis.maximum)),
            (
                "values",
                None if axis.values is None else " ".join(format_number(v) for v in axis.values),
            ),
        )
        for mapping in axis.map or []:
            self._build_mapping(element, mapping)

    def _build_mapping(self, parent, mapping: AxisMapping) -> None:
        element = ET.SubElement(parent, "map")
        set_attrs(
            element,
            ("input", format_number(mapping.input)),
            ("output", format_number(mapping.output)),
        )

    def _build_dimension(self, parent, dimension: Dimension) -> None:
        element = ET.SubElement(parent, "dimension")
        set_attrs(
            element,
            ("name", dimension.name),
            ("uservalue", _number(dimension.uservalue)),
            ("xvalue", _number(dimension.xvalue)),
            ("yvalue", _number(dimension.yvalue)),
        )

    def _build_source(self, parent, source: Source) -> None:
        element = ET.SubElement(parent, "source")
        set_attrs(
            element,
            ("familyname", source.familyname),
            ("stylename", source.stylename),
            ("name", source.name),
            ("filename", source.filename),
            ("layer", source.layer),
        )
        wrap_sequence(element, "location", source.location, self._build_dimension)

    def _build_instance(self, parent, instance: Instance) -> None:
        element = ET.SubElement(parent, "instance")
        set_attrs(
            element,
            ("familyname", instance.familyname),
            ("stylename", instance.stylename),
            ("name", instance.name),
            ("filename", instance.filename),
            ("postscriptfontname", instance.postscriptfontname),
            ("stylemapfamilyname", instance.stylemapfamilyname),
            ("stylemapstylename", instance.stylemapstylename),
        )
        wrap_sequence(element, "location", instance.location, self._build_dimension)
        lib_to_element(element, instance.lib)
