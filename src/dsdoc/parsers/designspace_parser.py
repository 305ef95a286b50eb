"""
Designspace Parser Module

Reads .designspace XML into the dsdoc data model. Every list in the file is
grouped by a wrapper element; the generic helpers in ``utils.elements``
unwrap them, so the per-element methods here only deal with attributes.
"""

import os
from typing import List, Optional

from fontTools.misc import etree as ET

from ..core.models import Axis, AxisMapping, DesignSpaceDocument, Dimension, Instance, Source
from ..exceptions import DesignSpaceFormatError, DesignSpaceReadError
from ..utils.elements import (
    ElementError,
    optional_bool,
    optional_float,
    optional_float_list,
    optional_str,
    required_attr,
    required_float,
    unwrap_sequence,
)
from ..utils.logging import DSDocLogger
from ..utils.plist import lib_from_element

STREAM_NAME = "<stream>"


class DesignSpaceParser:
    """Parse designspace XML into a DesignSpaceDocument"""

    def __init__(self):
        self.path = STREAM_NAME

    def parse_file(self, source) -> DesignSpaceDocument:
        """Parse a designspace file

        Args:
            source: A filesystem path or a readable binary stream. Streams are
                read but not closed.

        Raises:
            DesignSpaceReadError: If the file or stream cannot be read
            DesignSpaceFormatError: If the content is not a valid designspace
        """
        if hasattr(source, "read"):
            name = getattr(source, "name", None)
            self.path = name if isinstance(name, str) else STREAM_NAME
            try:
                content = source.read()
            except (OSError, UnicodeError) as e:
                raise DesignSpaceReadError(self.path, str(e)) from e
        else:
            self.path = os.fspath(source)
            try:
                with open(self.path, "rb") as f:
                    content = f.read()
            except OSError as e:
                raise DesignSpaceReadError(self.path, str(e)) from e

        return self.parse(content)

    def parse(self, content) -> DesignSpaceDocument:
        """Parse designspace content (bytes or str)"""
        if isinstance(content, str):
            content = content.encode("utf-8")

        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise DesignSpaceFormatError(self.path, f"malformed XML: {e}") from e

        try:
            document = self._parse_document(root)
        except ElementError as e:
            raise DesignSpaceFormatError(
                self.path, e.details, element=e.element, attribute=e.attribute
            ) from e

        DSDocLogger.debug(
            f"Parsed {self.path}: {len(document.axes)} axes, "
            f"{len(document.sources)} sources, {len(document.instances)} instances"
        )
        return document

    def _parse_document(self, root) -> DesignSpaceDocument:
        if root.tag != "designspace":
            raise ElementError(root.tag, "expected <designspace> root element")

        document = DesignSpaceDocument(format=required_float(root, "format"))
        document.axes = unwrap_sequence(root, "axes", "axis", self._parse_axis)
        document.sources = unwrap_sequence(root, "sources", "source", self._parse_source)
        # Older documents may have no instances at all
        document.instances = unwrap_sequence(
            root, "instances", "instance", self._parse_instance, required=False
        )
        document.lib = lib_from_element(root)
        return document

    def _parse_axis(self, element) -> Axis:
        return Axis(
            name=required_attr(element, "name"),
            tag=required_attr(element, "tag"),
            default=required_float(element, "default"),
            hidden=optional_bool(element, "hidden"),
            minimum=optional_float(element, "minimum"),
            maximum=optional_float(element, "maximum"),
            values=optional_float_list(element, "values"),
            map=self._parse_axis_map(element),
        )

    def _parse_axis_map(self, element) -> Optional[List[AxisMapping]]:
        """Collect <map> children; a <map> wrapping further <map>s is unwrapped"""
        mappings = []
        for map_element in element.findall("map"):
            is_wrapper = len(map_element) or not (
                {"input", "output"} & set(map_element.keys())
            )
            if is_wrapper:
                mappings.extend(self._parse_mapping(child) for child in map_element.findall("map"))
            else:
                mappings.append(self._parse_mapping(map_element))
        # An empty wrapper decodes like no mapping at all
        return mappings or None

    def _parse_mapping(self, element) -> AxisMapping:
        return AxisMapping(
            input=required_float(element, "input"),
            output=required_float(element, "output"),
        )

    def _parse_location(self, element) -> List[Dimension]:
        return unwrap_sequence(element, "location", "dimension", self._parse_dimension)

    def _parse_dimension(self, element) -> Dimension:
        return Dimension(
            name=required_attr(element, "name"),
            uservalue=optional_float(element, "uservalue"),
            xvalue=optional_float(element, "xvalue"),
            yvalue=optional_float(element, "yvalue"),
        )

    def _parse_source(self, element) -> Source:
        return Source(
            familyname=optional_str(element, "familyname"),
            stylename=optional_str(element, "stylename"),
            name=optional_str(element, "name"),
            filename=required_attr(element, "filename"),
            layer=optional_str(element, "layer"),
            location=self._parse_location(element),
        )

    def _parse_instance(self, element) -> Instance:
        return Instance(
            familyname=optional_str(element, "familyname"),
            stylename=optional_str(element, "stylename"),
            name=optional_str(element, "name"),
            filename=optional_str(element, "filename"),
            postscriptfontname=optional_str(element, "postscriptfontname"),
            stylemapfamilyname=optional_str(element, "stylemapfamilyname"),
            stylemapstylename=optional_str(element, "stylemapstylename"),
            location=self._parse_location(element),
            lib=lib_from_element(element),
        )
