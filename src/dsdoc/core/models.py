"""
Data models for dsdoc

This module contains all dataclasses representing the designspace document
structure. Optional attributes are ``None`` when the XML omits them; they are
never replaced by a zero value or an empty string.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Name of the foreground layer of a UFO
DEFAULT_LAYER_NAME = "public.default"


@dataclass
class AxisMapping:
    """Maps one user space coordinate to one design space coordinate"""
    input: float   # user space (400)
    output: float  # design space (100)


@dataclass
class Axis:
    """A continuous or discrete axis of variation"""
    name: str      # used by location dimensions
    tag: str       # 4 letters, e.g. wght
    default: float
    hidden: bool = False
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    values: Optional[List[float]] = None  # discrete axes only
    map: Optional[List[AxisMapping]] = None

    @property
    def is_discrete(self) -> bool:
        return self.values is not None


@dataclass
class Dimension:
    """A single axis coordinate within a location"""
    name: str
    uservalue: Optional[float] = None
    xvalue: Optional[float] = None
    yvalue: Optional[float] = None  # anisotropic interpolation


def _location_dict(location: List[Dimension]) -> Dict[str, Optional[float]]:
    return {
        dim.name: dim.xvalue if dim.xvalue is not None else dim.uservalue
        for dim in location
    }


@dataclass
class Source:
    """A master font contributing to the design space"""
    filename: str  # relative to the document
    familyname: Optional[str] = None
    stylename: Optional[str] = None
    name: Optional[str] = None
    layer: Optional[str] = None  # None means the foreground layer
    location: List[Dimension] = field(default_factory=list)

    @property
    def layer_name(self) -> str:
        """Layer to read from the source font"""
        return self.layer if self.layer is not None else DEFAULT_LAYER_NAME

    def location_dict(self) -> Dict[str, Optional[float]]:
        """Location as axis_name -> design value"""
        return _location_dict(self.location)


@dataclass
class Instance:
    """A named static font generated from the design space"""
    familyname: Optional[str] = None
    stylename: Optional[str] = None
    name: Optional[str] = None
    filename: Optional[str] = None
    postscriptfontname: Optional[str] = None
    stylemapfamilyname: Optional[str] = None
    stylemapstylename: Optional[str] = None
    location: List[Dimension] = field(default_factory=list)
    lib: Dict[str, Any] = field(default_factory=dict)

    def location_dict(self) -> Dict[str, Optional[float]]:
        """Location as axis_name -> design value"""
        return _location_dict(self.location)


@dataclass
class DesignSpaceDocument:
    """Complete designspace document structure"""
    format: float = 5.0
    axes: List[Axis] = field(default_factory=list)
    sources: List[Source] = field(default_factory=list)
    instances: List[Instance] = field(default_factory=list)
    lib: Dict[str, Any] = field(default_factory=dict)

    def get_axis(self, name: str) -> Optional[Axis]:
        """Return the axis called ``name``, if any"""
        for axis in self.axes:
            if axis.name == name:
                return axis
        return None

    @classmethod
    def load(cls, path) -> "DesignSpaceDocument":
        """Load a designspace file (path or binary stream)"""
        from ..parsers.designspace_parser import DesignSpaceParser

        return DesignSpaceParser().parse_file(path)

    def save(self, path) -> None:
        """Save to a designspace file (path or binary stream)"""
        from ..writers.designspace_writer import DesignSpaceWriter

        DesignSpaceWriter().write_file(self, path)
