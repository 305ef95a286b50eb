"""
dsdoc - Designspace document model and codec

This package reads and writes .designspace XML files losslessly, including
arbitrary plist lib metadata, and describes which parts of a font source a
loader should materialize.
"""

__version__ = "1.0.0"

# Import high-level API functions
from .api import dumps, load, load_sources, loads, save, validate_sources
from .core.data_request import DataRequest
from .core.models import (
    DEFAULT_LAYER_NAME,
    Axis,
    AxisMapping,
    DesignSpaceDocument,
    Dimension,
    Instance,
    Source,
)
from .core.sources import FontSourceData, SourceLoader, UFOValidator, ValidationReport
from .exceptions import (
    DesignSpaceFormatError,
    DesignSpaceLoadError,
    DesignSpaceReadError,
    DesignSpaceSaveError,
    DesignSpaceSerializeError,
    DesignSpaceWriteError,
    DSDocError,
    SourceLoadError,
)
from .parsers.designspace_parser import DesignSpaceParser
from .writers.designspace_writer import DesignSpaceWriter

# Public API
__all__ = [
    # Version
    "__version__",
    # Core models
    "DesignSpaceDocument",
    "Axis",
    "AxisMapping",
    "Source",
    "Instance",
    "Dimension",
    "DEFAULT_LAYER_NAME",
    # Selective loading
    "DataRequest",
    "SourceLoader",
    "FontSourceData",
    # Validation
    "UFOValidator",
    "ValidationReport",
    # Parser and Writer
    "DesignSpaceParser",
    "DesignSpaceWriter",
    # Errors
    "DSDocError",
    "DesignSpaceLoadError",
    "DesignSpaceReadError",
    "DesignSpaceFormatError",
    "DesignSpaceSaveError",
    "DesignSpaceWriteError",
    "DesignSpaceSerializeError",
    "SourceLoadError",
    # High-level API functions
    "load",
    "loads",
    "save",
    "dumps",
    "validate_sources",
    "load_sources",
]
