"""
dsdoc Public API

High-level functions for reading and writing designspace documents and for
loading the font sources they reference.
"""

from pathlib import Path
from typing import List, Optional

from .core.data_request import DataRequest
from .core.models import DesignSpaceDocument
from .core.sources import FontSourceData, SourceLoader, UFOValidator, ValidationReport
from .exceptions import DesignSpaceLoadError, DesignSpaceSaveError
from .parsers.designspace_parser import DesignSpaceParser
from .utils.logging import DSDocLogger
from .writers.designspace_writer import DesignSpaceWriter


def load(source) -> DesignSpaceDocument:
    """
    Load a designspace document.

    Args:
        source: Path to a .designspace file or a readable binary stream

    Returns:
        DesignSpaceDocument object

    Raises:
        DesignSpaceReadError: The file could not be opened or read
        DesignSpaceFormatError: The file is not a valid designspace

    Example:
        import dsdoc

        doc = dsdoc.load("MyFont.designspace")
        print([axis.name for axis in doc.axes])
    """
    try:
        return DesignSpaceParser().parse_file(source)
    except DesignSpaceLoadError as e:
        DSDocLogger.error(str(e))
        raise


def loads(content) -> DesignSpaceDocument:
    """
    Load a designspace document from bytes or a string.

    Raises:
        DesignSpaceFormatError: The content is not a valid designspace
    """
    try:
        return DesignSpaceParser().parse(content)
    except DesignSpaceLoadError as e:
        DSDocLogger.error(str(e))
        raise


def save(document: DesignSpaceDocument, target) -> None:
    """
    Save a designspace document.

    Args:
        document: DesignSpaceDocument to write
        target: Path of the output file or a writable binary stream

    Raises:
        DesignSpaceWriteError: The output could not be written
        DesignSpaceSerializeError: A value could not be serialized

    Example:
        import dsdoc

        doc = dsdoc.load("MyFont.designspace")
        doc.lib["com.example.reviewed"] = True
        dsdoc.save(doc, "MyFont.designspace")
    """
    try:
        DesignSpaceWriter().write_file(document, target)
    except DesignSpaceSaveError as e:
        DSDocLogger.error(str(e))
        raise


def dumps(document: DesignSpaceDocument) -> bytes:
    """Serialize a designspace document to UTF-8 encoded XML"""
    try:
        return DesignSpaceWriter().write_bytes(document)
    except DesignSpaceSaveError as e:
        DSDocLogger.error(str(e))
        raise


def validate_sources(document: DesignSpaceDocument, designspace_path) -> ValidationReport:
    """Check that the UFO files referenced by ``document`` exist and look like UFOs"""
    return UFOValidator.validate_ufo_files(document, designspace_path)


def load_sources(
    document: DesignSpaceDocument,
    designspace_path,
    request: Optional[DataRequest] = None,
) -> List[FontSourceData]:
    """
    Load the font sources of a document, limited to the requested data.

    Args:
        document: Document whose sources should be loaded
        designspace_path: Path of the .designspace file; source filenames are
            resolved relative to its directory
        request: DataRequest selecting the data categories (default: all)

    Example:
        import dsdoc

        doc = dsdoc.load("MyFont.designspace")
        request = dsdoc.DataRequest.none().with_groups(True).with_kerning(True)
        for font in dsdoc.load_sources(doc, "MyFont.designspace", request):
            print(font.path, len(font.kerning))
    """
    loader = SourceLoader(base_path=Path(designspace_path).parent)
    return loader.load_all(document, request)
