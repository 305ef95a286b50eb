"""Exception hierarchy for dsdoc."""

from typing import Optional


class DSDocError(Exception):
    """Base exception for all dsdoc errors."""

    pass


class DesignSpaceLoadError(DSDocError):
    """Error loading a designspace document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load designspace '{path}': {reason}")


class DesignSpaceReadError(DesignSpaceLoadError):
    """The underlying file or stream could not be opened or read."""

    pass


class DesignSpaceFormatError(DesignSpaceLoadError):
    """The document is not a structurally valid designspace.

    Carries the offending element tag and attribute (when known) plus the
    parser diagnostic.
    """

    def __init__(
        self,
        path: str,
        details: str,
        element: Optional[str] = None,
        attribute: Optional[str] = None,
    ) -> None:
        self.details = details
        self.element = element
        self.attribute = attribute

        where = ""
        if element and attribute:
            where = f"<{element}> @{attribute}: "
        elif element:
            where = f"<{element}>: "
        super().__init__(path, f"{where}{details}")


class DesignSpaceSaveError(DSDocError):
    """Error saving a designspace document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save designspace '{path}': {reason}")


class DesignSpaceWriteError(DesignSpaceSaveError):
    """The output file or stream could not be written."""

    pass


class DesignSpaceSerializeError(DesignSpaceSaveError):
    """A value in the document could not be serialized."""

    pass


class SourceLoadError(DSDocError):
    """A font source (UFO) could not be loaded."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font source '{path}': {reason}")
