"""
Font source access for dsdoc

This module checks the UFO files referenced by a designspace document and
loads them through defcon, materializing only the data categories named in a
DataRequest.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from defcon import Font
from fontTools.ufoLib import UFOLibError

from ..exceptions import SourceLoadError
from ..utils.logging import DSDocLogger
from .data_request import DataRequest
from .models import DesignSpaceDocument, Source


@dataclass
class ValidationReport:
    """Report of UFO file validation"""

    missing_files: List[str] = field(default_factory=list)
    invalid_ufos: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return len(self.missing_files) > 0 or len(self.invalid_ufos) > 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0


class UFOValidator:
    """Validate UFO files existence and basic structure"""

    @staticmethod
    def validate_ufo_files(document: DesignSpaceDocument, designspace_path) -> ValidationReport:
        """Check every source file relative to the designspace file's directory"""
        report = ValidationReport()
        base_path = Path(designspace_path).parent

        for source in document.sources:
            ufo_path = base_path / source.filename

            if not source.filename.endswith((".ufo", ".ufoz")):
                report.warnings.append(f"Source filename should end with .ufo(z): {source.filename}")

            if not ufo_path.exists():
                report.missing_files.append(str(ufo_path))
                continue

            if not UFOValidator._is_valid_ufo(ufo_path):
                report.invalid_ufos.append(str(ufo_path))

        for path in report.missing_files:
            DSDocLogger.warning(f"Missing source: {path}")
        for path in report.invalid_ufos:
            DSDocLogger.warning(f"Invalid UFO: {path}")

        return report

    @staticmethod
    def _is_valid_ufo(ufo_path: Path) -> bool:
        """Basic UFO structure validation"""
        if ufo_path.suffix.lower() == ".ufoz":
            return ufo_path.is_file()

        if not ufo_path.is_dir():
            return False

        if not (ufo_path / "metainfo.plist").exists():
            return False

        # UFO 3 keeps layer contents, UFO 2 only a glyphs directory
        return (ufo_path / "glyphs").is_dir() or (ufo_path / "layercontents.plist").exists()


@dataclass
class FontSourceData:
    """Data read from one font source

    Categories that were not requested stay ``None``.
    """

    path: str
    layer: str
    layers: Optional[Dict[str, List[str]]] = None  # layer name -> glyph names
    lib: Optional[Dict[str, Any]] = None
    groups: Optional[Dict[str, List[str]]] = None
    kerning: Optional[Dict[Tuple[str, str], float]] = None
    features: Optional[str] = None
    data: Optional[Dict[str, bytes]] = None
    images: Optional[Dict[str, bytes]] = None

    @property
    def glyph_names(self) -> Optional[List[str]]:
        """Glyph names of the source's own layer, if layers were loaded"""
        if self.layers is None:
            return None
        return self.layers.get(self.layer, [])


class SourceLoader:
    """Load font sources referenced by a designspace document"""

    def __init__(self, base_path=None):
        """Initialize loader with optional base path for UFO files"""
        self.base_path = Path(base_path) if base_path else None

    def resolve(self, source: Source) -> Path:
        path = Path(source.filename)
        if self.base_path and not path.is_absolute():
            return self.base_path / path
        return path

    def load(self, source: Source, request: Optional[DataRequest] = None) -> FontSourceData:
        """Read the categories named by ``request`` (default: all)

        Raises:
            SourceLoadError: If the UFO cannot be opened or read
        """
        request = request or DataRequest.all()
        ufo_path = self.resolve(source)

        try:
            font = Font(str(ufo_path))
            result = self._read(font, str(ufo_path), source.layer_name, request)
        except (UFOLibError, OSError) as e:
            raise SourceLoadError(str(ufo_path), str(e)) from e

        DSDocLogger.debug(
            f"Loaded {ufo_path} ({', '.join(request.requested()) or 'no data'})"
        )
        return result

    def load_all(
        self, document: DesignSpaceDocument, request: Optional[DataRequest] = None
    ) -> List[FontSourceData]:
        """Load every source of ``document``, in document order"""
        return [self.load(source, request) for source in document.sources]

    @staticmethod
    def _read(font: Font, path: str, layer: str, request: DataRequest) -> FontSourceData:
        data = FontSourceData(path=path, layer=layer)

        if request.layers:
            data.layers = {
                name: sorted(font.layers[name].keys()) for name in font.layers.layerOrder
            }
        if request.lib:
            data.lib = dict(font.lib)
        if request.groups:
            data.groups = {name: list(members) for name, members in font.groups.items()}
        if request.kerning:
            data.kerning = dict(font.kerning.items())
        if request.features:
            data.features = font.features.text or ""
        if request.data:
            data.data = {name: font.data[name] for name in font.data.fileNames}
        if request.images:
            data.images = {name: font.images[name] for name in font.images.fileNames}

        return data
