"""
Selective data loading for font sources

A DataRequest tells a font source loader which categories of UFO data should
be materialized. By default everything is requested; callers that only need,
say, kerning and groups can skip the (expensive) glyph layers.
"""

from dataclasses import dataclass, fields, replace
from typing import List


@dataclass(frozen=True)
class DataRequest:
    """Which components of a UFO should be loaded"""

    layers: bool = True
    lib: bool = True
    groups: bool = True
    kerning: bool = True
    features: bool = True
    data: bool = True
    images: bool = True

    @classmethod
    def _from_bool(cls, value: bool) -> "DataRequest":
        return cls(**{f.name: value for f in fields(cls)})

    @classmethod
    def all(cls) -> "DataRequest":
        """Request all UFO data"""
        return cls._from_bool(True)

    @classmethod
    def none(cls) -> "DataRequest":
        """Request no UFO data"""
        return cls._from_bool(False)

    @classmethod
    def from_categories(cls, categories) -> "DataRequest":
        """Request exactly the named categories

        Args:
            categories: Iterable of category names (e.g. ["groups", "kerning"])

        Raises:
            ValueError: If a name is not a known category
        """
        known = cls.categories()
        selected = set()
        for name in categories:
            if name not in known:
                raise ValueError(
                    f"Unknown data category '{name}'. Expected one of: {', '.join(known)}"
                )
            selected.add(name)
        return cls(**{name: name in selected for name in known})

    @classmethod
    def from_profile(cls, profile: str) -> "DataRequest":
        """Build a request from a named profile in request-profiles.yaml

        Raises:
            KeyError: If no such profile is configured
        """
        from ..config import load_request_profiles

        profiles = load_request_profiles()
        if profile not in profiles:
            raise KeyError(f"Unknown data request profile: {profile}")
        return cls.from_categories(profiles[profile] or [])

    @classmethod
    def categories(cls) -> List[str]:
        """All category names, in declaration order"""
        return [f.name for f in fields(cls)]

    def requested(self) -> List[str]:
        """Names of the enabled categories, in declaration order"""
        return [name for name in self.categories() if getattr(self, name)]

    # Builders. Each returns a new request; the receiver is left untouched.

    def with_layers(self, value: bool) -> "DataRequest":
        """Include glyph layers and their glyphs"""
        return replace(self, layers=value)

    def with_lib(self, value: bool) -> "DataRequest":
        """Include the font lib.plist"""
        return replace(self, lib=value)

    def with_groups(self, value: bool) -> "DataRequest":
        """Include groups.plist"""
        return replace(self, groups=value)

    def with_kerning(self, value: bool) -> "DataRequest":
        """Include kerning.plist"""
        return replace(self, kerning=value)

    def with_features(self, value: bool) -> "DataRequest":
        """Include features.fea"""
        return replace(self, features=value)

    def with_data(self, value: bool) -> "DataRequest":
        """Include the data directory"""
        return replace(self, data=value)

    def with_images(self, value: bool) -> "DataRequest":
        """Include the images directory"""
        return replace(self, images=value)
