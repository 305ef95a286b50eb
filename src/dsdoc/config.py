"""Request profile configuration for dsdoc

Profiles ship in ``data/request-profiles.yaml``. A file of the same name in
the user data directory adds profiles or replaces packaged ones by name.
"""

import os
import platform
from pathlib import Path
from typing import Dict, List

import yaml

from .utils.logging import DSDocLogger

REQUEST_PROFILES_FILE = "request-profiles.yaml"

PACKAGE_DATA_DIR = Path(__file__).parent / "data"


def user_data_dir() -> Path:
    """User data directory: $DSDOC_DATA_DIR or the per-OS config location"""
    if custom_dir := os.environ.get("DSDOC_DATA_DIR"):
        return Path(custom_dir).expanduser()

    system = platform.system()
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "dsdoc"
    elif system == "Windows":
        app_data = os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming")
        return Path(app_data) / "dsdoc"
    xdg_config = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config) / "dsdoc"


def _read_profiles(filepath: Path) -> Dict[str, List[str]]:
    if not filepath.exists():
        return {}
    try:
        with open(filepath, encoding="utf-8") as f:
            profiles = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        DSDocLogger.warning(f"Error loading {filepath}: {e}")
        return {}
    if not isinstance(profiles, dict):
        DSDocLogger.warning(f"Ignoring {filepath}: expected a mapping of profile names")
        return {}
    return profiles


def load_request_profiles() -> Dict[str, List[str]]:
    """Load packaged profiles with the user's profiles layered on top"""
    profiles = _read_profiles(PACKAGE_DATA_DIR / REQUEST_PROFILES_FILE)
    profiles.update(_read_profiles(user_data_dir() / REQUEST_PROFILES_FILE))
    return profiles
