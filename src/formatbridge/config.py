"""Configuration and data management for FormatBridge"""

import json
import os
import platform
import shutil
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .utils.logging import FormatBridgeLogger

SETTINGS_FILE = "settings.yaml"


class DataManager:
    """Manages FormatBridge data files with user override support"""

    def __init__(self):
        # Package data directory (built-in defaults)
        self.package_data_dir = Path(__file__).parent / "data"

        # User data directory (overrides), created on first write
        self.user_data_dir = self._get_user_data_dir()

    def _get_user_data_dir(self) -> Path:
        """Get user data directory based on OS or environment variable"""
        if custom_dir := os.environ.get("FORMATBRIDGE_DATA_DIR"):
            return Path(custom_dir).expanduser()

        system = platform.system()

        if system == "Darwin":  # macOS
            return Path.home() / "Library" / "Application Support" / "formatbridge"
        elif system == "Windows":
            app_data = os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming")
            return Path(app_data) / "formatbridge"
        else:  # Linux and others
            xdg_config = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
            return Path(xdg_config) / "formatbridge"

    def load_merged(self, filename: str) -> Dict[str, Any]:
        """Package defaults with the user file's keys layered on top"""
        merged = {}
        package_file = self.package_data_dir / filename
        if package_file.exists():
            merged = self._load_file(package_file)

        user_file = self.user_data_dir / filename
        if user_file.exists():
            merged = _deep_merge(merged, self._load_file(user_file))

        return merged

    def _load_file(self, filepath: Path) -> Dict[str, Any]:
        """Load JSON or YAML file based on extension"""
        try:
            with open(filepath, encoding="utf-8") as f:
                if filepath.suffix in [".yaml", ".yml"]:
                    return yaml.safe_load(f) or {}
                elif filepath.suffix == ".json":
                    return json.load(f)
                else:
                    content = f.read()
                    try:
                        return yaml.safe_load(content) or {}
                    except yaml.YAMLError:
                        return json.loads(content)
        except (OSError, ValueError, yaml.YAMLError) as e:
            FormatBridgeLogger.warning(f"Error loading {filepath}: {e}")
            return {}

    def reset_to_defaults(self, filename: Optional[str] = None) -> int:
        """Remove user override files; returns how many were removed"""
        if filename:
            user_file = self.user_data_dir / filename
            if user_file.exists():
                user_file.unlink()
                FormatBridgeLogger.info(f"Reset {filename} to defaults")
                return 1
            FormatBridgeLogger.info(f"{filename} was already using defaults")
            return 0

        count = 0
        if self.user_data_dir.exists():
            for user_file in self.user_data_dir.glob("*"):
                if user_file.is_file():
                    user_file.unlink()
                    count += 1

        FormatBridgeLogger.info(f"Reset {count} file(s) to defaults")
        return count

    def get_data_info(self) -> Dict[str, Any]:
        """Get information about data files"""
        package_files = []
        if self.package_data_dir.exists():
            package_files = [f.name for f in self.package_data_dir.glob("*") if f.is_file()]

        user_files = []
        if self.user_data_dir.exists():
            user_files = [f.name for f in self.user_data_dir.glob("*") if f.is_file()]

        return {
            "package_data_dir": str(self.package_data_dir),
            "user_data_dir": str(self.user_data_dir),
            "package_files": sorted(package_files),
            "user_files": sorted(user_files),
        }

    def copy_package_to_user(self, filename: str) -> bool:
        """Copy a package data file to user directory for editing"""
        package_file = self.package_data_dir / filename
        user_file = self.user_data_dir / filename

        if not package_file.exists():
            FormatBridgeLogger.error(f"Package file {filename} not found")
            return False

        if user_file.exists():
            FormatBridgeLogger.warning(f"User file {filename} already exists")
            return False

        self.user_data_dir.mkdir(parents=True, exist_ok=True)
        shutil.copy2(package_file, user_file)
        FormatBridgeLogger.info(f"Copied {filename} to user directory")
        return True


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


# Singleton instance
_data_manager = None


def get_data_manager() -> DataManager:
    """Get or create the data manager singleton"""
    global _data_manager
    if _data_manager is None:
        _data_manager = DataManager()
    return _data_manager


def reset_data_manager() -> None:
    """Drop the singleton so the next call re-reads FORMATBRIDGE_DATA_DIR"""
    global _data_manager
    _data_manager = None


def load_settings() -> Dict[str, Any]:
    """Load settings.yaml, user values overriding package defaults"""
    return get_data_manager().load_merged(SETTINGS_FILE)


def get_indent_size(settings: Optional[Dict[str, Any]] = None) -> int:
    """Default indent size from settings"""
    settings = load_settings() if settings is None else settings
    return int(settings.get("indent_size", 2))


def get_morse_separators(settings: Optional[Dict[str, Any]] = None) -> Dict[str, str]:
    """Word and character separators used when encoding Morse"""
    settings = load_settings() if settings is None else settings
    morse = settings.get("morse") or {}
    return {
        "word_separator": morse.get("word_separator", " / "),
        "char_separator": morse.get("char_separator", " "),
    }
