"""
Configuration Manager - Handle viewer settings persistence
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from models.highlight import HighlightPalette

from .highlighter import FONT_FAMILY


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        try:
            # 1st: environment variable
            config_dir = os.environ.get("DIFF_VIEW_CONFIG_DIR")

            # 2nd: home directory ~/.diff_view
            if not config_dir:
                try:
                    config_dir = os.path.expanduser("~/.diff_view")
                except Exception:
                    config_dir = None

            if config_dir:
                config_path = Path(config_dir)
                try:
                    config_path.mkdir(parents=True, exist_ok=True)
                    self._config_file = config_path / "config.json"
                except OSError as e:
                    print(f"[ConfigManager] Warning: Cannot write to {config_dir}: {e}")
                    self._config_file = None

            # Fallback: temp directory
            if not self._config_file:
                tmp_dir = Path(tempfile.gettempdir()) / "diff_view"
                tmp_dir.mkdir(parents=True, exist_ok=True)
                self._config_file = tmp_dir / "config.json"
                print(f"[ConfigManager] Using temporary config path: {self._config_file}")

        except OSError as e:
            print(f"[ConfigManager] Critical Error in init: {e}")
            self._config_file = Path(tempfile.gettempdir()) / "diff_view_config_fallback.json"

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, merged over the defaults"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file) as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            print(f"[ConfigManager] Error loading config: {e}")
            return config

        if not isinstance(stored, dict):
            return config
        for key, value in stored.items():
            if isinstance(value, dict) and isinstance(config.get(key), dict):
                config[key] = {**config[key], **value}
            else:
                config[key] = value
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        palette = HighlightPalette()
        return {
            "theme": {
                "fontFamily": FONT_FAMILY,
                "foreground": None,  # inherit the client's text color
                "insertBackground": palette.insert_background,
                "deleteBackground": palette.delete_background,
                "grayBackground": palette.gray_background,
            },
            "diff": {
                "ignoreWhitespace": False,
                "ignoreCase": False,
                "contextLines": None,  # None shows every unchanged line
            },
            "server": {"host": "127.0.0.1", "port": 8000},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return self._config.copy()

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        self._config.update(config)
        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self._config[key] = value
        self.save_config(self._config)

    def get_palette(self) -> HighlightPalette:
        """Highlight backgrounds from the theme section"""
        theme = self._config.get("theme", {})
        defaults = HighlightPalette()
        return HighlightPalette(
            insert_background=theme.get("insertBackground") or defaults.insert_background,
            delete_background=theme.get("deleteBackground") or defaults.delete_background,
            gray_background=theme.get("grayBackground") or defaults.gray_background,
        )
