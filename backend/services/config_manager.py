"""
Configuration Manager - Handle tour generation settings persistence
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "GIT2CODETOUR_CONFIG_DIR"


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self, config_dir: str | None = None):
        try:
            # 1. explicit argument or environment variable
            config_dir = config_dir or os.environ.get(CONFIG_DIR_ENV)

            # 2. home directory ~/.git2codetour
            if not config_dir:
                config_dir = os.path.expanduser("~/.git2codetour")

            config_path = Path(config_dir)
            try:
                config_path.mkdir(parents=True, exist_ok=True)
                self._config_file = config_path / "config.json"
            except OSError as e:
                logger.warning("Cannot write to %s: %s", config_dir, e)
                self._config_file = None

            # 3. fall back to the temp directory
            if not self._config_file:
                tmp_dir = Path(tempfile.gettempdir()) / "git2codetour"
                tmp_dir.mkdir(parents=True, exist_ok=True)
                self._config_file = tmp_dir / "config.json"
                logger.info("Using temporary config path: %s", self._config_file)

        except OSError as e:
            logger.error("Cannot initialise config directory: %s", e)
            self._config_file = Path(tempfile.gettempdir()) / "git2codetour_config_fallback.json"

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, layered over the defaults"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file) as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error("Error loading config %s: %s", self._config_file, e)
            return config

        if isinstance(stored, dict):
            config.update(stored)
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "languages": {},  # extra extension -> language tag mappings
            "selection": {"characterBase": 1},  # CodeTour selections are 1-based
            "git": {"shortHashLength": 7},
            "filters": {"include": [], "exclude": []},
            "server": {"host": "127.0.0.1", "port": 8000},
        }

    @property
    def config_file(self) -> Path:
        return self._config_file

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

    # ========== Derived settings ==========

    def language_overrides(self) -> dict[str, str]:
        return dict(self._config.get("languages") or {})

    def character_base(self) -> int:
        return int(self._config.get("selection", {}).get("characterBase", 1))

    def short_hash_length(self) -> int:
        return int(self._config.get("git", {}).get("shortHashLength", 7))
