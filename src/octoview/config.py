"""Octoview configuration management.

Reads optional settings from ~/.octoview/config.json. The file is never
written by the application.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


# Default configuration values
DEFAULT_API_ROOT = "https://api.github.com"
DEFAULT_WEB_ROOT = "https://github.com"
DEFAULT_USER_AGENT = "Octoview-Profile-Browser"
DEFAULT_THEME = "textual-dark"
DEFAULT_LOG_LEVEL = "INFO"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

# Fields that must hold a non-empty string
STRING_FIELDS = ("api_root", "web_root", "user_agent", "theme")


@dataclass
class OctoviewConfig:
    """Octoview application configuration."""

    # Remote endpoints
    api_root: str = DEFAULT_API_ROOT
    web_root: str = DEFAULT_WEB_ROOT
    user_agent: str = DEFAULT_USER_AGENT

    # Appearance
    theme: str = DEFAULT_THEME

    # Logging; log_file None means ~/.octoview/octoview.log
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None

    @classmethod
    def get_config_dir(cls) -> Path:
        """Get the directory holding config and log files."""
        return Path.home() / ".octoview"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get the path to the config file."""
        return cls.get_config_dir() / "config.json"

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "OctoviewConfig":
        """Load configuration from file, or return defaults if not found."""
        config_path = path or cls.get_config_path()

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                # Only use known fields to avoid issues with old config versions
                known_fields = {f.name for f in cls.__dataclass_fields__.values()}
                filtered_data = {k: v for k, v in data.items() if k in known_fields}
                return cls(**cls._drop_invalid(filtered_data))
            except (json.JSONDecodeError, TypeError, ValueError, AttributeError):
                # Invalid config, return defaults
                pass

        return cls()

    @staticmethod
    def _drop_invalid(data: dict) -> dict:
        """Remove values of the wrong type so those fields keep their defaults."""
        valid = {}
        for key, value in data.items():
            if key in STRING_FIELDS:
                ok = isinstance(value, str) and bool(value.strip())
            elif key == "log_level":
                ok = isinstance(value, str) and value.upper() in LOG_LEVELS
            elif key == "log_file":
                ok = value is None or isinstance(value, str)
            else:
                ok = True
            if ok:
                valid[key] = value
        return valid

    @property
    def log_path(self) -> Path:
        """Resolved log file location."""
        if self.log_file:
            return Path(self.log_file).expanduser()
        return self.get_config_dir() / "octoview.log"

    def profile_url(self, path: str) -> str:
        """Web URL for a handle or an ``owner/repo`` full name."""
        return f"{self.web_root.rstrip('/')}/{path}"
