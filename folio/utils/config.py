"""
Configuration utilities.
"""
import logging
import os
from typing import Any, Optional

from dotenv import load_dotenv

from ..portfolio.images import DEFAULT_MAX_IMAGE_BYTES
from ..portfolio.models import DEFAULT_COLOR_SCHEME, DEFAULT_TEMPLATE

DEFAULTS = {
    "FOLIO_STORAGE_DIR": "data/local",
    "FOLIO_REMOTE_PATH": "",
    "FOLIO_REMOTE_PERSIST": "true",
    "FOLIO_BACKUP_DIR": "data/backups",
    "FOLIO_MAX_BACKUPS": "5",
    "FOLIO_LOG_LEVEL": "INFO",
    "FOLIO_LOG_FILE": "",
    "FOLIO_MAX_IMAGE_BYTES": str(DEFAULT_MAX_IMAGE_BYTES),
    "FOLIO_DEFAULT_TEMPLATE": DEFAULT_TEMPLATE,
    "FOLIO_DEFAULT_COLOR_SCHEME": DEFAULT_COLOR_SCHEME,
}

TRUE_VALUES = {"1", "true", "yes", "on"}


class Config:
    """Configuration manager.

    Values come from the environment, optionally seeded from a ``.env`` file,
    with the defaults above for anything unset.
    """

    def __init__(self, env_file: Optional[str] = None):
        """Initialize configuration."""
        if env_file:
            load_dotenv(env_file)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        value = os.getenv(key)
        if value is None or value == "":
            return DEFAULTS.get(key, default) if default is None else default
        return value

    def get_int(self, key: str, default: Optional[int] = None) -> int:
        value = self.get(key, default)
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValueError(f"{key} must be an integer, got {value!r}")

    def get_bool(self, key: str, default: Optional[bool] = None) -> bool:
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in TRUE_VALUES

    @property
    def storage_dir(self) -> str:
        return self.get("FOLIO_STORAGE_DIR")

    @property
    def remote_path(self) -> Optional[str]:
        return self.get("FOLIO_REMOTE_PATH") or None

    @property
    def remote_persist(self) -> bool:
        return self.get_bool("FOLIO_REMOTE_PERSIST")

    @property
    def backup_dir(self) -> str:
        return self.get("FOLIO_BACKUP_DIR")

    @property
    def max_backups(self) -> int:
        return self.get_int("FOLIO_MAX_BACKUPS")

    @property
    def log_level(self) -> int:
        name = str(self.get("FOLIO_LOG_LEVEL")).upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    @property
    def log_file(self) -> Optional[str]:
        return self.get("FOLIO_LOG_FILE") or None

    @property
    def max_image_bytes(self) -> int:
        return self.get_int("FOLIO_MAX_IMAGE_BYTES")

    @property
    def default_template(self) -> str:
        return self.get("FOLIO_DEFAULT_TEMPLATE")

    @property
    def default_color_scheme(self) -> str:
        return self.get("FOLIO_DEFAULT_COLOR_SCHEME")
