"""Persistent settings for the configuration store.

The only setting the store itself needs is the path of the configuration the
user last selected. Logging options live alongside it.
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from hsvconfig.system.path_resolver import PathResolver

logger = logging.getLogger(__name__)


class LoggingConfig(BaseModel):
    """Structlog-based logging configuration."""

    level: str = "INFO"
    json_logs: bool | None = None  # None = auto-detect based on terminal
    include_caller: bool = False  # Include file:line info (useful for debugging)
    extra_fields: dict[str, str] = Field(default_factory=lambda: {"service": "hsvconfig"})


class StoreSettings(BaseModel):
    """Settings persisted between runs."""

    config_file_path: str | None = None
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class SettingsManager:
    """Loads and saves StoreSettings as YAML."""

    def __init__(self, path_resolver: PathResolver | None = None):
        """Initialize SettingsManager.

        Args:
            path_resolver: Optional PathResolver instance. If None, creates a new one.
        """
        self.path_resolver = path_resolver or PathResolver()
        self.settings_path = self.path_resolver.get_settings_path()
        self._settings: StoreSettings | None = None

    @property
    def settings(self) -> StoreSettings:
        """Current settings, loaded from disk on first access."""
        if self._settings is None:
            self._settings = self.load()
        return self._settings

    def load(self) -> StoreSettings:
        """Load settings, creating the file with defaults if needed.

        A settings file that cannot be parsed is replaced by defaults.

        Returns:
            StoreSettings: Loaded settings
        """
        if not self.settings_path.exists():
            settings = StoreSettings()
            self.save(settings)
            return settings

        try:
            raw = yaml.safe_load(self.settings_path.read_text()) or {}
            settings = StoreSettings(**raw)
        except (yaml.YAMLError, ValidationError, TypeError) as e:
            logger.warning("Ignoring unreadable settings at %s: %s", self.settings_path, e)
            settings = StoreSettings()

        self._settings = settings
        return settings

    def save(self, settings: StoreSettings | None = None) -> None:
        """Save settings to disk.

        Args:
            settings: Settings to save; defaults to the currently loaded ones

        Raises:
            OSError: If the settings file cannot be written
        """
        if settings is None:
            settings = self.settings
        self.settings_path.parent.mkdir(parents=True, exist_ok=True)
        settings_yaml = yaml.dump(settings.model_dump(), default_flow_style=False, sort_keys=False)
        self.settings_path.write_text(settings_yaml)
        self._settings = settings
        logger.debug("Settings saved to %s", self.settings_path)

    @property
    def config_file_path(self) -> str | None:
        """Path of the remembered active configuration."""
        return self.settings.config_file_path

    @config_file_path.setter
    def config_file_path(self, value: str | None) -> None:
        self.settings.config_file_path = value
        self.save()
