import os
from pathlib import Path


class PathResolver:
    """Central authority for file path resolution in hsvconfig.

    Uses environment variables for configuration with sensible defaults.
    """

    CONFIGS_FOLDER_NAME = "HitScoreVisualizer"
    DEFAULT_CONFIG_FILENAME = "HitScoreVisualizerConfig-default.json"

    def __init__(self) -> None:
        """Initialize PathResolver with environment-based configuration."""
        self.data_dir = Path(
            os.getenv("HSV_DATA", str(Path.home() / ".local" / "share" / "hsvconfig"))
        )

    def get_data_dir(self) -> Path:
        """Get the user data directory that holds the configs folder."""
        return self.data_dir

    def get_configs_dir(self) -> Path:
        """Get the folder containing user configuration documents."""
        return self.data_dir / self.CONFIGS_FOLDER_NAME

    def get_default_config_path(self) -> Path:
        """Get the path the default configuration document is written to."""
        return self.get_configs_dir() / self.DEFAULT_CONFIG_FILENAME

    def get_settings_path(self) -> Path:
        """Get the path to the settings file remembering the active config.

        Checks HSV_SETTINGS environment variable first, then falls back to default.
        """
        settings_path = os.getenv("HSV_SETTINGS")
        if settings_path:
            return Path(settings_path)

        return self.data_dir / "settings.yaml"
