"""Configuration store: discovery, loading, saving and selection of documents."""

import asyncio
import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import ValidationError

from hsvconfig.config.active import ActiveConfigHolder
from hsvconfig.config.classifier import SELECTABLE_STATES, ConfigClassifier, is_selectable
from hsvconfig.config.migrations import MigrationChain
from hsvconfig.config.models import ConfigFileInfo, Configuration, ConfigState
from hsvconfig.config.settings import SettingsManager
from hsvconfig.config.validation import canonicalize_judgments, canonicalize_segments
from hsvconfig.system.path_resolver import PathResolver

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    """Outcome of reading a configuration file."""

    LOADED = "loaded"
    PARSE_FAILURE = "parse_failure"
    IO_FAILURE = "io_failure"


@dataclass
class LoadResult:
    """Result of reading a configuration file."""

    status: LoadStatus
    configuration: Configuration | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is LoadStatus.LOADED


class ConfigStore:
    """Manages the configs folder and the active configuration selection."""

    def __init__(
        self,
        path_resolver: PathResolver,
        settings_manager: SettingsManager,
        active: ActiveConfigHolder,
        classifier: ConfigClassifier,
        migration_chain: MigrationChain,
    ):
        """Initialize ConfigStore.

        Args:
            path_resolver: Resolves the configs folder
            settings_manager: Remembers the selected config path between runs
            active: Holder the selected configuration is published to
            classifier: Classifies loaded documents
            migration_chain: Upgrades documents on selection
        """
        self.path_resolver = path_resolver
        self.settings_manager = settings_manager
        self.active = active
        self.classifier = classifier
        self.migration_chain = migration_chain
        self.configs_dir = path_resolver.get_configs_dir()

    @property
    def current_config_path(self) -> str | None:
        """Path of the active configuration, if one is selected."""
        return self.active.path

    @property
    def current_config(self) -> Configuration | None:
        """The active configuration, if one is selected."""
        return self.active.configuration

    async def initialize(self) -> None:
        """Bootstrap the configs folder and restore the remembered selection.

        A remembered path whose file is gone is forgotten. A remembered file that
        cannot be loaded is left remembered but nothing is selected.
        """
        await self.bootstrap()

        remembered_path = self.settings_manager.config_file_path
        if remembered_path is None:
            return

        if not await asyncio.to_thread(os.path.isfile, remembered_path):
            logger.info("Previously selected config %s no longer exists", remembered_path)
            self.settings_manager.config_file_path = None
            return

        configuration = await self.load(remembered_path)
        if configuration is None:
            return

        name = Path(remembered_path).stem
        entry = ConfigFileInfo(
            name=name,
            path=remembered_path,
            configuration=configuration,
            state=self.classifier.classify(configuration, name),
        )
        self.select(entry)

    async def bootstrap(self) -> bool:
        """Ensure the configs folder exists, writing the default document if created.

        Returns:
            bool: True if the folder had to be created

        Raises:
            OSError: If the folder or default document cannot be written
        """
        created = await asyncio.to_thread(self._ensure_configs_dir, True)
        if created:
            default = Configuration.default(self.migration_chain.current_version)
            await self.save(self.path_resolver.get_default_config_path(), default)
        return created

    async def list_available(self) -> list[ConfigFileInfo]:
        """Load and classify every file in the configs folder.

        Files are loaded concurrently and reported in directory enumeration
        order.

        Returns:
            list[ConfigFileInfo]: One entry per file, loadable or not
        """
        await asyncio.to_thread(self._ensure_configs_dir, False)
        paths = await asyncio.to_thread(self._enumerate_files)

        configurations = await asyncio.gather(*(self.load(path) for path in paths))

        entries = []
        for path, configuration in zip(paths, configurations):
            name = Path(path).stem
            entries.append(
                ConfigFileInfo(
                    name=name,
                    path=path,
                    configuration=configuration,
                    state=self.classifier.classify(configuration, name),
                )
            )
        return entries

    async def select_by_name(self, name: str) -> ConfigFileInfo | None:
        """Select the config whose display name is ``name``.

        Returns:
            ConfigFileInfo | None: The matching entry (selected only if its state
                allows it), or None when no file has that name
        """
        for entry in await self.list_available():
            if entry.name == name:
                self.select(entry)
                return entry
        return None

    @staticmethod
    def selectable_states() -> frozenset[ConfigState]:
        return SELECTABLE_STATES

    @staticmethod
    def is_selectable(state: ConfigState | None) -> bool:
        return is_selectable(state)

    def select(self, entry: ConfigFileInfo | None) -> bool:
        """Make ``entry`` the active configuration, migrating it first if needed.

        Entries in a non-selectable state are ignored.

        Returns:
            bool: True if the entry was selected
        """
        if entry is None or not self.is_selectable(entry.state):
            return False

        configuration = entry.configuration
        if configuration is None:
            return False

        if entry.state is ConfigState.NEEDS_MIGRATION:
            self.migration_chain.migrate(configuration)
            self._restore_display_order(configuration)
            entry.state = ConfigState.COMPATIBLE

        self.active.set(configuration, entry.path)
        self.settings_manager.config_file_path = entry.path
        logger.info("Selected config %s", entry.name)
        return True

    @staticmethod
    def _restore_display_order(configuration: Configuration) -> None:
        """Re-sort lists whose thresholds a migration may have renumbered."""
        configuration.judgments = canonicalize_judgments(configuration.judgments)
        for field_name in (
            "before_cut_angle_judgments",
            "accuracy_judgments",
            "after_cut_angle_judgments",
        ):
            segments = getattr(configuration, field_name)
            if segments is not None:
                setattr(configuration, field_name, canonicalize_segments(segments))

    def unselect(self) -> None:
        """Clear the active configuration and forget its path."""
        self.active.clear()
        self.settings_manager.config_file_path = None

    async def read(self, path: str | Path) -> LoadResult:
        """Read and deserialize a configuration file.

        Args:
            path: File to read

        Returns:
            LoadResult: Parsed configuration, or why it could not be produced
        """
        await asyncio.to_thread(self._ensure_configs_dir, False)

        try:
            content = await asyncio.to_thread(Path(path).read_bytes)
        except OSError as e:
            logger.warning("Could not read config file %s: %s", path, e)
            return LoadResult(LoadStatus.IO_FAILURE, error=str(e))

        try:
            configuration = Configuration.model_validate_json(content)
        except ValidationError as e:
            # Expected for files in the folder that are not configs
            logger.debug("File %s is not a valid config: %s", path, e)
            return LoadResult(LoadStatus.PARSE_FAILURE, error=str(e))

        return LoadResult(LoadStatus.LOADED, configuration=configuration)

    async def load(self, path: str | Path) -> Configuration | None:
        """Load a configuration file, or None if it cannot be read or parsed."""
        result = await self.read(path)
        return result.configuration

    async def save(self, path: str | Path, configuration: Configuration) -> None:
        """Serialize a configuration to ``path``.

        Raises:
            OSError: If the file cannot be written
        """
        await asyncio.to_thread(self._ensure_configs_dir, False)

        content = configuration.model_dump_json(by_alias=True, indent=2)
        try:
            await asyncio.to_thread(Path(path).write_text, content, encoding="utf-8")
        except OSError:
            logger.exception("Failed to save config to %s", path)
            raise
        logger.debug("Config saved to %s", path)

    def _ensure_configs_dir(self, called_on_init: bool = True) -> bool:
        """Create the configs folder if it is missing.

        Returns:
            bool: True if the folder was created
        """
        if self.configs_dir.is_dir():
            return False

        if not called_on_init:
            logger.warning(
                "Configs folder %s was removed while running, recreating it", self.configs_dir
            )

        try:
            self.configs_dir.mkdir(parents=True, exist_ok=True)
        except OSError:
            logger.exception("Failed to create configs folder %s", self.configs_dir)
            raise
        return True

    def _enumerate_files(self) -> list[str]:
        with os.scandir(self.configs_dir) as entries:
            return [entry.path for entry in entries if entry.is_file()]
