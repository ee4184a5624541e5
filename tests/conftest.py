import json
from pathlib import Path

import pytest
from packaging.version import Version

from hsvconfig.config.active import ActiveConfigHolder
from hsvconfig.config.classifier import ConfigClassifier
from hsvconfig.config.migrations import MigrationChain
from hsvconfig.config.settings import SettingsManager
from hsvconfig.config.store import ConfigStore
from hsvconfig.system.path_resolver import PathResolver

APP_VERSION = Version("3.4.0")


@pytest.fixture
def app_version() -> Version:
    """Version of the running application used throughout the tests."""
    return APP_VERSION


@pytest.fixture
def path_resolver(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> PathResolver:
    """Provide a PathResolver rooted in a temporary data directory.

    The configs folder itself is not created so bootstrap behaviour can be tested.
    """
    monkeypatch.delenv("HSV_SETTINGS", raising=False)
    resolver = PathResolver()
    resolver.data_dir = tmp_path / "data"
    return resolver


@pytest.fixture
def settings_manager(path_resolver: PathResolver) -> SettingsManager:
    return SettingsManager(path_resolver)


@pytest.fixture
def migration_chain(app_version: Version) -> MigrationChain:
    return MigrationChain(app_version)


@pytest.fixture
def classifier(app_version: Version, migration_chain: MigrationChain) -> ConfigClassifier:
    return ConfigClassifier(app_version, migration_chain)


@pytest.fixture
def active_config() -> ActiveConfigHolder:
    return ActiveConfigHolder()


@pytest.fixture
def store(
    path_resolver: PathResolver,
    settings_manager: SettingsManager,
    active_config: ActiveConfigHolder,
    classifier: ConfigClassifier,
    migration_chain: MigrationChain,
) -> ConfigStore:
    """Provide a ConfigStore wired to temporary paths."""
    return ConfigStore(
        path_resolver=path_resolver,
        settings_manager=settings_manager,
        active=active_config,
        classifier=classifier,
        migration_chain=migration_chain,
    )


@pytest.fixture
def judgment_data():
    """Build a raw judgment entry."""

    def _judgment(threshold: int, color=None, fade: bool = False, **extra) -> dict:
        return {
            "threshold": threshold,
            "text": f"%s ({threshold})",
            "color": color if color is not None else [1.0, 1.0, 1.0, 1.0],
            "fade": fade,
            **extra,
        }

    return _judgment


@pytest.fixture
def write_config(path_resolver: PathResolver):
    """Write a raw document into the configs folder and return its path."""

    def _write(name: str, document: dict | str) -> Path:
        configs_dir = path_resolver.get_configs_dir()
        configs_dir.mkdir(parents=True, exist_ok=True)
        path = configs_dir / name
        content = document if isinstance(document, str) else json.dumps(document)
        path.write_text(content)
        return path

    return _write
