"""Tests for the dependency injection container."""

from packaging.version import Version

from hsvconfig.config.store import ConfigStore
from hsvconfig.container import Container


class TestContainer:
    def test_wires_store(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HSV_DATA", str(tmp_path))
        monkeypatch.setenv("HSV_APP_VERSION", "3.1.0")

        container = Container()
        store = container.config_store()

        assert isinstance(store, ConfigStore)
        assert store.configs_dir == tmp_path / "HitScoreVisualizer"
        assert store.migration_chain.current_version == Version("3.1.0")
        assert store.classifier.migration_chain is store.migration_chain
        assert store.active is container.active_config()

    def test_singletons(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HSV_DATA", str(tmp_path))
        container = Container()

        assert container.config_store() is container.config_store()
        assert container.settings_manager() is container.config_store().settings_manager
