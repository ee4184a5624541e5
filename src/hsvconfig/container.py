"""Dependency injection container for hsvconfig."""

from dependency_injector import containers, providers

from hsvconfig.config.active import ActiveConfigHolder
from hsvconfig.config.classifier import ConfigClassifier
from hsvconfig.config.migrations import MigrationChain
from hsvconfig.config.settings import SettingsManager
from hsvconfig.config.store import ConfigStore
from hsvconfig.config.validation import JudgmentValidator
from hsvconfig.config.versioning import get_app_version
from hsvconfig.system.path_resolver import PathResolver


class Container(containers.DeclarativeContainer):
    """Application dependency injection container.

    Everything is a singleton: there is one configs folder, one remembered
    selection and one active configuration per process.
    """

    path_resolver = providers.Singleton(PathResolver)

    app_version = providers.Singleton(get_app_version)

    settings_manager = providers.Singleton(
        SettingsManager,
        path_resolver=path_resolver,
    )

    active_config = providers.Singleton(ActiveConfigHolder)

    migration_chain = providers.Singleton(
        MigrationChain,
        current_version=app_version,
    )

    validator = providers.Singleton(JudgmentValidator)

    classifier = providers.Singleton(
        ConfigClassifier,
        current_version=app_version,
        migration_chain=migration_chain,
        validator=validator,
    )

    config_store = providers.Singleton(
        ConfigStore,
        path_resolver=path_resolver,
        settings_manager=settings_manager,
        active=active_config,
        classifier=classifier,
        migration_chain=migration_chain,
    )
