"""Compatibility classification of configuration documents."""

from packaging.version import Version

from hsvconfig.config.migrations import MigrationChain
from hsvconfig.config.models import Configuration, ConfigState
from hsvconfig.config.validation import JudgmentValidator

SELECTABLE_STATES = frozenset({ConfigState.NEEDS_MIGRATION, ConfigState.COMPATIBLE})


def is_selectable(state: ConfigState | None) -> bool:
    """Check whether a document in ``state`` may become the active configuration."""
    return state in SELECTABLE_STATES


class ConfigClassifier:
    """Sorts documents into exactly one ConfigState.

    Checks run in a fixed order and the first one that matches wins: missing
    version, newer than the running app, older than any migration, failed
    validation, then whether migration is still needed.
    """

    def __init__(
        self,
        current_version: Version,
        migration_chain: MigrationChain,
        validator: JudgmentValidator | None = None,
    ):
        self.current_version = current_version
        self.migration_chain = migration_chain
        self.validator = validator or JudgmentValidator()

    def classify(self, configuration: Configuration | None, config_name: str) -> ConfigState:
        """Classify a document.

        Validation canonicalizes the document's lists in place, so a document
        classified as selectable is already in display order.

        Args:
            configuration: Loaded document, or None when loading failed
            config_name: Name used in validation diagnostics

        Returns:
            ConfigState: The document's state
        """
        if configuration is None or configuration.version is None:
            return ConfigState.BROKEN

        if configuration.version > self.current_version:
            return ConfigState.NEWER_VERSION

        if configuration.version < self.migration_chain.minimum_migratable_version:
            return ConfigState.INCOMPATIBLE

        if not self.validator.validate(configuration, config_name):
            return ConfigState.VALIDATION_FAILED

        if configuration.version <= self.migration_chain.maximum_migration_needed_version:
            return ConfigState.NEEDS_MIGRATION

        return ConfigState.COMPATIBLE
