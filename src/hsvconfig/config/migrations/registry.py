"""Ordered registry of configuration migrations."""

import logging
from typing import Protocol

from packaging.version import Version

from hsvconfig.config.migrations.v2_0_0 import Migration_2_0_0
from hsvconfig.config.migrations.v2_1_0 import Migration_2_1_0
from hsvconfig.config.migrations.v2_2_3 import Migration_2_2_3
from hsvconfig.config.models import Configuration
from hsvconfig.config.versioning import format_version, max_version, min_version, parse_version

logger = logging.getLogger(__name__)


class Migration(Protocol):
    """Protocol for a single migration step."""

    version: str

    def apply(self, configuration: Configuration) -> bool:
        """Upgrade the configuration in place."""
        ...


DEFAULT_MIGRATIONS: tuple[Migration, ...] = (
    Migration_2_0_0(),
    Migration_2_1_0(),
    Migration_2_2_3(),
)


class MigrationChain:
    """Applies migration steps to bring documents up to the running version."""

    def __init__(
        self,
        current_version: Version,
        migrations: tuple[Migration, ...] | list[Migration] = DEFAULT_MIGRATIONS,
    ):
        """Initialize the chain.

        Args:
            current_version: Version of the running application; migrated
                documents are stamped with it
            migrations: Steps to register; sorted by version once here

        Raises:
            ValueError: If no steps are given or two steps share a version
        """
        if not migrations:
            raise ValueError("No configuration migrations registered")

        self.current_version = current_version
        self._steps: list[tuple[Version, Migration]] = sorted(
            ((parse_version(m.version), m) for m in migrations), key=lambda step: step[0]
        )

        versions = [version for version, _ in self._steps]
        if len(set(versions)) != len(versions):
            raise ValueError("Duplicate migration versions registered")

        self.minimum_migratable_version = min_version(versions)
        self.maximum_migration_needed_version = max_version(versions)

    @property
    def versions(self) -> list[Version]:
        """Registered migration versions in ascending order."""
        return [version for version, _ in self._steps]

    def pending(self, from_version: Version) -> list[Migration]:
        """Get the steps that apply to a document at ``from_version``.

        Every step keyed at or above the document version is included, so a
        document sitting exactly on a step version gets that step again.
        """
        return [migration for version, migration in self._steps if version >= from_version]

    def migrate(self, configuration: Configuration) -> Configuration:
        """Apply pending steps in ascending order and stamp the current version.

        Steps are best effort; a step reporting False does not stop the chain.

        Args:
            configuration: Document to upgrade in place; must carry a version

        Returns:
            Configuration: The same, now migrated, document
        """
        if configuration.version is None:
            raise ValueError("Cannot migrate a configuration without a version")

        for migration in self.pending(configuration.version):
            if not migration.apply(configuration):
                logger.warning(
                    "Migration %s reported no changes could be applied", migration.version
                )

        logger.info(
            "Migrated configuration from %s to %s",
            format_version(configuration.version),
            format_version(self.current_version),
        )
        configuration.version = self.current_version
        return configuration
