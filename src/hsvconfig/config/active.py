"""Holder for the configuration currently driving the display."""

from hsvconfig.config.models import Configuration


class ActiveConfigHolder:
    """Owns the active configuration and the path it was loaded from.

    Both values always change together. Readers use the properties; only
    ConfigStore writes through ``set`` and ``clear``.
    """

    def __init__(self) -> None:
        self._configuration: Configuration | None = None
        self._path: str | None = None

    @property
    def configuration(self) -> Configuration | None:
        return self._configuration

    @property
    def path(self) -> str | None:
        return self._path

    def set(self, configuration: Configuration, path: str) -> None:
        self._configuration = configuration
        self._path = path

    def clear(self) -> None:
        self._configuration = None
        self._path = None
