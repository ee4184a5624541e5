"""Migration 2.2.3: intermediate score updates are on by default."""

from hsvconfig.config.models import Configuration


class Migration_2_2_3:  # noqa: N801
    version = "2.2.3"

    def apply(self, configuration: Configuration) -> bool:
        configuration.do_intermediate_updates = True
        return True
