"""Migration 2.1.0: renumber thresholds after the max score changed to 115."""

from hsvconfig.config.models import Configuration

# Legacy threshold -> current threshold
JUDGMENT_THRESHOLDS = {110: 115}
ACCURACY_THRESHOLDS = {10: 15}


class Migration_2_1_0:  # noqa: N801
    """Rewrite legacy threshold literals in judgments and accuracy segments."""

    version = "2.1.0"

    def apply(self, configuration: Configuration) -> bool:
        """Rewrite the old top judgment and accuracy thresholds."""
        for judgment in configuration.judgments:
            judgment.threshold = JUDGMENT_THRESHOLDS.get(judgment.threshold, judgment.threshold)

        for segment in configuration.accuracy_judgments or []:
            segment.threshold = ACCURACY_THRESHOLDS.get(segment.threshold, segment.threshold)

        return True
