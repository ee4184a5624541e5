"""Migration 2.0.0: introduce the cut angle and accuracy segment lists."""

from hsvconfig.config.models import Configuration, JudgmentSegment


class Migration_2_0_0:  # noqa: N801
    """Give documents from before 2.0.0 a default entry in every segment list."""

    version = "2.0.0"

    def apply(self, configuration: Configuration) -> bool:
        """Populate absent segment lists with the default segment."""
        if configuration.before_cut_angle_judgments is None:
            configuration.before_cut_angle_judgments = [JudgmentSegment.default()]
        if configuration.accuracy_judgments is None:
            configuration.accuracy_judgments = [JudgmentSegment.default()]
        if configuration.after_cut_angle_judgments is None:
            configuration.after_cut_angle_judgments = [JudgmentSegment.default()]
        return True
