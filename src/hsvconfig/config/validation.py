"""Validation and canonicalization of judgment lists.

Every list is ordered highest threshold first before it is checked, which is
the order the renderer walks them in. Validation stops at the first problem and
logs a single warning naming the threshold and the config it was found in.
"""

import logging
from collections.abc import Sequence

from hsvconfig.config.models import Configuration, Judgment, JudgmentSegment

logger = logging.getLogger(__name__)


def canonicalize_judgments(judgments: Sequence[Judgment]) -> list[Judgment]:
    """Return judgments sorted by descending threshold with the top fade cleared.

    The input is left untouched; the top entry is copied before its fade flag
    is switched off because there is no higher band for it to fade towards.
    """
    ordered = sorted(judgments, key=lambda j: j.threshold, reverse=True)
    if ordered and ordered[0].fade:
        ordered[0] = ordered[0].model_copy(update={"fade": False})
    return ordered


def canonicalize_segments(segments: Sequence[JudgmentSegment]) -> list[JudgmentSegment]:
    """Return segments sorted by descending threshold (stable on ties)."""
    return sorted(segments, key=lambda s: s.threshold, reverse=True)


class JudgmentValidator:
    """Checks judgment and segment lists of a configuration."""

    def validate_color(self, judgment: Judgment, config_name: str) -> bool:
        """Check that a judgment color has exactly 4 components in [0, 1]."""
        if len(judgment.color) != 4:
            logger.warning(
                "Judgment for threshold %s has invalid color in %s! "
                "Make sure to include exactly 4 numbers for each judgment's color!",
                judgment.threshold,
                config_name,
            )
            return False

        if all(0.0 <= component <= 1.0 for component in judgment.color):
            return True

        logger.warning(
            "Judgment for threshold %s has invalid color in %s! "
            "Make sure to include exactly 4 numbers between 0 and 1 for each judgment's color!",
            judgment.threshold,
            config_name,
        )
        return False

    def validate_judgments(self, judgments: Sequence[Judgment], config_name: str) -> bool:
        """Validate a canonical (descending, top fade cleared) judgment list.

        Args:
            judgments: Non-empty list as produced by canonicalize_judgments
            config_name: Name used in diagnostics

        Returns:
            bool: False on the first invalid color or duplicate threshold
        """
        previous = judgments[0]
        if not self.validate_color(previous, config_name):
            return False

        for current in judgments[1:]:
            if current.threshold == previous.threshold:
                logger.warning(
                    "Duplicate entry found for threshold %s in %s", current.threshold, config_name
                )
                return False
            if not self.validate_color(current, config_name):
                return False
            previous = current

        return True

    def validate_segment_list(
        self, segments: Sequence[JudgmentSegment], config_name: str
    ) -> bool:
        """Reject adjacent duplicate thresholds in a descending segment list."""
        for previous, current in zip(segments, segments[1:]):
            if current.threshold == previous.threshold:
                logger.warning(
                    "Duplicate entry found for threshold %s in %s", current.threshold, config_name
                )
                return False
        return True

    def validate(self, configuration: Configuration, config_name: str) -> bool:
        """Canonicalize and validate every list of a configuration.

        The canonical lists are written back onto ``configuration`` as they are
        produced, judgments first and then the before cut angle, accuracy and
        after cut angle segments.

        Args:
            configuration: Document to check; its lists are replaced in order
            config_name: Name used in diagnostics

        Returns:
            bool: True when the document passes every check
        """
        if not configuration.judgments:
            logger.warning("No judgments found for %s", config_name)
            return False

        configuration.judgments = canonicalize_judgments(configuration.judgments)
        if not self.validate_judgments(configuration.judgments, config_name):
            return False

        for field_name in (
            "before_cut_angle_judgments",
            "accuracy_judgments",
            "after_cut_angle_judgments",
        ):
            segments = getattr(configuration, field_name)
            if segments is None:
                continue
            segments = canonicalize_segments(segments)
            setattr(configuration, field_name, segments)
            if not self.validate_segment_list(segments, config_name):
                return False

        return True
