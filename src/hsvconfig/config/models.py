"""Configuration document models for HitScoreVisualizer.

Documents are JSON with camelCase keys. Python attributes are snake_case and
fields the models do not know about are kept so they survive a save.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from packaging.version import Version
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

from hsvconfig.config.versioning import format_version, parse_version

_DOCUMENT_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="allow",
)


class JudgmentSegment(BaseModel):
    """Threshold-keyed entry of the cut angle and accuracy lists."""

    model_config = _DOCUMENT_MODEL_CONFIG

    threshold: int = 0
    text: str = ""

    @classmethod
    def default(cls) -> "JudgmentSegment":
        """Single catch-all segment inserted when a document has none."""
        return cls(threshold=0, text="")


class Judgment(BaseModel):
    """Score band shown for hits at or above ``threshold``."""

    model_config = _DOCUMENT_MODEL_CONFIG

    threshold: int = 0
    text: str = ""
    color: list[float] = Field(default_factory=lambda: [1.0, 1.0, 1.0, 1.0])
    fade: bool = False


class Configuration(BaseModel):
    """A user-authored HitScoreVisualizer configuration document."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        arbitrary_types_allowed=True,
    )

    version: Version | None = None
    is_default_config: bool = False
    display_mode: str = "format"
    use_fixed_pos: bool = False
    fixed_pos_x: float = 0.0
    fixed_pos_y: float = 0.0
    fixed_pos_z: float = 0.0
    do_intermediate_updates: bool = True

    judgments: list[Judgment] = Field(default_factory=list)
    before_cut_angle_judgments: list[JudgmentSegment] | None = None
    accuracy_judgments: list[JudgmentSegment] | None = None
    after_cut_angle_judgments: list[JudgmentSegment] | None = None

    @field_validator("version", mode="before")
    @classmethod
    def parse_document_version(cls, v: Any) -> Version | None:
        """Accept "major.minor.patch" strings; anything else is a parse error."""
        if v is None:
            return None
        return parse_version(v)

    @field_validator("judgments", mode="before")
    @classmethod
    def default_missing_judgments(cls, v: Any) -> Any:
        """Treat an explicit null like a missing list."""
        return [] if v is None else v

    @field_serializer("version")
    def serialize_version(self, version: Version | None) -> str | None:
        """Write the version back as a plain triple."""
        return format_version(version) if version is not None else None

    @classmethod
    def default(cls, version: Version) -> "Configuration":
        """Build the configuration shipped as the default document.

        Args:
            version: Version stamped on the document (the running app version)
        """
        return cls(
            version=version,
            is_default_config=True,
            display_mode="format",
            do_intermediate_updates=True,
            judgments=[
                Judgment(threshold=115, text="%BFantastic%A%n%s", color=[1.0, 1.0, 1.0, 1.0]),
                Judgment(
                    threshold=101,
                    text="<size=80%>%BExcellent</size>%A%n%s",
                    color=[0.0, 1.0, 0.0, 1.0],
                    fade=True,
                ),
                Judgment(
                    threshold=90,
                    text="<size=80%>%BGreat</size>%A%n%s",
                    color=[1.0, 0.980392158, 0.0, 1.0],
                    fade=True,
                ),
                Judgment(
                    threshold=80,
                    text="<size=80%>%BGood</size>%A%n%s",
                    color=[1.0, 0.6, 0.0, 1.0],
                    fade=True,
                ),
                Judgment(
                    threshold=60,
                    text="<size=80%>%BDecent</size>%A%n%s",
                    color=[1.0, 0.0, 0.0, 1.0],
                    fade=True,
                ),
                Judgment(
                    threshold=0,
                    text="<size=120%>%BWay Off</size>%A%n%s",
                    color=[0.5, 0.0, 0.0, 1.0],
                    fade=True,
                ),
            ],
            before_cut_angle_judgments=[
                JudgmentSegment(threshold=70, text="+"),
                JudgmentSegment(threshold=0, text=" "),
            ],
            accuracy_judgments=[
                JudgmentSegment(threshold=15, text="+"),
                JudgmentSegment(threshold=0, text=" "),
            ],
            after_cut_angle_judgments=[
                JudgmentSegment(threshold=30, text="+"),
                JudgmentSegment(threshold=0, text=" "),
            ],
        )


class ConfigState(str, Enum):
    """Compatibility classification of a configuration document."""

    BROKEN = "broken"
    NEWER_VERSION = "newer_version"
    INCOMPATIBLE = "incompatible"
    VALIDATION_FAILED = "validation_failed"
    NEEDS_MIGRATION = "needs_migration"
    COMPATIBLE = "compatible"


@dataclass
class ConfigFileInfo:
    """A configuration file found on disk together with its classification."""

    name: str
    path: str
    configuration: Configuration | None = None
    state: ConfigState = ConfigState.BROKEN
