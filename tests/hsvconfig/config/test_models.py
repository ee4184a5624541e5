"""Tests for configuration document models."""

import json

import pytest
from packaging.version import Version
from pydantic import ValidationError

from hsvconfig.config.models import (
    ConfigFileInfo,
    Configuration,
    ConfigState,
    Judgment,
    JudgmentSegment,
)


class TestConfiguration:
    """Test Configuration parsing and serialization."""

    def test_parses_camel_case_document(self, judgment_data):
        """Should map camelCase keys onto snake_case attributes."""
        document = {
            "version": "2.2.3",
            "doIntermediateUpdates": False,
            "useFixedPos": True,
            "fixedPosX": 1.5,
            "judgments": [judgment_data(100)],
            "beforeCutAngleJudgments": [{"threshold": 70, "text": "+"}],
            "accuracyJudgments": [{"threshold": 15, "text": "+"}],
            "afterCutAngleJudgments": [{"threshold": 30, "text": "+"}],
        }

        config = Configuration.model_validate_json(json.dumps(document))

        assert config.version == Version("2.2.3")
        assert config.do_intermediate_updates is False
        assert config.use_fixed_pos is True
        assert config.fixed_pos_x == 1.5
        assert config.judgments[0].threshold == 100
        assert config.before_cut_angle_judgments[0].text == "+"
        assert config.accuracy_judgments[0].threshold == 15
        assert config.after_cut_angle_judgments[0].threshold == 30

    def test_missing_fields_take_defaults(self):
        """Should not require optional fields."""
        config = Configuration.model_validate_json('{"version": "2.0.0"}')

        assert config.judgments == []
        assert config.before_cut_angle_judgments is None
        assert config.accuracy_judgments is None
        assert config.after_cut_angle_judgments is None
        assert config.do_intermediate_updates is True

    def test_missing_version_is_none(self, judgment_data):
        """Should load documents without a version."""
        config = Configuration.model_validate({"judgments": [judgment_data(0)]})

        assert config.version is None

    def test_null_judgments_become_empty(self):
        """Should treat a null judgment list as empty."""
        config = Configuration.model_validate({"version": "2.0.0", "judgments": None})

        assert config.judgments == []

    def test_invalid_version_string_fails_parsing(self):
        """Should reject a malformed version string."""
        with pytest.raises(ValidationError):
            Configuration.model_validate({"version": "two point oh"})

    def test_non_object_document_fails_parsing(self):
        """Should reject JSON that is not an object."""
        with pytest.raises(ValidationError):
            Configuration.model_validate_json("[1, 2, 3]")

    def test_unknown_fields_survive_round_trip(self, judgment_data):
        """Should write back fields the models do not know about."""
        document = {
            "version": "2.2.3",
            "timeDependencyDecimalPrecision": 1,
            "judgments": [judgment_data(0, customField="kept")],
            "accuracyJudgments": [{"threshold": 0, "text": "", "note": "also kept"}],
        }

        config = Configuration.model_validate(document)
        dumped = json.loads(config.model_dump_json(by_alias=True))

        assert dumped["timeDependencyDecimalPrecision"] == 1
        assert dumped["judgments"][0]["customField"] == "kept"
        assert dumped["accuracyJudgments"][0]["note"] == "also kept"

    def test_serializes_camel_case_and_version_string(self):
        """Should write camelCase keys and a plain version string."""
        config = Configuration(version=Version("2.1.0"), do_intermediate_updates=False)

        dumped = json.loads(config.model_dump_json(by_alias=True))

        assert dumped["version"] == "2.1.0"
        assert dumped["doIntermediateUpdates"] is False
        assert "do_intermediate_updates" not in dumped

    def test_default_configuration(self):
        """Should build the shipped default document."""
        config = Configuration.default(Version("3.4.0"))

        assert config.version == Version("3.4.0")
        assert config.is_default_config is True
        assert [j.threshold for j in config.judgments] == [115, 101, 90, 80, 60, 0]
        assert config.judgments[0].fade is False
        assert len(config.before_cut_angle_judgments) == 2
        assert len(config.accuracy_judgments) == 2
        assert len(config.after_cut_angle_judgments) == 2


class TestSmallModels:
    def test_default_segment(self):
        segment = JudgmentSegment.default()

        assert segment.threshold == 0
        assert segment.text == ""

    def test_judgment_defaults(self):
        judgment = Judgment(threshold=50)

        assert judgment.color == [1.0, 1.0, 1.0, 1.0]
        assert judgment.fade is False

    def test_config_file_info_defaults_to_broken(self):
        info = ConfigFileInfo(name="cfg", path="/tmp/cfg.json")

        assert info.configuration is None
        assert info.state is ConfigState.BROKEN
