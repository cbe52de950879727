"""Unit tests for GradingConfig."""

import pytest

from harakat_toolkit.grading.config import GradingConfig


class TestGradingConfig:
    """Tests for GradingConfig dataclass."""

    def test_defaults(self):
        config = GradingConfig()

        assert config.leading_policy == "discard"
        assert config.trim_response is True

    def test_create_when_unknown_policy_then_raises(self):
        with pytest.raises(ValueError, match="leading_policy"):
            GradingConfig(leading_policy="ignore")

    def test_from_dict_when_partial_then_defaults_filled(self):
        config = GradingConfig.from_dict({"leading_policy": "reject", "other": 1})

        assert config == GradingConfig(leading_policy="reject", trim_response=True)

    def test_config_is_immutable(self):
        config = GradingConfig()
        with pytest.raises(AttributeError):
            config.leading_policy = "reject"
