"""Tests for configuration loading."""

import json

import pytest

from date_planner.core.planner_core.config import PlannerConfig, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove planner variables from the environment."""
    for name in (
        "DATE_PLANNER_SEED",
        "DATE_PLANNER_SAMPLE_DATA",
        "DATE_PLANNER_LOG_LEVEL",
        "DATE_PLANNER_CONFIG",
    ):
        monkeypatch.delenv(name, raising=False)


class TestPlannerConfig:
    """Test configuration sources and precedence."""

    def test_defaults_without_file(self, tmp_path):
        """Test defaults when nothing is configured."""
        config = load_config(tmp_path / "missing.json")

        assert config.seed is None
        assert config.load_sample_data is True
        assert config.log_level == "WARNING"

    def test_environment_values(self, tmp_path, monkeypatch):
        """Test environment overrides."""
        monkeypatch.setenv("DATE_PLANNER_SEED", "42")
        monkeypatch.setenv("DATE_PLANNER_SAMPLE_DATA", "no")
        monkeypatch.setenv("DATE_PLANNER_LOG_LEVEL", "debug")

        config = load_config(tmp_path / "missing.json")

        assert config.seed == 42
        assert config.load_sample_data is False
        assert config.log_level == "DEBUG"

    def test_bad_seed_is_ignored(self, tmp_path, monkeypatch):
        """Test a non-integer seed falls back to the default."""
        monkeypatch.setenv("DATE_PLANNER_SEED", "abc")
        assert load_config(tmp_path / "missing.json").seed is None

    def test_file_overrides_environment(self, tmp_path, monkeypatch):
        """Test file values win and unknown keys are ignored."""
        monkeypatch.setenv("DATE_PLANNER_SEED", "1")
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"seed": 9, "date_format": "%Y-%m-%d", "theme": "dark"}))

        config = load_config(path)

        assert config.seed == 9
        assert config.date_format == "%Y-%m-%d"
        assert not hasattr(config, "theme")

    def test_config_path_from_environment(self, tmp_path, monkeypatch):
        """Test DATE_PLANNER_CONFIG points at the file."""
        path = tmp_path / "planner.json"
        path.write_text(json.dumps({"load_sample_data": False}))
        monkeypatch.setenv("DATE_PLANNER_CONFIG", str(path))

        assert load_config().load_sample_data is False

    def test_unreadable_file_keeps_defaults(self, tmp_path):
        """Test broken JSON is logged and skipped."""
        path = tmp_path / "config.json"
        path.write_text("{not json")

        assert load_config(path) == PlannerConfig()

    def test_dict_round_trip(self):
        """Test from_dict ignores unknown keys."""
        config = PlannerConfig.from_dict({"seed": 5, "unknown": True})
        assert config.seed == 5
        assert PlannerConfig.from_dict(config.to_dict()) == config

    def test_non_object_file_keeps_defaults(self, tmp_path):
        """Test valid JSON that is not an object is skipped."""
        path = tmp_path / "config.json"
        path.write_text("[]")

        assert load_config(path) == PlannerConfig()
