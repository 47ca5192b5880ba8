"""Tests for settings loading"""

import pytest

from ecopoints.utils.config import ConfigManager, Settings, load_settings
from ecopoints.utils.exceptions import ConfigError


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(str(tmp_path / "nope.yaml"))
    assert settings == Settings()
    assert settings.tracker.max_activities == 100
    assert settings.tracker.reward_threshold == 100
    assert settings.storage.backend == "json"


def test_yaml_values_and_env_substitution(tmp_path, monkeypatch):
    monkeypatch.setenv("ECO_TEST_DIR", str(tmp_path / "store"))
    path = tmp_path / "settings.yaml"
    path.write_text(
        "storage:\n"
        "  backend: memory\n"
        "  data_dir: ${ECO_TEST_DIR}\n"
        "tracker:\n"
        "  max_activities: 20\n"
        "app:\n"
        "  environment: ${ECO_TEST_ENV:staging}\n",
        encoding="utf-8",
    )
    settings = ConfigManager(str(path)).load_settings()
    assert settings.storage.backend == "memory"
    assert settings.storage.data_dir == str(tmp_path / "store")
    assert settings.tracker.max_activities == 20
    assert settings.app.environment == "staging"


def test_config_path_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "custom.yaml"
    path.write_text("security:\n  bcrypt_rounds: 6\n", encoding="utf-8")
    monkeypatch.setenv("ECOPOINTS_CONFIG", str(path))
    assert load_settings().security.bcrypt_rounds == 6


def test_env_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("ECOPOINTS_DATA_DIR", str(tmp_path / "override"))
    monkeypatch.setenv("ECOPOINTS_LOG_LEVEL", "DEBUG")
    settings = load_settings(str(tmp_path / "nope.yaml"))
    assert settings.storage.data_dir == str(tmp_path / "override")
    assert settings.logging.level == "DEBUG"


def test_missing_required_env_var_raises(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("storage:\n  data_dir: ${ECO_TEST_UNSET_VAR}\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="ECO_TEST_UNSET_VAR"):
        load_settings(str(path))


def test_invalid_values_raise_config_error(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("tracker:\n  max_activities: 0\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(str(path))
