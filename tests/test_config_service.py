import json
import sys
from pathlib import Path

import pytest
import yaml

sys.path.append(str(Path(__file__).resolve().parents[1]))

from caelus import config_service, path_utils  # noqa: E402
from caelus.config_service import ConfigError, load_config, save_config  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in list(config_service.os.environ):
        if key.startswith("CAELUS"):
            monkeypatch.delenv(key, raising=False)


def test_missing_file_uses_defaults(tmp_path):
    loaded = load_config(tmp_path / "absent.yaml")

    assert loaded.data == config_service.DEFAULT_CONFIG
    assert loaded.warnings == []
    assert loaded.get("generation.image_model") == "dall-e-3"


def test_yaml_file_overrides_defaults_and_reports_unknown_fields(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "generation:\n  chat_model: gpt-4o\n  seed: 7\nlogging:\n  level: DEBUG\n",
        encoding="utf-8",
    )

    loaded = load_config(path)

    assert loaded.get("generation.chat_model") == "gpt-4o"
    assert loaded.get("generation.image_model") == "dall-e-3"
    assert loaded.get("logging.level") == "DEBUG"
    assert any("generation.seed" in warning for warning in loaded.warnings)


def test_json_file_is_accepted(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"storage": {"profile_path": "/tmp/profile.json"}}), encoding="utf-8")

    assert load_config(path).get("storage.profile_path") == "/tmp/profile.json"


def test_non_mapping_root_is_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_env_overrides_are_coerced(tmp_path, monkeypatch):
    monkeypatch.setenv("CAELUS__GENERATION__TEMPERATURE", "0.3")
    monkeypatch.setenv("CAELUS__GENERATION__ANALYSIS_MAX_TOKENS", "800")

    loaded = load_config(tmp_path / "absent.yaml")

    assert loaded.get("generation.temperature") == 0.3
    assert loaded.get("generation.analysis_max_tokens") == 800
    assert len(loaded.warnings) == 2


def test_default_config_path_follows_env(tmp_path, monkeypatch):
    monkeypatch.setenv("CAELUS_CONFIG_DIR", str(tmp_path))
    (tmp_path / "config.yaml").write_text("logging:\n  level: WARNING\n", encoding="utf-8")

    assert path_utils.get_config_file() == tmp_path / "config.yaml"
    assert load_config().get("logging.level") == "WARNING"


def test_save_config_round_trips_yaml(tmp_path):
    path = tmp_path / "nested" / "config.yaml"

    save_config(config_service.DEFAULT_CONFIG, path)

    assert yaml.safe_load(path.read_text(encoding="utf-8")) == config_service.DEFAULT_CONFIG


def test_profile_path_env_override(tmp_path, monkeypatch):
    monkeypatch.setenv("CAELUS_PROFILE_PATH", str(tmp_path / "p.json"))

    assert path_utils.get_profile_path() == tmp_path / "p.json"


@pytest.mark.parametrize(
    "value, expected",
    [(10, 10), ("10", 10), ("debug", "DEBUG"), (" Warning ", "WARNING")],
)
def test_resolve_log_level(value, expected):
    assert config_service.resolve_log_level(value) == expected


def test_numeric_env_log_level_resolves(tmp_path, monkeypatch):
    monkeypatch.setenv("CAELUS__LOGGING__LEVEL", "10")

    level = load_config(tmp_path / "absent.yaml").get("logging.level")

    assert level == 10
    assert config_service.resolve_log_level(level) == 10


def test_unknown_log_level_is_a_config_error():
    with pytest.raises(ConfigError, match="Unknown logging level"):
        config_service.resolve_log_level("chatty")
