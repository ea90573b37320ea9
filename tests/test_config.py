from pathlib import Path

import pytest

from src.config import LOG_LEVEL_ENV, PROFILES_PATH_ENV, ROOT_DIR, Settings, load_settings


def test_missing_config_uses_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv(PROFILES_PATH_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    settings = load_settings(tmp_path / "missing.yaml")
    assert settings == Settings()


def test_yaml_values_and_relative_path(tmp_path, monkeypatch):
    monkeypatch.delenv(PROFILES_PATH_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    cfg = tmp_path / "directory.yaml"
    cfg.write_text(
        "profiles_path: data/other.json\n"
        "cards_per_row: 2\n"
        "unknown_key: ignored\n",
        encoding="utf-8",
    )
    settings = load_settings(cfg)
    assert settings.profiles_path == ROOT_DIR / "data" / "other.json"
    assert settings.cards_per_row == 2
    assert settings.pay_max == 300


def test_empty_yaml(tmp_path, monkeypatch):
    monkeypatch.delenv(PROFILES_PATH_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    cfg = tmp_path / "directory.yaml"
    cfg.write_text("", encoding="utf-8")
    assert load_settings(cfg) == Settings()


def test_env_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv(PROFILES_PATH_ENV, str(tmp_path / "p.yaml"))
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    settings = load_settings(tmp_path / "missing.yaml")
    assert settings.profiles_path == Path(tmp_path / "p.yaml")
    assert settings.log_level == "DEBUG"


def test_slider_limit_below_default_range_rejected(tmp_path, monkeypatch):
    monkeypatch.delenv(PROFILES_PATH_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    cfg = tmp_path / "directory.yaml"
    cfg.write_text("experience_max: 30\n", encoding="utf-8")
    with pytest.raises(ValueError, match="experience_max"):
        load_settings(cfg)


def test_slider_limits_may_widen_default_range(tmp_path, monkeypatch):
    monkeypatch.delenv(PROFILES_PATH_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    cfg = tmp_path / "directory.yaml"
    cfg.write_text("pay_max: 500\nhours_max: 50\n", encoding="utf-8")
    settings = load_settings(cfg)
    assert settings.pay_max == 500
    assert settings.hours_max == 50
