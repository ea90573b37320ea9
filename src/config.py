from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from src.models.filters import DEFAULT_EXPERIENCE, DEFAULT_MIN_HOURS_WEEK, DEFAULT_PAY

logger = logging.getLogger(__name__)

ROOT_DIR = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_PATH = ROOT_DIR / "data" / "directory.yaml"

PROFILES_PATH_ENV = "PROFILE_DIRECTORY_DATA"
LOG_LEVEL_ENV = "PROFILE_DIRECTORY_LOG_LEVEL"


@dataclass
class Settings:
    profiles_path: Path = ROOT_DIR / "data" / "profiles.json"
    log_level: str = "INFO"
    page_title: str = "Talent Directory"
    cards_per_row: int = 3
    max_card_skills: int = 4
    # Slider limits; may widen the default filter ranges but never cut into them.
    experience_max: int = DEFAULT_EXPERIENCE[1]
    pay_max: int = DEFAULT_PAY[1]
    hours_max: int = DEFAULT_MIN_HOURS_WEEK[1]

    @classmethod
    def from_dict(cls, data: dict) -> Settings:
        d = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        if "profiles_path" in d:
            path = Path(d["profiles_path"])
            d["profiles_path"] = path if path.is_absolute() else ROOT_DIR / path
        return cls(**d)


def load_settings(config_path: Path | str = DEFAULT_CONFIG_PATH) -> Settings:
    config_path = Path(config_path)
    data: dict = {}
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    else:
        logger.info("No config at %s, using defaults", config_path)

    settings = Settings.from_dict(data)

    if os.environ.get(PROFILES_PATH_ENV):
        settings.profiles_path = Path(os.environ[PROFILES_PATH_ENV])
    if os.environ.get(LOG_LEVEL_ENV):
        settings.log_level = os.environ[LOG_LEVEL_ENV].upper()
    _check_slider_limits(settings)
    return settings


def _check_slider_limits(settings: Settings) -> None:
    limits = {
        "experience_max": DEFAULT_EXPERIENCE[1],
        "pay_max": DEFAULT_PAY[1],
        "hours_max": DEFAULT_MIN_HOURS_WEEK[1],
    }
    for name, default_max in limits.items():
        value = getattr(settings, name)
        if value < default_max:
            raise ValueError(
                f"{name} ({value}) is below the default filter maximum {default_max}"
            )
