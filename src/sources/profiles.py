from __future__ import annotations

import json
import logging
import math
from pathlib import Path

import yaml

from src.models.profile import Profile

logger = logging.getLogger(__name__)

DEFAULT_PROFILES_PATH = Path(__file__).resolve().parent.parent.parent / "data" / "profiles.json"

_NUMERIC_FIELDS = ("experience", "pay", "min_hours_week")
_TEXT_FIELDS = ("name", "employer", "college", "location", "bio")
_TAG_FIELDS = ("skills", "languages")


class ProfileDataError(ValueError):
    pass


def _read_json(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))


def _read_yaml(path: Path):
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_profiles(path: Path | str = DEFAULT_PROFILES_PATH) -> list[Profile]:
    path = Path(path)
    readers = {
        ".json": _read_json,
        ".yaml": _read_yaml,
        ".yml": _read_yaml,
    }
    reader = readers.get(path.suffix.lower())
    if reader is None:
        raise ValueError(f"Unsupported profile file type: {path.suffix}. Use JSON or YAML.")

    if not path.exists():
        logger.warning("Profile data file %s not found, starting with an empty directory", path)
        return []

    try:
        data = reader(path)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ProfileDataError(f"Could not parse {path.name}: {e}") from e

    if isinstance(data, dict):
        data = data.get("profiles")
    if data is None:
        data = []
    if not isinstance(data, list):
        raise ProfileDataError(f"{path.name} must contain a list of profiles")

    profiles = [_build_profile(record, index) for index, record in enumerate(data)]
    _check_unique_ids(profiles)
    logger.info("Loaded %d profiles from %s", len(profiles), path)
    return profiles


def _build_profile(record, index: int) -> Profile:
    if not isinstance(record, dict):
        raise ProfileDataError(f"Profile #{index} is not a mapping")
    for key in ("id", "name"):
        if record.get(key) in (None, ""):
            raise ProfileDataError(f"Profile #{index} is missing '{key}'")

    pid = record["id"]
    for key in _TEXT_FIELDS:
        value = record.get(key, "")
        if not isinstance(value, str):
            raise ProfileDataError(f"Profile {pid!r}: '{key}' must be text, got {value!r}")
    for key in _TAG_FIELDS:
        value = record.get(key)
        if value is None:
            continue
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ProfileDataError(f"Profile {pid!r}: '{key}' must be a list of strings, got {value!r}")

    profile = Profile.from_dict(record)
    for name in _NUMERIC_FIELDS:
        value = getattr(profile, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
            raise ProfileDataError(f"Profile {profile.id!r}: '{name}' must be a number, got {value!r}")
        if value < 0:
            raise ProfileDataError(f"Profile {profile.id!r}: '{name}' must not be negative")
    return profile


def _check_unique_ids(profiles: list[Profile]) -> None:
    seen: set[str] = set()
    for p in profiles:
        if p.id in seen:
            raise ProfileDataError(f"Duplicate profile id: {p.id!r}")
        seen.add(p.id)
