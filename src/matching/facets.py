from __future__ import annotations

from typing import Iterable

from src.models.profile import Profile


def extract_languages(profiles: Iterable[Profile]) -> set[str]:
    """Distinct languages across all profiles. Order is not meaningful."""
    return {lang for p in profiles for lang in p.languages}


def sorted_languages(profiles: Iterable[Profile]) -> list[str]:
    return sorted(extract_languages(profiles), key=lambda lang: (lang.lower(), lang))
