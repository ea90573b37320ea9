from __future__ import annotations

import logging
from typing import Iterable

from src.models.filters import FilterState, Range
from src.models.profile import Profile

logger = logging.getLogger(__name__)


def filter_profiles(
    profiles: Iterable[Profile],
    search_term: str,
    filters: FilterState,
) -> list[Profile]:
    """Return the profiles matching the search term and every filter, in input order."""
    term = search_term.lower()
    filtered = []
    for p in profiles:
        if not _matches_search(p, term):
            continue
        if not _in_range(p.experience, filters.experience):
            continue
        if not _in_range(p.pay, filters.pay):
            continue
        if not _in_range(p.min_hours_week, filters.min_hours_week):
            continue
        if not _matches_languages(p, filters.languages):
            continue
        filtered.append(p)

    logger.debug("filter_profiles term=%r kept %d profiles", search_term, len(filtered))
    return filtered


def _matches_search(profile: Profile, term: str) -> bool:
    if not term:
        return True
    if term in profile.name.lower():
        return True
    return any(term in skill for skill in profile.skills_lower())


def _in_range(value: float, bounds: Range) -> bool:
    low, high = bounds
    return low <= value <= high


def _matches_languages(profile: Profile, wanted: frozenset[str]) -> bool:
    if not wanted:
        return True
    # All selected languages are required, not just one of them.
    return wanted <= profile.languages
