from __future__ import annotations

import logging
from typing import Iterable

from src.matching.query import filter_profiles
from src.models.filters import FilterState
from src.models.profile import Profile

logger = logging.getLogger(__name__)


class FilterController:
    """Owns the filter snapshot and search term for one browsing session.

    Each setter swaps in a new immutable ``FilterState``. The only cross-field
    side effect: when the language selection goes from non-empty to empty, the
    search term is cleared as well.
    """

    def __init__(self, filters: FilterState | None = None, search_term: str = ""):
        self.filters = filters or FilterState.defaults()
        self.search_term = search_term

    def set_search_term(self, term: str) -> None:
        self.search_term = term or ""
        logger.debug("search term set to %r", self.search_term)

    def set_experience(self, value: Iterable[float]) -> None:
        self.filters = self.filters.with_experience(value)
        logger.debug("experience filter set to %s", self.filters.experience)

    def set_pay(self, value: Iterable[float]) -> None:
        self.filters = self.filters.with_pay(value)
        logger.debug("pay filter set to %s", self.filters.pay)

    def set_min_hours_week(self, value: Iterable[float]) -> None:
        self.filters = self.filters.with_min_hours_week(value)
        logger.debug("min hours/week filter set to %s", self.filters.min_hours_week)

    def set_languages(self, value: Iterable[str]) -> None:
        had_languages = bool(self.filters.languages)
        self.filters = self.filters.with_languages(value)
        logger.debug("language filter set to %s", sorted(self.filters.languages))
        if had_languages and not self.filters.languages:
            self._clear_search()

    def reset_to_defaults(self) -> None:
        self.filters = FilterState.defaults()
        self._clear_search()
        logger.debug("filters reset to defaults")

    def apply(self, profiles: Iterable[Profile]) -> list[Profile]:
        return filter_profiles(profiles, self.search_term, self.filters)

    def _clear_search(self) -> None:
        if self.search_term:
            logger.debug("clearing search term %r", self.search_term)
        self.search_term = ""

    def __repr__(self) -> str:
        return f"<FilterController search={self.search_term!r} filters={self.filters!r}>"
