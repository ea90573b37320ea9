from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

Range = tuple[float, float]

DEFAULT_EXPERIENCE: Range = (0, 40)
DEFAULT_PAY: Range = (0, 300)
DEFAULT_MIN_HOURS_WEEK: Range = (0, 50)


@dataclass(frozen=True)
class FilterState:
    """Snapshot of the active filter constraints.

    Ranges are inclusive on both bounds. An empty ``languages`` set means no
    language constraint; otherwise a profile must speak every selected one.
    """

    experience: Range = DEFAULT_EXPERIENCE
    pay: Range = DEFAULT_PAY
    min_hours_week: Range = DEFAULT_MIN_HOURS_WEEK
    languages: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def defaults(cls) -> FilterState:
        return cls()

    def with_experience(self, value: Iterable[float]) -> FilterState:
        return replace(self, experience=_as_range(value))

    def with_pay(self, value: Iterable[float]) -> FilterState:
        return replace(self, pay=_as_range(value))

    def with_min_hours_week(self, value: Iterable[float]) -> FilterState:
        return replace(self, min_hours_week=_as_range(value))

    def with_languages(self, value: Iterable[str]) -> FilterState:
        return replace(self, languages=frozenset(value))

    @property
    def active_count(self) -> int:
        defaults = FilterState()
        return sum(
            1
            for name in ("experience", "pay", "min_hours_week", "languages")
            if getattr(self, name) != getattr(defaults, name)
        )


def _as_range(value: Iterable[float]) -> Range:
    # Inverted ranges are kept as given; the query engine treats them as "no matches".
    low, high = value
    return (low, high)
