from __future__ import annotations

from dataclasses import dataclass, field

# Source data uses camelCase for this one field.
_KEY_ALIASES = {
    "minHoursWeek": "min_hours_week",
}


@dataclass(frozen=True)
class Profile:
    id: str
    name: str
    employer: str = ""
    college: str = ""
    location: str = ""
    bio: str = ""
    experience: float = 0
    pay: float = 0  # per hour
    min_hours_week: float = 0
    skills: tuple[str, ...] = ()  # display order matters
    languages: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "skills", tuple(self.skills))
        object.__setattr__(self, "languages", frozenset(self.languages))

    def skills_lower(self) -> list[str]:
        return [s.lower() for s in self.skills]

    @classmethod
    def from_dict(cls, data: dict) -> Profile:
        d = {_KEY_ALIASES.get(k, k): v for k, v in data.items()}
        if "id" in d:
            d["id"] = str(d["id"])
        d["skills"] = d.get("skills") or ()
        d["languages"] = d.get("languages") or ()
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})
