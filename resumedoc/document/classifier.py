"""Heuristic field classification for open content items.

Each semantic role is matched by case-insensitive substring search over the
item's keys. Roles are searched independently and keys are never marked as
consumed, so a key such as "degree-title" fills both the title and the
degree role.
"""

from dataclasses import dataclass, fields

from resumedoc.document.models import ContentItem


ROLE_PATTERNS: dict[str, tuple[str, ...]] = {
    "title": ("title", "position"),
    "organization": ("organization", "company"),
    "duration": ("duration", "period", "date"),
    "description": ("description", "summary"),
    "degree": ("degree", "education"),
    "gpa": ("gpa", "grade"),
    "category": ("category", "type"),
    "skills": ("skills", "abilities"),
}


@dataclass
class FieldRoles:
    """Matched key per semantic role, or None when no key matched."""

    title: str | None = None
    organization: str | None = None
    duration: str | None = None
    description: str | None = None
    degree: str | None = None
    gpa: str | None = None
    category: str | None = None
    skills: str | None = None

    @property
    def template(self) -> str:
        """Name of the per-item rendering template these roles select."""
        if self.title:
            return "experience"
        if self.degree:
            return "education"
        if self.category and self.skills:
            return "skills"
        return "generic"

    def value(self, item: ContentItem, role: str) -> str:
        key = getattr(self, role)
        if key is None:
            return ""
        return item.get(key) or ""

    def matched(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name)}


def find_key(item: ContentItem, patterns: tuple[str, ...]) -> str | None:
    for key in item:
        lowered = key.lower()
        if any(p in lowered for p in patterns):
            return key
    return None


def classify(item: ContentItem) -> FieldRoles:
    return FieldRoles(**{role: find_key(item, p) for role, p in ROLE_PATTERNS.items()})
