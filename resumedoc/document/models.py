"""Pydantic models for the structured resume document.

A document is a title plus an ordered list of sections. Section content is
an open key/value record per entry: there is no fixed field set, and the
semantic role of each key is guessed at render time by the classifier.
"""

import random
import string
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_TITLE = "Untitled Resume"
ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 7

# Insertion order is significant: the generic fallback renders keys in order.
ContentItem = dict[str, str]


def generate_id() -> str:
    """Return a short random section identifier."""
    return "".join(random.choices(ID_ALPHABET, k=ID_LENGTH))


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ", ".join(_as_text(v) for v in value)
    return str(value)


class Section(BaseModel):
    """Named, ordered group of content items."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(default="", alias="section name")
    content: list[ContentItem] = []
    id: str = Field(default_factory=generate_id)

    @field_validator("content", mode="before")
    @classmethod
    def _coerce_values(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return [
            {str(k): _as_text(v) for k, v in item.items()}
            if isinstance(item, dict)
            else item
            for item in value
        ]

    @field_validator("id", mode="before")
    @classmethod
    def _fill_id(cls, value: Any) -> Any:
        return value or generate_id()


class ResumeDocument(BaseModel):
    """Root resume model: a display title and ordered sections."""

    model_config = ConfigDict(extra="ignore")

    title: str = DEFAULT_TITLE
    sections: list[Section] = []

    @field_validator("title", mode="before")
    @classmethod
    def _coerce_title(cls, value: Any) -> Any:
        return DEFAULT_TITLE if value is None else _as_text(value)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)

    @classmethod
    def from_json(cls, text: str) -> "ResumeDocument":
        doc = cls.model_validate_json(text)
        doc.ensure_unique_ids()
        return doc

    def ensure_unique_ids(self) -> None:
        """Regenerate section ids that are empty or already taken."""
        seen: set[str] = set()
        for section in self.sections:
            while not section.id or section.id in seen:
                section.id = generate_id()
            seen.add(section.id)
