"""In-place editing of a resume document.

Mirrors the form editor's operations: field edits, add/delete, copy/paste
through a one-slot clipboard, and the drag-and-drop reorder contract for
sections and content items.
"""

import copy
from dataclasses import dataclass

from resumedoc.document.models import ContentItem, ResumeDocument, Section, generate_id
from resumedoc.document.templates import new_item, new_section
from resumedoc.shared import (
    ClipboardError,
    FieldNotFoundError,
    IndexOutOfRangeError,
    LastFieldError,
)


NEW_FIELD_NAME = "New Field"


@dataclass
class Clipboard:
    """Last copied section or content item."""

    kind: str | None = None
    data: Section | ContentItem | None = None


class ResumeEditor:
    """Applies editing operations to a document it holds by reference."""

    def __init__(self, doc: ResumeDocument):
        self.doc = doc
        self.clipboard = Clipboard()

    def _section(self, index: int) -> Section:
        if not 0 <= index < len(self.doc.sections):
            raise IndexOutOfRangeError("section", index, len(self.doc.sections))
        return self.doc.sections[index]

    def _item(self, section_index: int, item_index: int) -> ContentItem:
        content = self._section(section_index).content
        if not 0 <= item_index < len(content):
            raise IndexOutOfRangeError("content item", item_index, len(content))
        return content[item_index]

    def set_title(self, title: str) -> None:
        self.doc.title = title

    def rename_section(self, index: int, name: str) -> None:
        self._section(index).name = name

    def set_field(self, section_index: int, item_index: int, key: str, value: str) -> None:
        self._item(section_index, item_index)[key] = value

    def rename_field(self, section_index: int, item_index: int, old: str, new: str) -> None:
        """Rename a key in place, keeping its position in the item."""
        item = self._item(section_index, item_index)
        if old not in item:
            raise FieldNotFoundError(old)
        if not new.strip() or new == old:
            return

        renamed = {(new if key == old else key): value for key, value in item.items()}
        item.clear()
        item.update(renamed)

    def add_field(self, section_index: int, item_index: int) -> None:
        self._item(section_index, item_index)[NEW_FIELD_NAME] = ""

    def delete_field(self, section_index: int, item_index: int, key: str) -> None:
        item = self._item(section_index, item_index)
        if key not in item:
            raise FieldNotFoundError(key)
        if len(item) <= 1:
            raise LastFieldError(key)
        del item[key]

    def add_section(self) -> Section:
        section = new_section()
        self.doc.sections.append(section)
        return section

    def delete_section(self, index: int) -> Section:
        self._section(index)
        return self.doc.sections.pop(index)

    def add_item(self, section_index: int) -> ContentItem:
        item = new_item()
        self._section(section_index).content.append(item)
        return item

    def delete_item(self, section_index: int, item_index: int) -> ContentItem:
        self._item(section_index, item_index)
        content = self._section(section_index).content
        removed = content.pop(item_index)
        if not content:
            content.append(new_item())
        return removed

    def copy_section(self, index: int) -> None:
        section = self._section(index).model_copy(deep=True)
        section.id = generate_id()
        self.clipboard = Clipboard(kind="section", data=section)

    def copy_item(self, section_index: int, item_index: int) -> None:
        item = dict(self._item(section_index, item_index))
        self.clipboard = Clipboard(kind="content", data=item)

    def paste_section(self, after: int) -> Section:
        """Insert the copied section after ``after`` (-1 inserts at the top)."""
        if self.clipboard.kind != "section":
            raise ClipboardError("section", self.clipboard.kind)
        section = self.clipboard.data.model_copy(deep=True)
        taken = {s.id for s in self.doc.sections}
        while section.id in taken:
            section.id = generate_id()
        self.doc.sections.insert(after + 1, section)
        return section

    def paste_item(self, section_index: int, after: int) -> ContentItem:
        if self.clipboard.kind != "content":
            raise ClipboardError("content item", self.clipboard.kind)
        item = copy.deepcopy(self.clipboard.data)
        self._section(section_index).content.insert(after + 1, item)
        return item

    def move_section(self, source: int, destination: int) -> None:
        self._section(source)
        section = self.doc.sections.pop(source)
        self.doc.sections.insert(destination, section)

    def move_item(
        self,
        source_section: int,
        source_index: int,
        dest_section: int,
        dest_index: int,
    ) -> None:
        """Move an item within a section or across sections."""
        self._item(source_section, source_index)
        destination = self._section(dest_section).content
        item = self._section(source_section).content.pop(source_index)
        destination.insert(dest_index, item)
