"""Tests for in-place document editing."""

import pytest

from resumedoc.editor import NEW_FIELD_NAME, ResumeEditor
from resumedoc.shared import (
    ClipboardError,
    FieldNotFoundError,
    IndexOutOfRangeError,
    LastFieldError,
)


@pytest.fixture
def editor(sample_doc):
    return ResumeEditor(sample_doc)


class TestFieldEdits:
    def test_set_title_and_rename_section(self, editor):
        editor.set_title("Jane Roe")
        editor.rename_section(0, "Work")
        assert editor.doc.title == "Jane Roe"
        assert editor.doc.sections[0].name == "Work"

    def test_set_field(self, editor):
        editor.set_field(0, 0, "Organization", "Alphabet")
        assert editor.doc.sections[0].content[0]["Organization"] == "Alphabet"

    def test_rename_field_keeps_position(self, editor):
        editor.rename_field(0, 0, "Organization", "Company")
        item = editor.doc.sections[0].content[0]
        assert list(item) == ["job title", "Company", "Duration", "Description"]
        assert item["Company"] == "Google"

    def test_rename_field_to_blank_is_ignored(self, editor):
        editor.rename_field(0, 0, "Organization", "   ")
        assert "Organization" in editor.doc.sections[0].content[0]

    def test_rename_unknown_field(self, editor):
        with pytest.raises(FieldNotFoundError):
            editor.rename_field(0, 0, "Nope", "Other")

    def test_add_and_delete_field(self, editor):
        editor.add_field(1, 0)
        assert editor.doc.sections[1].content[0][NEW_FIELD_NAME] == ""
        editor.delete_field(1, 0, NEW_FIELD_NAME)
        assert NEW_FIELD_NAME not in editor.doc.sections[1].content[0]

    def test_cannot_delete_only_field(self, editor):
        editor.doc.sections[2].content[0] = {"Category": "Languages"}
        with pytest.raises(LastFieldError):
            editor.delete_field(2, 0, "Category")


class TestSectionsAndItems:
    def test_add_section(self, editor):
        section = editor.add_section()
        assert editor.doc.sections[-1] is section
        assert section.name == "New Section"
        assert section.content == [{"job title": "", "Organization": ""}]

    def test_delete_section(self, editor):
        removed = editor.delete_section(1)
        assert removed.name == "Education"
        assert [s.name for s in editor.doc.sections] == ["Experience", "Skills"]

    def test_add_item(self, editor):
        editor.add_item(2)
        assert editor.doc.sections[2].content[-1] == {"job title": "", "Organization": ""}

    def test_deleting_last_item_leaves_a_default(self, editor):
        editor.delete_item(1, 0)
        assert editor.doc.sections[1].content == [{"job title": "", "Organization": ""}]

    def test_out_of_range(self, editor):
        with pytest.raises(IndexOutOfRangeError):
            editor.delete_section(9)
        with pytest.raises(IndexOutOfRangeError):
            editor.set_field(0, 5, "x", "y")


class TestClipboard:
    def test_copy_and_paste_section(self, editor):
        editor.copy_section(0)
        pasted = editor.paste_section(0)
        assert editor.doc.sections[1] is pasted
        assert pasted.name == "Experience"
        assert pasted.id != editor.doc.sections[0].id
        assert pasted.content == editor.doc.sections[0].content

    def test_repeated_paste_is_independent(self, editor):
        editor.copy_section(2)
        first = editor.paste_section(2)
        second = editor.paste_section(3)
        assert first.id != second.id
        first.content[0]["Skills"] = "changed"
        assert second.content[0]["Skills"] != "changed"

    def test_paste_section_at_top(self, editor):
        editor.copy_section(2)
        editor.paste_section(-1)
        assert editor.doc.sections[0].name == "Skills"

    def test_copy_and_paste_item(self, editor):
        editor.copy_item(0, 1)
        editor.paste_item(1, 0)
        assert editor.doc.sections[1].content[1]["job title"] == "Frontend Developer"
        editor.doc.sections[1].content[1]["job title"] = "changed"
        assert editor.doc.sections[0].content[1]["job title"] == "Frontend Developer"

    def test_paste_wrong_kind(self, editor):
        with pytest.raises(ClipboardError):
            editor.paste_item(0, 0)
        editor.copy_item(0, 0)
        with pytest.raises(ClipboardError):
            editor.paste_section(0)


class TestReorder:
    def test_move_section(self, editor):
        editor.move_section(2, 0)
        assert [s.name for s in editor.doc.sections] == ["Skills", "Experience", "Education"]

    def test_move_item_within_section(self, editor):
        editor.move_item(0, 0, 0, 1)
        titles = [i["job title"] for i in editor.doc.sections[0].content]
        assert titles == ["Frontend Developer", "Software Engineering Intern"]

    def test_move_item_across_sections(self, editor):
        editor.move_item(0, 0, 1, 0)
        assert len(editor.doc.sections[0].content) == 1
        assert editor.doc.sections[1].content[0]["job title"] == "Software Engineering Intern"
        assert editor.doc.sections[1].content[1]["Degree"].startswith("Bachelor")

    def test_section_ids_survive_reorder(self, editor):
        ids = [s.id for s in editor.doc.sections]
        editor.move_section(0, 2)
        assert [s.id for s in editor.doc.sections] == [ids[1], ids[2], ids[0]]
