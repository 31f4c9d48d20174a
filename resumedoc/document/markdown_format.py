"""Markdown rendering and parsing for resume documents.

The renderer picks one template per content item from the classified field
roles. The parser is a line-oriented best-effort inverse of the renderer's
conventions; it never fails, but arbitrary hand-written Markdown may come
back with coarse fields (unrecognised prose lands in "Description").
"""

import re

from resumedoc.document.classifier import classify
from resumedoc.document.models import DEFAULT_TITLE, ContentItem, ResumeDocument, Section


ITEM_HEADING_RE = re.compile(r"^(.+?)(?:\s*\((.+)\))?$")
KEY_VALUE_RE = re.compile(r"\*\*(.+?):\*\*\s*(.+)")
GPA_LINE_RE = re.compile(r"^GPA:\s*(\S+)$")


def _heading_with_duration(text: str, duration: str) -> str:
    line = f"### {text}"
    if duration:
        line += f" ({duration})"
    return line + "\n\n"


def _render_item(item: ContentItem) -> str:
    roles = classify(item)
    template = roles.template
    out = ""

    if template == "experience":
        out += _heading_with_duration(item[roles.title], roles.value(item, "duration"))
        if roles.value(item, "organization"):
            out += f"**{item[roles.organization]}**\n\n"
        if roles.value(item, "description"):
            out += f"{item[roles.description]}\n\n"
    elif template == "education":
        out += _heading_with_duration(item[roles.degree], roles.value(item, "duration"))
        if roles.value(item, "organization"):
            out += f"**{item[roles.organization]}**\n\n"
        if roles.value(item, "gpa"):
            out += f"GPA: {item[roles.gpa]}\n\n"
    elif template == "skills":
        out += f"**{item[roles.category]}:** {item[roles.skills]}\n\n"
    else:
        for key, value in item.items():
            out += f"**{key}:** {value}\n\n"

    return out


def to_markdown(doc: ResumeDocument) -> str:
    """Render a document as Markdown."""
    markdown = f"# {doc.title}\n\n"

    for section in doc.sections:
        markdown += f"## {section.name}\n\n"
        for item in section.content:
            markdown += _render_item(item)
        markdown += "\n"

    return markdown.strip()


class _MarkdownParser:
    """Forward scan with a pending section and a pending item."""

    def __init__(self):
        self.title = DEFAULT_TITLE
        self.sections: list[Section] = []
        self.section: Section | None = None
        self.item: ContentItem = {}
        # Items completed before the first "## " heading.
        self.carried: list[ContentItem] = []

    def _push_item(self) -> None:
        if self.section is not None and self.item:
            self.section.content.append(self.item)
            self.item = {}

    def _start_section(self, name: str) -> None:
        self._push_item()
        if self.section is not None:
            self.sections.append(self.section)
        self.section = Section(name=name, content=self.carried)
        self.carried = []

    def _start_item(self, heading: str) -> None:
        self._push_item()
        match = ITEM_HEADING_RE.match(heading)
        if match is None:
            self.item = {"job title": heading}
            return
        self.item = {"job title": match.group(1)}
        if match.group(2):
            self.item["Duration"] = match.group(2)

    def _set_pair(self, key: str, value: str) -> None:
        if key == "GPA":
            pairs = {"GPA": value}
        elif "skill" in key.lower():
            pairs = {"Category": key, "Skills": value}
        else:
            pairs = {key: value}

        # A repeated key means the renderer moved on to the next item.
        if any(k in self.item for k in pairs):
            if self.section is None:
                self.carried.append(self.item)
                self.item = {}
            else:
                self._push_item()
        self.item.update(pairs)

    def _append_description(self, text: str) -> None:
        if self.item.get("Description"):
            self.item["Description"] += " " + text
        else:
            self.item["Description"] = text

    def feed(self, raw_line: str) -> None:
        line = raw_line.strip()

        if line.startswith("# "):
            self.title = line[2:]
        elif line.startswith("## "):
            self._start_section(line[3:])
        elif line.startswith("### "):
            self._start_item(line[4:])
        elif line.startswith("**") and line.endswith("**") and ":" not in line:
            self.item["Organization"] = line[2:-2]
        elif line.startswith("**") and ":" in line:
            match = KEY_VALUE_RE.search(line)
            if match:
                self._set_pair(match.group(1), match.group(2))
        elif line and not line.startswith("#") and not line.startswith("**"):
            # Only the renderer's own one-token GPA line, before any description.
            gpa = GPA_LINE_RE.match(line)
            if gpa and "GPA" not in self.item and "Description" not in self.item:
                self.item["GPA"] = gpa.group(1)
            else:
                self._append_description(line)

    def close(self) -> ResumeDocument:
        self._push_item()
        if self.section is not None:
            self.sections.append(self.section)
            self.section = None
        return ResumeDocument(title=self.title, sections=self.sections)


def from_markdown(text: str) -> ResumeDocument:
    """Parse Markdown back into a document."""
    parser = _MarkdownParser()
    for line in text.split("\n"):
        parser.feed(line)
    return parser.close()
