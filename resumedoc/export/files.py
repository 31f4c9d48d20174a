"""Loading and saving documents in every supported file format."""

import json
import re
from enum import Enum
from pathlib import Path

import yaml

from resumedoc.document import ResumeDocument, from_html, from_markdown, to_html, to_markdown
from resumedoc.export.generator import ResumePDFGenerator
from resumedoc.shared import UnsupportedFormatError


class Format(str, Enum):
    JSON = "json"
    MARKDOWN = "markdown"
    HTML = "html"
    PDF = "pdf"

    @property
    def extension(self) -> str:
        return {
            Format.JSON: ".json",
            Format.MARKDOWN: ".md",
            Format.HTML: ".html",
            Format.PDF: ".pdf",
        }[self]

    @staticmethod
    def from_path(path: Path) -> "Format":
        suffix = path.suffix.lower()
        for fmt, suffixes in SUFFIXES.items():
            if suffix in suffixes:
                return fmt
        raise UnsupportedFormatError(path.name)


YAML_SUFFIXES = (".yaml", ".yml")

SUFFIXES = {
    Format.JSON: (".json", *YAML_SUFFIXES),
    Format.MARKDOWN: (".md", ".markdown"),
    Format.HTML: (".html", ".htm"),
    Format.PDF: (".pdf",),
}


def sanitize_filename(title: str) -> str:
    """Turn a document title into a safe lowercase file stem."""
    name = re.sub(r"[^a-z0-9]", "_", title, flags=re.IGNORECASE).lower()
    name = re.sub(r"_+", "_", name).strip("_")
    return name or "resume"


def _load_structured(path: Path) -> ResumeDocument:
    with open(path, encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    doc = ResumeDocument.model_validate(data or {})
    doc.ensure_unique_ids()
    return doc


def load_document(path: Path) -> ResumeDocument:
    """Read a document from JSON, YAML, Markdown or HTML.

    Raises json.JSONDecodeError, yaml.YAMLError or pydantic.ValidationError
    for malformed structured input; Markdown and HTML always parse.
    """
    fmt = Format.from_path(path)
    if fmt == Format.JSON:
        return _load_structured(path)
    if fmt == Format.PDF:
        raise UnsupportedFormatError(path.name)

    text = path.read_text(encoding="utf-8")
    if fmt == Format.MARKDOWN:
        return from_markdown(text)
    return from_html(text)


def render_document(doc: ResumeDocument, fmt: Format, escape: bool = True) -> str:
    if fmt == Format.JSON:
        return doc.to_json() + "\n"
    if fmt == Format.MARKDOWN:
        return to_markdown(doc) + "\n"
    if fmt == Format.HTML:
        return to_html(doc, escape=escape)
    raise UnsupportedFormatError(fmt.value)


def default_output_path(doc: ResumeDocument, fmt: Format, directory: Path = Path(".")) -> Path:
    return directory / f"{sanitize_filename(doc.title)}{fmt.extension}"


def save_document(doc: ResumeDocument, path: Path, fmt: Format, escape: bool = True) -> Path:
    """Write ``doc`` to ``path`` in ``fmt``.

    Structured output to a .yaml or .yml path is written as YAML; PDF goes
    through the reportlab generator.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    if fmt == Format.PDF:
        ResumePDFGenerator().generate(doc, path)
        return path

    if fmt == Format.JSON and path.suffix.lower() in YAML_SUFFIXES:
        text = yaml.safe_dump(doc.model_dump(by_alias=True), sort_keys=False, allow_unicode=True)
    else:
        text = render_document(doc, fmt, escape=escape)

    path.write_text(text, encoding="utf-8")
    return path
