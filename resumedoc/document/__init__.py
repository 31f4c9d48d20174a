"""Structured resume documents and their Markdown and HTML forms.

A ResumeDocument converts to Markdown or a standalone HTML page and back.
Both renderers choose a per-item template by classifying the item's keys,
and both parsers invert the conventions their renderer emits.
"""

from resumedoc.document.models import ContentItem, ResumeDocument, Section, generate_id
from resumedoc.document.classifier import FieldRoles, classify
from resumedoc.document.markdown_format import from_markdown, to_markdown
from resumedoc.document.html_format import from_html, to_html

__all__ = [
    "ContentItem",
    "ResumeDocument",
    "Section",
    "generate_id",
    "FieldRoles",
    "classify",
    "to_markdown",
    "from_markdown",
    "to_html",
    "from_html",
]
