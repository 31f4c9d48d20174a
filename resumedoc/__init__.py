"""Resume document converter.

Converts a structured resume between JSON/YAML, Markdown, HTML and PDF, and
provides the in-place editing operations used by a resume form editor.
"""

from resumedoc.document import (
    ResumeDocument,
    Section,
    from_html,
    from_markdown,
    to_html,
    to_markdown,
)
from resumedoc.editor import ResumeEditor

__all__ = [
    "ResumeDocument",
    "Section",
    "ResumeEditor",
    "to_markdown",
    "from_markdown",
    "to_html",
    "from_html",
]
