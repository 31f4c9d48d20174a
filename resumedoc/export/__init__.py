"""File export for resume documents: JSON, Markdown, HTML and PDF."""

from resumedoc.export.files import (
    Format,
    default_output_path,
    load_document,
    render_document,
    sanitize_filename,
    save_document,
)
from resumedoc.export.generator import ResumePDFGenerator

__all__ = [
    "Format",
    "default_output_path",
    "load_document",
    "render_document",
    "sanitize_filename",
    "save_document",
    "ResumePDFGenerator",
]
