"""PDF export for resume documents using reportlab.

Lays out each content item with the same template choice as the Markdown
and HTML renderers: bold heading with the duration right-aligned, bold
organisation, indented description or GPA, one line per skills group and
``Key: value`` lines for anything unrecognised.
"""

from pathlib import Path
from xml.sax.saxutils import escape

from reportlab.lib.enums import TA_LEFT, TA_CENTER, TA_RIGHT
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    HRFlowable,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from resumedoc.document import ContentItem, ResumeDocument, classify
from resumedoc.shared import Color, PaperSize, echo


MARGIN = 20 * mm
FONT_SIZE_TITLE = 20
FONT_SIZE_SECTION = 14
FONT_SIZE_ENTRY = 12
FONT_SIZE_ORG = 11
FONT_SIZE_BODY = 10
LINE_HEIGHT = 6 * mm

BUILTIN_FONTS = {
    "helvetica": "Helvetica",
    "times": "Times-Roman",
    "courier": "Courier",
}


class ResumePDFGenerator:
    """Generates PDF files from resume documents."""

    def __init__(
        self,
        font_name: str = "Helvetica",
        paper_size: PaperSize = PaperSize.A4,
        verbose: bool = False,
    ):
        self.verbose = verbose
        self.paper_size = paper_size
        self.usable_width = paper_size.width - 2 * MARGIN
        self.font_family = self._setup_font(font_name)
        self.styles = self._create_styles()

    def _setup_font(self, font_name: str) -> str:
        """Return the reportlab family name for one of the built-in fonts."""
        family = BUILTIN_FONTS.get(font_name.lower())
        if family is None:
            if self.verbose:
                echo(f"Font '{font_name}' not available, using Helvetica", Color.WARNING)
            return "Helvetica"
        return family

    def _create_styles(self) -> dict[str, ParagraphStyle]:
        base = getSampleStyleSheet()

        def style(name: str, size: int, **kwargs) -> ParagraphStyle:
            kwargs.setdefault("leading", size * 1.3)
            return ParagraphStyle(
                name, parent=base["Normal"], fontName=self.font_family, fontSize=size, **kwargs
            )

        return {
            "title": style("Title", FONT_SIZE_TITLE, alignment=TA_CENTER, spaceAfter=LINE_HEIGHT),
            "section_header": style("SectionHeader", FONT_SIZE_SECTION, spaceBefore=LINE_HEIGHT),
            "entry_title": style("EntryTitle", FONT_SIZE_ENTRY, alignment=TA_LEFT),
            "entry_duration": style("EntryDuration", FONT_SIZE_BODY, alignment=TA_RIGHT),
            "organization": style("Organization", FONT_SIZE_ORG, spaceAfter=2),
            "body": style("Body", FONT_SIZE_BODY, leftIndent=5 * mm, spaceAfter=3),
            "line": style("Line", FONT_SIZE_BODY, spaceAfter=2),
        }

    def generate(self, doc: ResumeDocument, output_path: Path) -> None:
        """Generate a PDF from a document."""
        pdf = SimpleDocTemplate(
            str(output_path),
            pagesize=(self.paper_size.width, self.paper_size.height),
            leftMargin=MARGIN,
            rightMargin=MARGIN,
            topMargin=MARGIN,
            bottomMargin=MARGIN,
            title=doc.title,
        )

        story = [
            Paragraph(f"<b>{escape(doc.title)}</b>", self.styles["title"]),
            HRFlowable(width="100%", thickness=0.5, spaceAfter=LINE_HEIGHT / 2),
        ]

        for section in doc.sections:
            self._add_section(story, section.name, section.content)

        pdf.build(story)

        if self.verbose:
            echo(f"  Wrote {len(doc.sections)} section(s) to {output_path}", Color.INFO)

    def _add_section(self, story: list, name: str, content: list[ContentItem]) -> None:
        story.append(Paragraph(f"<b>{escape(name.upper())}</b>", self.styles["section_header"]))
        story.append(HRFlowable(width="100%", thickness=0.3, spaceAfter=LINE_HEIGHT / 2))

        for index, item in enumerate(content):
            self._add_item(story, item)
            if index < len(content) - 1:
                story.append(Spacer(1, LINE_HEIGHT * 0.5))

    def _add_item(self, story: list, item: ContentItem) -> None:
        roles = classify(item)
        template = roles.template

        if template in ("experience", "education"):
            heading_key = roles.title if template == "experience" else roles.degree
            self._add_heading(story, item[heading_key], roles.value(item, "duration"))

            organization = roles.value(item, "organization")
            if organization:
                story.append(Paragraph(f"<b>{escape(organization)}</b>", self.styles["organization"]))

            if template == "experience":
                detail = roles.value(item, "description")
            elif roles.value(item, "gpa"):
                detail = f"GPA: {roles.value(item, 'gpa')}"
            else:
                detail = ""
            if detail:
                story.append(Paragraph(escape(detail), self.styles["body"]))
        elif template == "skills":
            text = f"{item[roles.category]}: {item[roles.skills]}"
            story.append(Paragraph(escape(text), self.styles["line"]))
        else:
            for key, value in item.items():
                story.append(Paragraph(escape(f"{key}: {value}"), self.styles["line"]))

    def _add_heading(self, story: list, text: str, duration: str) -> None:
        """Bold entry heading with the duration pushed to the right margin."""
        title = Paragraph(f"<b>{escape(text)}</b>", self.styles["entry_title"])
        if not duration:
            story.append(title)
            return

        right = Paragraph(f"({escape(duration)})", self.styles["entry_duration"])
        table = Table(
            [[title, right]],
            colWidths=[self.usable_width * 0.7, self.usable_width * 0.3],
        )
        table.setStyle(
            TableStyle(
                [
                    ("VALIGN", (0, 0), (-1, -1), "BOTTOM"),
                    ("LEFTPADDING", (0, 0), (-1, -1), 0),
                    ("RIGHTPADDING", (0, 0), (-1, -1), 0),
                    ("TOPPADDING", (0, 0), (-1, -1), 0),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 1),
                ]
            )
        )
        story.append(table)
