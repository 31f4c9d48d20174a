"""HTML rendering and parsing for resume documents.

The renderer emits a standalone page with an inline stylesheet and a fixed
set of class names. The parser reads those class names back with
BeautifulSoup, so it only round-trips HTML produced here; other markup
degrades to coarser extraction instead of failing.
"""

import re
from html import escape as escape_html

from bs4 import BeautifulSoup, Tag

from resumedoc.document.classifier import classify
from resumedoc.document.models import DEFAULT_TITLE, ContentItem, ResumeDocument, Section
from resumedoc.shared import HtmlParseError


PARSE_ERROR_TITLE = "HTML Parse Error"
FALLBACK_SECTION_NAME = "Content"

# A tag opener still open when the input ends.
UNTERMINATED_TAG_RE = re.compile(r"<[A-Za-z!/?][^<>]*\Z")

STYLE = """
body {
  font-family: "Helvetica Neue", Helvetica, Arial, sans-serif;
  color: #222;
  line-height: 1.5;
  margin: 0;
  padding: 2rem;
}
.resume { max-width: 48rem; margin: 0 auto; }
h1 { font-size: 2rem; margin: 0 0 1.5rem; text-align: center; }
.section { margin-bottom: 1.5rem; }
.section-title {
  font-size: 1.1rem;
  text-transform: uppercase;
  letter-spacing: 0.05em;
  border-bottom: 1px solid #999;
  padding-bottom: 0.25rem;
  margin: 0 0 0.75rem;
}
.item { margin-bottom: 0.75rem; }
.item-header { display: flex; justify-content: space-between; align-items: baseline; }
.item-title { font-size: 1rem; margin: 0; }
.item-duration { font-size: 0.9rem; color: #555; }
.item-organization { font-weight: bold; color: #444; }
.item-description, .item-gpa { margin: 0.25rem 0 0 1rem; }
.skills-category, .field-label { font-weight: bold; }
@media print { body { padding: 0; } }
""".strip()


def _item_header(text: str, duration: str) -> list[str]:
    parts = ['<div class="item-header">', f'<h3 class="item-title">{text}</h3>']
    if duration:
        parts.append(f'<span class="item-duration">{duration}</span>')
    parts.append("</div>")
    return parts


def _render_item(item: ContentItem, esc) -> list[str]:
    roles = classify(item)
    template = roles.template
    lines = [f'<div class="item {template}-item">']

    if template == "experience":
        lines += _item_header(esc(item[roles.title]), esc(roles.value(item, "duration")))
        if roles.value(item, "organization"):
            lines.append(f'<div class="item-organization">{esc(item[roles.organization])}</div>')
        if roles.value(item, "description"):
            lines.append(f'<p class="item-description">{esc(item[roles.description])}</p>')
    elif template == "education":
        lines += _item_header(esc(item[roles.degree]), esc(roles.value(item, "duration")))
        if roles.value(item, "organization"):
            lines.append(f'<div class="item-organization">{esc(item[roles.organization])}</div>')
        if roles.value(item, "gpa"):
            lines.append(f'<div class="item-gpa">GPA: {esc(item[roles.gpa])}</div>')
    elif template == "skills":
        lines.append(
            f'<span class="skills-category">{esc(item[roles.category])}</span>: '
            f'<span class="skills-list">{esc(item[roles.skills])}</span>'
        )
    else:
        for key, value in item.items():
            lines.append(
                f'<div class="generic-field"><span class="field-label">{esc(key)}</span>: '
                f'<span class="field-value">{esc(value)}</span></div>'
            )

    lines.append("</div>")
    return lines


def to_html(doc: ResumeDocument, escape: bool = True) -> str:
    """Render a document as a standalone HTML page.

    Field values are HTML-escaped unless ``escape`` is False, which
    interpolates them verbatim.
    """
    esc = escape_html if escape else str
    title = esc(doc.title)

    lines = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="utf-8">',
        f"<title>{title}</title>",
        "<style>",
        STYLE,
        "</style>",
        "</head>",
        "<body>",
        '<div class="resume">',
        f"<h1>{title}</h1>",
    ]

    for section in doc.sections:
        lines.append('<div class="section">')
        lines.append(f'<h2 class="section-title">{esc(section.name)}</h2>')
        for item in section.content:
            lines += _render_item(item, esc)
        lines.append("</div>")

    lines += ["</div>", "</body>", "</html>"]
    return "\n".join(lines) + "\n"


def _text(node: Tag | None) -> str:
    return node.get_text().strip() if node is not None else ""


def _parse_item(node: Tag) -> ContentItem:
    item: ContentItem = {}

    title = node.select_one(".item-title")
    if title is not None:
        key = "Degree" if "education-item" in node.get("class", []) else "job title"
        item[key] = _text(title)
        duration = node.select_one(".item-duration")
        if duration is not None:
            item["Duration"] = _text(duration)
        organization = node.select_one(".item-organization")
        if organization is not None:
            item["Organization"] = _text(organization)
        description = node.select_one(".item-description")
        if description is not None:
            item["Description"] = _text(description)
        gpa = node.select_one(".item-gpa")
        if gpa is not None:
            item["GPA"] = re.sub(r"^GPA:\s*", "", _text(gpa))
        return item

    category = node.select_one(".skills-category")
    if category is not None:
        item["Category"] = _text(category)
        skills = node.select_one(".skills-list")
        if skills is not None:
            item["Skills"] = _text(skills)
        else:
            rest = _text(node)[len(item["Category"]):]
            item["Skills"] = rest.lstrip(":").strip()
        return item

    for field in node.select(".generic-field"):
        label = _text(field.select_one(".field-label"))
        value_node = field.select_one(".field-value")
        if value_node is not None:
            value = _text(value_node)
        else:
            value = _text(field)[len(label):].lstrip(":").strip()
        if label:
            item[label] = value

    return item


def _sections_from_classes(soup: BeautifulSoup) -> list[Section]:
    sections = []
    for node in soup.select(".section"):
        section = Section(name=_text(node.select_one(".section-title")))
        for item_node in node.select(".item"):
            item = _parse_item(item_node)
            if item:
                section.content.append(item)
        sections.append(section)
    return sections


def _sections_from_headings(soup: BeautifulSoup) -> list[Section]:
    sections = []
    for heading in soup.find_all("h2"):
        chunks = []
        for sibling in heading.next_siblings:
            if isinstance(sibling, Tag):
                if sibling.name == "h2":
                    break
                chunks.append(sibling.get_text("\n"))
            else:
                chunks.append(str(sibling))
        text = "\n".join(c.strip() for c in chunks if c.strip())
        section = Section(name=_text(heading))
        if text:
            section.content.append({"Content": text})
        sections.append(section)
    return sections


def _parse(text: str) -> ResumeDocument:
    if UNTERMINATED_TAG_RE.search(text.rstrip()):
        raise HtmlParseError("unterminated tag")

    soup = BeautifulSoup(text, "html.parser")

    heading = soup.find("h1")
    title = _text(heading) if heading is not None else DEFAULT_TITLE

    sections = _sections_from_classes(soup) or _sections_from_headings(soup)
    if not sections:
        body = soup.body or soup
        content = body.get_text("\n", strip=True)
        sections = [Section(name=FALLBACK_SECTION_NAME, content=[{"Content": content}])]

    return ResumeDocument(title=title, sections=sections)


def parse_error_document(reason: str) -> ResumeDocument:
    return ResumeDocument(
        title=PARSE_ERROR_TITLE,
        sections=[
            Section(
                name="Error",
                content=[{"Message": f"The HTML could not be converted: {reason}"}],
            )
        ],
    )


def from_html(text: str) -> ResumeDocument:
    """Parse HTML back into a document; never raises."""
    try:
        return _parse(text)
    except Exception as e:
        return parse_error_document(str(e))
