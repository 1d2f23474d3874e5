"""Block rendering: paragraphs, equations, figures, tables, theorems and sections."""

import re

from bs4 import Tag

from arxiv_md.config import AR5IV_HOST
from arxiv_md.converter.classify import BlockKind, class_set, classify_block
from arxiv_md.converter.inline import render_inline

_TAG_PARENS = re.compile(r"^\((.+)\)$")


def render_equation(table: Tag) -> str:
    """Render a displayed (optionally numbered) equation."""
    math = table.find("math")
    if math is None:
        return ""
    alttext = math.get("alttext", "")
    tag_el = table.select_one(".ltx_tag")
    tag = tag_el.get_text().strip() if tag_el is not None else ""
    # ar5iv decorates equation numbers with parentheses
    tag = _TAG_PARENS.sub(r"\1", tag)
    suffix = f" ({tag})" if tag else ""
    return f"\n$$\n{alttext}\n$${suffix}\n"


def render_figure(figure: Tag, image_base: str = AR5IV_HOST) -> str:
    img = figure.find("img")
    caption = figure.find("figcaption")

    md = "\n"

    if img is not None:
        src = img.get("src", "")
        alt = img.get("alt") or "Figure"
        if src.startswith("/"):
            src = f"{image_base}{src}"
        md += f"![{alt}]({src})\n"

    if caption is not None:
        md += f"\n*{render_inline(caption).strip()}*\n"

    return md + "\n"


def render_table(table: Tag) -> str:
    """Render an ltx_tabular grid as a pipe table; the first row is the header."""
    rows = table.find_all("tr")
    if not rows:
        return ""

    md = "\n"
    for index, row in enumerate(rows):
        cells = [_render_cell(cell) for cell in row.select("td, th")]
        md += "| " + " | ".join(cells) + " |\n"
        if index == 0:
            md += "| " + " | ".join("---" for _ in cells) + " |\n"

    return md + "\n"


def _render_cell(cell: Tag) -> str:
    return render_inline(cell).replace("|", "\\|").replace("\n", " ").strip()


def render_paragraph(para: Tag, image_base: str = AR5IV_HOST) -> str:
    """Render an ltx_para container.

    Text paragraphs, equations, tables and figures are rendered in order and
    anything else is dropped. A container with no renderable children falls back
    to inline rendering of the whole element.
    """
    md = ""

    for child in para.find_all(True, recursive=False):
        handler = _PARAGRAPH_HANDLERS.get(classify_block(child))
        if handler is not None:
            md += handler(child, image_base)

    if md == "":
        md = render_inline(para) + "\n\n"

    return md


def render_theorem(node: Tag, image_base: str = AR5IV_HOST) -> str:
    """Render a theorem, lemma, definition or proof environment."""
    md = ""
    title_el = node.select_one(".ltx_title")
    title = render_inline(title_el).strip() if title_el is not None else ""
    if title:
        md += f"\n**{title}**\n\n"
    for para in node.select(".ltx_para"):
        md += render_paragraph(para, image_base=image_base)
    return md


def render_heading(heading: Tag, depth: int) -> str:
    # Only LaTeXML titles are headings; other h* elements are decoration
    if "ltx_title" not in class_set(heading):
        return ""
    return f"{'#' * depth} {render_inline(heading).strip()}\n\n"


def _render_section_text(child: Tag, image_base: str) -> str:
    # A section only renders p.ltx_p when it doubles as an ltx_para container
    if "ltx_para" not in class_set(child):
        return ""
    return render_paragraph(child, image_base=image_base)


def render_section(section: Tag, depth: int = 2, image_base: str = AR5IV_HOST) -> str:
    """Render the direct children of a section-like container at ``depth``."""
    md = ""

    for child in section.find_all(True, recursive=False):
        handler = _SECTION_HANDLERS.get(classify_block(child))
        if handler is not None:
            md += handler(child, depth, image_base)

    return md


_PARAGRAPH_HANDLERS = {
    BlockKind.TEXT: lambda child, image_base: render_inline(child) + "\n\n",
    BlockKind.EQUATION: lambda child, image_base: render_equation(child),
    BlockKind.TABLE: lambda child, image_base: render_table(child),
    BlockKind.FIGURE: lambda child, image_base: render_figure(child, image_base=image_base),
}

_SECTION_HANDLERS = {
    BlockKind.HEADING: lambda child, depth, image_base: render_heading(child, depth),
    BlockKind.PARAGRAPH: lambda child, depth, image_base: render_paragraph(child, image_base=image_base),
    BlockKind.TEXT: lambda child, depth, image_base: _render_section_text(child, image_base),
    BlockKind.SUBSECTION: lambda child, depth, image_base: render_section(child, depth + 1, image_base=image_base),
    BlockKind.SUBSUBSECTION: lambda child, depth, image_base: render_section(child, depth + 2, image_base=image_base),
    BlockKind.FIGURE: lambda child, depth, image_base: render_figure(child, image_base=image_base),
    BlockKind.EQUATION: lambda child, depth, image_base: render_equation(child),
    BlockKind.TABLE: lambda child, depth, image_base: render_table(child),
    BlockKind.THEOREM: lambda child, depth, image_base: render_theorem(child, image_base=image_base),
    # Logical blocks are transparent wrappers, usually around figures
    BlockKind.LOGICAL_GROUP: lambda child, depth, image_base: render_section(child, depth, image_base=image_base),
}
