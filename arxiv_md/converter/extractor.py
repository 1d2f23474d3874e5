"""Locate the document-level regions of a LaTeXML paper and render each one.

Every region is optional. A missing title, author block, abstract, section,
appendix or bibliography yields an empty string instead of an error.
"""

import logging
import re

from bs4 import BeautifulSoup, Tag

from arxiv_md.config import AR5IV_HOST
from arxiv_md.converter.blocks import render_section
from arxiv_md.converter.inline import render_inline
from arxiv_md.models.paper import ExtractedDocument

logger = logging.getLogger(__name__)

_BIBTAG_BRACKETS = re.compile(r"^\[|\]$")


def extract_title(doc: Tag) -> str:
    title_el = doc.select_one("h1.ltx_title_document")
    if title_el is None:
        return ""
    return render_inline(title_el).strip()


def extract_authors(doc: Tag) -> str:
    authors_el = doc.select_one(".ltx_authors")
    if authors_el is None:
        return ""
    return re.sub(r"\s+", " ", render_inline(authors_el).strip())


def extract_abstract(doc: Tag) -> str:
    """Render the first text paragraph of the abstract."""
    abstract_el = doc.select_one(".ltx_abstract")
    if abstract_el is None:
        return ""
    p_el = abstract_el.select_one("p.ltx_p")
    if p_el is None:
        return ""
    return render_inline(p_el).strip()


def extract_body(doc: Tag, image_base: str = AR5IV_HOST) -> str:
    """Render every top-level numbered section, in document order."""
    sections = doc.select("article.ltx_document > section.ltx_section")
    return "".join(render_section(section, 2, image_base=image_base) for section in sections)


def extract_appendix(doc: Tag, image_base: str = AR5IV_HOST) -> str:
    appendices = doc.select("article.ltx_document > section.ltx_appendix")
    return "".join(render_section(appendix, 2, image_base=image_base) for appendix in appendices)


def extract_references(doc: Tag) -> str:
    """Render the bibliography as ``[tag] text`` entries under a References heading."""
    bib_section = doc.select_one("section.ltx_bibliography")
    if bib_section is None:
        return ""

    md = "## References\n\n"

    bib_list = bib_section.select_one("ul.ltx_biblist")
    if bib_list is None:
        return md

    for item in bib_list.select("li.ltx_bibitem"):
        # Older ar5iv pages use ltx_tag_bibitem, newer ones ltx_bibtag
        tag_el = item.select_one("span.ltx_tag_bibitem") or item.select_one("span.ltx_bibtag")
        tag = tag_el.get_text().strip() if tag_el is not None else ""
        tag = _BIBTAG_BRACKETS.sub("", tag)

        blocks = [render_inline(block).strip() for block in item.select("span.ltx_bibblock")]
        text = " ".join(block for block in blocks if block)

        if tag:
            md += f"[{tag}] {text}\n\n"
        else:
            md += f"{text}\n\n"

    return md


def extract_document(doc: BeautifulSoup, image_base: str = AR5IV_HOST) -> ExtractedDocument:
    """Extract and render every region of a parsed paper."""
    extracted = ExtractedDocument(
        title=extract_title(doc),
        authors=extract_authors(doc),
        abstract=extract_abstract(doc),
        body=extract_body(doc, image_base=image_base),
        appendix=extract_appendix(doc, image_base=image_base),
        references=extract_references(doc),
    )
    logger.debug(
        f"Extracted title={bool(extracted.title)} abstract={len(extracted.abstract)} chars "
        f"body={len(extracted.body)} chars appendix={len(extracted.appendix)} chars "
        f"references={len(extracted.references)} chars"
    )
    return extracted
