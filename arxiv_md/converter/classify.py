"""Classification of LaTeXML (ar5iv / arxiv.org HTML) nodes.

Each element is classified once into a closed set of kinds and the renderers
dispatch on the kind. Anything unrecognised maps to ``UNKNOWN``: inline
renderers pass through its children, block renderers skip it.
"""

from enum import Enum

from bs4 import CData, Comment, Declaration, Doctype, NavigableString, ProcessingInstruction, Tag

HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}
NON_TEXT_STRINGS = (Comment, CData, ProcessingInstruction, Declaration, Doctype)
EQUATION_CLASSES = {"ltx_equation", "ltx_eqn_table"}
THEOREM_CLASSES = {"ltx_theorem", "ltx_proof"}
BOLD_TAGS = {"b", "strong"}
ITALIC_TAGS = {"i", "em"}


class InlineKind(Enum):
    TEXT = "text"
    MATH = "math"
    CITATION = "citation"
    CROSS_REFERENCE = "cross_reference"
    FOOTNOTE = "footnote"
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    LINK = "link"
    LINE_BREAK = "line_break"
    IGNORED = "ignored"
    UNKNOWN = "unknown"


class BlockKind(Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    TEXT = "text"
    EQUATION = "equation"
    FIGURE = "figure"
    TABLE = "table"
    THEOREM = "theorem"
    SUBSECTION = "subsection"
    SUBSUBSECTION = "subsubsection"
    LOGICAL_GROUP = "logical_group"
    UNKNOWN = "unknown"


def class_set(tag: Tag) -> set:
    return set(tag.get("class") or [])


def classify_inline(node) -> InlineKind:
    """Classify a child of a running-text element."""
    if isinstance(node, NavigableString):
        # Comments, doctypes, CDATA and processing instructions are not text
        if isinstance(node, NON_TEXT_STRINGS):
            return InlineKind.IGNORED
        return InlineKind.TEXT
    if not isinstance(node, Tag):
        return InlineKind.IGNORED

    name = node.name
    classes = class_set(node)

    if name == "math" or "ltx_Math" in classes:
        return InlineKind.MATH
    if "ltx_cite" in classes:
        return InlineKind.CITATION
    if "ltx_ref" in classes:
        return InlineKind.CROSS_REFERENCE
    if "ltx_note" in classes:
        return InlineKind.FOOTNOTE
    if name == "a":
        return InlineKind.LINK
    if name == "br":
        return InlineKind.LINE_BREAK
    if "ltx_font_bold" in classes or name in BOLD_TAGS:
        return InlineKind.BOLD
    if "ltx_font_italic" in classes or name in ITALIC_TAGS:
        return InlineKind.ITALIC
    if name == "code":
        return InlineKind.CODE
    return InlineKind.UNKNOWN


def classify_block(tag: Tag) -> BlockKind:
    """Classify a direct child of a section or paragraph container."""
    name = tag.name
    classes = class_set(tag)

    if name in HEADING_TAGS:
        return BlockKind.HEADING
    if name == "p" and "ltx_p" in classes:
        return BlockKind.TEXT
    if "ltx_para" in classes:
        return BlockKind.PARAGRAPH
    if "ltx_subsection" in classes:
        return BlockKind.SUBSECTION
    if "ltx_subsubsection" in classes:
        return BlockKind.SUBSUBSECTION
    if name == "figure" and "ltx_figure" in classes:
        return BlockKind.FIGURE
    if name == "table":
        if classes & EQUATION_CLASSES:
            return BlockKind.EQUATION
        if "ltx_tabular" in classes:
            return BlockKind.TABLE
        return BlockKind.UNKNOWN
    if classes & THEOREM_CLASSES:
        return BlockKind.THEOREM
    if name == "div" and "ltx_logical-block" in classes:
        return BlockKind.LOGICAL_GROUP
    return BlockKind.UNKNOWN
