"""Inline rendering: running text with math, citations, references and emphasis."""

from bs4 import Tag

from arxiv_md.config import FOOTNOTE_PREVIEW_CHARS
from arxiv_md.converter.classify import InlineKind, classify_inline


def render_inline(element: Tag) -> str:
    """Render the children of ``element`` as a single Markdown string."""
    result = ""
    for node in element.children:
        kind = classify_inline(node)
        result += _RENDERERS[kind](node)
    return result


def _render_text(node) -> str:
    return str(node)


def _render_ignored(node) -> str:
    return ""


def _render_math(element: Tag) -> str:
    # Either <math alttext=...> itself or a wrapper such as span.ltx_Math
    if element.name == "math":
        return f"${element.get('alttext', '')}$"
    math = element.find("math")
    if math is not None:
        return f"${math.get('alttext', '')}$"
    return ""


def _render_citation(element: Tag) -> str:
    # ar5iv links with a.ltx_ref, arxiv.org/html uses span.ltx_ref
    refs = element.select("a.ltx_ref, span.ltx_ref")
    texts = [ref.get_text().strip() for ref in refs]
    return "[" + ", ".join(text for text in texts if text) + "]"


def _render_cross_reference(element: Tag) -> str:
    return f"[{element.get_text()}]({element.get('href', '')})"


def _render_footnote(element: Tag) -> str:
    note = element.get_text().strip()
    if not note:
        return ""
    return f" [^{note[:FOOTNOTE_PREVIEW_CHARS]}]"


def _render_link(element: Tag) -> str:
    return f"[{element.get_text()}]({element.get('href', '')})"


def _render_line_break(element: Tag) -> str:
    return "\n"


def _render_bold(element: Tag) -> str:
    return f"**{render_inline(element)}**"


def _render_italic(element: Tag) -> str:
    return f"*{render_inline(element)}*"


def _render_code(element: Tag) -> str:
    return f"`{element.get_text()}`"


_RENDERERS = {
    InlineKind.TEXT: _render_text,
    InlineKind.IGNORED: _render_ignored,
    InlineKind.MATH: _render_math,
    InlineKind.CITATION: _render_citation,
    InlineKind.CROSS_REFERENCE: _render_cross_reference,
    InlineKind.FOOTNOTE: _render_footnote,
    InlineKind.LINK: _render_link,
    InlineKind.LINE_BREAK: _render_line_break,
    InlineKind.BOLD: _render_bold,
    InlineKind.ITALIC: _render_italic,
    InlineKind.CODE: _render_code,
    InlineKind.UNKNOWN: render_inline,
}
