"""Request-level operations: look up paper ids and extract paper content.

Both return a ToolResult carrying either the full text or a single-line error
message, never a partial document.
"""

import logging
import re

from arxiv_md.config import AR5IV_HOST, DEFAULT_LEVEL
from arxiv_md.exceptions import ArxivMdError, PaperFetchError
from arxiv_md.models.paper import DetailLevel, ToolResult
from arxiv_md.services.arxiv_service import format_results, search_arxiv_papers
from arxiv_md.services.fetch_service import fetch_html
from arxiv_md.utils.html_to_md import html_to_markdown

logger = logging.getLogger(__name__)

_ARXIV_PREFIX = re.compile(r"^arxiv:", re.IGNORECASE)


def normalize_arxiv_id(arxiv_id: str) -> str:
    """Strip an ``arxiv:`` namespace prefix, e.g. ``arxiv:1706.03762`` -> ``1706.03762``."""
    return _ARXIV_PREFIX.sub("", arxiv_id.strip())


def extract_paper(arxiv_id: str, level=DEFAULT_LEVEL, image_base: str = AR5IV_HOST) -> ToolResult:
    normalized_id = normalize_arxiv_id(arxiv_id)
    try:
        detail_level = DetailLevel.parse(level)
        html = fetch_html(normalized_id)
    except (ValueError, PaperFetchError) as e:
        logger.error(f"Error fetching paper {normalized_id}: {e}")
        return ToolResult(text=f"Error fetching paper: {e}", is_error=True)

    logger.info(f"Converting {normalized_id} at level {detail_level.value}")
    try:
        markdown = html_to_markdown(html, detail_level, image_base=image_base)
    except Exception as e:
        # e.g. RecursionError on pathologically nested markup
        logger.exception(f"Error converting paper {normalized_id}")
        message = " ".join(str(e).split()) or type(e).__name__
        return ToolResult(text=f"Error fetching paper: {message}", is_error=True)
    return ToolResult(text=markdown)


def resolve_paper_id(query: str) -> ToolResult:
    try:
        papers = search_arxiv_papers(query)
    except ArxivMdError as e:
        return ToolResult(text=f"Error searching arXiv: {e}", is_error=True)
    return ToolResult(text=format_results(papers))
