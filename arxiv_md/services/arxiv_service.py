import arxiv
import logging
import re
from typing import List

from arxiv_md.config import SEARCH_MAX_RESULTS, SEARCH_NUM_RETRIES, SEARCH_PAGE_SIZE
from arxiv_md.exceptions import SearchError
from arxiv_md.models.paper import PaperSummary

logger = logging.getLogger(__name__)

FIELD_PREFIX = re.compile(r"^(ti|au|abs|co|jr|cat|rn|all|id):")
ARXIV_ID = re.compile(r"(\d{4}\.\d{4,5})(v\d+)?$")
SEPARATOR = "----------"

def build_search_query(query: str) -> str:
    """Search all fields unless the query already names one."""
    if FIELD_PREFIX.match(query):
        return query
    return f"all:{query}"

def search_arxiv_papers(query: str, max_results: int = SEARCH_MAX_RESULTS) -> List[PaperSummary]:
    """Search arXiv papers based on user query, ranked by relevance."""
    search_query = build_search_query(query)
    logger.info(f"Starting search for query: {search_query} with max_results: {max_results}")

    client = arxiv.Client(
        page_size=SEARCH_PAGE_SIZE,
        delay_seconds=0,
        num_retries=SEARCH_NUM_RETRIES
    )

    search = arxiv.Search(
        query=search_query,
        max_results=max_results,
        sort_by=arxiv.SortCriterion.Relevance,
        sort_order=arxiv.SortOrder.Descending
    )

    try:
        logger.info("Executing arXiv search...")
        papers = [paper_to_summary(paper) for paper in client.results(search)]
        logger.info(f"Found {len(papers)} papers")
        return papers
    except Exception as e:
        logger.error(f"Error in search_arxiv_papers: {str(e)}")
        raise SearchError(str(e)) from e

def paper_to_summary(paper: arxiv.Result) -> PaperSummary:
    """Convert arxiv paper to a PaperSummary."""
    match = ARXIV_ID.search(paper.entry_id)
    arxiv_id = match.group(1) if match else paper.entry_id
    return PaperSummary(
        title=_collapse(paper.title),
        arxiv_id=f"arxiv:{arxiv_id}",
        authors=[author.name for author in paper.authors],
        year=paper.published.year if paper.published else None,
        category=paper.primary_category or None,
        comment=_collapse(paper.comment) or None,
        journal_ref=_collapse(paper.journal_ref) or None,
        doi=paper.doi or None,
        abstract=_collapse(paper.summary),
    )

def format_results(papers: List[PaperSummary]) -> str:
    """Format search results as a plain-text listing."""
    if not papers:
        return "No results found."

    blocks = []
    for paper in papers:
        lines = [
            SEPARATOR,
            f"- Title: {paper.title}",
            f"- Arxiv ID: {paper.arxiv_id}",
            f"- Authors: {', '.join(paper.authors)}",
            f"- Year: {paper.year}",
            f"- Category: {paper.category or 'N/A'}",
        ]
        if paper.comment:
            lines.append(f"- Comment: {paper.comment}")
        if paper.journal_ref or paper.doi:
            journal_doi = " / ".join(value for value in (paper.journal_ref, paper.doi) if value)
            lines.append(f"- Journal/DOI: {journal_doi}")
        lines.append(f"- Abstract: {paper.abstract}")
        blocks.append("\n".join(lines))

    return "\n\n".join(blocks) + f"\n\n{SEPARATOR}"

def _collapse(text) -> str:
    return re.sub(r"\s+", " ", text or "").strip()
