import logging
from pathlib import Path

from bs4 import BeautifulSoup

from arxiv_md.config import AR5IV_HOST, OUTPUT_DIR
from arxiv_md.converter.assembler import assemble
from arxiv_md.converter.extractor import extract_document
from arxiv_md.models.paper import DetailLevel

logger = logging.getLogger(__name__)

def html_to_markdown(html, level=DetailLevel.ALL, image_base=AR5IV_HOST):
    """Convert ar5iv / arxiv.org HTML to Markdown at the given detail level."""
    level = DetailLevel.parse(level)

    # Parse HTML into a tree
    soup = BeautifulSoup(html, "html.parser")

    # Extract regions and assemble Markdown
    extracted = extract_document(soup, image_base=image_base)
    markdown_content = assemble(extracted, level)

    logger.debug(f"Converted {len(html)} chars of HTML into {len(markdown_content)} chars of Markdown")
    return markdown_content

def save_markdown(content, arxiv_id, directory=OUTPUT_DIR):
    """Save markdown content to a file."""
    # Use the paper ID as filename
    safe_id = arxiv_id.replace("/", "_") if arxiv_id else ""
    filename = f"arxiv_{safe_id}.md" if safe_id else "arxiv_paper.md"

    path = Path(directory) / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info(f"Markdown file saved as: {path}")
    return path
