from arxiv_md.services.paper_service import extract_paper, resolve_paper_id
from arxiv_md.services.arxiv_service import search_arxiv_papers
from arxiv_md.utils.html_to_md import html_to_markdown

# This lets you import directly from arxiv_md:
# from arxiv_md import extract_paper, html_to_markdown
