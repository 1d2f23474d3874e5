import os
from pathlib import Path

# Mirror configuration
AR5IV_BASE = os.getenv("AR5IV_BASE", "https://ar5iv.labs.arxiv.org/html/")
ARXIV_HTML_BASE = os.getenv("ARXIV_HTML_BASE", "https://arxiv.org/html/")

# Site-relative image paths are resolved against this host
AR5IV_HOST = os.getenv("AR5IV_HOST", "https://ar5iv.labs.arxiv.org")

USER_AGENT = os.getenv("USER_AGENT", "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7)")
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "30"))

# Status code ar5iv answers with when it does not host the paper
AR5IV_UNAVAILABLE_STATUS = 307

# arXiv search settings
SEARCH_MAX_RESULTS = int(os.getenv("SEARCH_MAX_RESULTS", "5"))
SEARCH_PAGE_SIZE = int(os.getenv("SEARCH_PAGE_SIZE", "100"))
SEARCH_NUM_RETRIES = int(os.getenv("SEARCH_NUM_RETRIES", "3"))

# Markdown output
FOOTNOTE_PREVIEW_CHARS = 50
DEFAULT_LEVEL = "body"
OUTPUT_DIR = Path(os.getenv("ARXIV_MD_OUTPUT_DIR", "."))
