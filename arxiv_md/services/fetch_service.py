import logging

import requests

from arxiv_md.config import (
    AR5IV_BASE,
    AR5IV_UNAVAILABLE_STATUS,
    ARXIV_HTML_BASE,
    REQUEST_TIMEOUT,
    USER_AGENT,
)
from arxiv_md.exceptions import PaperFetchError, PaperHTMLNotAvailable

logger = logging.getLogger(__name__)

def fetch_html(
    arxiv_id: str,
    primary_base: str = AR5IV_BASE,
    secondary_base: str = ARXIV_HTML_BASE,
    timeout: int = REQUEST_TIMEOUT,
) -> str:
    """Fetch paper HTML from ar5iv, falling back to arxiv.org/html when ar5iv redirects."""
    headers = {"User-Agent": USER_AGENT}

    # Redirects are not followed so a 307 from ar5iv can be detected
    ar5iv_url = f"{primary_base}{arxiv_id}"
    logger.info(f"Fetching {ar5iv_url}")
    response = _get(ar5iv_url, headers=headers, timeout=timeout, allow_redirects=False)

    if response.status_code == AR5IV_UNAVAILABLE_STATUS:
        arxiv_url = f"{secondary_base}{arxiv_id}"
        logger.info(f"ar5iv does not host {arxiv_id}, falling back to {arxiv_url}")
        fallback = _get(arxiv_url, headers=headers, timeout=timeout)
        if not _is_success(fallback):
            logger.error(f"arxiv.org/html returned {fallback.status_code} for {arxiv_id}")
            raise PaperHTMLNotAvailable(
                f"Paper HTML not available: ar5iv redirected, arxiv.org/html returned {fallback.status_code}"
            )
        return _decode(fallback)

    # Other redirects are errors too, their bodies are not the paper
    if not _is_success(response):
        logger.error(f"Failed to fetch {ar5iv_url}: {response.status_code}")
        raise PaperFetchError(f"Failed to fetch {ar5iv_url}: {response.status_code}")

    return _decode(response)

def _get(url: str, **kwargs) -> requests.Response:
    try:
        return requests.get(url, **kwargs)
    except requests.RequestException as e:
        logger.error(f"Error fetching {url}: {e}")
        raise PaperFetchError(f"Failed to fetch {url}: {e}") from e

def _is_success(response) -> bool:
    return 200 <= response.status_code < 300

def _decode(response) -> str:
    # Without a declared charset requests falls back to ISO-8859-1; both mirrors serve UTF-8
    content_type = response.headers.get("Content-Type", "")
    if "charset" not in content_type.lower():
        response.encoding = "utf-8"
    return response.text
