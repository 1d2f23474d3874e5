"""Custom exceptions for arxiv-md."""

class ArxivMdError(Exception):
    """Base exception for arxiv-md errors."""
    pass

class PaperFetchError(ArxivMdError):
    """Exception for errors while downloading paper HTML."""
    pass

class PaperHTMLNotAvailable(PaperFetchError):
    """Neither ar5iv nor arxiv.org/html could serve the paper."""
    pass

class SearchError(ArxivMdError):
    """Exception for arXiv search errors."""
    pass
