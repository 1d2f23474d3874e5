from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class DetailLevel(str, Enum):
    """Which regions of a paper end up in the Markdown output."""

    ABSTRACT = "abstract"
    BODY = "body"
    APPENDIX = "appendix"
    ALL = "all"

    @classmethod
    def parse(cls, value) -> "DetailLevel":
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for level in cls:
            if level.value == normalized:
                return level
        choices = ", ".join(level.value for level in cls)
        raise ValueError(f'Invalid level "{value}". Must be one of: {choices}')


@dataclass
class ExtractedDocument:
    title: str = ""
    authors: str = ""
    abstract: str = ""
    body: str = ""
    appendix: str = ""
    references: str = ""


@dataclass
class PaperSummary:
    """One arXiv search hit."""

    title: str
    arxiv_id: str
    authors: List[str] = field(default_factory=list)
    year: Optional[int] = None
    category: Optional[str] = None
    comment: Optional[str] = None
    journal_ref: Optional[str] = None
    doi: Optional[str] = None
    abstract: str = ""


@dataclass
class ToolResult:
    text: str
    is_error: bool = False
