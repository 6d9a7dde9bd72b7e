"""Data models for the feed builder."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Document:
    """A dated document discovered in the content tree."""

    path: str  # relative POSIX path, unique across the collection
    content: str
    published: date | None  # None when the path carries no valid date
    title: str
    description: str


@dataclass(frozen=True)
class FeedItem:
    """Represents a single rendered RSS item."""

    title: str
    description: str
    link: str
    pub_date: str | None = None


@dataclass(frozen=True)
class DocumentFailure:
    """A document or directory that could not be read."""

    path: str
    error: str


@dataclass
class BuildResult:
    """Outcome of a single feed build."""

    execution_id: str
    output_path: str
    success: bool = True
    item_count: int = 0
    failures: list[DocumentFailure] = field(default_factory=list)
    metrics: dict = field(default_factory=dict)
    error: str | None = None
