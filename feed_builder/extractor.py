"""Title and description extraction for documents."""

import re
from dataclasses import dataclass
from pathlib import Path

from .dates import resolve_date
from .models import Document
from .plaintext import reduce_to_plain_text

TRUNCATION_MARKER = "..."

_LINE_BREAK_RUN = re.compile(r"\s*\n\s*")


@dataclass(frozen=True)
class PostInfo:
    """Metadata derived from a document's text."""

    title: str
    description: str


def extract_metadata(content: str, description_chars: int) -> PostInfo:
    """Derive a title and a bounded description from markdown content.

    The first non-blank line is the title. The description is built from at
    most ``description_chars`` source characters of the remaining lines, so
    the cost of reduction stays bounded for long documents.

    Args:
        content: Raw document text
        description_chars: Character budget for the description body

    Returns:
        PostInfo; the title is empty when the content has no text at all
    """
    lines = [line for line in content.splitlines() if line.strip()]
    if not lines:
        return PostInfo(title="", description=TRUNCATION_MARKER)

    title = _LINE_BREAK_RUN.sub(" ", reduce_to_plain_text(lines[0])).strip()

    body_source = "\n".join(lines[1:])[:description_chars]
    body = _LINE_BREAK_RUN.sub(" ", reduce_to_plain_text(body_source)).strip()
    body = body[:description_chars].rstrip()

    return PostInfo(title=title, description=body + TRUNCATION_MARKER)


def load_document(
    root: str | Path,
    path: str | Path,
    description_chars: int,
    untitled: str = "Untitled",
) -> Document:
    """Read one document and materialize its metadata.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    relative = Path(path).relative_to(root).as_posix()
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    info = extract_metadata(content, description_chars)
    return Document(
        path=relative,
        content=content,
        published=resolve_date(relative),
        title=info.title or untitled,
        description=info.description,
    )
