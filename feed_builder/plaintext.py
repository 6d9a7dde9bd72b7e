"""Markdown to plain text reduction."""

import markdown
from bs4 import BeautifulSoup

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]


def _normalize_whitespace(text: str) -> str:
    """Collapse runs of spaces and tabs, drop blank lines, keep line breaks."""
    lines = (" ".join(line.split()) for line in text.splitlines())
    return "\n".join(line for line in lines if line)


def reduce_to_plain_text(text: str) -> str:
    """Strip markdown syntax from text, keeping only what a reader would see.

    Links keep their visible text, images their alt text, and code blocks
    their contents. Inline HTML tags are removed; script and style blocks
    are dropped entirely.

    Args:
        text: Markdown source, possibly malformed

    Returns:
        Plain text with block elements separated by newlines
    """
    if not text or not text.strip():
        return ""

    try:
        html = markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)
    except RecursionError:
        # Nesting too deep for the markdown parser; strip tags from the source
        html = text
    soup = BeautifulSoup(html, "html.parser")

    for element in soup(["script", "style"]):
        element.decompose()

    for image in soup.find_all("img"):
        image.replace_with(image.get("alt", ""))

    return _normalize_whitespace(soup.get_text())
