"""RSS 2.0 feed assembly and output."""

import os
import re
import tempfile
import xml.etree.ElementTree as ET
from datetime import date
from pathlib import Path
from urllib.parse import quote

from .config import ChannelConfig
from .dates import format_rfc822, format_rfc822_datetime
from .logging_config import create_execution_logger
from .models import Document, FeedItem


class OutputWriteError(OSError):
    """Raised when the rendered feed cannot be written to its destination."""


# Characters XML 1.0 does not allow, even escaped
_XML_INVALID_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")


def _xml_text(value: str) -> str:
    return _XML_INVALID_CHARS.sub("", value)


def _order_key(document: Document) -> tuple[bool, date]:
    # Undated documents go after every dated one
    return (document.published is None, document.published or date.min)


class FeedAssembler:
    """Orders documents and renders them into an RSS 2.0 document."""

    def __init__(
        self,
        channel: ChannelConfig,
        link_prefix: str,
        execution_id: str | None = None,
    ):
        """Initialize the assembler.

        Args:
            channel: Channel envelope for this build
            link_prefix: External URL prefix that document paths are appended to
            execution_id: Execution ID for logging context
        """
        self.channel = channel
        self.link_prefix = link_prefix.rstrip("/")
        self.logger = create_execution_logger("assembler", execution_id)

    def order(self, documents: list[Document]) -> list[Document]:
        """Sort documents oldest first; input order breaks ties."""
        return sorted(documents, key=_order_key)

    def build_link(self, path: str) -> str:
        """Map a relative document path to its external URL."""
        return f"{self.link_prefix}/{quote(path.lstrip('/'), safe='/')}"

    def to_item(self, document: Document) -> FeedItem:
        """Project a document into a feed item."""
        return FeedItem(
            title=document.title,
            description=document.description,
            link=self.build_link(document.path),
            pub_date=format_rfc822(document.published) if document.published else None,
        )

    def render(self, documents: list[Document]) -> bytes:
        """Render the channel and one item per document, in chronological order.

        Returns:
            UTF-8 encoded RSS document
        """
        items = [self.to_item(document) for document in self.order(documents)]
        build_date = format_rfc822_datetime(self.channel.build_time)

        rss = ET.Element("rss", version="2.0")
        channel = ET.SubElement(rss, "channel")
        for tag, text in (
            ("title", self.channel.title),
            ("description", self.channel.description),
            ("link", self.channel.link),
            ("copyright", self.channel.copyright),
            ("lastBuildDate", build_date),
            ("pubDate", build_date),
            ("ttl", str(self.channel.ttl)),
        ):
            ET.SubElement(channel, tag).text = _xml_text(text)

        for item in items:
            element = ET.SubElement(channel, "item")
            ET.SubElement(element, "title").text = _xml_text(item.title)
            ET.SubElement(element, "description").text = _xml_text(item.description)
            ET.SubElement(element, "link").text = item.link
            ET.SubElement(element, "guid", isPermaLink="true").text = item.link
            if item.pub_date:
                ET.SubElement(element, "pubDate").text = item.pub_date

        ET.indent(rss, space=" ")
        self.logger.info(f"Rendered feed with {len(items)} items", item_count=len(items))
        return ET.tostring(rss, encoding="utf-8", xml_declaration=True) + b"\n"

    def write(self, data: bytes, output_path: str | Path) -> Path:
        """Replace the output file with data without exposing a partial file.

        Raises:
            OutputWriteError: If the destination cannot be written
        """
        destination = Path(output_path)
        temp_path = None
        try:
            fd, temp_path = tempfile.mkstemp(
                dir=destination.parent,
                prefix=f".{destination.name}.",
                suffix=".tmp",
            )
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.chmod(temp_path, 0o644)
            os.replace(temp_path, destination)
        except OSError as e:
            if temp_path and os.path.exists(temp_path):
                os.remove(temp_path)
            self.logger.error(
                f"Failed to write feed to {destination}: {e}", error=str(e)
            )
            raise OutputWriteError(f"Failed to write feed to {destination}: {e}") from e

        self.logger.info(f"Feed written to {destination}", bytes_written=len(data))
        return destination
