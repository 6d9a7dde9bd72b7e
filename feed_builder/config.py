"""Configuration management for the feed builder."""

import os
from dataclasses import dataclass
from datetime import UTC, datetime

from dateutil import parser as date_parser

from .logging_config import LOG_LEVELS


@dataclass(frozen=True)
class ChannelConfig:
    """Channel-level metadata for one feed build."""

    title: str
    description: str
    link: str
    copyright: str
    ttl: int
    build_time: datetime


class Config:
    """Main configuration manager."""

    DEFAULT_TITLE = "Githublog"
    DEFAULT_DESCRIPTION = "Markdown files in a git repo."
    DEFAULT_LINK = "https://github.com/example/githublog"
    DEFAULT_TTL_MINUTES = 24 * 60
    DEFAULT_DESCRIPTION_CHARS = 420
    DEFAULT_MAX_WORKERS = 8
    UNTITLED_PLACEHOLDER = "Untitled"

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.root_dir = os.getenv("FEED_ROOT_DIR", ".")
        self.output_path = os.getenv("FEED_OUTPUT_PATH", "feed.xml")
        self.title = os.getenv("FEED_TITLE", self.DEFAULT_TITLE)
        self.description = os.getenv("FEED_DESCRIPTION", self.DEFAULT_DESCRIPTION)
        self.link = os.getenv("FEED_LINK", self.DEFAULT_LINK).rstrip("/")
        self.link_prefix = os.getenv(
            "FEED_LINK_PREFIX", f"{self.link}/blob/main"
        ).rstrip("/")
        self.copyright_holder = os.getenv("FEED_COPYRIGHT_HOLDER", self.title)
        self.ttl = self._get_int("FEED_TTL_MINUTES", self.DEFAULT_TTL_MINUTES)
        self.description_chars = self._get_int(
            "FEED_DESCRIPTION_CHARS", self.DEFAULT_DESCRIPTION_CHARS
        )
        self.max_workers = self._get_int("FEED_MAX_WORKERS", self.DEFAULT_MAX_WORKERS)
        self.build_time = self._get_build_time()
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )

    @staticmethod
    def _get_int(name: str, default: int) -> int:
        """Read a positive integer from the environment."""
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ValueError(f"{name} must be an integer, got {raw!r}")
        if value < 1:
            raise ValueError(f"{name} must be positive, got {value}")
        return value

    @staticmethod
    def _get_build_time() -> datetime:
        """Build timestamp, pinned by FEED_BUILD_DATE for reproducible output."""
        raw = os.getenv("FEED_BUILD_DATE")
        if not raw:
            return datetime.now(UTC)
        try:
            build_time = date_parser.parse(raw)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Invalid FEED_BUILD_DATE {raw!r}: {e}")
        if build_time.tzinfo is None:
            build_time = build_time.replace(tzinfo=UTC)
        return build_time.astimezone(UTC)

    def get_channel_config(self) -> ChannelConfig:
        """Get the channel envelope for this run."""
        return ChannelConfig(
            title=self.title,
            description=self.description,
            link=self.link,
            copyright=f"{self.build_time.year} {self.copyright_holder} - All rights reserved",
            ttl=self.ttl,
            build_time=self.build_time,
        )
