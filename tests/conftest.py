"""Shared fixtures for feed builder tests."""

import os
from datetime import UTC, datetime
from pathlib import Path
from unittest.mock import patch

import pytest

from feed_builder.config import ChannelConfig, Config


def write_document(root: Path, relative: str, content: str | bytes = "# Title\nBody") -> Path:
    """Create a document (and its parent directories) under root."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


def make_config(root: Path, output: Path, **env: str) -> Config:
    """Build a Config from a clean environment."""
    values = {
        "FEED_ROOT_DIR": str(root),
        "FEED_OUTPUT_PATH": str(output),
        "FEED_TITLE": "Test Blog",
        "FEED_LINK": "https://github.com/example/blog",
        "FEED_BUILD_DATE": "2024-05-01T12:00:00Z",
        **env,
    }
    with patch.dict(os.environ, values, clear=True):
        return Config()


@pytest.fixture()
def channel() -> ChannelConfig:
    return ChannelConfig(
        title="Test Blog",
        description="A blog made of markdown files",
        link="https://github.com/example/blog",
        copyright="2024 Test Blog - All rights reserved",
        ttl=1440,
        build_time=datetime(2024, 5, 1, 12, 0, tzinfo=UTC),
    )


@pytest.fixture()
def write_doc():
    return write_document


@pytest.fixture()
def config_factory():
    return make_config
