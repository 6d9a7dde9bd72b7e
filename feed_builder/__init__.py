"""Build an RSS feed from markdown documents stored in a year/month/day tree."""

__version__ = "1.0.0"
