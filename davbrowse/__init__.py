"""Building blocks for a WebDAV file browser: PROPFIND requests, server bookmarks, list models, sorting and settings."""

__version__ = "1.0.0"