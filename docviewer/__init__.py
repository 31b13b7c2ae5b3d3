"""Read-only HTTP viewer backend for Markdown and JSON document trees."""

__version__ = "0.1.0"
