"""Docs Markdown: authoring helpers for Markdown documentation."""

__version__ = "0.1.0"
