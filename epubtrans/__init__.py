"""
epubtrans - Extract chapter text from EPUB files.

A small CLI tool that lists the numbered chapters of an EPUB file and
copies a single chapter, as plain text or raw HTML, to the clipboard.
"""

from .formatters import format_as_html, format_as_text
from .models import Book, ContentFile, NavEntry
from .navigation import filter_chapters, flatten_navigation, resolve_content
from .parser import EPUBParser

__all__ = [
    "EPUBParser",
    "Book",
    "ContentFile",
    "NavEntry",
    "flatten_navigation",
    "filter_chapters",
    "resolve_content",
    "format_as_text",
    "format_as_html",
]

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "0.0.0+unknown"
