"""
EPUB loader producing the book title, navigation tree and reading order.
"""

import logging
import urllib.parse
from pathlib import Path
from typing import Any, Optional

from ebooklib import epub  # type: ignore[import-untyped]

from .models import Book, ContentFile, NavEntry

logger = logging.getLogger(__name__)


class EPUBParser:
    """
    Load an EPUB file and expose it as a `Book`.

    The navigation tree comes from the table of contents parsed by ebooklib
    (NAV HTML for EPUB3, NCX for EPUB2). The reading order follows the spine.
    """

    def __init__(self, filepath: str):
        """
        Initialize parser with EPUB file.

        Args:
            filepath: Path to the EPUB file

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file is not a valid EPUB
        """
        self.filepath = Path(filepath)
        if not self.filepath.exists():
            raise FileNotFoundError(f"File '{filepath}' does not exist.")

        self.book: Any = None
        self._book: Optional[Book] = None

        self._load_epub()

    def _load_epub(self) -> None:
        """Load and parse the EPUB file."""
        try:
            self.book = epub.read_epub(str(self.filepath))
            logger.info(f"Loaded EPUB: {self.filepath.name}")
        except Exception as e:
            raise ValueError(f"Failed to read EPUB file: {e}") from e

    def get_title(self) -> str:
        """Return the first Dublin Core title, or an empty string."""
        try:
            items = self.book.get_metadata("DC", "title")
            if items and len(items) > 0:
                return str(items[0][0])
        except Exception as e:
            logger.warning(f"Error extracting title: {e}")
        return ""

    def get_navigation(self) -> list[NavEntry]:
        """Convert the ebooklib table of contents into `NavEntry` trees."""
        return self._build_entries(list(self.book.toc or []))

    def _build_entries(self, toc_items: list[Any]) -> list[NavEntry]:
        entries: list[NavEntry] = []
        for item in toc_items:
            if isinstance(item, tuple) and item:
                head = item[0]
                children = item[1] if len(item) > 1 else []
                child_entries = self._build_entries(list(children or []))
                if isinstance(head, (epub.Link, epub.Section)):
                    entries.append(
                        NavEntry(
                            title=head.title,
                            link=_content_path(head.href),
                            children=child_entries,
                        )
                    )
                else:
                    entries.extend(self._build_entries([head]))
                    entries.extend(child_entries)
            elif isinstance(item, (epub.Link, epub.Section)):
                entries.append(NavEntry(title=item.title, link=_content_path(item.href)))
            elif isinstance(item, list):
                entries.extend(self._build_entries(item))
            else:
                logger.warning(f"Skipping unknown TOC entry: {item!r}")
        return entries

    def get_reading_order(self) -> list[ContentFile]:
        """Resolve spine ids to content files, in spine order."""
        files: list[ContentFile] = []
        for spine_item in self.book.spine:
            item_id = spine_item[0] if isinstance(spine_item, tuple) else spine_item
            item = self.book.get_item_with_id(item_id)
            if item is None:
                logger.warning(f"Spine item with id '{item_id}' not found")
                continue
            content = item.get_content().decode("utf-8", errors="ignore")
            files.append(ContentFile(path=item.get_name(), content=content))
        return files

    def get_book(self) -> Book:
        """
        Build the `Book` for this file.

        Returns:
            Book with title, navigation forest and reading order
        """
        if self._book is None:
            self._book = Book(
                title=self.get_title(),
                navigation=self.get_navigation(),
                reading_order=self.get_reading_order(),
            )
        return self._book


def _content_path(href: Optional[str]) -> Optional[str]:
    """Strip the fragment from a TOC href and decode percent-escapes."""
    if not href:
        return None
    path = href.split("#", 1)[0]
    return urllib.parse.unquote(path) or None
