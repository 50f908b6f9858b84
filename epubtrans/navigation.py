"""
Navigation helpers: flatten the table of contents, keep chapter-like
entries, and resolve an entry to its content file.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from .errors import ContentNotFoundError, InvalidChapterError
from .models import ContentFile, NavEntry

logger = logging.getLogger(__name__)

CHAPTER_KEYWORDS = ("epilogue", "prologue")


def flatten_navigation(entries: Iterable[NavEntry]) -> list[NavEntry]:
    """
    Flatten a navigation forest in pre-order (parents before children).

    Args:
        entries: Top-level navigation entries

    Returns:
        All entries, depth-first, siblings in their original order
    """
    flat: list[NavEntry] = []
    # Reversed so the first sibling is popped first
    stack = list(reversed(list(entries)))
    while stack:
        entry = stack.pop()
        flat.append(entry)
        if entry.children:
            stack.extend(reversed(entry.children))
    return flat


def is_chapter_title(title: Optional[str]) -> bool:
    """True if the title has a digit or mentions a prologue or epilogue."""
    if not title:
        return False
    if any(ch.isdecimal() for ch in title):
        return True
    lowered = title.casefold()
    return any(keyword in lowered for keyword in CHAPTER_KEYWORDS)


def filter_chapters(entries: Iterable[NavEntry]) -> list[NavEntry]:
    """Keep entries whose title looks like a chapter, preserving order."""
    return [entry for entry in entries if is_chapter_title(entry.title)]


def select_chapter(chapters: list[NavEntry], token: Optional[str]) -> NavEntry:
    """
    Pick a chapter by its 1-based position in the filtered list.

    Raises:
        InvalidChapterError: If the token is missing, not an integer,
            or outside 1..len(chapters)
    """
    if token is None:
        raise InvalidChapterError()
    try:
        index = int(token.strip())
    except ValueError:
        raise InvalidChapterError() from None
    if index < 1 or index > len(chapters):
        raise InvalidChapterError()
    return chapters[index - 1]


def normalize_path(path: str) -> str:
    """Use forward slashes and ignore case when comparing content paths."""
    return path.replace("\\", "/").casefold()


def resolve_content(entry: NavEntry, reading_order: Iterable[ContentFile]) -> ContentFile:
    """
    Find the reading order file a navigation entry links to.

    Raises:
        ContentNotFoundError: If the entry has no link or nothing matches
    """
    if not entry.link:
        raise ContentNotFoundError()

    target = normalize_path(entry.link)
    for content_file in reading_order:
        if normalize_path(content_file.path) == target:
            return content_file

    logger.debug(f"No reading order file matches '{entry.link}'")
    raise ContentNotFoundError()
