"""
Chapter extraction pipeline.

Everything here is free of side effects: the CLI loads the book, calls
these functions, and does the printing and clipboard work itself.
"""

from collections.abc import Sequence
from typing import Optional

from .errors import NoChaptersError, NoNavigationError
from .formatters import format_as_html, format_as_text
from .models import Book, Invocation, NavEntry
from .navigation import filter_chapters, flatten_navigation, resolve_content, select_chapter

HTML_FLAG = "-html"


def parse_arguments(args: Sequence[str]) -> Invocation:
    """
    Interpret the positional arguments.

    `<file>` lists chapters, `<file> <n>` extracts chapter n as text and
    `<file> -html <n>` extracts it as HTML. The flag may appear anywhere
    after the file path and is matched case-insensitively.
    """
    if not args:
        return Invocation()

    filepath, rest = args[0], list(args[1:])
    if not rest:
        return Invocation(filepath=filepath)

    as_html = any(arg.lower() == HTML_FLAG for arg in rest)
    tokens = [arg for arg in rest if arg.lower() != HTML_FLAG]
    return Invocation(
        filepath=filepath,
        chapter=tokens[0] if tokens else None,
        as_html=as_html,
        extract=True,
    )


def get_chapters(book: Book) -> list[NavEntry]:
    """
    Flatten the book's navigation and keep chapter-like entries.

    Raises:
        NoNavigationError: If the book has no navigation entries
        NoChaptersError: If no entry passes the chapter filter
    """
    if not book.navigation:
        raise NoNavigationError()

    chapters = filter_chapters(flatten_navigation(book.navigation))
    if not chapters:
        raise NoChaptersError()
    return chapters


def format_chapter_list(book: Book, chapters: list[NavEntry]) -> list[str]:
    """Lines printed in list mode."""
    lines = [
        f"Title: {book.title}",
        "Filtered Chapters (title contains a digit):",
    ]
    lines.extend(f"{idx}. {chapter.title}" for idx, chapter in enumerate(chapters, 1))
    return lines


def extract_chapter(book: Book, token: Optional[str], as_html: bool = False) -> str:
    """
    Render the chapter selected by a 1-based token.

    Raises:
        NoNavigationError, NoChaptersError: See `get_chapters`
        InvalidChapterError: If the token does not select a chapter
        ContentNotFoundError: If the chapter's file is not in the reading order
    """
    chapters = get_chapters(book)
    entry = select_chapter(chapters, token)
    content_file = resolve_content(entry, book.reading_order)
    if as_html:
        return format_as_html(content_file.content)
    return format_as_text(content_file.content)
