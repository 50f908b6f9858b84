"""Data models for books, navigation entries and parsed invocations."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ContentFile:
    """One document from the book's reading order."""

    path: str
    content: str


@dataclass(frozen=True)
class NavEntry:
    """A table of contents entry with its nested entries."""

    title: Optional[str]
    link: Optional[str] = None
    children: list["NavEntry"] = field(default_factory=list)


@dataclass(frozen=True)
class Book:
    """A loaded EPUB: title, navigation forest and reading order."""

    title: str
    navigation: list[NavEntry]
    reading_order: list[ContentFile]


@dataclass(frozen=True)
class Invocation:
    """
    Parsed command line.

    Attributes:
        filepath: EPUB path, or None when no arguments were given
        chapter: Raw 1-based chapter token, validated later against the book
        as_html: Output raw markup instead of plain text
        extract: True when a chapter was requested (two or more arguments)
    """

    filepath: Optional[str] = None
    chapter: Optional[str] = None
    as_html: bool = False
    extract: bool = False

    @property
    def mode(self) -> str:
        if self.filepath is None:
            return "usage"
        return "extract" if self.extract else "list"
