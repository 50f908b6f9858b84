"""Shared fixtures: small EPUB files written with ebooklib."""

from pathlib import Path

import pytest
from ebooklib import epub  # type: ignore[import-untyped]


def _chapter(title: str, file_name: str, body: str) -> epub.EpubHtml:
    chapter = epub.EpubHtml(title=title, file_name=file_name, lang="en")
    chapter.content = f"<html><body><h1>{title}</h1>{body}</body></html>"
    return chapter


@pytest.fixture
def sample_epub(tmp_path: Path) -> Path:
    """
    Book with a nested TOC:

        Introduction
        Part One
            Chapter 1
            Chapter 2
        Epilogue
        Acknowledgements
    """
    epub_path = tmp_path / "sample.epub"

    book = epub.EpubBook()
    book.set_identifier("epubtrans-sample")
    book.set_title("Sample Book")
    book.set_language("en")
    book.add_author("Test Author")

    intro = _chapter("Introduction", "intro.xhtml", "<p>Before it all began.</p>")
    ch1 = _chapter("Chapter 1", "chap_01.xhtml", "<p>It was a <b>dark</b> night.</p>")
    ch2 = _chapter("Chapter 2", "chap_02.xhtml", "<p>Morning came slowly.</p>")
    epilogue = _chapter("Epilogue", "epilogue.xhtml", "<p>They lived on.</p>")
    thanks = _chapter("Acknowledgements", "thanks.xhtml", "<p>Thank you.</p>")
    for item in (intro, ch1, ch2, epilogue, thanks):
        book.add_item(item)

    book.toc = (
        epub.Link("intro.xhtml", "Introduction", "intro"),
        (
            epub.Section("Part One"),
            (
                epub.Link("chap_01.xhtml", "Chapter 1", "chap_01"),
                epub.Link("chap_02.xhtml#start", "Chapter 2", "chap_02"),
            ),
        ),
        epub.Link("epilogue.xhtml", "Epilogue", "epilogue"),
        epub.Link("thanks.xhtml", "Acknowledgements", "thanks"),
    )
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = ["nav", intro, ch1, ch2, epilogue, thanks]

    epub.write_epub(str(epub_path), book, {})
    return epub_path


@pytest.fixture
def missing_content_epub(tmp_path: Path) -> Path:
    """Book whose only chapter links to a file outside the spine."""
    epub_path = tmp_path / "missing.epub"

    book = epub.EpubBook()
    book.set_identifier("epubtrans-missing")
    book.set_title("Missing Content")
    book.set_language("en")

    ch1 = _chapter("Chapter 1", "chap_01.xhtml", "<p>Present.</p>")
    book.add_item(ch1)
    book.toc = (epub.Link("chap_99.xhtml", "Chapter 99", "chap_99"),)
    book.add_item(epub.EpubNcx())
    book.add_item(epub.EpubNav())
    book.spine = ["nav", ch1]

    epub.write_epub(str(epub_path), book, {})
    return epub_path


@pytest.fixture
def clipboard(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Capture clipboard writes made by the CLI."""
    copied: list[str] = []

    def fake_copy(text: str) -> bool:
        copied.append(text)
        return True

    monkeypatch.setattr("epubtrans.cli.copy_to_clipboard", fake_copy)
    return copied
