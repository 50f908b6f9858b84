"""Render a chapter's markup as plain text or raw HTML."""

from bs4 import BeautifulSoup  # type: ignore[import-untyped]


def format_as_text(markup: str) -> str:
    """
    Strip tags and return the visible text of the document body.

    Args:
        markup: HTML or XHTML document

    Returns:
        Concatenated body text, trimmed; empty if there is no <body>
    """
    soup = BeautifulSoup(markup, "html.parser")
    body = soup.find("body")
    if body is None:
        return ""
    return body.get_text().strip()


def format_as_html(markup: str) -> str:
    """Return the markup unchanged apart from trimming surrounding whitespace."""
    return markup.strip()
