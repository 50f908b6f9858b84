"""Tests for plain-text and HTML chapter rendering."""

from epubtrans.formatters import format_as_html, format_as_text

MARKUP = "<body><p>Hello <b>World</b></p></body>"


def test_text_strips_tags() -> None:
    assert format_as_text(MARKUP) == "Hello World"


def test_text_trims_whitespace() -> None:
    markup = "<html><body>\n\n  <p>Padded</p>\n  </body></html>"
    assert format_as_text(markup) == "Padded"


def test_text_ignores_head() -> None:
    markup = (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        "<html><head><title>Chapter 1</title></head>"
        "<body><p>Only the body.</p></body></html>"
    )
    assert format_as_text(markup) == "Only the body."


def test_text_without_body_is_empty() -> None:
    assert format_as_text("<p>No body here</p>") == ""
    assert format_as_text("") == ""


def test_html_is_unchanged_apart_from_trim() -> None:
    assert format_as_html(MARKUP) == MARKUP
    assert format_as_html(f"\n  {MARKUP}\n") == MARKUP
