"""
Command-line interface for epubtrans.
"""

import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from .clipboard import copy_to_clipboard
from .errors import ExtractionError
from .extractor import extract_chapter, format_chapter_list, get_chapters, parse_arguments
from .models import Book
from .parser import EPUBParser

console = Console()
err_console = Console(stderr=True)

USAGE = """\
EPUB EBook Content Extractor/translator

Usage:
epubtrans <filename.epub>             # List chapters (filtered)
epubtrans <filename.epub> <n>         # Output chapter n (plain text)
epubtrans <filename.epub> -html <n>   # Output chapter n (HTML)"""


def load_book(filepath: str) -> Book:
    """Load the book behind a spinner on stderr."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=err_console,
        transient=True,
    ) as progress:
        progress.add_task(f"Loading {escape(Path(filepath).name)}...", total=None)
        parser = EPUBParser(filepath)
        book = parser.get_book()
        progress.stop()
    return book


def echo(line: str) -> None:
    """Print a line verbatim: no markup, emoji codes or highlighting."""
    console.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)


def fail(message: str, exit_code: int = 1) -> NoReturn:
    echo(message)
    sys.exit(exit_code)


@click.command(context_settings={"ignore_unknown_options": True})
@click.version_option(package_name="epubtrans", prog_name="epubtrans")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def cli(args: tuple[str, ...]):
    """
    epubtrans - List the numbered chapters of an EPUB file, or extract one.

    \b
    epubtrans BOOK.epub             list chapters (filtered)
    epubtrans BOOK.epub N           print chapter N as plain text
    epubtrans BOOK.epub -html N     print chapter N as HTML

    The extracted chapter is also copied to the clipboard.
    """
    invocation = parse_arguments(args)
    if invocation.filepath is None:
        echo(USAGE)
        return

    filepath = invocation.filepath

    try:
        book = load_book(filepath)
    except FileNotFoundError:
        fail(f"Error: File '{filepath}' does not exist.")
    except ValueError as e:
        cause = e.__cause__ if e.__cause__ is not None else e
        fail(f"Error reading EPUB: {cause}")

    try:
        if invocation.mode == "list":
            chapters = get_chapters(book)
            for line in format_chapter_list(book, chapters):
                echo(line)
            return

        text = extract_chapter(book, invocation.chapter, as_html=invocation.as_html)
    except ExtractionError as e:
        fail(str(e), e.exit_code)

    # Write to stdout (bypass rich console)
    print(text)
    copy_to_clipboard(text)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
