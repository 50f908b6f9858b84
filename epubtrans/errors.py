"""Exceptions raised while selecting and extracting a chapter."""


class ExtractionError(Exception):
    """Base class; the message is the line shown to the user."""

    exit_code = 1


class NoNavigationError(ExtractionError):
    def __init__(self) -> None:
        super().__init__("Error: No chapters or navigation found in this EPUB.")


class NoChaptersError(ExtractionError):
    """No navigation entry passed the chapter filter. Not a failure."""

    exit_code = 0

    def __init__(self) -> None:
        super().__init__("No chapters contain numbers in their titles.")


class InvalidChapterError(ExtractionError):
    def __init__(self) -> None:
        super().__init__("Error: Invalid chapter number.")


class ContentNotFoundError(ExtractionError):
    def __init__(self) -> None:
        super().__init__("Error: Chapter content not found in EPUB.")
