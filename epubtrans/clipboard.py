"""Best-effort copy to the system clipboard via platform commands."""

import logging
import subprocess
import sys
from typing import Optional

logger = logging.getLogger(__name__)


def clipboard_commands(platform: Optional[str] = None) -> list[list[str]]:
    """Candidate clipboard commands for a platform, in order of preference."""
    if platform is None:
        platform = sys.platform
    if platform == "darwin":
        return [["pbcopy"]]
    if platform.startswith("win"):
        return [["clip"], ["powershell", "-command", "Set-Clipboard"]]
    return [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ]


def command_encoding(cmd: list[str]) -> str:
    """Encoding the command expects on stdin; Windows `clip` reads UTF-16."""
    return "utf-16" if cmd[0] == "clip" else "utf-8"


def copy_to_clipboard(text: str) -> bool:
    """
    Copy text to the clipboard using the first command that works.

    The text is encoded explicitly, never with the locale encoding, and the
    command's own output is discarded so background helpers such as
    `wl-copy` do not hold on to a piped stdout.

    Returns:
        True if a command succeeded. Failure is logged, never raised.
    """
    for cmd in clipboard_commands():
        try:
            subprocess.run(
                cmd,
                input=text.encode(command_encoding(cmd)),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=True,
            )
            logger.debug(f"Copied {len(text)} characters with {cmd[0]}")
            return True
        except (OSError, UnicodeError, subprocess.CalledProcessError) as e:
            logger.debug(f"Clipboard command {cmd[0]} failed: {e}")
            continue

    logger.warning("No clipboard command available; output was not copied")
    return False
