"""
Export sinks - clipboard and markdown file
"""
from __future__ import annotations

import logging
import re
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

CLIPBOARD_COMMANDS: List[List[str]] = [
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
]


class ClipboardError(RuntimeError):
    """Raised when text cannot be placed on the clipboard."""


def suggest_filename(title: Optional[str]) -> str:
    """Derive a download filename from an article title"""
    if not title:
        return "article.md"
    return re.sub(r"[^a-z0-9]", "_", title.lower()) + ".md"


def save_markdown(text: str, filepath) -> Path:
    """Write markdown to ``filepath``, creating parent directories"""
    output = Path(filepath)
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8") as f:
        f.write(text)
    logger.info("Saved %d characters to %s", len(text), output)
    return output


def copy_to_clipboard(text: str) -> str:
    """
    Copy text with the first clipboard tool found on PATH

    Returns:
        Name of the tool that was used

    Raises:
        ClipboardError: If no tool is available or it fails
    """
    for command in CLIPBOARD_COMMANDS:
        if shutil.which(command[0]) is None:
            continue
        result = subprocess.run(
            command,
            input=text,
            capture_output=True,
            text=True,
        )
        if result.returncode != 0:
            raise ClipboardError(
                f"{command[0]} exited with {result.returncode}: "
                f"{(result.stderr or '').strip()}"
            )
        logger.debug("Copied %d characters using %s", len(text), command[0])
        return command[0]

    raise ClipboardError(
        "No clipboard tool found (tried pbcopy, wl-copy, xclip, xsel, clip)."
    )
