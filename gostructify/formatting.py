"""Post-generation formatting through goimports or gofmt."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Final

from .shared.errors import FormattingError

logger = logging.getLogger(__name__)

# Tried in order; goimports also fixes the import block
FORMATTERS: Final[tuple[str, ...]] = ("goimports", "gofmt")


def find_formatter() -> str | None:
    """Return the path of the first available formatter."""
    for name in FORMATTERS:
        resolved = shutil.which(name)
        if resolved:
            return resolved
    return None


def format_source(src: bytes) -> bytes:
    """Format Go source, reading it from the formatter's stdin.

    Returns the source unchanged when no formatter is installed.

    Raises:
        FormattingError: If the formatter exits with an error.
    """
    formatter = find_formatter()
    if formatter is None:
        logger.warning("Neither goimports nor gofmt found on PATH; leaving source unformatted")
        return src

    logger.debug("$ %s", formatter)
    result = subprocess.run([formatter], input=src, capture_output=True, check=False)
    if result.returncode != 0:
        raise FormattingError(Path(formatter).name, result.stderr.decode("utf-8", errors="replace"))
    return result.stdout
