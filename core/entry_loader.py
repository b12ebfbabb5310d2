"""Loads the entries shown by the filter window.

An entries file is plain text with one display string per line, or a CSV
file whose first column holds the display strings.
"""

import csv
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {".txt", ".csv"}


class EntryFileError(Exception):
    """Raised when an entries file cannot be read."""


def read_entries(path: Path) -> list[str]:
    """Read display strings from *path*, skipping blank lines.

    For ``.csv`` files only the first column is used.

    Raises:
        EntryFileError: If the file is missing or its type is unsupported.
    """
    path = Path(path)
    if not path.exists():
        raise EntryFileError(f"File not found: {path}")

    ext = path.suffix.lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise EntryFileError(
            f"Unsupported file type: '{ext}'. "
            f"Supported: {', '.join(sorted(SUPPORTED_EXTENSIONS))}"
        )

    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        # Fallback for files with non-UTF-8 encoding
        raw = path.read_text(encoding="latin-1")

    if ext == ".csv":
        cells = [row[0] for row in csv.reader(raw.splitlines()) if row]
    else:
        cells = raw.splitlines()
    entries = [cell.strip() for cell in cells if cell.strip()]
    logger.info("Loaded %d entries from %s", len(entries), path)
    return entries
