"""Prefix Filter entry point.

Run with:
    python main.py [entries.txt]
"""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication

# Configure logging before any app imports
_level = logging.DEBUG if os.environ.get("HIGHLIGHTER_DEBUG") == "1" else logging.INFO
logging.basicConfig(
    level=_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger(__name__)

_SAMPLE_ENTRIES = [
    "Ada Lovelace",
    "Alan Turing",
    "Grace Hopper",
    "Edsger Dijkstra",
    "Barbara Liskov",
    "Donald Knuth",
    "Margaret Hamilton",
    "Tony Hoare",
]


def main() -> int:
    app = QApplication(sys.argv)
    app.setApplicationName("Prefix Filter")
    app.setOrganizationName("TextHighlighter")
    app.setStyle("Fusion")

    from config.settings import HighlightSettings
    from core.entry_loader import EntryFileError, read_entries
    settings = HighlightSettings()

    path = sys.argv[1] if len(sys.argv) > 1 else settings.last_entries_path
    entries = _SAMPLE_ENTRIES
    if path:
        try:
            entries = read_entries(path)
            settings.last_entries_path = str(path)
        except EntryFileError as exc:
            logger.error("%s; falling back to sample entries", exc)

    from app.window import PrefixFilterWindow
    window = PrefixFilterWindow(entries, settings=settings)
    window.show()

    logger.info("Prefix Filter started with %d entries.", len(entries))
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
