"""Filter window: narrows a list of entries as the user types a prefix."""

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QLabel,
    QLineEdit,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from config.settings import HighlightSettings
from core.prefix_matcher import strip_leading_separators
from core.text_highlighter import TextHighlighter

logger = logging.getLogger(__name__)


class PrefixFilterWindow(QWidget):
    """Shows every entry whose words start with the typed filter."""

    def __init__(
        self,
        entries: list[str],
        highlighter: TextHighlighter | None = None,
        settings: HighlightSettings | None = None,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings
        if highlighter is None:
            highlighter = (
                TextHighlighter.from_settings(settings) if settings else TextHighlighter()
            )
        self._highlighter = highlighter
        self._entries = list(entries)
        self._labels: list[QLabel] = []
        self.setWindowTitle("Prefix Filter")
        self.resize(420, 520)
        self._build_ui()
        self._restore_geometry()
        self._on_filter_changed("")

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)

        self._filter_input = QLineEdit()
        self._filter_input.setPlaceholderText("Type to filter…")
        self._filter_input.setClearButtonEnabled(True)
        self._filter_input.textChanged.connect(self._on_filter_changed)
        layout.addWidget(self._filter_input)

        container = QWidget()
        self._list_layout = QVBoxLayout(container)
        self._list_layout.setContentsMargins(4, 4, 4, 4)
        self._list_layout.setSpacing(2)
        for entry in self._entries:
            label = QLabel()
            label.setTextFormat(Qt.TextFormat.RichText)
            self._labels.append(label)
            self._list_layout.addWidget(label)
        self._list_layout.addStretch()

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(container)
        layout.addWidget(scroll)

        self._count_label = QLabel("")
        layout.addWidget(self._count_label)

    def _restore_geometry(self) -> None:
        if self._settings and self._settings.window_geometry:
            self.restoreGeometry(self._settings.window_geometry)

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def set_filter(self, prefix: str) -> None:
        self._filter_input.setText(prefix)

    def visible_entries(self) -> list[str]:
        return [e for e, label in zip(self._entries, self._labels) if not label.isHidden()]

    def label_at(self, index: int) -> QLabel:
        return self._labels[index]

    def label_for(self, entry: str) -> QLabel:
        """Return the label of the first entry equal to *entry*."""
        return self._labels[self._entries.index(entry)]

    def _on_filter_changed(self, prefix: str) -> None:
        shown = 0
        for entry, label in zip(self._entries, self._labels):
            rich = self._highlighter.apply_prefix_highlight(entry, prefix)
            matched = not strip_leading_separators(prefix) or not rich.is_plain()
            label.setText(rich.to_html())
            label.setVisible(matched)
            shown += matched
        self._count_label.setText(f"{shown} of {len(self._entries)} entries")
        logger.debug("Filter %r shows %d entries", prefix, shown)

    def closeEvent(self, event) -> None:
        if self._settings:
            self._settings.window_geometry = bytes(self.saveGeometry())
            self._settings.sync()
        super().closeEvent(event)
