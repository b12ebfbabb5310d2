"""Prefix and masking highlighters for list entries and labels.

Usage:
    from core.text_highlighter import TextHighlighter
    highlighter = TextHighlighter(QFont.Weight.Bold)
    rich = highlighter.apply_prefix_highlight("Ada Lovelace", "lo")
    label.setText(rich.to_html())
"""

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont
from PyQt6.QtWidgets import QLabel

from core.prefix_matcher import find_prefix_range, strip_leading_separators
from core.rich_text import RichText, SpanKind, SpanRangeError

logger = logging.getLogger(__name__)

DEFAULT_MASK_COLOR = "#ffeb3b"


class TextHighlighter:
    """Applies prefix-bold and mask-background emphasis to text.

    The emphasis styles are fixed when the highlighter is created.
    """

    def __init__(
        self,
        text_style: QFont.Weight = QFont.Weight.Bold,
        mask_color: QColor | str = DEFAULT_MASK_COLOR,
    ) -> None:
        self._text_style = text_style
        self._mask_color = QColor(mask_color)

    @classmethod
    def from_settings(cls, settings) -> "TextHighlighter":
        """Build a highlighter from a ``config.settings.HighlightSettings``."""
        return cls(settings.prefix_weight, settings.mask_color)

    @property
    def text_style(self) -> QFont.Weight:
        return self._text_style

    @property
    def mask_color(self) -> QColor:
        return QColor(self._mask_color)

    # ------------------------------------------------------------------
    # Prefix highlight
    # ------------------------------------------------------------------

    def apply_prefix_highlight(self, text: str, prefix: str) -> RichText:
        """Return *text* with the first word starting with *prefix* emphasised.

        Leading separators in *prefix* are ignored.  When nothing matches
        the result carries no spans.
        """
        result = RichText(text)
        match = find_prefix_range(text, strip_leading_separators(prefix or ""))
        if match is not None:
            result.attach(SpanKind.PREFIX_BOLD, match.start, match.end, self._text_style)
        return result

    def set_prefix_text(self, label: QLabel, text: str, prefix: str) -> None:
        """Show *text* on *label* with the matching prefix emphasised."""
        label.setTextFormat(Qt.TextFormat.RichText)
        label.setText(self.apply_prefix_highlight(text, prefix).to_html())

    # ------------------------------------------------------------------
    # Masking highlight
    # ------------------------------------------------------------------

    def apply_masking_highlight(self, buffer: RichText, start: int, end: int) -> None:
        """Emphasise ``[start, end)`` of *buffer* in place.

        Same-kind spans intersecting the range are merged into a single
        span covering their union.  Empty or inverted ranges are ignored.

        Raises:
            SpanRangeError: If the range lies outside the buffer.
        """
        if start >= end:
            return
        if start < 0 or end > len(buffer):
            raise SpanRangeError(
                f"Mask range [{start}, {end}) is outside the text bounds [0, {len(buffer)}]"
            )

        merged_start, merged_end = start, end
        for span in buffer.detach(SpanKind.MASK_BACKGROUND, start, end):
            merged_start = min(merged_start, span.start)
            merged_end = max(merged_end, span.end)
        if (merged_start, merged_end) != (start, end):
            logger.debug(
                "Merged mask [%d, %d) into [%d, %d)", start, end, merged_start, merged_end
            )
        buffer.attach(SpanKind.MASK_BACKGROUND, merged_start, merged_end, QColor(self._mask_color))
