"""Bridges RichText spans onto Qt text documents."""

from PyQt6.QtGui import QBrush, QColor, QTextCharFormat, QTextCursor, QTextDocument

from core.rich_text import EmphasisSpan, RichText, SpanKind


def char_format_for(span: EmphasisSpan) -> QTextCharFormat:
    """Return the character format that renders *span*."""
    fmt = QTextCharFormat()
    if span.kind is SpanKind.PREFIX_BOLD:
        fmt.setFontWeight(int(getattr(span.style, "value", span.style)))
    else:
        fmt.setBackground(QBrush(QColor(span.style)))
    return fmt


def apply_to_document(document: QTextDocument, rich: RichText) -> None:
    """Replace *document*'s content with *rich*, formatting every span."""
    document.setPlainText(rich.text)
    for span in rich.spans():
        cursor = QTextCursor(document)
        cursor.setPosition(span.start)
        cursor.setPosition(span.end, QTextCursor.MoveMode.KeepAnchor)
        cursor.mergeCharFormat(char_format_for(span))
