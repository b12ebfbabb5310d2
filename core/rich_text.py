"""Plain-Python rich-text buffer with per-kind emphasis spans.

Spans of one kind never overlap: attaching a span first detaches every
same-kind span that intersects its range.  Spans of different kinds are
independent of each other.
"""

import html
import logging
from bisect import insort
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class RichTextError(Exception):
    """Raised when a rich-text buffer is used with invalid arguments."""


class SpanRangeError(RichTextError):
    """Raised when a span range lies outside the buffer or is inverted."""


class SpanKind(Enum):
    PREFIX_BOLD = "prefix-bold"
    MASK_BACKGROUND = "mask-background"


@dataclass(frozen=True)
class EmphasisSpan:
    """An emphasis attribute bound to the half-open range ``[start, end)``.

    ``style`` is a ``QFont.Weight`` for prefix spans and a ``QColor`` for
    mask spans.
    """

    kind: SpanKind
    start: int
    end: int
    style: Any = None

    def intersects(self, start: int, end: int) -> bool:
        return self.start < end and start < self.end


class RichText:
    """A string plus emphasis spans, mutable through attach/detach."""

    def __init__(self, text: str = "") -> None:
        self._text = str(text)
        self._spans: dict[SpanKind, list[EmphasisSpan]] = {kind: [] for kind in SpanKind}

    # ------------------------------------------------------------------
    # Plain-text view
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RichText):
            return NotImplemented
        return self._text == other._text and self.spans() == other.spans()

    def __repr__(self) -> str:
        return f"RichText({self._text!r}, spans={self.spans()!r})"

    def is_plain(self) -> bool:
        """Return True if no span of any kind is attached."""
        return not any(self._spans.values())

    # ------------------------------------------------------------------
    # Span bookkeeping
    # ------------------------------------------------------------------

    def _check_range(self, start: int, end: int) -> None:
        if start < 0 or end > len(self._text):
            raise SpanRangeError(
                f"Range [{start}, {end}) is outside the text bounds [0, {len(self._text)}]"
            )
        if start > end:
            raise SpanRangeError(f"Range [{start}, {end}) is inverted")

    def spans(self, kind: SpanKind | None = None) -> list[EmphasisSpan]:
        """Return attached spans ordered by start, optionally of one kind."""
        if kind is not None:
            return list(self._spans[kind])
        return sorted(
            (s for spans in self._spans.values() for s in spans),
            key=lambda s: (s.start, s.end, s.kind.value),
        )

    def detach(self, kind: SpanKind, start: int, end: int) -> list[EmphasisSpan]:
        """Remove every *kind* span intersecting ``[start, end)``.

        Returns:
            The removed spans, ordered by start.
        """
        kept: list[EmphasisSpan] = []
        removed: list[EmphasisSpan] = []
        for span in self._spans[kind]:
            (removed if span.intersects(start, end) else kept).append(span)
        self._spans[kind] = kept
        return removed

    def attach(self, kind: SpanKind, start: int, end: int, style: Any = None) -> EmphasisSpan | None:
        """Attach a *kind* span over ``[start, end)``.

        Any same-kind span intersecting the range is detached first.  An
        empty range attaches nothing.

        Raises:
            SpanRangeError: If the range is inverted or out of bounds.
        """
        self._check_range(start, end)
        if start == end:
            return None
        self.detach(kind, start, end)
        span = EmphasisSpan(kind, start, end, style)
        insort(self._spans[kind], span, key=lambda s: s.start)
        return span

    def next_transition(self, start: int, limit: int | None = None, kind: SpanKind | None = None) -> int:
        """Return the first span boundary after *start* and before *limit*.

        *limit* defaults to the text length and is returned when no
        boundary lies in between.
        """
        if limit is None:
            limit = len(self._text)
        result = limit
        for span in self.spans(kind):
            for edge in (span.start, span.end):
                if start < edge < result:
                    result = edge
        return result

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_html(self) -> str:
        """Render the buffer as escaped HTML with inline CSS per span."""
        spans = self.spans()
        edges = sorted({0, len(self._text)} | {e for s in spans for e in (s.start, s.end)})
        parts = []
        for seg_start, seg_end in zip(edges, edges[1:]):
            chunk = html.escape(self._text[seg_start:seg_end])
            css = [
                _css_for(s) for s in spans
                if s.start <= seg_start and seg_end <= s.end
            ]
            if css:
                parts.append(f'<span style="{"; ".join(css)}">{chunk}</span>')
            else:
                parts.append(chunk)
        return "".join(parts)


def _css_for(span: EmphasisSpan) -> str:
    if span.kind is SpanKind.PREFIX_BOLD:
        weight = getattr(span.style, "value", span.style)
        return f"font-weight:{weight if weight is not None else 700}"
    if span.style is None:
        color = "yellow"
    elif isinstance(span.style, str):
        color = span.style
    else:
        color = span.style.name()
    return f"background-color:{color}"
