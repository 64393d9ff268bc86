"""Paragraph indexing for shape text.

The Slides API addresses text by character offsets, while callers think in
paragraphs. A shape's ``text.textElements`` list is flattened into
``TextRun`` records; paragraph markers close a paragraph, so a paragraph is
only known once its marker has been seen.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

RANGE_ALL = "ALL"
RANGE_FIXED = "FIXED_RANGE"


@dataclass(frozen=True)
class TextRun:
    """One entry of a shape's text element sequence.

    Offsets are 0-based with an exclusive end.
    """

    start_offset: int
    end_offset: int
    is_paragraph_boundary: bool = False


@dataclass(frozen=True)
class ParagraphRange:
    """Character range covered by one paragraph, marker included."""

    start: int
    end: int


@dataclass(frozen=True)
class TextRange:
    """Range selector consumed by text and paragraph mutation requests."""

    type: str = RANGE_ALL
    start_index: int | None = None
    end_index: int | None = None

    @classmethod
    def all(cls) -> TextRange:
        """Select the whole text of the shape."""
        return cls()

    @classmethod
    def fixed(cls, start: int, end: int) -> TextRange:
        """Select characters ``start`` (inclusive) to ``end`` (exclusive)."""
        return cls(type=RANGE_FIXED, start_index=start, end_index=end)

    @property
    def is_all(self) -> bool:
        return self.type == RANGE_ALL

    def to_api(self) -> dict[str, Any]:
        """Serialize to the API ``Range`` shape."""
        if self.is_all:
            return {"type": RANGE_ALL}
        return {
            "type": RANGE_FIXED,
            "startIndex": self.start_index,
            "endIndex": self.end_index,
        }


def text_runs(text: dict[str, Any] | None) -> list[TextRun]:
    """Flatten a shape's ``text`` object into text runs.

    The API omits ``startIndex`` for the first element, so a missing value
    means 0.
    """
    if not text:
        return []

    runs: list[TextRun] = []
    for te in text.get("textElements", []):
        start = te.get("startIndex", 0)
        end = te.get("endIndex", start)
        runs.append(
            TextRun(
                start_offset=start,
                end_offset=end,
                is_paragraph_boundary="paragraphMarker" in te,
            )
        )
    return runs


def count_paragraphs(runs: Iterable[TextRun]) -> int:
    """Count paragraph markers in the run sequence."""
    return sum(1 for run in runs if run.is_paragraph_boundary)


def paragraph_ranges(runs: Iterable[TextRun]) -> list[ParagraphRange]:
    """Compute the range of every terminated paragraph.

    Ranges are contiguous: each one starts where the previous marker ended.
    Text after the last marker is not reported.
    """
    ranges: list[ParagraphRange] = []
    current_start = 0

    for run in runs:
        if run.is_paragraph_boundary:
            ranges.append(ParagraphRange(start=current_start, end=run.end_offset))
            current_start = run.end_offset

    return ranges


def range_for_index(runs: Sequence[TextRun], index: int | None) -> TextRange:
    """Return the range for one paragraph, or ALL when ``index`` is None.

    ``index`` must already be checked against ``count_paragraphs``.
    """
    if index is None:
        return TextRange.all()

    paragraph = paragraph_ranges(runs)[index]
    return TextRange.fixed(paragraph.start, paragraph.end)


def range_for_indices(runs: Sequence[TextRun], indices: Sequence[int] | None) -> TextRange:
    """Return the single range enveloping the selected paragraphs.

    The API accepts one contiguous range per request, so selecting
    paragraphs 0 and 2 also covers paragraph 1. Indices past the last
    paragraph are skipped; if nothing is left the whole text is selected.
    """
    if not indices:
        return TextRange.all()

    ranges = paragraph_ranges(runs)
    selected = [ranges[i] for i in indices if 0 <= i < len(ranges)]
    if not selected:
        return TextRange.all()

    start = min(p.start for p in selected)
    end = max(p.end for p in selected)
    return TextRange.fixed(start, end)


def current_indent(text: dict[str, Any] | None) -> float:
    """Return the start indentation in points of the first indented paragraph.

    Only ``PT`` dimensions are read; anything else counts as no indent.
    """
    if not text:
        return 0.0

    for te in text.get("textElements", []):
        style = te.get("paragraphMarker", {}).get("style", {})
        indent = style.get("indentStart")
        if indent and indent.get("unit") == "PT":
            return float(indent.get("magnitude", 0.0))

    return 0.0
