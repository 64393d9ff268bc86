"""Tests for paragraph indexing.

The fixture document has three paragraphs ending at offsets 6, 13 and 19:
"Alpha\\n", "Bravo!\\n", "Gamma\\n".
"""

import pytest

from slideedit.paragraphs import (
    ParagraphRange,
    TextRange,
    TextRun,
    count_paragraphs,
    current_indent,
    paragraph_ranges,
    range_for_index,
    range_for_indices,
    text_runs,
)


@pytest.fixture
def three_paragraphs() -> list[TextRun]:
    """Marker + run per paragraph, as the API lays them out."""
    return [
        TextRun(0, 6, is_paragraph_boundary=True),
        TextRun(0, 6),
        TextRun(6, 13, is_paragraph_boundary=True),
        TextRun(6, 13),
        TextRun(13, 19, is_paragraph_boundary=True),
        TextRun(13, 19),
    ]


class TestTextRuns:
    """Test flattening of API textElements."""

    def test_missing_start_index_is_zero(self) -> None:
        text = {
            "textElements": [
                {"endIndex": 4, "paragraphMarker": {}},
                {"endIndex": 4, "textRun": {"content": "Hi!\n"}},
            ]
        }
        runs = text_runs(text)
        assert runs == [TextRun(0, 4, True), TextRun(0, 4, False)]

    def test_auto_text_is_not_a_boundary(self) -> None:
        text = {
            "textElements": [
                {"endIndex": 1, "autoText": {"type": "SLIDE_NUMBER"}},
                {"endIndex": 2, "startIndex": 1, "paragraphMarker": {}},
            ]
        }
        runs = text_runs(text)
        assert [r.is_paragraph_boundary for r in runs] == [False, True]

    def test_empty_text(self) -> None:
        assert text_runs(None) == []
        assert text_runs({}) == []


class TestParagraphRanges:
    """Test paragraph counting and range computation."""

    def test_count(self, three_paragraphs: list[TextRun]) -> None:
        assert count_paragraphs(three_paragraphs) == 3

    def test_ranges(self, three_paragraphs: list[TextRun]) -> None:
        assert paragraph_ranges(three_paragraphs) == [
            ParagraphRange(0, 6),
            ParagraphRange(6, 13),
            ParagraphRange(13, 19),
        ]

    @pytest.mark.parametrize("k", [0, 1, 2, 5])
    def test_count_matches_markers(self, k: int) -> None:
        runs: list[TextRun] = []
        for i in range(k):
            runs.append(TextRun(i * 4, i * 4 + 3))
            runs.append(TextRun(i * 4 + 3, i * 4 + 4, is_paragraph_boundary=True))

        ranges = paragraph_ranges(runs)
        assert count_paragraphs(runs) == k
        assert len(ranges) == k
        for before, after in zip(ranges, ranges[1:]):
            assert before.end == after.start

    def test_unterminated_trailing_paragraph_is_dropped(self) -> None:
        runs = [
            TextRun(0, 5, is_paragraph_boundary=True),
            TextRun(5, 12),
        ]
        assert paragraph_ranges(runs) == [ParagraphRange(0, 5)]

    def test_no_runs(self) -> None:
        assert count_paragraphs([]) == 0
        assert paragraph_ranges([]) == []


class TestRangeForIndex:
    """Test single-paragraph selection."""

    def test_none_selects_all(self, three_paragraphs: list[TextRun]) -> None:
        assert range_for_index(three_paragraphs, None) == TextRange.all()

    def test_middle_paragraph(self, three_paragraphs: list[TextRun]) -> None:
        assert range_for_index(three_paragraphs, 1) == TextRange.fixed(6, 13)

    def test_first_and_last(self, three_paragraphs: list[TextRun]) -> None:
        assert range_for_index(three_paragraphs, 0) == TextRange.fixed(0, 6)
        assert range_for_index(three_paragraphs, 2) == TextRange.fixed(13, 19)


class TestRangeForIndices:
    """Test multi-paragraph selection."""

    def test_empty_selects_all(self, three_paragraphs: list[TextRun]) -> None:
        assert range_for_indices(three_paragraphs, []) == TextRange.all()
        assert range_for_indices(three_paragraphs, None) == TextRange.all()

    def test_single(self, three_paragraphs: list[TextRun]) -> None:
        assert range_for_indices(three_paragraphs, [2]) == TextRange.fixed(13, 19)

    def test_non_contiguous_selection_covers_gap(
        self, three_paragraphs: list[TextRun]
    ) -> None:
        """Paragraphs 0 and 2 give one range that also spans paragraph 1.

        Mutation requests take a single contiguous range, so the envelope is
        the intended result.
        """
        assert range_for_indices(three_paragraphs, [0, 2]) == TextRange.fixed(0, 19)

    def test_order_does_not_matter(self, three_paragraphs: list[TextRun]) -> None:
        assert range_for_indices(three_paragraphs, [2, 1]) == TextRange.fixed(6, 19)

    def test_out_of_range_indices_are_skipped(
        self, three_paragraphs: list[TextRun]
    ) -> None:
        assert range_for_indices(three_paragraphs, [1, 7]) == TextRange.fixed(6, 13)
        assert range_for_indices(three_paragraphs, [9]) == TextRange.all()


class TestTextRangeSerialization:
    """Test the API shape of range selectors."""

    def test_all(self) -> None:
        assert TextRange.all().to_api() == {"type": "ALL"}
        assert TextRange.all().is_all

    def test_fixed(self) -> None:
        assert TextRange.fixed(6, 13).to_api() == {
            "type": "FIXED_RANGE",
            "startIndex": 6,
            "endIndex": 13,
        }
        assert not TextRange.fixed(6, 13).is_all


class TestCurrentIndent:
    """Test reading the start indent from paragraph markers."""

    def test_reads_first_indent(self) -> None:
        text = {
            "textElements": [
                {"endIndex": 3, "paragraphMarker": {"style": {}}},
                {
                    "startIndex": 3,
                    "endIndex": 6,
                    "paragraphMarker": {
                        "style": {"indentStart": {"magnitude": 36, "unit": "PT"}}
                    },
                },
            ]
        }
        assert current_indent(text) == 36.0

    def test_ignores_non_point_units(self) -> None:
        text = {
            "textElements": [
                {
                    "endIndex": 3,
                    "paragraphMarker": {
                        "style": {"indentStart": {"magnitude": 457200, "unit": "EMU"}}
                    },
                }
            ]
        }
        assert current_indent(text) == 0.0

    def test_no_text(self) -> None:
        assert current_indent(None) == 0.0
