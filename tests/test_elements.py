"""Tests for presentation lookup helpers."""

from typing import Any

import pytest

from slideedit.elements import element_type, find_element, find_slide, shape_text
from slideedit.exceptions import SlideNotFoundError


class TestFindElement:
    """Test element lookup across slides and groups."""

    def test_top_level(self, presentation: dict[str, Any]) -> None:
        element = find_element(presentation, "title_box")
        assert element is not None
        assert element["objectId"] == "title_box"

    def test_other_slide(self, presentation: dict[str, Any]) -> None:
        element = find_element(presentation, "video_1")
        assert element is not None
        assert "video" in element

    def test_inside_group(self, presentation: dict[str, Any]) -> None:
        element = find_element(presentation, "grouped_shape")
        assert element is not None
        assert element_type(element) == "RECTANGLE"

    def test_missing(self, presentation: dict[str, Any]) -> None:
        assert find_element(presentation, "nope") is None


class TestFindSlide:
    """Test slide reference resolution."""

    def test_by_index(self, presentation: dict[str, Any]) -> None:
        assert find_slide(presentation, slide_index=2) == "slide_2"

    def test_by_id(self, presentation: dict[str, Any]) -> None:
        assert find_slide(presentation, slide_id="slide_1") == "slide_1"

    def test_id_wins_over_index(self, presentation: dict[str, Any]) -> None:
        assert find_slide(presentation, slide_index=2, slide_id="slide_1") == "slide_1"

    @pytest.mark.parametrize("index", [0, 3, None])
    def test_index_out_of_range(self, presentation: dict[str, Any], index: int | None) -> None:
        with pytest.raises(SlideNotFoundError, match="out of range"):
            find_slide(presentation, slide_index=index)

    def test_unknown_id(self, presentation: dict[str, Any]) -> None:
        with pytest.raises(SlideNotFoundError, match="slide_9"):
            find_slide(presentation, slide_id="slide_9")


class TestElementKinds:
    """Test type and text helpers."""

    def test_element_types(self, presentation: dict[str, Any]) -> None:
        types = {
            object_id: element_type(find_element(presentation, object_id) or {})
            for object_id in ("title_box", "group_1", "table_1", "video_1")
        }
        assert types == {
            "title_box": "TEXT_BOX",
            "group_1": "GROUP",
            "table_1": "TABLE",
            "video_1": "VIDEO",
        }
        assert element_type({}) == "UNKNOWN"

    def test_shape_text(self, presentation: dict[str, Any]) -> None:
        title = find_element(presentation, "title_box") or {}
        table = find_element(presentation, "table_1") or {}
        assert shape_text(title) is not None
        assert shape_text(table) is None
