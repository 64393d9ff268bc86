"""Lookup helpers over a presentation snapshot."""

from __future__ import annotations

from typing import Any

from slideedit.exceptions import SlideNotFoundError


def find_element(
    presentation: dict[str, Any], object_id: str
) -> dict[str, Any] | None:
    """Find a page element by ID on any slide, including inside groups."""
    for slide in presentation.get("slides", []):
        found = _find_in_elements(slide.get("pageElements", []), object_id)
        if found is not None:
            return found
    return None


def _find_in_elements(
    elements: list[dict[str, Any]], object_id: str
) -> dict[str, Any] | None:
    for elem in elements:
        if elem.get("objectId") == object_id:
            return elem
        if "elementGroup" in elem:
            children = elem["elementGroup"].get("children", [])
            found = _find_in_elements(children, object_id)
            if found is not None:
                return found
    return None


def find_slide(
    presentation: dict[str, Any],
    slide_index: int | None = None,
    slide_id: str | None = None,
) -> str:
    """Resolve a slide reference to its object ID.

    Args:
        presentation: Presentation JSON
        slide_index: 1-based slide position
        slide_id: Slide object ID, takes precedence over slide_index

    Returns:
        The slide's object ID
    """
    slides = presentation.get("slides", [])

    if slide_id:
        for slide in slides:
            if slide.get("objectId") == slide_id:
                return slide_id
        raise SlideNotFoundError(f"Slide '{slide_id}' not found")

    if slide_index is None or slide_index < 1 or slide_index > len(slides):
        raise SlideNotFoundError(
            f"Slide index {slide_index} out of range (1-{len(slides)})"
        )
    object_id: str = slides[slide_index - 1].get("objectId", "")
    return object_id


def element_type(element: dict[str, Any]) -> str:
    """Get the element type (shape type, IMAGE, VIDEO, GROUP, etc.)."""
    if "shape" in element:
        shape_type: str = element["shape"].get("shapeType", "SHAPE")
        return shape_type
    if "image" in element:
        return "IMAGE"
    if "video" in element:
        return "VIDEO"
    if "line" in element:
        return "LINE"
    if "elementGroup" in element:
        return "GROUP"
    if "table" in element:
        return "TABLE"
    if "sheetsChart" in element:
        return "SHEETS_CHART"
    return "UNKNOWN"


def shape_text(element: dict[str, Any]) -> dict[str, Any] | None:
    """Return the shape's ``text`` object, or None if it has no text."""
    text: dict[str, Any] | None = element.get("shape", {}).get("text")
    return text
