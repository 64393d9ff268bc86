"""Human-readable labels describing which paragraphs an edit touched."""

from __future__ import annotations

from collections.abc import Sequence

from slideedit.paragraphs import TextRange

SCOPE_ALL = "ALL"


def indices_scope(indices: Sequence[int] | None) -> str:
    """Label for a list of paragraph indices, kept in the caller's order."""
    if not indices:
        return SCOPE_ALL
    return "INDICES [" + ", ".join(str(i) for i in indices) + "]"


def index_scope(index: int | None) -> str:
    """Label for a single paragraph index."""
    if index is None:
        return SCOPE_ALL
    return f"INDEX ({index})"


def scope_label(selector: TextRange, indices: Sequence[int] | int | None) -> str:
    """Label for the range actually sent to the API.

    An ALL selector always reads "ALL", even if indices were given but none
    of them selected a paragraph.
    """
    if selector.is_all:
        return SCOPE_ALL
    if isinstance(indices, int):
        return index_scope(indices)
    return indices_scope(indices)
