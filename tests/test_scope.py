"""Tests for paragraph scope labels."""

from slideedit.paragraphs import TextRange
from slideedit.scope import index_scope, indices_scope, scope_label


class TestScopeLabels:
    """Test labels reported back to callers."""

    def test_indices(self) -> None:
        assert indices_scope([1, 2, 3]) == "INDICES [1, 2, 3]"

    def test_indices_keep_caller_order(self) -> None:
        assert indices_scope([2, 0]) == "INDICES [2, 0]"

    def test_empty_indices(self) -> None:
        assert indices_scope([]) == "ALL"
        assert indices_scope(None) == "ALL"

    def test_index(self) -> None:
        assert index_scope(0) == "INDEX (0)"
        assert index_scope(None) == "ALL"

    def test_scope_label_all_selector(self) -> None:
        assert scope_label(TextRange.all(), [4]) == "ALL"
        assert scope_label(TextRange.all(), None) == "ALL"

    def test_scope_label_fixed(self) -> None:
        fixed = TextRange.fixed(0, 19)
        assert scope_label(fixed, [0, 2]) == "INDICES [0, 2]"
        assert scope_label(fixed, 1) == "INDEX (1)"
