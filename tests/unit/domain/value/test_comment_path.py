"""Unit tests for CommentPath."""

import pytest
from pydantic import ValidationError

from showtalk.domain.value import CommentPath, pad_comment_id


class TestPadCommentId:
    """Tests for fixed-width path segments."""

    def test_pads_to_six_digits(self):
        assert pad_comment_id(12) == "000012"

    def test_does_not_truncate_wide_ids(self):
        """Ids past the pad width keep every digit."""
        assert pad_comment_id(1234567) == "1234567"

    def test_rejects_negative_ids(self):
        with pytest.raises(ValueError):
            pad_comment_id(-1)


class TestCommentPath:
    """Tests for materialized path construction and navigation."""

    def test_root_path_is_own_padded_id(self):
        path = CommentPath.for_comment(12)

        assert path.root == "000012"
        assert path.depth == 0

    def test_reply_path_extends_parent_path(self):
        parent = CommentPath("000012.000045")

        path = CommentPath.for_comment(46, parent)

        assert str(path) == "000012.000045.000046"
        assert path.depth == 2
        assert path.ids == [12, 45, 46]

    def test_depth_is_segment_count_minus_one(self):
        for segments in range(1, 12):
            path = CommentPath(".".join(["000001"] * segments))
            assert path.depth == segments - 1

    def test_ancestor_prefix_match(self):
        ancestor = CommentPath("000012")

        assert ancestor.is_ancestor_of(CommentPath("000012.000045"))
        assert ancestor.is_ancestor_of(CommentPath("000012.000045.000046"))
        assert not ancestor.is_ancestor_of(ancestor)
        # Sibling sharing leading digits is not a descendant
        assert not ancestor.is_ancestor_of(CommentPath("0000123"))

    def test_string_order_is_tree_order(self):
        """Sorting paths lists every parent directly before its subtree."""
        paths = ["000002", "000001.000004", "000001", "000001.000003", "000002.000005"]

        assert sorted(paths) == [
            "000001",
            "000001.000003",
            "000001.000004",
            "000002",
            "000002.000005",
        ]

    @pytest.mark.parametrize("value", ["", "abc", "000001.", ".000001", "1..2"])
    def test_rejects_malformed_paths(self, value):
        with pytest.raises(ValidationError):
            CommentPath(value)
