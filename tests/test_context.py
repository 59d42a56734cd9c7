"""
Tests for contexts and sizer flag merging.
"""

import pytest

from tkcompose import (
    ALL,
    DEFAULT_SIZER_FLAGS,
    NO_TARGET,
    Callback,
    Context,
    QueueHandle,
    merge_sizer_flags,
)


class TestMergeSizerFlags:
    """Test merging of ordered layout option lists."""

    def test_override_replaces_value(self):
        merged = merge_sizer_flags(DEFAULT_SIZER_FLAGS, [("border", 5)])
        assert dict(merged)["border"] == 5

    def test_order_of_existing_keys_kept(self):
        merged = merge_sizer_flags(DEFAULT_SIZER_FLAGS, [("border", 5), ("proportion", 0)])
        assert [key for key, _ in merged] == ["proportion", "flag", "border"]

    def test_new_keys_appended(self):
        merged = merge_sizer_flags([("flag", ALL)], {"border": 2})
        assert merged == (("flag", ALL), ("border", 2))

    def test_mapping_accepted(self):
        merged = merge_sizer_flags({"proportion": 1}, {"proportion": 0})
        assert merged == (("proportion", 0),)


class TestContext:
    """Test context derivation."""

    def test_defaults(self):
        ctx = Context()
        assert ctx.parent is None
        assert ctx.sizer_flags == DEFAULT_SIZER_FLAGS
        assert ctx.event_link is NO_TARGET
        assert ctx.window is None

    def test_event_link_normalized(self):
        ctx = Context(event_link=lambda event, origin: None)
        assert isinstance(ctx.event_link, Callback)

    def test_with_link_returns_copy(self):
        ctx = Context()
        link = QueueHandle()
        derived = ctx.with_link(link)
        assert derived.event_link is link
        assert ctx.event_link is NO_TARGET

    def test_with_sizer_flags_merges(self):
        ctx = Context()
        derived = ctx.with_sizer_flags({"border": 3})
        assert dict(derived.sizer_flags)["border"] == 3
        assert ctx.sizer_flags == DEFAULT_SIZER_FLAGS

    def test_context_is_immutable(self):
        ctx = Context()
        with pytest.raises(Exception):
            ctx.parent = object()
