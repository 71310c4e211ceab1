"""
Tests for the select list engine.

Navigation over separators, looping, paging keys and the paginated window.
"""

import pytest

from querent.questions import ChoiceList, Separator
from querent.ui.components import Layout
from querent.ui.primitives import KeyCode, KeyEvent, TestBackend
from querent.ui.widgets import PAGINATION_HINT, Select


def press(select: Select, code: KeyCode) -> bool:
    return select.handle_key(KeyEvent.key(code))


def numbered(count: int, **kwargs) -> ChoiceList:
    return ChoiceList([f"item {i}" for i in range(count)], **kwargs)


class TestSelectNavigation:
    """Tests for moving the hover."""

    def test_starts_on_first_selectable(self):
        select = Select(ChoiceList([Separator(), "a", "b"]))
        assert select.get_at() == 1

    def test_skips_separators(self):
        select = Select(ChoiceList(["a", Separator(), Separator(), "b"]))
        assert press(select, KeyCode.DOWN)
        assert select.get_at() == 3
        assert press(select, KeyCode.UP)
        assert select.get_at() == 0

    def test_loops_around(self):
        select = Select(ChoiceList(["a", "b", "c"]))
        press(select, KeyCode.UP)
        assert select.get_at() == 2
        press(select, KeyCode.DOWN)
        assert select.get_at() == 0

    def test_stops_at_the_ends_without_looping(self):
        select = Select(ChoiceList(["a", "b", "c"], should_loop=False))
        assert not press(select, KeyCode.UP)
        assert select.get_at() == 0
        press(select, KeyCode.END)
        assert not press(select, KeyCode.DOWN)
        assert select.get_at() == 2

    def test_vim_keys(self):
        select = Select(ChoiceList(["a", "b", "c"]))
        select.handle_key(KeyEvent.from_char("j"))
        assert select.get_at() == 1
        select.handle_key(KeyEvent.from_char("k"))
        assert select.get_at() == 0

    def test_home_and_end_skip_separators(self):
        select = Select(ChoiceList([Separator(), "a", "b", Separator()]))
        press(select, KeyCode.END)
        assert select.get_at() == 2
        press(select, KeyCode.HOME)
        assert select.get_at() == 1

    def test_page_keys_jump_to_ends_when_everything_fits(self):
        select = Select(ChoiceList(["a", "b", "c", Separator()]))
        press(select, KeyCode.PAGE_DOWN)
        assert select.get_at() == 2
        press(select, KeyCode.PAGE_UP)
        assert select.get_at() == 0

    def test_page_keys_step_a_page_when_paginating(self):
        select = Select(numbered(20, page_size=5))
        press(select, KeyCode.PAGE_DOWN)
        assert select.get_at() == 4
        press(select, KeyCode.PAGE_DOWN)
        assert select.get_at() == 8
        press(select, KeyCode.PAGE_UP)
        assert select.get_at() == 4

    def test_page_down_stops_at_last(self):
        select = Select(numbered(20, page_size=5))
        select.set_at(18)
        press(select, KeyCode.PAGE_DOWN)
        assert select.get_at() == 19
        assert not press(select, KeyCode.PAGE_DOWN)

    def test_out_of_range_means_nothing_hovered(self):
        select = Select(ChoiceList(["a", "b"]))
        select.set_at(5)
        assert not select.is_hovering()
        select.set_at(1)
        assert select.is_hovering()


class TestSelectValidation:
    def test_needs_a_selectable_item(self):
        with pytest.raises(ValueError):
            Select(ChoiceList([Separator(), Separator()]))

    def test_page_size_minimum(self):
        with pytest.raises(ValueError):
            ChoiceList(["a"], page_size=4)


class TestSelectRendering:
    """Tests for what a select list draws."""

    def test_short_list(self):
        backend = TestBackend()
        select = Select(ChoiceList(["a", Separator("--"), "b"]))
        select.render(Layout.new(0, (80, 24)), backend)
        assert backend.lines() == ["❯ a", "  --", "  b"]

    def test_height_matches_rows(self):
        layout = Layout.new(0, (80, 24))
        assert Select(ChoiceList(["a", "b", "c"])).height(layout) == 3
        assert layout.offset_y == 3

    def test_starts_on_next_line_after_text(self):
        layout = Layout.new(5, (80, 24))
        assert Select(ChoiceList(["a", "b"])).height(layout) == 3

    def test_paginated_window_centres_hover(self):
        backend = TestBackend()
        select = Select(numbered(20, page_size=5))
        select.render(Layout.new(0, (80, 24)), backend)
        assert backend.lines() == [
            "  item 19",
            "❯ item 0",
            "  item 1",
            "  item 2",
            PAGINATION_HINT,
        ]

    def test_paginated_window_without_looping(self):
        backend = TestBackend()
        select = Select(numbered(20, page_size=5, should_loop=False))
        select.render(Layout.new(0, (80, 24)), backend)
        assert backend.lines() == [
            "❯ item 0",
            "  item 1",
            "  item 2",
            "  item 3",
            PAGINATION_HINT,
        ]

    def test_pagination_hint_truncated_on_narrow_terminal(self):
        backend = TestBackend((30, 10))
        select = Select(numbered(20, page_size=5))
        layout = Layout.new(0, (30, 10))
        assert select.height(layout.copy()) == 5
        select.render(layout, backend)
        assert len(backend.lines()) == 5
        assert backend.lines()[-1] == "(Move up and down to reveal..."

    def test_wrapped_items(self):
        backend = TestBackend((12, 10))
        select = Select(ChoiceList(["hello world foo", "b"]))
        layout = Layout.new(0, (12, 10))
        assert select.height(layout.copy()) == 3
        select.render(layout, backend)
        assert backend.lines() == ["❯ hello", "  world foo", "  b"]
