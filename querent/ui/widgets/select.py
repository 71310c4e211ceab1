"""
Select list engine.

Navigates a list of rows, some of which (separators) can't be selected,
and draws a window of them when they don't all fit in a page. What a row
looks like is up to the SelectList implementation; the engine only knows
row heights, selectability and which row is hovered.
"""

from abc import ABC, abstractmethod

from ..components.layout import Layout, RenderRegion
from ..components.text import Line
from ..components.widget import Widget
from ..primitives import Backend, KeyEvent, Movement
from ..primitives.colors import MUTED

MIN_PAGE_SIZE = 5

PAGINATION_HINT = "(Move up and down to reveal more choices)"


class SelectList(ABC):
    """The rows a Select navigates over."""

    page_size: int = 15
    should_loop: bool = True

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def render_item(self, index: int, hovered: bool, layout: Layout, backend: Backend):
        """Draw row `index` within `layout` (at most layout.max_height rows)."""

    @abstractmethod
    def is_selectable(self, index: int) -> bool:
        ...

    def height_at(self, index: int, layout: Layout) -> int:
        """Rows needed by row `index` when drawn in `layout`."""
        return 1


class Select(Widget):
    """
    Hover state and paging over a SelectList.

    `at` always points at a selectable row, except when a caller puts it out
    of range with set_at() to mean "nothing hovered".
    """

    def __init__(self, items: SelectList):
        selectable = [i for i in range(len(items)) if items.is_selectable(i)]
        if not selectable:
            raise ValueError("a select list needs at least one selectable item")
        if items.page_size < MIN_PAGE_SIZE:
            raise ValueError(f"page_size must be at least {MIN_PAGE_SIZE}")

        self.list = items
        self.first_selectable = selectable[0]
        self.last_selectable = selectable[-1]
        self.at = self.first_selectable
        self._anchor = self.at
        self._paginating = len(items) > items.page_size
        self._hint = Line(PAGINATION_HINT, MUTED)

    def get_at(self) -> int:
        return self.at

    def set_at(self, at: int):
        """Hover row `at`. Out-of-range values leave nothing hovered."""
        self.at = at
        if 0 <= at < len(self.list):
            self._anchor = at

    def is_hovering(self) -> bool:
        return 0 <= self.at < len(self.list)

    # Navigation

    def next_selectable(self) -> int:
        if self.at >= self.last_selectable:
            return self.first_selectable if self.list.should_loop else self.last_selectable
        at = max(self.at + 1, self.first_selectable)
        while not self.list.is_selectable(at):
            at += 1
        return at

    def prev_selectable(self) -> int:
        if self.at <= self.first_selectable:
            return self.last_selectable if self.list.should_loop else self.first_selectable
        at = min(self.at - 1, self.last_selectable)
        while not self.list.is_selectable(at):
            at -= 1
        return at

    def _page_step(self, forward: bool) -> int:
        """Move by a page worth of selectable rows, stopping at the ends."""
        if not self.is_hovering():
            return self.last_selectable if forward else self.first_selectable
        at = self.at
        for _ in range(self.list.page_size - 1):
            if forward:
                if at >= self.last_selectable:
                    break
                at += 1
                while not self.list.is_selectable(at):
                    at += 1
            else:
                if at <= self.first_selectable:
                    break
                at -= 1
                while not self.list.is_selectable(at):
                    at -= 1
        return at

    def handle_key(self, key: KeyEvent) -> bool:
        movement = Movement.from_key(key)
        if movement is Movement.UP:
            at = self.prev_selectable()
        elif movement is Movement.DOWN:
            at = self.next_selectable()
        elif movement is Movement.HOME:
            at = self.first_selectable
        elif movement is Movement.END:
            at = self.last_selectable
        elif movement is Movement.PAGE_UP:
            at = self._page_step(False) if self._paginating else self.first_selectable
        elif movement is Movement.PAGE_DOWN:
            at = self._page_step(True) if self._paginating else self.last_selectable
        else:
            return False

        if at == self.at:
            return False
        self.set_at(at)
        return True

    # Layout

    def _heights(self, layout: Layout) -> list[int]:
        item_layout = layout.with_line_offset(0)
        return [self.list.height_at(i, item_layout.copy()) for i in range(len(self.list))]

    def _window(self, heights: list[int]) -> tuple[list[tuple[int, int, RenderRegion]], bool]:
        """
        Rows to draw as (index, visible height, region) and whether the list
        is paginated.
        """
        count = len(heights)
        page_size = self.list.page_size
        if sum(heights) <= page_size:
            return [(i, h, RenderRegion.TOP) for i, h in enumerate(heights)], False

        budget = page_size - 1
        loop = self.list.should_loop
        center = self.at if self.is_hovering() else self._anchor
        center_height = min(heights[center], budget)
        room_above = (budget - center_height) // 2
        room_below = budget - center_height - room_above

        def collect(start: int, step: int, room: int) -> tuple[list[tuple[int, int]], int, int]:
            rows = []
            i = start
            while room > 0:
                i += step
                if not 0 <= i < count:
                    if not loop:
                        break
                    i %= count
                h = min(heights[i], room)
                rows.append((i, h))
                room -= h
            return rows, room, i

        above, left_above, _ = collect(center, -1, room_above)
        below, left_below, _ = collect(center, 1, room_below + left_above)
        if left_below > 0 and above:
            # Reveal the rest of a clipped row before adding new ones
            i, h = above[-1]
            grow = min(heights[i] - h, left_below)
            above[-1] = (i, h + grow)
            left_below -= grow
        if left_below > 0:
            start = above[-1][0] if above else center
            more, _, _ = collect(start, -1, left_below)
            above.extend(more)

        window = []
        for n, (i, h) in enumerate(reversed(above)):
            clipped = n == 0 and h < heights[i]
            window.append((i, h, RenderRegion.BOTTOM if clipped else RenderRegion.TOP))
        window.append((center, center_height, RenderRegion.TOP))
        for i, h in below:
            window.append((i, h, RenderRegion.TOP))
        return window, True

    def height(self, layout: Layout) -> int:
        skipped = 0
        if layout.line_offset != 0:
            layout.next_line()
            skipped = 1
        window, self._paginating = self._window(self._heights(layout))
        rows = sum(h for _, h, _ in window) + (1 if self._paginating else 0)
        layout.next_line(rows)
        return rows + skipped

    def render(self, layout: Layout, backend: Backend):
        if layout.line_offset != 0:
            layout.next_line()
        window, self._paginating = self._window(self._heights(layout))

        for index, rows, region in window:
            item_layout = layout.with_max_height(rows).with_render_region(region)
            backend.move_cursor_to(layout.offset_x, layout.offset_y)
            self.list.render_item(index, index == self.at, item_layout, backend)
            layout.offset_y += rows

        layout.line_offset = 0
        if self._paginating:
            self._hint.render(layout, backend)
