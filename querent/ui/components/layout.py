"""
Layout: the screen region a widget is allowed to draw in.

Widgets receive a Layout, draw from (offset_x + line_offset, offset_y) and
advance it past whatever they drew, so the next widget in a composite
carries on from the right place.
"""

from dataclasses import dataclass, replace
from enum import Enum


class RenderRegion(Enum):
    """Which part of an over-tall widget stays visible."""
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


@dataclass
class Layout:
    line_offset: int
    offset_x: int
    offset_y: int
    width: int
    height: int
    max_height: int
    render_region: RenderRegion = RenderRegion.TOP

    @classmethod
    def new(cls, line_offset: int, size: tuple[int, int]) -> "Layout":
        """A layout spanning the whole terminal of the given (width, height)."""
        width, height = size
        return cls(
            line_offset=line_offset,
            offset_x=0,
            offset_y=0,
            width=width,
            height=height,
            max_height=height,
        )

    def copy(self) -> "Layout":
        return replace(self)

    def with_line_offset(self, line_offset: int) -> "Layout":
        return replace(self, line_offset=line_offset)

    def with_offset(self, offset_x: int, offset_y: int) -> "Layout":
        return replace(self, offset_x=offset_x, offset_y=offset_y)

    def with_cursor_pos(self, cursor_pos: tuple[int, int]) -> "Layout":
        """Move to a position relative to this layout: x becomes the line offset."""
        x, y = cursor_pos
        return replace(self, line_offset=x, offset_y=self.offset_y + y)

    def with_max_height(self, max_height: int) -> "Layout":
        return replace(self, max_height=max_height)

    def with_render_region(self, render_region: RenderRegion) -> "Layout":
        return replace(self, render_region=render_region)

    def line_width(self) -> int:
        """Room left on the current line."""
        return self.width - self.offset_x - self.line_offset

    def available_width(self) -> int:
        """Room on a fresh line."""
        return self.width - self.offset_x

    def get_start(self, height: int) -> int:
        """First row of a widget of the given height that should be drawn."""
        if height <= self.max_height:
            return 0
        if self.render_region is RenderRegion.TOP:
            return 0
        if self.render_region is RenderRegion.MIDDLE:
            return (height - self.max_height) // 2
        return height - self.max_height

    def offset_cursor(self, cursor_pos: tuple[int, int]) -> tuple[int, int]:
        """Turn a position relative to this layout into an absolute one."""
        x, y = cursor_pos
        return self.offset_x + x, self.offset_y + y

    def next_line(self, rows: int = 1):
        """Advance past the current line (and rows - 1 more)."""
        self.line_offset = 0
        self.offset_y += rows
