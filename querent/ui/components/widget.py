"""
The widget contract.

    height(layout)           rows the widget needs; advances layout past them
    render(layout, backend)  draw; advances layout exactly as height() did
    cursor_pos(layout)       absolute (x, y) the cursor should rest at
    handle_key(key)          True if the key changed the widget's state

height() must be called with the same layout before render(). Composite
widgets call their children in visual order with the same layout.
"""

from abc import ABC, abstractmethod

from ..primitives import Backend, KeyEvent
from .layout import Layout


class Widget(ABC):

    @abstractmethod
    def height(self, layout: Layout) -> int:
        ...

    @abstractmethod
    def render(self, layout: Layout, backend: Backend):
        ...

    def cursor_pos(self, layout: Layout) -> tuple[int, int]:
        """Where the cursor sits after rendering (non-input widgets: the end of the drawing)."""
        end = layout.copy()
        self.height(end)
        return end.offset_cursor((end.line_offset, end.offset_y - layout.offset_y))

    def handle_key(self, key: KeyEvent) -> bool:
        return False
