# base.py

"""
x11view.base

Drawing interface shared by the window canvases. SVGCanvas provides the same
methods without an X connection, so the scene renderer can target either.
All colors are (R, G, B) tuples in 0..255.
"""

from abc import ABC, abstractmethod

Color = tuple[int, int, int]


class X11CanvasBase(ABC):
    """
    A canvas bound to an X11Window. Drawing goes to an offscreen drawable;
    flush() makes it visible.
    """

    def __init__(self, x11_window):
        self.x11_window = x11_window
        self.display = x11_window.display
        self.screen = x11_window.screen

        geom = x11_window.window.get_geometry()
        self.width = geom.width
        self.height = geom.height

    @abstractmethod
    def create_or_resize(self, width: int, height: int) -> None:
        """Reallocate size-dependent buffers after the window changed size."""

    @abstractmethod
    def clear(self) -> None:
        """Paint the whole surface with the background color."""

    @abstractmethod
    def flush(self) -> None:
        """Show what has been drawn since the last clear()."""

    @abstractmethod
    def draw_filled_circle(self, cx: int, cy: int, radius: int,
                           color: Color = (255, 0, 0)) -> None:
        ...

    @abstractmethod
    def draw_circle_border(self, cx: int, cy: int, radius: int,
                           color: Color = (0, 0, 0), thickness: int = 2) -> None:
        ...

    @abstractmethod
    def draw_line(self, x1: int, y1: int, x2: int, y2: int,
                  thickness: int = 4, color: Color = (0, 0, 0)) -> None:
        """Round-capped line, so the two halves of a bond join cleanly."""

    @abstractmethod
    def draw_filled_rect(self, x: int, y: int, width: int, height: int,
                         color: Color = (0, 0, 0)) -> None:
        ...

    @abstractmethod
    def draw_text(self, x: int, y: int, text: str,
                  color: Color = (0, 0, 0), font_size: int = 12) -> None:
        """Text with its baseline at y."""
