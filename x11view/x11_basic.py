# x11_basic.py

"""
x11view.x11_basic

Implements a double-buffered X11 canvas using a Pixmap, with graphics
contexts cached by drawing parameters.
"""

from typing import Dict, Tuple

from Xlib import X
from Xlib import error as xerror

from .base import X11CanvasBase

FONT_CANDIDATES = [
    "6x13",
    "8x13",
    "-misc-fixed-medium-r-normal--10-100-75-75-c-60-iso8859-1",
    "9x15",
    "-misc-fixed-medium-r-normal--13-120-75-75-c-70-iso8859-1",
]


class X11CanvasBasic(X11CanvasBase):
    """
    All drawing goes to an offscreen Pixmap which flush() copies to the window.
    """

    def __init__(self, x11_window, background_color=(255, 255, 255)):
        super().__init__(x11_window)
        self.background_color = background_color

        # Key: (color, thickness, fill)
        self.gc_cache: Dict[Tuple, "X.GC"] = {}

        self.pixmap = self._create_pixmap()

        self.font = None
        for font_name in FONT_CANDIDATES:
            try:
                self.font = self.display.open_font(font_name)
                break
            except (xerror.BadName, xerror.BadFont):
                pass

    def _create_pixmap(self):
        return self.x11_window.window.create_pixmap(
            depth=self.screen.root_depth,
            width=max(1, self.width),
            height=max(1, self.height)
        )

    @staticmethod
    def rgb_to_pixel(rgb: Tuple[int, int, int]) -> int:
        """
        Convert (R,G,B) in [0..255] to a 24-bit integer pixel value.
        """
        r, g, b = rgb
        return (r << 16) | (g << 8) | b

    def get_gc(self, color, thickness=1, fill=False):
        """
        Return a cached GC for the given parameters, creating it on first use.
        """
        key = (tuple(color), thickness, fill)
        gc = self.gc_cache.get(key)
        if gc is None:
            options = dict(foreground=self.rgb_to_pixel(color),
                           background=self.screen.white_pixel)
            if not fill:
                options.update(line_width=thickness,
                               line_style=X.LineSolid,
                               cap_style=X.CapRound,
                               join_style=X.JoinRound)
            if self.font is not None:
                options["font"] = self.font.id
            gc = self.x11_window.window.create_gc(**options)
            self.gc_cache[key] = gc
        return gc

    def create_or_resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.pixmap.free()
        self.pixmap = self._create_pixmap()

    def clear(self) -> None:
        gc = self.get_gc(self.background_color, fill=True)
        self.pixmap.poly_fill_rectangle(gc, [(0, 0, self.width, self.height)])

    def flush(self) -> None:
        gc = self.get_gc(self.background_color, fill=True)
        self.x11_window.window.copy_area(
            gc=gc,
            src_drawable=self.pixmap,
            src_x=0,
            src_y=0,
            width=self.width,
            height=self.height,
            dst_x=0,
            dst_y=0
        )
        self.display.flush()

    def draw_filled_circle(self, cx, cy, radius, color=(255, 0, 0)) -> None:
        gc = self.get_gc(color, fill=True)
        self.pixmap.fill_arc(gc, cx - radius, cy - radius,
                             radius * 2, radius * 2, 0, 360 * 64)

    def draw_circle_border(self, cx, cy, radius, color=(0, 0, 0), thickness=2) -> None:
        gc = self.get_gc(color, thickness=thickness)
        self.pixmap.poly_arc(gc, [(cx - radius, cy - radius,
                                   radius * 2, radius * 2, 0, 360 * 64)])

    def draw_line(self, x1, y1, x2, y2, thickness=4, color=(0, 0, 0)) -> None:
        gc = self.get_gc(color, thickness=thickness)
        self.pixmap.poly_line(gc, X.CoordModeOrigin, [(x1, y1), (x2, y2)])

    def draw_filled_rect(self, x, y, width, height, color=(0, 0, 0)) -> None:
        gc = self.get_gc(color, fill=True)
        self.pixmap.poly_fill_rectangle(gc, [(x, y, width, height)])

    def draw_text(self, x, y, text, color=(0, 0, 0), font_size=12) -> None:
        # Core fonts have a fixed size; font_size is accepted for API parity.
        gc = self.get_gc(color)
        self.pixmap.draw_text(gc, x, y, text)
