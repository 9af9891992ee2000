# zobjects.py

from config import ATOM_STYLE, BOND_STYLE


def scale_color(color, factor):
    """Multiply an (R, G, B) color by `factor`, clamped to 0..255."""
    return tuple(max(0, min(255, int(round(c * factor)))) for c in color)


class ZObject:
    """
    Abstract base for anything that has a depth (z_value) and can draw itself on the 2D canvas.
    A larger z_value is further away from the camera.
    """
    def __init__(self, z_value):
        self.z_value = z_value

    def draw(self, canvas):
        raise NotImplementedError("Subclasses must implement draw().")


class ZSphere(ZObject):
    """
    A projected sphere: a shaded disc at (x2d, y2d).

    An optional reference to the underlying primitive is stored in self.primitive.
    """
    def __init__(self, x2d, y2d, radius, color, z_value):
        super().__init__(z_value)
        self.x2d = x2d
        self.y2d = y2d
        self.radius = radius
        self.color = color
        self.primitive = None

    def draw(self, canvas):
        radius = max(ATOM_STYLE["min_radius"], self.radius)
        canvas.draw_filled_circle(self.x2d, self.y2d, radius, color=self.color)

        if ATOM_STYLE.get("highlight", {}).get("enabled", True):
            self._draw_simple_highlight(canvas, radius)

        border_color = ATOM_STYLE.get("border_color")
        if border_color is not None:
            canvas.draw_circle_border(self.x2d, self.y2d, radius,
                                      color=border_color,
                                      thickness=ATOM_STYLE.get("border_thickness", 1))

    def _draw_simple_highlight(self, canvas, radius):
        """Draw a lighter spot towards the upper-left to suggest a light source."""
        size_ratio = ATOM_STYLE["highlight"].get("size_ratio", 0.3)
        offset_ratio = ATOM_STYLE["highlight"].get("offset_ratio", 0.35)
        brightness_factor = ATOM_STYLE["highlight"].get("brightness_factor", 1.4)

        spot_radius = radius * size_ratio
        if spot_radius < 1:
            return
        offset = radius * offset_ratio
        x = self.x2d - offset
        y = self.y2d - offset
        if isinstance(self.x2d, int):
            spot_radius, x, y = int(spot_radius), int(x), int(y)

        # Blend towards white so saturated colors still get a visible spot.
        lighter = tuple(min(255, int(c * brightness_factor + 60)) for c in self.color)
        canvas.draw_filled_circle(x, y, spot_radius, color=lighter)


class ZCylinder(ZObject):
    """
    A projected cylinder drawn as a thick line from (x1, y1) to (x2, y2).
    """
    def __init__(self, x1, y1, x2, y2, thickness, color, z_value):
        super().__init__(z_value)
        self.x1 = x1
        self.y1 = y1
        self.x2 = x2
        self.y2 = y2
        self.thickness = max(BOND_STYLE["min_thickness_px"], thickness)
        self.color = color
        self.primitive = None

    def draw(self, canvas):
        canvas.draw_line(self.x1, self.y1, self.x2, self.y2,
                         thickness=self.thickness, color=self.color)
