# x11view/svg_canvas.py

from xml.sax.saxutils import escape


class SVGCanvas:
    """
    Canvas with the same drawing methods as the X11 canvases that collects
    SVG elements instead of drawing to a window.
    """
    def __init__(self, width, height, background_color=(255, 255, 255),
                 font_family="DejaVu Sans Mono, monospace"):
        """
        Parameters:
            width: Canvas width in pixels
            height: Canvas height in pixels
            background_color: RGB tuple (r, g, b) for the background (default: white)
        """
        self.width = width
        self.height = height
        self.background_color = background_color
        self.font_family = font_family
        self.clear()

    def rgb_to_hex(self, color):
        """Convert an (R, G, B) tuple to a #RRGGBB string."""
        return "#{:02x}{:02x}{:02x}".format(*color)

    def clear(self):
        """Start a new SVG document with the current background color."""
        self.svg_data = [
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'width="{self.width}" height="{self.height}">'
        ]
        bg_color_hex = self.rgb_to_hex(self.background_color)
        self.svg_data.append(
            f'<rect x="0" y="0" width="{self.width}" height="{self.height}" fill="{bg_color_hex}" />'
        )

    def draw_line(self, x1, y1, x2, y2, thickness=1, color=(0, 0, 0)):
        """
        Draw a line with 'round' linecaps and joins to avoid visual gaps.
        """
        col = self.rgb_to_hex(color)
        style = (
            f'stroke="{col}" '
            f'stroke-width="{thickness}" '
            f'stroke-linecap="round" '
            f'stroke-linejoin="round" '
            f'fill="none"'
        )
        self.svg_data.append(f'<line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" {style} />')

    def draw_filled_circle(self, cx, cy, radius, color=(0, 0, 0)):
        col = self.rgb_to_hex(color)
        self.svg_data.append(f'<circle cx="{cx}" cy="{cy}" r="{radius}" fill="{col}" stroke="none" />')

    def draw_circle_border(self, cx, cy, radius, color=(0, 0, 0), thickness=1):
        col = self.rgb_to_hex(color)
        self.svg_data.append(
            f'<circle cx="{cx}" cy="{cy}" r="{radius}" fill="none" '
            f'stroke="{col}" stroke-width="{thickness}" />'
        )

    def draw_filled_rect(self, x, y, width, height, color=(0, 0, 0)):
        col_hex = self.rgb_to_hex(color)
        self.svg_data.append(
            f'<rect x="{x}" y="{y}" width="{width}" height="{height}" '
            f'fill="{col_hex}" stroke="none" />'
        )

    def draw_text(self, x, y, text, color=(0, 0, 0), font_size=12):
        """
        Draw text so that (x, y) is the text baseline.
        """
        col_hex = self.rgb_to_hex(color)
        self.svg_data.append(
            f'<text x="{x}" y="{y}" '
            f'fill="{col_hex}" '
            f'font-size="{font_size}px" '
            f'font-family="{self.font_family}" '
            f'dominant-baseline="alphabetic">'
            f'{escape(text)}</text>'
        )

    def flush(self, filename=None):
        """Finish the SVG document and either return the SVG string or write it to a file."""
        svg_content = "\n".join(self.svg_data + ['</svg>'])
        if filename:
            with open(filename, "w") as f:
                f.write(svg_content)
        return svg_content
