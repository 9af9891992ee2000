# hud.py

from config import HUD_STYLE


def view_summary_lines(name, molecule, controller):
    """
    HUD text for the current view, top line first.
    """
    lines = [name]
    if molecule is not None:
        lines.append(f"Atoms: {len(molecule.atoms)}  Bonds: {len(molecule.bonds)}")
    if controller.is_dragging:
        state = "dragging"
    elif controller.auto_rotate:
        state = "auto-rotate"
    else:
        state = "idle"
    lines.append(f"Zoom: {controller.scale:.2f}  [{state}]")
    return lines


class HUDPanel:
    """
    Text overlay anchored above the bottom-left corner of the canvas.

    The first line is drawn highest, so `lines` reads top to bottom.
    Style keys (x, y_offset, line_spacing, font_size, color) default to
    HUD_STYLE.
    """
    def __init__(self, style=None):
        style = dict(HUD_STYLE, **(style or {}))
        self.x = style["x"]
        self.y_offset = style["y_offset"]
        self.line_spacing = style["line_spacing"]
        self.font_size = style["font_size"]
        self.color = style["color"]
        self.lines = []

    def update_lines(self, lines):
        self.lines = list(lines)

    def draw(self, canvas):
        bottom = canvas.height - self.y_offset
        for i, line in enumerate(reversed(self.lines)):
            # X11 core fonts are ISO-8859-1.
            text = line.encode('iso-8859-1', 'replace').decode('iso-8859-1')
            canvas.draw_text(self.x, bottom - i * self.line_spacing, text,
                             color=self.color, font_size=self.font_size)
