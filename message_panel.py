# message_panel.py

from config import MESSAGE_PANEL_STYLE


class MessagePanel:
    """
    Draws the most recent MessageService entries in a strip along the
    bottom edge of the canvas, newest message lowest.
    """
    def __init__(self, message_service, style=None):
        style = dict(MESSAGE_PANEL_STYLE, **(style or {}))
        self.message_service = message_service
        self.x = style["x"]
        self.y_offset = style["y_offset"]
        self.line_spacing = style["line_spacing"]
        self.font_size = style["font_size"]
        self.bg_color = style["bg_color"]
        self.padding = style["padding"]

    def panel_height(self, n_messages):
        return n_messages * self.line_spacing + 2 * self.padding

    def draw(self, canvas):
        """
        Parameters:
          - canvas: needs 'draw_filled_rect' and 'draw_text'.
        """
        messages, colors = self.message_service.get_formatted_messages()
        if not messages:
            return

        height = self.panel_height(len(messages))
        top = canvas.height - self.y_offset - height
        canvas.draw_filled_rect(self.x, top, canvas.width - 2 * self.x, height,
                                color=self.bg_color)

        for i, (message, color) in enumerate(zip(reversed(messages), reversed(colors))):
            y = canvas.height - self.y_offset - self.padding - i * self.line_spacing
            text = message.encode('iso-8859-1', 'replace').decode('iso-8859-1')
            canvas.draw_text(self.x + self.padding, y, text,
                             color=color, font_size=self.font_size)
