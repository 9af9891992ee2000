# window.py

import os
import platform
import time

from Xlib import X, display
from Xlib import error as xerror

from .x11_basic import X11CanvasBasic


class X11Window:
    """
    A generic X11 window class that hosts an X11CanvasBase subclass.
    It runs a frame-paced event loop: pending events are dispatched, then
    on_frame() is called once every frame_interval seconds.
    """

    def __init__(self, width=800, height=600, title="X11 Window",
                 canvas_class=X11CanvasBasic, background_color=(255, 255, 255),
                 frame_interval=1.0 / 60.0):
        """
        :param width:        Initial window width (pixels)
        :param height:       Initial window height (pixels)
        :param title:        Window title
        :param canvas_class: Canvas implementation, called as canvas_class(window, background_color=...)
        :param background_color: RGB tuple for the background color (default: white)
        :param frame_interval: Seconds between calls to on_frame()
        """

        # Fix for macOS XQuartz DISPLAY format
        if platform.system() == "Darwin":
            display_var = os.environ.get("DISPLAY", "")
            if display_var.startswith("/") and display_var.endswith(":0"):
                os.environ["DISPLAY"] = ":0"

        self.display = display.Display()
        self.screen = self.display.screen()
        self.running = True
        self.background_color = background_color
        self.frame_interval = frame_interval

        event_mask = (X.ExposureMask |
                      X.KeyPressMask |
                      X.StructureNotifyMask |
                      X.ButtonPressMask |
                      X.ButtonReleaseMask |
                      X.PointerMotionMask)

        self.window = self.screen.root.create_window(
            x=0,
            y=0,
            width=width,
            height=height,
            border_width=0,
            depth=self.screen.root_depth,
            window_class=X.InputOutput,
            visual=self.screen.root_visual,
            colormap=self.screen.default_colormap,
            event_mask=event_mask
        )
        self.window.set_wm_name(title)

        # Ask the window manager to send WM_DELETE_WINDOW instead of killing the connection.
        self.wm_delete_window = self.display.intern_atom('WM_DELETE_WINDOW')
        self.window.set_wm_protocols([self.wm_delete_window])
        self.window.map()

        self.canvas = canvas_class(self, background_color=background_color)

    def run(self):
        """
        Main loop. Single-threaded: events and frames are handled in turn.
        """
        next_frame = time.monotonic()
        while self.running:
            try:
                while self.running and self.display.pending_events():
                    self.handle_event(self.display.next_event())
            except xerror.ConnectionClosedError:
                break
            if not self.running:
                break

            now = time.monotonic()
            if now >= next_frame:
                self.on_frame()
                next_frame = now + self.frame_interval
            else:
                time.sleep(min(next_frame - now, self.frame_interval))

    def handle_event(self, evt):
        """
        Dispatch X11 events to appropriate methods.
        """
        if evt.type == X.Expose:
            if evt.count == 0:
                self.redraw()
        elif evt.type == X.KeyPress:
            self.handle_key(evt)
        elif evt.type == X.ButtonPress:
            self.handle_button_press(evt)
        elif evt.type == X.ButtonRelease:
            self.handle_button_release(evt)
        elif evt.type == X.MotionNotify:
            self.handle_motion(evt)
        elif evt.type == X.ConfigureNotify:
            if (evt.width, evt.height) != (self.canvas.width, self.canvas.height):
                self.canvas.create_or_resize(evt.width, evt.height)
                self.handle_resize(evt.width, evt.height)
        elif evt.type == X.ClientMessage:
            if evt.data[1][0] == self.wm_delete_window:
                self.running = False
        elif evt.type == X.DestroyNotify:
            self.running = False

    def on_frame(self):
        self.redraw()

    def handle_resize(self, width, height):
        pass

    def handle_motion(self, evt):
        pass

    def handle_button_press(self, evt):
        pass

    def handle_button_release(self, evt):
        pass

    def handle_key(self, evt):
        pass

    def redraw(self):
        self.canvas.clear()
        self.canvas.flush()

    def close(self):
        self.display.close()
