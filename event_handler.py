#!/usr/bin/env python3
"""
event_handler.py

This module provides the _EventHandler class, which encapsulates the logic
for handling keyboard and mouse events. It maps raw X11 events to high-level
commands and delegates them to the viewer's InteractionController.
"""

from Xlib import XK

from config import VIEWER_INTERACTION

BUTTON_LEFT = 1
BUTTON_WHEEL_UP = 4
BUTTON_WHEEL_DOWN = 5


class _EventHandler:
    """
    Handles user input events for the molecule viewer.

    This class is responsible for:
    1. Capturing keyboard and mouse events
    2. Mapping raw input events to controller calls and key commands
    3. Keeping the controller consistent when a handler fails
    """

    def __init__(self, viewer):
        """
        Parameters:
            viewer: An instance of MoleculeViewer that provides the
                    controller, message service and display.
        """
        self.viewer = viewer
        self._initialize_key_commands()

    def _initialize_key_commands(self):
        """Initialize the key command mappings."""
        self.key_commands = {
            # Application control
            'q': self._quit_application,
            'Escape': self._quit_application,

            # View
            'r': self._reset_view,
            'a': self._toggle_auto_rotate,

            # Export
            's': self._dump_svg,
        }

    @property
    def controller(self):
        return self.viewer.controller

    def handle_key(self, evt):
        """
        Dispatch a key press to its command.

        Parameters:
            evt: The X11 key event to process.
        """
        try:
            keysym = self.viewer.display.keycode_to_keysym(evt.detail, evt.state)
            keychar = XK.keysym_to_string(keysym)
            if keychar is None:
                keychar = XK.keysym_to_string(self.viewer.display.keycode_to_keysym(evt.detail, 0))
            if keysym == XK.XK_Escape:
                keychar = 'Escape'

            command = self.key_commands.get(keychar)
            if command is not None:
                command()
        except Exception as e:
            self.viewer.message_service.log_error(f"Error in key handler: {str(e)}")

    def handle_button_press(self, evt):
        """
        Wheel buttons zoom; the left button starts a drag.

        Parameters:
            evt: The X11 button press event.
        """
        try:
            notch = VIEWER_INTERACTION["wheel_notch_delta"]
            if evt.detail == BUTTON_WHEEL_UP:
                self.controller.wheel(-notch)
            elif evt.detail == BUTTON_WHEEL_DOWN:
                self.controller.wheel(notch)
            elif evt.detail == BUTTON_LEFT:
                self.controller.pointer_down(evt.event_x, evt.event_y)
        except Exception as e:
            self.viewer.message_service.log_error(f"Error in button press: {str(e)}")
            self.controller.pointer_up()

    def handle_motion(self, evt):
        """
        Feed pointer motion to the controller; it ignores motion while idle.

        Parameters:
            evt: The X11 mouse motion event.
        """
        try:
            self.controller.pointer_move(evt.event_x, evt.event_y)
        except Exception as e:
            self.viewer.message_service.log_error(f"Error in motion handler: {str(e)}")
            self.controller.pointer_up()

    def handle_button_release(self, evt):
        """
        End a drag when the left button is released.

        Parameters:
            evt: The X11 button release event.
        """
        if evt.detail == BUTTON_LEFT:
            self.controller.pointer_up()

    # Command implementation methods

    def _quit_application(self):
        self.viewer.message_service.log_info("Closing viewer.")
        self.viewer.running = False

    def _reset_view(self):
        self.controller.reset()
        self.viewer.message_service.log_info("View reset to default")

    def _toggle_auto_rotate(self):
        enabled = self.controller.toggle_auto_rotate()
        status = "on" if enabled else "off"
        self.viewer.message_service.log_info(f"Auto-rotation {status}")

    def _dump_svg(self):
        """Export the current view as SVG."""
        self.viewer.dump_svg()
