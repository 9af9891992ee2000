#!/usr/bin/env python3
"""
interaction.py

The InteractionController owns the view state driven by the user: the zoom
factor and the orientation quaternion shared by every scene primitive. It
knows nothing about X11; the event handler translates raw events into the
calls below.
"""

from config import CAMERA, VIEWER_INTERACTION
from geometry_utils import (quat_from_axis_angle, quat_from_unit_vectors,
                            quat_identity, quat_multiply, quat_normalize)


class InputState:
    """Enumeration of possible input states for the controller."""
    IDLE = 0        # No button held; auto-rotation runs
    DRAGGING = 1    # Left button held; motion rotates the scene


class InteractionController:
    """
    Zoom / free-rotation state machine.

    Attributes:
      - scale (float): uniform zoom applied to all primitives
      - orientation (numpy.ndarray): rotation quaternion (x, y, z, w)
      - input_state (int): InputState.IDLE or InputState.DRAGGING
      - prev_x, prev_y: screen position of the last drag sample
      - auto_rotate (bool): rotate while idle
    """
    def __init__(self, camera, width=800, height=600, drag_depth=None):
        self.camera = camera
        self.width = width
        self.height = height
        self.drag_depth = drag_depth if drag_depth is not None else 0.0

        self.min_zoom = VIEWER_INTERACTION["min_zoom"]
        self.max_zoom = VIEWER_INTERACTION["max_zoom"]
        self.zoom_step = VIEWER_INTERACTION["zoom_step"]
        self.auto_rotate = VIEWER_INTERACTION["auto_rotate"]
        self._auto_rotation = quat_from_axis_angle(
            VIEWER_INTERACTION["auto_rotate_axis"],
            VIEWER_INTERACTION["auto_rotate_step"],
        )

        self.scale = 1.0
        self.orientation = quat_identity()
        self.input_state = InputState.IDLE
        self.prev_x = None
        self.prev_y = None

    @classmethod
    def for_extent(cls, camera, display_extent, width=800, height=600):
        """Controller whose drag plane sits at a fixed fraction of the molecule size."""
        return cls(camera, width=width, height=height,
                   drag_depth=CAMERA["drag_depth_factor"] * display_extent)

    @property
    def is_dragging(self):
        return self.input_state == InputState.DRAGGING

    def set_viewport(self, width, height):
        self.width = width
        self.height = height
        self.camera.set_aspect(width, height)

    # --- Events ---

    def wheel(self, delta_y):
        """
        Negative deltas (scrolling up) zoom in; the result is clamped to
        [min_zoom, max_zoom].
        """
        scale = self.scale - self.zoom_step * delta_y
        self.scale = max(self.min_zoom, min(self.max_zoom, scale))
        return self.scale

    def pointer_down(self, x, y):
        self.input_state = InputState.DRAGGING
        self.prev_x = x
        self.prev_y = y

    def pointer_up(self):
        self.input_state = InputState.IDLE

    def pointer_move(self, x, y):
        """
        Rotate by the turn that carries the previous pointer direction onto
        the current one. Returns True when the orientation changed.
        """
        if not self.is_dragging:
            return False

        start = self.pointer_direction(self.prev_x, self.prev_y)
        end = self.pointer_direction(x, y)
        rotation = quat_from_unit_vectors(start, end)
        self.orientation = quat_normalize(quat_multiply(rotation, self.orientation))

        self.prev_x = x
        self.prev_y = y
        return True

    def pointer_direction(self, x, y):
        return self.camera.screen_direction(x, y, self.width, self.height, self.drag_depth)

    # --- Per-frame ---

    def tick(self):
        """
        Advance one frame: apply the idle rotation unless a drag is active.
        Returns True when the orientation changed.
        """
        if self.is_dragging or not self.auto_rotate:
            return False
        self.orientation = quat_normalize(quat_multiply(self._auto_rotation, self.orientation))
        return True

    def toggle_auto_rotate(self):
        self.auto_rotate = not self.auto_rotate
        return self.auto_rotate

    def reset(self):
        self.scale = 1.0
        self.orientation = quat_identity()
        self.input_state = InputState.IDLE
        self.prev_x = None
        self.prev_y = None
