#!/usr/bin/env python3
"""
mol2_viewer.py

The MoleculeViewer class owns a Scene built from a Mol2Molecule, the camera
looking at it and the InteractionController that zooms and rotates it. Input
events go to the _EventHandler; every frame the controller advances, the new
scale and orientation are pushed to all primitives and the view is redrawn.
"""

import os

from x11view.window import X11Window
from x11view.x11_basic import X11CanvasBasic
from hud import HUDPanel, view_summary_lines
from scene_renderer import SceneRenderer
from config import CANVAS_SETTINGS, VIEWER_INTERACTION
from config import MESSAGE_PANEL_STYLE
from interaction import InteractionController
from message_service import MessageService
from message_panel import MessagePanel
from event_handler import _EventHandler
from export import export_svg


class MoleculeViewer(X11Window):
    """
    An interactive perspective viewer for a Scene of spheres and half-cylinders.
    """
    def __init__(self, scene, camera, display_extent, width=None, height=None,
                 title=None, message_service=None):
        width = width or CANVAS_SETTINGS["width"]
        height = height or CANVAS_SETTINGS["height"]

        super().__init__(
            width=width,
            height=height,
            title=title or CANVAS_SETTINGS["title"],
            canvas_class=X11CanvasBasic,
            background_color=CANVAS_SETTINGS["background_color"],
            frame_interval=VIEWER_INTERACTION["frame_interval"],
        )

        self.scene = scene
        self.camera = camera
        self.renderer = SceneRenderer()
        self.controller = InteractionController.for_extent(
            camera, display_extent, self.canvas.width, self.canvas.height)
        self.svg_count = 0

        self._initialize_ui(message_service)
        self._event_handler = _EventHandler(self)

        self.message_service.log_info(f"Viewer initialized ({width}x{height})")

    def _initialize_ui(self, message_service):
        """Initialize the HUD and message panel."""
        self.hud_panel = HUDPanel()

        if message_service is None:
            message_service = MessageService(max_messages=MESSAGE_PANEL_STYLE.get("max_messages", 3))
        self.message_service = message_service
        self.message_panel = MessagePanel(self.message_service)

    @property
    def molecule_name(self):
        molecule = self.scene.molecule
        if molecule is not None and molecule.name:
            return molecule.name
        return "molecule"

    # --- Frame loop ---

    def on_frame(self):
        """Advance the controller, update primitive transforms, redraw."""
        self.controller.tick()
        self.scene.apply_transform(self.controller.scale, self.controller.orientation)
        self.redraw()

    def handle_resize(self, width, height):
        self.controller.set_viewport(width, height)

    def redraw(self):
        """
        Redraw the scene followed by the HUD and message panel.
        """
        self.canvas.clear()
        self.renderer.draw_scene(self.canvas, self.scene, self.camera)
        self._update_ui()
        self.canvas.flush()

    def _update_ui(self):
        self.update_info_message()
        self.hud_panel.draw(self.canvas)
        self.message_panel.draw(self.canvas)

    def update_info_message(self):
        """Update the HUD with the molecule summary and view state."""
        self.hud_panel.update_lines(
            view_summary_lines(self.molecule_name, self.scene.molecule, self.controller))

    def dump_svg(self):
        """
        Export the current view to an SVG file named after the molecule.
        """
        base_name = self.molecule_name.replace(os.sep, "_").replace(" ", "_")
        filename = f"{base_name}.svg" if self.svg_count == 0 else f"{base_name}_{self.svg_count:03d}.svg"
        self.svg_count += 1

        export_svg(self.scene, self.camera, self.canvas.width, self.canvas.height,
                   filename, self.message_service)
        # export_svg leaves the camera aspect at the export size
        self.camera.set_aspect(self.canvas.width, self.canvas.height)

    # --- Event Handling Methods (delegated to EventHandler) ---

    def handle_key(self, evt):
        self._event_handler.handle_key(evt)

    def handle_button_press(self, evt):
        self._event_handler.handle_button_press(evt)

    def handle_motion(self, evt):
        self._event_handler.handle_motion(evt)

    def handle_button_release(self, evt):
        self._event_handler.handle_button_release(evt)
