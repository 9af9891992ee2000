#!/usr/bin/env python3
"""
export.py

This module provides export functionality for the MoleculeViewer and the
headless command line mode. It renders a scene to an SVG file.
"""

from config import PRINT_THEME, ATOM_STYLE
from scene_renderer import SceneRenderer
from x11view.svg_canvas import SVGCanvas


def render_scene(canvas, scene, camera):
    """
    Draw `scene` onto any canvas with the X11 drawing methods.

    Returns the depth-sorted render list.
    """
    renderer = SceneRenderer(as_float=isinstance(canvas, SVGCanvas))
    return renderer.draw_scene(canvas, scene, camera)


def export_svg(scene, camera, width, height, filename="quickMOL2_export.svg", message_service=None):
    """
    Export the scene as seen through `camera` to an SVG file using the PRINT_THEME.

    Parameters:
        scene: The Scene to draw (its current scale and orientation are used).
        camera: The PerspectiveCamera; its aspect is set from width/height.
        width, height: Output size in pixels.
        filename (str): The name of the output SVG file.
        message_service: Optional MessageService instance for sending status messages.

    Returns:
        The filename of the exported SVG.
    """
    svg_canvas = SVGCanvas(
        width=width,
        height=height,
        background_color=PRINT_THEME["background_color"]
    )

    original_border = ATOM_STYLE["border_color"]
    ATOM_STYLE["border_color"] = PRINT_THEME["atom_border_color"]
    try:
        render_scene(svg_canvas, scene, camera)
    finally:
        ATOM_STYLE["border_color"] = original_border

    svg_canvas.flush(filename)

    if message_service:
        message_service.log_info(f"SVG export saved to {filename}")

    return filename
