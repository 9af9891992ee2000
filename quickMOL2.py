#!/usr/bin/env python3
"""
quickMOL2.py

Usage:
  python quickMOL2.py [name_or_file] [--svg out.svg]

Loads a MOL2 molecule, normalizes it into the display volume and opens the
interactive viewer. A bare name is looked up through MOL2_SOURCE (e.g.
mol2/<name>.mol2); with no argument the default sample is shown. With --svg the
first frame is written to an SVG file and no window is opened.
"""

import sys

import numpy as np

from config import CANVAS_SETTINGS, MESSAGE_PANEL_STYLE
from camera import PerspectiveCamera
from message_service import MessageService
from mol2_source import load_mol2_text
from normalizer import normalize_atoms
from parsers import Mol2Parser, Mol2ParseError
from scene import SceneBuilder

USAGE = "Usage: quickMOL2.py [name_or_file] [--svg out.svg]"


def parse_args(argv):
    """Return (name, svg_filename) from the command line words."""
    name = None
    svg_filename = None
    args = list(argv)
    while args:
        arg = args.pop(0)
        if arg == "--svg":
            if not args:
                raise ValueError("--svg needs a file name")
            svg_filename = args.pop(0)
        elif arg.startswith("-"):
            raise ValueError(f"unknown option {arg}")
        elif name is None:
            name = arg
        else:
            raise ValueError(f"unexpected argument {arg}")
    return name, svg_filename


def build_view(molecule):
    """
    Normalize a parsed molecule in place and build everything the renderer needs.

    Malformed coordinates are NaN and carry through normalization; the
    renderer skips whatever does not project to a finite depth.

    Returns (scene, camera, display_extent).
    """
    result = normalize_atoms(molecule.atoms)
    scene = SceneBuilder().build(molecule, result.atom_radius, result.bond_radius)

    # A single atom has zero extent; keep the camera outside its sphere.
    display_extent = result.display_extent
    if np.isfinite(display_extent):
        display_extent = max(display_extent, 2.0 * result.atom_radius)
    aspect = CANVAS_SETTINGS["width"] / CANVAS_SETTINGS["height"]
    camera = PerspectiveCamera.for_extent(display_extent, aspect=aspect)
    return scene, camera, display_extent


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    message_service = MessageService(max_messages=MESSAGE_PANEL_STYLE.get("max_messages", 3))

    try:
        name, svg_filename = parse_args(argv)
    except ValueError as e:
        message_service.log_error(str(e))
        print(USAGE)
        return 1

    fetched = load_mol2_text(name)
    if not fetched.ok:
        message_service.log_error(f"Could not load molecule: {fetched.reason}")
        return 1

    try:
        molecule = Mol2Parser.parse_text(fetched.text)
    except Mol2ParseError as e:
        message_service.log_error(f"{fetched.location}: {e}")
        return 1

    if not molecule.atoms:
        message_service.log_error(f"{fetched.location}: no atom records found")
        return 1

    scene, camera, display_extent = build_view(molecule)

    message_service.log_info(
        f"Loaded {molecule.name or fetched.location} with "
        f"{len(molecule.atoms)} atoms and {len(molecule.bonds)} bonds")
    n_atoms = len(molecule.highlighted_atoms())
    n_bonds = len(molecule.highlighted_bonds())
    if n_atoms or n_bonds:
        message_service.log_info(f"Highlighted: {n_atoms} atoms, {n_bonds} bonds")

    if svg_filename:
        from export import export_svg
        export_svg(scene, camera, CANVAS_SETTINGS["width"], CANVAS_SETTINGS["height"],
                   svg_filename, message_service)
        return 0

    from mol2_viewer import MoleculeViewer
    viewer = MoleculeViewer(scene, camera, display_extent,
                            title=f"{CANVAS_SETTINGS['title']} - {molecule.name or fetched.location}",
                            message_service=message_service)
    try:
        viewer.run()
    finally:
        viewer.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
