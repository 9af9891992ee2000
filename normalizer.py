# normalizer.py

"""
Centers parsed atoms on the origin and scales them into the display volume.

Three scale modes are available:

  - "none":   center only
  - "radius": box_size / (largest distance of an atom from the center)
  - "extent": box_size / (largest edge of the bounding box)

Atom coordinates are rewritten in place.
"""

from typing import NamedTuple

import numpy as np

from config import NORMALIZATION
from geometry_utils import atom_coordinates

SCALE_MODES = ("none", "radius", "extent")


class NormalizationResult(NamedTuple):
    center: np.ndarray        # bounding-box midpoint that was subtracted
    scale: float              # uniform factor applied after centering
    bond_radius: float        # cylinder radius in display units
    atom_radius: float        # sphere radius in display units
    display_extent: float     # largest bounding-box edge after scaling


def bounding_box(atoms):
    """
    Axis-aligned bounds of the atom positions.

    Returns:
    --------
    (mins, maxs) : tuple of numpy.ndarray
        Each of shape (3,). With no atoms the bounds stay at +inf / -inf.
    """
    coords = atom_coordinates(atoms)
    mins = coords.min(axis=0, initial=np.inf)
    maxs = coords.max(axis=0, initial=-np.inf)
    return mins, maxs


def _scale_factor(coords, extents, mode, box_size):
    if mode == "none":
        return 1.0
    if mode == "radius":
        reference = np.sqrt((coords ** 2).sum(axis=1)).max(initial=-np.inf)
    else:
        reference = extents.max()
    if reference == 0.0:
        # A single atom (or atoms on one point) has no size to fit.
        return 1.0
    return box_size / reference


def normalize_atoms(atoms, mode=None, box_size=None):
    """
    Center `atoms` on the origin and scale them uniformly.

    Parameters:
    -----------
    atoms : list of Mol2Atom
        Modified in place
    mode : str
        One of SCALE_MODES (default NORMALIZATION["mode"])
    box_size : float
        Target size of the display volume (default NORMALIZATION["box_size"])

    Returns:
    --------
    NormalizationResult

    An empty atom list leaves the bounds at their sentinels; the returned
    center and extent are then not finite. Callers treat that as unsupported
    input rather than an error.
    """
    if mode is None:
        mode = NORMALIZATION["mode"]
    if box_size is None:
        box_size = NORMALIZATION["box_size"]
    if mode not in SCALE_MODES:
        raise ValueError(f"Unknown normalization mode '{mode}' (expected one of {SCALE_MODES})")

    with np.errstate(invalid="ignore", divide="ignore", over="ignore"):
        mins, maxs = bounding_box(atoms)
        center = (mins + maxs) / 2.0
        extents = maxs - mins

        coords = atom_coordinates(atoms) - center
        scale = float(_scale_factor(coords, extents, mode, box_size))
        coords = coords * scale

        bond_radius = NORMALIZATION["bond_radius"] * scale
        atom_radius = NORMALIZATION["atom_radius_factor"] * bond_radius
        display_extent = float(extents.max() * scale)

    for atom, (x, y, z) in zip(atoms, coords):
        atom.x = float(x)
        atom.y = float(y)
        atom.z = float(z)

    return NormalizationResult(
        center=center,
        scale=scale,
        bond_radius=bond_radius,
        atom_radius=atom_radius,
        display_extent=display_extent,
    )
