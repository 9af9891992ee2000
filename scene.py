#!/usr/bin/env python3
"""
scene.py

Maps a parsed molecule to renderable primitives: one sphere per atom and two
half-cylinders per bond. Every primitive carries the scene-wide scale and
orientation so the whole assembly zooms and rotates as one.
"""

import numpy as np

from config import HIGHLIGHT
from element_colors import ElementColors, hex_to_rgb
from geometry_utils import (UP_AXIS, normalize_vector, quat_from_unit_vectors,
                            quat_identity, rotate_points)


class ScenePrimitive:
    """
    Base class for scene primitives. `center` is in normalized molecule
    coordinates; the world position is orientation * (scale * center).
    """
    def __init__(self, center, radius, color):
        self.center = np.asarray(center, dtype=float)
        self.radius = radius
        self.color = color
        self.scale = 1.0
        self.orientation = quat_identity()

    def apply_transform(self, scale, orientation):
        self.scale = scale
        self.orientation = orientation

    def world_center(self):
        return rotate_points(self.center * self.scale, self.orientation)

    @property
    def world_radius(self):
        return self.radius * self.scale


class SpherePrimitive(ScenePrimitive):
    def __init__(self, center, radius, color, atom=None):
        super().__init__(center, radius, color)
        self.atom = atom


class HalfCylinderPrimitive(ScenePrimitive):
    """
    One half of a bond. The cylinder's own axis is the up axis (0, 1, 0)
    turned by `local_orientation`; `height` is its length.
    """
    def __init__(self, center, local_orientation, height, radius, color, bond=None):
        super().__init__(center, radius, color)
        self.local_orientation = local_orientation
        self.height = height
        self.bond = bond

    def world_endpoints(self):
        """
        The two end centers of the cylinder in world space, shape (2, 3).
        """
        local_axis = rotate_points(UP_AXIS, self.local_orientation)
        half = 0.5 * self.height * local_axis
        local_ends = np.array([self.center - half, self.center + half])
        return rotate_points(local_ends * self.scale, self.orientation)


class Scene:
    """
    Flat list of primitives, atoms first, then bond halves in bond order.
    """
    def __init__(self, primitives=None, molecule=None):
        self.primitives = list(primitives or [])
        self.molecule = molecule

    @property
    def spheres(self):
        return [p for p in self.primitives if isinstance(p, SpherePrimitive)]

    @property
    def cylinders(self):
        return [p for p in self.primitives if isinstance(p, HalfCylinderPrimitive)]

    def apply_transform(self, scale, orientation):
        """Set the same zoom and orientation on every primitive."""
        for primitive in self.primitives:
            primitive.apply_transform(scale, orientation)

    def __len__(self):
        return len(self.primitives)


class SceneBuilder:
    """
    Builds a Scene from a (normalized) Mol2Molecule.
    """
    def __init__(self, highlight_color=None):
        self.highlight_color = hex_to_rgb(highlight_color or HIGHLIGHT["color"])

    def atom_color(self, atom):
        if atom.highlight:
            return self.highlight_color
        return ElementColors.rgb(atom.atom_type or "")

    def bond_colors(self, bond):
        """Colors of the (start half, end half) of a bond."""
        if bond.is_highlighted:
            return self.highlight_color, self.highlight_color
        return (ElementColors.rgb(bond.start.atom_type or ""),
                ElementColors.rgb(bond.end.atom_type or ""))

    def build_sphere(self, atom, radius):
        return SpherePrimitive(atom.position, radius, self.atom_color(atom), atom=atom)

    def build_half_cylinders(self, bond, radius):
        start = np.array(bond.start.position, dtype=float)
        end = np.array(bond.end.position, dtype=float)
        midpoint = 0.5 * (start + end)
        orientation = quat_from_unit_vectors(UP_AXIS, normalize_vector(end - start))
        start_color, end_color = self.bond_colors(bond)

        halves = []
        for endpoint, color in ((start, start_color), (end, end_color)):
            halves.append(HalfCylinderPrimitive(
                center=0.5 * (endpoint + midpoint),
                local_orientation=orientation,
                height=float(np.linalg.norm(midpoint - endpoint)),
                radius=radius,
                color=color,
                bond=bond,
            ))
        return halves

    def build(self, molecule, atom_radius, bond_radius):
        primitives = [self.build_sphere(atom, atom_radius) for atom in molecule.atoms]
        for bond in molecule.bonds:
            primitives.extend(self.build_half_cylinders(bond, bond_radius))
        return Scene(primitives, molecule=molecule)
