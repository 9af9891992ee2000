import math
import unittest

import numpy as np

from element_colors import ElementColors, hex_to_rgb
from geometry_utils import quat_from_axis_angle
from mol2_molecule import Mol2Atom, Mol2Bond, Mol2Molecule
from scene import HalfCylinderPrimitive, SceneBuilder, SpherePrimitive

GREEN = (0, 255, 0)


def make_molecule(highlight_start=False, highlight_end=False, bond_highlight=False):
    molecule = Mol2Molecule(name="test")
    start = Mol2Atom("1", "C1", -1.0, 0.0, 0.0, "C.3", highlight=highlight_start)
    end = Mol2Atom("2", "N1", 1.0, 0.0, 0.0, "N.3", highlight=highlight_end)
    molecule.add_atom(start)
    molecule.add_atom(end)
    molecule.add_bond(Mol2Bond("1", start, end, "1", highlight=bond_highlight))
    return molecule


class TestElementColors(unittest.TestCase):
    def test_dotted_types(self):
        self.assertEqual(ElementColors.element("C.ar"), "C")
        self.assertEqual(ElementColors.element("cl"), "CL")
        self.assertEqual(ElementColors.rgb("N.am"), (0x20, 0x60, 0xff))

    def test_fallback_color(self):
        self.assertEqual(ElementColors.color("Du"), "#dddddd")
        self.assertFalse(ElementColors.is_known("Xx"))
        self.assertTrue(ElementColors.is_known("o"))

    def test_hex_to_rgb(self):
        self.assertEqual(hex_to_rgb("#00ff00"), GREEN)


class TestSceneBuilder(unittest.TestCase):
    def test_primitive_counts(self):
        scene = SceneBuilder().build(make_molecule(), atom_radius=0.48, bond_radius=0.16)
        self.assertEqual(len(scene), 4)
        self.assertEqual(len(scene.spheres), 2)
        self.assertEqual(len(scene.cylinders), 2)
        self.assertEqual(scene.spheres[0].radius, 0.48)
        self.assertEqual(scene.cylinders[0].radius, 0.16)

    def test_element_colors(self):
        scene = SceneBuilder().build(make_molecule(), 0.48, 0.16)
        self.assertEqual(scene.spheres[0].color, ElementColors.rgb("C"))
        self.assertEqual(scene.spheres[1].color, ElementColors.rgb("N"))
        self.assertEqual([c.color for c in scene.cylinders],
                         [ElementColors.rgb("C"), ElementColors.rgb("N")])

    def test_highlight_color(self):
        scene = SceneBuilder().build(make_molecule(highlight_start=True), 0.48, 0.16)
        self.assertEqual(scene.spheres[0].color, GREEN)
        self.assertNotEqual(scene.spheres[1].color, GREEN)
        # one highlighted endpoint is not enough for the bond
        self.assertNotEqual(scene.cylinders[0].color, GREEN)

    def test_bond_highlighted_by_both_atoms(self):
        scene = SceneBuilder().build(make_molecule(True, True), 0.48, 0.16)
        self.assertEqual([c.color for c in scene.cylinders], [GREEN, GREEN])

    def test_bond_highlight_flag(self):
        scene = SceneBuilder().build(make_molecule(bond_highlight=True), 0.48, 0.16)
        self.assertEqual([c.color for c in scene.cylinders], [GREEN, GREEN])

    def test_half_cylinders_meet_at_midpoint(self):
        scene = SceneBuilder().build(make_molecule(), 0.48, 0.16)
        first, second = scene.cylinders
        self.assertAlmostEqual(first.height, 1.0)
        np.testing.assert_allclose(first.center, [-0.5, 0, 0])
        np.testing.assert_allclose(second.center, [0.5, 0, 0])
        ends = np.vstack([first.world_endpoints(), second.world_endpoints()])
        np.testing.assert_allclose(sorted(ends[:, 0]), [-1, 0, 0, 1], atol=1e-12)
        np.testing.assert_allclose(ends[:, 1:], 0, atol=1e-12)

    def test_apply_transform(self):
        scene = SceneBuilder().build(make_molecule(), 0.48, 0.16)
        q = quat_from_axis_angle((0, 0, 1), math.pi / 2)
        scene.apply_transform(2.0, q)
        for primitive in scene.primitives:
            self.assertEqual(primitive.scale, 2.0)
            np.testing.assert_allclose(primitive.orientation, q)
        sphere = scene.spheres[1]
        self.assertIsInstance(sphere, SpherePrimitive)
        np.testing.assert_allclose(sphere.world_center(), [0, 2, 0], atol=1e-12)
        self.assertAlmostEqual(sphere.world_radius, 0.96)

        cylinder = scene.cylinders[1]
        self.assertIsInstance(cylinder, HalfCylinderPrimitive)
        np.testing.assert_allclose(sorted(cylinder.world_endpoints()[:, 1]), [0, 2], atol=1e-12)


if __name__ == "__main__":
    unittest.main()
