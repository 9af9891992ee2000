import os
import re
import tempfile
import unittest

from camera import PerspectiveCamera
from config import ATOM_STYLE
from export import export_svg, render_scene
from message_service import MessageService
from normalizer import normalize_atoms
from parsers import Mol2Parser
from scene import SceneBuilder
from scene_renderer import SceneRenderer
from x11view.svg_canvas import SVGCanvas
from zobjects import ZCylinder, ZSphere

FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures")


def build_ethanol():
    molecule = Mol2Parser.parse_file(os.path.join(FIXTURES, "ethanol.mol2"))
    result = normalize_atoms(molecule.atoms)
    scene = SceneBuilder().build(molecule, result.atom_radius, result.bond_radius)
    camera = PerspectiveCamera.for_extent(result.display_extent, aspect=4 / 3)
    return scene, camera


class TestSceneRenderer(unittest.TestCase):
    def test_render_list_is_depth_sorted(self):
        scene, camera = build_ethanol()
        canvas = SVGCanvas(400, 300)
        z_list = render_scene(canvas, scene, camera)
        self.assertEqual(len(z_list), 9 + 2 * 8)
        depths = [obj.z_value for obj in z_list]
        self.assertEqual(depths, sorted(depths, reverse=True))
        self.assertEqual(sum(isinstance(o, ZSphere) for o in z_list), 9)
        self.assertEqual(sum(isinstance(o, ZCylinder) for o in z_list), 16)

    def test_integer_coordinates_for_window(self):
        scene, camera = build_ethanol()
        z_list = SceneRenderer().build_render_list(scene, camera, 400, 300)
        sphere = next(o for o in z_list if isinstance(o, ZSphere))
        self.assertIsInstance(sphere.x2d, int)
        self.assertIsInstance(sphere.radius, int)

    def test_primitives_behind_camera_are_skipped(self):
        scene, camera = build_ethanol()
        scene.apply_transform(10.0, scene.spheres[0].orientation)
        z_list = SceneRenderer(as_float=True).build_render_list(scene, camera, 400, 300)
        self.assertLess(len(z_list), len(scene))


class TestExportSVG(unittest.TestCase):
    def test_export_writes_svg(self):
        scene, camera = build_ethanol()
        messages = MessageService()
        border = ATOM_STYLE["border_color"]
        with tempfile.TemporaryDirectory() as tmpdir:
            filename = os.path.join(tmpdir, "ethanol.svg")
            self.assertEqual(export_svg(scene, camera, 400, 300, filename, messages), filename)
            with open(filename) as f:
                svg = f.read()
        self.assertTrue(svg.startswith("<svg"))
        self.assertTrue(svg.rstrip().endswith("</svg>"))
        self.assertGreaterEqual(len(re.findall(r"<circle ", svg)), 9)
        self.assertEqual(len(re.findall(r"<line ", svg)), 16)
        self.assertEqual(ATOM_STYLE["border_color"], border)
        self.assertIn("SVG export saved", messages.get_messages()[-1][2])

    def test_svg_canvas_escapes_text(self):
        canvas = SVGCanvas(10, 10)
        canvas.draw_text(1, 2, "a<b & c")
        self.assertIn("a&lt;b &amp; c", canvas.flush())


if __name__ == "__main__":
    unittest.main()
