import math
import os
import tempfile
import unittest

from parsers import Mol2Parser
from quickMOL2 import build_view, main, parse_args

FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures")


class TestCommandLine(unittest.TestCase):
    def test_parse_args(self):
        self.assertEqual(parse_args([]), (None, None))
        self.assertEqual(parse_args(["benzene", "--svg", "out.svg"]), ("benzene", "out.svg"))
        with self.assertRaises(ValueError):
            parse_args(["--svg"])
        with self.assertRaises(ValueError):
            parse_args(["a", "b"])

    def test_headless_svg(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            out = os.path.join(tmpdir, "ethanol.svg")
            status = main([os.path.join(FIXTURES, "ethanol.mol2"), "--svg", out])
            self.assertEqual(status, 0)
            self.assertTrue(os.path.getsize(out) > 0)

    def test_missing_molecule_fails(self):
        self.assertEqual(main([os.path.join(FIXTURES, "no_such.mol2"), "--svg", "x.svg"]), 1)

    def test_bad_bond_fails(self):
        with tempfile.NamedTemporaryFile("w", suffix=".mol2", delete=False) as f:
            f.write("@<TRIPOS>ATOM\n1 C1 0 0 0 C.3\n@<TRIPOS>BOND\n1 1 2 1\n")
        try:
            self.assertEqual(main([f.name, "--svg", os.devnull]), 1)
        finally:
            os.unlink(f.name)

    def test_single_atom_camera_outside_sphere(self):
        molecule = Mol2Parser.parse_text("@<TRIPOS>ATOM\n1 O1 1 1 1 O.3\n")
        scene, camera, extent = build_view(molecule)
        self.assertGreater(camera.position[2], scene.spheres[0].radius)
        self.assertGreater(extent, 0)

    def test_malformed_coordinate_still_renders(self):
        text = ("@<TRIPOS>ATOM\n"
                "1 C1 0 0 0 C.3\n"
                "2 C2 1.5 0 0 C.3\n"
                "3 O1 1 abc 0 O.2\n"
                "@<TRIPOS>BOND\n1 1 2 1\n2 2 3 1\n")
        molecule = Mol2Parser.parse_text(text)
        scene, camera, extent = build_view(molecule)
        self.assertEqual(len(scene), 3 + 2 * 2)
        self.assertTrue(math.isnan(molecule.atoms[0].y))

        with tempfile.TemporaryDirectory() as tmpdir:
            src = os.path.join(tmpdir, "broken.mol2")
            out = os.path.join(tmpdir, "broken.svg")
            with open(src, "w") as f:
                f.write(text)
            self.assertEqual(main([src, "--svg", out]), 0)
            with open(out) as f:
                self.assertTrue(f.read().rstrip().endswith("</svg>"))

    def test_no_atom_records_fails(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            src = os.path.join(tmpdir, "empty.mol2")
            out = os.path.join(tmpdir, "empty.svg")
            with open(src, "w") as f:
                f.write("@<TRIPOS>MOLECULE\nnothing\n")
            self.assertEqual(main([src, "--svg", out]), 1)
            self.assertFalse(os.path.exists(out))


if __name__ == "__main__":
    unittest.main()
