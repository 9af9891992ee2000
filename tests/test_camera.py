import unittest

import numpy as np

from camera import PerspectiveCamera
from config import CAMERA


class TestPerspectiveCamera(unittest.TestCase):
    def setUp(self):
        self.camera = PerspectiveCamera(aspect=800 / 600, distance=20.0)

    def test_for_extent(self):
        camera = PerspectiveCamera.for_extent(40.0)
        self.assertAlmostEqual(camera.position[2], CAMERA["distance_factor"] * 40.0)

    def test_origin_projects_to_screen_center(self):
        ndc = self.camera.project([0, 0, 0])
        screen = self.camera.ndc_to_screen(ndc, 800, 600)
        np.testing.assert_allclose(screen[0], [400, 300], atol=1e-9)

    def test_up_is_up_on_screen(self):
        screen = self.camera.ndc_to_screen(self.camera.project([0, 1, 0]), 800, 600)
        self.assertLess(screen[0, 1], 300)

    def test_project_unproject_round_trip(self):
        point = np.array([[1.5, -2.0, 3.0]])
        back = self.camera.unproject(self.camera.project(point))
        np.testing.assert_allclose(back, point, atol=1e-6)

    def test_nearer_objects_are_bigger(self):
        near = self.camera.pixels_per_unit(5.0, 600)
        far = self.camera.pixels_per_unit(50.0, 600)
        self.assertGreater(near, far)

    def test_view_depth(self):
        np.testing.assert_allclose(self.camera.view_depth([[0, 0, 5], [0, 0, -5]]), [15, 25])

    def test_screen_to_ndc(self):
        self.assertEqual(self.camera.screen_to_ndc(400, 300, 800, 600), (0.0, 0.0))
        self.assertEqual(self.camera.screen_to_ndc(0, 0, 800, 600), (-1.0, 1.0))

    def test_screen_direction_center(self):
        direction = self.camera.screen_direction(400, 300, 800, 600, 5.0)
        np.testing.assert_allclose(direction, [0, 0, 1], atol=1e-6)

    def test_screen_direction_is_unit(self):
        direction = self.camera.screen_direction(700, 100, 800, 600, 5.0)
        self.assertAlmostEqual(np.linalg.norm(direction), 1.0)
        self.assertGreater(direction[0], 0)
        self.assertGreater(direction[1], 0)

    def test_set_aspect_ignores_zero_height(self):
        self.camera.set_aspect(100, 0)
        self.assertAlmostEqual(self.camera.aspect, 800 / 600)


if __name__ == "__main__":
    unittest.main()
