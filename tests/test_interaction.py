import math
import unittest

import numpy as np

from camera import PerspectiveCamera
from config import VIEWER_INTERACTION
from geometry_utils import quat_identity, rotate_points
from interaction import InputState, InteractionController


class TestInteractionController(unittest.TestCase):
    def setUp(self):
        self.camera = PerspectiveCamera(aspect=800 / 600, distance=60.0)
        self.controller = InteractionController.for_extent(self.camera, 50.0, 800, 600)

    def test_initial_state(self):
        self.assertEqual(self.controller.scale, 1.0)
        np.testing.assert_allclose(self.controller.orientation, quat_identity())
        self.assertEqual(self.controller.input_state, InputState.IDLE)

    def test_wheel_zooms(self):
        self.controller.wheel(-10)
        self.assertAlmostEqual(self.controller.scale, 1.1)
        self.controller.wheel(20)
        self.assertAlmostEqual(self.controller.scale, 0.9)

    def test_wheel_clamps(self):
        self.controller.wheel(-100000)
        self.assertEqual(self.controller.scale, VIEWER_INTERACTION["max_zoom"])
        self.controller.wheel(100000)
        self.assertEqual(self.controller.scale, VIEWER_INTERACTION["min_zoom"])

    def test_drag_state(self):
        self.controller.pointer_down(10, 20)
        self.assertTrue(self.controller.is_dragging)
        self.assertEqual((self.controller.prev_x, self.controller.prev_y), (10, 20))
        self.controller.pointer_up()
        self.assertFalse(self.controller.is_dragging)

    def test_move_without_drag_does_nothing(self):
        self.assertFalse(self.controller.pointer_move(500, 300))
        np.testing.assert_allclose(self.controller.orientation, quat_identity())

    def test_drag_rotates_about_vertical_axis(self):
        self.controller.pointer_down(400, 300)
        self.assertTrue(self.controller.pointer_move(500, 300))
        q = self.controller.orientation
        self.assertAlmostEqual(np.linalg.norm(q), 1.0)
        # horizontal drag turns the +z axis towards +x, leaving y alone
        turned = rotate_points([0, 0, 1], q)
        self.assertGreater(turned[0], 0)
        self.assertAlmostEqual(turned[1], 0.0)
        self.assertEqual((self.controller.prev_x, self.controller.prev_y), (500, 300))

    def test_tick_rotates_only_when_idle(self):
        self.assertTrue(self.controller.tick())
        angle = 2 * math.acos(min(1.0, self.controller.orientation[3]))
        self.assertAlmostEqual(angle, VIEWER_INTERACTION["auto_rotate_step"])

        before = self.controller.orientation.copy()
        self.controller.pointer_down(100, 100)
        self.assertFalse(self.controller.tick())
        np.testing.assert_allclose(self.controller.orientation, before)

    def test_toggle_auto_rotate(self):
        self.controller.toggle_auto_rotate()
        self.assertFalse(self.controller.tick())
        self.assertTrue(self.controller.toggle_auto_rotate())

    def test_reset(self):
        self.controller.wheel(-50)
        self.controller.tick()
        self.controller.pointer_down(1, 1)
        self.controller.reset()
        self.assertEqual(self.controller.scale, 1.0)
        np.testing.assert_allclose(self.controller.orientation, quat_identity())
        self.assertFalse(self.controller.is_dragging)

    def test_set_viewport(self):
        self.controller.set_viewport(1000, 500)
        self.assertEqual((self.controller.width, self.controller.height), (1000, 500))
        self.assertAlmostEqual(self.camera.aspect, 2.0)


if __name__ == "__main__":
    unittest.main()
