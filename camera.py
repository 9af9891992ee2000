# camera.py

"""
Perspective camera sitting on the +z axis and looking at the origin.

Coordinates follow the usual right-handed view convention: x to the right,
y up, the camera looking down -z. Normalized device coordinates (NDC) span
[-1, 1] on every axis; screen coordinates have their origin at the top-left
corner of the canvas with y pointing down.
"""

import math

import numpy as np

from config import CAMERA


class PerspectiveCamera:
    def __init__(self, fov_deg=None, aspect=1.0, near=None, far=None, distance=30.0):
        self.fov_deg = CAMERA["fov_deg"] if fov_deg is None else fov_deg
        self.near = CAMERA["near"] if near is None else near
        self.far = CAMERA["far"] if far is None else far
        self.aspect = aspect
        self.position = np.array([0.0, 0.0, float(distance)])

    @classmethod
    def for_extent(cls, display_extent, aspect=1.0):
        """
        Camera placed CAMERA["distance_factor"] times the molecule's display
        extent away from the origin.
        """
        return cls(aspect=aspect, distance=CAMERA["distance_factor"] * display_extent)

    @property
    def focal(self):
        """Cotangent of half the vertical field of view."""
        return 1.0 / math.tan(math.radians(self.fov_deg) / 2.0)

    def set_aspect(self, width, height):
        if height > 0:
            self.aspect = width / height

    def view_matrix(self):
        m = np.identity(4)
        m[:3, 3] = -self.position
        return m

    def projection_matrix(self):
        f = self.focal
        n, fa = self.near, self.far
        return np.array([
            [f / self.aspect, 0.0, 0.0, 0.0],
            [0.0, f, 0.0, 0.0],
            [0.0, 0.0, (fa + n) / (n - fa), 2.0 * fa * n / (n - fa)],
            [0.0, 0.0, -1.0, 0.0],
        ])

    def view_depth(self, points):
        """
        Distance in front of the camera along the viewing axis, shape (n,).
        """
        points = np.atleast_2d(np.asarray(points, dtype=float))
        return self.position[2] - points[:, 2]

    def project(self, points):
        """
        World points (n, 3) to NDC (n, 3).
        """
        points = np.atleast_2d(np.asarray(points, dtype=float))
        homogeneous = np.hstack([points, np.ones((len(points), 1))])
        clip = homogeneous @ (self.projection_matrix() @ self.view_matrix()).T
        return clip[:, :3] / clip[:, 3:4]

    def unproject(self, ndc):
        """
        NDC points (n, 3) back to world space (n, 3).
        """
        ndc = np.atleast_2d(np.asarray(ndc, dtype=float))
        homogeneous = np.hstack([ndc, np.ones((len(ndc), 1))])
        inverse = np.linalg.inv(self.projection_matrix() @ self.view_matrix())
        world = homogeneous @ inverse.T
        return world[:, :3] / world[:, 3:4]

    def ndc_to_screen(self, ndc, width, height):
        """
        NDC (n, 2+) to pixel coordinates (n, 2) for a canvas of the given size.
        """
        ndc = np.atleast_2d(np.asarray(ndc, dtype=float))
        screen = np.zeros((len(ndc), 2))
        screen[:, 0] = (ndc[:, 0] + 1.0) / 2.0 * width
        screen[:, 1] = (1.0 - ndc[:, 1]) / 2.0 * height
        return screen

    def screen_to_ndc(self, x, y, width, height):
        return ((x / width) * 2.0 - 1.0, ((height - y) / height) * 2.0 - 1.0)

    def pixels_per_unit(self, depth, height):
        """
        Screen pixels covered by one world unit at the given view depth.
        """
        depth = np.asarray(depth, dtype=float)
        return self.focal * (height / 2.0) / depth

    def screen_direction(self, x, y, width, height, plane_z):
        """
        Unit vector from the origin towards the point under the screen
        position (x, y) on the plane z = plane_z.
        """
        z_ndc = self.project([[0.0, 0.0, plane_z]])[0, 2]
        x_ndc, y_ndc = self.screen_to_ndc(x, y, width, height)
        world = self.unproject([[x_ndc, y_ndc, z_ndc]])[0]
        length = np.linalg.norm(world)
        if length == 0.0:
            return world
        return world / length
