# scene_renderer.py

import numpy as np

from config import ATOM_STYLE
from scene import HalfCylinderPrimitive, SpherePrimitive
from zobjects import ZCylinder, ZSphere, scale_color


class SceneRenderer:
    """
    Responsible for drawing the primitives of a Scene through a perspective
    camera using a painter's algorithm (depth sorting).
    """
    def __init__(self, as_float=False):
        self.as_float = as_float

    def _coord(self, value):
        return float(value) if self.as_float else int(round(value))

    def build_render_list(self, scene, camera, width, height):
        render_list = []
        camera.set_aspect(width, height)

        for primitive in scene.primitives:
            if isinstance(primitive, SpherePrimitive):
                z_obj = self._project_sphere(primitive, camera, width, height)
            elif isinstance(primitive, HalfCylinderPrimitive):
                z_obj = self._project_cylinder(primitive, camera, width, height)
            else:
                continue
            if z_obj is not None:
                z_obj.primitive = primitive
                render_list.append(z_obj)

        self._apply_depth_shading(render_list)
        return render_list

    def _project_sphere(self, sphere, camera, width, height):
        center = sphere.world_center()
        depth = camera.view_depth(center)[0]
        if not np.isfinite(depth) or depth <= camera.near:
            return None
        x2d, y2d = camera.ndc_to_screen(camera.project(center), width, height)[0]
        radius = sphere.world_radius * camera.pixels_per_unit(depth, height)
        return ZSphere(
            x2d=self._coord(x2d),
            y2d=self._coord(y2d),
            radius=self._coord(radius),
            color=sphere.color,
            z_value=depth,
        )

    def _project_cylinder(self, cylinder, camera, width, height):
        ends = cylinder.world_endpoints()
        depths = camera.view_depth(ends)
        if not np.all(np.isfinite(depths)) or np.any(depths <= camera.near):
            return None
        screen = camera.ndc_to_screen(camera.project(ends), width, height)
        mid_depth = float(depths.mean())
        thickness = 2.0 * cylinder.world_radius * camera.pixels_per_unit(mid_depth, height)
        return ZCylinder(
            x1=self._coord(screen[0, 0]),
            y1=self._coord(screen[0, 1]),
            x2=self._coord(screen[1, 0]),
            y2=self._coord(screen[1, 1]),
            thickness=self._coord(thickness),
            color=cylinder.color,
            z_value=mid_depth,
        )

    def _apply_depth_shading(self, render_list):
        shading = ATOM_STYLE.get("depth_shading", {})
        if not shading.get("enabled", False) or len(render_list) < 2:
            return
        depths = [obj.z_value for obj in render_list]
        nearest, farthest = min(depths), max(depths)
        if farthest - nearest <= 0:
            return
        min_factor = shading.get("min_factor", 0.55)
        for obj in render_list:
            t = (obj.z_value - nearest) / (farthest - nearest)
            obj.color = scale_color(obj.color, 1.0 - (1.0 - min_factor) * t)

    def draw_scene(self, canvas, scene, camera):
        """
        Draw the scene by building a render list, sorting by depth,
        and drawing the farthest objects first.
        """
        z_list = self.build_render_list(scene, camera, canvas.width, canvas.height)
        z_list.sort(key=lambda obj: obj.z_value, reverse=True)
        for obj in z_list:
            obj.draw(canvas)
        return z_list
