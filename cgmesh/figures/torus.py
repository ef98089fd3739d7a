"""A torus lying on the XZ plane around the Y axis."""

from __future__ import annotations

import math

from ..triangle_face import TriangleFace
from ..wavefront import WavefrontOBJ


class Torus(WavefrontOBJ):
    """A torus whose tube of ``minor_radius`` circles the Y axis at ``major_radius``.

    The ring is split into ``slices`` around the Y axis and the tube into
    ``sides`` around its own centre line.
    """

    def __init__(
        self, major_radius: float, minor_radius: float, slices: int, sides: int
    ) -> None:
        super().__init__(
            comment=f"torus {major_radius:f} {minor_radius:f} {slices} {sides}"
        )

        slice_step = math.tau / slices
        side_step = math.tau / sides
        row = sides + 1

        for i in range(slices + 1):
            theta = i * slice_step
            cos_theta = math.cos(theta)
            sin_theta = math.sin(theta)
            center = (cos_theta * major_radius, 0.0, sin_theta * major_radius)

            for j in range(row):
                phi = j * side_step
                cos_phi = math.cos(phi)
                normal = (cos_theta * cos_phi, math.sin(phi), sin_theta * cos_phi)

                self.positions.append(
                    (
                        center[0] + normal[0] * minor_radius,
                        center[1] + normal[1] * minor_radius,
                        center[2] + normal[2] * minor_radius,
                        1.0,
                    )
                )
                self.normals.append(normal)
                self.texture_coordinates.append((i / slices, j / sides))

        for i in range(slices):
            for j in range(sides):
                current_bottom = i * row + j
                next_bottom = current_bottom + 1
                current_top = current_bottom + row
                next_top = current_top + 1

                for corners in (
                    (current_bottom, next_top, current_top),
                    (current_bottom, next_bottom, next_top),
                ):
                    self.faces.append(TriangleFace(corners, corners, corners))