"""A UV sphere centred on the origin."""

from __future__ import annotations

import math

from ..triangle_face import TriangleFace
from ..wavefront import WavefrontOBJ


def _normalize(v: tuple[float, float, float]) -> tuple[float, float, float]:
    length = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    if length == 0.0:
        return (math.nan, math.nan, math.nan)
    return (v[0] / length, v[1] / length, v[2] / length)


class Sphere(WavefrontOBJ):
    """A sphere of ``radius`` split into ``slices`` around Y and ``stacks`` along it.

    Each pole is a single position with one texture coordinate per slice,
    so that the texture does not pinch into a single point.
    """

    def __init__(self, radius: float, slices: int, stacks: int) -> None:
        super().__init__(comment=f"sphere {radius:f} {slices} {stacks}")

        stack_step = math.pi / stacks
        slice_step = math.tau / slices
        texture_slice_step = 1.0 / slices
        row = slices + 1

        # North pole
        self.positions.append((0.0, radius, 0.0, 1.0))
        self.normals.append((0.0, 1.0, 0.0))
        self.texture_coordinates.extend(
            (j * texture_slice_step + texture_slice_step / 2, 1.0) for j in range(slices)
        )

        # Rings between the poles
        for i in range(1, stacks):
            theta = i * stack_step
            y = radius * math.cos(theta)
            xz = radius * math.sin(theta)
            t = 1.0 - i / stacks

            for j in range(row):
                phi = j * slice_step
                x = xz * math.sin(phi)
                z = xz * math.cos(phi)
                self.positions.append((x, y, z, 1.0))
                self.normals.append(_normalize((x, y, z)))
                self.texture_coordinates.append((j / slices, t))

        # South pole
        south = len(self.positions)
        self.positions.append((0.0, -radius, 0.0, 1.0))
        self.normals.append((0.0, -1.0, 0.0))
        self.texture_coordinates.extend(
            (j * texture_slice_step + texture_slice_step / 2, 0.0) for j in range(slices)
        )

        for j in range(slices):
            self.faces.append(
                TriangleFace(
                    (0, j + 1, j + 2),
                    (j, j + slices, j + slices + 1),
                    (0, j + 1, j + 2),
                )
            )

        for i in range(stacks - 2):
            for j in range(slices):
                current_top = 1 + i * row + j
                next_top = current_top + 1
                current_bottom = current_top + row
                next_bottom = current_bottom + 1

                for corners in (
                    (current_top, current_bottom, next_bottom),
                    (current_top, next_bottom, next_top),
                ):
                    self.faces.append(
                        TriangleFace(
                            corners,
                            tuple(c + slices - 1 for c in corners),
                            corners,
                        )
                    )

        bottom_stack_start = south - slices - 1
        for j in range(slices):
            current = bottom_stack_start + j
            following = current + 1
            corners = (south, following, current)
            self.faces.append(
                TriangleFace(corners, tuple(c + slices for c in corners), corners)
            )