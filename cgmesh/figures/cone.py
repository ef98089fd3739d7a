"""A cone standing on the XZ plane with its apex on the +Y axis."""

from __future__ import annotations

import math

from ..triangle_face import TriangleFace
from ..wavefront import WavefrontOBJ


def _normalize(v: tuple[float, float, float]) -> tuple[float, float, float]:
    length = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    return (v[0] / length, v[1] / length, v[2] / length)


class Cone(WavefrontOBJ):
    """A cone with base ``radius`` and ``height``.

    The base disc sits at y = 0 and the side is split into ``slices``
    around the axis and ``stacks`` along it.
    """

    def __init__(self, radius: float, height: float, slices: int, stacks: int) -> None:
        super().__init__(comment=f"cone {radius:f} {height:f} {slices} {stacks}")

        stack_step = height / stacks
        slice_step = math.tau / slices
        row = slices + 1

        # Base disc
        self.positions.append((0.0, 0.0, 0.0, 1.0))
        self.texture_coordinates.append((0.5, 0.5))
        self.normals.append((0.0, -1.0, 0.0))
        for j in range(row):
            angle = j * slice_step
            self.positions.append((radius * math.cos(angle), 0.0, radius * math.sin(angle), 1.0))
            self.texture_coordinates.append(
                (0.5 + 0.5 * math.cos(angle), 0.5 + 0.5 * math.sin(angle))
            )

        # Side stacks
        for i in range(stacks + 1):
            y = i * stack_step
            stack_radius = ((height - y) * radius) / height
            t = i / stacks
            for j in range(row):
                angle = j * slice_step
                self.positions.append(
                    (stack_radius * math.cos(angle), y, stack_radius * math.sin(angle), 1.0)
                )
                self.texture_coordinates.append((j / slices, t))

        # Side normals
        for j in range(slices):
            angle = j * slice_step
            self.normals.append(_normalize((math.cos(angle), radius / height, math.sin(angle))))

        for j in range(slices):
            corners = (0, j + 1, j + 2)
            self.faces.append(TriangleFace(corners, corners, (0, 0, 0)))

        for i in range(stacks):
            for j in range(slices):
                current_bottom = i * row + j + slices + 2
                next_bottom = current_bottom + 1
                current_top = current_bottom + row
                next_top = current_top + 1

                current_normal = j % slices + 1
                next_normal = (j + 1) % slices + 1

                first = (current_bottom, current_top, next_top)
                second = (current_bottom, next_top, next_bottom)
                self.faces.append(
                    TriangleFace(first, first, (current_normal, current_normal, next_normal))
                )
                self.faces.append(
                    TriangleFace(second, second, (current_normal, next_normal, next_normal))
                )