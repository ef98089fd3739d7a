"""A Klein bottle surface built from a parametric equation."""

from __future__ import annotations

import math

from ..triangle_face import TriangleFace
from ..wavefront import WavefrontOBJ


def _point(radius: float, theta: float, phi: float) -> tuple[float, float, float, float]:
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    cos_p = math.cos(phi)
    sin_p = math.sin(phi)

    c2, c3, c4, c5, c6, c7 = (cos_t**n for n in range(2, 8))

    x = (
        radius
        * (-2.0 / 15.0)
        * cos_t
        * (
            3 * cos_p
            - 30 * sin_t
            + 90 * c4 * sin_t
            - 60 * c6 * sin_t
            + 5 * cos_t * cos_p * sin_t
        )
    )
    y = (
        radius
        * (-1.0 / 15.0)
        * sin_t
        * (
            3 * cos_p
            - 3 * c2 * cos_p
            - 48 * c4 * cos_p
            + 48 * c6 * cos_p
            - 60 * sin_t
            + 5 * cos_t * cos_p * sin_t
            - 5 * c3 * cos_p * sin_t
            - 80 * c5 * cos_p * sin_t
            + 80 * c7 * cos_p * sin_t
        )
    )
    z = radius * (2.0 / 15.0) * (3 + 5 * cos_t * sin_t) * sin_p
    return (x, y, z, 1.0)


class KleinBottle(WavefrontOBJ):
    """A Klein bottle scaled by ``radius``.

    The surface is sampled on a ``stacks`` by ``slices`` grid. Only
    positions are generated.
    """

    def __init__(self, radius: float, slices: int, stacks: int) -> None:
        super().__init__(comment=f"kleinBottle {radius:f} {slices} {stacks}")

        stack_step = math.pi / stacks
        slice_step = math.tau / slices
        row = slices + 1

        self.positions.extend(
            _point(radius, i * stack_step, j * slice_step)
            for i in range(stacks + 1)
            for j in range(row)
        )

        for i in range(stacks):
            for j in range(slices):
                current_top = i * row + j
                next_top = current_top + 1
                current_bottom = current_top + row
                next_bottom = current_bottom + 1
                self.faces.append(
                    TriangleFace.from_positions(current_top, next_bottom, current_bottom)
                )
                self.faces.append(
                    TriangleFace.from_positions(current_top, next_top, next_bottom)
                )