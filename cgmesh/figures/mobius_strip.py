"""A twisted band around the Y axis."""

from __future__ import annotations

import math

from ..triangle_face import TriangleFace
from ..wavefront import WavefrontOBJ


class MobiusStrip(WavefrontOBJ):
    """A band of ``width`` wound around a circle of ``radius``.

    The band turns ``twists`` full times as it goes around once, is
    sampled on a ``slices`` by ``stacks`` grid, and every cell is emitted
    with both windings so it is visible from either side. Only positions
    are generated.
    """

    def __init__(
        self, radius: float, width: float, twists: int, slices: int, stacks: int
    ) -> None:
        super().__init__(
            comment=f"mobiusStrip {radius:f} {width:f} {twists} {slices} {stacks}"
        )

        slice_step = math.tau / slices
        stack_step = math.tau / stacks
        half_width = width / 2.0
        half_turns = twists * 2

        for i in range(slices + 1):
            t = i * slice_step
            cos_t = math.cos(t)
            sin_t = math.sin(t)
            twist_angle = half_turns * t / 2.0
            cos_twist = math.cos(twist_angle)
            sin_twist = math.sin(twist_angle)

            for j in range(stacks + 1):
                v = j * stack_step - 1.0
                ring = radius + v * half_width * cos_twist
                self.positions.append(
                    (ring * cos_t, v * half_width * sin_twist, ring * sin_t, 1.0)
                )

        row = stacks + 1
        for i in range(slices):
            for j in range(stacks):
                current_bottom = i * row + j
                next_bottom = current_bottom + 1
                current_top = current_bottom + row
                next_top = current_top + 1

                for corners in (
                    (current_bottom, current_top, next_bottom),
                    (current_top, current_bottom, next_bottom),
                    (next_bottom, current_top, next_top),
                    (current_top, next_bottom, next_top),
                ):
                    self.faces.append(TriangleFace.from_positions(*corners))