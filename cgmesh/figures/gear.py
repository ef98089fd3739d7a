"""A toothed ring gear with a hollow centre."""

from __future__ import annotations

import math

from ..triangle_face import TriangleFace
from ..wavefront import WavefrontOBJ


class Gear(WavefrontOBJ):
    """A gear of ``teeth`` teeth standing on the XZ plane along +Y.

    The outer wall has radius ``major_radius``, raised by ``tooth_height``
    on the teeth; the inner hole has radius ``minor_radius``. The walls are
    split into ``stacks`` along the height. Only positions are generated.
    """

    def __init__(
        self,
        major_radius: float,
        minor_radius: float,
        tooth_height: float,
        height: float,
        teeth: int,
        stacks: int,
    ) -> None:
        super().__init__(
            comment=(
                f"gear {major_radius:f} {minor_radius:f} {tooth_height:f} "
                f"{height:f} {teeth} {stacks}"
            )
        )

        slices = 4 * teeth
        slice_step = math.tau / slices
        stack_step = height / stacks
        row = slices + 1

        # Outer wall
        for i in range(stacks + 1):
            y = i * stack_step
            for j in range(row):
                phi = j * slice_step
                radius = major_radius + (tooth_height if j % 4 in (0, 1) else 0.0)
                self.positions.append((radius * math.cos(phi), y, radius * math.sin(phi), 1.0))

        # Inner wall
        for i in range(stacks + 1):
            y = i * stack_step
            for j in range(row):
                phi = j * slice_step
                self.positions.append(
                    (minor_radius * math.cos(phi), y, minor_radius * math.sin(phi), 1.0)
                )

        for i in range(stacks):
            for j in range(slices):
                current_bottom = i * row + j
                next_bottom = current_bottom + 1
                current_top = current_bottom + row
                next_top = current_top + 1
                self._add(next_top, next_bottom, current_bottom)
                self._add(next_top, current_bottom, current_top)

        inner_offset = (stacks + 1) * row
        for i in range(stacks):
            for j in range(slices):
                current_bottom = inner_offset + i * row + j
                next_bottom = current_bottom + 1
                current_top = current_bottom + row
                next_top = current_top + 1
                self._add(next_top, current_bottom, next_bottom)
                self._add(next_top, current_top, current_bottom)

        for j in range(slices):
            bottom_outer = j
            bottom_inner = inner_offset + bottom_outer
            self._add(bottom_outer, bottom_inner + 1, bottom_inner)
            self._add(bottom_outer, bottom_outer + 1, bottom_inner + 1)

            top_outer = j + stacks * row
            top_inner = inner_offset + top_outer
            self._add(top_outer, top_inner, top_inner + 1)
            self._add(top_outer, top_inner + 1, top_outer + 1)

    def _add(self, p1: int, p2: int, p3: int) -> None:
        self.faces.append(TriangleFace.from_positions(p1, p2, p3))