"""A closed cylinder standing on the XZ plane along the +Y axis."""

from __future__ import annotations

import math

from ..triangle_face import TriangleFace
from ..wavefront import WavefrontOBJ

# Centres of the bottom and top caps in a multi-texture atlas.
_ATLAS_BOTTOM_CENTER = (0.8125, 0.1875)
_ATLAS_TOP_CENTER = (0.4375, 0.1875)
_ATLAS_CAP_SCALE = 0.35
_ATLAS_SIDE_START = 0.375


def _normalize(v: tuple[float, float, float]) -> tuple[float, float, float]:
    length = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    if length == 0.0:
        return (math.nan, math.nan, math.nan)
    return (v[0] / length, v[1] / length, v[2] / length)


class Cylinder(WavefrontOBJ):
    """A cylinder of ``radius`` and ``height`` with both caps closed.

    The side is split into ``slices`` around the axis and ``stacks`` along
    it. With ``multi_textured`` the caps and the side map onto separate
    regions of a single texture.
    """

    def __init__(
        self,
        radius: float,
        height: float,
        slices: int,
        stacks: int,
        multi_textured: bool = False,
    ) -> None:
        suffix = " multi-textured" if multi_textured else ""
        super().__init__(comment=f"cylinder {radius:f} {height:f} {slices} {stacks}{suffix}")

        slice_step = math.tau / slices
        stack_step = height / stacks
        row = slices + 1

        if multi_textured:
            bottom_center, top_center = _ATLAS_BOTTOM_CENTER, _ATLAS_TOP_CENTER
            cap_scale = _ATLAS_CAP_SCALE
        else:
            bottom_center = top_center = (0.5, 0.5)
            cap_scale = 1.0

        # Bottom cap
        bottom_index = self._add_cap(
            radius, 0.0, -1.0, slices, slice_step, bottom_center, cap_scale
        )
        for j in range(slices):
            corners = (bottom_index, bottom_index + j + 1, bottom_index + j + 2)
            self.faces.append(TriangleFace(corners, corners, corners))

        # Side
        offset = len(self.positions)
        for i in range(stacks + 1):
            y = i * stack_step
            fraction = i / stacks
            if multi_textured:
                t = _ATLAS_SIDE_START + fraction * (1.0 - _ATLAS_SIDE_START)
            else:
                t = fraction

            for j in range(row):
                phi = j * slice_step
                x = radius * math.cos(phi)
                z = radius * math.sin(phi)
                self.positions.append((x, y, z, 1.0))
                self.normals.append(_normalize((x, 0.0, z)))
                self.texture_coordinates.append((1.0 - j / slices, t))

        for i in range(stacks):
            for j in range(slices):
                current_bottom = offset + i * row + j
                next_bottom = current_bottom + 1
                current_top = current_bottom + row
                next_top = current_top + 1

                for corners in (
                    (current_bottom, current_top, next_top),
                    (current_bottom, next_top, next_bottom),
                ):
                    self.faces.append(TriangleFace(corners, corners, corners))

        # Top cap
        top_index = self._add_cap(
            radius, height, 1.0, slices, slice_step, top_center, cap_scale
        )
        for j in range(slices):
            current = top_index + j + 1
            corners = (current, top_index, current + 1)
            self.faces.append(TriangleFace(corners, corners, corners))

    def _add_cap(
        self,
        radius: float,
        y: float,
        normal_y: float,
        slices: int,
        slice_step: float,
        texture_center: tuple[float, float],
        texture_scale: float,
    ) -> int:
        """Append a cap's centre and rim vertices; return the centre's index."""
        center_index = len(self.positions)
        normal = (0.0, normal_y, 0.0)

        self.positions.append((0.0, y, 0.0, 1.0))
        self.normals.append(normal)
        self.texture_coordinates.append(texture_center)

        for j in range(slices + 1):
            angle = j * slice_step
            x = radius * math.cos(angle)
            z = radius * math.sin(angle)
            self.positions.append((x, y, z, 1.0))
            self.normals.append(normal)
            self.texture_coordinates.append(
                (
                    (x / (2 * radius)) * texture_scale + texture_center[0],
                    (z / (2 * radius)) * texture_scale + texture_center[1],
                )
            )
        return center_index