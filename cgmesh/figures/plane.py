"""A flat square grid lying on the XZ plane."""

from __future__ import annotations

from ..triangle_face import TriangleFace
from ..wavefront import WavefrontOBJ


class Plane(WavefrontOBJ):
    """A square of side ``size`` centred on the origin, facing +Y.

    The square is split into ``divisions`` by ``divisions`` cells, each made
    of two triangles. All faces share a single normal.
    """

    def __init__(self, size: float, divisions: int) -> None:
        super().__init__(comment=f"plane {size:f} {divisions}")

        position_step = size / divisions
        position_start = size / 2.0
        texture_step = 1.0 / divisions

        self.normals.append((0.0, 1.0, 0.0))

        row = divisions + 1
        for i in range(row):
            for j in range(row):
                self.positions.append(
                    (
                        i * position_step - position_start,
                        0.0,
                        j * position_step - position_start,
                        1.0,
                    )
                )
                self.texture_coordinates.append((j * texture_step, i * texture_step))

        for i in range(divisions):
            for j in range(divisions):
                current_bottom = i * row + j
                current_top = current_bottom + row
                next_bottom = current_bottom + 1
                next_top = current_top + 1

                first = (current_bottom, next_bottom, current_top)
                second = (next_bottom, next_top, current_top)
                self.faces.append(TriangleFace(first, first, (0, 0, 0)))
                self.faces.append(TriangleFace(second, second, (0, 0, 0)))