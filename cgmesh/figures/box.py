"""An axis-aligned cube built from six subdivided faces."""

from __future__ import annotations

from ..triangle_face import TriangleFace
from ..wavefront import WavefrontOBJ

_X = (1.0, 0.0, 0.0)
_Y = (0.0, 1.0, 0.0)
_Z = (0.0, 0.0, 1.0)

# (i direction, j direction) for front, back, right, left, top, bottom.
_FACE_AXES = [(_X, _Y), (_X, _Y), (_Y, _Z), (_Y, _Z), (_Z, _X), (_Z, _X)]

# Where each face starts in a cross-shaped multi-texture atlas.
_ATLAS_STARTS = [
    (0.25, 1.0 / 3.0),
    (0.75, 1.0 / 3.0),
    (0.5, 1.0 / 3.0),
    (0.0, 1.0 / 3.0),
    (0.25, 2.0 / 3.0),
    (0.25, 0.0),
]


class Box(WavefrontOBJ):
    """A cube of side ``size`` centred on the origin.

    Every face is split into ``divisions`` by ``divisions`` cells. With
    ``multi_textured`` the faces map onto distinct regions of a single
    texture laid out as an unfolded cube; otherwise all faces share one
    texture.
    """

    def __init__(self, size: float, divisions: int, multi_textured: bool = False) -> None:
        suffix = " multi-textured" if multi_textured else ""
        super().__init__(comment=f"box {size:f} {divisions}{suffix}")

        position_step = size / divisions
        position_half = size / 2.0

        if multi_textured:
            texture_step_x = 1.0 / (4 * divisions)
            texture_step_y = 1.0 / (3 * divisions)
        else:
            texture_step_x = texture_step_y = 1.0 / divisions

        row = divisions + 1
        for face, (ivec, jvec) in enumerate(_FACE_AXES):
            positive_face = face % 2 == 1
            multiplier = 1.0 if positive_face else -1.0

            face_normal = tuple(1.0 - a - b for a, b in zip(ivec, jvec))
            self.normals.append(tuple(c * -multiplier for c in face_normal))
            normal_index = len(self.normals) - 1

            position_start = tuple(
                (a + b + n * multiplier) * -position_half
                for a, b, n in zip(ivec, jvec, face_normal)
            )
            texture_start = _ATLAS_STARTS[face] if multi_textured else (0.0, 0.0)

            for i in range(row):
                for j in range(row):
                    self.positions.append(
                        (
                            *(
                                s + a * (i * position_step) + b * (j * position_step)
                                for s, a, b in zip(position_start, ivec, jvec)
                            ),
                            1.0,
                        )
                    )
                    if multi_textured or face == 0:
                        self.texture_coordinates.append(
                            (
                                texture_start[0] + texture_step_x * i,
                                texture_start[1] + texture_step_y * j,
                            )
                        )

            face_offset = face * row * row
            for i in range(divisions):
                for j in range(divisions):
                    current_bottom = face_offset + i * row + j
                    current_top = current_bottom + row
                    next_bottom = current_bottom + 1
                    next_top = current_top + 1

                    modulus = len(self.texture_coordinates) if multi_textured else row * row

                    if positive_face:
                        triangles = [
                            (next_bottom, current_top, current_bottom),
                            (next_bottom, next_top, current_top),
                        ]
                    else:
                        triangles = [
                            (next_bottom, current_bottom, current_top),
                            (next_top, next_bottom, current_top),
                        ]

                    for corners in triangles:
                        self.faces.append(
                            TriangleFace(
                                corners,
                                tuple(c % modulus for c in corners),
                                (normal_index, normal_index, normal_index),
                            )
                        )