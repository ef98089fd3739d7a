"""Triangle faces that index into the attribute lists of a mesh."""

from __future__ import annotations

from dataclasses import dataclass

Triple = tuple[int, int, int]

_NO_INDICES: Triple = (-1, -1, -1)


@dataclass(frozen=True)
class TriangleFace:
    """A triangle given by 0-based indices into positions, texture coordinates and normals.

    A face that only references positions stores -1 for every texture
    coordinate and normal index.
    """

    positions: Triple
    texture_coordinates: Triple = _NO_INDICES
    normals: Triple = _NO_INDICES

    @classmethod
    def from_positions(cls, p1: int, p2: int, p3: int) -> TriangleFace:
        """Build a face that references positions only."""
        return cls((p1, p2, p3), _NO_INDICES, _NO_INDICES)

    def has_texture(self) -> bool:
        """Whether every corner of the face references a texture coordinate."""
        return all(index >= 0 for index in self.texture_coordinates)