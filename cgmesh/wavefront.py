"""Reading, writing and indexing of triangle meshes in Wavefront OBJ form."""

from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from .triangle_face import TriangleFace

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]
PathLike = Union[str, "os.PathLike[str]"]

_NUMBER = r"((?:-|\+)?[0-9]+(?:\.[0-9]+)?(?:e(?:-|\+)?[0-9]+)?)"
_INDEX = r"([0-9]+)"
_CORNER = _INDEX + "/" + _INDEX + "/" + _INDEX

_LINE = re.compile(
    r"\s*"
    "|"
    r"#.*"
    "|"
    r"v\s+" + _NUMBER + r"\s+" + _NUMBER + r"\s+" + _NUMBER
    + r"(\s+(?:-|\+)?[0-9]+(?:\.[0-9]+)?(?:e[0-9]+)?)?\s*"
    "|"
    r"vt\s+" + _NUMBER + r"\s+" + _NUMBER + r"\s*"
    "|"
    r"vn\s+" + _NUMBER + r"\s+" + _NUMBER + r"\s+" + _NUMBER + r"\s*"
    "|"
    r"f\s+" + _INDEX + r"\s+" + _INDEX + r"\s+" + _INDEX + r"\s*"
    "|"
    r"f\s+" + _CORNER + r"\s+" + _CORNER + r"\s+" + _CORNER + r"\s*"
)


def _sub(a, b) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _length(v: Vec3) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def _normalize(v: Vec3) -> Vec3:
    length = _length(v)
    if length == 0.0 or math.isnan(length):
        return (math.nan, math.nan, math.nan)
    return (v[0] / length, v[1] / length, v[2] / length)


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass
class WavefrontOBJ:
    """A triangle mesh: positions, texture coordinates, normals and faces."""

    comment: str = ""
    positions: list[Vec4] = field(default_factory=list)
    texture_coordinates: list[Vec2] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)
    faces: list[TriangleFace] = field(default_factory=list)

    @classmethod
    def from_file(cls, filename: PathLike) -> WavefrontOBJ:
        """Load a mesh from an OBJ file."""
        try:
            with open(filename, encoding="utf-8") as file:
                text = file.read()
        except OSError as error:
            raise OSError(f"Failed to open OBJ file: {filename}") from error
        return cls.parse(text, str(filename))

    @classmethod
    def parse(cls, text: str, filename: str = "<string>") -> WavefrontOBJ:
        """Parse OBJ text; ``filename`` is only used in error messages."""
        mesh = cls()
        complete_faces: bool | None = None

        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()

        for line_number, line in enumerate(lines, start=1):
            match = _LINE.fullmatch(line)
            if match is None:
                raise ValueError(f"Failed to parse OBJ file {filename}: line {line_number}")
            groups = match.groups()

            if groups[0]:
                w = float(groups[3]) if groups[3] else 1.0
                mesh.positions.append((float(groups[0]), float(groups[1]), float(groups[2]), w))
            elif groups[4]:
                mesh.texture_coordinates.append((float(groups[4]), float(groups[5])))
            elif groups[6]:
                if complete_faces is True:
                    raise ValueError(f"Can't mix face types in OBJ file: {filename}")
                mesh.normals.append((float(groups[6]), float(groups[7]), float(groups[8])))
                complete_faces = False
            elif groups[9]:
                if complete_faces is False:
                    raise ValueError(f"Can't mix face types in OBJ file: {filename}")
                p1, p2, p3 = (int(g) - 1 for g in groups[9:12])
                mesh.faces.append(TriangleFace.from_positions(p1, p2, p3))
                complete_faces = True
            elif groups[12]:
                p1, t1, n1, p2, t2, n2, p3, t3, n3 = (int(g) - 1 for g in groups[12:21])
                mesh.faces.append(TriangleFace((p1, p2, p3), (t1, t2, t3), (n1, n2, n3)))

        mesh._validate_indices(filename)

        if any(
            index < 0 for face in mesh.faces for index in face.texture_coordinates
        ):
            mesh._generate_normals()
        return mesh

    def _validate_indices(self, filename: str) -> None:
        for face in self.faces:
            if any(i >= len(self.positions) for i in face.positions):
                raise ValueError(f"Invalid position indices in OBJ file: {filename}")
            if any(i >= len(self.texture_coordinates) for i in face.texture_coordinates):
                raise ValueError(f"Invalid texture coordinate indices in OBJ file: {filename}")
            if any(i >= len(self.normals) for i in face.normals):
                raise ValueError(f"Invalid normal indices in OBJ file: {filename}")

    def _generate_normals(self) -> None:
        """Append one area-weighted average normal per position."""
        sums: dict[Vec4, Vec3] = {}
        for face in self.faces:
            p0, p1, p2 = (self.positions[i] for i in face.positions)
            v0 = _sub(p1, p0)
            v1 = _sub(p2, p0)
            v2 = _sub(p2, p1)

            a, b, c = _length(v0), _length(v1), _length(v2)
            s = 0.5 * (a + b + c)
            product = s * (s - a) * (s - b) * (s - c)
            area = math.sqrt(product) if product >= 0 else math.nan

            direction = _normalize(_cross(v0, v1))
            weighted = (direction[0] * area, direction[1] * area, direction[2] * area)
            for point in (p0, p1, p2):
                sums[point] = _add(sums.get(point, (0.0, 0.0, 0.0)), weighted)

        self.normals.extend(
            _normalize(sums.get(position, (0.0, 0.0, 0.0))) for position in self.positions
        )

    def to_text(self) -> str:
        """Render the mesh as OBJ text with 1-based indices."""
        lines: list[str] = []
        if self.comment:
            lines.append(f"# {self.comment}")

        for x, y, z, w in self.positions:
            line = f"v {_fmt(x)} {_fmt(y)} {_fmt(z)}"
            if w != 1.0:
                line += f" {_fmt(w)}"
            lines.append(line)

        lines.extend(f"vt {_fmt(u)} {_fmt(v)}" for u, v in self.texture_coordinates)
        lines.extend(f"vn {_fmt(x)} {_fmt(y)} {_fmt(z)}" for x, y, z in self.normals)

        for face in self.faces:
            if face.texture_coordinates[0] == -1:
                lines.append("f " + " ".join(str(p + 1) for p in face.positions))
            else:
                corners = zip(face.positions, face.texture_coordinates, face.normals)
                lines.append(
                    "f " + " ".join(f"{p + 1}/{t + 1}/{n + 1}" for p, t, n in corners)
                )

        return "".join(line + "\n" for line in lines)

    def write_to_file(self, filename: PathLike) -> None:
        """Write the mesh to an OBJ file, replacing any existing content."""
        Path(filename).write_text(self.to_text(), encoding="utf-8")

    def indexed_vertices(
        self,
    ) -> tuple[list[Vec4], list[Vec2], list[Vec4], list[int]]:
        """Flatten faces into unique vertices and an index list.

        Returns positions, texture coordinates, normals padded with a zero
        fourth component, and the indices of every face corner.
        """
        added: dict[tuple[Vec4, Vec2, Vec3], int] = {}
        out_positions: list[Vec4] = []
        out_texture_coordinates: list[Vec2] = []
        out_normals: list[Vec4] = []
        indices: list[int] = []

        for face in self.faces:
            for position_index, texture_index, normal_index in zip(
                face.positions, face.texture_coordinates, face.normals
            ):
                position = self.positions[position_index]
                if texture_index >= 0:
                    texture_coordinate = self.texture_coordinates[texture_index]
                    normal = self.normals[normal_index]
                else:
                    texture_coordinate = (0.0, 0.0)
                    normal = self.normals[position_index]

                key = (position, texture_coordinate, normal)
                buffer_index = added.get(key)
                if buffer_index is None:
                    out_positions.append(position)
                    out_texture_coordinates.append(texture_coordinate)
                    out_normals.append((normal[0], normal[1], normal[2], 0.0))
                    buffer_index = len(out_positions) - 1
                    added[key] = buffer_index
                indices.append(buffer_index)

        return out_positions, out_texture_coordinates, out_normals, indices