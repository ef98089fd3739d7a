"""Tessellation of bicubic Bezier patch files into triangle meshes."""

from __future__ import annotations

import math
import re

from .triangle_face import TriangleFace
from .wavefront import PathLike, WavefrontOBJ

Vec3 = tuple[float, float, float]

_WHITESPACE = " \t\n\r"
_UNSIGNED = re.compile(r"\+?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT_MAX = 2**31 - 1
_POINTS_PER_PATCH = 16

# Rows of the cubic Bernstein basis matrix (it is symmetric).
_BASIS = (
    (-1.0, 3.0, -3.0, 1.0),
    (3.0, -6.0, 3.0, 0.0),
    (-3.0, 3.0, 0.0, 0.0),
    (1.0, 0.0, 0.0, 0.0),
)


def _parse_unsigned(text: str) -> int:
    text = text.strip(_WHITESPACE)
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"not an unsigned integer: {text!r}")
    value = int(text)
    if value > _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    text = text.strip(_WHITESPACE)
    if not _FLOAT.fullmatch(text):
        raise ValueError(f"not a floating-point number: {text!r}")
    return float(text)


def _parse_vector(text: str) -> Vec3:
    parts = text.split(",")
    if len(parts) != 3:
        raise ValueError(f"not a vector: {text!r}")
    x, y, z = (_parse_float(part) for part in parts)
    return (x, y, z)


def _parse_indices(text: str) -> list[int]:
    return [_parse_unsigned(part) for part in text.split(",")]


def parse_patch_text(
    text: str, filename: str = "<string>"
) -> tuple[list[list[int]], list[Vec3]]:
    """Parse patch file text into patch index lists and control points.

    The format is a patch count, one line of 16 comma-separated indices per
    patch, a point count, then one ``x, y, z`` line per point. Blank lines
    may only follow the points. Raises ValueError naming the failing line.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()

    patches: list[list[int]] = []
    points: list[Vec3] = []
    num_patches: int | None = None
    num_points: int | None = None
    remaining_patches = remaining_points = 0

    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip(_WHITESPACE)
        try:
            if num_patches is None:
                num_patches = remaining_patches = _parse_unsigned(line)
            elif remaining_patches > 0:
                indices = _parse_indices(line)
                if len(indices) != _POINTS_PER_PATCH:
                    raise ValueError("a patch needs exactly 16 indices")
                patches.append(indices)
                remaining_patches -= 1
            elif num_points is None:
                num_points = remaining_points = _parse_unsigned(line)
            elif remaining_points > 0:
                points.append(_parse_vector(line))
                remaining_points -= 1
            elif line:
                raise ValueError("unexpected content after the last point")
        except ValueError as error:
            raise ValueError(
                f"Failed to parse patch file {filename}: line {line_number}"
            ) from error

    if any(index >= len(points) for patch in patches for index in patch):
        raise ValueError(f"Invalid point index in patch file: {filename}")
    return patches, points


def _basis(weights: tuple[float, float, float, float]) -> tuple[float, ...]:
    return tuple(sum(b * w for b, w in zip(row, weights)) for row in _BASIS)


def _powers(t: float) -> tuple[float, float, float, float]:
    return (t**3, t**2, t, 1.0)


def _derivative_powers(t: float) -> tuple[float, float, float, float]:
    return (3 * t**2, 2 * t, 1.0, 0.0)


def _surface(control: list[Vec3], bu: tuple[float, ...], bv: tuple[float, ...]) -> Vec3:
    x = y = z = 0.0
    for c, wu in enumerate(bu):
        for r, wv in enumerate(bv):
            px, py, pz = control[4 * c + r]
            weight = wu * wv
            x += weight * px
            y += weight * py
            z += weight * pz
    return (x, y, z)


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(v: Vec3) -> Vec3:
    length = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    if length == 0.0 or math.isnan(length):
        return (math.nan, math.nan, math.nan)
    return (v[0] / length, v[1] / length, v[2] / length)


class BezierPatch(WavefrontOBJ):
    """A mesh tessellated from the bicubic Bezier patches in a patch file.

    Every patch is sampled on a ``tessellation`` by ``tessellation`` grid of
    cells, each made of two triangles.
    """

    def __init__(self, filename: PathLike, tessellation: int) -> None:
        super().__init__(comment=f"patch {filename} {tessellation}")

        try:
            with open(filename, encoding="utf-8") as file:
                text = file.read()
        except OSError as error:
            raise OSError(f"Failed to open patch file: {filename}") from error

        patches, points = parse_patch_text(text, str(filename))
        step = 1.0 / tessellation
        row = tessellation + 1

        for patch in patches:
            offset = len(self.positions)
            control = [points[index] for index in patch]

            for i in range(row):
                u = i * step
                adapted_u = u if u != 0.0 else 0.001
                for j in range(row):
                    v = j * step
                    adapted_v = v if v != 0.0 else 0.001

                    position = _surface(control, _basis(_powers(u)), _basis(_powers(v)))
                    du = _surface(
                        control,
                        _basis(_derivative_powers(adapted_u)),
                        _basis(_powers(adapted_v)),
                    )
                    dv = _surface(
                        control,
                        _basis(_powers(adapted_u)),
                        _basis(_derivative_powers(adapted_v)),
                    )

                    self.positions.append((*position, 1.0))
                    self.normals.append(_normalize(_cross(dv, du)))
                    self.texture_coordinates.append((u, v))

            for i in range(tessellation):
                for j in range(tessellation):
                    current_bottom = offset + i * row + j
                    current_top = current_bottom + row
                    next_bottom = current_bottom + 1
                    next_top = current_top + 1

                    for corners in (
                        (current_bottom, next_bottom, current_top),
                        (next_bottom, next_top, current_top),
                    ):
                        self.faces.append(TriangleFace(corners, corners, corners))