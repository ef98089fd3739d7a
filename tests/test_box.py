import math

import pytest

from cgmesh.figures.box import Box
from cgmesh.wavefront import WavefrontOBJ


def _geometric_normal(mesh, face):
    p0, p1, p2 = (mesh.positions[i] for i in face.positions)
    v0 = (p1[0] - p0[0], p1[1] - p0[1], p1[2] - p0[2])
    v1 = (p2[0] - p0[0], p2[1] - p0[1], p2[2] - p0[2])
    return (
        v0[1] * v1[2] - v0[2] * v1[1],
        v0[2] * v1[0] - v0[0] * v1[2],
        v0[0] * v1[1] - v0[1] * v1[0],
    )


def _dot(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def test_comments():
    assert Box(2.0, 3).comment == "box 2.000000 3"
    assert Box(2.0, 3, True).comment == "box 2.000000 3 multi-textured"


@pytest.mark.parametrize("divisions", [1, 2, 3])
def test_counts_single_texture(divisions):
    box = Box(1.0, divisions)
    per_face = (divisions + 1) ** 2
    assert len(box.positions) == 6 * per_face
    assert len(box.texture_coordinates) == per_face
    assert len(box.normals) == 6
    assert len(box.faces) == 12 * divisions**2


def test_counts_multi_textured():
    box = Box(1.0, 2, multi_textured=True)
    assert len(box.texture_coordinates) == len(box.positions)


def test_normals_are_unit_axes():
    box = Box(1.0, 1)
    for normal in box.normals:
        assert sorted(abs(c) for c in normal) == [0.0, 0.0, 1.0]
    assert box.normals[0] == (0.0, 0.0, 1.0)
    assert len({tuple(abs(c) + 0.0 for c in n) for n in box.normals}) == 3


def test_vertices_lie_on_their_face_plane():
    size = 2.0
    box = Box(size, 3)
    for face in box.faces:
        normal = box.normals[face.normals[0]]
        for index in face.positions:
            assert _dot(box.positions[index][:3], normal) == pytest.approx(size / 2)


def test_winding_matches_stored_normal():
    box = Box(1.5, 2)
    for face in box.faces:
        normal = box.normals[face.normals[0]]
        assert _dot(_geometric_normal(box, face), normal) > 0


def test_positions_within_cube():
    box = Box(4.0, 2)
    for x, y, z, w in box.positions:
        assert w == 1.0
        assert max(abs(x), abs(y), abs(z)) == pytest.approx(2.0)


def test_single_texture_indices_wrap_per_face():
    divisions = 2
    box = Box(1.0, divisions)
    per_face = (divisions + 1) ** 2
    for face in box.faces:
        assert face.texture_coordinates == tuple(p % per_face for p in face.positions)


def test_multi_textured_coordinates_inside_atlas():
    box = Box(1.0, 3, multi_textured=True)
    for face in box.faces:
        assert face.texture_coordinates == face.positions
    for u, v in box.texture_coordinates:
        assert -1e-9 <= u <= 1.0 + 1e-9
        assert -1e-9 <= v <= 1.0 + 1e-9


def test_text_round_trip():
    box = Box(1.0, 2, True)
    parsed = WavefrontOBJ.parse(box.to_text())
    assert parsed.faces == box.faces
    assert len(parsed.normals) == len(box.normals)
    for a, b in zip(parsed.positions, box.positions):
        assert all(math.isclose(x, y, abs_tol=1e-6) for x, y in zip(a, b))