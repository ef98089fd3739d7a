import math

import pytest

from cgmesh.figures.cylinder import Cylinder
from cgmesh.wavefront import WavefrontOBJ


def _flatten(vectors):
    return [c for v in vectors for c in v]


def test_comment_records_parameters():
    assert Cylinder(1.0, 2.0, 8, 3).comment == "cylinder 1.000000 2.000000 8 3"
    assert Cylinder(1.0, 2.0, 8, 3, True).comment.endswith(" multi-textured")


def test_attribute_lists_are_parallel():
    cylinder = Cylinder(1.5, 3.0, 7, 4)
    assert len(cylinder.positions) == len(cylinder.normals)
    assert len(cylinder.positions) == len(cylinder.texture_coordinates)


def test_face_indices_are_valid_and_shared():
    cylinder = Cylinder(1.0, 2.0, 6, 3)
    for face in cylinder.faces:
        assert face.positions == face.texture_coordinates == face.normals
        assert all(0 <= i < len(cylinder.positions) for i in face.positions)


def test_cap_normals_and_heights():
    slices = 5
    cylinder = Cylinder(2.0, 4.0, slices, 2)
    bottom = range(0, slices + 2)
    top = range(len(cylinder.positions) - (slices + 2), len(cylinder.positions))

    for i in bottom:
        assert cylinder.normals[i] == (0.0, -1.0, 0.0)
        assert cylinder.positions[i][1] == 0.0
    for i in top:
        assert cylinder.normals[i] == (0.0, 1.0, 0.0)
        assert cylinder.positions[i][1] == pytest.approx(4.0)


def test_side_normals_are_horizontal_unit_vectors():
    slices = 6
    cylinder = Cylinder(2.0, 4.0, slices, 3)
    side = cylinder.normals[slices + 2 : len(cylinder.normals) - (slices + 2)]
    assert side
    for x, y, z in side:
        assert y == 0.0
        assert math.hypot(x, z) == pytest.approx(1.0)


def test_rim_vertices_lie_on_radius():
    cylinder = Cylinder(2.5, 1.0, 9, 2)
    for x, y, z, w in cylinder.positions:
        distance = math.hypot(x, z)
        assert distance == pytest.approx(0.0, abs=1e-9) or distance == pytest.approx(2.5)
        assert w == 1.0


def test_multi_textured_cap_centres():
    slices = 4
    cylinder = Cylinder(1.0, 1.0, slices, 2, True)
    top_center = len(cylinder.positions) - (slices + 2)
    assert cylinder.texture_coordinates[0] == (0.8125, 0.1875)
    assert cylinder.texture_coordinates[top_center] == (0.4375, 0.1875)


def test_multi_texturing_does_not_change_geometry():
    plain = Cylinder(1.0, 2.0, 5, 3)
    multi = Cylinder(1.0, 2.0, 5, 3, True)
    assert plain.positions == multi.positions
    assert plain.faces == multi.faces
    assert plain.texture_coordinates != multi.texture_coordinates


def test_plain_texture_coordinates_in_unit_square():
    cylinder = Cylinder(1.0, 2.0, 8, 4)
    for s, t in cylinder.texture_coordinates:
        assert -1e-9 <= s <= 1.0 + 1e-9
        assert -1e-9 <= t <= 1.0 + 1e-9


def test_text_round_trip():
    cylinder = Cylinder(1.0, 2.0, 6, 2)
    parsed = WavefrontOBJ.parse(cylinder.to_text())
    assert parsed.faces == cylinder.faces
    assert _flatten(parsed.positions) == pytest.approx(
        _flatten(cylinder.positions), abs=1e-4
    )
    assert len(parsed.normals) == len(cylinder.normals)


def test_zero_slices_rejected():
    with pytest.raises(ZeroDivisionError):
        Cylinder(1.0, 1.0, 0, 1)