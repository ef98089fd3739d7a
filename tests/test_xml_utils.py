import xml.etree.ElementTree as ET

import pytest

from cgmesh.xml_utils import (
    get_light_direction,
    get_light_position,
    get_rgb,
    get_single_child,
    get_xyz,
)


def test_single_child_is_returned():
    world = ET.fromstring("<world><camera/><group/></world>")
    camera = get_single_child(world, "camera")
    assert camera is world.find("camera")


def test_single_child_ignores_grandchildren():
    world = ET.fromstring("<world><group><group/></group></world>")
    group = get_single_child(world, "group")
    assert group is world[0]


def test_missing_child_raises():
    world = ET.fromstring("<world><group/></world>")
    with pytest.raises(ValueError, match="<camera> element not found"):
        get_single_child(world, "camera")


def test_duplicate_child_raises():
    world = ET.fromstring("<world><camera/><camera/></world>")
    with pytest.raises(ValueError, match="More than one <camera>"):
        get_single_child(world, "camera")


def test_single_child_of_document_is_root():
    tree = ET.ElementTree(ET.fromstring("<world/>"))
    assert get_single_child(tree, "world") is tree.getroot()
    with pytest.raises(ValueError, match="<scene> element not found"):
        get_single_child(tree, "scene")


def test_get_xyz_reads_attributes():
    element = ET.fromstring('<position x="1.5" y="-2" z="3e1"/>')
    assert get_xyz(element) == (1.5, -2.0, 30.0)


def test_get_xyz_missing_attribute_raises():
    element = ET.fromstring('<position x="1" y="2"/>')
    with pytest.raises(ValueError, match="Invalid vector in <position>"):
        get_xyz(element)


def test_get_xyz_invalid_number_raises():
    element = ET.fromstring('<up x="1" y="abc" z="0"/>')
    with pytest.raises(ValueError, match="Invalid vector in <up>"):
        get_xyz(element)


def test_get_rgb_scales_to_unit_range():
    element = ET.fromstring('<diffuse R="255" G="0" B="51"/>')
    rgb = get_rgb(element)
    assert rgb[0] == 1.0
    assert rgb[1] == 0.0
    assert tuple(c * 255.0 for c in rgb) == pytest.approx((255.0, 0.0, 51.0))


def test_get_rgb_missing_attribute_raises():
    element = ET.fromstring('<ambient R="1" G="2"/>')
    with pytest.raises(ValueError, match="Invalid vector in <ambient>"):
        get_rgb(element)


def test_get_light_direction():
    element = ET.fromstring('<light type="directional" dirX="0" dirY="-1" dirZ="0.5"/>')
    assert get_light_direction(element) == (0.0, -1.0, 0.5)


def test_get_light_direction_missing_raises():
    element = ET.fromstring('<light type="directional" posX="0" posY="0" posZ="0"/>')
    with pytest.raises(ValueError, match="Invalid vector in <light>"):
        get_light_direction(element)


def test_get_light_position():
    element = ET.fromstring('<light type="point" posX="0" posY="10" posZ="-4"/>')
    assert get_light_position(element) == (0.0, 10.0, -4.0)


def test_get_light_position_missing_raises():
    element = ET.fromstring('<light type="point" posX="0" posZ="0"/>')
    with pytest.raises(ValueError, match="Invalid vector in <light>"):
        get_light_position(element)