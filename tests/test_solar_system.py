import math
import xml.etree.ElementTree as ET

import pytest

from cgmesh.solar_system import SolarSystem


@pytest.fixture(scope="module")
def default_system():
    return SolarSystem()


@pytest.fixture(scope="module")
def default_root(default_system):
    return ET.fromstring(default_system.to_xml())


def _bodies(root):
    return list(root.find("group"))


def test_comment_header(default_system):
    text = default_system.to_xml()
    assert text.startswith("<!-- solarSystem 1.000000 1.000000 1.000000 1.000000-->")


def test_window_camera_and_light(default_root):
    window = default_root.find("window")
    assert window.get("width") == "1024"
    assert window.get("height") == "768"

    camera = default_root.find("camera")
    assert camera.get("type") == "free"
    assert camera.find("position").get("x") == "528"
    projection = camera.find("projection")
    assert projection.get("fov") == "60"
    assert projection.get("far") == "6000"

    light = default_root.find("lights/light")
    assert light.get("type") == "point"
    assert light.get("posX") == "0"


def test_named_bodies(default_root):
    names = {model.get("name") for model in default_root.iter("model")}
    assert {"Sun", "Mercury", "Venus", "Earth", "Moon", "Mars", "Jupiter",
            "Saturn", "Uranus", "Neptune", "Comet"} <= names


def test_sun_has_material(default_root):
    sun_model = next(m for m in default_root.iter("model") if m.get("name") == "Sun")
    color = sun_model.find("color")
    assert color.find("emissive").get("R") == "255"
    assert color.find("shininess").get("value") == "0"
    assert sun_model.find("texture").get("file") == "Sun.jpg"


def test_asteroid_belts(default_root):
    bodies = _bodies(default_root)
    assert len(bodies) == 12
    for belt in bodies[9:11]:
        assert sum(len(sub) for sub in belt) == 2000
    assert len(bodies[9]) == 14
    assert len(bodies[10]) == 77


def test_asteroid_orbits_within_belt(default_root):
    belt = _bodies(default_root)[9]
    for sub in belt:
        for asteroid in sub:
            points = asteroid.findall("transform/translate/point")
            assert len(points) == 16
            for point in points:
                distance = math.hypot(float(point.get("x")), float(point.get("z")))
                assert 1000.0 - 1e-2 <= distance <= 1600.0 + 1e-2
            scale = float(asteroid.find("transform/scale").get("x"))
            assert 1.0 <= scale <= 2.0


def test_earth_has_moon_child(default_root):
    earth = _bodies(default_root)[3]
    assert [child.tag for child in earth] == ["transform", "group", "group"]
    inner_model = earth.find("group/models/model")
    assert inner_model.get("name") == "Earth"
    moon_model = earth[2].find("models/model")
    assert moon_model.get("name") == "Moon"


def test_saturn_rings(default_root):
    saturn = _bodies(default_root)[6]
    files = [m.get("file") for m in saturn.iter("model")]
    assert files == ["sphere.3d", "torus.3d"]


def test_rotation_axes_are_normalized(default_root):
    rotations = list(default_root.iter("rotate"))
    assert rotations
    for rotate in rotations:
        axis = [float(rotate.get(c)) for c in "xyz"]
        assert math.sqrt(sum(c * c for c in axis)) == pytest.approx(1.0, abs=1e-6)
        assert axis[1] > 0


def test_deterministic():
    first = SolarSystem(1.5, 2.0, 0.5, 3.0).to_xml()
    second = SolarSystem(1.5, 2.0, 0.5, 3.0).to_xml()
    assert first.startswith("<!-- solarSystem 1.500000 2.000000 0.500000 3.000000-->")
    assert first == second
    root = ET.fromstring(first)
    assert len(_bodies(root)) == 12


def test_static_scene_without_time():
    root = ET.fromstring(SolarSystem(time_scale=0.0).to_xml())
    bodies = _bodies(root)
    for body in bodies[:11]:
        assert not [e for e in body.iter() if e.get("time") is not None]
    assert not list(root.iter("rotate"))
    comet_translate = bodies[11].find("transform/translate")
    assert comet_translate.get("time") == "100"


def test_time_scale_multiplies_orbit_time():
    slow = ET.fromstring(SolarSystem(time_scale=1.0).to_xml())
    fast = ET.fromstring(SolarSystem(time_scale=2.0).to_xml())
    slow_time = float(_bodies(slow)[1].find("transform/translate").get("time"))
    fast_time = float(_bodies(fast)[1].find("transform/translate").get("time"))
    assert fast_time == pytest.approx(2.0 * slow_time)


def test_sun_scale_scales_sun():
    base = ET.fromstring(SolarSystem().to_xml())
    big = ET.fromstring(SolarSystem(sun_scale=2.0).to_xml())
    base_size = float(_bodies(base)[0].find("transform/scale").get("x"))
    big_size = float(_bodies(big)[0].find("transform/scale").get("x"))
    assert big_size == pytest.approx(2.0 * base_size)


def _write_resources(root):
    patches = root / "res" / "patches"
    patches.mkdir(parents=True)
    indices = ",".join(str(i) for i in range(16))
    points = "\n".join(f"{c}, {r}, 0" for c in range(4) for r in range(4))
    (patches / "comet.patch").write_text(f"1\n{indices}\n16\n{points}\n")
    textures = root / "res" / "textures" / "solarSystem"
    textures.mkdir(parents=True)
    (textures / "Sun.jpg").write_bytes(b"sun-image")


def test_write_to_file(tmp_path, monkeypatch):
    _write_resources(tmp_path)
    monkeypatch.chdir(tmp_path)
    out = tmp_path / "out"
    SolarSystem().write_to_file(out)

    for name in ("scene.xml", "sphere.3d", "torus.3d", "comet.3d"):
        assert (out / name).is_file()
    assert (out / "Sun.jpg").read_bytes() == b"sun-image"
    root = ET.fromstring((out / "scene.xml").read_text())
    assert root.tag == "world"
    assert (out / "comet.3d").read_text().startswith("# patch res/patches/comet.patch 10\n")


def test_write_to_file_without_patch(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(OSError):
        SolarSystem().write_to_file(tmp_path / "out")