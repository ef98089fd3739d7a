"""Generation of a solar system scene description and its assets."""

from __future__ import annotations

import math
import shutil
import struct
import xml.etree.ElementTree as ET
from pathlib import Path

from .bezier import BezierPatch
from .figures.sphere import Sphere
from .figures.torus import Torus
from .wavefront import PathLike

Vec3 = tuple[float, float, float]

PATCH_FILE = "res/patches/comet.patch"
TEXTURE_DIRECTORY = "res/textures/solarSystem"

_SEED = 10
_ORBIT_POINTS = 16
_COMET_PATH: list[Vec3] = [
    (-800.0, 50.0, -400.0),
    (-400.0, 100.0, 0.0),
    (0.0, 150.0, 400.0),
    (400.0, 100.0, 0.0),
    (800.0, 50.0, -400.0),
]


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class _MinStdRand0:
    """Park-Miller linear congruential generator with a float distribution."""

    _MODULUS = 2147483647
    _MULTIPLIER = 16807
    _BELOW_ONE = _f32(1.0 - 2.0**-24)

    def __init__(self, seed: int) -> None:
        self._state = seed % self._MODULUS or 1

    def _next(self) -> int:
        self._state = self._state * self._MULTIPLIER % self._MODULUS
        return self._state

    def uniform(self, low: float, high: float) -> float:
        canonical = _f32(_f32(self._next() - 1) / 2147483648.0)
        if canonical >= 1.0:
            canonical = self._BELOW_ONE
        return _f32(_f32(canonical * _f32(high - low)) + low)


def _number(value: float) -> str:
    return f"{value:.8g}"


def _normalize(v: Vec3) -> Vec3:
    length = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    return (v[0] / length, v[1] / length, v[2] / length)


def _vector(name: str, vec: Vec3) -> ET.Element:
    return ET.Element(name, x=_number(vec[0]), y=_number(vec[1]), z=_number(vec[2]))


def _color(name: str, color: Vec3) -> ET.Element:
    return ET.Element(
        name,
        R=_number(color[0] * 255.0),
        G=_number(color[1] * 255.0),
        B=_number(color[2] * 255.0),
    )


class SolarSystem:
    """A scene of the sun, planets, moons, asteroid belts and a comet.

    Bodies are scaled by ``sun_scale``, ``rocky_scale`` and ``gas_scale``
    and every animation time is multiplied by ``time_scale``; a time scale
    of zero or less leaves the scene static. Random placement is seeded, so
    equal arguments give equal scenes.
    """

    def __init__(
        self,
        sun_scale: float = 1.0,
        rocky_scale: float = 1.0,
        gas_scale: float = 1.0,
        time_scale: float = 1.0,
    ) -> None:
        self._rng = _MinStdRand0(_SEED)
        self._body_scale = 1.0
        self._time_scale = time_scale
        self._last_translation_angle = 0.0

        self.comment = (
            f" solarSystem {sun_scale:f} {rocky_scale:f} {gas_scale:f} {time_scale:f}"
        )
        self.world = ET.Element("world")
        ET.SubElement(self.world, "window", width="1024", height="768")

        self._create_camera()
        self._create_light()
        self._create_objects(sun_scale, rocky_scale, gas_scale)

    def to_xml(self) -> str:
        """Render the scene document as XML text."""
        ET.indent(self.world, space="    ")
        body = ET.tostring(self.world, encoding="unicode")
        return f"<!--{self.comment}-->\n{body}\n"

    def write_to_file(self, dirname: PathLike) -> None:
        """Write the scene, its models and its textures into ``dirname``.

        The comet patch and the textures are read from the resource paths
        relative to the working directory.
        """
        directory = Path(dirname)
        directory.mkdir(exist_ok=True)

        scene_file = directory / "scene.xml"
        try:
            scene_file.write_text(self.to_xml(), encoding="utf-8")
        except OSError as error:
            raise OSError(f"Error while writing XML file: {scene_file}") from error

        Sphere(1.0, 32, 32).write_to_file(directory / "sphere.3d")
        Torus(1.0, 0.2, 32, 8).write_to_file(directory / "torus.3d")
        BezierPatch(PATCH_FILE, 10).write_to_file(directory / "comet.3d")

        for source in Path(TEXTURE_DIRECTORY).iterdir():
            destination = directory / source.name
            if (
                not destination.exists()
                or destination.stat().st_mtime < source.stat().st_mtime
            ):
                shutil.copy2(source, destination)

    def _create_camera(self) -> None:
        camera = ET.SubElement(self.world, "camera", type="free")
        camera.append(_vector("position", (528.0, 465.0, 515.0)))
        camera.append(_vector("lookAt", (0.0, 0.0, 0.0)))
        camera.append(_vector("up", (0.0, 1.0, 0.0)))
        ET.SubElement(camera, "projection", fov="60", near="1", far="6000")

    def _create_light(self) -> None:
        lights = ET.SubElement(self.world, "lights")
        ET.SubElement(lights, "light", type="point", posX="0", posY="0", posZ="0")

    def _create_body(
        self,
        name: str,
        radius: float,
        distance: float,
        orbit_time: float,
        rotation_time: float,
        y: float = 0.0,
        has_orbiters: bool = False,
    ) -> ET.Element:
        group = ET.Element("group")
        transform = ET.SubElement(group, "transform")

        inner_group, inner_transform = group, transform
        if has_orbiters:
            inner_group = ET.SubElement(group, "group")
            inner_transform = ET.SubElement(inner_group, "transform")

        models = ET.SubElement(inner_group, "models")
        model = ET.SubElement(models, "model", file="sphere.3d")
        if name:
            model.set("name", name)
            ET.SubElement(model, "texture", file=f"{name}.jpg")

        if name == "Sun":
            material = ET.SubElement(model, "color")
            material.append(_color("diffuse", (1.0, 1.0, 1.0)))
            material.append(_color("ambient", (0.2, 0.2, 0.2)))
            material.append(_color("specular", (0.0, 0.0, 0.0)))
            material.append(_color("emissive", (1.0, 1.0, 1.0)))
            ET.SubElement(material, "shininess", value="0")

        translation_angle = self._rng.uniform(0.0, math.tau)
        self._last_translation_angle = translation_angle

        if orbit_time > 0.0 and self._time_scale > 0.0:
            translate = ET.SubElement(
                transform,
                "translate",
                time=_number(orbit_time * self._time_scale),
                align="true",
            )
            increment = math.tau / _ORBIT_POINTS
            for i in range(_ORBIT_POINTS):
                angle = translation_angle + i * increment
                translate.append(
                    _vector(
                        "point",
                        (distance * math.cos(angle), y, distance * math.sin(angle)),
                    )
                )
        else:
            transform.append(
                _vector(
                    "translate",
                    (
                        distance * math.cos(translation_angle),
                        0.0,
                        distance * math.sin(translation_angle),
                    ),
                )
            )

        if rotation_time > 0.0 and self._time_scale > 0.0:
            rotation_angle = self._rng.uniform(0.0, math.tau)
            axis_offset = self._rng.uniform(-0.2, 0.2)
            axis = (
                axis_offset * math.cos(rotation_angle),
                1.0,
                axis_offset * math.sin(rotation_angle),
            )
            rotate = _vector("rotate", _normalize(axis))
            rotate.set("time", _number(rotation_time * self._time_scale))
            inner_transform.append(rotate)

        size = radius * self._body_scale
        inner_transform.append(_vector("scale", (size, size, size)))
        return group

    def _create_rings(self, name: str, radius: float) -> ET.Element:
        group = ET.Element("group")
        transform = ET.SubElement(group, "transform")
        models = ET.SubElement(group, "models")
        model = ET.SubElement(models, "model", file="torus.3d")
        ET.SubElement(model, "texture", file=f"{name}.jpg")
        transform.append(_vector("scale", (radius, 0.1 * radius, radius)))
        return group

    def _create_asteroid_belt(
        self,
        name: str,
        min_distance: float,
        max_distance: float,
        orbit_time: float,
        num_asteroids: int,
    ) -> ET.Element:
        parent = ET.Element("group")

        average_radius = (min_distance + max_distance) / 2.0
        belt_width = max_distance - min_distance
        num_groups = math.ceil(math.tau * average_radius / belt_width)
        group_arc = math.tau / num_groups
        sub_groups = [ET.SubElement(parent, "group") for _ in range(num_groups)]

        for _ in range(num_asteroids):
            distance = self._rng.uniform(min_distance, max_distance)
            radius = self._rng.uniform(1.0, 2.0)
            y = self._rng.uniform(-20.0, 20.0)

            asteroid = self._create_body(name, radius, distance, orbit_time, 0.0, y)
            index = min(
                math.floor(self._last_translation_angle / group_arc), num_groups - 1
            )
            sub_groups[index].append(asteroid)

        return parent

    def _create_comet(self, name: str) -> ET.Element:
        group = ET.Element("group")
        transform = ET.SubElement(group, "transform")
        translate = ET.SubElement(
            transform, "translate", time=_number(100.0), align="true"
        )
        for point in _COMET_PATH:
            translate.append(_vector("point", point))
        size = self._body_scale
        transform.append(_vector("scale", (size, size, size)))

        models = ET.SubElement(group, "models")
        model = ET.SubElement(models, "model", file="comet.3d")
        ET.SubElement(model, "texture", file=f"{name}.jpg")
        return group

    def _create_objects(
        self, sun_scale: float, rocky_scale: float, gas_scale: float
    ) -> None:
        group = ET.SubElement(self.world, "group")

        self._body_scale = sun_scale
        group.append(self._create_body("Sun", 80.0, 0.0, 0.0, 10.0))

        self._body_scale = rocky_scale
        group.append(self._create_body("Mercury", 5.0, 200.0, 25.0, 15.0))
        group.append(self._create_body("Venus", 6.5, 370.0, 35.0, 18.0))

        earth = self._create_body("Earth", 7.0, 550.0, 50.0, 20.0, 0.0, True)
        earth.append(self._create_body("Moon", 1.0, rocky_scale * 12.0, 10.0, 10.0))
        group.append(earth)

        group.append(self._create_body("Mars", 6.5, 730.0, 65.0, 22.0))

        self._body_scale = gas_scale
        jupiter = self._create_body("Jupiter", 35.0, 1900.0, 90.0, 25.0, 0.0, True)

        self._body_scale = rocky_scale
        for radius, distance, orbit, rotation in (
            (0.5, 40.0, 3.0, 5.0),  # Io
            (0.5, 45.0, 4.0, 6.0),  # Europa
            (0.7, 50.0, 5.0, 7.0),  # Ganymede
            (0.7, 55.0, 6.0, 8.0),  # Callisto
        ):
            jupiter.append(
                self._create_body("Moon", radius, distance * gas_scale, orbit, rotation)
            )
        group.append(jupiter)

        self._body_scale = gas_scale
        saturn = self._create_body("Saturn", 30.0, 2400.0, 100.0, 30.0)
        saturn.append(self._create_rings("Rings", 3.0))
        group.append(saturn)

        group.append(self._create_body("Uranus", 24.0, 2850.0, 130.0, 32.0))
        group.append(self._create_body("Neptune", 23.0, 3330.0, 150.0, 35.0))

        self._body_scale = rocky_scale
        group.append(self._create_asteroid_belt("Comet", 1000.0, 1600.0, 80.0, 2000))
        group.append(self._create_asteroid_belt("Comet", 3500.0, 3800.0, 4000.0, 2000))
        group.append(self._create_comet("Comet"))