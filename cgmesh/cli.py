"""Command line for generating figure models, scenes and tessellated patches."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Protocol

from .bezier import BezierPatch
from .figures.box import Box
from .figures.cone import Cone
from .figures.cylinder import Cylinder
from .figures.gear import Gear
from .figures.klein_bottle import KleinBottle
from .figures.mobius_strip import MobiusStrip
from .figures.plane import Plane
from .figures.sphere import Sphere
from .figures.torus import Torus
from .solar_system import SolarSystem

DEFAULT_PROGRAM_NAME = "generator"

FIGURE_USAGES: tuple[tuple[str, ...], ...] = (
    ("plane", "<length>", "<divisions>"),
    ("box", "<length>", "<divisions>", "[multi-textured]"),
    ("sphere", "<radius>", "<slices>", "<stacks>"),
    ("cone", "<radius>", "<height>", "<slices>", "<stacks>"),
    ("cylinder", "<radius>", "<height>", "<slices>", "<stacks>", "[multi-textured]"),
    ("torus", "<majorRadius>", "<minorRadius>", "<slices>", "<sides>"),
    ("mobiusStrip", "<radius>", "<width>", "<twists>", "<slices>", "<stacks>"),
    ("kleinBottle", "<radius>", "<slices>", "<stacks>"),
    (
        "gear",
        "<majorRadius>",
        "<minorRadius>",
        "<toothHeight>",
        "<height>",
        "<teeth>",
        "<stacks>",
    ),
)

_FLOAT = re.compile(
    r"\s*[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)
_INT = re.compile(r"\s*[+-]?[0-9]+")
_FLOAT32_MAX = 3.4028234663852886e38
_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)


class _Writable(Protocol):
    def write_to_file(self, filename: str) -> None: ...


def usage_text(program_name: str) -> str:
    """Return the usage message listing every supported command."""
    widths = [
        max(len(usage[column]) for usage in FIGURE_USAGES if column < len(usage))
        for column in range(max(len(usage) for usage in FIGURE_USAGES))
    ]

    lines = ["Wrong usage. Here's the correct one:", "", "Figure generation:"]
    for usage in FIGURE_USAGES:
        columns = "".join(
            f"{word:<{width}} " for word, width in zip(usage, widths)
        )
        lines.append(f"  {program_name} {columns}<file>")

    lines += [
        "",
        "Scene generation:",
        f"  {program_name} solarSystem "
        "[<sunScale> <rockyScale> <gasScale> <timeScale>] <directory>",
        "",
        "Model conversion:",
        f"  {program_name} patch <patchFile> <tessellation> <file>",
    ]
    return "".join(line + "\n" for line in lines)


def string_to_float(text: str) -> float:
    """Parse a whole argument as a number; leading whitespace is allowed."""
    if not _FLOAT.fullmatch(text):
        raise ValueError(f"not a float: {text!r}")
    value = float(text)
    if value == value and abs(value) != float("inf") and abs(value) > _FLOAT32_MAX:
        raise ValueError(f"float out of range: {text!r}")
    return value


def string_to_int(text: str) -> int:
    """Parse a whole argument as a strictly positive integer."""
    if not _INT.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    value = int(text)
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    if value <= 0:
        raise ValueError(f"not positive: {text!r}")
    return value


def _expect_count(provided: int, expected: int) -> None:
    if provided != expected:
        raise ValueError("Wrong number of command-line arguments")


def _plan(args: Sequence[str]) -> Callable[[], _Writable]:
    """Validate the arguments and return a builder for the requested output.

    ``args`` holds the program name first. Raises ValueError or IndexError
    when the arguments do not form a valid command.
    """
    command = args[1]
    count = len(args)

    if command == "plane":
        _expect_count(count, 5)
        length = string_to_float(args[2])
        divisions = string_to_int(args[3])
        return lambda: Plane(length, divisions)

    if command == "box":
        length = string_to_float(args[2])
        grid = string_to_int(args[3])
        if count == 5:
            return lambda: Box(length, grid)
        if count == 6 and args[4] == "multi-textured":
            return lambda: Box(length, grid, True)
        raise ValueError("Invalid command-line arguments")

    if command == "sphere":
        _expect_count(count, 6)
        radius = string_to_float(args[2])
        slices = string_to_int(args[3])
        stacks = string_to_int(args[4])
        return lambda: Sphere(radius, slices, stacks)

    if command == "cone":
        _expect_count(count, 7)
        radius = string_to_float(args[2])
        height = string_to_float(args[3])
        slices = string_to_int(args[4])
        stacks = string_to_int(args[5])
        return lambda: Cone(radius, height, slices, stacks)

    if command == "cylinder":
        radius = string_to_float(args[2])
        height = string_to_float(args[3])
        slices = string_to_int(args[4])
        stacks = string_to_int(args[5])
        if count == 7:
            return lambda: Cylinder(radius, height, slices, stacks)
        if count == 8 and args[6] == "multi-textured":
            return lambda: Cylinder(radius, height, slices, stacks, True)
        raise ValueError("Invalid command-line arguments")

    if command == "torus":
        _expect_count(count, 7)
        major_radius = string_to_float(args[2])
        minor_radius = string_to_float(args[3])
        slices = string_to_int(args[4])
        sides = string_to_int(args[5])
        return lambda: Torus(major_radius, minor_radius, slices, sides)

    if command == "mobiusStrip":
        _expect_count(count, 8)
        radius = string_to_float(args[2])
        width = string_to_float(args[3])
        twists = string_to_int(args[4])
        slices = string_to_int(args[5])
        stacks = string_to_int(args[6])
        return lambda: MobiusStrip(radius, width, twists, slices, stacks)

    if command == "kleinBottle":
        _expect_count(count, 6)
        radius = string_to_float(args[2])
        slices = string_to_int(args[3])
        stacks = string_to_int(args[4])
        return lambda: KleinBottle(radius, slices, stacks)

    if command == "gear":
        _expect_count(count, 9)
        major_radius = string_to_float(args[2])
        minor_radius = string_to_float(args[3])
        tooth_height = string_to_float(args[4])
        height = string_to_float(args[5])
        teeth = string_to_int(args[6])
        stacks = string_to_int(args[7])
        return lambda: Gear(major_radius, minor_radius, tooth_height, height, teeth, stacks)

    if command == "solarSystem":
        if count == 3:
            return SolarSystem
        if count == 7:
            scales = [string_to_float(arg) for arg in args[2:6]]
            return lambda: SolarSystem(*scales)
        raise ValueError("Wrong number of command-line arguments")

    if command == "patch":
        _expect_count(count, 5)
        patch_file = args[2]
        tessellation = string_to_int(args[3])
        return lambda: BezierPatch(patch_file, tessellation)

    raise ValueError(f"Unknown command: {command}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the generator; ``argv`` excludes the program name."""
    if argv is None:
        program_name = Path(sys.argv[0]).name or DEFAULT_PROGRAM_NAME
        argv = sys.argv[1:]
    else:
        program_name = DEFAULT_PROGRAM_NAME

    args = [program_name, *argv]
    output = args[-1]

    try:
        build = _plan(args)
    except (ValueError, IndexError):
        sys.stderr.write(usage_text(program_name))
        return 1

    try:
        build().write_to_file(output)
    except (OSError, ValueError) as error:
        print(f"{program_name}: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())