"""Helpers for reading scene XML elements."""

from __future__ import annotations

import math
import xml.etree.ElementTree as ET
from typing import Union

Vec3 = tuple[float, float, float]
XMLParent = Union[ET.Element, ET.ElementTree]


def get_single_child(parent: XMLParent, name: str) -> ET.Element:
    """Return the only direct child of ``parent`` named ``name``.

    Raises ValueError when there is no such child or more than one.
    """
    if isinstance(parent, ET.ElementTree):
        root = parent.getroot()
        children = [root] if root is not None and root.tag == name else []
    else:
        children = parent.findall(name)

    if not children:
        raise ValueError(f"<{name}> element not found in scene XML")
    if len(children) > 1:
        raise ValueError(f"More than one <{name}> element in scene XML")
    return children[0]


def _float_attribute(element: ET.Element, name: str) -> float:
    value = element.get(name)
    if value is None:
        return math.nan
    try:
        return float(value.strip())
    except ValueError:
        return math.nan


def _read_triple(element: ET.Element, names: tuple[str, str, str]) -> Vec3:
    values = tuple(_float_attribute(element, name) for name in names)
    if any(math.isnan(v) for v in values):
        raise ValueError(f"Invalid vector in <{element.tag}> in scene XML file")
    return values  # type: ignore[return-value]


def get_xyz(element: ET.Element) -> Vec3:
    """Read the ``x``, ``y`` and ``z`` attributes."""
    return _read_triple(element, ("x", "y", "z"))


def get_rgb(element: ET.Element) -> Vec3:
    """Read the ``R``, ``G`` and ``B`` attributes, scaled from 0-255 to 0-1."""
    r, g, b = _read_triple(element, ("R", "G", "B"))
    return (r / 255.0, g / 255.0, b / 255.0)


def get_light_direction(element: ET.Element) -> Vec3:
    """Read the ``dirX``, ``dirY`` and ``dirZ`` attributes."""
    return _read_triple(element, ("dirX", "dirY", "dirZ"))


def get_light_position(element: ET.Element) -> Vec3:
    """Read the ``posX``, ``posY`` and ``posZ`` attributes."""
    return _read_triple(element, ("posX", "posY", "posZ"))