# cgmesh

Generates triangle meshes of geometric figures and writes them as Wavefront
OBJ files. It can also tessellate bicubic Bezier patch files and build an XML
scene description of a solar system.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

Installing the package adds a `generator` command. The last argument is
always the output file or directory.

```
generator plane <length> <divisions> <file>
generator box <length> <divisions> [multi-textured] <file>
generator sphere <radius> <slices> <stacks> <file>
generator cone <radius> <height> <slices> <stacks> <file>
generator cylinder <radius> <height> <slices> <stacks> [multi-textured] <file>
generator torus <majorRadius> <minorRadius> <slices> <sides> <file>
generator mobiusStrip <radius> <width> <twists> <slices> <stacks> <file>
generator kleinBottle <radius> <slices> <stacks> <file>
generator gear <majorRadius> <minorRadius> <toothHeight> <height> <teeth> <stacks> <file>
generator solarSystem [<sunScale> <rockyScale> <gasScale> <timeScale>] <directory>
generator patch <patchFile> <tessellation> <file>
```

Integer arguments must be positive. If the arguments do not form a valid
command, the usage text is printed to standard error and the exit status is
1. If a valid command fails while building or writing its output (for
example, a patch file that cannot be read or parsed), the error message is
printed and the exit status is also 1.

`solarSystem` writes `scene.xml`, `sphere.3d`, `torus.3d` and `comet.3d`
into the directory, creating it if needed. It reads the comet patch from
`res/patches/comet.patch` and copies every file from
`res/textures/solarSystem`, both relative to the current working directory,
so those must exist where the command is run.

### Patch files

A patch file holds the number of patches, then one line per patch with 16
comma-separated control-point indices, then the number of points, then one
`x, y, z` line per point. Blank lines are only allowed after the points.

## Library use

```python
from cgmesh.figures.sphere import Sphere
from cgmesh.wavefront import WavefrontOBJ

sphere = Sphere(1.0, 32, 16)
sphere.write_to_file("sphere.3d")

mesh = WavefrontOBJ.from_file("sphere.3d")
positions, texture_coordinates, normals, indices = mesh.indexed_vertices()
```

- `cgmesh.wavefront.WavefrontOBJ` holds positions, texture coordinates,
  normals and `TriangleFace`s. `parse(text)` and `from_file(path)` read OBJ
  text (triangles only, either `f a b c` or `f a/t/n ...` faces); when faces
  carry no texture coordinates, per-position normals are generated by
  area-weighted averaging. `to_text()` and `write_to_file(path)` write it
  back, and `indexed_vertices()` flattens it into unique vertices and
  indices.
- Every figure in `cgmesh.figures` (`Plane`, `Box`, `Cone`, `Cylinder`,
  `Gear`, `KleinBottle`, `MobiusStrip`, `Sphere`, `Torus`) and
  `cgmesh.bezier.BezierPatch` is a `WavefrontOBJ`.
  `cgmesh.bezier.parse_patch_text(text)` parses patch file text on its own.
- `cgmesh.solar_system.SolarSystem(...)` builds the scene; `to_xml()` returns
  the document and `write_to_file(dirname)` writes it with its models and
  textures. Random placement is seeded, so equal arguments give equal scenes.
- `cgmesh.xml_utils` has helpers for reading scene elements from
  `xml.etree.ElementTree`: `get_single_child`, `get_xyz`, `get_rgb`,
  `get_light_direction` and `get_light_position`. They raise `ValueError` on
  missing or invalid data.

## What it does not do

The package only produces files. It has no viewer: it does not open a
window, render the generated models or play the animations described in a
scene file.