"""Parametric figures that generate Wavefront OBJ meshes."""