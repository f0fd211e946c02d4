"""
Trident: a parser for 2D low-poly meshes.

A mesh file lists one colored polygon per line:

    # This is a comment
    0, 0; 100, 0; 0, 70;. ff0000 # A red triangle
    0, 30; 10, 0; 40, 0; 50, 30; 40, 60; 10, 60;. cccc00

Colors are ``rrggbb`` or ``rrggbbaa``; alpha defaults to ``ff``.
"""

from .shapes import (
    Point,
    Color,
    Shape,
    Mesh,
    ErrorKind,
    ParseError,
    MeshParser,
    MeshEncoder,
    MeshValidator,
)
from .loader import load_mesh, try_load_mesh

parse = MeshParser.parse

__all__ = [
    "Point",
    "Color",
    "Shape",
    "Mesh",
    "ErrorKind",
    "ParseError",
    "MeshParser",
    "MeshEncoder",
    "MeshValidator",
    "load_mesh",
    "try_load_mesh",
    "parse",
]
