"""Mesh representation and parsing module."""

from .shape import Point, Color, Shape, Mesh
from .errors import ErrorKind, ParseError
from .parser import MeshParser
from .encoder import MeshEncoder
from .validator import MeshValidator

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
]
