"""Visualization module for viewing parsed meshes."""

from .camera import Camera
from .mesh_viewer import MeshViewer, show_mesh, PYGAME_AVAILABLE

__all__ = [
    "Camera",
    "MeshViewer",
    "show_mesh",
    "PYGAME_AVAILABLE",
]
