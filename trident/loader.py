"""Loading meshes from files."""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from .shapes.errors import ParseError
from .shapes.parser import MeshParser
from .shapes.shape import Mesh

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_mesh(path: PathLike) -> Mesh:
    """
    Read a mesh file and parse it.

    The file is read completely and closed before parsing starts.

    Raises:
        OSError: If the file cannot be read
        ParseError: If the file contents are malformed
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    logger.debug("Read %d characters from %s", len(text), path)

    mesh = MeshParser.parse(text)
    logger.info("Loaded %d shapes from %s", mesh.num_shapes, path)
    return mesh


def try_load_mesh(path: PathLike) -> Tuple[Optional[Mesh], Optional[str]]:
    """
    Load a mesh, reporting failures as text instead of raising.

    Returns:
        A tuple of (mesh, error_message); exactly one of them is None
    """
    try:
        return load_mesh(path), None
    except ParseError as e:
        logger.warning("Failed to parse %s: %s", path, e)
        return None, f"{path}: {e}"
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to read %s: %s", path, e)
        return None, f"{path}: {e}"
