"""
rapidgeom - immutable 2D/3D geometry value types.

Points, vectors, directions, axes, circles, planes, sketch planes and frames,
with a uniform transformation vocabulary (translate, rotate, mirror, scale)
and frame conversion (relative_to / place_in, project_into / place_onto).
"""

__version__ = "0.1.0"

from .axis import Axis2d, Axis3d
from .circle import Circle2d, Circle3d
from .direction import Direction2d, Direction3d
from .errors import GeometryError, InvalidDirectionError, InvalidFrameError
from .frame import Frame2d, Frame3d
from .plane import Plane3d
from .point import Point2d, Point3d
from .sketch_plane import SketchPlane3d
from .vector import Vector2d, Vector3d

# Define what gets imported with "from rapidgeom import *"
__all__ = [
    # Leaf value types
    "Vector2d",
    "Vector3d",
    "Direction2d",
    "Direction3d",
    "Point2d",
    "Point3d",
    # Coordinate systems
    "Frame2d",
    "Frame3d",
    # Composite primitives
    "Axis2d",
    "Axis3d",
    "Circle2d",
    "Circle3d",
    "Plane3d",
    "SketchPlane3d",
    # Errors
    "GeometryError",
    "InvalidDirectionError",
    "InvalidFrameError",
]
