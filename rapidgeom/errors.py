"""
Exceptions raised at checked boundaries.

Degenerate geometry (zero vectors, collinear points, parallel directions) is
never an exception; those operations return ``None``. The classes below only
cover malformed input data, mostly from ``from_json``.
"""


class GeometryError(ValueError):
    """Base class for invalid geometric input data."""

    pass


class InvalidDirectionError(GeometryError):
    """Raised when serialized direction components are not unit length."""

    pass


class InvalidFrameError(GeometryError):
    """Raised when serialized frame or sketch plane axes are not orthonormal."""

    pass
