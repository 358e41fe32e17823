"""
Phantom marker types for units and coordinate systems.

None of these classes is ever instantiated. They only show up as type
parameters, for example ``Point2d[Meters, WorldCoordinates]``, so that a static
type checker rejects adding a vector expressed in one frame to a point
expressed in another. Values carry no runtime trace of them and ``to_json``
never writes them out.
"""

from typing import TypeVar


class Unitless:
    """Pure ratios and unit directions."""


class Meters:
    """Lengths in meters."""


class Millimeters:
    """Lengths in millimeters."""


class Radians:
    """Angles in radians."""


class WorldCoordinates:
    """The global coordinate system."""


class LocalCoordinates:
    """Coordinates local to some frame or sketch plane."""


Units = TypeVar("Units")
Coordinates = TypeVar("Coordinates")
