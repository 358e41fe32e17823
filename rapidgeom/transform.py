"""
Field-wise transformation of composite primitives.

Axes, frames, circles, planes and sketch planes are all "some points plus some
directions plus plain numbers". Every transformation on them (translate,
rotate, mirror, relative_to, place_in, project...) is done by transforming each
point field with a point function, each direction field with a direction
function, and rebuilding the value. No combined matrix is ever formed.
"""

from dataclasses import fields
from typing import Any, Callable, Optional, Type, TypeVar

from .direction import Direction2d, Direction3d
from .point import Point2d, Point3d

T = TypeVar("T")

_POINT_TYPES = (Point2d, Point3d)
_DIRECTION_TYPES = (Direction2d, Direction3d)


def _identity(value: Any) -> Any:
    return value


def map_fields(
    entity: Any,
    point_fn: Callable[[Any], Any],
    direction_fn: Callable[[Any], Any] = _identity,
    target: Optional[Type[T]] = None,
    **overrides: Any,
) -> T:
    """
    Rebuild a dataclass entity with its point and direction fields transformed.

    Args:
        entity: Frozen dataclass instance to transform
        point_fn: Applied to every point field
        direction_fn: Applied to every direction field (identity by default,
            e.g. for translations)
        target: Class to build; defaults to the entity's own class. Used when
            crossing dimensions (``Axis3d`` -> ``Axis2d``)
        **overrides: Field values to set directly instead of mapping,
            e.g. a scaled radius

    Returns:
        New instance of ``target``
    """
    values = {}
    for field in fields(entity):
        if field.name in overrides:
            continue
        value = getattr(entity, field.name)
        if isinstance(value, _POINT_TYPES):
            values[field.name] = point_fn(value)
        elif isinstance(value, _DIRECTION_TYPES):
            values[field.name] = direction_fn(value)
        else:
            values[field.name] = value
    values.update(overrides)
    cls = target if target is not None else type(entity)
    return cls(**values)


def map_fields_optional(
    entity: Any,
    point_fn: Callable[[Any], Optional[Any]],
    direction_fn: Callable[[Any], Optional[Any]],
    target: Optional[Type[T]] = None,
    **overrides: Any,
) -> Optional[T]:
    """
    Like :func:`map_fields`, but either function may return ``None``.

    The first ``None`` makes the whole result ``None``.
    """
    values = {}
    for field in fields(entity):
        if field.name in overrides:
            continue
        value = getattr(entity, field.name)
        if isinstance(value, _POINT_TYPES):
            mapped = point_fn(value)
        elif isinstance(value, _DIRECTION_TYPES):
            mapped = direction_fn(value)
        else:
            values[field.name] = value
            continue
        if mapped is None:
            return None
        values[field.name] = mapped
    values.update(overrides)
    cls = target if target is not None else type(entity)
    return cls(**values)
