"""Structural encode/decode of primitives to plain dicts and JSON.

This is an optional convenience outside the geometric core: every object is
written field by field, tagged with a ``"type"`` key, and read back into an
equal object. No format versioning is attempted.

Examples
--------
>>> from geoprim.core.point import Point2
>>> from geoprim.core.primitives import SimpleCircle
>>> loads(dumps(SimpleCircle(Point2(0.0, 0.0), 1.0)))
SimpleCircle(center=Point2(x=0.0, y=0.0), radius=1.0)
"""
from __future__ import annotations

import json
from typing import Any, Callable, Dict

from .bounding_rect import BoundingRect
from .exceptions import DimensionError, SerializationError
from .point import Point2, Point3, as_point
from .primitives import SimpleCircle, SimpleEdge, SimpleTriangle

__all__ = ['to_dict', 'from_dict', 'dumps', 'loads']


def _point(p) -> list:
    return list(p)


def to_dict(obj) -> Dict[str, Any]:
    """Encode a point, primitive or bounding rect as a tagged dict."""
    if isinstance(obj, (Point2, Point3)):
        return {'type': 'point', 'coords': _point(obj)}
    if isinstance(obj, SimpleEdge):
        return {'type': 'edge', 'from': _point(obj.from_), 'to': _point(obj.to)}
    if isinstance(obj, SimpleTriangle):
        return {'type': 'triangle', 'vertices': [_point(v) for v in obj.vertices()]}
    if isinstance(obj, SimpleCircle):
        return {'type': 'circle', 'center': _point(obj.center), 'radius': obj.radius}
    if isinstance(obj, BoundingRect):
        return {'type': 'bounding_rect', 'lower': obj.lower.tolist(), 'upper': obj.upper.tolist()}
    raise SerializationError(f'cannot encode object of type {type(obj).__name__}')


_DECODERS: Dict[str, Callable[[Dict[str, Any]], Any]] = {
    'point': lambda d: as_point(d['coords']),
    'edge': lambda d: SimpleEdge(as_point(d['from']), as_point(d['to'])),
    'triangle': lambda d: SimpleTriangle(*(as_point(v) for v in d['vertices'])),
    'circle': lambda d: SimpleCircle(as_point(d['center']), d['radius']),
    'bounding_rect': lambda d: BoundingRect(d['lower'], d['upper']),
}


def from_dict(data: Dict[str, Any]):
    """Decode a dict produced by :func:`to_dict`."""
    if not isinstance(data, dict):
        raise SerializationError(f'expected a dict, got {type(data).__name__}')
    kind = data.get('type')
    decoder = _DECODERS.get(kind)
    if decoder is None:
        raise SerializationError(f'unknown primitive type {kind!r}')
    try:
        return decoder(data)
    except (KeyError, TypeError, DimensionError) as exc:
        raise SerializationError(f'malformed {kind} record: {exc}') from exc


def dumps(obj, **kwargs) -> str:
    """JSON text for a primitive, or a list of primitives."""
    if isinstance(obj, (list, tuple)):
        return json.dumps([to_dict(o) for o in obj], **kwargs)
    return json.dumps(to_dict(obj), **kwargs)


def loads(text: str):
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f'invalid JSON: {exc}') from exc
    if isinstance(data, list):
        return [from_dict(d) for d in data]
    return from_dict(data)
