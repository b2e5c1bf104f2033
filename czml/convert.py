# -*- coding: utf-8 -*-
# Copyright (C) 2013  Christian Ledermann
#
# This library is free software; you can redistribute it and/or
#    modify it under the terms of the GNU Lesser General Public
#    License as published by the Free Software Foundation; either
#    version 2.1 of the License, or (at your option) any later version.
#
#    This library is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
#    Lesser General Public License for more details.
#
#    You should have received a copy of the GNU Lesser General Public
#    License along with this library; if not, write to the Free Software
#    Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301  USA
"""Turn plain Python values into typed CZML values.

Nothing here is applied behind the caller's back: the property setters
call :func:`as_property_value` and everything else is called explicitly::

    >>> bb = Billboard(scale=0.7, color=rgba(255, 0, 0))
    >>> pos = Position(cartesian(1, 2, 3))
    >>> pos = Position(sampled('cartesian', [(0, (0, 0, 0)), (60, (1, 1, 1))],
    ...                        interval='2012-01-01T00:00:00Z/2012-01-02T00:00:00Z'))

Geometries are accepted wherever positions are, either pygeoif objects or
anything with a ``__geo_interface__``.

"""
from pygeoif import geometry
from pygeoif.factories import shape

from .primitives import (
    coerce_time, is_number, TimeInterval, Reference, Double, Cartesian3,
    Cartographic, Rgba, Rgbaf, CartesianList, CartographicList,
    ReferenceList,
)
from .values import (
    INTERPOLATION_FIELDS, Interval, PropertyValue, Sample, POSITION,
    POSITION_LIST, DOUBLE,
)


def is_geometry(value):
    if hasattr(value, '__geo_interface__'):
        return True
    return isinstance(value, dict) and 'type' in value and 'coordinates' in value


def as_shape(value):
    """Return the pygeoif geometry for a geometry like object."""
    try:
        return shape(value)
    except (KeyError, ValueError, AttributeError, NotImplementedError) as e:
        raise TypeError('%r is not a geometry: %s' % (value, e))


def _cartographic(coord):
    if len(coord) == 2:
        return Cartographic(coord[0], coord[1], 0)
    elif len(coord) == 3:
        return Cartographic(*coord)
    raise TypeError('a position needs 2 or 3 coordinates, not %r' % (coord,))


def as_cartographic(value):
    """A point geometry as a Cartographic, height defaults to 0."""
    geom = as_shape(value)
    if not isinstance(geom, geometry.Point):
        raise TypeError('a position must be a Point, not a %s' % geom.geom_type)
    return _cartographic(geom.coords[0])


def as_time_interval(value):
    """

    :param value: ``"start/stop"`` string, ``(start, stop)`` pair or
        TimeInterval
    :return: TimeInterval

    """
    return TimeInterval.coerce(value)


def as_positions(value, tag=None):
    """Build a list of positions, e.g. the vertices of a polygon.

    Accepts a LineString, LinearRing or Polygon (its exterior ring), a
    sequence of ``(lon, lat[, height])`` tuples or a flat list of
    numbers, all taken as cartographic degrees unless ``tag`` says
    otherwise; a sequence of Cartesian3 is written as ``cartesian`` and a
    sequence of references as ``references``.

    :param value:
    :param tag: force the tag, e.g. ``cartographicRadians``
    :return: PropertyValue

    """
    if isinstance(value, PropertyValue):
        return as_property_value(POSITION_LIST, value)
    if is_geometry(value):
        geom = as_shape(value)
        if isinstance(geom, geometry.Polygon):
            geom = geom.exterior
        if not isinstance(geom, (geometry.LineString, geometry.LinearRing)):
            raise TypeError('positions cannot be made from a %s' %
                            geom.geom_type)
        positions = [_cartographic(c) for c in geom.coords]
        return PropertyValue(POSITION_LIST, value=positions,
                             tag=tag or 'cartographicDegrees')
    if not isinstance(value, (list, tuple)):
        raise TypeError('cannot make positions from %r' % (value,))
    if tag is None:
        if value and all(isinstance(v, Cartesian3) for v in value):
            tag = 'cartesian'
        elif value and all(isinstance(v, (Reference, str)) for v in value):
            tag = 'references'
        else:
            tag = 'cartographicDegrees'
    if tag == 'references':
        positions = ReferenceList.coerce(value)
    elif tag == 'cartesian':
        positions = CartesianList.coerce(value)
    elif all(is_number(v) for v in value):
        positions = CartographicList.coerce(value)
    else:
        positions = [v if isinstance(v, Cartographic) else _cartographic(v)
                     for v in value]
    return PropertyValue(POSITION_LIST, value=positions, tag=tag)


def _as_interval(value_type, interval):
    """A copy of ``interval`` with its sample values converted."""
    kwargs = dict((name, getattr(interval, name))
                  for name in INTERPOLATION_FIELDS
                  if getattr(interval, name) is not None)
    if interval.tag is None:
        return Interval(None, (), interval.interval, interval.attributes,
                        **kwargs)
    if interval.tag not in value_type.tags:
        raise TypeError('%s values cannot be written as %s' %
                        (value_type.name, interval.tag))
    primitive = value_type.tags[interval.tag]
    samples = []
    for time, v in interval.samples:
        if time is not None:
            try:
                time = coerce_time(time)
            except ValueError as e:
                raise TypeError(str(e))
        samples.append(Sample(time, primitive.coerce(v)))
    return Interval(interval.tag, samples, interval.interval,
                    interval.attributes, **kwargs)


def as_property_value(value_type, value, tag=None):
    """Make a :class:`PropertyValue` of ``value_type`` from ``value``.

    :param value_type: ValueType
    :param value: a PropertyValue, Reference, Interval or list of them, a
        primitive, a tuple of components, a plain scalar or a geometry
    :param tag: the tag to write the value under, tried in declaration
        order if None
    :return: PropertyValue
    :raises TypeError: the value cannot be converted

    """
    if isinstance(value, PropertyValue):
        if value.value_type is not value_type:
            raise TypeError('expected a %s value, not a %s value' %
                            (value_type.name, value.value_type.name))
        return value
    if isinstance(value, Reference):
        return PropertyValue(value_type, value=value, tag='reference')
    if isinstance(value, Interval):
        return PropertyValue(value_type,
                             intervals=[_as_interval(value_type, value)])
    if (isinstance(value, list) and value and
            all(isinstance(i, Interval) for i in value)):
        return PropertyValue(value_type, listed=True,
                             intervals=[_as_interval(value_type, i)
                                        for i in value])
    if value_type is POSITION_LIST and tag != 'cartesian':
        return as_positions(value, tag)
    if value_type is POSITION and is_geometry(value):
        return PropertyValue(POSITION, value=as_cartographic(value),
                             tag=tag or 'cartographicDegrees')
    if tag is not None:
        if tag not in value_type.tags:
            raise TypeError('%s values cannot be written as %s' %
                            (value_type.name, tag))
        tags = [tag]
    else:
        tags = [t for t in value_type.tags if t != 'reference']
    for t in tags:
        try:
            coerced = value_type.tags[t].coerce(value)
        except (TypeError, ValueError):
            continue
        return PropertyValue(value_type, value=coerced, tag=t,
                             wrapped=t != value_type.shorthand)
    raise TypeError('cannot make a %s value from %r' % (value_type.name, value))


def cartesian(x, y, z):
    return Cartesian3(x, y, z)


def cartographic_degrees(longitude, latitude, height=0):
    return Cartographic(longitude, latitude, height)


def rgba(red, green, blue, alpha=255):
    """A color with integer components 0-255."""
    return Rgba(red, green, blue, alpha)


def rgbaf(red, green, blue, alpha=1.0):
    """A color with float components 0.0-1.0."""
    return Rgbaf(red, green, blue, alpha)


def number(value):
    """A number written wrapped, ``{"number": value}``."""
    return PropertyValue(DOUBLE, value=Double.coerce(value), tag='number')


def reference(target, property=None):
    """

    :param target: ``"id#property"``, or the id when ``property`` is given
    :param property:
    :return: Reference

    """
    if property is not None:
        return Reference(target, property)
    return Reference.coerce(target)


def sampled(tag, samples, interval=None, attributes=None, **interpolation):
    """Build an :class:`Interval` of samples to assign to a property.

    :param tag: how the samples are written, e.g. ``cartesian``
    :param samples: list of ``(time, value)``; time is an ISO 8601 string,
        a datetime or seconds since ``epoch``
    :param interval: the time interval the samples apply to
    :param attributes: e.g. ``{'referenceFrame': 'INERTIAL'}``
    :param interpolation: ``epoch``, ``interpolationAlgorithm``, ...
    :return: Interval

    """
    return Interval(tag, samples, interval, attributes, **interpolation)
