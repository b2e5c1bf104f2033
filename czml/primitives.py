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
"""Primitive CZML values: times, intervals, references, vectors and colors.

Every primitive class doubles as the codec for its JSON encoding and
offers the same classmethods:

``load(data)``
    decode one bare JSON value, raising :class:`DecodeError` on a shape
    mismatch.
``dump(value)``
    encode a value back to JSON.
``coerce(value)``
    build a value from plain Python objects, raising ``TypeError``.

Primitives that can be sampled over time also have an ``arity`` (the
number of JSON numbers per sample) and ``components``/``from_components``
to flatten a value into a sample array and back. Primitives that cannot
be sampled have ``arity = None``.

"""
from itertools import zip_longest
from datetime import datetime, date

import dateutil.parser
from pytz import utc

from .errors import DecodeError


def grouper(iterable, n, fillvalue=None):
    """Collect data into fixed-length chunks.

    :param iterable:
    :param n: chunk length
    :param fillvalue: pads the last chunk
    :return: iterator of tuples

    """
    args = [iter(iterable)] * n
    return zip_longest(*args, fillvalue=fillvalue)


def is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def check_number(value, what='value'):
    if not is_number(value):
        raise DecodeError('%s must be a number, not %r' % (what, value))
    return value


def parse_iso8601(text):
    """Parse an ISO 8601 date and time string into a datetime.

    :param text:
    :return: datetime.datetime
    :raises DecodeError: when the string is not ISO 8601

    """
    try:
        return dateutil.parser.isoparse(text)
    except (ValueError, OverflowError):
        raise DecodeError('%r is not an ISO 8601 date and time' % (text,))


def isoformat(dt):
    """Format a date or datetime the way CZML writes times.

    Naive datetimes are taken to be UTC; aware ones are converted to UTC
    and written with a ``Z`` suffix.

    """
    if isinstance(dt, datetime):
        if dt.tzinfo is None:
            dt = utc.localize(dt)
        else:
            dt = dt.astimezone(utc)
        text = dt.strftime('%Y-%m-%dT%H:%M:%S')
        if dt.microsecond:
            text += ('.%06d' % dt.microsecond).rstrip('0')
        return text + 'Z'
    return dt.isoformat()


def load_time(data):
    """Decode a time tag.

    A time is either an ISO 8601 string, kept verbatim so it is written
    back exactly as read, or a number of seconds since an epoch.

    """
    if isinstance(data, str):
        parse_iso8601(data)
        return data
    if is_number(data):
        return data
    raise DecodeError('time must be an ISO 8601 string or a number, not %r'
                      % (data,))


def dump_time(value):
    if isinstance(value, (date, datetime)):
        return isoformat(value)
    return value


def coerce_time(value, allow_offset=True):
    """Accept a datetime, a date, an ISO 8601 string or seconds since epoch.

    :param value:
    :param allow_offset: whether numbers (seconds since epoch) are allowed
    :return: the value to store
    :raises ValueError:

    """
    if isinstance(value, (date, datetime)):
        return value
    if isinstance(value, str):
        try:
            return load_time(value.strip())
        except DecodeError as e:
            raise ValueError(e.message)
    if allow_offset and is_number(value):
        return value
    raise ValueError('%r is not a time' % (value,))


def as_datetime(value):
    """Return a timezone aware datetime for an ISO 8601 time tag.

    Numeric offsets need an epoch to mean anything and are returned as is.

    """
    if isinstance(value, str):
        value = parse_iso8601(value)
    if isinstance(value, datetime) and value.tzinfo is None:
        value = utc.localize(value)
    return value


def datetime_property(name, allow_offset=False, doc=None):
    """Generates a time property that handles strings, datetimes and numbers.

    The value is stored in ``'_' + name`` as given (strings are
    validated but not converted) so it is written back unchanged.

    :param name:
    :param allow_offset: accept seconds since epoch as well
    :param doc:
    :return: property

    """
    reserved_name = '_' + name

    def getter(self):
        return getattr(self, reserved_name, None)

    def setter(self, dt):
        if dt is None:
            setattr(self, reserved_name, None)
        else:
            setattr(self, reserved_name, coerce_time(dt, allow_offset))

    return property(getter, setter, doc=doc)


class TimeInterval(object):
    """An ISO 8601 time interval ``start/stop``."""

    arity = None

    start = datetime_property('start', doc="""The start of the interval""")
    stop = datetime_property('stop', doc="""The end of the interval""")

    def __init__(self, start, stop):
        """

        :param start: ISO 8601 string or datetime
        :param stop: ISO 8601 string or datetime

        """
        self.start = start
        self.stop = stop

    def data(self):
        return '%s/%s' % (dump_time(self.start), dump_time(self.stop))

    @classmethod
    def load(cls, data):
        if not isinstance(data, str):
            raise DecodeError('interval must be a string, not %r' % (data,))
        parts = data.split('/')
        if len(parts) != 2:
            raise DecodeError('interval %r is not of the form start/stop'
                              % (data,))
        return cls(load_time(parts[0]), load_time(parts[1]))

    @classmethod
    def dump(cls, value):
        return value.data()

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls.load(value.strip())
            except DecodeError as e:
                raise TypeError(e.message)
        if isinstance(value, (list, tuple)) and len(value) == 2:
            return cls(value[0], value[1])
        raise TypeError('cannot make a TimeInterval from %r' % (value,))

    def start_datetime(self):
        return as_datetime(self.start)

    def stop_datetime(self):
        return as_datetime(self.stop)

    def __eq__(self, other):
        return isinstance(other, TimeInterval) and self.data() == other.data()

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self.data())

    def __repr__(self):
        return 'TimeInterval(%r)' % self.data()


class Reference(object):
    """A reference to a property of another object, ``id#property``."""

    arity = None

    def __init__(self, id, property):
        if not id or not property:
            raise ValueError('a reference needs both an id and a property')
        self.id = id
        self.property = property

    def data(self):
        return '%s#%s' % (self.id, self.property)

    @classmethod
    def load(cls, data):
        if not isinstance(data, str):
            raise DecodeError('reference must be a string, not %r' % (data,))
        id, sep, prop = data.rpartition('#')
        if not sep or not id or not prop:
            raise DecodeError('reference %r is not of the form id#property'
                              % (data,))
        return cls(id, prop)

    @classmethod
    def dump(cls, value):
        return value.data()

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls.load(value)
            except DecodeError as e:
                raise TypeError(e.message)
        raise TypeError('cannot make a Reference from %r' % (value,))

    def __eq__(self, other):
        return isinstance(other, Reference) and self.data() == other.data()

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self.data())

    def __repr__(self):
        return 'Reference(%r, %r)' % (self.id, self.property)


class _Vector(object):
    """Base for fixed length numeric values encoded as flat arrays."""

    _fields = ()
    arity = 0

    def __init__(self, *args, **kwargs):
        if len(args) > self.arity:
            raise TypeError('%s takes %d components, %d given' %
                            (self.__class__.__name__, self.arity, len(args)))
        values = dict(zip(self._fields, args))
        for k, v in kwargs.items():
            if k not in self._fields or k in values:
                raise TypeError('%s got an unexpected component %s' %
                                (self.__class__.__name__, k))
            values[k] = v
        for name in self._fields:
            if name not in values:
                raise TypeError('%s is missing component %s' %
                                (self.__class__.__name__, name))
            setattr(self, name, self._check(name, values[name]))

    def _check(self, name, value):
        if not is_number(value):
            raise TypeError('%s.%s must be a number, not %r' %
                            (self.__class__.__name__, name, value))
        return value

    def data(self):
        return [getattr(self, f) for f in self._fields]

    def components(self):
        return self.data()

    @classmethod
    def from_components(cls, components):
        try:
            return cls(*components)
        except (TypeError, ValueError) as e:
            raise DecodeError(str(e))

    @classmethod
    def load(cls, data):
        if not isinstance(data, (list, tuple)) or len(data) != cls.arity:
            raise DecodeError('%s must be an array of %d numbers, not %r' %
                              (cls.__name__, cls.arity, data))
        return cls.from_components(data)

    @classmethod
    def dump(cls, value):
        return value.data()

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, (list, tuple)) and len(value) == cls.arity:
            return cls(*value)
        raise TypeError('cannot make a %s from %r' % (cls.__name__, value))

    def __iter__(self):
        return iter(self.data())

    def __len__(self):
        return self.arity

    def __eq__(self, other):
        return type(other) is type(self) and self.data() == other.data()

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.__class__.__name__,) + tuple(self.data()))

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__,
                           ', '.join(repr(v) for v in self.data()))


class Cartesian3(_Vector):
    """A three dimensional Cartesian value [X, Y, Z]."""

    _fields = ('x', 'y', 'z')
    arity = 3


class Cartesian2(_Vector):
    """A two dimensional Cartesian value [X, Y], e.g. a pixel offset."""

    _fields = ('x', 'y')
    arity = 2


class Cartographic(_Vector):
    """A WGS 84 position [Longitude, Latitude, Height].

    Longitude and latitude are degrees or radians depending on the tag
    the value is written under; height is in meters.

    """

    _fields = ('longitude', 'latitude', 'height')
    arity = 3


class CartesianVelocity(_Vector):
    """A position and velocity [X, Y, Z, dX, dY, dZ]."""

    _fields = ('x', 'y', 'z', 'vx', 'vy', 'vz')
    arity = 6


class UnitQuaternion(_Vector):
    """A rotation [X, Y, Z, W].

    The components are not checked for unit length; clients normalise
    the quaternion themselves.

    """

    _fields = ('x', 'y', 'z', 'w')
    arity = 4


class Rgba(_Vector):
    """A color [Red, Green, Blue, Alpha] with integer components 0-255."""

    _fields = ('red', 'green', 'blue', 'alpha')
    arity = 4

    def _check(self, name, value):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError('Rgba.%s must be an integer, not %r' % (name, value))
        if not 0 <= value <= 255:
            raise ValueError('Rgba.%s must be in the range 0-255, not %r' %
                             (name, value))
        return value


class Rgbaf(_Vector):
    """A color [Red, Green, Blue, Alpha] with components 0.0-1.0."""

    _fields = ('red', 'green', 'blue', 'alpha')
    arity = 4


class Rectangle(_Vector):
    """A cartographic extent [West, South, East, North]."""

    _fields = ('west', 'south', 'east', 'north')
    arity = 4


class NearFarScalar(_Vector):
    """Scalars bound to near and far distances [Near, NearValue, Far, FarValue]."""

    _fields = ('near', 'nearValue', 'far', 'farValue')
    arity = 4


class DistanceDisplayCondition(_Vector):
    """The camera distances [Near, Far] between which an object is shown."""

    _fields = ('near', 'far')
    arity = 2


class BoundingRectangle(_Vector):
    """A rectangle in pixels [X, Y, Width, Height]."""

    _fields = ('x', 'y', 'width', 'height')
    arity = 4


class Double(object):
    """A floating point value written as a bare JSON number.

    Samples are arranged as ``[Time, Value, Time, Value, ...]``.

    """

    arity = 1

    @classmethod
    def load(cls, data):
        return check_number(data, 'number')

    @classmethod
    def dump(cls, value):
        return value

    @classmethod
    def components(cls, value):
        return [value]

    @classmethod
    def from_components(cls, components):
        return cls.load(components[0])

    @classmethod
    def coerce(cls, value):
        if is_number(value):
            return value
        raise TypeError('cannot make a number from %r' % (value,))


class _Scalar(object):
    """Base for values written as one bare JSON scalar, never sampled."""

    arity = None
    _types = ()
    _what = ''

    @classmethod
    def load(cls, data):
        if not isinstance(data, cls._types):
            raise DecodeError('%s must be %s, not %r' %
                              (cls.__name__, cls._what, data))
        return data

    @classmethod
    def dump(cls, value):
        return value

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls._types):
            return value
        raise TypeError('cannot make a %s from %r' % (cls.__name__, value))


class Boolean(_Scalar):
    _types = (bool,)
    _what = 'true or false'


class String(_Scalar):
    _types = (str,)
    _what = 'a string'


class Uri(_Scalar):
    """A URL or data URI."""

    _types = (str,)
    _what = 'a URI string'


class _VectorList(object):
    """Base for a list of vectors written as one flat array."""

    arity = None
    item = None

    @classmethod
    def load(cls, data):
        n = cls.item.arity
        if not isinstance(data, list) or len(data) % n:
            raise DecodeError('%s must be a flat array with a multiple of %d '
                              'numbers, not %r' % (cls.__name__, n, data))
        return [cls.item.from_components(chunk) for chunk in grouper(data, n)]

    @classmethod
    def dump(cls, value):
        flat = []
        for v in value:
            flat.extend(v.data())
        return flat

    @classmethod
    def coerce(cls, value):
        if not isinstance(value, (list, tuple)):
            raise TypeError('cannot make a %s from %r' % (cls.__name__, value))
        if all(is_number(v) for v in value):
            if len(value) % cls.item.arity:
                raise TypeError('%s needs a multiple of %d numbers' %
                                (cls.__name__, cls.item.arity))
            value = list(grouper(value, cls.item.arity))
        return [cls.item.coerce(v) for v in value]


class CartesianList(_VectorList):
    """Positions [X, Y, Z, X, Y, Z, ...]."""

    item = Cartesian3


class CartographicList(_VectorList):
    """Positions [Longitude, Latitude, Height, Longitude, Latitude, Height, ...]."""

    item = Cartographic


class ReferenceList(object):
    """A list of references, each to a property that defines one value."""

    arity = None

    @classmethod
    def load(cls, data):
        if not isinstance(data, list):
            raise DecodeError('references must be an array, not %r' % (data,))
        return [Reference.load(d) for d in data]

    @classmethod
    def dump(cls, value):
        return [v.data() for v in value]

    @classmethod
    def coerce(cls, value):
        if not isinstance(value, (list, tuple)):
            raise TypeError('cannot make references from %r' % (value,))
        return [Reference.coerce(v) for v in value]


class DoubleList(object):
    """A list of numbers, e.g. the heights of a wall."""

    arity = None

    @classmethod
    def load(cls, data):
        if not isinstance(data, list):
            raise DecodeError('array must be a JSON array, not %r' % (data,))
        return [check_number(d, 'array element') for d in data]

    @classmethod
    def dump(cls, value):
        return list(value)

    @classmethod
    def coerce(cls, value):
        if isinstance(value, (list, tuple)) and all(is_number(v) for v in value):
            return list(value)
        raise TypeError('cannot make a list of numbers from %r' % (value,))


class JsonValue(object):
    """Any JSON value but null, the value of a custom property."""

    arity = None

    @classmethod
    def load(cls, data):
        if data is None:
            raise DecodeError('a custom value must not be null')
        return data

    @classmethod
    def dump(cls, value):
        return value

    @classmethod
    def coerce(cls, value):
        if isinstance(value, (str, bool)) or is_number(value):
            return value
        if isinstance(value, (list, tuple)):
            return [cls.coerce(v) for v in value]
        raise TypeError('cannot make a custom value from %r' % (value,))
