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
"""Property values that are either constant or vary over time intervals.

Almost every CZML property can be written in several shapes::

    "scale": 0.7
    "scale": {"number": 0.7}
    "scale": {"interval": "2012-01-01T00:00:00Z/2012-01-02T00:00:00Z",
              "number": [0, 0.7, 3600, 1.4]}
    "scale": [{"interval": "...", "number": 0.7},
              {"interval": "...", "number": 1.4}]
    "scale": {"reference": "other#billboard.scale"}

A :class:`PropertyValue` holds either a constant (the first two and the
last shape) or a list of :class:`Interval` (the other two), and writes
back exactly the shape it was read from.

"""
from collections import namedtuple, OrderedDict

from .errors import DecodeError, EncodeError
from .primitives import (
    grouper, load_time, dump_time, datetime_property, is_number,
    TimeInterval, Reference, Double, Boolean, String, Uri,
    Cartesian3, Cartesian2, Cartographic, CartesianVelocity, UnitQuaternion,
    Rgba, Rgbaf, Rectangle, NearFarScalar, DistanceDisplayCondition,
    BoundingRectangle, CartesianList, CartographicList, ReferenceList,
    DoubleList, JsonValue,
)


Sample = namedtuple('Sample', 'time value')
Sample.__doc__ = """A value at a time; ``time`` is None for an untagged value."""


def _load_epoch(data):
    if not isinstance(data, str):
        raise DecodeError('epoch must be an ISO 8601 string, not %r' % (data,))
    return load_time(data)


def _load_degree(data):
    if not isinstance(data, int) or isinstance(data, bool):
        raise DecodeError('interpolationDegree must be an integer, not %r'
                          % (data,))
    return data


# The fields that describe how samples are interpolated and extrapolated.
INTERPOLATION_FIELDS = OrderedDict([
    ('epoch', _load_epoch),
    ('nextTime', load_time),
    ('previousTime', load_time),
    ('interpolationAlgorithm', String.load),
    ('interpolationDegree', _load_degree),
    ('forwardExtrapolationType', String.load),
    ('forwardExtrapolationDuration', Double.load),
    ('backwardExtrapolationType', String.load),
    ('backwardExtrapolationDuration', Double.load),
])


class ValueType(object):
    """The JSON tags a kind of property value may be written with.

    :param name: name used in messages
    :param tags: sequence of ``(tag, primitive)`` pairs, first one is the
        default tag; ``reference`` is always added
    :param shorthand: tag whose value may be written bare, without the
        enclosing object
    :param attributes: plain string keys allowed beside the value, such
        as ``referenceFrame``

    """

    def __init__(self, name, tags, shorthand=None, attributes=()):
        self.name = name
        self.tags = OrderedDict(tags)
        self.tags.setdefault('reference', Reference)
        self.shorthand = shorthand
        self.attributes = tuple(attributes)

    def tag_for(self, value):
        """The tag a bare Python value is written under by default."""
        if isinstance(value, Reference):
            return 'reference'
        for tag, primitive in self.tags.items():
            if isinstance(primitive, type) and isinstance(value, primitive):
                return tag
        if self.shorthand is not None:
            return self.shorthand
        return next(iter(self.tags))

    def is_known(self, key):
        """Whether ``key`` may appear in a value object of this type."""
        return (key in self.tags or key in self.attributes or
                key == 'interval' or key in INTERPOLATION_FIELDS)

    def find_tag(self, data):
        found = [k for k in data if k in self.tags]
        if len(found) > 1:
            raise DecodeError('%s value has more than one of %s' %
                              (self.name, ', '.join(found)))
        if found:
            return found[0]

    def __repr__(self):
        return '<ValueType %s>' % self.name


def enumeration(name, tag):
    """A string valued property such as ``horizontalOrigin``."""
    return ValueType(name, [(tag, String)], shorthand=tag)


DOUBLE = ValueType('Double', [('number', Double)], shorthand='number')
BOOLEAN = ValueType('Boolean', [('boolean', Boolean)], shorthand='boolean')
STRING = ValueType('String', [('string', String)], shorthand='string')
URI = ValueType('Uri', [('uri', Uri)], shorthand='uri')
FONT = ValueType('Font', [('font', String)], shorthand='font')
LABEL_STYLE = enumeration('LabelStyle', 'labelStyle')
HORIZONTAL_ORIGIN = enumeration('HorizontalOrigin', 'horizontalOrigin')
VERTICAL_ORIGIN = enumeration('VerticalOrigin', 'verticalOrigin')
STRIPE_ORIENTATION = enumeration('StripeOrientation', 'stripeOrientation')
COLOR = ValueType('Color', [('rgba', Rgba), ('rgbaf', Rgbaf)])
POSITION = ValueType('Position', [
    ('cartesian', Cartesian3),
    ('cartographicDegrees', Cartographic),
    ('cartographicRadians', Cartographic),
    ('cartesianVelocity', CartesianVelocity),
], attributes=('referenceFrame',))
CARTESIAN3 = ValueType('Cartesian3', [('cartesian', Cartesian3)])
CARTESIAN2 = ValueType('Cartesian2', [('cartesian2', Cartesian2)])
ALIGNED_AXIS = ValueType('AlignedAxis', [('unitCartesian', Cartesian3)])
ORIENTATION = ValueType('Orientation', [('unitQuaternion', UnitQuaternion)])
NEAR_FAR_SCALAR = ValueType('NearFarScalar', [('nearFarScalar', NearFarScalar)])
DISTANCE_DISPLAY_CONDITION = ValueType('DistanceDisplayCondition', [
    ('distanceDisplayCondition', DistanceDisplayCondition)])
RECTANGLE_COORDINATES = ValueType('RectangleCoordinates', [
    ('wsenDegrees', Rectangle), ('wsen', Rectangle)])
BOUNDING_RECTANGLE = ValueType('BoundingRectangle', [
    ('boundingRectangle', BoundingRectangle)])
POSITION_LIST = ValueType('PositionList', [
    ('cartesian', CartesianList),
    ('cartographicDegrees', CartographicList),
    ('cartographicRadians', CartographicList),
    ('references', ReferenceList),
], attributes=('referenceFrame',))
DOUBLE_LIST = ValueType('DoubleList', [('array', DoubleList)], shorthand='array')
CUSTOM = ValueType('Custom', [('value', JsonValue)], shorthand='value')


def _is_untagged(primitive, data):
    if primitive.arity is None:
        return True
    if primitive.arity == 1:
        return not isinstance(data, list)
    return isinstance(data, list) and len(data) == primitive.arity


def load_samples(primitive, data):
    """Decode the value of a tag into a list of :class:`Sample`.

    A value of the primitive's own shape is one untagged sample, anything
    else must be a flat array ``[Time, v1, ..., vn, Time, v1, ..., vn]``.

    """
    if _is_untagged(primitive, data):
        return [Sample(None, primitive.load(data))]
    if not isinstance(data, list):
        raise DecodeError('expected an array of samples, not %r' % (data,))
    n = primitive.arity + 1
    if len(data) % n:
        raise DecodeError('sample array of length %d is neither a single '
                          'value nor a multiple of %d' % (len(data), n))
    samples = []
    for chunk in grouper(data, n):
        samples.append(Sample(load_time(chunk[0]),
                              primitive.from_components(chunk[1:])))
    return samples


def dump_samples(primitive, samples):
    if len(samples) == 1 and samples[0].time is None:
        return primitive.dump(samples[0].value)
    if primitive.arity is None:
        raise EncodeError('%s values cannot be sampled over time' %
                          primitive.__name__)
    flat = []
    for sample in samples:
        if sample.time is None:
            raise EncodeError('only a single sample may lack a time')
        flat.append(dump_time(sample.time))
        flat.extend(primitive.components(sample.value))
    return flat


def _report_unknown(value_type, data, report, path):
    if report is None:
        return
    for k in data:
        if not value_type.is_known(k):
            report.ignore(path + (k,))


def _load_attributes(value_type, data):
    attributes = OrderedDict()
    for name in value_type.attributes:
        if name in data:
            attributes[name] = String.load(data[name])
    return attributes


class Interval(object):
    """One time interval of a property value.

    ``samples`` is the ordered list of :class:`Sample`; a single sample
    without time is the constant value over the interval. ``tag`` names
    the encoding of the samples and is None when the interval carries no
    value at all.

    """

    epoch = datetime_property('epoch', doc=
    """Specifies the epoch to use for times specified as seconds since an epoch.""")
    nextTime = datetime_property('nextTime', allow_offset=True, doc=
    """The time of the next sample within this interval, specified as
    either an ISO 8601 date and time string or as seconds since epoch.
    This property is used to determine if there is a gap between samples
    specified in different packets.""")
    previousTime = datetime_property('previousTime', allow_offset=True, doc=
    """The time of the previous sample within this interval, specified
    as either an ISO 8601 date and time string or as seconds since epoch.
    This property is used to determine if there is a gap between samples
    specified in different packets.""")

    interpolationAlgorithm = None
    interpolationDegree = None
    forwardExtrapolationType = None
    forwardExtrapolationDuration = None
    backwardExtrapolationType = None
    backwardExtrapolationDuration = None

    def __init__(self, tag=None, samples=None, interval=None, attributes=None,
                 **kwargs):
        """

        :param tag: the JSON tag of the samples, e.g. ``cartesian``
        :param samples: list of Sample or (time, value) pairs
        :param interval: TimeInterval, ``start/stop`` string or pair
        :param attributes: e.g. ``{'referenceFrame': 'INERTIAL'}``
        :param kwargs: interpolation fields

        """
        self.tag = tag
        self.samples = [Sample(*s) for s in (samples or ())]
        self.interval = (None if interval is None
                         else TimeInterval.coerce(interval))
        self.attributes = OrderedDict(attributes or ())
        for k, v in kwargs.items():
            if k not in INTERPOLATION_FIELDS:
                raise TypeError('Unknown parameter: %s' % k)
            setattr(self, k, v)

    @property
    def start(self):
        if self.interval is not None:
            return self.interval.start

    @property
    def stop(self):
        if self.interval is not None:
            return self.interval.stop

    @classmethod
    def load(cls, value_type, data, tag=None, report=None, path=()):
        """Decode one interval object.

        :param value_type: ValueType of the enclosing property value
        :param data: dict
        :param tag: the value tag when the caller already found it
        :param report: DecodeReport recording keys that are not understood
        :param path: location of ``data`` in the document
        :return: Interval

        """
        if tag is None:
            tag = value_type.find_tag(data)
        _report_unknown(value_type, data, report, path)
        interval = None
        if 'interval' in data:
            try:
                interval = TimeInterval.load(data['interval'])
            except DecodeError as e:
                raise e.prefixed('interval')
        samples = []
        if tag is not None:
            try:
                samples = load_samples(value_type.tags[tag], data[tag])
            except DecodeError as e:
                raise e.prefixed(tag)
        kwargs = {}
        for name, loader in INTERPOLATION_FIELDS.items():
            if name in data:
                try:
                    kwargs[name] = loader(data[name])
                except DecodeError as e:
                    raise e.prefixed(name)
        return cls(tag, samples, interval, _load_attributes(value_type, data),
                   **kwargs)

    def data(self, value_type):
        """

        :param value_type: ValueType giving the codec for ``tag``
        :return: OrderedDict

        """
        d = OrderedDict()
        if self.interval is not None:
            d['interval'] = self.interval.data()
        d.update(self.attributes)
        for name in INTERPOLATION_FIELDS:
            value = getattr(self, name)
            if value is not None:
                d[name] = dump_time(value)
        if self.tag is not None:
            if self.tag not in value_type.tags:
                raise EncodeError('%s values cannot be written as %s' %
                                  (value_type.name, self.tag))
            d[self.tag] = dump_samples(value_type.tags[self.tag], self.samples)
        return d

    def _key(self):
        return (self.tag, self.samples, self.interval, dict(self.attributes),
                [getattr(self, name) for name in INTERPOLATION_FIELDS])

    def __eq__(self, other):
        return isinstance(other, Interval) and self._key() == other._key()

    def __ne__(self, other):
        return not self.__eq__(other)

    def __len__(self):
        return len(self.samples)

    def __repr__(self):
        return '<Interval %s %s: %d samples>' % (
            self.interval.data() if self.interval else '*', self.tag,
            len(self.samples))


class PropertyValue(object):
    """A property value, constant or given over time intervals.

    Exactly one form is populated:

    * constant: ``value`` written under ``tag``; ``wrapped`` is False
      when it is written bare (``0.7`` rather than ``{"number": 0.7}``),
      which is only possible for the value type's shorthand tag;
    * intervals: ``intervals`` is a list of :class:`Interval`; ``listed``
      tells whether a single interval is written as a one element array
      rather than a plain object.

    """

    def __init__(self, value_type, value=None, tag=None, intervals=None,
                 wrapped=True, listed=False, attributes=None):
        """

        :param value_type: ValueType
        :param value: the constant value
        :param tag: JSON tag of the constant, guessed from the value if None
        :param intervals: list of Interval for the interval form
        :param wrapped:
        :param listed:
        :param attributes: e.g. ``{'referenceFrame': 'FIXED'}``

        """
        self.value_type = value_type
        if intervals is not None:
            if value is not None:
                raise ValueError('a property value is either constant or '
                                 'given over intervals, not both')
            self.intervals = list(intervals)
            self.value = None
            self.tag = None
        else:
            if value is None:
                raise ValueError('a constant property value needs a value')
            self.intervals = None
            self.value = value
            self.tag = tag or value_type.tag_for(value)
            if self.tag not in value_type.tags:
                raise ValueError('%s values cannot be written as %s' %
                                 (value_type.name, self.tag))
        if not wrapped and (intervals is not None or
                            self.tag != value_type.shorthand):
            raise ValueError('only %s values may be written bare' %
                             value_type.shorthand)
        self.wrapped = wrapped
        self.listed = listed
        self.attributes = OrderedDict(attributes or ())

    @property
    def is_constant(self):
        return self.intervals is None

    @property
    def is_interval(self):
        return self.intervals is not None

    @property
    def is_reference(self):
        return self.tag == 'reference'

    @classmethod
    def load(cls, value_type, data, report=None, path=()):
        """Decode a property value of the given type.

        Errors are located relative to ``data``; keys that are not
        understood are recorded in ``report`` below ``path``.

        :param value_type: ValueType
        :param data: the JSON value
        :param report: DecodeReport or None
        :param path: location of ``data`` in the document
        :return: PropertyValue
        :raises DecodeError: the value has neither a constant nor an
            interval shape

        """
        if isinstance(data, list):
            if (value_type.shorthand is not None and data and
                    not any(isinstance(d, dict) for d in data)):
                return cls._load_bare(value_type, data)
            intervals = []
            for i, item in enumerate(data):
                if not isinstance(item, dict):
                    raise DecodeError('interval must be a JSON object, not %r'
                                      % (item,), (i,))
                try:
                    intervals.append(Interval.load(value_type, item,
                                                   report=report,
                                                   path=path + (i,)))
                except DecodeError as e:
                    raise e.prefixed(i)
            return cls(value_type, intervals=intervals, listed=True)
        if isinstance(data, dict):
            tag = value_type.find_tag(data)
            if cls._has_interval_shape(value_type, data, tag):
                return cls(value_type,
                           intervals=[Interval.load(value_type, data, tag,
                                                    report, path)])
            if tag is not None:
                try:
                    value = value_type.tags[tag].load(data[tag])
                except DecodeError as e:
                    raise e.prefixed(tag)
                _report_unknown(value_type, data, report, path)
                return cls(value_type, value=value, tag=tag,
                           attributes=_load_attributes(value_type, data))
        elif data is not None and value_type.shorthand is not None:
            return cls._load_bare(value_type, data)
        raise DecodeError('%s property value has neither constant nor '
                          'interval shape: %r' % (value_type.name, data))

    @classmethod
    def _load_bare(cls, value_type, data):
        try:
            value = value_type.tags[value_type.shorthand].load(data)
        except DecodeError as e:
            raise DecodeError('%s property value has neither constant nor '
                              'interval shape (%s)' % (value_type.name, e))
        return cls(value_type, value=value, tag=value_type.shorthand,
                   wrapped=False)

    @staticmethod
    def _has_interval_shape(value_type, data, tag):
        if 'interval' in data:
            return True
        if any(name in data for name in INTERPOLATION_FIELDS):
            return True
        if tag is None:
            return False
        return not _is_untagged(value_type.tags[tag], data[tag])

    def data(self):
        """Encode the value in the shape it was read or built in.

        :return: JSON value
        :raises EncodeError:

        """
        if self.intervals is not None:
            intervals = [i.data(self.value_type) for i in self.intervals]
            if self.listed or len(intervals) != 1:
                return intervals
            return intervals[0]
        if self.value is None:
            raise EncodeError('%s property value has neither a value nor '
                              'intervals' % self.value_type.name)
        value = self.value_type.tags[self.tag].dump(self.value)
        if not self.wrapped:
            return value
        d = OrderedDict(self.attributes)
        d[self.tag] = value
        return d

    def samples(self):
        """All samples of all intervals, in order; a constant is one sample."""
        if self.intervals is None:
            return [Sample(None, self.value)]
        return [s for i in self.intervals for s in i.samples]

    def _key(self):
        return (self.value_type.name, self.tag, self.value, self.wrapped,
                dict(self.attributes), self.intervals,
                self.listed or (self.intervals is not None and
                                len(self.intervals) != 1))

    def __eq__(self, other):
        if isinstance(other, PropertyValue):
            return self._key() == other._key()
        # a constant compares equal to its plain value
        if self.is_constant and (is_number(other) or isinstance(other, str)):
            return self.value == other
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self):
        if self.intervals is None:
            return 'PropertyValue(%s, %s=%r)' % (self.value_type.name,
                                                 self.tag, self.value)
        return 'PropertyValue(%s, %d intervals)' % (self.value_type.name,
                                                    len(self.intervals))
