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
try:
    import simplejson as json
except ImportError:
    import json

from collections import OrderedDict

from .errors import DecodeError, DecodeReport, EncodeError
from .primitives import (
    load_time, dump_time, coerce_time, TimeInterval, Double, Boolean, String,
    JsonValue,
)
from .values import (
    PropertyValue, DOUBLE, BOOLEAN, STRING, URI, FONT, COLOR, POSITION,
    CARTESIAN2, CARTESIAN3, ALIGNED_AXIS, ORIENTATION, NEAR_FAR_SCALAR,
    DISTANCE_DISPLAY_CONDITION, RECTANGLE_COORDINATES, BOUNDING_RECTANGLE,
    POSITION_LIST, DOUBLE_LIST, CUSTOM, LABEL_STYLE, HORIZONTAL_ORIGIN,
    VERTICAL_ORIGIN, STRIPE_ORIENTATION,
)
from .convert import as_property_value, as_time_interval, is_geometry

# Horizontal and vertical origins of billboards and labels.
LEFT = 'LEFT'
CENTER = 'CENTER'
RIGHT = 'RIGHT'
BOTTOM = 'BOTTOM'
TOP = 'TOP'
# Label styles.
FILL = 'FILL'
OUTLINE = 'OUTLINE'
FILL_AND_OUTLINE = 'FILL_AND_OUTLINE'
# Stripe orientations.
HORIZONTAL = 'HORIZONTAL'
VERTICAL = 'VERTICAL'
# Clock ranges.
UNBOUNDED = 'UNBOUNDED'
CLAMPED = 'CLAMPED'
LOOP_STOP = 'LOOP_STOP'
# Clock steps.
SYSTEM_CLOCK = 'SYSTEM_CLOCK'
SYSTEM_CLOCK_MULTIPLIER = 'SYSTEM_CLOCK_MULTIPLIER'
TICK_DEPENDENT = 'TICK_DEPENDENT'
# Reference frames.
FIXED = 'FIXED'
INERTIAL = 'INERTIAL'


class _Field(property):
    """A property that also knows how its value is read from and written to JSON.

    The value is kept in ``'_' + name``. ``decode(data, report, path)``
    returns the typed value or raises :class:`DecodeError` located at
    ``path``; ``encode(value)`` returns the JSON value.

    """

    def __init__(self, name, coerce, decode, encode, doc=None):
        hidden_attribute = '_' + name

        def getter(self):
            return getattr(self, hidden_attribute, None)

        def setter(self, val):
            if val is None:
                setattr(self, hidden_attribute, None)
            else:
                setattr(self, hidden_attribute, coerce(val))

        super(_Field, self).__init__(getter, setter, doc=doc)
        self.name = name
        self.decode = decode
        self.encode = encode


def value_property(value_type, name, doc=None):
    """A field holding a :class:`PropertyValue` of ``value_type``.

    Anything :func:`as_property_value` understands can be assigned, so
    ``billboard.scale = 0.7`` works the same as assigning a PropertyValue.

    """

    def coerce(val):
        return as_property_value(value_type, val)

    def decode(data, report, path):
        try:
            return PropertyValue.load(value_type, data, report, path)
        except DecodeError as e:
            raise e.prefixed(*path)

    def encode(val):
        return val.data()

    return _Field(name, coerce, decode, encode, doc)


def class_property(cls, name, doc=None):
    """A field holding a nested record such as a material.

    Assigning a dict loads it into a new ``cls``; any other value must
    work as the only input to ``cls``.

    """

    def coerce(val):
        if isinstance(val, cls):
            return val
        elif isinstance(val, dict):
            m = cls()
            m.load(val)
            return m
        # See if this value works as the only input to cls
        try:
            return cls(val)
        except TypeError:
            raise TypeError('Property %s must be of class %s. %s was provided.' %
                            (name, cls.__name__, val.__class__.__name__))

    def decode(data, report, path):
        m = cls()
        m.load(data, report, path)
        return m

    def encode(val):
        return val.data()

    return _Field(name, coerce, decode, encode, doc)


def mapping_property(cls, name, doc=None):
    """A field holding a mapping of names to ``cls`` records."""

    def coerce(val):
        if not isinstance(val, dict):
            raise TypeError('Property %s must be a dict, not %s' %
                            (name, val.__class__.__name__))
        d = OrderedDict()
        for k, v in val.items():
            if isinstance(v, cls):
                d[k] = v
            elif isinstance(v, dict):
                m = cls()
                m.load(v)
                d[k] = m
            else:
                raise TypeError('Property %s.%s must be of class %s. %s was provided.' %
                                (name, k, cls.__name__, v.__class__.__name__))
        return d

    def decode(data, report, path):
        if not isinstance(data, dict):
            raise DecodeError('%s must be a JSON object, not %r' % (name, data),
                              path)
        d = OrderedDict()
        for k, v in data.items():
            m = cls()
            try:
                m.load(v, report, path + (k,))
            except DecodeError as e:
                if report is None:
                    raise
                report.skip(e)
                continue
            d[k] = m
        return d

    def encode(val):
        return OrderedDict((k, v.data()) for k, v in val.items())

    return _Field(name, coerce, decode, encode, doc)


def scalar_property(primitive, name, doc=None):
    """A field holding a plain JSON scalar, e.g. a packet id."""

    def decode(data, report, path):
        try:
            return primitive.load(data)
        except DecodeError as e:
            raise e.prefixed(*path)

    return _Field(name, primitive.coerce, decode, primitive.dump, doc)


def time_property(name, doc=None):
    """A field holding a time, an ISO 8601 string or a datetime."""

    def coerce(val):
        return coerce_time(val, allow_offset=False)

    def decode(data, report, path):
        if not isinstance(data, str):
            raise DecodeError('%s must be an ISO 8601 string, not %r' %
                              (name, data), path)
        try:
            return load_time(data)
        except DecodeError as e:
            raise e.prefixed(*path)

    return _Field(name, coerce, decode, dump_time, doc)


def interval_property(name, doc=None):
    """A field holding one :class:`TimeInterval`."""

    def decode(data, report, path):
        try:
            return TimeInterval.load(data)
        except DecodeError as e:
            raise e.prefixed(*path)

    return _Field(name, as_time_interval, decode, TimeInterval.dump, doc)


class _CZMLBaseObject(object):
    """Implements behavior for loading parameters and formatting/loading to the CZML standard.

    Subclasses declare their fields with the ``*_property`` helpers and
    list their names, in output order, in ``_properties``.

    """

    _properties = ()

    def __init__(self, **kwargs):
        """Default init functionality is to set kwargs

        :param kwargs: field values
        :raises TypeError: for keywords that are not fields

        """
        for k, v in kwargs.items():
            if k not in self._properties:
                raise TypeError('Key word %s not known' % k)
            setattr(self, k, v)

    def dumps(self, **kwargs):
        """

        :param kwargs: passed on to ``json.dumps``, e.g. ``indent``
        :return: JSON text

        """
        return json.dumps(self.data(), **kwargs)

    def data(self):
        """

        :return: OrderedDict of the fields that are set

        """
        d = OrderedDict()
        for attr in self._properties:
            a = getattr(self, attr)
            if a is not None:
                d[attr] = getattr(type(self), attr).encode(a)
        return d

    def loads(self, data, report=None):
        """

        :param data: JSON text
        :param report: DecodeReport for a tolerant decode

        """
        self.load(json.loads(data), report)

    def load(self, data, report=None, path=()):
        """Set the fields found in ``data``.

        Without a report the first :class:`DecodeError` propagates. With a
        report malformed fields are left unset and recorded in it, and
        keys that are not fields are recorded as ignored.

        :param data: dict
        :param report: DecodeReport or None
        :param path: location of ``data`` in the document

        """
        if not isinstance(data, dict):
            raise DecodeError('%s must be a JSON object, not %r' %
                              (self.__class__.__name__, data), path)
        for k, v in data.items():
            if k in self._properties:
                self._load_field(k, v, report, path)
            elif report is not None:
                report.ignore(path + (k,))

    def _load_field(self, name, value, report, path):
        field = getattr(type(self), name)
        try:
            setattr(self, '_' + name, field.decode(value, report, path + (name,)))
        except DecodeError as e:
            if report is None:
                raise
            report.skip(e)

    def __eq__(self, other):
        return type(other) is type(self) and self.data() == other.data()

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = None

    def __repr__(self):
        return '<%s %s>' % (self.__class__.__name__,
                            ' '.join(k for k in self._properties
                                     if getattr(self, k) is not None))


class _ValueProperty(_CZMLBaseObject):
    """A packet property whose JSON is a single property value."""

    kind = None
    value_type = None

    def __init__(self, value=None, **kwargs):
        """

        :param value: anything :func:`as_property_value` accepts
        :param kwargs: the value under an explicit tag, e.g.
            ``cartographicDegrees=(8.5, 47.3, 400)``, and attributes
            such as ``referenceFrame``

        """
        attributes = OrderedDict((k, kwargs.pop(k))
                                 for k in self.value_type.attributes
                                 if k in kwargs)
        tag = None
        if kwargs:
            if len(kwargs) > 1 or value is not None:
                raise TypeError('%s takes a single value' %
                                self.__class__.__name__)
            tag, value = kwargs.popitem()
            if tag not in self.value_type.tags:
                raise TypeError('Key word %s not known' % tag)
        self._value = None
        if value is not None:
            self._value = as_property_value(self.value_type, value, tag)
        if attributes:
            if self._value is None:
                raise TypeError('%s attributes need a value' %
                                self.__class__.__name__)
            self._value.attributes.update(attributes)

    @property
    def value(self):
        """The :class:`PropertyValue`."""
        return self._value

    @value.setter
    def value(self, value):
        if value is None:
            self._value = None
        else:
            self._value = as_property_value(self.value_type, value)

    def data(self):
        if self._value is None:
            raise EncodeError('%s has no value' % self.kind)
        return self._value.data()

    def load(self, data, report=None, path=()):
        try:
            self._value = PropertyValue.load(self.value_type, data, report, path)
        except DecodeError as e:
            raise e.prefixed(*path)

    def __eq__(self, other):
        return type(other) is type(self) and self._value == other._value

    def __repr__(self):
        return '<%s %r>' % (self.__class__.__name__, self._value)


class Position(_ValueProperty):
    """ The position of the object in the world.

    The position has no direct visual representation, but it is used to locate billboards,
    labels, and other primitives attached to the object.

    The value is written as ``cartesian`` [X, Y, Z] in meters relative to
    the ``referenceFrame``, ``cartographicDegrees`` or
    ``cartographicRadians`` [Longitude, Latitude, Height], or
    ``cartesianVelocity``. The reference frame is "FIXED" or "INERTIAL",
    or a hash (#) symbol followed by the ID of another object whose
    position and orientation define the frame; the default is "FIXED".

    """

    kind = 'position'
    value_type = POSITION


class Orientation(_ValueProperty):
    """The orientation of the object in the world.
    The orientation has no direct visual representation, but it is used
    to orient models attached to the object.

    """

    kind = 'orientation'
    value_type = ORIENTATION


class ViewFrom(_ValueProperty):
    """A suggested camera offset when tracking this object, [X, Y, Z] in
    the east-north-up frame of the object's position."""

    kind = 'viewFrom'
    value_type = CARTESIAN3


class Description(_ValueProperty):
    """An HTML description of the object."""

    kind = 'description'
    value_type = STRING


class Availability(object):
    """The set of time intervals over which data for an object is available.

    The property can be a single string specifying a single interval, or
    an array of strings representing intervals; which one was read is
    kept in ``listed``.

    """

    kind = 'availability'

    def __init__(self, intervals=None):
        """

        :param intervals: one interval (``"start/stop"``, a ``(start,
            stop)`` tuple or TimeInterval) or a list of them

        """
        if intervals is None:
            self.intervals = []
            self.listed = False
        elif isinstance(intervals, list):
            self.intervals = [as_time_interval(i) for i in intervals]
            self.listed = True
        else:
            self.intervals = [as_time_interval(intervals)]
            self.listed = False

    def data(self):
        values = [i.data() for i in self.intervals]
        if not self.listed and len(values) == 1:
            return values[0]
        return values

    def dumps(self, **kwargs):
        return json.dumps(self.data(), **kwargs)

    def load(self, data, report=None, path=()):
        if isinstance(data, list):
            intervals = []
            for i, d in enumerate(data):
                try:
                    intervals.append(TimeInterval.load(d))
                except DecodeError as e:
                    raise e.prefixed(*(path + (i,)))
            self.intervals = intervals
            self.listed = True
        else:
            try:
                self.intervals = [TimeInterval.load(data)]
            except DecodeError as e:
                raise e.prefixed(*path)
            self.listed = False

    def __eq__(self, other):
        return isinstance(other, Availability) and self.data() == other.data()

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = None

    def __repr__(self):
        return '<Availability %r>' % (self.data(),)


class NodeTransformation(_CZMLBaseObject):
    """A transformation to apply to a particular node of a model."""

    translation = value_property(CARTESIAN3, 'translation', doc=
    """The x, y, and z translation in meters.""")
    rotation = value_property(ORIENTATION, 'rotation')
    scale = value_property(CARTESIAN3, 'scale', doc=
    """The x, y, and z scaling.""")

    _properties = ('translation', 'rotation', 'scale')


class SolidColorMaterial(_CZMLBaseObject):
    """Fills the surface with a solid color, which may be translucent."""

    color = value_property(COLOR, 'color')

    _properties = ('color',)


class ImageMaterial(_CZMLBaseObject):
    """Fills the surface with an image."""

    image = value_property(URI, 'image', doc=
    """The image to display on the surface.""")
    repeat = value_property(CARTESIAN2, 'repeat', doc=
    """The number of times the image repeats along each axis.""")
    color = value_property(COLOR, 'color')
    transparent = value_property(BOOLEAN, 'transparent')

    _properties = ('image', 'repeat', 'color', 'transparent')


class GridMaterial(_CZMLBaseObject):
    """Fills the surface with a grid."""

    color = value_property(COLOR, 'color')
    cellAlpha = value_property(DOUBLE, 'cellAlpha', doc=
    """Alpha value for the space between grid lines.""")
    lineCount = value_property(CARTESIAN2, 'lineCount')
    lineThickness = value_property(CARTESIAN2, 'lineThickness')
    lineOffset = value_property(CARTESIAN2, 'lineOffset')

    _properties = ('color', 'cellAlpha', 'lineCount', 'lineThickness',
                   'lineOffset')


class StripeMaterial(_CZMLBaseObject):
    """Fills the surface with alternating colors."""

    orientation = value_property(STRIPE_ORIENTATION, 'orientation', doc=
    """HORIZONTAL or VERTICAL.""")
    evenColor = value_property(COLOR, 'evenColor')
    oddColor = value_property(COLOR, 'oddColor')
    offset = value_property(DOUBLE, 'offset')
    repeat = value_property(DOUBLE, 'repeat')

    _properties = ('orientation', 'evenColor', 'oddColor', 'offset', 'repeat')


class PolylineOutlineMaterial(_CZMLBaseObject):
    """Colors the line with a color and outline."""

    color = value_property(COLOR, 'color')
    outlineColor = value_property(COLOR, 'outlineColor')
    outlineWidth = value_property(DOUBLE, 'outlineWidth')

    _properties = ('color', 'outlineColor', 'outlineWidth')


class PolylineGlowMaterial(_CZMLBaseObject):
    """Colors the line with a glowing color."""

    color = value_property(COLOR, 'color')
    glowPower = value_property(DOUBLE, 'glowPower', doc=
    """The strength of the glow, as a fraction of the line width.""")

    _properties = ('color', 'glowPower')


class PolylineArrowMaterial(_CZMLBaseObject):
    """Draws the line as an arrow."""

    color = value_property(COLOR, 'color')

    _properties = ('color',)


class Material(_CZMLBaseObject):
    """The material to use to fill a surface.

    Exactly one of the sub-materials is expected to be set.

    """

    solidColor = class_property(SolidColorMaterial, 'solidColor', doc=
    """Fills the surface with a solid color, which may be translucent.""")
    image = class_property(ImageMaterial, 'image', doc=
    """The image to display on the surface.""")
    grid = class_property(GridMaterial, 'grid')
    stripe = class_property(StripeMaterial, 'stripe')

    _properties = ('solidColor', 'image', 'grid', 'stripe')


class PolylineMaterial(_CZMLBaseObject):
    """The material to use to draw a polyline or path."""

    solidColor = class_property(SolidColorMaterial, 'solidColor')
    polylineOutline = class_property(PolylineOutlineMaterial, 'polylineOutline')
    polylineGlow = class_property(PolylineGlowMaterial, 'polylineGlow')
    polylineArrow = class_property(PolylineArrowMaterial, 'polylineArrow')

    _properties = ('solidColor', 'polylineOutline', 'polylineGlow',
                   'polylineArrow')


# We make lots of material, show and display condition fields.
material_property = lambda: class_property(Material, 'material', doc=
"""The material to use to fill in the object you are creating.""")
show_property = lambda x: value_property(BOOLEAN, 'show', doc=
"""Whether or not the %s is shown.""" % x)
ddc_property = lambda: value_property(
    DISTANCE_DISPLAY_CONDITION, 'distanceDisplayCondition', doc=
    """The distances from the camera at which this is displayed.""")


class Billboard(_CZMLBaseObject):
    """A billboard, or viewport-aligned image.

    The billboard is positioned in the scene by the position property.
    A billboard is sometimes called a marker.

    """

    kind = 'billboard'

    show = show_property('billboard')
    image = value_property(URI, 'image', doc=
    """The image displayed on the billboard, expressed as a URL.
    For broadest client compatibility, the URL should be accessible
    via Cross-Origin Resource Sharing (CORS).
    The URL may also be a data URI.""")
    scale = value_property(DOUBLE, 'scale', doc=
    """The scale of the billboard. The scale is multiplied with the
    pixel size of the billboard's image. For example, if the scale is
    2.0, the billboard will be rendered with twice the number of pixels,
    in each direction, of the image.""")
    pixelOffset = value_property(CARTESIAN2, 'pixelOffset')
    eyeOffset = value_property(CARTESIAN3, 'eyeOffset')
    horizontalOrigin = value_property(HORIZONTAL_ORIGIN, 'horizontalOrigin')
    verticalOrigin = value_property(VERTICAL_ORIGIN, 'verticalOrigin')
    color = value_property(COLOR, 'color', doc=
    """The color of the billboard. This color value is multiplied
    with the values of the billboard's "image" to produce the
    final color.""")
    rotation = value_property(DOUBLE, 'rotation')
    alignedAxis = value_property(ALIGNED_AXIS, 'alignedAxis')
    sizeInMeters = value_property(BOOLEAN, 'sizeInMeters')
    width = value_property(DOUBLE, 'width')
    height = value_property(DOUBLE, 'height')
    imageSubRegion = value_property(BOUNDING_RECTANGLE, 'imageSubRegion', doc=
    """The part of the image to display, [X, Y, Width, Height] in pixels
    from the bottom-left corner of the image.""")
    scaleByDistance = value_property(NEAR_FAR_SCALAR, 'scaleByDistance')
    translucencyByDistance = value_property(NEAR_FAR_SCALAR,
                                            'translucencyByDistance')
    pixelOffsetScaleByDistance = value_property(NEAR_FAR_SCALAR,
                                                'pixelOffsetScaleByDistance')
    distanceDisplayCondition = ddc_property()

    _properties = ('show', 'image', 'scale', 'pixelOffset', 'eyeOffset',
                   'horizontalOrigin', 'verticalOrigin', 'color', 'rotation',
                   'alignedAxis', 'sizeInMeters', 'width', 'height',
                   'imageSubRegion', 'scaleByDistance', 'translucencyByDistance',
                   'pixelOffsetScaleByDistance', 'distanceDisplayCondition')


class Label(_CZMLBaseObject):
    """ A string of text.
    The label is positioned in the scene by the position property.

    """

    kind = 'label'

    show = show_property('label')
    text = value_property(STRING, 'text')
    font = value_property(FONT, 'font', doc=
    """The font to use, in CSS syntax, e.g. "11pt Lucida Console".""")
    style = value_property(LABEL_STYLE, 'style', doc=
    """FILL, OUTLINE or FILL_AND_OUTLINE.""")
    scale = value_property(DOUBLE, 'scale')
    showBackground = value_property(BOOLEAN, 'showBackground')
    backgroundColor = value_property(COLOR, 'backgroundColor')
    horizontalOrigin = value_property(HORIZONTAL_ORIGIN, 'horizontalOrigin')
    verticalOrigin = value_property(VERTICAL_ORIGIN, 'verticalOrigin')
    eyeOffset = value_property(CARTESIAN3, 'eyeOffset')
    pixelOffset = value_property(CARTESIAN2, 'pixelOffset')
    fillColor = value_property(COLOR, 'fillColor')
    outlineColor = value_property(COLOR, 'outlineColor')
    outlineWidth = value_property(DOUBLE, 'outlineWidth')
    translucencyByDistance = value_property(NEAR_FAR_SCALAR,
                                            'translucencyByDistance')
    distanceDisplayCondition = ddc_property()

    _properties = ('show', 'text', 'font', 'style', 'scale', 'showBackground',
                   'backgroundColor', 'horizontalOrigin', 'verticalOrigin',
                   'eyeOffset', 'pixelOffset', 'fillColor', 'outlineColor',
                   'outlineWidth', 'translucencyByDistance',
                   'distanceDisplayCondition')


class Point(_CZMLBaseObject):
    """A point, or viewport-aligned circle.
    The point is positioned in the scene by the position property. """

    kind = 'point'

    show = show_property('point')
    pixelSize = value_property(DOUBLE, 'pixelSize', doc=
    """The size of the point, in pixels.""")
    color = value_property(COLOR, 'color')
    outlineColor = value_property(COLOR, 'outlineColor')
    outlineWidth = value_property(DOUBLE, 'outlineWidth', doc=
    """The width of the outline of the point.""")
    scaleByDistance = value_property(NEAR_FAR_SCALAR, 'scaleByDistance')
    translucencyByDistance = value_property(NEAR_FAR_SCALAR,
                                            'translucencyByDistance')
    distanceDisplayCondition = ddc_property()

    _properties = ('show', 'pixelSize', 'color', 'outlineColor',
                   'outlineWidth', 'scaleByDistance', 'translucencyByDistance',
                   'distanceDisplayCondition')


class Path(_CZMLBaseObject):
    """A path, which is a polyline defined by the motion of an object over time.
    The possible vertices of the path are specified by the position property.

    """

    kind = 'path'

    show = show_property('path')
    leadTime = value_property(DOUBLE, 'leadTime', doc=
    """The number of seconds in front of the object to show.""")
    trailTime = value_property(DOUBLE, 'trailTime', doc=
    """The number of seconds behind the object to show.""")
    width = value_property(DOUBLE, 'width')
    resolution = value_property(DOUBLE, 'resolution', doc=
    """The maximum number of seconds to step when sampling the position.""")
    material = class_property(PolylineMaterial, 'material')
    distanceDisplayCondition = ddc_property()

    _properties = ('show', 'leadTime', 'trailTime', 'width', 'resolution',
                   'material', 'distanceDisplayCondition')


class Polyline(_CZMLBaseObject):
    """ A polyline, which is a line in the scene composed of multiple segments.

    """

    kind = 'polyline'

    show = show_property('polyline')
    positions = value_property(POSITION_LIST, 'positions', doc=
    """The positions of the vertices. A LineString or a list of
    (longitude, latitude[, height]) is accepted.""")
    width = value_property(DOUBLE, 'width', doc=
    """The width of the polyline.""")
    granularity = value_property(DOUBLE, 'granularity')
    material = class_property(PolylineMaterial, 'material')
    followSurface = value_property(BOOLEAN, 'followSurface')
    distanceDisplayCondition = ddc_property()

    _properties = ('show', 'positions', 'width', 'granularity', 'material',
                   'followSurface', 'distanceDisplayCondition')


class Polygon(_CZMLBaseObject):
    """A polygon, which is a closed figure on the surface of the Earth.

    """

    kind = 'polygon'

    show = show_property('polygon')
    positions = value_property(POSITION_LIST, 'positions', doc=
    """The positions of the vertices. A pygeoif Polygon is accepted, its
    exterior ring becomes the positions.""")
    height = value_property(DOUBLE, 'height')
    extrudedHeight = value_property(DOUBLE, 'extrudedHeight')
    granularity = value_property(DOUBLE, 'granularity')
    stRotation = value_property(DOUBLE, 'stRotation')
    fill = value_property(BOOLEAN, 'fill')
    material = material_property()
    outline = value_property(BOOLEAN, 'outline')
    outlineColor = value_property(COLOR, 'outlineColor')
    outlineWidth = value_property(DOUBLE, 'outlineWidth')
    perPositionHeight = value_property(BOOLEAN, 'perPositionHeight')
    closeTop = value_property(BOOLEAN, 'closeTop')
    closeBottom = value_property(BOOLEAN, 'closeBottom')

    _properties = ('show', 'positions', 'height', 'extrudedHeight',
                   'granularity', 'stRotation', 'fill', 'material', 'outline',
                   'outlineColor', 'outlineWidth', 'perPositionHeight',
                   'closeTop', 'closeBottom')


class RectangleGraphics(_CZMLBaseObject):
    """A cartographic rectangle, which conforms to the curvature of the
    globe and can be placed on the surface or at altitude."""

    kind = 'rectangle'

    show = show_property('rectangle')
    coordinates = value_property(RECTANGLE_COORDINATES, 'coordinates', doc=
    """The extent as [West, South, East, North], ``wsenDegrees`` or
    ``wsen`` in radians.""")
    height = value_property(DOUBLE, 'height')
    extrudedHeight = value_property(DOUBLE, 'extrudedHeight')
    rotation = value_property(DOUBLE, 'rotation')
    stRotation = value_property(DOUBLE, 'stRotation')
    granularity = value_property(DOUBLE, 'granularity')
    fill = value_property(BOOLEAN, 'fill')
    material = material_property()
    outline = value_property(BOOLEAN, 'outline')
    outlineColor = value_property(COLOR, 'outlineColor')
    outlineWidth = value_property(DOUBLE, 'outlineWidth')
    closeTop = value_property(BOOLEAN, 'closeTop')
    closeBottom = value_property(BOOLEAN, 'closeBottom')

    _properties = ('show', 'coordinates', 'height', 'extrudedHeight',
                   'rotation', 'stRotation', 'granularity', 'fill', 'material',
                   'outline', 'outlineColor', 'outlineWidth', 'closeTop',
                   'closeBottom')


class Wall(_CZMLBaseObject):
    """A two dimensional wall defined as a line strip and optional
    maximum and minimum heights."""

    kind = 'wall'

    show = show_property('wall')
    positions = value_property(POSITION_LIST, 'positions')
    minimumHeights = value_property(DOUBLE_LIST, 'minimumHeights', doc=
    """The height of the bottom of the wall at each position.""")
    maximumHeights = value_property(DOUBLE_LIST, 'maximumHeights', doc=
    """The height of the top of the wall at each position.""")
    granularity = value_property(DOUBLE, 'granularity')
    fill = value_property(BOOLEAN, 'fill')
    material = material_property()
    outline = value_property(BOOLEAN, 'outline')
    outlineColor = value_property(COLOR, 'outlineColor')
    outlineWidth = value_property(DOUBLE, 'outlineWidth')

    _properties = ('show', 'positions', 'minimumHeights', 'maximumHeights',
                   'granularity', 'fill', 'material', 'outline',
                   'outlineColor', 'outlineWidth')


class Ellipse(_CZMLBaseObject):
    """An ellipse, which is a closed curve on the surface of the Earth.
    The ellipse is positioned using the position property.

    """

    kind = 'ellipse'

    show = show_property('ellipse')
    semiMajorAxis = value_property(DOUBLE, 'semiMajorAxis', doc="""
    The length of the ellipse's semi-major axis in meters.""")
    semiMinorAxis = value_property(DOUBLE, 'semiMinorAxis', doc="""
    The length of the ellipse's semi-minor axis in meters.""")
    rotation = value_property(DOUBLE, 'rotation', doc="""
    The angle from north (counter-clockwise) in radians.""")
    height = value_property(DOUBLE, 'height')
    extrudedHeight = value_property(DOUBLE, 'extrudedHeight')
    granularity = value_property(DOUBLE, 'granularity')
    stRotation = value_property(DOUBLE, 'stRotation')
    fill = value_property(BOOLEAN, 'fill')
    material = material_property()
    outline = value_property(BOOLEAN, 'outline')
    outlineColor = value_property(COLOR, 'outlineColor')
    outlineWidth = value_property(DOUBLE, 'outlineWidth')
    numberOfVerticalLines = value_property(DOUBLE, 'numberOfVerticalLines')

    _properties = ('show', 'semiMajorAxis', 'semiMinorAxis', 'rotation',
                   'height', 'extrudedHeight', 'granularity', 'stRotation',
                   'fill', 'material', 'outline', 'outlineColor',
                   'outlineWidth', 'numberOfVerticalLines')


class Ellipsoid(_CZMLBaseObject):
    """ An ellipsoid, which is a closed quadric surface.

    An ellipsoid, which is a closed quadric surface that is a three dimensional analogue of an ellipse. The ellipsoid
    is positioned and oriented using the position and orientation properties.

    """

    kind = 'ellipsoid'

    show = show_property('ellipsoid')
    radii = value_property(CARTESIAN3, 'radii', doc=
    """The dimensions of the ellipsoid, [X, Y, Z] in meters.""")
    fill = value_property(BOOLEAN, 'fill')
    material = material_property()
    outline = value_property(BOOLEAN, 'outline')
    outlineColor = value_property(COLOR, 'outlineColor')
    outlineWidth = value_property(DOUBLE, 'outlineWidth')
    stackPartitions = value_property(DOUBLE, 'stackPartitions')
    slicePartitions = value_property(DOUBLE, 'slicePartitions')
    subdivisions = value_property(DOUBLE, 'subdivisions')

    _properties = ('show', 'radii', 'fill', 'material', 'outline',
                   'outlineColor', 'outlineWidth', 'stackPartitions',
                   'slicePartitions', 'subdivisions')


class Model(_CZMLBaseObject):
    """A 3D model, positioned and oriented using the position and
    orientation properties."""

    kind = 'model'

    show = show_property('model')
    gltf = value_property(URI, 'gltf', doc=
    """The URI of a glTF model.""")
    scale = value_property(DOUBLE, 'scale')
    minimumPixelSize = value_property(DOUBLE, 'minimumPixelSize')
    maximumScale = value_property(DOUBLE, 'maximumScale')
    incrementallyLoadTextures = value_property(BOOLEAN,
                                               'incrementallyLoadTextures')
    runAnimations = value_property(BOOLEAN, 'runAnimations')
    silhouetteColor = value_property(COLOR, 'silhouetteColor')
    silhouetteSize = value_property(DOUBLE, 'silhouetteSize')
    color = value_property(COLOR, 'color')
    colorBlendAmount = value_property(DOUBLE, 'colorBlendAmount')
    nodeTransformations = mapping_property(NodeTransformation,
                                           'nodeTransformations', doc=
    """Transformations to apply to the nodes of the model, by node name.""")
    distanceDisplayCondition = ddc_property()

    _properties = ('show', 'gltf', 'scale', 'minimumPixelSize',
                   'maximumScale', 'incrementallyLoadTextures',
                   'runAnimations', 'silhouetteColor', 'silhouetteSize',
                   'color', 'colorBlendAmount', 'nodeTransformations',
                   'distanceDisplayCondition')


class Clock(_CZMLBaseObject):
    """A simulated clock.

    Only meaningful on the document packet.

    interval:
        The time interval of the clock.

    currentTime:
        The current time.

    multiplier:
        The multiplier, which in TICK_DEPENDENT mode is the number of seconds to advance each tick.
        In SYSTEM_CLOCK_DEPENDENT mode, it is the multiplier applied to the amount of time elapsed
        between ticks. This value is ignored in SYSTEM_CLOCK mode.

    range:
        The behavior of a clock when its current time reaches its start or end points.
        Valid values are 'UNBOUNDED', 'CLAMPED', and 'LOOP_STOP'.

    step:
        Defines how a clock steps in time. Valid values are 'SYSTEM_CLOCK',
        'SYSTEM_CLOCK_MULTIPLIER', and 'TICK_DEPENDENT'.

    """

    kind = 'clock'

    interval = interval_property('interval')
    currentTime = time_property('currentTime')
    multiplier = scalar_property(Double, 'multiplier')
    range = scalar_property(String, 'range')
    step = scalar_property(String, 'step')

    _properties = ('interval', 'currentTime', 'multiplier', 'range', 'step')


class CustomMap(object):
    """A custom property that is a JSON object of arbitrary fields."""

    def __init__(self, value=None):
        if value is not None and not isinstance(value, dict):
            raise TypeError('a CustomMap holds a dict, not %s' %
                            value.__class__.__name__)
        self.value = OrderedDict(value or ())

    def data(self):
        return self.value

    def __eq__(self, other):
        return isinstance(other, CustomMap) and self.value == other.value

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = None

    def __repr__(self):
        return 'CustomMap(%r)' % (dict(self.value),)


def load_custom_value(data, report=None, path=()):
    """Decode the value of one custom property.

    An object with an ``interval``, ``value`` or ``reference`` key, or an
    array of interval objects, is a :class:`PropertyValue` of the custom
    value type; any other object is a :class:`CustomMap` and anything
    else a bare value.

    :raises DecodeError: located relative to ``data``

    """
    if (isinstance(data, list) and data and
            all(isinstance(d, dict) and 'interval' in d for d in data)):
        return PropertyValue.load(CUSTOM, data, report, path)
    if isinstance(data, dict):
        if 'interval' in data or CUSTOM.find_tag(data) is not None:
            return PropertyValue.load(CUSTOM, data, report, path)
        return CustomMap(data)
    return PropertyValue(CUSTOM, value=JsonValue.load(data), tag='value',
                         wrapped=False)


def as_custom_value(value):
    """Make a custom property value from a Python value.

    Dicts become a :class:`CustomMap`, everything else goes through
    :func:`as_property_value`, e.g. ``23.4``, ``[9, 8, 7]`` or
    ``sampled('value', [(None, 'XYZ')], interval=...)``.

    """
    if isinstance(value, CustomMap):
        return value
    if isinstance(value, dict):
        return CustomMap(value)
    return as_property_value(CUSTOM, value)


class CustomProperties(object):
    """Additional properties of an object, by name.

    A value is written bare (``23.4``, ``[9, 8, 7]``), wrapped
    (``{"value": [1, 2, 3]}``), over time intervals (``{"interval": ...,
    "value": "XYZ"}`` or an array of those) or as a JSON object of
    arbitrary fields. The first three are held as :class:`PropertyValue`,
    the last as :class:`CustomMap`.

    The packet key is ``properties``; on a packet the attribute is
    ``custom`` since ``properties`` lists all the packet's properties.

    """

    kind = 'properties'
    attribute = 'custom'

    def __init__(self, properties=None):
        """

        :param properties: dict of name to value

        """
        if properties is not None and not isinstance(properties, dict):
            raise TypeError('custom properties must be a dict, not %s' %
                            properties.__class__.__name__)
        self._values = OrderedDict()
        for k, v in (properties or {}).items():
            self[k] = v

    def __getitem__(self, name):
        return self._values[name]

    def __setitem__(self, name, value):
        self._values[name] = as_custom_value(value)

    def __delitem__(self, name):
        del self._values[name]

    def __contains__(self, name):
        return name in self._values

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def items(self):
        return self._values.items()

    def data(self):
        return OrderedDict((k, v.data()) for k, v in self._values.items())

    def dumps(self, **kwargs):
        return json.dumps(self.data(), **kwargs)

    def load(self, data, report=None, path=()):
        """

        :param data: dict of name to JSON value
        :param report: DecodeReport; with a report a malformed value is
            skipped and recorded
        :param path: location of ``data`` in the document

        """
        if not isinstance(data, dict):
            raise DecodeError('properties must be a JSON object, not %r' %
                              (data,), path)
        for k, v in data.items():
            try:
                self._values[k] = load_custom_value(v, report, path + (k,))
            except DecodeError as e:
                if report is None:
                    raise e.prefixed(*(path + (k,)))
                report.skip(e, path + (k,))

    def __eq__(self, other):
        return isinstance(other, CustomProperties) and self.data() == other.data()

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = None

    def __repr__(self):
        return '<CustomProperties %s>' % ' '.join(self._values)


def packet_property(cls):
    """The per-kind attribute of a packet, e.g. ``packet.billboard``.

    Reads look the kind up, assigning None removes it and anything else
    is added the way :func:`class_property` converts values.

    """
    kind = cls.kind

    def getter(self):
        return self.get(kind)

    def setter(self, val):
        if val is None:
            self.remove(kind)
        elif isinstance(val, cls):
            self.add(val)
        elif (isinstance(val, dict) and not is_geometry(val) and
                cls is not CustomProperties):
            # custom properties take a dict of Python values instead
            p = cls()
            p.load(val)
            self.add(p)
        else:
            try:
                self.add(cls(val))
            except (TypeError, ValueError):
                raise TypeError('Property %s must be of class %s. %s was provided.' %
                                (kind, cls.__name__, val.__class__.__name__))

    return property(getter, setter, doc=cls.__doc__)


class CZMLPacket(_CZMLBaseObject):
    """A CZML packet describes the graphical properties for a single
    object in the scene, such as a single aircraft.

    A packet holds at most one property of each kind, adding a second
    replaces the first.

    """

    id = scalar_property(String, 'id', doc=
    """Each packet has an id property identifying the object it is describing.
    IDs do not need to be GUIDs - URIs make good IDs - but they do need
    to uniquely identify a single object within a CZML source and any
    other CZML sources loaded into the same scope.
    If an id is not specified, the client will automatically generate
    a unique one. However, this prevents later packets from referring
    to this object in order to, for example, add more data to it.
    A single CZML stream or document can contain multiple packets with
    the same id, describing different aspects of the same object.""")
    delete = scalar_property(Boolean, 'delete', doc=
    """Whether the client should delete all existing data for this object.""")
    name = scalar_property(String, 'name')
    parent = scalar_property(String, 'parent', doc=
    """The id of the parent object, if any.""")
    version = scalar_property(String, 'version', doc=
    """The CZML version, only meaningful on the document packet.""")

    _properties = ('id', 'delete', 'name', 'parent', 'version')

    def __init__(self, id=None, **kwargs):
        """

        :param id:
        :param kwargs: metadata and properties by kind, e.g.
            ``billboard=Billboard(scale=0.7)``

        """
        self._kinds = OrderedDict()
        self.id = id
        for k, v in kwargs.items():
            if k not in self._properties and k not in PACKET_ATTRIBUTES:
                raise TypeError('Key word %s not known' % k)
            setattr(self, k, v)

    def add(self, prop):
        """Add a property, replacing the one of the same kind.

        :param prop: an instance of one of the property classes
        :return: the property that was replaced, or None

        """
        kind = getattr(prop, 'kind', None)
        if kind not in PROPERTY_KINDS or not isinstance(prop, PROPERTY_KINDS[kind]):
            raise TypeError('%s is not a CZML property' %
                            prop.__class__.__name__)
        old = self._kinds.get(kind)
        self._kinds[kind] = prop
        return old

    def remove(self, kind):
        """

        :param kind: packet key such as ``'billboard'`` or a property class
        :return: the removed property, or None

        """
        return self._kinds.pop(getattr(kind, 'kind', kind), None)

    def get(self, kind):
        return self._kinds.get(getattr(kind, 'kind', kind))

    propertiesOf = get

    @property
    def properties(self):
        """The properties in the order they were added."""
        return tuple(self._kinds.values())

    def __contains__(self, kind):
        return getattr(kind, 'kind', kind) in self._kinds

    def __len__(self):
        return len(self._kinds)

    def __iter__(self):
        return iter(self._kinds.values())

    def data(self):
        """

        :return: OrderedDict, metadata first then the properties

        """
        d = super(CZMLPacket, self).data()
        for kind, prop in self._kinds.items():
            d[kind] = prop.data()
        return d

    def load(self, data, report=None, path=()):
        """

        :param data: dict
        :param report: DecodeReport for a tolerant decode, malformed
            properties are then skipped and recorded
        :param path: location of the packet, e.g. ``(3,)``

        """
        if not isinstance(data, dict):
            raise DecodeError('packet must be a JSON object, not %r' % (data,),
                              path)
        for k, v in data.items():
            if k in self._properties:
                self._load_field(k, v, report, path)
            elif k in PROPERTY_KINDS:
                prop = PROPERTY_KINDS[k]()
                try:
                    prop.load(v, report, path + (k,))
                except DecodeError as e:
                    if report is None:
                        raise
                    report.skip(e)
                else:
                    self.add(prop)
            elif report is not None:
                report.ignore(path + (k,))

    def as_event_source(self, event='czml', indent=None):
        """The packet as a server-sent event.

        Each line of the JSON becomes a ``data:`` line and a blank line
        ends the event.

        :param event: the event name clients listen for
        :param indent: passed on to :func:`dumps`
        :return: str

        """
        lines = ['event: %s' % event]
        lines.extend('data: %s' % line
                     for line in dumps(self, indent).splitlines())
        return '\n'.join(lines) + '\n\n'

    def __repr__(self):
        return '<CZMLPacket %r: %s>' % (self.id, ', '.join(self._kinds))


PROPERTY_KINDS = OrderedDict((cls.kind, cls) for cls in (
    Availability, Description, Position, Orientation, ViewFrom, Billboard,
    Label, Point, Path, Polyline, Polygon, RectangleGraphics, Wall, Ellipse,
    Ellipsoid, Model, Clock, CustomProperties,
))

# Packet attribute names, the kind unless a class names another.
PACKET_ATTRIBUTES = OrderedDict((getattr(cls, 'attribute', cls.kind), cls)
                                for cls in PROPERTY_KINDS.values())

for _name, _cls in PACKET_ATTRIBUTES.items():
    setattr(CZMLPacket, _name, packet_property(_cls))
del _name, _cls


class CZML(_CZMLBaseObject):
    """ CZML is a subset of JSON, meaning that a valid CZML document is also a valid JSON document.

    Specifically, a CZML document contains a single JSON array where each object-literal element in the array is
    a CZML packet. The first packet may be the document packet, with id
    "document", which carries the name, version and clock of the whole
    document; it is kept apart in ``document`` and always written first.

    """

    def __init__(self, packets=None, document=None):
        """

        :param packets: CZMLPackets
        :param document: the document packet

        """
        self._packets = []
        self._document = None
        self.document = document
        for p in packets or ():
            self.add(p)

    @property
    def document(self):
        return self._document

    @document.setter
    def document(self, packet):
        if packet is not None:
            if not isinstance(packet, CZMLPacket):
                raise TypeError('the document must be a CZMLPacket, not %s' %
                                packet.__class__.__name__)
            if packet.id is None:
                packet.id = 'document'
        self._document = packet

    @property
    def packets(self):
        """The packets in order, without the document packet."""
        return tuple(self._packets)

    def add(self, packet):
        """

        :param packet: CZMLPacket, appended

        """
        if not isinstance(packet, CZMLPacket):
            raise TypeError('%s is not a CZMLPacket' % packet.__class__.__name__)
        self._packets.append(packet)

    append = add

    def remove(self, packet):
        """

        :param packet: a packet of this document
        :raises ValueError: the packet is not in the document

        """
        if packet is self._document:
            self._document = None
        else:
            self._packets.remove(packet)

    def __iter__(self):
        return iter(self._packets)

    def __len__(self):
        return len(self._packets)

    def data(self):
        """

        :return: list of packet dicts, the document packet first

        """
        d = []
        if self._document is not None:
            d.append(self._document.data())
        for p in self._packets:
            d.append(p.data())
        return d

    def load(self, data, report=None, path=()):
        """

        :param data: list of packet dicts
        :param report: DecodeReport; with a report a malformed packet is
            skipped and recorded instead of failing the whole document

        """
        if not isinstance(data, list):
            raise DecodeError('a CZML document must be a JSON array, not %s' %
                              data.__class__.__name__, path)
        self._packets = []
        self._document = None
        for i, item in enumerate(data):
            p = CZMLPacket()
            try:
                p.load(item, report, path + (i,))
            except DecodeError as e:
                if report is None:
                    raise
                report.skip(e)
                continue
            if i == 0 and p.id == 'document':
                self._document = p
            else:
                self._packets.append(p)

    def as_stream_data(self, event='czml', indent=None):
        """The document as a stream of server-sent events, one per
        packet, the document packet first.

        """
        packets = list(self._packets)
        if self._document is not None:
            packets.insert(0, self._document)
        return ''.join(p.as_event_source(event, indent) for p in packets)

    def __repr__(self):
        return '<CZML %d packets%s>' % (
            len(self._packets), ' with document' if self._document is not None else '')


class DecodeResult(object):
    """The outcome of :func:`parse`.

    ``status`` is ``success`` when nothing was skipped, ``partial`` when
    the document was read but ``report`` lists skipped parts and
    ``failure`` when no document could be read; ``error`` then says why.

    """

    SUCCESS = 'success'
    PARTIAL = 'partial'
    FAILURE = 'failure'

    def __init__(self, document=None, report=None, error=None):
        self.document = document
        self.report = report if report is not None else DecodeReport()
        self.error = error

    @property
    def status(self):
        if self.error is not None or self.document is None:
            return self.FAILURE
        if self.report.problems:
            return self.PARTIAL
        return self.SUCCESS

    @property
    def ok(self):
        return self.status == self.SUCCESS

    def __repr__(self):
        return '<DecodeResult %s %r>' % (self.status, self.report)


def parse(text):
    """Read a CZML document, skipping and reporting what is malformed.

    :param text: JSON text
    :return: DecodeResult, this never raises for bad input

    """
    report = DecodeReport()
    try:
        data = json.loads(text)
    except (ValueError, TypeError) as e:
        return DecodeResult(report=report,
                            error=DecodeError('invalid JSON: %s' % e))
    document = CZML()
    try:
        document.load(data, report)
    except DecodeError as e:
        return DecodeResult(report=report, error=e)
    return DecodeResult(document, report)


def dumps(document, indent=None, **kwargs):
    """Write a CZML document, or a single packet, as JSON text.

    :param document: CZML
    :param indent: pretty print with this indent, compact if None
    :param kwargs: passed on to ``json.dumps``, e.g. ``sort_keys``
    :return: str

    """
    if indent is None:
        kwargs.setdefault('separators', (',', ':'))
    return json.dumps(document.data(), indent=indent, **kwargs)
