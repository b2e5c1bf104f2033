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
"""Read and write CZML, the JSON format for time-dynamic Cesium scenes."""
import logging

from .errors import DecodeError, EncodeError, DecodeReport, DecodeProblem
from .primitives import (
    TimeInterval, Reference, Cartesian3, Cartesian2, Cartographic,
    CartesianVelocity, UnitQuaternion, Rgba, Rgbaf, Rectangle, NearFarScalar,
    DistanceDisplayCondition, BoundingRectangle, JsonValue,
)
from .values import Sample, Interval, PropertyValue, ValueType, CUSTOM
from .convert import (
    as_property_value, as_time_interval, as_positions, cartesian,
    cartographic_degrees, rgba, rgbaf, number, reference, sampled,
)
from .czml import (
    CZML, CZMLPacket, DecodeResult, parse, dumps, PROPERTY_KINDS,
    PACKET_ATTRIBUTES, CustomProperties, CustomMap, load_custom_value,
    as_custom_value,
    Availability, Description, Position, Orientation, ViewFrom, Billboard,
    Label, Point, Path, Polyline, Polygon, RectangleGraphics, Wall, Ellipse,
    Ellipsoid, Model, NodeTransformation, Clock, Material, PolylineMaterial,
    SolidColorMaterial, ImageMaterial, GridMaterial, StripeMaterial,
    PolylineOutlineMaterial, PolylineGlowMaterial, PolylineArrowMaterial,
    LEFT, CENTER, RIGHT, BOTTOM, TOP, FILL, OUTLINE, FILL_AND_OUTLINE,
    HORIZONTAL, VERTICAL, UNBOUNDED, CLAMPED, LOOP_STOP, SYSTEM_CLOCK,
    SYSTEM_CLOCK_MULTIPLIER, TICK_DEPENDENT, FIXED, INERTIAL,
)

__version__ = '0.4.0'

logging.getLogger(__name__).addHandler(logging.NullHandler())
