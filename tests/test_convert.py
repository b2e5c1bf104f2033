"""Tests for the conversion functions."""

from datetime import datetime

import pytest
from pygeoif import geometry

from czml.convert import (
    as_property_value, as_time_interval, as_positions, cartesian,
    cartographic_degrees, rgba, rgbaf, number, reference, sampled,
)
from czml.primitives import Cartesian3, Cartographic, Rgba, Rgbaf, Reference
from czml.values import DOUBLE, COLOR, POSITION, POSITION_LIST, DOUBLE_LIST, Sample


A = "2012-01-01T00:00:00Z/2012-01-02T00:00:00Z"


class TestAsPropertyValue:
    """Tests for as_property_value."""

    def test_number_is_bare(self):
        value = as_property_value(DOUBLE, 0.7)
        assert value.is_constant
        assert value.data() == 0.7

    def test_wrapped_number(self):
        assert number(0.7).data() == {"number": 0.7}

    def test_passes_property_values_through(self):
        value = number(2)
        assert as_property_value(DOUBLE, value) is value

    def test_other_value_type_is_refused(self):
        with pytest.raises(TypeError):
            as_property_value(COLOR, number(1))

    def test_tuple_becomes_first_tag(self):
        value = as_property_value(POSITION, (1, 2, 3))
        assert value.tag == 'cartesian'
        assert value.data() == {"cartesian": [1, 2, 3]}

    def test_tuple_with_explicit_tag(self):
        value = as_property_value(POSITION, (8.5, 47.3, 0), tag='cartographicRadians')
        assert value.data() == {"cartographicRadians": [8.5, 47.3, 0]}

    def test_primitive_picks_its_tag(self):
        value = as_property_value(POSITION, cartographic_degrees(8.5, 47.3))
        assert value.data() == {"cartographicDegrees": [8.5, 47.3, 0]}

    def test_colors(self):
        assert as_property_value(COLOR, (255, 0, 0, 255)).tag == 'rgba'
        assert as_property_value(COLOR, (0.5, 0, 0, 1)).tag == 'rgbaf'
        assert as_property_value(COLOR, rgbaf(1, 0, 0)).data() == {"rgbaf": [1, 0, 0, 1.0]}

    def test_refuses_what_it_cannot_convert(self):
        with pytest.raises(TypeError):
            as_property_value(DOUBLE, "big")
        with pytest.raises(TypeError):
            as_property_value(DOUBLE, True)
        with pytest.raises(TypeError):
            as_property_value(POSITION, (1, 2))

    def test_unknown_tag(self):
        with pytest.raises(TypeError):
            as_property_value(DOUBLE, 1, tag='cartesian')

    def test_reference(self):
        value = as_property_value(POSITION, reference("p1#position"))
        assert value.data() == {"reference": "p1#position"}

    def test_point_geometry(self):
        value = as_property_value(POSITION, geometry.Point(8.5, 47.3))
        assert value.tag == 'cartographicDegrees'
        assert value.value == Cartographic(8.5, 47.3, 0)

    def test_geo_interface_dict(self):
        value = as_property_value(POSITION, {"type": "Point",
                                             "coordinates": (1.0, 2.0, 3.0)})
        assert value.data() == {"cartographicDegrees": [1.0, 2.0, 3.0]}

    def test_list_of_numbers(self):
        value = as_property_value(DOUBLE_LIST, [1, 2, 3])
        assert value.data() == [1, 2, 3]


class TestSampled:
    """Tests for building interval values with sampled."""

    def test_sampled_position(self):
        value = as_property_value(POSITION, sampled(
            'cartesian', [(0, (0, 0, 0)), (60, (1, 1, 1))], interval=A))
        assert value.is_interval
        assert value.intervals[0].samples[1].value == Cartesian3(1, 1, 1)
        assert value.data() == {"interval": A,
                                "cartesian": [0, 0, 0, 0, 60, 1, 1, 1]}

    def test_datetime_sample_times(self):
        value = as_property_value(DOUBLE, sampled(
            'number', [(datetime(2012, 1, 1), 1), (datetime(2012, 1, 1, 0, 1), 2)]))
        assert value.data() == {"number": ["2012-01-01T00:00:00Z", 1,
                                           "2012-01-01T00:01:00Z", 2]}

    def test_interpolation(self):
        value = as_property_value(POSITION, sampled(
            'cartesian', [(0, (0, 0, 0)), (60, (1, 1, 1))],
            epoch="2012-01-01T00:00:00Z", interpolationAlgorithm="LAGRANGE",
            attributes={"referenceFrame": "INERTIAL"}))
        assert value.data() == {"epoch": "2012-01-01T00:00:00Z",
                                "interpolationAlgorithm": "LAGRANGE",
                                "referenceFrame": "INERTIAL",
                                "cartesian": [0, 0, 0, 0, 60, 1, 1, 1]}

    def test_list_of_intervals_is_an_array(self):
        value = as_property_value(DOUBLE, [sampled('number', [(None, 1)], interval=A)])
        assert value.data() == [{"interval": A, "number": 1}]

    def test_tag_must_fit_the_value_type(self):
        with pytest.raises(TypeError):
            as_property_value(DOUBLE, sampled('cartesian', []))

    def test_sample_values_are_checked(self):
        with pytest.raises(TypeError):
            as_property_value(POSITION, sampled('cartesian', [(0, (0, 0))]))

    def test_sample_times_are_checked(self):
        with pytest.raises(TypeError):
            as_property_value(DOUBLE, sampled('number', [("noon", 1)]))

    def test_given_interval_is_left_alone(self):
        interval = sampled('cartesian', [(0, (0, 0, 0)), (60, (1, 1, 1))],
                           interval=A)
        first = as_property_value(POSITION, interval)
        second = as_property_value(POSITION, interval)
        assert first.intervals[0] is not interval
        assert interval.samples == [Sample(0, (0, 0, 0)), Sample(60, (1, 1, 1))]
        assert not isinstance(interval.samples[0].value, Cartesian3)
        assert first.intervals[0].samples[0].value == Cartesian3(0, 0, 0)
        assert first == second

    def test_bad_interval(self):
        with pytest.raises(TypeError):
            sampled('number', [], interval=42)


class TestPositions:
    """Tests for as_positions."""

    def test_line_string(self):
        value = as_positions(geometry.LineString([(0, 0), (1, 1), (2, 0)]))
        assert value.tag == 'cartographicDegrees'
        assert value.data() == {"cartographicDegrees": [0, 0, 0, 1, 1, 0, 2, 0, 0]}

    def test_polygon_uses_exterior(self):
        value = as_positions(geometry.Polygon([(0, 0), (1, 0), (1, 1), (0, 0)]))
        assert len(value.value) == 4
        assert value.value[2] == Cartographic(1, 1, 0)

    def test_point_is_refused(self):
        with pytest.raises(TypeError):
            as_positions(geometry.Point(1, 2))

    def test_nested_tuples(self):
        value = as_positions([(1, 2), (3, 4, 5)])
        assert value.value == [Cartographic(1, 2, 0), Cartographic(3, 4, 5)]

    def test_flat_numbers(self):
        value = as_positions([1, 2, 3, 4, 5, 6])
        assert value.data() == {"cartographicDegrees": [1, 2, 3, 4, 5, 6]}

    def test_cartesians(self):
        value = as_positions([cartesian(1, 2, 3), cartesian(4, 5, 6)])
        assert value.data() == {"cartesian": [1, 2, 3, 4, 5, 6]}

    def test_references(self):
        value = as_positions(["a#position", Reference("b", "position")])
        assert value.data() == {"references": ["a#position", "b#position"]}

    def test_radians(self):
        value = as_positions([0.1, 0.2, 0, 0.3, 0.4, 0], tag='cartographicRadians')
        assert value.data() == {"cartographicRadians": [0.1, 0.2, 0, 0.3, 0.4, 0]}

    def test_value_type(self):
        assert as_positions([1, 2, 3]).value_type is POSITION_LIST

    def test_refuses_scalars(self):
        with pytest.raises(TypeError):
            as_positions(5)


class TestConstructors:
    """Tests for the small constructors."""

    def test_rgba_default_alpha(self):
        assert rgba(255, 0, 0) == Rgba(255, 0, 0, 255)

    def test_rgbaf_default_alpha(self):
        assert rgbaf(1.0, 0.0, 0.0) == Rgbaf(1.0, 0.0, 0.0, 1.0)

    def test_reference_from_parts(self):
        assert reference("p1", "position") == Reference.load("p1#position")

    def test_time_interval(self):
        value = as_time_interval(("2012-01-01T00:00:00Z", "2012-01-02T00:00:00Z"))
        assert value.data() == A
        with pytest.raises(TypeError):
            as_time_interval(42)
