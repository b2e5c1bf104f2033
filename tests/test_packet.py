"""Tests for CZMLPacket."""

import pytest

from czml import (
    CZMLPacket, Billboard, Position, Label, Availability, Description, Clock,
    DecodeError, DecodeReport, Sample,
)
from czml.primitives import Cartesian3


A = "2012-01-01T00:00:00Z/2012-01-01T01:00:00Z"


class TestDecodeScenarios:
    """Decoding the packets every CZML reader must understand."""

    def test_billboard_packet(self, billboard_packet_json):
        p = CZMLPacket()
        p.load(billboard_packet_json)
        assert p.id == 'p1'
        assert len(p) == 1
        bb = p.billboard
        assert isinstance(bb, Billboard)
        assert bb.scale == 0.7
        assert bb.image == "http://localhost/img.png"
        assert bb.color is None
        assert bb.show is None
        assert p.data() == billboard_packet_json
        assert set(p.data()['billboard']) == {'scale', 'image'}

    def test_constant_position(self):
        p = CZMLPacket()
        p.load({"position": {"cartesian": [9.3, 8.2, 7.1]}})
        assert p.id is None
        assert p.position.value.is_constant
        assert p.position.value.value == Cartesian3(9.3, 8.2, 7.1)
        assert p.data() == {"position": {"cartesian": [9.3, 8.2, 7.1]}}

    def test_sampled_position(self, sampled_position_json):
        p = CZMLPacket()
        p.load({"id": "sat", "position": sampled_position_json})
        value = p.position.value
        assert value.is_interval
        interval = value.intervals[0]
        assert interval.start == "2012-01-01T00:00:00Z"
        assert interval.stop == "2012-01-01T01:00:00Z"
        assert interval.samples == [Sample(0, Cartesian3(0, 0, 0)),
                                    Sample(3600, Cartesian3(1, 1, 1))]
        assert p.data()['position'] == sampled_position_json


class TestProperties:
    """Tests for adding, replacing and removing properties."""

    def setup_method(self):
        self.packet = CZMLPacket('p1')

    def test_add_returns_replaced(self):
        first = Billboard(scale=1)
        second = Billboard(scale=2)
        assert self.packet.add(first) is None
        assert self.packet.add(second) is first
        assert len(self.packet) == 1
        assert self.packet.billboard is second

    def test_add_refuses_non_properties(self):
        with pytest.raises(TypeError):
            self.packet.add("billboard")
        with pytest.raises(TypeError):
            self.packet.add(CZMLPacket())

    def test_remove(self):
        self.packet.add(Billboard(scale=1))
        self.packet.add(Label(text="a"))
        removed = self.packet.remove('billboard')
        assert isinstance(removed, Billboard)
        assert self.packet.remove(Label).text == "a"
        assert len(self.packet) == 0
        assert self.packet.remove('billboard') is None

    def test_get(self):
        label = Label(text="a")
        self.packet.add(label)
        assert self.packet.get('label') is label
        assert self.packet.get(Label) is label
        assert self.packet.propertiesOf(Label) is label
        assert self.packet.get('billboard') is None

    def test_contains(self):
        self.packet.add(Label(text="a"))
        assert 'label' in self.packet
        assert Label in self.packet
        assert Billboard not in self.packet

    def test_iteration_keeps_insertion_order(self):
        self.packet.add(Label(text="a"))
        self.packet.add(Position((1, 2, 3)))
        self.packet.add(Billboard(scale=1))
        assert [p.kind for p in self.packet] == ['label', 'position', 'billboard']
        assert [p.kind for p in self.packet.properties] == ['label', 'position',
                                                            'billboard']

    def test_assign_none_removes(self):
        self.packet.billboard = Billboard(scale=1)
        self.packet.billboard = None
        assert 'billboard' not in self.packet


class TestSetters:
    """Tests for the per-kind attributes of a packet."""

    def setup_method(self):
        self.packet = CZMLPacket('p1')

    def test_dict(self):
        self.packet.billboard = {"scale": 0.7}
        assert isinstance(self.packet.billboard, Billboard)
        assert self.packet.billboard.scale == 0.7

    def test_position_tuple(self):
        self.packet.position = (1, 2, 3)
        assert self.packet.data() == {"id": "p1", "position": {"cartesian": [1, 2, 3]}}

    def test_availability_string(self):
        self.packet.availability = A
        assert isinstance(self.packet.availability, Availability)
        assert self.packet.data()['availability'] == A

    def test_description_string(self):
        self.packet.description = "<b>hi</b>"
        assert isinstance(self.packet.description, Description)
        assert self.packet.data()['description'] == "<b>hi</b>"

    def test_wrong_value(self):
        with pytest.raises(TypeError):
            self.packet.billboard = 5
        with pytest.raises(TypeError):
            self.packet.position = "here"

    def test_keywords(self):
        p = CZMLPacket('p2', name="two", label=Label(text="b"),
                       clock={"multiplier": 2})
        assert p.name == "two"
        assert isinstance(p.clock, Clock)
        assert p.data() == {"id": "p2", "name": "two", "label": {"text": "b"},
                            "clock": {"multiplier": 2}}

    def test_unknown_keyword(self):
        with pytest.raises(TypeError):
            CZMLPacket('p3', colour="red")

    def test_metadata_types(self):
        with pytest.raises(TypeError):
            CZMLPacket(5)
        with pytest.raises(TypeError):
            CZMLPacket('p4', delete="yes")


class TestEncoding:
    """Tests for writing packets."""

    def test_metadata_first(self):
        p = CZMLPacket()
        p.add(Billboard(scale=1))
        p.version = "1.0"
        p.id = "p1"
        p.delete = True
        p.name = "one"
        assert list(p.data()) == ['id', 'delete', 'name', 'version', 'billboard']

    def test_absent_id_is_omitted(self):
        assert CZMLPacket().data() == {}

    def test_dumps(self):
        p = CZMLPacket('p1', billboard=Billboard(scale=1))
        assert p.dumps() == '{"id": "p1", "billboard": {"scale": 1}}'

    def test_equality(self, billboard_packet_json):
        p = CZMLPacket()
        p.load(billboard_packet_json)
        q = CZMLPacket('p1', billboard=Billboard(scale=0.7,
                                                 image="http://localhost/img.png"))
        assert p == q
        q.billboard.scale = 1
        assert p != q


class TestDecoding:
    """Tests for strict and tolerant packet decoding."""

    def test_unknown_keys_are_ignored(self):
        report = DecodeReport()
        p = CZMLPacket()
        p.load({"id": "p1", "cone": {"show": True}}, report)
        assert p.data() == {"id": "p1"}
        assert report.ok
        assert report.ignored == [('cone',)]

    def test_misspelled_value_key_is_reported(self):
        report = DecodeReport()
        p = CZMLPacket()
        p.load({"id": "p1",
                "position": {"interval": A, "cartesain": [1, 2, 3]},
                "billboard": {"scale": {"number": 2, "nubmer": 3}}},
               report, (0,))
        assert report.ok
        assert report.ignored == [(0, 'position', 'cartesain'),
                                  (0, 'billboard', 'scale', 'nubmer')]
        assert p.billboard.scale == 2

    def test_unknown_keys_strict(self):
        p = CZMLPacket()
        p.load({"id": "p1", "cone": {"show": True}})
        assert p.data() == {"id": "p1"}

    def test_malformed_property_strict(self):
        with pytest.raises(DecodeError) as e:
            CZMLPacket().load({"id": "p1", "billboard": 5}, path=(3,))
        assert e.value.path == (3, 'billboard')

    def test_malformed_property_tolerant(self):
        report = DecodeReport()
        p = CZMLPacket()
        p.load({"id": "p1", "billboard": 5, "position": {"cartesian": "x"},
                "label": {"text": "ok"}}, report, (3,))
        assert 'billboard' not in p
        assert 'position' not in p
        assert p.label.text == "ok"
        assert [problem.path for problem in report] == [
            (3, 'billboard'), (3, 'position', 'cartesian')]

    def test_malformed_field_keeps_property(self):
        report = DecodeReport()
        p = CZMLPacket()
        p.load({"billboard": {"scale": "big", "image": "a.png"}}, report)
        assert p.billboard.image == "a.png"
        assert report.problems[0].path == ('billboard', 'scale')

    def test_malformed_metadata(self):
        report = DecodeReport()
        p = CZMLPacket()
        p.load({"id": 5, "name": "n"}, report)
        assert p.id is None
        assert p.name == "n"
        assert report.problems[0].path == ('id',)

    def test_not_an_object(self):
        with pytest.raises(DecodeError) as e:
            CZMLPacket().load([1], path=(0,))
        assert 'packet must be a JSON object' in str(e.value)
        assert e.value.path == (0,)
