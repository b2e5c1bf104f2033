"""Tests for whole CZML documents."""

try:
    import simplejson as json
except ImportError:
    import json

import pytest

from czml import (
    CZML, CZMLPacket, DecodeResult, DecodeError, DecodeReport, Billboard,
    Clock, parse, dumps,
)


class TestDocument:
    """Tests for building documents."""

    def test_order_is_kept(self):
        doc = CZML([CZMLPacket('b'), CZMLPacket('a')])
        doc.add(CZMLPacket('c'))
        assert [p.id for p in doc] == ['b', 'a', 'c']
        assert len(doc) == 3

    def test_append(self):
        doc = CZML()
        doc.append(CZMLPacket('a'))
        assert doc.packets[0].id == 'a'

    def test_document_packet_is_first(self):
        doc = CZML([CZMLPacket('a')])
        doc.document = CZMLPacket(name="scene", clock=Clock(multiplier=10))
        assert doc.document.id == 'document'
        assert doc.data() == [
            {"id": "document", "name": "scene", "clock": {"multiplier": 10}},
            {"id": "a"},
        ]
        assert len(doc) == 1

    def test_document_keeps_its_id(self):
        doc = CZML(document=CZMLPacket('header'))
        assert doc.data() == [{"id": "header"}]

    def test_refuses_non_packets(self):
        with pytest.raises(TypeError):
            CZML(["a"])
        with pytest.raises(TypeError):
            CZML(document={"id": "document"})
        with pytest.raises(TypeError):
            CZML().add(Billboard())

    def test_remove(self):
        a = CZMLPacket('a')
        header = CZMLPacket()
        doc = CZML([a], document=header)
        doc.remove(a)
        assert len(doc) == 0
        doc.remove(header)
        assert doc.document is None
        with pytest.raises(ValueError):
            doc.remove(a)


class TestParse:
    """Tests for parse."""

    def test_success(self, document_json):
        result = parse(json.dumps(document_json))
        assert result.status == DecodeResult.SUCCESS
        assert result.ok
        doc = result.document
        assert doc.document.name == "simple"
        assert doc.document.clock.multiplier == 60
        assert [p.id for p in doc] == ['facility', 'satellite', 'area']
        assert doc.data() == document_json

    def test_partial(self):
        result = parse('[{"id":"a"}, 5, {"id":"b","billboard":{"scale":"big"}}]')
        assert result.status == DecodeResult.PARTIAL
        assert not result.ok
        assert result.error is None
        assert [p.id for p in result.document] == ['a', 'b']
        assert [problem.path for problem in result.report] == [
            (1,), (2, 'billboard', 'scale')]
        assert result.report.problems[1].location == '[2].billboard.scale'

    def test_not_json(self):
        result = parse('[{"id": ')
        assert result.status == DecodeResult.FAILURE
        assert result.document is None
        assert isinstance(result.error, DecodeError)

    def test_not_an_array(self):
        result = parse('{"id": "a"}')
        assert result.status == DecodeResult.FAILURE
        assert 'JSON array' in str(result.error)

    def test_not_text(self):
        assert parse(None).status == DecodeResult.FAILURE

    def test_empty_document(self):
        result = parse('[]')
        assert result.ok
        assert len(result.document) == 0
        assert result.document.document is None

    def test_second_document_packet_is_ordinary(self):
        result = parse('[{"id":"document","name":"one"},{"id":"document","name":"two"}]')
        doc = result.document
        assert doc.document.name == "one"
        assert [p.name for p in doc] == ["two"]

    def test_document_packet_not_first_stays_in_place(self):
        result = parse('[{"id":"a"},{"id":"document","name":"x"},{"id":"b"}]')
        assert result.ok
        doc = result.document
        assert doc.document is None
        assert [p.id for p in doc] == ["a", "document", "b"]
        assert [p["id"] for p in json.loads(dumps(doc))] == ["a", "document", "b"]


class TestLoad:
    """Tests for loading documents from JSON values."""

    def test_strict_load(self):
        with pytest.raises(DecodeError) as e:
            CZML().load([{"id": "a"}, 5])
        assert e.value.path == (1,)

    def test_strict_load_nested(self):
        with pytest.raises(DecodeError) as e:
            CZML().load([{"id": "a", "position": {"cartesian": [1, 2]}}])
        assert e.value.path == (0, 'position', 'cartesian')

    def test_tolerant_load(self):
        report = DecodeReport()
        doc = CZML()
        doc.load([5, {"id": "a"}], report)
        assert len(doc) == 1
        assert report.problems[0].path == (0,)

    def test_load_replaces_packets(self):
        doc = CZML([CZMLPacket('old')])
        doc.load([{"id": "new"}])
        assert [p.id for p in doc] == ['new']

    def test_loads(self, document_json):
        doc = CZML()
        doc.loads(json.dumps(document_json))
        assert doc.data() == document_json


class TestDumps:
    """Tests for dumps."""

    def test_compact(self):
        assert dumps(CZML([CZMLPacket('a')])) == '[{"id":"a"}]'

    def test_indent(self):
        text = dumps(CZML([CZMLPacket('a')]), indent=2)
        assert '\n' in text
        assert json.loads(text) == [{"id": "a"}]

    def test_round_trip(self, document_json):
        doc = parse(json.dumps(document_json)).document
        again = parse(dumps(doc)).document
        assert again.data() == document_json
        assert dumps(again) == dumps(doc)

    def test_single_packet(self):
        p = CZMLPacket('a', billboard=Billboard(scale=2))
        assert dumps(p) == '{"id":"a","billboard":{"scale":2}}'

    def test_sort_keys(self):
        p = CZMLPacket('a', name='n')
        assert dumps(p, sort_keys=True) == '{"id":"a","name":"n"}'
