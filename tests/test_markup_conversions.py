"""Tests for XML and YAML parsing and the JSON round trips"""

import json

import pytest

from formatbridge import convert
from formatbridge.parsers import XMLParser


class TestXMLParser:
    """Element tree to nested dict"""

    def test_simple_elements(self):
        """Leaf elements become their text"""
        assert XMLParser().parse("<person><name>Ada</name><age>36</age></person>") == {
            "person": {"name": "Ada", "age": "36"}
        }

    def test_repeated_siblings_become_list(self):
        """Repeated element names collect into a list"""
        assert XMLParser().parse("<list><n>1</n><n>2</n><n>3</n></list>") == {
            "list": {"n": ["1", "2", "3"]}
        }

    def test_attributes(self):
        """Attributes live under "$" and text under "_" """
        assert XMLParser().parse('<a id="1">x</a>') == {"a": {"$": {"id": "1"}, "_": "x"}}

    def test_empty_elements(self):
        """Empty and whitespace-only elements become empty strings"""
        assert XMLParser().parse("<a><b/><c>  </c></a>") == {"a": {"b": "", "c": ""}}

    def test_mixed_content(self):
        """Text around child elements is joined and trimmed"""
        assert XMLParser().parse("<p>Hello <b>w</b>there</p>") == {"p": {"b": "w", "_": "Hello there"}}

    def test_namespace_prefixes_dropped(self):
        """Only the local name of a qualified tag is kept"""
        result = XMLParser().parse('<x:a xmlns:x="urn:x"><x:b>1</x:b></x:a>')
        assert result == {"a": {"b": "1"}}


class TestXMLToJSON:
    """XML routine output"""

    def test_indented(self):
        """Output follows the requested indent"""
        result = convert("<a><b>1</b></a>", "xml", "json", 4)
        assert result.result == '{\n    "a": {\n        "b": "1"\n    }\n}'

    def test_malformed(self):
        """Parse errors are reported, not raised"""
        result = convert("<a><b></a>", "xml", "json", 2)
        assert not result.success
        assert result.error


class TestYAMLToJSON:
    """YAML routine output"""

    def test_types_preserved(self):
        """YAML scalars keep their JSON types"""
        result = convert("a: 1\nb: true\nc: null\nd: [x, y]\n", "yaml", "json", 2)
        assert json.loads(result.result) == {"a": 1, "b": True, "c": None, "d": ["x", "y"]}

    def test_dates_become_strings(self):
        """Dates are not resolved as timestamps"""
        result = convert("released: 2024-01-02\n", "yaml", "json", 2)
        assert json.loads(result.result) == {"released": "2024-01-02"}

    def test_core_schema_scalars(self):
        """yes/no and on/off stay strings, leading zeros are decimal"""
        result = convert(
            "answer: no\non: yes\nversion: 010\nhex: 0x1F\noctal: 0o17\nflag: True\nempty:\n",
            "yaml", "json", 2,
        )
        assert json.loads(result.result) == {
            "answer": "no",
            "on": "yes",
            "version": 10,
            "hex": 31,
            "octal": 15,
            "flag": True,
            "empty": None,
        }

    def test_non_finite_floats_become_null(self):
        """.nan and .inf have no JSON form"""
        result = convert("x: .nan\ny: -.inf\nz: [1.5, .inf]\n", "yaml", "json", 0)
        assert result.result == '{"x":null,"y":null,"z":[1.5,null]}'

    def test_malformed(self):
        """Syntax errors are reported"""
        assert not convert("a: [1, 2\n", "yaml", "json", 2).success

    def test_unsafe_tags_rejected(self):
        """Only the safe loader is used"""
        assert not convert("!!python/object:os.system {}\n", "yaml", "json", 2).success


class TestRoundTrips:
    """JSON survives a trip through YAML and XML"""

    @pytest.mark.parametrize("value", [
        {"name": "Ada", "tags": ["a", "b"], "meta": {"x": 1, "y": None, "ok": False}},
        [{"id": 1}, {"id": 2}],
        {"empty": [], "nested": {"deep": {"deeper": "yes"}}},
    ])
    def test_json_yaml_json(self, value):
        """YAML output parses back to the same value"""
        as_yaml = convert(json.dumps(value), "json", "yaml", 2)
        back = convert(as_yaml.result, "yaml", "json", 2)
        assert json.loads(back.result) == value

    def test_json_xml_json(self):
        """String-only trees with a single root key survive XML"""
        value = {"library": {"$": {"id": "main"}, "book": [{"title": "A"}, {"title": "B"}]}}
        as_xml = convert(json.dumps(value), "json", "xml", 2)
        back = convert(as_xml.result, "xml", "json", 2)
        assert json.loads(back.result) == value
