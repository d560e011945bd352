"""Tests for routine resolution, error normalisation and batch conversion"""

import asyncio

import pytest

from formatbridge import (
    ConversionDispatcher,
    ConversionFormat,
    ConversionResult,
    ConversionRoutine,
    UnsupportedConversionError,
    convert,
    convert_async,
    convert_batch,
    encode_morse,
)


class TestConversionResult:
    """Result invariants"""

    def test_ok_has_no_error(self):
        """A success carries text and no error"""
        result = ConversionResult.ok("text")
        assert result.success is True
        assert result.result == "text"
        assert result.error is None

    def test_fail_has_empty_result(self):
        """A failure carries a message and no text"""
        result = ConversionResult.fail("boom")
        assert result.success is False
        assert result.result == ""
        assert result.error == "boom"


class TestUnsupportedPairs:
    """Pairs without a routine"""

    def test_unsupported_pair_message(self):
        """The message names both formats"""
        result = convert("x", "xml", "csv", 2)
        assert not result.success
        assert result.error == "Conversion from xml to csv is not supported yet"
        assert result.result == ""

    def test_same_format_is_unsupported(self):
        """There is no identity conversion"""
        result = convert("{}", "json", "json", 2)
        assert result.error == "Conversion from json to json is not supported yet"

    def test_unknown_format_tag(self):
        """Unknown tags fail like any unsupported pair"""
        result = convert("{}", "json", "pdf", 2)
        assert result.error == "Conversion from json to pdf is not supported yet"

    def test_enum_arguments(self):
        """ConversionFormat members are accepted as well as strings"""
        result = convert("{}", ConversionFormat.YAML, ConversionFormat.CSV, 2)
        assert result.error == "Conversion from yaml to csv is not supported yet"

    def test_resolve_raises(self):
        """resolve() raises instead of returning a result"""
        with pytest.raises(UnsupportedConversionError) as exc_info:
            ConversionDispatcher().resolve("tsv", "xml")
        assert exc_info.value.source == "tsv"
        assert exc_info.value.target == "xml"


class TestMorseFallback:
    """Any source can be encoded to Morse"""

    @pytest.mark.parametrize("source,content", [
        ("xml", "<a>1</a>"),
        ("yaml", "a: 1"),
        ("csv", "a,b\n1,2"),
        ("tsv", "a\tb"),
    ])
    def test_raw_input_is_encoded(self, source, content):
        """Structured sources are encoded character for character, unparsed"""
        result = convert(content, source, "morse", 2)
        assert result.success
        assert result.result == encode_morse(content)

    def test_yaml_to_morse_exact(self):
        """The YAML text itself is what gets encoded"""
        assert convert("a: 1", "yaml", "morse", 2).result == ".- ---... / .----"

    def test_json_is_compacted_before_encoding(self):
        """JSON is re-serialised without whitespace first"""
        result = convert('{ "a" : 1 }', "json", "morse", 2)
        assert result.result == encode_morse('{"a":1}')
        assert result.result != encode_morse('{ "a" : 1 }')

    def test_malformed_json_to_morse_fails(self):
        """Unlike the raw fallback, JSON must parse"""
        assert not convert("{oops", "json", "morse", 2).success


class TestErrorNormalisation:
    """Nothing raised inside a routine escapes"""

    def test_malformed_json(self):
        """Parser errors become failed results"""
        result = convert("{not json", "json", "yaml", 2)
        assert not result.success
        assert result.result == ""
        assert result.error

    def test_negative_indent(self):
        """Indent must be non-negative"""
        result = convert("{}", "json", "yaml", -1)
        assert not result.success
        assert "non-negative" in result.error

    def test_routine_exception_is_caught(self):
        """Arbitrary exceptions from a routine are reported"""
        def explode(content, indent_size):
            raise RuntimeError("routine failed")

        dispatcher = ConversionDispatcher([
            ConversionRoutine(ConversionFormat.JSON, ConversionFormat.XML, explode),
        ])
        result = dispatcher.convert("{}", "json", "xml")
        assert result == ConversionResult.fail("routine failed")

    def test_duplicate_routines_rejected(self):
        """A pair can only be registered once"""
        routine = ConversionRoutine(ConversionFormat.JSON, ConversionFormat.XML, lambda c, i: c)
        with pytest.raises(ValueError):
            ConversionDispatcher([routine, routine])


class TestBatch:
    """Several targets for one input"""

    def test_failure_does_not_affect_siblings(self):
        """One failing target leaves the others intact"""
        results = convert_batch('{"a": 1}', "json", ["csv", "yaml", "xml"], 2)

        assert list(results) == [ConversionFormat.CSV, ConversionFormat.YAML, ConversionFormat.XML]
        assert not results[ConversionFormat.CSV].success
        assert results[ConversionFormat.YAML] == convert('{"a": 1}', "json", "yaml", 2)
        assert results[ConversionFormat.XML].result == "<a>1</a>"

    def test_unknown_target_keeps_string_key(self):
        """Unknown targets are reported under the name given"""
        results = convert_batch("{}", "json", ["nope"], 2)
        assert not results["nope"].success


class TestAsync:
    """Awaitable API"""

    def test_convert_async(self):
        """convert_async resolves to the same result as convert"""
        result = asyncio.run(convert_async("... --- ...", "morse", "plaintext", 2))
        assert result == ConversionResult.ok("SOS")
