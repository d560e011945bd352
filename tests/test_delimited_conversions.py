"""Tests for conversions from CSV and TSV"""

import json

import yaml

from formatbridge import convert
from formatbridge.parsers import DelimitedParser

SAMPLE = "name,age\nAda,36\n"


class TestDelimitedParser:
    """Splitting and cleaning"""

    def test_quotes_and_whitespace_stripped(self):
        """Fields are trimmed and lose one pair of surrounding quotes"""
        table = DelimitedParser().parse('a, b\n "x" ,y\n')
        assert table.headers == ["a", "b"]
        assert table.rows == [["x", "y"]]

    def test_blank_lines_skipped(self):
        """Empty lines between rows are ignored"""
        table = DelimitedParser().parse("a\n1\n\n   \n2\n")
        assert table.rows == [["1"], ["2"]]

    def test_short_rows_padded(self):
        """Missing trailing cells become empty strings"""
        records = DelimitedParser().parse("a,b,c\n1\n").records()
        assert records == [{"a": "1", "b": "", "c": ""}]

    def test_extra_cells_dropped(self):
        """Cells beyond the header count are ignored in records"""
        records = DelimitedParser().parse("a\n1,2\n").records()
        assert records == [{"a": "1"}]

    def test_quoted_delimiter_still_splits(self):
        """Quoted fields are not tokenised"""
        records = DelimitedParser().parse('a,b\n"1,2",3\n').records()
        assert records == [{"a": '"1', "b": '2"'}]

    def test_crlf_line_endings(self):
        """Carriage returns are trimmed with the surrounding whitespace"""
        records = DelimitedParser().parse("a,b\r\nx,y\r\n").records()
        assert records == [{"a": "x", "b": "y"}]


class TestCSVToJSON:
    """CSV rows become objects with string values"""

    def test_records(self):
        """Values are never type-converted"""
        result = convert(SAMPLE, "csv", "json", 2)
        assert result.result == '[\n  {\n    "name": "Ada",\n    "age": "36"\n  }\n]'

    def test_header_only(self):
        """A header without rows gives an empty array"""
        assert convert("a,b\n", "csv", "json", 2).result == "[]"

    def test_missing_header_row(self):
        """A blank first line is rejected"""
        result = convert("\na,b\n1,2", "csv", "json", 2)
        assert not result.success
        assert result.error == "CSV input must include a header row"

    def test_empty_input(self):
        """Empty input has no header either"""
        assert not convert("", "csv", "json", 2).success


class TestTSVToJSON:
    """TSV rows become objects"""

    def test_records(self):
        """Tabs split the fields"""
        result = convert("name\tage\nAda\t36\n", "tsv", "json", 0)
        assert result.result == '[{"name":"Ada","age":"36"}]'

    def test_commas_not_split(self):
        """Commas are ordinary characters in TSV"""
        result = convert("a\n1,2\n", "tsv", "json", 2)
        assert json.loads(result.result) == [{"a": "1,2"}]

    def test_missing_header_row(self):
        """The error names TSV"""
        assert convert("\n", "tsv", "json", 2).error == "TSV input must include a header row"


class TestCSVToXML:
    """Rows become <item> elements"""

    def test_document(self):
        """Declaration, root and one item per row"""
        result = convert(SAMPLE, "csv", "xml", 2)
        assert result.result == (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            "<root>\n"
            "  <item>\n"
            "    <name>Ada</name>\n"
            "    <age>36</age>\n"
            "  </item>\n"
            "</root>"
        )

    def test_tags_sanitised_and_values_escaped(self):
        """Header characters outside [A-Za-z0-9] become underscores"""
        result = convert("first name\nA & B\n", "csv", "xml", 2)
        assert "<first_name>A &amp; B</first_name>" in result.result


class TestCSVToYAML:
    """Rows become a YAML sequence of mappings"""

    def test_records(self):
        """Numeric-looking values stay strings"""
        result = convert(SAMPLE, "csv", "yaml", 2)
        assert yaml.safe_load(result.result) == [{"name": "Ada", "age": "36"}]
        assert result.result.startswith("- name: Ada\n")


class TestCSVToSQL:
    """Every cell becomes a quoted literal"""

    def test_statements(self):
        """Column names are sanitised, values quoted"""
        result = convert("first name,age\nO'Hara,36\n", "csv", "sql", 2)
        assert result.result == (
            "CREATE TABLE csv_data (\n"
            "  first_name VARCHAR(255),\n"
            "  age VARCHAR(255)\n"
            ");\n\n"
            "INSERT INTO csv_data (first_name, age) VALUES ('O''Hara', '36');\n"
        )


class TestCSVToExcel:
    """CSV passes through unchanged"""

    def test_passthrough(self):
        """The input text is returned as-is"""
        text = 'a,b\n"x, y",2\n'
        assert convert(text, "csv", "excel", 2).result == text


class TestCSVToSchemas:
    """All-string schemas from the header row"""

    def test_protobuf(self):
        """Field names are sanitised and lowercased"""
        result = convert("First Name,Age\nAda,36\n", "csv", "protobuf", 2)
        assert result.result == (
            'syntax = "proto3";\n\n'
            "package generated;\n\n"
            "message CsvRow {\n"
            "  string first_name = 1;\n"
            "  string age = 2;\n"
            "}\n\n"
            "message CsvData {\n"
            "  repeated CsvRow rows = 1;\n"
            "}\n"
        )

    def test_avro(self):
        """Every field is a nullable string defaulting to null"""
        result = convert("first name,age\n", "csv", "avro", 2)
        assert json.loads(result.result) == {
            "type": "record",
            "name": "CsvData",
            "namespace": "com.example",
            "fields": [
                {"name": "first_name", "type": ["null", "string"], "default": None},
                {"name": "age", "type": ["null", "string"], "default": None},
            ],
        }


class TestCSVToParquet:
    """Parquet output is an explanatory placeholder"""

    def test_placeholder_names_headers(self):
        """The header line is quoted verbatim"""
        result = convert(SAMPLE, "csv", "parquet", 2)
        assert result.success
        assert "// CSV Headers: name,age" in result.result
        assert all(line.startswith("//") for line in result.result.splitlines() if line)


class TestCSVToMarkdown:
    """Markdown table output"""

    def test_table(self):
        """Header, separator and one line per row"""
        result = convert(SAMPLE, "csv", "markdown", 2)
        assert result.result == "| name | age |\n| --- | --- |\n| Ada | 36 |\n"

    def test_pipes_escaped(self):
        """Pipes inside cells and headers are backslash-escaped"""
        result = convert("a|b\nx|y\n", "csv", "markdown", 2)
        assert result.result == "| a\\|b |\n| --- |\n| x\\|y |\n"
