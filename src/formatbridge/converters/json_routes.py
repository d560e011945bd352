"""
Conversions from JSON

Every routine parses the input with json.loads and hands the tree to a writer.
"""

from typing import Any, List

from ..core.errors import StructureError
from ..core.models import ConversionFormat as F
from ..core.morse import encode
from ..parsers.structured import parse_json
from ..utils.text import dump_json
from ..writers import (
    AvroSchemaWriter,
    CSVWriter,
    ExcelCSVWriter,
    HTMLWriter,
    PlainTextWriter,
    ProtobufSchemaWriter,
    SQLWriter,
    TSVWriter,
    XMLWriter,
    YAMLWriter,
)
from .base import ConversionRoutine

JSON_TABLE_NAME = "table_data"


def _require_array(value: Any, target_label: str) -> List[Any]:
    if not isinstance(value, list):
        raise StructureError(f"JSON must be an array of objects for {target_label} conversion")
    return value


def json_to_xml(content: str, indent_size: int) -> str:
    return XMLWriter(indent_size).write(parse_json(content))


def json_to_yaml(content: str, indent_size: int) -> str:
    return YAMLWriter(indent_size).write(parse_json(content))


def json_to_csv(content: str, indent_size: int) -> str:
    records = _require_array(parse_json(content), "CSV")
    return CSVWriter().write(records)


def json_to_tsv(content: str, indent_size: int) -> str:
    records = _require_array(parse_json(content), "TSV")
    return TSVWriter().write(records)


def json_to_excel(content: str, indent_size: int) -> str:
    records = _require_array(parse_json(content), "Excel")
    return ExcelCSVWriter().write(records)


def json_to_sql(content: str, indent_size: int) -> str:
    records = parse_json(content)
    if not isinstance(records, list) or not records or not isinstance(records[0], dict):
        raise StructureError("JSON must be a non-empty array of objects for SQL conversion")
    return SQLWriter(JSON_TABLE_NAME).write_records(records)


def json_to_html(content: str, indent_size: int) -> str:
    return HTMLWriter().write(parse_json(content))


def json_to_plaintext(content: str, indent_size: int) -> str:
    return PlainTextWriter().write(parse_json(content))


def json_to_protobuf(content: str, indent_size: int) -> str:
    return ProtobufSchemaWriter().write_inferred(parse_json(content))


def json_to_avro(content: str, indent_size: int) -> str:
    return AvroSchemaWriter(indent_size).write_inferred(parse_json(content))


def json_to_morse(content: str, indent_size: int) -> str:
    """Encode the compact re-serialisation of the JSON, not the raw input"""
    return encode(dump_json(parse_json(content), 0))


ROUTES = [
    ConversionRoutine(F.JSON, F.XML, json_to_xml),
    ConversionRoutine(F.JSON, F.YAML, json_to_yaml),
    ConversionRoutine(F.JSON, F.CSV, json_to_csv),
    ConversionRoutine(F.JSON, F.TSV, json_to_tsv),
    ConversionRoutine(F.JSON, F.SQL, json_to_sql),
    ConversionRoutine(F.JSON, F.PROTOBUF, json_to_protobuf),
    ConversionRoutine(F.JSON, F.AVRO, json_to_avro),
    ConversionRoutine(F.JSON, F.EXCEL, json_to_excel),
    ConversionRoutine(F.JSON, F.PLAINTEXT, json_to_plaintext),
    ConversionRoutine(F.JSON, F.HTML, json_to_html),
    ConversionRoutine(F.JSON, F.MORSE, json_to_morse),
]
