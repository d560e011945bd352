"""
Conversions from CSV and TSV

All routines share DelimitedParser, so quoted fields containing the
delimiter are split like any other.
"""

from ..core.models import ConversionFormat as F
from ..parsers.delimited import DelimitedParser
from ..utils.text import dump_json
from ..writers import (
    AvroSchemaWriter,
    MarkdownTableWriter,
    ProtobufSchemaWriter,
    RecordXMLWriter,
    SQLWriter,
    YAMLWriter,
    parquet_placeholder,
)
from .base import ConversionRoutine

CSV_TABLE_NAME = "csv_data"

csv_parser = DelimitedParser(",", "CSV")
tsv_parser = DelimitedParser("\t", "TSV")


def csv_to_json(content: str, indent_size: int) -> str:
    return dump_json(csv_parser.parse(content).records(), indent_size)


def csv_to_xml(content: str, indent_size: int) -> str:
    table = csv_parser.parse(content)
    return RecordXMLWriter(indent_size).write(table.headers, table.rows)


def csv_to_yaml(content: str, indent_size: int) -> str:
    return YAMLWriter(indent_size).write(csv_parser.parse(content).records())


def csv_to_sql(content: str, indent_size: int) -> str:
    table = csv_parser.parse(content)
    return SQLWriter(CSV_TABLE_NAME).write_rows(table.headers, table.rows)


def csv_to_excel(content: str, indent_size: int) -> str:
    """Spreadsheets open CSV directly, so the text is passed through"""
    return content


def csv_to_protobuf(content: str, indent_size: int) -> str:
    return ProtobufSchemaWriter().write_columns(csv_parser.parse(content).headers)


def csv_to_avro(content: str, indent_size: int) -> str:
    return AvroSchemaWriter(indent_size).write_columns(csv_parser.parse(content).headers)


def csv_to_parquet(content: str, indent_size: int) -> str:
    return parquet_placeholder(csv_parser.header_line(content))


def csv_to_markdown(content: str, indent_size: int) -> str:
    table = csv_parser.parse(content)
    return MarkdownTableWriter().write(table.headers, table.rows)


def tsv_to_json(content: str, indent_size: int) -> str:
    return dump_json(tsv_parser.parse(content).records(), indent_size)


ROUTES = [
    ConversionRoutine(F.CSV, F.JSON, csv_to_json),
    ConversionRoutine(F.CSV, F.XML, csv_to_xml),
    ConversionRoutine(F.CSV, F.YAML, csv_to_yaml),
    ConversionRoutine(F.CSV, F.SQL, csv_to_sql),
    ConversionRoutine(F.CSV, F.EXCEL, csv_to_excel),
    ConversionRoutine(F.CSV, F.PARQUET, csv_to_parquet),
    ConversionRoutine(F.CSV, F.AVRO, csv_to_avro),
    ConversionRoutine(F.CSV, F.PROTOBUF, csv_to_protobuf),
    ConversionRoutine(F.CSV, F.MARKDOWN, csv_to_markdown),
    ConversionRoutine(F.TSV, F.JSON, tsv_to_json),
]
