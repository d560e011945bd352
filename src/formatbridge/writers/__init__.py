"""
Writer modules for FormatBridge

Each writer turns an in-memory value (or parsed delimited rows) into output text.
"""

from .html_writer import HTMLWriter
from .schema_writers import AvroSchemaWriter, ProtobufSchemaWriter
from .sql_writer import SQLWriter
from .tabular import CSVWriter, ExcelCSVWriter, MarkdownTableWriter, TSVWriter
from .text_writer import PlainTextWriter, parquet_placeholder
from .xml_writer import RecordXMLWriter, XMLWriter
from .yaml_writer import YAMLWriter

__all__ = [
    'AvroSchemaWriter',
    'CSVWriter',
    'ExcelCSVWriter',
    'HTMLWriter',
    'MarkdownTableWriter',
    'PlainTextWriter',
    'ProtobufSchemaWriter',
    'RecordXMLWriter',
    'SQLWriter',
    'TSVWriter',
    'XMLWriter',
    'YAMLWriter',
    'parquet_placeholder',
]
