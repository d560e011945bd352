"""
Data models for FormatBridge

This module contains the format tags, conversion results and the value
classification used by the schema-inference writers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ConversionFormat(str, Enum):
    """Closed set of format tags understood by the engine"""
    JSON = "json"
    XML = "xml"
    YAML = "yaml"
    CSV = "csv"
    TSV = "tsv"
    SQL = "sql"
    PROTOBUF = "protobuf"
    AVRO = "avro"
    EXCEL = "excel"
    PLAINTEXT = "plaintext"
    HTML = "html"
    PARQUET = "parquet"
    MARKDOWN = "markdown"
    MORSE = "morse"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FormatOption:
    """A selectable format with its display label"""
    value: ConversionFormat
    label: str


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a single conversion

    A successful result carries the full converted text and no error; a
    failed one carries an empty result and a message.
    """
    success: bool
    result: str
    error: Optional[str] = None

    @classmethod
    def ok(cls, text: str) -> "ConversionResult":
        return cls(success=True, result=text)

    @classmethod
    def fail(cls, message: str) -> "ConversionResult":
        return cls(success=False, result="", error=message)


class ValueKind(Enum):
    """Shape of a node in a parsed JSON/YAML tree"""
    NULL = "null"
    BOOL = "bool"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def classify(value: Any) -> ValueKind:
    """Map a parsed value onto its ValueKind

    bool is checked before int since it is an int subclass. Floats with an
    integral value count as integers, so 3.0 infers the same type as 3.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.INTEGER if value.is_integer() else ValueKind.FLOAT
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    return ValueKind.STRING
