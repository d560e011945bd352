"""
Capability tables

Declares which formats can be used as sources and which targets each source
can reach. The dispatcher's routine table must cover exactly these pairs.
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from .models import ConversionFormat, FormatOption

F = ConversionFormat

FORMAT_LABELS: Dict[ConversionFormat, str] = {
    F.JSON: "JSON",
    F.XML: "XML",
    F.YAML: "YAML",
    F.CSV: "CSV",
    F.TSV: "TSV",
    F.SQL: "SQL",
    F.PROTOBUF: "PROTOBUF",
    F.AVRO: "AVRO",
    F.EXCEL: "EXCEL",
    F.PLAINTEXT: "PLAIN TEXT",
    F.HTML: "HTML",
    F.PARQUET: "PARQUET",
    F.MARKDOWN: "MARKDOWN",
    F.MORSE: "MORSE CODE",
}

# Output file extension per target; Excel and Parquet are text stand-ins
FORMAT_EXTENSIONS: Dict[ConversionFormat, str] = {
    F.JSON: ".json",
    F.XML: ".xml",
    F.YAML: ".yaml",
    F.CSV: ".csv",
    F.TSV: ".tsv",
    F.SQL: ".sql",
    F.PROTOBUF: ".proto",
    F.AVRO: ".avsc",
    F.EXCEL: ".csv",
    F.PLAINTEXT: ".txt",
    F.HTML: ".html",
    F.PARQUET: ".txt",
    F.MARKDOWN: ".md",
    F.MORSE: ".txt",
}

# Input extensions recognised when no source format is given
EXTENSION_SOURCES: Dict[str, ConversionFormat] = {
    ".json": F.JSON,
    ".xml": F.XML,
    ".yaml": F.YAML,
    ".yml": F.YAML,
    ".csv": F.CSV,
    ".tsv": F.TSV,
    ".txt": F.PLAINTEXT,
    ".morse": F.MORSE,
}


def _options(*formats: ConversionFormat) -> List[FormatOption]:
    return [FormatOption(fmt, FORMAT_LABELS[fmt]) for fmt in formats]


SOURCE_FORMATS: List[FormatOption] = _options(
    F.JSON, F.XML, F.YAML, F.CSV, F.TSV, F.PLAINTEXT, F.MORSE
)

TARGET_FORMAT_MAP: Dict[ConversionFormat, List[FormatOption]] = {
    F.JSON: _options(
        F.XML, F.YAML, F.CSV, F.TSV, F.SQL, F.PROTOBUF, F.AVRO, F.EXCEL,
        F.PLAINTEXT, F.HTML, F.MORSE,
    ),
    F.XML: _options(F.JSON, F.MORSE),
    F.YAML: _options(F.JSON, F.MORSE),
    F.CSV: _options(
        F.JSON, F.XML, F.YAML, F.SQL, F.EXCEL, F.PARQUET, F.AVRO, F.PROTOBUF,
        F.MARKDOWN, F.MORSE,
    ),
    F.TSV: _options(F.JSON, F.MORSE),
    F.PLAINTEXT: _options(F.MORSE),
    F.MORSE: _options(
        F.PLAINTEXT, F.JSON, F.XML, F.YAML, F.CSV, F.TSV, F.SQL, F.HTML,
        F.MARKDOWN,
    ),
}


def parse_format(value: Union[str, ConversionFormat]) -> Optional[ConversionFormat]:
    """Return the ConversionFormat for a tag, or None if it is unknown"""
    if isinstance(value, ConversionFormat):
        return value
    try:
        return ConversionFormat(str(value).strip().lower())
    except ValueError:
        return None


def get_target_formats(source: Union[str, ConversionFormat]) -> List[FormatOption]:
    """Targets reachable from a source, in display order"""
    fmt = parse_format(source)
    if fmt is None:
        return []
    return list(TARGET_FORMAT_MAP.get(fmt, []))


def supported_pairs() -> List[Tuple[ConversionFormat, ConversionFormat]]:
    """Every (source, target) pair declared in TARGET_FORMAT_MAP"""
    return [
        (source, option.value)
        for source, options in TARGET_FORMAT_MAP.items()
        for option in options
    ]


def is_supported(
    source: Union[str, ConversionFormat], target: Union[str, ConversionFormat]
) -> bool:
    """Whether the pair is advertised in the capability map"""
    target_fmt = parse_format(target)
    return any(option.value == target_fmt for option in get_target_formats(source))


def detect_source_format(filename: str) -> Optional[ConversionFormat]:
    """Guess a source format from a file name's extension"""
    return EXTENSION_SOURCES.get(Path(filename).suffix.lower())
