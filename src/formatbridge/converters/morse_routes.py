"""
Conversions into and out of Morse code

Decoded Morse is wrapped in a {"morse": ..., "text": ...} record, which the
regular writers then render for the structured targets.
"""

from typing import Dict

from ..core.models import ConversionFormat as F
from ..core.morse import decode, encode
from ..utils.text import dump_json
from ..writers import CSVWriter, HTMLWriter, MarkdownTableWriter, SQLWriter, TSVWriter, XMLWriter, YAMLWriter
from .base import ConversionRoutine

MORSE_TABLE_NAME = "morse_data"


def morse_record(content: str) -> Dict[str, str]:
    """The Morse input next to its decoded text"""
    morse = content.strip()
    return {"morse": morse, "text": decode(morse)}


def encode_text(content: str, indent_size: int) -> str:
    """Encode the input characters as they are, whatever their format"""
    return encode(content)


def morse_to_plaintext(content: str, indent_size: int) -> str:
    return decode(content.strip())


def morse_to_json(content: str, indent_size: int) -> str:
    return dump_json(morse_record(content), indent_size)


def morse_to_xml(content: str, indent_size: int) -> str:
    return XMLWriter(indent_size).write(morse_record(content))


def morse_to_yaml(content: str, indent_size: int) -> str:
    return YAMLWriter(indent_size).write(morse_record(content))


def morse_to_csv(content: str, indent_size: int) -> str:
    return CSVWriter().write([morse_record(content)])


def morse_to_tsv(content: str, indent_size: int) -> str:
    return TSVWriter().write([morse_record(content)])


def morse_to_sql(content: str, indent_size: int) -> str:
    return SQLWriter(MORSE_TABLE_NAME).write_records([morse_record(content)])


def morse_to_html(content: str, indent_size: int) -> str:
    record = morse_record(content)
    return HTMLWriter("Morse Code to HTML Conversion").write_table(
        list(record.keys()), [list(record.values())]
    )


def morse_to_markdown(content: str, indent_size: int) -> str:
    record = morse_record(content)
    return MarkdownTableWriter().write(list(record.keys()), [list(record.values())])


ROUTES = [
    ConversionRoutine(F.PLAINTEXT, F.MORSE, encode_text),
    ConversionRoutine(F.MORSE, F.PLAINTEXT, morse_to_plaintext),
    ConversionRoutine(F.MORSE, F.JSON, morse_to_json),
    ConversionRoutine(F.MORSE, F.XML, morse_to_xml),
    ConversionRoutine(F.MORSE, F.YAML, morse_to_yaml),
    ConversionRoutine(F.MORSE, F.CSV, morse_to_csv),
    ConversionRoutine(F.MORSE, F.TSV, morse_to_tsv),
    ConversionRoutine(F.MORSE, F.SQL, morse_to_sql),
    ConversionRoutine(F.MORSE, F.HTML, morse_to_html),
    ConversionRoutine(F.MORSE, F.MARKDOWN, morse_to_markdown),
]
