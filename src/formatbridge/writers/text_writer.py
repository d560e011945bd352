"""Plain-text writers: indented value dump and the Parquet placeholder"""

from typing import Any

from ..utils.text import format_scalar


class PlainTextWriter:
    """Dump a JSON value as indented "key: value" and "[index]:" lines

    Each nesting level adds two spaces. A bare scalar at the top level
    produces no output.
    """

    def write(self, value: Any) -> str:
        return self._render(value, 0)

    def _render(self, value: Any, depth: int) -> str:
        padding = " " * (depth * 2)
        text = ""

        if isinstance(value, list):
            for index, item in enumerate(value):
                text += f"{padding}[{index}]:\n"
                if isinstance(item, (dict, list)):
                    text += self._render(item, depth + 1)
                else:
                    text += f"{padding}  {format_scalar(item)}\n"
        elif isinstance(value, dict):
            for key, child in value.items():
                text += f"{padding}{key}: "
                if isinstance(child, (dict, list)):
                    text += "\n" + self._render(child, depth + 1)
                else:
                    text += f"{format_scalar(child)}\n"

        return text


PARQUET_NOTE = """\
// Parquet is a binary columnar format; this converter only produces text.
// Below is a description of how the data would be laid out in Parquet:

// CSV Headers: {headers}

// Parquet stores each column separately, which gives:
// - Efficient compression
// - Fast queries that read only the columns they need
// - Support for complex nested data structures

// To produce a real Parquet file from this CSV, use a dedicated tool such as:
// 1. pandas with pyarrow: pandas.read_csv(...).to_parquet(...)
// 2. Apache Arrow, Apache Spark or DuckDB

// The Parquet file would hold the same data as your CSV,
// stored in a binary columnar layout together with schema metadata."""


def parquet_placeholder(header_line: str) -> str:
    """Explanatory comment block standing in for Parquet output"""
    return PARQUET_NOTE.format(headers=header_line)
