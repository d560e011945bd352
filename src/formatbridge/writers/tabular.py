"""
Tabular writers: CSV, TSV, Excel-compatible CSV and Markdown tables

The record writers take a list of JSON objects. Columns come from the keys of
the first object only; keys that appear later are ignored and missing ones
are left blank.
"""

from typing import Any, List

from ..utils.text import format_cell


class DelimitedWriter:
    """Write a list of objects as delimiter-separated text"""

    delimiter = ","

    def write(self, records: List[Any]) -> str:
        first = records[0] if records else {}
        headers = list(first.keys()) if isinstance(first, dict) else []

        lines = [self.delimiter.join(headers)]
        for item in records:
            values = [item.get(header) if isinstance(item, dict) else None for header in headers]
            lines.append(self.delimiter.join(self.format_value(value) for value in values))

        return "\n".join(lines) + "\n"

    def format_value(self, value: Any) -> str:
        return format_cell(value)


class CSVWriter(DelimitedWriter):
    """Comma-separated output; values containing a comma are wrapped in quotes"""

    delimiter = ","

    def format_value(self, value: Any) -> str:
        text = format_cell(value)
        if self.delimiter in text:
            return f'"{text}"'
        return text


class TSVWriter(DelimitedWriter):
    """Tab-separated output; tabs inside values become spaces"""

    delimiter = "\t"

    def format_value(self, value: Any) -> str:
        return format_cell(value).replace("\t", " ")


class ExcelCSVWriter(DelimitedWriter):
    """CSV for spreadsheet import: every text value is quoted with "" escaping"""

    delimiter = ","

    def format_value(self, value: Any) -> str:
        if isinstance(value, (str, dict, list)):
            escaped = format_cell(value).replace('"', '""')
            return f'"{escaped}"'
        return format_cell(value)


class MarkdownTableWriter:
    """Write headers and rows as a GitHub-style Markdown table"""

    @staticmethod
    def escape(value: str) -> str:
        return value.replace("|", "\\|")

    def write(self, headers: List[str], rows: List[List[str]]) -> str:
        lines = [
            "| " + " | ".join(self.escape(header) for header in headers) + " |",
            "| " + " | ".join("---" for _ in headers) + " |",
        ]
        for row in rows:
            lines.append("| " + " | ".join(self.escape(value) for value in row) + " |")
        return "\n".join(lines) + "\n"
