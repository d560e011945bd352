"""
SQL writer for FormatBridge

Generates a CREATE TABLE statement followed by one INSERT per row. Every
column is declared VARCHAR(255); no type inference is attempted.
"""

from typing import Any, Dict, List

from ..utils.text import format_cell, format_scalar, sanitize_identifier


class SQLWriter:
    """Write tabular data as SQL DDL + DML text"""

    COLUMN_TYPE = "VARCHAR(255)"

    def __init__(self, table_name: str):
        self.table_name = table_name

    @staticmethod
    def quote(value: str) -> str:
        """Single-quote a string literal, doubling embedded quotes"""
        return "'" + value.replace("'", "''") + "'"

    def literal(self, value: Any) -> str:
        """SQL literal for a JSON value: NULL, quoted text or bare scalar"""
        if value is None:
            return "NULL"
        if isinstance(value, (str, dict, list)):
            return self.quote(format_cell(value))
        return format_scalar(value)

    def write_records(self, records: List[Dict[str, Any]]) -> str:
        """Columns from the first object's keys, typed literals per value"""
        columns = list(records[0].keys())
        statements = [self._create_table(columns)]
        for item in records:
            if not isinstance(item, dict):
                item = {}
            values = [self.literal(item.get(column)) for column in columns]
            statements.append(self._insert(columns, values))
        return "".join(statements)

    def write_rows(self, headers: List[str], rows: List[List[str]]) -> str:
        """Sanitised header columns, every cell quoted as text"""
        columns = [sanitize_identifier(header) for header in headers]
        statements = [self._create_table(columns)]
        for row in rows:
            statements.append(self._insert(columns, [self.quote(value) for value in row]))
        return "".join(statements)

    def _create_table(self, columns: List[str]) -> str:
        definitions = ",\n".join(f"  {column} {self.COLUMN_TYPE}" for column in columns)
        return f"CREATE TABLE {self.table_name} (\n{definitions}\n);\n\n"

    def _insert(self, columns: List[str], values: List[str]) -> str:
        return (
            f"INSERT INTO {self.table_name} ({', '.join(columns)}) "
            f"VALUES ({', '.join(values)});\n"
        )
