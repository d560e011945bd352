"""
Delimited text parser (CSV / TSV)

Lines are split on the bare delimiter. Quoted fields are not tokenised, so a
delimiter inside quotes still splits the field; a value wrapped in double
quotes at both ends has those quotes removed after splitting.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from ..core.errors import StructureError


@dataclass
class DelimitedTable:
    """Header row plus the raw cleaned values of each data row"""
    headers: List[str]
    rows: List[List[str]] = field(default_factory=list)

    def records(self) -> List[Dict[str, str]]:
        """Rows as header-keyed dicts; missing trailing cells become "" and extra ones are dropped"""
        return [
            {header: (row[index] if index < len(row) else "") for index, header in enumerate(self.headers)}
            for row in self.rows
        ]


class DelimitedParser:
    """Split delimited text into a DelimitedTable"""

    def __init__(self, delimiter: str = ",", format_name: str = "CSV"):
        self.delimiter = delimiter
        self.format_name = format_name

    @staticmethod
    def clean_value(value: str) -> str:
        """Trim a field and strip one pair of surrounding double quotes"""
        value = value.strip()
        if value.startswith('"') and value.endswith('"'):
            value = value[1:-1]
        return value

    def parse(self, content: str) -> DelimitedTable:
        lines = content.split("\n")
        if not lines[0].strip():
            raise StructureError(f"{self.format_name} input must include a header row")

        headers = [header.strip() for header in lines[0].split(self.delimiter)]
        table = DelimitedTable(headers=headers)

        for line in lines[1:]:
            if not line.strip():
                continue
            table.rows.append([self.clean_value(value) for value in line.split(self.delimiter)])

        return table

    def header_line(self, content: str) -> str:
        """First line of the input, as written"""
        return content.split("\n")[0]
