"""
HTML writer for FormatBridge

Arrays render as a styled table, any other value as a nested property list.
Keys and values are entity-escaped.
"""

from typing import Any, List

from ..core.errors import StructureError
from ..utils.text import escape_markup, format_cell, format_scalar

TABLE_STYLE = [
    "    table { border-collapse: collapse; width: 100%; }",
    "    th, td { border: 1px solid #ddd; padding: 8px; text-align: left; }",
    "    th { background-color: #f2f2f2; }",
    "    tr:nth-child(even) { background-color: #f9f9f9; }",
]

PROPERTY_STYLE = [
    "    .json-object { font-family: monospace; }",
    "    .property { margin-left: 20px; }",
    "    .key { font-weight: bold; }",
]


class HTMLWriter:
    """Write a complete HTML document"""

    def __init__(self, title: str = "JSON to HTML Conversion"):
        self.title = title

    def write(self, value: Any) -> str:
        if isinstance(value, list):
            if not value:
                raise StructureError("JSON must not be an empty array for HTML conversion")
            first = value[0]
            headers = list(first.keys()) if isinstance(first, dict) else []
            rows = [
                [item.get(header) if isinstance(item, dict) else None for header in headers]
                for item in value
            ]
            return self.write_table(headers, rows)
        return self.write_properties(value)

    def write_table(self, headers: List[str], rows: List[List[Any]]) -> str:
        lines = self._head(TABLE_STYLE)
        lines.append("<table>")
        lines.append("  <thead>")
        lines.append("    <tr>")
        for header in headers:
            lines.append(f"      <th>{escape_markup(str(header))}</th>")
        lines.append("    </tr>")
        lines.append("  </thead>")
        lines.append("  <tbody>")
        for row in rows:
            lines.append("    <tr>")
            for value in row:
                lines.append(f"      <td>{escape_markup(format_cell(value))}</td>")
            lines.append("    </tr>")
        lines.append("  </tbody>")
        lines.append("</table>")
        lines.extend(["</body>", "</html>"])
        return "\n".join(lines)

    def write_properties(self, value: Any) -> str:
        lines = self._head(PROPERTY_STYLE)
        lines.append('<div class="json-object">')
        body = "\n".join(lines) + "\n" + self._render_properties(value, 0)
        return body + "</div>\n</body>\n</html>"

    def _render_properties(self, value: Any, depth: int) -> str:
        if isinstance(value, dict):
            entries = value.items()
        elif isinstance(value, list):
            entries = enumerate(value)
        else:
            return ""

        padding = " " * (depth * 2)
        html = ""
        for key, child in entries:
            html += f'{padding}<div class="property"><span class="key">{escape_markup(str(key))}:</span> '
            if isinstance(child, (dict, list)):
                html += "{\n"
                html += self._render_properties(child, depth + 1)
                html += f"{padding}}}</div>\n"
            else:
                html += f"{escape_markup(format_scalar(child))}</div>\n"
        return html

    def _head(self, style: List[str]) -> List[str]:
        return [
            "<!DOCTYPE html>",
            "<html>",
            "<head>",
            '  <meta charset="UTF-8">',
            f"  <title>{escape_markup(self.title)}</title>",
            "  <style>",
            *style,
            "  </style>",
            "</head>",
            "<body>",
        ]
