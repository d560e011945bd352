"""
XML writers for FormatBridge

XMLWriter builds an element tree from a parsed JSON value (the inverse of
XMLParser's layout). RecordXMLWriter writes flat CSV records as <item>
elements under <root>.
"""

import re
from typing import Any, List
from xml.etree import ElementTree as ET

from ..parsers.structured import ATTRIBUTE_KEY, TEXT_KEY
from ..utils.text import escape_markup, format_scalar, sanitize_identifier

DEFAULT_ROOT = "root"
LIST_ITEM = "item"

_INVALID_NAME_CHARS = re.compile(r"[^A-Za-z0-9_.\-]")


def element_name(key: str) -> str:
    """Make a dict key usable as an XML element name"""
    name = _INVALID_NAME_CHARS.sub("_", str(key))
    if not name or not (name[0].isalpha() or name[0] == "_"):
        name = "_" + name
    return name


class XMLWriter:
    """Write a JSON-like value as headless, pretty-printed XML

    A dict with exactly one key uses that key as the root element; anything
    else is wrapped in <root>. Lists repeat the element they belong to.
    """

    def __init__(self, indent_size: int = 2):
        self.indent_size = indent_size

    def write(self, value: Any) -> str:
        root = self._build_root(value)
        ET.indent(root, space=" " * self.indent_size)
        return ET.tostring(root, encoding="unicode")

    def _build_root(self, value: Any) -> ET.Element:
        if isinstance(value, dict) and len(value) == 1:
            key, content = next(iter(value.items()))
            if key not in (ATTRIBUTE_KEY, TEXT_KEY) and not isinstance(content, list):
                root = ET.Element(element_name(key))
                self._fill(root, content)
                return root

        root = ET.Element(DEFAULT_ROOT)
        if isinstance(value, list):
            for item in value:
                self._fill(ET.SubElement(root, LIST_ITEM), item)
        else:
            self._fill(root, value)
        return root

    def _fill(self, element: ET.Element, value: Any) -> None:
        if isinstance(value, dict):
            for key, child in value.items():
                if key == ATTRIBUTE_KEY and isinstance(child, dict):
                    for attr, attr_value in child.items():
                        element.set(element_name(attr), format_scalar(attr_value))
                elif key == TEXT_KEY:
                    element.text = format_scalar(child)
                elif isinstance(child, list):
                    for item in child:
                        self._fill(ET.SubElement(element, element_name(key)), item)
                else:
                    self._fill(ET.SubElement(element, element_name(key)), child)
        elif isinstance(value, list):
            for item in value:
                self._fill(ET.SubElement(element, LIST_ITEM), item)
        elif value is not None:
            element.text = format_scalar(value)


class RecordXMLWriter:
    """Write delimited rows as <root><item>...</item></root> with an XML declaration"""

    def __init__(self, indent_size: int = 2):
        self.indent_size = indent_size

    def write(self, headers: List[str], rows: List[List[str]]) -> str:
        item_pad = " " * self.indent_size
        field_pad = " " * (self.indent_size * 2)

        lines = ['<?xml version="1.0" encoding="UTF-8"?>', "<root>"]
        for row in rows:
            lines.append(f"{item_pad}<item>")
            for index, header in enumerate(headers):
                tag = sanitize_identifier(header)
                value = row[index] if index < len(row) else ""
                lines.append(f"{field_pad}<{tag}>{escape_markup(value)}</{tag}>")
            lines.append(f"{item_pad}</item>")
        lines.append("</root>")
        return "\n".join(lines)
