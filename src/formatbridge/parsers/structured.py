"""
Parsers for tree-shaped formats: JSON, YAML and XML

Each parser turns input text into a plain Python tree of dicts, lists and
scalars. Syntax errors are raised by the underlying library unchanged.
"""

import json
import re
from typing import Any, Dict, List
from xml.etree import ElementTree as ET

import yaml

# Keys used for attributes and mixed text, following the common xml2js layout
ATTRIBUTE_KEY = "$"
TEXT_KEY = "_"


class CoreSchemaLoader(yaml.SafeLoader):
    """SafeLoader that resolves plain scalars by the YAML 1.2 core schema

    Only null, true/false, decimal/0o/0x integers and floats are implicit;
    yes/no/on/off, leading-zero octals, sexagesimals and timestamps stay strings.
    """

    yaml_implicit_resolvers: Dict[Any, list] = {}

    def construct_core_int(self, node: yaml.ScalarNode) -> int:
        text = self.construct_scalar(node)
        if text.startswith("0o"):
            return int(text[2:], 8)
        if text.startswith("0x"):
            return int(text[2:], 16)
        return int(text)


CoreSchemaLoader.add_implicit_resolver(
    "tag:yaml.org,2002:null",
    re.compile(r"^(?:~|null|Null|NULL|)$"),
    ["~", "n", "N", ""],
)
CoreSchemaLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)
CoreSchemaLoader.add_implicit_resolver(
    "tag:yaml.org,2002:int",
    re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$"),
    list("-+0123456789"),
)
CoreSchemaLoader.add_implicit_resolver(
    "tag:yaml.org,2002:float",
    re.compile(
        r"^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?"
        r"|[-+]?\.(?:inf|Inf|INF)|\.(?:nan|NaN|NAN))$"
    ),
    list("-+0123456789."),
)
CoreSchemaLoader.add_constructor("tag:yaml.org,2002:int", CoreSchemaLoader.construct_core_int)


def parse_json(content: str) -> Any:
    """Parse JSON text"""
    return json.loads(content)


def parse_yaml(content: str) -> Any:
    """Parse a single YAML document, resolving scalars as YAML 1.2 does"""
    return yaml.load(content, Loader=CoreSchemaLoader)


class XMLParser:
    """Parse XML into a nested dict keyed by element name

    - An element with only text becomes that text ("" when empty)
    - Attributes go under "$", text next to child elements under "_"
    - Repeated sibling elements become a list, single ones stay scalar
    - The result has a single key, the root element's name
    """

    def parse(self, content: str) -> Dict[str, Any]:
        root = ET.fromstring(content)
        return {self._local_name(root.tag): self._element_value(root)}

    def _element_value(self, element: ET.Element) -> Any:
        children = list(element)
        text = self._collect_text(element, children)

        if not children and not element.attrib:
            return text if text.strip() else ""

        node: Dict[str, Any] = {}
        if element.attrib:
            node[ATTRIBUTE_KEY] = {
                self._local_name(name): value for name, value in element.attrib.items()
            }

        for child in children:
            name = self._local_name(child.tag)
            value = self._element_value(child)
            if name not in node:
                node[name] = value
            elif isinstance(node[name], list):
                node[name].append(value)
            else:
                node[name] = [node[name], value]

        if text.strip():
            node[TEXT_KEY] = text.strip()

        return node

    @staticmethod
    def _collect_text(element: ET.Element, children: List[ET.Element]) -> str:
        parts = [element.text or ""]
        parts.extend(child.tail or "" for child in children)
        return "".join(parts)

    @staticmethod
    def _local_name(tag: str) -> str:
        """Drop the "{namespace}" prefix ElementTree puts on qualified names"""
        if tag.startswith("{"):
            return tag[tag.index("}") + 1:]
        return tag

