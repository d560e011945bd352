"""Conversions from XML and YAML into JSON"""

from ..core.models import ConversionFormat as F
from ..parsers.structured import XMLParser, parse_yaml
from ..utils.text import dump_json
from .base import ConversionRoutine


def xml_to_json(content: str, indent_size: int) -> str:
    return dump_json(XMLParser().parse(content), indent_size)


def yaml_to_json(content: str, indent_size: int) -> str:
    # Timestamps and other non-JSON scalars are written as strings
    return dump_json(parse_yaml(content), indent_size)


ROUTES = [
    ConversionRoutine(F.XML, F.JSON, xml_to_json),
    ConversionRoutine(F.YAML, F.JSON, yaml_to_json),
]
