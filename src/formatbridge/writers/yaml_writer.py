"""YAML output using PyYAML's safe dumper"""

from typing import Any

import yaml


class IndentedSafeDumper(yaml.SafeDumper):
    """SafeDumper that indents block sequences under their parent key"""

    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)


class YAMLWriter:
    """Dump a value as block-style YAML, keeping key order

    PyYAML only honours indents from 2 to 9; other values fall back to 2.
    """

    def __init__(self, indent_size: int = 2):
        self.indent_size = indent_size

    def write(self, value: Any) -> str:
        return yaml.dump(
            value,
            Dumper=IndentedSafeDumper,
            indent=self.indent_size,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )
