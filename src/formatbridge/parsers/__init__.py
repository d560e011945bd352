"""
Parser modules for FormatBridge

Each parser turns input text into an in-memory value for the writers.
"""

from .delimited import DelimitedParser, DelimitedTable
from .structured import XMLParser, parse_json, parse_yaml

__all__ = ['DelimitedParser', 'DelimitedTable', 'XMLParser', 'parse_json', 'parse_yaml']
