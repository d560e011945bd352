"""
FormatBridge - Text data format conversion

This package converts text between JSON, XML, YAML, CSV/TSV, SQL, Protobuf
and Avro schemas, Markdown and HTML tables, plain text and Morse code.
"""

__version__ = "1.0.0"

from .api import convert, convert_async, convert_batch
from .converters.base import ConversionRoutine
from .converters.dispatcher import ConversionDispatcher, get_dispatcher
from .core.capabilities import (
    FORMAT_EXTENSIONS,
    FORMAT_LABELS,
    SOURCE_FORMATS,
    TARGET_FORMAT_MAP,
    get_target_formats,
    is_supported,
)
from .core.errors import ConversionError, StructureError, UnsupportedConversionError
from .core.models import ConversionFormat, ConversionResult, FormatOption, ValueKind
from .core.morse import MORSE_CODE, MORSE_DECODE
from .core.morse import decode as decode_morse
from .core.morse import encode as encode_morse
from .core.morse import is_valid_morse

# Public API
__all__ = [
    # Version
    "__version__",
    # Models
    "ConversionFormat",
    "ConversionResult",
    "FormatOption",
    "ValueKind",
    # Errors
    "ConversionError",
    "StructureError",
    "UnsupportedConversionError",
    # Capabilities
    "SOURCE_FORMATS",
    "TARGET_FORMAT_MAP",
    "FORMAT_LABELS",
    "FORMAT_EXTENSIONS",
    "get_target_formats",
    "is_supported",
    # Dispatcher
    "ConversionDispatcher",
    "ConversionRoutine",
    "get_dispatcher",
    # Morse
    "MORSE_CODE",
    "MORSE_DECODE",
    "encode_morse",
    "decode_morse",
    "is_valid_morse",
    # High-level API functions
    "convert",
    "convert_async",
    "convert_batch",
]
