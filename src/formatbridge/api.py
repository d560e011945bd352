"""
FormatBridge Public API

High-level functions for integrating FormatBridge into other projects.
Every function returns ConversionResult objects; conversion failures are
reported in the result, never raised.
"""

from typing import Dict, Iterable, Union

from .converters.dispatcher import get_dispatcher
from .core.capabilities import parse_format
from .core.models import ConversionFormat, ConversionResult

FormatArg = Union[str, ConversionFormat]


def convert(
    content: str, source: FormatArg, target: FormatArg, indent_size: int = 2
) -> ConversionResult:
    """
    Convert text from one format to another.

    Args:
        content: Input text in the source format
        source: Source format tag (e.g. "json" or ConversionFormat.JSON)
        target: Target format tag
        indent_size: Spaces per indentation level where the target has one

    Returns:
        ConversionResult with either the converted text or an error message

    Example:
        import formatbridge

        result = formatbridge.convert('[{"a": "1,2", "b": 3}]', "json", "csv")
        if result.success:
            print(result.result)   # a,b / "1,2",3
        else:
            print(result.error)
    """
    return get_dispatcher().convert(content, source, target, indent_size)


async def convert_async(
    content: str, source: FormatArg, target: FormatArg, indent_size: int = 2
) -> ConversionResult:
    """
    Awaitable form of convert().

    The conversion still runs synchronously on the calling thread; this only
    lets async callers await it like any other coroutine.
    """
    return convert(content, source, target, indent_size)


def convert_batch(
    content: str, source: FormatArg, targets: Iterable[FormatArg], indent_size: int = 2
) -> Dict[Union[ConversionFormat, str], ConversionResult]:
    """
    Convert one input into several target formats.

    Targets are converted one after another in the given order; a failure
    for one target has no effect on the others.

    Args:
        content: Input text in the source format
        source: Source format tag
        targets: Target format tags, in the order results should appear
        indent_size: Spaces per indentation level

    Returns:
        Dict mapping each target (as ConversionFormat when known, else the
        given string) to its ConversionResult

    Example:
        results = formatbridge.convert_batch(data, "csv", ["json", "sql", "markdown"])
        for target, result in results.items():
            print(target, result.success)
    """
    results: Dict[Union[ConversionFormat, str], ConversionResult] = {}
    for target in targets:
        key = parse_format(target) or target
        results[key] = convert(content, source, target, indent_size)
    return results
