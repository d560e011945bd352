"""
Conversion dispatcher

Resolves a (source, target) pair to a ConversionRoutine and runs it. Lookup
order:

1. an exact routine for the pair
2. any source format to Morse: the raw input text is encoded as-is
3. Morse to any other target: rejected, Plain Text is the way through
4. everything else: unsupported

Every exception raised while resolving or converting is turned into a
failed ConversionResult; nothing propagates to the caller.
"""

from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..core.capabilities import FORMAT_LABELS, SOURCE_FORMATS, parse_format
from ..core.errors import UnsupportedConversionError
from ..core.models import ConversionFormat, ConversionResult
from ..utils.logging import FormatBridgeLogger
from . import delimited_routes, json_routes, markup_routes, morse_routes
from .base import ConversionRoutine

FormatArg = Union[str, ConversionFormat]
RoutineKey = Tuple[ConversionFormat, ConversionFormat]

DEFAULT_ROUTES: List[ConversionRoutine] = [
    *json_routes.ROUTES,
    *markup_routes.ROUTES,
    *delimited_routes.ROUTES,
    *morse_routes.ROUTES,
]


class ConversionDispatcher:
    """Route conversion requests to their routines"""

    def __init__(self, routines: Optional[Iterable[ConversionRoutine]] = None):
        self.routines: Dict[RoutineKey, ConversionRoutine] = {}
        for routine in DEFAULT_ROUTES if routines is None else routines:
            if routine.key in self.routines:
                raise ValueError(f"Duplicate conversion routine for {routine.name}")
            self.routines[routine.key] = routine

        self._source_formats = {option.value for option in SOURCE_FORMATS}

    def resolve(self, source: FormatArg, target: FormatArg) -> ConversionRoutine:
        """Find the routine for a pair or raise UnsupportedConversionError"""
        source_fmt = parse_format(source)
        target_fmt = parse_format(target)
        source_name = source_fmt.value if source_fmt else str(source)
        target_name = target_fmt.value if target_fmt else str(target)

        if source_fmt is not None and target_fmt is not None and source_fmt != target_fmt:
            routine = self.routines.get((source_fmt, target_fmt))
            if routine is not None:
                return routine

            if target_fmt is ConversionFormat.MORSE and source_fmt in self._source_formats:
                return ConversionRoutine(source_fmt, target_fmt, morse_routes.encode_text)

            if source_fmt is ConversionFormat.MORSE:
                raise UnsupportedConversionError(
                    f"Conversion from Morse Code to {FORMAT_LABELS[target_fmt]} is not supported. "
                    "Convert to Plain Text first.",
                    source_name,
                    target_name,
                )

        raise UnsupportedConversionError(
            f"Conversion from {source_name} to {target_name} is not supported yet",
            source_name,
            target_name,
        )

    def convert(
        self, content: str, source: FormatArg, target: FormatArg, indent_size: int = 2
    ) -> ConversionResult:
        """Run one conversion and report the outcome as a ConversionResult"""
        with FormatBridgeLogger.conversion(f"{source}-to-{target}"):
            try:
                if indent_size < 0:
                    raise ValueError(f"Indent size must be non-negative, got {indent_size}")
                routine = self.resolve(source, target)
                FormatBridgeLogger.debug(f"Running {routine.func.__name__}")
                result = routine.apply(content, indent_size)
            except Exception as e:
                FormatBridgeLogger.warning(f"Failed: {e}")
                return ConversionResult.fail(str(e) or e.__class__.__name__)

            FormatBridgeLogger.info(f"{len(content)} characters in, {len(result)} out")

        return ConversionResult.ok(result)

    def supported_pairs(self) -> List[RoutineKey]:
        """Pairs with an explicit routine (the Morse fallbacks are not listed)"""
        return list(self.routines.keys())


_default_dispatcher: Optional[ConversionDispatcher] = None


def get_dispatcher() -> ConversionDispatcher:
    """Get or create the shared dispatcher"""
    global _default_dispatcher
    if _default_dispatcher is None:
        _default_dispatcher = ConversionDispatcher()
    return _default_dispatcher
