"""Conversion routine type shared by the route modules and the dispatcher"""

from dataclasses import dataclass
from typing import Callable, Tuple

from ..core.models import ConversionFormat

RoutineFunc = Callable[[str, int], str]


@dataclass(frozen=True)
class ConversionRoutine:
    """One (source, target) transform: apply(input, indent_size) -> text"""
    source: ConversionFormat
    target: ConversionFormat
    func: RoutineFunc

    @property
    def key(self) -> Tuple[ConversionFormat, ConversionFormat]:
        return (self.source, self.target)

    @property
    def name(self) -> str:
        return f"{self.source.value}-to-{self.target.value}"

    def apply(self, content: str, indent_size: int) -> str:
        return self.func(content, indent_size)
