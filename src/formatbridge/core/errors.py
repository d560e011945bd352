"""Exceptions raised inside conversion routines"""


class ConversionError(ValueError):
    """Base class for conversion failures raised by FormatBridge itself"""


class StructureError(ConversionError):
    """Input parsed fine but does not have the shape the target needs"""


class UnsupportedConversionError(ConversionError):
    """No routine exists for the requested format pair"""

    def __init__(self, message: str, source: str = "", target: str = ""):
        super().__init__(message)
        self.source = source
        self.target = target
