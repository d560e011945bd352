"""
Converter modules for FormatBridge

This package holds the per-source conversion routines and the dispatcher
that selects one for a (source, target) pair.
"""

from .base import ConversionRoutine
from .dispatcher import ConversionDispatcher, get_dispatcher

__all__ = ['ConversionDispatcher', 'ConversionRoutine', 'get_dispatcher']
