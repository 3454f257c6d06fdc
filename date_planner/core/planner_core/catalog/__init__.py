"""Symbol catalog and color palette for Date Planner."""

from .colors import ColorOption, ColorOptions
from .symbols import EventSymbols, SYMBOL_GLYPHS

__all__ = [
    "ColorOption",
    "ColorOptions",
    "EventSymbols",
    "SYMBOL_GLYPHS",
]
