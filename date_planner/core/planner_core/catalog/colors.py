"""Fixed palette of event colors."""

import random
from enum import Enum
from typing import List, Optional

from ..errors import UnknownColorError


class ColorOption(str, Enum):
    """Palette entries, valued by their display name."""

    PRIMARY = "primary"
    GRAY = "gray"
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    MINT = "mint"
    CYAN = "cyan"
    INDIGO = "indigo"
    PURPLE = "purple"

    @property
    def style(self) -> str:
        """Rich style used to paint this color."""
        return RICH_STYLES[self]


RICH_STYLES = {
    ColorOption.PRIMARY: "default",
    ColorOption.GRAY: "grey62",
    ColorOption.RED: "red",
    ColorOption.ORANGE: "dark_orange",
    ColorOption.YELLOW: "yellow",
    ColorOption.GREEN: "green",
    ColorOption.MINT: "aquamarine1",
    ColorOption.CYAN: "cyan",
    ColorOption.INDIGO: "slate_blue1",
    ColorOption.PURPLE: "medium_purple",
}


class ColorOptions:
    """Selectable colors for events."""

    all: List[ColorOption] = list(ColorOption)
    default: ColorOption = ColorOption.PRIMARY

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> ColorOption:
        """Pick one palette color at random (default color if the palette is empty)."""
        if not cls.all:
            return cls.default
        return (rng or random).choice(cls.all)

    @classmethod
    def parse(cls, name: str) -> ColorOption:
        """Look up a palette color by name, ignoring case."""
        try:
            return ColorOption(name.strip().lower())
        except ValueError:
            raise UnknownColorError(name) from None
