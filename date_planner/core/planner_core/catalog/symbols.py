"""Fixed catalog of event symbols."""

import random
from typing import Dict, List, Optional

from ..errors import UnknownSymbolError

# Symbol identifier -> glyph shown in the terminal
SYMBOL_GLYPHS: Dict[str, str] = {
    "house.fill": "🏠",
    "ticket.fill": "🎟",
    "gamecontroller.fill": "🎮",
    "theatermasks.fill": "🎭",
    "ladybug.fill": "🐞",
    "books.vertical.fill": "📚",
    "moon.zzz.fill": "🌙",
    "umbrella.fill": "☂",
    "paintbrush.pointed.fill": "🖌",
    "leaf.fill": "🍃",
    "globe.americas.fill": "🌎",
    "clock.fill": "🕒",
    "building.2.fill": "🏢",
    "gift.fill": "🎁",
    "graduationcap.fill": "🎓",
    "heart.rectangle.fill": "💌",
    "phone.bubble.left.fill": "📞",
    "cloud.rain.fill": "🌧",
    "building.columns.fill": "🏛",
    "mic.circle.fill": "🎤",
    "comb.fill": "💈",
    "person.3.fill": "👥",
    "bell.fill": "🔔",
    "hammer.fill": "🔨",
    "star.fill": "⭐",
    "crown.fill": "👑",
    "briefcase.fill": "💼",
    "speaker.wave.3.fill": "🔊",
    "tshirt.fill": "👕",
    "tag.fill": "🏷",
    "airplane": "✈",
    "pawprint.fill": "🐾",
    "case.fill": "🧳",
    "creditcard.fill": "💳",
    "infinity.circle.fill": "♾",
    "dice.fill": "🎲",
    "heart.fill": "❤",
    "camera.fill": "📷",
    "bicycle": "🚲",
    "radio.fill": "📻",
    "car.fill": "🚗",
    "flag.fill": "🚩",
    "map.fill": "🗺",
    "figure.wave": "👋",
    "mappin.and.ellipse": "📍",
    "facemask.fill": "😷",
    "eyeglasses": "👓",
    "tram.fill": "🚋",
}

# Names used by sample data that are not offered in the picker
EXTRA_GLYPHS: Dict[str, str] = {
    "book.fill": "📖",
}

FALLBACK_GLYPH = "•"


class EventSymbols:
    """Selectable icon identifiers for events."""

    symbol_names: List[str] = list(SYMBOL_GLYPHS)

    @classmethod
    def random_name(cls, rng: Optional[random.Random] = None) -> str:
        """Pick one symbol name at random.

        Args:
            rng: Random source (module-level generator if None)

        Returns:
            A symbol name, or "" when the catalog is empty
        """
        if not cls.symbol_names:
            return ""
        return (rng or random).choice(cls.symbol_names)

    @classmethod
    def random_names(cls, number: int, rng: Optional[random.Random] = None) -> List[str]:
        """Pick `number` symbol names at random, repeats allowed."""
        return [cls.random_name(rng) for _ in range(number)]

    @classmethod
    def search(cls, text: str) -> List[str]:
        """Filter symbol names by case-insensitive substring."""
        needle = text.strip().lower()
        if not needle:
            return list(cls.symbol_names)
        return [name for name in cls.symbol_names if needle in name.lower()]

    @classmethod
    def glyph(cls, name: str) -> str:
        """Terminal glyph for a symbol name."""
        if name in SYMBOL_GLYPHS:
            return SYMBOL_GLYPHS[name]
        return EXTRA_GLYPHS.get(name, FALLBACK_GLYPH)

    @classmethod
    def validate(cls, name: str) -> str:
        """Return the name unchanged if it is in the catalog."""
        if name not in cls.symbol_names:
            raise UnknownSymbolError(name)
        return name
