from enum import Enum
from typing import Dict, List


class FilterStyle(Enum):
    """
    Closed, ordered set of vintage looks. Member order drives navigation.
    """

    CLASSIC = "Classic Vintage"
    SEPIA = "Sepia Dreams"
    FILM_70S = "70s Film"
    POLAROID = "Polaroid"
    FADED = "Faded Glory"
    WARM_GLOW = "Warm Glow"
    COOL_VINTAGE = "Cool Vintage"
    HIGH_CONTRAST = "High Contrast"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        return STYLE_DESCRIPTIONS[self]

    @property
    def emoji(self) -> str:
        return STYLE_EMOJI[self]

    @property
    def slug(self) -> str:
        return self.name.lower().replace("_", "-")

    @property
    def index(self) -> int:
        return _ORDER.index(self)

    def next(self) -> "FilterStyle":
        return _ORDER[(self.index + 1) % len(_ORDER)]

    def previous(self) -> "FilterStyle":
        return _ORDER[(self.index - 1) % len(_ORDER)]

    @classmethod
    def from_slug(cls, slug: str) -> "FilterStyle":
        for style in cls:
            if style.slug == slug.strip().lower():
                return style
        raise ValueError(f"Unknown filter style: {slug}")


_ORDER: List[FilterStyle] = list(FilterStyle)


STYLE_DESCRIPTIONS: Dict[FilterStyle, str] = {
    FilterStyle.CLASSIC: "Timeless vintage look with warm tones",
    FilterStyle.SEPIA: "Classic sepia tones with soft contrast",
    FilterStyle.FILM_70S: "Retro 70s film aesthetic with orange/teal grading",
    FilterStyle.POLAROID: "Instant camera feel with dreamy colors",
    FilterStyle.FADED: "Sun-bleached, faded memories effect",
    FilterStyle.WARM_GLOW: "Golden hour warmth with soft glow",
    FilterStyle.COOL_VINTAGE: "Cool, moody teal and cyan tones",
    FilterStyle.HIGH_CONTRAST: "Dramatic black and white vintage",
}

STYLE_EMOJI: Dict[FilterStyle, str] = {
    FilterStyle.CLASSIC: "📷",
    FilterStyle.SEPIA: "🤎",
    FilterStyle.FILM_70S: "🕺",
    FilterStyle.POLAROID: "📸",
    FilterStyle.FADED: "☀️",
    FilterStyle.WARM_GLOW: "🌅",
    FilterStyle.COOL_VINTAGE: "🌊",
    FilterStyle.HIGH_CONTRAST: "⚫",
}


class Tier(Enum):
    """
    Quality/performance tier of a pipeline.
    """

    FULL = "full"
    LIGHTWEIGHT = "lightweight"
