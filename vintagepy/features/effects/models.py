from dataclasses import dataclass


@dataclass(frozen=True)
class Vignette:
    """
    Radial darkening. Radius is relative to the half-diagonal.
    """

    intensity: float = 0.0
    radius: float = 1.0


@dataclass(frozen=True)
class FilmGrain:
    intensity: float = 0.0
    # Noise is generated at 1/scale resolution and upscaled
    scale: float = 1.5


@dataclass(frozen=True)
class SoftGlow:
    radius: float = 5.0


@dataclass(frozen=True)
class HighlightShadow:
    """
    Dramatic tone remap. highlight_amount < 1 compresses highlights,
    shadow_amount > 0 lifts shadows.
    """

    highlight_amount: float = 1.0
    shadow_amount: float = 0.0
    radius: float = 1.0
