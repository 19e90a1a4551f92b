from typing import Dict
from vintagepy.domain.models import FilterStyle, Tier
from vintagepy.features.color.models import (
    COOL_TEAL_GRADE,
    GOLDEN_HOUR_GRADE,
    POLAROID_RESPONSE,
    SEVENTIES_GRADE,
)
from vintagepy.services.rendering.stages import (
    Pipeline,
    StageSpec,
    color_controls,
    color_grade,
    dramatic_tones,
    film_grain,
    photo_effect,
    sepia_tone,
    soft_glow,
    temperature,
    vignette,
)

# Numeric literals below define the look of each style
FULL_PIPELINES: Dict[FilterStyle, Pipeline] = {
    FilterStyle.CLASSIC: (
        photo_effect("instant"),
        color_controls(0.7, 0.05, 1.15),
        temperature(5400, 150),
        vignette(0.3, 1.5),
    ),
    FilterStyle.SEPIA: (
        sepia_tone(0.8),
        color_controls(1.1, 0.08, 1.2),
        film_grain(0.05),
        vignette(0.4, 1.2),
    ),
    FilterStyle.FILM_70S: (
        photo_effect("transfer"),
        color_grade("70s-grade", SEVENTIES_GRADE),
        color_controls(1.25, 0.02, 1.3),
        film_grain(0.08),
    ),
    FilterStyle.POLAROID: (
        photo_effect("instant"),
        color_grade("polaroid-response", POLAROID_RESPONSE),
        color_controls(0.8, 0.12, 0.9),
        vignette(0.6, 1.0),
    ),
    FilterStyle.FADED: (
        photo_effect("fade"),
        color_controls(0.5, 0.15, 0.8),
        temperature(7000, -50),
        vignette(0.25, 2.0),
    ),
    FilterStyle.WARM_GLOW: (
        temperature(4800, 200),
        color_controls(1.1, 0.1, 1.1),
        color_grade("golden-hour-grade", GOLDEN_HOUR_GRADE),
        soft_glow(5.0),
    ),
    FilterStyle.COOL_VINTAGE: (
        temperature(8000, -100),
        color_grade("cool-teal-grade", COOL_TEAL_GRADE),
        color_controls(0.9, 0.03, 1.2),
        film_grain(0.04),
    ),
    FilterStyle.HIGH_CONTRAST: (
        photo_effect("noir"),
        color_controls(0.6, 0.0, 1.8),
        dramatic_tones(0.7, 1.3, 1.0),
        vignette(0.5, 1.3),
    ),
}


# Preview tier: one character stage plus a shared adjustment
LIGHTWEIGHT_BASE: Dict[FilterStyle, StageSpec] = {
    FilterStyle.CLASSIC: photo_effect("instant"),
    FilterStyle.SEPIA: sepia_tone(0.8),
    FilterStyle.FILM_70S: photo_effect("transfer"),
    FilterStyle.POLAROID: photo_effect("instant"),
    FilterStyle.FADED: photo_effect("fade"),
    FilterStyle.WARM_GLOW: photo_effect("instant"),
    FilterStyle.COOL_VINTAGE: temperature(8000, -100),
    FilterStyle.HIGH_CONTRAST: photo_effect("noir"),
}

LIGHTWEIGHT_ADJUSTMENT = color_controls(0.85, 0.05, 1.1)

LIGHTWEIGHT_PIPELINES: Dict[FilterStyle, Pipeline] = {
    style: (base, LIGHTWEIGHT_ADJUSTMENT) for style, base in LIGHTWEIGHT_BASE.items()
}

PIPELINES: Dict[Tier, Dict[FilterStyle, Pipeline]] = {
    Tier.FULL: FULL_PIPELINES,
    Tier.LIGHTWEIGHT: LIGHTWEIGHT_PIPELINES,
}


def get_pipeline(style: FilterStyle, tier: Tier = Tier.FULL) -> Pipeline:
    return PIPELINES[tier][style]
