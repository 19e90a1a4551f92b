from dataclasses import dataclass
from typing import Dict, Tuple
from vintagepy.domain.types import Vector3


@dataclass(frozen=True)
class ColorControls:
    """
    Saturation / brightness / contrast adjustment.
    Recipes keep saturation and contrast in [0, 2], brightness in [-1, 1].
    """

    saturation: float = 1.0
    brightness: float = 0.0
    contrast: float = 1.0


@dataclass(frozen=True)
class TemperatureTint:
    """
    White-point remap from a reference neutral to a target neutral.
    Temperature in Kelvin, tint in locus-normal units (positive = magenta).
    """

    temperature: float = 6500.0
    tint: float = 0.0
    neutral_temperature: float = 6500.0
    neutral_tint: float = 0.0


@dataclass(frozen=True)
class ColorMatrix:
    """
    Per-channel row vectors plus bias. Alpha is carried through unchanged.
    """

    r_vector: Vector3 = (1.0, 0.0, 0.0)
    g_vector: Vector3 = (0.0, 1.0, 0.0)
    b_vector: Vector3 = (0.0, 0.0, 1.0)
    bias: Vector3 = (0.0, 0.0, 0.0)

    def rows(self) -> Tuple[Vector3, Vector3, Vector3]:
        return (self.r_vector, self.g_vector, self.b_vector)


@dataclass(frozen=True)
class SepiaTone:
    intensity: float = 1.0


@dataclass(frozen=True)
class PhotoEffect:
    """
    Photographic character preset: a color response followed by a tone curve.
    """

    name: str
    response: ColorMatrix
    saturation: float
    black_lift: float
    white_point: float
    # Positive values steepen midtones, negative values flatten them
    curve: float


# Orange/teal grading typical of 70s prints
SEVENTIES_GRADE = ColorMatrix(
    r_vector=(1.1, 0.05, 0.0),
    g_vector=(0.02, 1.0, 0.02),
    b_vector=(0.0, 0.1, 1.2),
    bias=(0.02, -0.01, -0.02),
)

# Instant film characteristic color response
POLAROID_RESPONSE = ColorMatrix(
    r_vector=(1.05, 0.02, 0.01),
    g_vector=(0.01, 0.95, 0.01),
    b_vector=(0.02, 0.05, 1.1),
    bias=(0.03, 0.02, 0.01),
)

GOLDEN_HOUR_GRADE = ColorMatrix(
    r_vector=(1.15, 0.05, 0.0),
    g_vector=(0.05, 1.05, 0.0),
    b_vector=(0.0, 0.02, 0.9),
    bias=(0.05, 0.03, 0.0),
)

COOL_TEAL_GRADE = ColorMatrix(
    r_vector=(0.95, 0.0, 0.02),
    g_vector=(0.0, 1.05, 0.05),
    b_vector=(0.05, 0.1, 1.15),
    bias=(-0.02, 0.01, 0.05),
)


PHOTO_EFFECTS: Dict[str, PhotoEffect] = {
    "instant": PhotoEffect(
        "instant",
        ColorMatrix(
            r_vector=(1.0, 0.05, 0.0),
            g_vector=(0.02, 0.95, 0.03),
            b_vector=(0.0, 0.05, 0.85),
            bias=(0.04, 0.03, 0.0),
        ),
        saturation=0.85,
        black_lift=0.06,
        white_point=0.96,
        curve=0.1,
    ),
    "transfer": PhotoEffect(
        "transfer",
        ColorMatrix(
            r_vector=(1.08, 0.02, 0.0),
            g_vector=(0.02, 1.0, 0.0),
            b_vector=(0.0, 0.04, 0.88),
            bias=(0.02, 0.01, -0.02),
        ),
        saturation=1.1,
        black_lift=0.03,
        white_point=0.98,
        curve=0.15,
    ),
    "fade": PhotoEffect(
        "fade",
        ColorMatrix(bias=(0.02, 0.02, 0.03)),
        saturation=0.6,
        black_lift=0.12,
        white_point=0.92,
        curve=-0.1,
    ),
    "noir": PhotoEffect(
        "noir",
        ColorMatrix(),
        saturation=0.0,
        black_lift=0.0,
        white_point=1.0,
        curve=0.35,
    ),
}
