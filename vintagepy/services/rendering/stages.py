"""
Named, parameterized pipeline stages.

A stage resolves its operator from the render context at call time. Soft
stages hand back their input when the operator is missing or fails; hard
stages raise ``CoreImageFilterFailed``.
"""

from dataclasses import dataclass
from typing import Any, Tuple
import numpy as np
from vintagepy.domain.errors import CoreImageFilterFailed
from vintagepy.domain.interfaces import IProcessor, PipelineContext
from vintagepy.domain.types import ImageBuffer
from vintagepy.features.color.models import (
    PHOTO_EFFECTS,
    ColorControls,
    ColorMatrix,
    SepiaTone,
    TemperatureTint,
)
from vintagepy.features.effects.models import (
    FilmGrain,
    HighlightShadow,
    SoftGlow,
    Vignette,
)
from vintagepy.kernel.system.logging import get_logger
from vintagepy.services.rendering.context import RenderContext

logger = get_logger(__name__)


@dataclass(frozen=True)
class StageSpec:
    name: str
    operator: str
    params: Any
    hard: bool = False


Pipeline = Tuple[StageSpec, ...]


class Stage(IProcessor):
    def __init__(self, spec: StageSpec, render_context: RenderContext):
        self.spec = spec
        self.render_context = render_context

    def _fallback(self, image: ImageBuffer, context: PipelineContext, reason: str) -> ImageBuffer:
        if self.spec.hard:
            raise CoreImageFilterFailed(f"{self.spec.name}: {reason}")
        logger.warning(f"Stage '{self.spec.name}' skipped: {reason}")
        context.skipped_stages.append(self.spec.name)
        return image

    def process(self, image: ImageBuffer, context: PipelineContext) -> ImageBuffer:
        op = self.render_context.operator(self.spec.operator)
        if op is None:
            return self._fallback(
                image, context, f"operator '{self.spec.operator}' unavailable"
            )

        try:
            result = op(image, self.spec.params, self.render_context)
        except Exception as e:
            return self._fallback(image, context, str(e) or type(e).__name__)

        if not isinstance(result, np.ndarray) or result.shape != image.shape:
            return self._fallback(image, context, "operator returned a malformed image")
        if not np.all(np.isfinite(result)):
            return self._fallback(image, context, "operator returned non-finite values")
        return result


def photo_effect(preset: str) -> StageSpec:
    return StageSpec(f"{preset}-preset", "photo_effect", PHOTO_EFFECTS[preset])


def sepia_tone(intensity: float) -> StageSpec:
    return StageSpec("sepia-tone", "sepia", SepiaTone(intensity))


def color_controls(saturation: float, brightness: float, contrast: float) -> StageSpec:
    return StageSpec(
        "color-controls",
        "color_controls",
        ColorControls(saturation, brightness, contrast),
    )


def temperature(kelvin: float, tint: float) -> StageSpec:
    return StageSpec("temperature", "temperature", TemperatureTint(kelvin, tint))


def color_grade(name: str, matrix: ColorMatrix) -> StageSpec:
    return StageSpec(name, "color_matrix", matrix)


def vignette(intensity: float, radius: float) -> StageSpec:
    return StageSpec("vignette", "vignette", Vignette(intensity, radius))


def film_grain(intensity: float) -> StageSpec:
    return StageSpec("film-grain", "film_grain", FilmGrain(intensity))


def soft_glow(radius: float = 5.0) -> StageSpec:
    return StageSpec("soft-glow", "soft_glow", SoftGlow(radius))


def dramatic_tones(
    highlight_amount: float = 0.7, shadow_amount: float = 1.3, radius: float = 1.0
) -> StageSpec:
    return StageSpec(
        "dramatic-tones",
        "highlight_shadow",
        HighlightShadow(highlight_amount, shadow_amount, radius),
    )
