from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional
from vintagepy.domain.types import ImageBuffer
from vintagepy.features.color.logic import (
    apply_color_controls,
    apply_color_matrix,
    apply_photo_effect,
    apply_sepia,
    apply_temperature_tint,
)
from vintagepy.features.effects.logic import (
    apply_film_grain,
    apply_highlight_shadow,
    apply_soft_glow,
    apply_vignette,
)
from vintagepy.kernel.system.config import APP_CONFIG

Operator = Callable[[ImageBuffer, Any, "RenderContext"], ImageBuffer]


def _photo_effect(img: ImageBuffer, params: Any, ctx: "RenderContext") -> ImageBuffer:
    return apply_photo_effect(img, params)


def _sepia(img: ImageBuffer, params: Any, ctx: "RenderContext") -> ImageBuffer:
    return apply_sepia(img, params.intensity)


def _color_controls(img: ImageBuffer, params: Any, ctx: "RenderContext") -> ImageBuffer:
    return apply_color_controls(
        img, params.saturation, params.brightness, params.contrast
    )


def _temperature(img: ImageBuffer, params: Any, ctx: "RenderContext") -> ImageBuffer:
    return apply_temperature_tint(
        img,
        params.temperature,
        params.tint,
        neutral=(params.neutral_temperature, params.neutral_tint),
    )


def _color_matrix(img: ImageBuffer, params: Any, ctx: "RenderContext") -> ImageBuffer:
    return apply_color_matrix(img, params)


def _vignette(img: ImageBuffer, params: Any, ctx: "RenderContext") -> ImageBuffer:
    return apply_vignette(img, params.intensity, params.radius)


def _film_grain(img: ImageBuffer, params: Any, ctx: "RenderContext") -> ImageBuffer:
    return apply_film_grain(img, params.intensity, ctx.grain_seed, params.scale)


def _soft_glow(img: ImageBuffer, params: Any, ctx: "RenderContext") -> ImageBuffer:
    return apply_soft_glow(img, params.radius)


def _highlight_shadow(img: ImageBuffer, params: Any, ctx: "RenderContext") -> ImageBuffer:
    return apply_highlight_shadow(
        img, params.highlight_amount, params.shadow_amount, params.radius
    )


DEFAULT_OPERATORS: Mapping[str, Operator] = MappingProxyType(
    {
        "photo_effect": _photo_effect,
        "sepia": _sepia,
        "color_controls": _color_controls,
        "temperature": _temperature,
        "color_matrix": _color_matrix,
        "vignette": _vignette,
        "film_grain": _film_grain,
        "soft_glow": _soft_glow,
        "highlight_shadow": _highlight_shadow,
    }
)


@dataclass(frozen=True)
class RenderContext:
    """
    Operator table and fixed render settings shared by every invocation of an
    engine. Immutable, so concurrent runs can read it without locking.
    """

    operators: Mapping[str, Operator] = field(default_factory=lambda: DEFAULT_OPERATORS)
    grain_seed: int = APP_CONFIG.grain_seed

    @property
    def is_available(self) -> bool:
        return len(self.operators) > 0

    def operator(self, name: str) -> Optional[Operator]:
        return self.operators.get(name)

    def without(self, *names: str) -> "RenderContext":
        """
        Copy of the context lacking the named operators.
        """
        remaining = {k: v for k, v in self.operators.items() if k not in names}
        return RenderContext(MappingProxyType(remaining), self.grain_seed)

    def with_operator(self, name: str, op: Operator) -> "RenderContext":
        ops = dict(self.operators)
        ops[name] = op
        return RenderContext(MappingProxyType(ops), self.grain_seed)
