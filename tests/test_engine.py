import unittest
from unittest.mock import patch

import numpy as np
import pytest

from conftest import decode_bytes, encode_png, make_gradient
from vintagepy.domain.errors import (
    CoreImageFilterFailed,
    DataConversionFailed,
    InvalidInputData,
)
from vintagepy.domain.interfaces import PipelineContext
from vintagepy.domain.models import FilterStyle, Tier
from vintagepy.infrastructure.codec import PillowCodec
from vintagepy.services.rendering.context import RenderContext
from vintagepy.services.rendering.engine import VintageEngine
from vintagepy.services.rendering.stages import sepia_tone

COSMETIC_OPERATORS = ["vignette", "film_grain", "soft_glow", "color_matrix"]


@pytest.fixture(scope="module")
def engine() -> VintageEngine:
    return VintageEngine()


@pytest.mark.parametrize("tier", list(Tier))
@pytest.mark.parametrize("style", list(FilterStyle))
def test_run_preserves_dimensions(engine, gradient_png, style, tier):
    out = engine.run(style, gradient_png, tier)
    assert out[:2] == b"\xff\xd8"
    assert decode_bytes(out).shape == (24, 32, 3)


@pytest.mark.parametrize("style", list(FilterStyle))
def test_full_differs_from_lightweight(engine, gradient_png, style):
    full = engine.run(style, gradient_png, Tier.FULL)
    light = engine.run(style, gradient_png, Tier.LIGHTWEIGHT)
    assert full != light


@pytest.mark.parametrize("tier", list(Tier))
@pytest.mark.parametrize("style", list(FilterStyle))
def test_single_application_is_deterministic(engine, gradient_png, style, tier):
    assert engine.run(style, gradient_png, tier) == engine.run(style, gradient_png, tier)


@pytest.mark.parametrize("operator", COSMETIC_OPERATORS)
def test_missing_cosmetic_operator_still_succeeds(gradient_png, operator):
    degraded = VintageEngine(RenderContext().without(operator))
    for style in FilterStyle:
        out = degraded.run(style, gradient_png, Tier.FULL)
        assert decode_bytes(out).shape == (24, 32, 3)


def test_failing_operator_matches_missing_operator(gradient_png):
    def broken(img, params, ctx):
        raise MemoryError("no room for a vignette")

    raising = VintageEngine(RenderContext().with_operator("vignette", broken))
    missing = VintageEngine(RenderContext().without("vignette"))
    assert raising.run(FilterStyle.CLASSIC, gradient_png) == missing.run(
        FilterStyle.CLASSIC, gradient_png
    )


def test_skipped_stages_are_recorded():
    img = make_gradient().astype(np.float32) / 255.0
    engine = VintageEngine(RenderContext().without("vignette", "film_grain"))
    ctx = PipelineContext(original_size=img.shape[:2])
    engine.apply(img, FilterStyle.SEPIA, Tier.FULL, ctx)
    assert ctx.skipped_stages == ["film-grain", "vignette"]


def test_empty_input_is_invalid(engine):
    with pytest.raises(InvalidInputData):
        engine.run(FilterStyle.CLASSIC, b"")


def test_unrecognized_input_is_invalid(engine):
    with pytest.raises(InvalidInputData):
        engine.run(FilterStyle.SEPIA, b"definitely not a raster image", Tier.LIGHTWEIGHT)


def test_oversized_input_is_invalid(engine, gradient_png, monkeypatch):
    monkeypatch.setattr("PIL.Image.MAX_IMAGE_PIXELS", 100)
    with pytest.raises(InvalidInputData):
        engine.run(FilterStyle.SEPIA, gradient_png, Tier.LIGHTWEIGHT)


def test_no_operators_is_engine_failure(gradient_png):
    engine = VintageEngine(RenderContext(operators={}))
    with pytest.raises(CoreImageFilterFailed):
        engine.run(FilterStyle.CLASSIC, gradient_png)


def test_encode_failure_is_data_conversion(engine, gradient_png):
    with patch("PIL.Image.Image.save", side_effect=OSError("encoder unavailable")):
        with pytest.raises(DataConversionFailed):
            engine.run(FilterStyle.FADED, gradient_png)


def test_quality_per_tier(engine):
    assert engine.quality_for(Tier.FULL) == 0.92
    assert engine.quality_for(Tier.LIGHTWEIGHT) == 0.9


def test_resave_keeps_dimensions(engine, gradient_png):
    out = engine.resave(gradient_png)
    assert decode_bytes(out).shape == (24, 32, 3)


class TestSepiaOnRed(unittest.TestCase):
    def test_sepia_full_tier_on_red(self):
        img = np.zeros((64, 64, 3), dtype=np.uint8)
        img[..., 0] = 255
        data = encode_png(img)

        engine = VintageEngine()
        out = engine.run(FilterStyle.SEPIA, data, Tier.FULL)
        self.assertGreater(len(out), 0)

        result = decode_bytes(out).astype(np.float64).mean(axis=(0, 1)) / 255.0
        self.assertGreater(result[0], result[1])
        self.assertGreater(result[1], result[2])

        # Reference: the sepia tone stage on its own
        decoded = PillowCodec().decode(data)
        ctx = PipelineContext(original_size=decoded.shape[:2])
        toned = engine.fold(decoded, (sepia_tone(0.8),), ctx).mean(axis=(0, 1))

        self.assertLess(result[1] / result[0], toned[1] / toned[0])
        self.assertLess(result[2] / result[0], toned[2] / toned[0])


if __name__ == "__main__":
    unittest.main()
