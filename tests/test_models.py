import pytest
from vintagepy.domain.errors import (
    CGImageCreationFailed,
    CoreImageFilterFailed,
    DataConversionFailed,
    FilterError,
    InvalidInputData,
)
from vintagepy.domain.models import FilterStyle, Tier


def test_style_set_is_closed_and_ordered():
    assert [s.display_name for s in FilterStyle] == [
        "Classic Vintage",
        "Sepia Dreams",
        "70s Film",
        "Polaroid",
        "Faded Glory",
        "Warm Glow",
        "Cool Vintage",
        "High Contrast",
    ]
    assert [s.index for s in FilterStyle] == list(range(8))


def test_previous_wraps_from_first_to_last():
    first = list(FilterStyle)[0]
    assert first.previous() is FilterStyle.HIGH_CONTRAST
    assert first.previous().index == 7


def test_next_wraps_from_last_to_first():
    assert FilterStyle.HIGH_CONTRAST.next() is FilterStyle.CLASSIC


def test_full_cycle_returns_home():
    style = FilterStyle.POLAROID
    for _ in range(len(FilterStyle)):
        style = style.next()
    assert style is FilterStyle.POLAROID


def test_every_style_has_presentation_metadata():
    for style in FilterStyle:
        assert style.description
        assert style.emoji
    assert FilterStyle.SEPIA.description == "Classic sepia tones with soft contrast"
    assert FilterStyle.COOL_VINTAGE.emoji == "🌊"


def test_slug_round_trip():
    assert FilterStyle.FILM_70S.slug == "film-70s"
    assert FilterStyle.from_slug("Warm-Glow") is FilterStyle.WARM_GLOW
    with pytest.raises(ValueError):
        FilterStyle.from_slug("lomo")


def test_tiers():
    assert [t.value for t in Tier] == ["full", "lightweight"]


@pytest.mark.parametrize(
    "error_cls, message",
    [
        (InvalidInputData, "Invalid input image data"),
        (CoreImageFilterFailed, "Core Image filter failed"),
        (CGImageCreationFailed, "Failed to create final image"),
        (DataConversionFailed, "Failed to convert image to data"),
    ],
)
def test_error_taxonomy(error_cls, message):
    err = error_cls("detail here")
    assert isinstance(err, FilterError)
    assert str(err) == f"{message}: detail here"
    assert str(error_cls()) == message
