import numpy as np
import pytest

from chromatic import (
    ColourSpace,
    Grey,
    Hsl,
    HslAlpha,
    Hsv,
    HsvAlpha,
    Lab,
    LabAlpha,
    Precision,
    RangeConversionError,
    Rgb,
    RgbAlpha,
    Srgb,
    Xyz,
    get_colour_class,
)
from chromatic.errors import UnknownColourSpaceError
from chromatic.types import channel_names, is_hue_space, quantize
from tests.samples import samples_rgb_hsl, samples_rgb_lab


def test_convert_accepts_space_string_or_class():
    red = Rgb(1.0, 0.0, 0.0)
    for target in (ColourSpace.HSL, "hsl", Hsl):
        hsl = red.convert(target)
        assert isinstance(hsl, Hsl)
        assert hsl.to_components() == pytest.approx((0.0, 1.0, 0.5))


def test_convert_to_same_class_returns_self():
    colour = Rgb(0.2, 0.4, 0.6)
    assert colour.convert(Rgb) is colour


def test_convert_samples():
    for rgb, hsl in samples_rgb_hsl.items():
        assert Rgb(*rgb).convert(Hsl) == Hsl(*hsl)
    for rgb, lab in samples_rgb_lab.items():
        assert Rgb(*rgb).convert("lab") == Lab(*lab)
        assert Srgb(*rgb).convert("lab") == Lab(*lab)


def test_grey_projection():
    assert Rgb(0, 0, 1).convert(Grey).grey == pytest.approx(0.0722)
    assert Srgb(0, 0, 1).convert(Grey).grey == pytest.approx(0.0722)
    assert Grey(0.4).convert(Rgb).to_components() == (0.4, 0.4, 0.4)
    assert Grey(0.4).convert(Lab).convert(Grey) == Grey(0.4)


def test_round_trips_between_classes():
    colour = Hsv(200.0, 0.5, 0.8)
    for target in (Rgb, Srgb, Hsl, Lab, Xyz):
        assert colour.convert(target).convert(Hsv) == colour


def test_alpha_conversions():
    translucent = RgbAlpha(1.0, 0.0, 0.0, 0.25)
    hsla = translucent.convert(HslAlpha)
    assert hsla.alpha == 0.25
    assert hsla.to_components() == pytest.approx((0.0, 1.0, 0.5, 0.25))

    assert translucent.without_alpha() == Rgb(1.0, 0.0, 0.0)
    assert isinstance(translucent.convert(Lab), Lab)
    assert Rgb(1, 0, 0).convert(LabAlpha).alpha == 1.0


def test_with_alpha():
    opaque = Hsl(120.0, 1.0, 0.5)
    translucent = opaque.with_alpha(0.5)
    assert isinstance(translucent, HslAlpha)
    assert translucent.to_components() == (120.0, 1.0, 0.5, 0.5)
    assert isinstance(opaque.with_alpha(), HslAlpha)
    assert opaque.with_alpha().alpha == 1.0

    again = translucent.with_alpha(0.1)
    assert isinstance(again, HslAlpha)
    assert again.alpha == 0.1
    with pytest.raises(ValueError):
        translucent.with_alpha(1.5)


def test_get_colour_class():
    assert get_colour_class("rgb_alpha") is RgbAlpha
    assert get_colour_class(ColourSpace.LAB) is Lab
    with pytest.raises(UnknownColourSpaceError):
        get_colour_class("cmyk")
    with pytest.raises(UnknownColourSpaceError):
        Rgb(0, 0, 0).convert("cmyk")


def test_single_precision():
    colour = Rgb(0.1, 0.2, 0.3, precision="float32")
    assert colour.precision is Precision.SINGLE
    assert colour.red == float(np.float32(0.1))
    assert colour.red != 0.1
    assert colour == Rgb(0.1, 0.2, 0.3)

    assert colour.convert(Hsl).precision is Precision.SINGLE
    assert colour.interpolate(Rgb(1, 1, 1, precision=Precision.SINGLE), 0.5).precision is Precision.SINGLE
    assert colour.with_channel("red", 0.5).precision is Precision.SINGLE


def test_single_precision_stays_in_domain():
    xyz = Xyz(0.95047, 1.0, 1.08883, precision=Precision.SINGLE)
    for value, channel in zip(xyz, xyz.channels):
        assert channel.minimum <= value <= channel.maximum
    hue = Hsl(359.99999999, 1, 0.5, precision=Precision.SINGLE).hue
    assert 0.0 <= hue < 360.0


def test_double_precision_is_default():
    assert Rgb(0.1, 0.2, 0.3).precision is Precision.DOUBLE
    assert Rgb(0.1, 0.2, 0.3).red == 0.1


def test_quantize_rejects_overflow():
    with pytest.raises(RangeConversionError):
        quantize(1e39, Precision.SINGLE)
    assert quantize(1e39, Precision.DOUBLE) == 1e39


def test_hue_space_lookup():
    assert is_hue_space("hsl") and is_hue_space(ColourSpace.HSV_ALPHA)
    assert not is_hue_space("lab")
    assert channel_names(Hsv.channels) == ("hue", "saturation", "value")


def test_out_of_gamut_xyz_matches_route_through_rgb():
    assert Xyz(0, 1, 0).convert(Hsl) == Hsl(120, 1, 0.5)
    assert Xyz(0, 1, 0).convert(Hsl).to_hex() == "#00FF00"
    for colour, via, targets in (
        (Xyz(0, 1, 0), Rgb, (Hsl, Hsv)),
        (Lab(50, 127, -128), Rgb, (Hsl, Hsv)),
        (LabAlpha(80, -128, 127, 0.5), RgbAlpha, (HslAlpha, HsvAlpha)),
    ):
        for target in targets:
            assert colour.convert(target) == colour.convert(via).convert(target)
