import itertools

import pytest

from chromatic import FormatError, FormatErrorKind, Grey, GreyAlpha, Hsl, HslAlpha, Hsv, Lab, Rgb, RgbAlpha, Srgb, ValidationError, Xyz


def test_hex_round_trip_rgba():
    assert RgbAlpha.from_hex("#FF0000FF").to_hex() == "#FF0000FF"


def test_hex_round_trip_sampled_grid():
    levels = range(0, 256, 51)
    for data in itertools.product(levels, repeat=4):
        code = "#" + "".join(f"{b:02X}" for b in data)
        assert RgbAlpha.from_hex(code).to_hex() == code


def test_hex_is_case_insensitive_and_canonical():
    assert Srgb.from_hex("#ff8000").to_hex() == "#FF8000"
    assert Srgb.from_hex("  #Ff8000\n").to_bytes() == (255, 128, 0)


def test_short_form_replicates_nibbles():
    assert Srgb.from_hex("#F80").to_bytes() == (255, 136, 0)
    assert RgbAlpha.from_hex("#F808").to_bytes() == (255, 136, 0, 136)
    assert Grey.from_hex("#8").to_bytes() == (136,)
    assert Grey.from_hex("#80").to_bytes() == (128,)
    assert GreyAlpha.from_hex("#8F").to_bytes() == (136, 255)
    assert GreyAlpha.from_hex("#80FF").to_bytes() == (128, 255)


@pytest.mark.parametrize("text, kind", [
    ("FF0000", FormatErrorKind.INVALID_FORMAT),
    ("", FormatErrorKind.INVALID_FORMAT),
    ("#", FormatErrorKind.INVALID_FORMAT),
    ("#12345", FormatErrorKind.INVALID_FORMAT),
    ("#FF00FF00", FormatErrorKind.INVALID_FORMAT),
    ("#GG0000", FormatErrorKind.PARSE_HEX),
    ("#12 456", FormatErrorKind.PARSE_HEX),
])
def test_bad_hex(text, kind):
    with pytest.raises(FormatError) as excinfo:
        Rgb.from_hex(text)
    assert excinfo.value.kind is kind
    assert excinfo.value.text == text
    assert isinstance(excinfo.value, ValueError)


def test_hue_colours_use_rgb_projection():
    assert Hsl(0.0, 1.0, 0.5).to_hex() == "#FF0000"
    assert Hsv(120.0, 1.0, 1.0).to_hex() == "#00FF00"
    assert Hsl.from_hex("#00FF00") == Hsl(120.0, 1.0, 0.5)
    assert HslAlpha.from_hex("#FF000080").alpha == pytest.approx(128 / 255)
    assert HslAlpha(0.0, 1.0, 0.5, 0.5).to_hex() == "#FF000080"


def test_lab_and_xyz_use_srgb_projection():
    assert Lab(100.0, 0.0, 0.0).to_hex() == "#FFFFFF"
    assert Lab(0.0, 0.0, 0.0).to_hex() == "#000000"
    assert Lab.from_hex("#FFFFFF") == Lab(100.0, 0.0, 0.0)
    # sRGB mid grey, not linear mid grey
    assert Xyz.from_hex("#808080").y == pytest.approx(0.2158, abs=1e-3)
    assert Srgb.from_hex("#808080").convert(Lab).to_hex() == "#808080"


def test_str_is_hex():
    assert str(Rgb(1.0, 0.0, 0.0)) == "#FF0000"
    assert str(GreyAlpha(1.0, 0.0)) == "#FF00"


def test_decimal_form():
    assert Rgb.from_str("0.2, 0.4, 0.6").to_components() == (0.2, 0.4, 0.6)
    assert Rgb.from_str(" 0.2,0.4 ,0.6 ").to_components() == (0.2, 0.4, 0.6)
    assert Hsl.from_str("210, 0.5, 0.4") == Hsl(210, 0.5, 0.4)
    assert Rgb(0.2, 0.4, 0.6).to_decimal() == "0.2, 0.4, 0.6"
    assert Rgb.from_str(Rgb(0.2, 0.4, 0.6).to_decimal()) == Rgb(0.2, 0.4, 0.6)


def test_decimal_alpha_defaults_to_opaque():
    assert RgbAlpha.from_str("0.2, 0.4, 0.6").alpha == 1.0
    assert RgbAlpha.from_str("0.2, 0.4, 0.6, 0.5").alpha == 0.5


def test_from_str_dispatches_on_prefix():
    assert Rgb.from_str("#FF0000") == Rgb(1.0, 0.0, 0.0)
    assert Rgb.from_str("1, 0, 0") == Rgb(1.0, 0.0, 0.0)


@pytest.mark.parametrize("text, kind", [
    ("0.2, x, 0.6", FormatErrorKind.PARSE_FLOAT),
    ("0.2, , 0.6", FormatErrorKind.PARSE_FLOAT),
    ("0.2, 0.4", FormatErrorKind.INVALID_FORMAT),
    ("0.2, 0.4, 0.6, 0.8", FormatErrorKind.INVALID_FORMAT),
    ("   ", FormatErrorKind.INVALID_FORMAT),
])
def test_bad_decimal(text, kind):
    with pytest.raises(FormatError) as excinfo:
        Rgb.from_str(text)
    assert excinfo.value.kind is kind


def test_decimal_values_are_validated():
    with pytest.raises(ValidationError):
        Rgb.from_str("2, 0, 0")
    with pytest.raises(ValidationError):
        Rgb.from_str("nan, 0, 0")
