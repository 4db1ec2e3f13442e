import numpy as np
import pytest

from chromatic.conversions import convert, np_convert
from chromatic.errors import UnknownColourSpaceError, ValidationError
from chromatic.types import ColourSpace
from tests.samples import rgb_samples, samples_rgb_hsl, samples_rgb_hsv, samples_rgb_lab

ALL_SPACES = list(ColourSpace)


def test_convert_rgb_to_hue_spaces():
    for rgb, hsl in samples_rgb_hsl.items():
        assert convert(rgb, "rgb", "hsl") == pytest.approx(hsl, abs=1e-9)
    for rgb, hsv in samples_rgb_hsv.items():
        assert convert(rgb, ColourSpace.RGB, ColourSpace.HSV) == pytest.approx(hsv, abs=1e-9)


def test_convert_rgb_to_lab():
    for rgb, lab in samples_rgb_lab.items():
        assert convert(rgb, "rgb", "lab") == pytest.approx(lab, abs=0.1)


def test_convert_srgb_decodes_before_lab():
    # sRGB mid grey is linear 0.214
    l, a, b = convert((0.5, 0.5, 0.5), "srgb", "lab")
    assert convert((0.5, 0.5, 0.5), "srgb", "rgb") == pytest.approx((0.214041,) * 3, abs=1e-5)
    assert l == pytest.approx(53.39, abs=0.05)
    assert a == pytest.approx(0.0, abs=1e-3)
    assert b == pytest.approx(0.0, abs=1e-3)


def test_grey_uses_luma_on_every_path():
    assert convert((0.0, 0.0, 1.0), "rgb", "grey") == pytest.approx((0.0722,))
    assert convert((0.0, 0.0, 1.0), "srgb", "grey") == pytest.approx((0.0722,))
    assert convert((1.0, 0.0, 0.0), "rgb", "grey") == pytest.approx((0.2126,))
    # Y of pure green through the XYZ hub
    xyz_green = convert((0.0, 1.0, 0.0), "rgb", "xyz")
    assert convert(xyz_green, "xyz", "grey") == pytest.approx((0.7152,), abs=1e-4)
    assert convert((0.25,), "grey", "rgb") == (0.25, 0.25, 0.25)


def test_alpha_is_carried_defaulted_and_dropped():
    assert convert((1.0, 0.0, 0.0, 0.3), "rgb_alpha", "hsv_alpha") == pytest.approx((0.0, 1.0, 1.0, 0.3))
    assert convert((1.0, 0.0, 0.0), "rgb", "hsl_alpha") == pytest.approx((0.0, 1.0, 0.5, 1.0))
    assert convert((0.0, 1.0, 0.5, 0.2), "hsl_alpha", "rgb") == pytest.approx((1.0, 0.0, 0.0))
    assert convert((0.5, 0.7), "grey_alpha", "lab_alpha")[-1] == pytest.approx(0.7)


def test_same_space_returns_validated_components():
    assert convert((0, 1, 0.5), "rgb", "rgb") == (0.0, 1.0, 0.5)
    assert convert((360, 0.5, 0.5), "hsl", "hsl") == (0.0, 0.5, 0.5)


def test_invalid_input_is_rejected():
    with pytest.raises(ValidationError):
        convert((1.5, 0.0, 0.0), "rgb", "hsl")
    with pytest.raises(ValidationError):
        convert((0.5, 0.5), "rgb", "hsl")
    with pytest.raises(UnknownColourSpaceError):
        convert((0.5, 0.5, 0.5), "cmyk", "rgb")
    with pytest.raises(ValueError):
        convert((0.5, 0.5, 0.5), "rgb", "ycbcr")


def test_out_of_gamut_output_is_fitted():
    # saturated Lab colour outside sRGB
    rgb = convert((50.0, 127.0, -128.0), "lab", "rgb")
    assert all(0.0 <= c <= 1.0 for c in rgb)


@pytest.mark.parametrize("space", [ColourSpace.SRGB, ColourSpace.HSL, ColourSpace.HSV, ColourSpace.LAB, ColourSpace.XYZ])
def test_round_trip_through_space(space):
    for rgb in rgb_samples:
        there = convert(rgb, "rgb", space)
        assert convert(there, space, "rgb") == pytest.approx(rgb, abs=1e-5)


def test_grey_round_trip_through_lab():
    for grey in (0.0, 0.1, 0.5, 0.9, 1.0):
        lab = convert((grey,), "grey", "lab")
        assert convert(lab, "lab", "grey") == pytest.approx((grey,), abs=1e-6)


def test_every_pair_of_spaces_converts():
    for source in ALL_SPACES:
        for target in ALL_SPACES:
            components = (0.0,) * (4 if source.has_alpha else 3)
            if source.base is ColourSpace.GREY:
                components = components[:2] if source.has_alpha else components[:1]
            out = convert(components, source, target)
            expected = 1 if target.base is ColourSpace.GREY else 3
            assert len(out) == expected + (1 if target.has_alpha else 0)


def test_np_convert_matches_scalar():
    rgb = np.array(rgb_samples)
    for target in ("hsl", "hsv", "lab", "xyz", "srgb", "grey", "hsv_alpha"):
        expected = np.array([convert(c, "rgb", target) for c in rgb_samples])
        assert np.allclose(np_convert(rgb, "rgb", target), expected, atol=1e-9)


def test_np_convert_back_to_rgb():
    rgb = np.array(rgb_samples)
    for space in ("hsl", "hsv", "lab", "srgb"):
        there = np_convert(rgb, "rgb", space)
        assert np.allclose(np_convert(there, space, "rgb"), rgb, atol=1e-5)


def test_np_convert_validates_input():
    with pytest.raises(ValidationError):
        np_convert(np.array([[0.5, 1.5, 0.0]]), "rgb", "hsl")
    with pytest.raises(ValidationError):
        np_convert(np.array([[0.5, 0.5]]), "rgb", "hsl")
    with pytest.raises(ValidationError):
        np_convert(np.array([[np.nan, 0.5, 0.5]]), "rgb", "hsl")


def test_np_convert_accepts_full_turn_hue():
    out = np_convert(np.array([[360.0, 1.0, 0.5]]), "hsl", "rgb")
    assert np.allclose(out, [[1.0, 0.0, 0.0]])


def test_np_convert_snaps_float_noise_like_convert():
    noisy = (1.0 + 1e-12, 0.0, -1e-12)
    expected = convert(noisy, "rgb", "hsl")
    assert expected == pytest.approx((0.0, 1.0, 0.5))
    assert np.allclose(np_convert(np.array([noisy]), "rgb", "hsl"), [expected])
    assert np.allclose(np_convert(np.array([[360.0 + 1e-10, 1.0, 0.5]]), "hsl", "rgb"), [[1.0, 0.0, 0.0]])
    with pytest.raises(ValidationError):
        np_convert(np.array([[1.0 + 1e-6, 0.0, 0.0]]), "rgb", "hsl")


# Lab and XYZ values outside the sRGB gamut
OUT_OF_GAMUT = [
    ("xyz", (0.0, 1.0, 0.0)),
    ("xyz", (0.9, 0.1, 0.0)),
    ("xyz", (0.0, 0.0, 1.08883)),
    ("lab", (50.0, 127.0, -128.0)),
    ("lab", (80.0, -128.0, 127.0)),
    ("lab", (30.0, 100.0, 100.0)),
    ("lab_alpha", (60.0, -90.0, -90.0, 0.4)),
    ("xyz_alpha", (0.2, 0.8, 0.9, 0.7)),
]


def test_xyz_to_hue_space_clamps_into_gamut():
    assert convert((0.0, 1.0, 0.0), "xyz", "hsl") == pytest.approx((120.0, 1.0, 0.5))
    assert convert((0.0, 1.0, 0.0), "xyz", "hsv") == pytest.approx((120.0, 1.0, 1.0))
    assert np.allclose(np_convert(np.array([[0.0, 1.0, 0.0]]), "xyz", "hsl"), [[120.0, 1.0, 0.5]])


@pytest.mark.parametrize("source, components", OUT_OF_GAMUT)
@pytest.mark.parametrize("target", ["hsl", "hsv", "srgb"])
def test_xyz_hub_sources_agree_with_route_through_rgb(source, components, target):
    space = ColourSpace(source)
    rgb_space = ColourSpace.RGB_ALPHA if space.has_alpha else ColourSpace.RGB
    target_space = ColourSpace(target).with_alpha if space.has_alpha else ColourSpace(target)

    direct = convert(components, space, target_space)
    via_rgb = convert(convert(components, space, rgb_space), rgb_space, target_space)
    assert direct == pytest.approx(via_rgb, abs=1e-9)

    vectorised = np_convert(np.array([components]), space, target_space)
    assert np.allclose(vectorised, [via_rgb], atol=1e-9)


def test_lab_to_hsv_hue_follows_clamped_rgb():
    r, g, b = convert((50.0, 127.0, -128.0), "lab", "rgb")
    expected_hue = convert((r, g, b), "rgb", "hsv")[0]
    assert convert((50.0, 127.0, -128.0), "lab", "hsv")[0] == pytest.approx(expected_hue)
