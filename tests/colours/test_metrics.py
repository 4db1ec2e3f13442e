import pytest

from chromatic import D50, D65, Lab, LabAlpha, Rgb, Xyz, XyzAlpha


def test_delta_e_is_euclidean_in_lab():
    assert Lab(50, 0, 0).delta_e(Lab(50, 3, 4)) == pytest.approx(5.0)
    assert Lab(50, 0, 0).delta_e(Lab(60, 0, 0)) == pytest.approx(10.0)
    assert Lab(20, 10, -10).delta_e(Lab(20, 10, -10)) == 0.0


def test_delta_e94_weights_chroma_of_reference():
    # chroma change only, reference has no chroma
    assert Lab(50, 0, 0).delta_e94(Lab(50, 3, 4)) == pytest.approx(5.0)
    # same pair the other way round: S_C = 1 + 0.045 * 5
    assert Lab(50, 3, 4).delta_e94(Lab(50, 0, 0)) == pytest.approx(5.0 / 1.225)
    # lightness is not weighted
    assert Lab(50, 30, 40).delta_e94(Lab(40, 30, 40)) == pytest.approx(10.0)


def test_delta_e94_hue_term():
    # same chroma, hue rotated: only the hue term contributes
    reference, sample = Lab(50, 10, 0), Lab(50, 0, 10)
    expected = (200 ** 0.5) / (1 + 0.015 * 10)
    assert reference.delta_e94(sample) == pytest.approx(expected)
    assert reference.delta_e94(sample) < reference.delta_e(sample)


def test_metrics_convert_other_colours():
    white = Rgb(1, 1, 1)
    assert Lab(100, 0, 0).delta_e(white) == pytest.approx(0.0, abs=1e-3)
    assert LabAlpha(100, 0, 0, 0.5).delta_e(white) == pytest.approx(0.0, abs=1e-3)


def test_xyz_distance():
    assert Xyz(0, 0, 0).distance(Xyz(0.3, 0.4, 0)) == pytest.approx(0.5)
    assert XyzAlpha(0, 0, 0, 0.2).distance(Xyz(0.3, 0.4, 0)) == pytest.approx(0.5)
    assert Xyz(*D65).distance(Rgb(1, 1, 1)) == pytest.approx(0.0, abs=1e-6)


def test_relative_to_white():
    assert Xyz(*D65).relative_to_white() == pytest.approx((1.0, 1.0, 1.0))
    half_d50 = Xyz(D50[0] / 2, D50[1] / 2, D50[2] / 2)
    assert half_d50.relative_to_white(D50) == pytest.approx((0.5, 0.5, 0.5))


def test_reference_whites():
    assert Xyz.d65_reference_white() == (0.95047, 1.0, 1.08883)
    assert Xyz(0, 0, 0).d50_reference_white() == (0.96422, 1.0, 0.82521)
