import numpy as np
import pytest

from irisplot.geometry.scales import BandScale, LinearScale
from irisplot.utils.errors import DataFormatError


def test_linear_scale_maps_proportionally():
    scale = LinearScale((0, 10), (0, 100))

    assert scale(5) == pytest.approx(50)
    assert scale(2.5) == pytest.approx(25)


def test_domain_bounds_map_to_range_bounds():
    scale = LinearScale((1.0, 6.9), (430, 0))

    assert scale(1.0) == 430
    assert scale(6.9) == 0


def test_ascending_range_is_increasing():
    scale = LinearScale((1.0, 7.4), (0, 790))
    pixels = scale(np.array([1.0, 2.5, 4.0, 7.4]))

    assert np.all(np.diff(pixels) > 0)


def test_inverted_range_is_decreasing():
    scale = LinearScale((0.1, 2.5), (430, 0))
    pixels = scale(np.array([0.1, 0.5, 1.3, 2.5]))

    assert np.all(np.diff(pixels) < 0)


def test_values_outside_domain_extrapolate_unless_clamped():
    scale = LinearScale((0, 10), (0, 100))
    clamped = LinearScale((0, 10), (0, 100), clamp=True)

    assert scale(12) == pytest.approx(120)
    assert clamped(12) == 100
    assert clamped(-3) == 0


def test_invert_round_trip():
    scale = LinearScale((1.0, 6.9), (430, 0))

    assert scale.invert(scale(3.3)) == pytest.approx(3.3)


def test_zero_width_domain_is_rejected():
    with pytest.raises(DataFormatError):
        LinearScale((2.0, 2.0), (0, 100))
    with pytest.raises(DataFormatError):
        LinearScale.from_values([1.5, 1.5, 1.5], (0, 100))


def test_non_finite_domain_is_rejected():
    with pytest.raises(DataFormatError):
        LinearScale((0.0, float('nan')), (0, 100))


def test_from_values_pads_upper_bound():
    scale = LinearScale.from_values([1.0, 3.0, 6.9], (0, 790), pad_upper=0.5)

    assert scale.domain == (1.0, pytest.approx(7.4))


def _is_nice_step(step):
    exponent = np.floor(np.log10(step))
    mantissa = step / 10 ** exponent
    return any(np.isclose(mantissa, m) for m in (1, 2, 5, 10))


@pytest.mark.parametrize("domain", [(1.0, 6.9), (0.1, 2.5), (1.0, 7.4), (0.0, 100.0)])
def test_ticks_fall_inside_domain_with_nice_spacing(domain):
    ticks = LinearScale(domain, (0, 100)).ticks()
    steps = np.diff(ticks)

    assert len(ticks) >= 2
    assert ticks == sorted(ticks)
    assert domain[0] <= ticks[0] and ticks[-1] <= domain[1]
    assert np.allclose(steps, steps[0])
    assert _is_nice_step(steps[0])


def test_ticks_for_round_domain():
    assert LinearScale((0, 100), (0, 1)).ticks() == [float(v) for v in range(0, 101, 10)]
    assert LinearScale((0, 100), (0, 1)).ticks(0) == []


def test_ticks_have_no_float_noise():
    ticks = LinearScale((0.1, 2.5), (430, 0)).ticks()

    assert all(round(t, 10) == t for t in ticks)


def test_band_scale_positions():
    scale = BandScale(['a', 'b', 'c'], (0, 920), padding=0.2)

    assert scale.step == pytest.approx(287.5)
    assert scale.bandwidth == pytest.approx(230)
    assert scale('a') == pytest.approx(57.5)
    assert scale('b') == pytest.approx(345)
    assert scale('c') == pytest.approx(632.5)
    assert scale.center('a') == pytest.approx(172.5)


def test_bands_do_not_overlap_and_fit_range():
    scale = BandScale(['setosa', 'versicolor', 'virginica'], (0, 910), padding=0.2)
    bands = scale.bands()

    assert scale.bandwidth <= scale.step
    for (_, _, end), (_, start, _) in zip(bands, bands[1:]):
        assert end <= start
    assert bands[0][1] >= 0
    assert bands[-1][2] <= 910


def test_band_scale_reversed_range():
    scale = BandScale(['a', 'b'], (100, 0), padding=0.0)

    assert scale('a') == pytest.approx(50)
    assert scale('b') == pytest.approx(0)


def test_band_scale_drops_duplicates_and_rejects_unknown():
    scale = BandScale(['a', 'b', 'a'], (0, 100))

    assert scale.domain == ['a', 'b']
    assert 'a' in scale
    with pytest.raises(KeyError):
        scale('z')


def test_band_scale_rejects_bad_padding():
    with pytest.raises(ValueError):
        BandScale(['a'], (0, 100), padding=1.5)
