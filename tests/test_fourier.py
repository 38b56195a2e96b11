import math

import pytest

from ballspectrum.fourier import (
    fft,
    index_to_frequency,
    is_power_of_two,
    number_of_bits_needed,
    reverse_bits,
)


@pytest.mark.parametrize("x", [2, 4, 8, 1024, 2048])
def test_powers_of_two(x):
    assert is_power_of_two(x) is True


@pytest.mark.parametrize("x", [0, 1, 3, 6, 100, 2047])
def test_not_powers_of_two(x):
    assert is_power_of_two(x) is False


@pytest.mark.parametrize("k", range(1, 13))
def test_number_of_bits_needed_is_log2(k):
    assert number_of_bits_needed(1 << k) == k


@pytest.mark.parametrize("samples", [0, 1])
def test_number_of_bits_needed_small(samples):
    assert number_of_bits_needed(samples) == 0


def test_reverse_bits_value():
    assert reverse_bits(1, 3) == 4


@pytest.mark.parametrize("bits", [1, 3, 5, 8])
def test_reverse_bits_is_involution(bits):
    for i in range(1 << bits):
        assert reverse_bits(reverse_bits(i, bits), bits) == i


def test_reverse_bits_is_permutation():
    assert sorted(reverse_bits(i, 4) for i in range(16)) == list(range(16))


def test_index_to_frequency_out_of_range():
    assert index_to_frequency(8000, 16, 16) == 0.0
    assert index_to_frequency(8000, 16, 40) == 0.0


def test_index_to_frequency_zero_and_nyquist():
    assert index_to_frequency(8000, 16, 0) == 0.0
    assert index_to_frequency(8000, 16, 8) == pytest.approx(8000 / 2)


@pytest.mark.parametrize("index", range(1, 8))
def test_index_to_frequency_upper_half_is_negative(index):
    positive = index_to_frequency(8000, 16, index)
    assert positive > 0
    assert index_to_frequency(8000, 16, 16 - index) == pytest.approx(-positive)


def test_fft_rejects_non_power_of_two():
    with pytest.raises(ValueError):
        fft([1.0, 2.0, 3.0])


def test_fft_rejects_mismatched_imaginary():
    with pytest.raises(ValueError):
        fft([1.0, 2.0, 3.0, 4.0], [0.0, 0.0])


def test_fft_impulse_is_flat():
    real, imag = fft([1.0] + [0.0] * 7)
    assert real == pytest.approx([1.0] * 8)
    assert imag == pytest.approx([0.0] * 8, abs=1e-12)


def test_fft_constant_concentrates_in_dc():
    value = 3.0
    real, imag = fft([value] * 16)
    assert real[0] == pytest.approx(value * 16)
    assert real[1:] == pytest.approx([0.0] * 15, abs=1e-9)
    assert imag == pytest.approx([0.0] * 16, abs=1e-9)


def test_fft_round_trip():
    signal_re = [math.sin(i * 0.7) + 0.3 * i for i in range(32)]
    signal_im = [math.cos(i * 1.3) for i in range(32)]
    real, imag = fft(signal_re, signal_im)
    back_re, back_im = fft(real, imag, inverse=True)
    assert back_re == pytest.approx(signal_re, abs=1e-9)
    assert back_im == pytest.approx(signal_im, abs=1e-9)


def test_fft_real_input_has_conjugate_symmetry():
    signal = [((i * 37) % 11) - 5.0 for i in range(64)]
    real, imag = fft(signal)
    for k in range(1, 64):
        assert real[k] == pytest.approx(real[64 - k], abs=1e-9)
        assert imag[k] == pytest.approx(-imag[64 - k], abs=1e-9)


def test_fft_parseval():
    signal = [math.sin(i) * (i % 5) for i in range(128)]
    real, imag = fft(signal)
    energy_time = sum(x * x for x in signal)
    energy_freq = sum(r * r + i * i for r, i in zip(real, imag)) / 128
    assert energy_freq == pytest.approx(energy_time, rel=1e-9)


def test_fft_linearity():
    a = [float(i % 3) for i in range(16)]
    b = [float((i * 5) % 7) for i in range(16)]
    ra, ia = fft(a)
    rb, ib = fft(b)
    rs, is_ = fft([x + y for x, y in zip(a, b)])
    assert rs == pytest.approx([x + y for x, y in zip(ra, rb)], abs=1e-9)
    assert is_ == pytest.approx([x + y for x, y in zip(ia, ib)], abs=1e-9)


def test_fft_cosine_peaks_at_its_bin():
    n, k = 64, 5
    signal = [math.cos(2 * math.pi * k * i / n) for i in range(n)]
    real, imag = fft(signal)
    magnitudes = [math.hypot(r, i) for r, i in zip(real, imag)]
    peak = max(range(n // 2), key=lambda idx: magnitudes[idx])
    assert peak == k
    assert magnitudes[k] == pytest.approx(n / 2)


def test_fft_does_not_modify_input():
    signal = [1.0, 2.0, 3.0, 4.0]
    fft(signal)
    assert signal == [1.0, 2.0, 3.0, 4.0]