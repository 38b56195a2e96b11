"""Radix-2 fast Fourier transform and helpers for frequency bins."""

from __future__ import annotations

import math
from collections.abc import Sequence

PI = 3.14159265358979323846


def is_power_of_two(x: int) -> bool:
    """Return True if ``x`` is a power of two of at least 2."""
    if x < 2:
        return False
    return not (x & (x - 1))


def number_of_bits_needed(samples: int) -> int:
    """Return the number of bits needed to index ``samples`` points.

    For a power of two this is its base-2 logarithm; below 2 it is 0.
    """
    if samples < 2:
        return 0
    return (samples & -samples).bit_length() - 1


def reverse_bits(index: int, bits: int) -> int:
    """Reverse the lowest ``bits`` bits of ``index``."""
    rev = 0
    for _ in range(bits):
        rev = (rev << 1) | (index & 1)
        index >>= 1
    return rev


def index_to_frequency(base_freq: float, samples: int, index: int) -> float:
    """Return the frequency of bin ``index`` in a transform of ``samples`` points.

    Bins in the upper half map to negative frequencies; an index out of
    range gives 0.0.
    """
    if index >= samples:
        return 0.0
    if index <= samples // 2:
        return index / samples * base_freq
    return -(samples - index) / samples * base_freq


def fft(
    real_in: Sequence[float],
    imag_in: Sequence[float] | None = None,
    inverse: bool = False,
) -> tuple[list[float], list[float]]:
    """Transform a complex signal given as real and imaginary parts.

    ``imag_in`` may be None for a purely real signal. The length must be a
    power of two. Returns the real and imaginary parts of the result; the
    inverse transform is scaled by 1/n.
    """
    n = len(real_in)
    if not is_power_of_two(n):
        raise ValueError(f"number of samples must be a power of two, got {n}")
    if imag_in is not None and len(imag_in) != n:
        raise ValueError("real and imaginary parts differ in length")

    angle_numerator = -2.0 * PI if inverse else 2.0 * PI
    num_bits = number_of_bits_needed(n)

    real = [0.0] * n
    imag = [0.0] * n
    for i, value in enumerate(real_in):
        j = reverse_bits(i, num_bits)
        real[j] = float(value)
        imag[j] = 0.0 if imag_in is None else float(imag_in[i])

    block_end = 1
    block_size = 2
    while block_size <= n:
        delta_angle = angle_numerator / block_size
        sm2 = math.sin(-2 * delta_angle)
        sm1 = math.sin(-delta_angle)
        cm2 = math.cos(-2 * delta_angle)
        cm1 = math.cos(-delta_angle)
        w = 2 * cm1

        for start in range(0, n, block_size):
            ar1, ar2 = cm1, cm2
            ai1, ai2 = sm1, sm2
            for j in range(start, start + block_end):
                ar0 = w * ar1 - ar2
                ar2, ar1 = ar1, ar0
                ai0 = w * ai1 - ai2
                ai2, ai1 = ai1, ai0

                k = j + block_end
                tr = ar0 * real[k] - ai0 * imag[k]
                ti = ar0 * imag[k] + ai0 * real[k]

                real[k] = real[j] - tr
                imag[k] = imag[j] - ti
                real[j] += tr
                imag[j] += ti

        block_end = block_size
        block_size <<= 1

    if inverse:
        real = [value / n for value in real]
        imag = [value / n for value in imag]

    return real, imag