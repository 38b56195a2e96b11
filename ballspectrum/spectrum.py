"""Turn recorded voice samples into polylines for a signal and spectrum plot."""

from __future__ import annotations

import math
from collections.abc import Sequence

from ballspectrum.fourier import fft

VOICE_CAPACITY = 10000
FFT_LENGTH = 2048
SPECTRUM_BINS = FFT_LENGTH // 2
ORIGIN_X = 20
MAX_SIGNAL_POINTS = 20000
X_DIVISOR = 128
SPECTRUM_BASELINE_OFFSET = 100
SPECTRUM_SCALE = 100

Point = tuple[int, int]


def _trunc_div(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def voice_from_bytes(data: bytes) -> list[int]:
    """Read recorded bytes as signed 8-bit values, keeping at most the voice capacity."""
    return [byte - 256 if byte >= 128 else byte for byte in data[:VOICE_CAPACITY]]


def signal_polyline(voice_data: Sequence[int], width: int, height: int) -> list[Point]:
    """Return the points of the time-domain plot, starting at the plot origin."""
    y0 = _trunc_div(height, 4)
    step = 1
    if len(voice_data) > MAX_SIGNAL_POINTS:
        step = len(voice_data) // MAX_SIGNAL_POINTS
    offset = _trunc_div(height, X_DIVISOR)
    points: list[Point] = [(ORIGIN_X, y0)]
    for i in range(1, len(voice_data), step):
        x = _trunc_div(i * width, X_DIVISOR)
        y = _trunc_div(int(voice_data[i]), 2) - offset
        points.append((ORIGIN_X + x, y0 - y))
    return points


def spectrum_magnitudes(voice_data: Sequence[int]) -> list[float]:
    """Return the magnitudes of the lower half of a 2048-point transform.

    Samples are halved, missing samples count as zero, and samples past
    2048 are ignored. The DC bin is left at zero.
    """
    samples = [float(_trunc_div(int(v), 2)) for v in voice_data[:FFT_LENGTH]]
    samples.extend([0.0] * (FFT_LENGTH - len(samples)))
    real, imag = fft(samples)
    magnitudes = [0.0]
    magnitudes.extend(
        math.hypot(re, im) for re, im in zip(real[1:SPECTRUM_BINS], imag[1:SPECTRUM_BINS])
    )
    return magnitudes


def spectrum_polyline(magnitudes: Sequence[float], width: int, height: int) -> list[Point]:
    """Return the points of the spectrum plot, starting at the plot origin."""
    if not magnitudes:
        raise ValueError("no magnitudes to plot")
    y0 = height - SPECTRUM_BASELINE_OFFSET
    offset = _trunc_div(height, X_DIVISOR)
    points: list[Point] = [(ORIGIN_X, int(y0 - magnitudes[0] * height / 4))]
    for i, magnitude in enumerate(magnitudes):
        x = _trunc_div(i * width, X_DIVISOR)
        y = int(magnitude / SPECTRUM_SCALE - offset)
        points.append((ORIGIN_X + x, y0 - y))
    return points