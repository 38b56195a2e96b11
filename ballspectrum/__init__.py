"""Brick-breaking ball game with FFT, PCM wave and spectrum-plot utilities."""

__version__ = "0.1.0"