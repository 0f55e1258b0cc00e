"""Window functions applied to blocks of fixed-point samples."""

import math
from enum import IntEnum

from hlsdsp.fixed import quantize

__all__ = [
    "GAUSSIAN_SIGMA",
    "COEF_WIDTH",
    "DATA_WIDTH",
    "WindowType",
    "coef_calc",
    "coefficient_table",
    "apply_window",
]

GAUSSIAN_SIGMA = 0.5
COEF_WIDTH = 16
DATA_WIDTH = 16


class WindowType(IntEnum):
    """Supported window shapes."""

    RECT = 0
    HANN = 1
    HAMMING = 2
    GAUSSIAN = 3


def coef_calc(size, kind, idx):
    """Return coefficient ``idx`` of a window of ``size`` points."""
    kind = WindowType(kind)
    if size < 1:
        raise ValueError(f"window size must be positive, got {size}")
    if kind is WindowType.RECT:
        return 1.0
    if kind is WindowType.HANN:
        return 0.5 * (1.0 - math.cos(2.0 * math.pi * idx / float(size)))
    if kind is WindowType.HAMMING:
        return 0.54 - 0.46 * math.cos(2.0 * math.pi * idx / float(size))
    half = size // 2
    if half == 0:
        raise ValueError("a gaussian window needs at least two points")
    x = (idx - half) / (GAUSSIAN_SIGMA * half)
    return math.exp(-0.5 * x * x)


def coefficient_table(size, kind):
    """Return the full list of ``size`` window coefficients."""
    return [coef_calc(size, kind, idx) for idx in range(size)]


def apply_window(samples, kind):
    """Multiply samples by a window the length of the block.

    Coefficients are held in a saturating 16-bit format with one integer
    bit; inputs and outputs are 16-bit fixed point with one integer bit,
    truncated and wrapped.
    """
    samples = list(samples)
    if not samples:
        return []
    coeffs = coefficient_table(len(samples), kind)
    return [
        quantize(
            quantize(c, COEF_WIDTH, 1, saturate=True) * quantize(x, DATA_WIDTH, 1),
            DATA_WIDTH,
            1,
        )
        for c, x in zip(coeffs, samples)
    ]