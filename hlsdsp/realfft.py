"""Real-input FFT built around a half-length complex FFT core.

The front end turns a stream of real samples into half-overlapping,
windowed blocks and packs adjacent sample pairs into complex words for an
``N/2``-point complex FFT.  The back end takes that FFT's bit-reversed
output and recovers the spectrum of the ``N`` real points.
"""

import math
from dataclasses import dataclass

from hlsdsp.fixed import to_raw, wrap
from hlsdsp.reference_fft import bitrev_sort
from hlsdsp.sliding_win import SlidingWindow
from hlsdsp.window import WindowType, apply_window
from hlsdsp.fixed import quantize

__all__ = [
    "DATA_WIDTH",
    "REAL_FFT_LEN",
    "LOG2_REAL_FFT_LEN",
    "WIN_FN_TYPE",
    "AxisWord",
    "RealFftFrontEnd",
    "xfft2real",
]

DATA_WIDTH = 16
REAL_FFT_LEN = 1024
LOG2_REAL_FFT_LEN = 10
WIN_FN_TYPE = WindowType.HAMMING

_FRAC = DATA_WIDTH - 1


@dataclass(frozen=True)
class AxisWord:
    """One beat of a streaming interface: a complex sample and its end-of-frame flag."""

    data: complex = 0j
    last: bool = False


class RealFftFrontEnd:
    """Sliding window, window function and pair packing ahead of the complex FFT."""

    def __init__(self, length=REAL_FFT_LEN, window=WIN_FN_TYPE):
        self.length = length
        self.window = WindowType(window)
        self._slider = SlidingWindow(length)

    def process(self, samples):
        """Take ``length // 2`` new real samples and return ``length // 2`` words."""
        fresh = [quantize(x, DATA_WIDTH, 1) for x in samples]
        block = self._slider.push(fresh)
        windowed = apply_window(block, self.window)
        pairs = list(zip(windowed[0::2], windowed[1::2]))
        final = len(pairs) - 1
        return [
            AxisWord(complex(re, im), k == final)
            for k, (re, im) in enumerate(pairs)
        ]


def _w16(value):
    return wrap(value, DATA_WIDTH)


def _twiddles(real_len, count):
    step = 2.0 * math.pi / real_len
    return [
        (
            to_raw(math.cos(step * i), DATA_WIDTH, 1, saturate=True),
            to_raw(-math.sin(step * i), DATA_WIDTH, 1, saturate=True),
        )
        for i in range(count)
    ]


def _split(buf, i, half, twiddle):
    """Return the even part ``f`` and the rotated odd part ``w * g`` for bin ``i``."""
    y1r, y1i = buf[i]
    y2r, y2i = buf[half - i]
    y2i = _w16(-y2i)
    fr = _w16((y1r + y2r) >> 1)
    fi = _w16((y1i + y2i) >> 1)
    gr = _w16((-(y2i - y1i)) >> 1)
    gi = _w16((y2r - y1r) >> 1)
    wr, wi = twiddle
    wgr = _w16((wr * gr - wi * gi) >> _FRAC)
    wgi = _w16((wr * gi + wi * gr) >> _FRAC)
    return (fr, fi), (wgr, wgi)


def _to_complex(raw):
    return complex(math.ldexp(raw[0], -_FRAC), math.ldexp(raw[1], -_FRAC))


def _halve(raw):
    return (raw[0] >> 1, raw[1] >> 1)


def xfft2real(words, scaled=True):
    """Recover the real-input spectrum from bit-reversed complex FFT output.

    ``words`` holds the ``N/2`` outputs of the complex FFT (``AxisWord``
    items or plain numbers).  Word 0 of the result packs bin 0 in its real
    part and bin ``N/2`` in its imaginary part.  With ``scaled`` the result
    is halved and bins above ``N/4`` are built from conjugate symmetry;
    without it every bin is computed directly from a full twiddle table.
    """
    data = [getattr(w, "data", w) for w in words]
    half = len(data)
    if half < 1 or half & (half - 1):
        raise ValueError(f"number of words must be a power of two, got {half}")
    quarter = half // 2
    if scaled and quarter < 1:
        raise ValueError("scaled conversion needs at least two words")

    raw = [
        (to_raw(complex(v).real, DATA_WIDTH, 1), to_raw(complex(v).imag, DATA_WIDTH, 1))
        for v in data
    ]
    buf = bitrev_sort(raw)
    real_len = 2 * half

    if scaled:
        twiddles = _twiddles(real_len, quarter)
        lo = []
        hi = [(0, 0)] * quarter
        for i in range(quarter):
            y1r, y1i = buf[i]
            if i == 0:
                first = (_w16(y1r + y1i), _w16(y1r - y1i))
                second = buf[quarter]
            else:
                (fr, fi), (wgr, wgi) = _split(buf, i, half, twiddles[i])
                first = (_w16(fr + wgr), _w16(fi + wgi))
                second = (_w16(fr - wgr), _w16(-_w16(fi - wgi)))
            lo.append(_halve(first))
            hi[(half - i) % quarter] = _halve(second)
        spectrum = lo + hi
    else:
        twiddles = _twiddles(real_len, half)
        spectrum = []
        for i in range(half):
            y1r, y1i = buf[i]
            if i == 0:
                spectrum.append((_w16(y1r + y1i), _w16(y1r - y1i)))
            else:
                (fr, fi), (wgr, wgi) = _split(buf, i, half, twiddles[i])
                spectrum.append((_w16(fr + wgr), _w16(fi + wgi)))

    final = half - 1
    return [AxisWord(_to_complex(v), k == final) for k, v in enumerate(spectrum)]