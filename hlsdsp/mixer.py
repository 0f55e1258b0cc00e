"""Complex mixer that shifts the interpolated baseband up to the carrier."""

from hlsdsp.dds import OUT_BITS, Dds
from hlsdsp.fixed import wrap, wrap_unsigned
from hlsdsp.mac import mult

__all__ = ["mix_sub_dsp", "mix_add_dsp", "Mixer"]

_DATA_BITS = 18
_CACHE_LEN = 16
_CYCLE = 6
_VALID_SLOTS = 2
_SHIFT = OUT_BITS - 2


def mix_sub_dsp(a, b, c):
    """Return ``(a - b) * c`` with a 19-bit pre-subtractor, as 37 bits."""
    tmp = wrap(wrap(a, _DATA_BITS) - wrap(b, _DATA_BITS), 19)
    return mult(wrap(c, _DATA_BITS), tmp)


def mix_add_dsp(a, b, c):
    """Return ``(a + b) * c`` with a 19-bit pre-adder, as 36 bits."""
    tmp = wrap(wrap(a, _DATA_BITS) + wrap(b, _DATA_BITS), 19)
    return wrap(mult(wrap(c, _DATA_BITS), tmp), 36)


class Mixer:
    """Time-shared I/Q mixer driven by its own DDS.

    The first two calls of every six carry a valid sample.  Sixteen valid
    samples of the in-phase channel are cached, then the next sixteen
    quadrature samples are mixed with them.  Until the first full block has
    been mixed the DDS runs at zero frequency.
    """

    def __init__(self):
        self._dds = Dds()
        self._cache = [0] * _CACHE_LEN
        self._init = True
        self._index = 0
        self._i = 0
        self._ch = True
        self._out = (0, 0)

    def step(self, freq, din):
        """Run one clock; return the most recent ``(dout_i, dout_q)`` pair."""
        index = self._index
        valid = self._i < _VALID_SLOTS
        freq_dds = 0 if self._init else wrap_unsigned(freq, 16)
        din_im = wrap(din, _DATA_BITS)

        if valid and self._ch:
            self._cache[index] = din_im
        elif valid:
            sine, cosine = self._dds.step(freq_dds)
            din_re = self._cache[index]
            tmp = wrap(mix_sub_dsp(sine, cosine, din_im), 34)
            dout_i = wrap((tmp + mix_sub_dsp(din_re, din_im, sine)) >> _SHIFT, _DATA_BITS)
            dout_q = wrap((tmp + mix_add_dsp(din_re, din_im, cosine)) >> _SHIFT, _DATA_BITS)
            self._out = (dout_i, dout_q)
            if index == _CACHE_LEN - 1:
                self._init = False

        if index == _CACHE_LEN - 1:
            self._ch = not self._ch
        if valid:
            self._index = (index + 1) % _CACHE_LEN
        self._i = 0 if self._i == _CYCLE - 1 else self._i + 1
        return self._out