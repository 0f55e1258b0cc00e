"""Polyphase transposed-form FIR interpolation stages of the up-converter.

Each stage is called once per clock.  It latches a new input sample at the
start of every frame and runs one multiply-accumulate per call.  It emits a
new output on the frame's output taps.  Two channels (I and Q) share the
hardware through separate accumulator chains.  For the first few frames the
chains are reset instead of accumulating.
"""

from hlsdsp.fixed import get_bit, wrap
from hlsdsp.mac import mac, mac1, mac2, srrc_mac

__all__ = [
    "SRRC_COEFFS",
    "IMF1_COEFFS",
    "IMF2_COEFFS",
    "IMF3_COEFFS",
    "Srrc",
    "Imf1",
    "Imf2",
    "Imf3",
]

SRRC_COEFFS = (
    25, -56, 121, -155, 84, 176, -680, 1415,
    -2283, 3116, -3719, 69475, -3719, 3116, -2283, 1415,
    -680, 176, 84, -155, 121, -56, 25, 0,
    46, -16, -78, 226, -347, 268, 288, -1727,
    4751, -11484, 40865, 40865, -11484, 4751, -1727, 288,
    268, -347, 226, -78, -16, 46, 0, 0,
)

IMF1_COEFFS = (
    -224, 1139, -3642, 9343, -22689, 81597,
    81597, -22689, 9343, -3642, 1139, -224,
    0, 0, 0, 0, 0, 131071,
    0, 0, 0, 0, 0, 0,
)

IMF2_COEFFS = (
    2054, -14177, 77667, 77667, -14177, 2054,
    0, 0, 131071, 0, 0, 0,
)

# One (branch 0, branch 1) coefficient pair per tap.
IMF3_COEFFS = (
    (1651, 0),
    (-13134, 0),
    (77019, 0),
    (77019, 131071),
    (-13134, 0),
    (1651, 0),
)

_DATA_BITS = 18
_ACC_BITS = 38
_OUT_SHIFT = 17


def _output(acc):
    return wrap(acc >> _OUT_SHIFT, _DATA_BITS)


class _PolyphaseFir:
    """Shared machinery for the two-branch transposed-form stages.

    By default the channel toggles at the end of every frame and the chains
    stop being reset once both channels have run a full frame.
    """

    COEFFICIENTS = ()
    CHAIN_ENDS = frozenset()
    OUTPUT_TAPS = frozenset()
    _MAC = staticmethod(srrc_mac)

    def __init__(self):
        taps = len(self.COEFFICIENTS)
        self._last = taps - 1
        self._regs = ([0] * taps, [0] * taps)
        self._latched = 0
        self._init = True
        self._ch = 0
        self._i = 0
        self._output = 0

    def _end_frame(self):
        if self._ch:
            self._init = False
        self._ch ^= 1

    def _clock(self, x):
        i = self._i
        if i == 0:
            self._latched = wrap(x, _DATA_BITS)
        nxt = i + 1
        regs = self._regs[self._ch]
        carry = 0 if self._init or i in self.CHAIN_ENDS else regs[nxt]
        acc = self._MAC(self.COEFFICIENTS[i], self._latched, carry)
        regs[i] = acc
        if i == self._last:
            self._end_frame()
        if i in self.OUTPUT_TAPS:
            self._output = _output(acc)
        self._i = 0 if i == self._last else nxt
        return self._output


class Srrc(_PolyphaseFir):
    """Square-root raised-cosine pulse-shaping filter, interpolating by 2."""

    COEFFICIENTS = SRRC_COEFFS
    CHAIN_ENDS = frozenset({23, 47})
    OUTPUT_TAPS = frozenset({0, 24})
    _MAC = staticmethod(srrc_mac)

    def step(self, x):
        """Run one clock with input ``x``; return the most recent output sample.

        The input is latched on the first of every 48 calls; the output
        changes on calls 0 and 24 of the frame.
        """
        return self._clock(x)


class Imf1(_PolyphaseFir):
    """First half-band interpolation filter."""

    COEFFICIENTS = IMF1_COEFFS
    CHAIN_ENDS = frozenset({11, 23})
    OUTPUT_TAPS = frozenset({0, 12})
    _MAC = staticmethod(mac1)

    def __init__(self):
        super().__init__()
        self._cnt = 0

    def _end_frame(self):
        if self._ch:
            self._init = False
        self._ch ^= self._cnt
        self._cnt ^= 1

    def step(self, x):
        """Run one clock with input ``x``; return the most recent output sample.

        The input is latched on the first of every 24 calls; the output
        changes on calls 0 and 12 of the frame.
        """
        return self._clock(x)


class Imf2(_PolyphaseFir):
    """Second half-band interpolation filter."""

    COEFFICIENTS = IMF2_COEFFS
    CHAIN_ENDS = frozenset({5, 11})
    OUTPUT_TAPS = frozenset({0, 6})
    _MAC = staticmethod(mac2)

    def __init__(self):
        super().__init__()
        self._cnt = 0

    def _end_frame(self):
        if self._cnt == 3:
            if self._ch:
                self._init = False
            self._ch ^= 1
        self._cnt = (self._cnt + 1) % 4

    def step(self, x):
        """Run one clock with input ``x``; return the most recent output sample.

        The input is latched on the first of every 12 calls; the output
        changes on calls 0 and 6 of the frame.
        """
        return self._clock(x)


class Imf3:
    """Third interpolation filter with two coefficient branches per tap."""

    COEFFICIENTS = IMF3_COEFFS

    def __init__(self):
        taps = len(IMF3_COEFFS)
        self._last = taps - 1
        self._regs0 = ([0] * taps, [0] * taps)
        self._regs1 = ([0] * taps, [0] * taps)
        self._latched = 0
        self._init = True
        self._i = 0
        self._j = 0

    def step(self, x):
        """Run one clock with input ``x`` and return the output sample."""
        i = self._i
        if i == 0:
            self._latched = wrap(x, _DATA_BITS)
        nxt = i + 1
        ch = get_bit(self._j, 3)
        restart = self._init or i == self._last
        regs0 = self._regs0[ch]
        regs1 = self._regs1[ch]
        c0, c1 = IMF3_COEFFS[i]
        acc0 = wrap(mac(c0, self._latched, 0 if restart else regs0[nxt]), _ACC_BITS)
        acc1 = wrap(mac(c1, self._latched, 0 if restart else regs1[nxt]), _ACC_BITS)
        regs0[i] = acc0
        regs1[i] = acc1
        result = _output(acc0 if i == 0 else acc1)
        if i == self._last:
            if self._j == 15:
                self._init = False
            self._j = 0 if self._j == 15 else self._j + 1
        self._i = 0 if i == self._last else nxt
        return result