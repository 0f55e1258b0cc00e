"""Direct digital synthesiser producing quantised sine and cosine samples."""

from dataclasses import dataclass, field

from hlsdsp.fixed import wrap_unsigned

__all__ = ["ACC_BITS", "PHASE_BITS", "OUT_BITS", "FRAC_BITS", "FREQ", "TABLE", "Dds"]

ACC_BITS = 16
PHASE_BITS = 5
OUT_BITS = 16
FRAC_BITS = ACC_BITS - PHASE_BITS
FREQ = 6628

TABLE = (
    0, 3196, 6270, 9102, 11585, 13623, 15137, 16069,
    16384, 16069, 15137, 13623, 11585, 9102, 6270, 3196,
    0, -3196, -6270, -9102, -11585, -13623, -15137, -16069,
    -16384, -16069, -15137, -13623, -11585, -9102, -6270, -3196,
)

_QUARTER_TURN = 1 << (PHASE_BITS - 2)


@dataclass
class Dds:
    """Phase-accumulator oscillator with optional noise-shaped phase truncation."""

    noise_shape: bool = False
    _acc: int = field(default=0, init=False, repr=False)
    _noise: int = field(default=0, init=False, repr=False)

    def step(self, freq):
        """Advance the phase by ``freq`` and return ``(sine, cosine)``."""
        self._acc = wrap_unsigned(self._acc + freq, ACC_BITS)
        if self.noise_shape:
            phase_long = wrap_unsigned(self._acc + self._noise, ACC_BITS)
            phase1 = phase_long >> FRAC_BITS
            self._noise = wrap_unsigned(phase_long, FRAC_BITS)
        else:
            phase1 = self._acc >> FRAC_BITS
        phase2 = wrap_unsigned(_QUARTER_TURN - phase1, PHASE_BITS)
        return TABLE[phase1], TABLE[phase2]