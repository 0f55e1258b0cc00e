"""An integer FIR filter and the ramp test bench that exercises it."""

import argparse
import sys

from hlsdsp.fixed import wrap

__all__ = [
    "N",
    "DEFAULT_TAPS",
    "SAMPLES",
    "RAMP_LIMIT",
    "Fir",
    "ramp_signal",
    "run_ramp",
    "main",
]

N = 11
DEFAULT_TAPS = (0, -10, -9, 23, 56, 63, 56, 23, -9, -10, 0)
SAMPLES = 600
RAMP_LIMIT = 75

_INT_BITS = 32


class Fir:
    """Direct-form FIR filter over 32-bit integers with its own shift register."""

    def __init__(self, taps=DEFAULT_TAPS):
        self.taps = tuple(int(t) for t in taps)
        if not self.taps:
            raise ValueError("a FIR filter needs at least one tap")
        self._shift_reg = [0] * len(self.taps)

    def step(self, x):
        """Shift ``x`` into the filter and return the new output sample."""
        x = wrap(x, _INT_BITS)
        self._shift_reg = [x, *self._shift_reg[:-1]]
        acc = sum(d * c for d, c in zip(self._shift_reg, self.taps))
        return wrap(acc, _INT_BITS)

    def reset(self):
        """Clear the shift register."""
        self._shift_reg = [0] * len(self.taps)


def ramp_signal(samples=SAMPLES, limit=RAMP_LIMIT):
    """Yield ``samples + 1`` values of a triangle wave bouncing between ±limit."""
    signal = 0
    ramp_up = True
    for _ in range(samples + 1):
        signal += 1 if ramp_up else -1
        yield signal
        if ramp_up and signal >= limit:
            ramp_up = False
        elif not ramp_up and signal <= -limit:
            ramp_up = True


def run_ramp(taps=DEFAULT_TAPS, samples=SAMPLES):
    """Filter the ramp signal and return ``(index, input, output)`` rows."""
    fir = Fir(taps)
    return [
        (i, signal, fir.step(signal))
        for i, signal in enumerate(ramp_signal(samples, RAMP_LIMIT))
    ]


def _normalised(lines):
    return ["".join(line.split()) for line in lines]


def main(argv=None):
    """Run the ramp test bench, write its output and compare with a golden file."""
    parser = argparse.ArgumentParser(description="FIR ramp test bench")
    parser.add_argument("--samples", type=int, default=SAMPLES)
    parser.add_argument("--output", default="out.dat")
    parser.add_argument("--golden", default="out.gold.dat")
    args = parser.parse_args(argv)

    rows = run_ramp(DEFAULT_TAPS, args.samples)
    lines = [f"{i} {signal} {output}\n" for i, signal, output in rows]
    with open(args.output, "w", encoding="ascii") as fp:
        fp.writelines(lines)

    print("Comparing against output data ")
    try:
        with open(args.golden, encoding="ascii") as fp:
            golden = fp.read().splitlines()
        matches = _normalised(golden) == _normalised(
            "".join(lines).splitlines()
        )
    except OSError as exc:
        print(f"cannot read golden output: {exc}", file=sys.stderr)
        matches = False

    banner = "*******************************************"
    print(banner)
    if matches:
        print("PASS: The output matches the golden output!")
    else:
        print("FAIL: Output DOES NOT match the golden output")
    print(banner)
    return 0 if matches else 1


if __name__ == "__main__":
    sys.exit(main())