"""Digital up-converter chain and its impulse-response test bench."""

import argparse
import os
import sys

from hlsdsp.dds import FREQ
from hlsdsp.filters import Imf1, Imf2, Imf3, Srrc
from hlsdsp.fixed import wrap
from hlsdsp.mixer import Mixer

__all__ = ["SAMPLES", "Duc", "impulse_response", "main"]

SAMPLES = 33

_CHANNEL_CALLS = 48
_FRAME_CALLS = 2 * _CHANNEL_CALLS
_ROWS_PER_SAMPLE = 16
_DATA_BITS = 18


class Duc:
    """Pulse shaping, three interpolation stages and a mixer, one clock per call."""

    def __init__(self):
        self.srrc = Srrc()
        self.imf1 = Imf1()
        self.imf2 = Imf2()
        self.imf3 = Imf3()
        self.mixer = Mixer()

    def step(self, din, freq=FREQ):
        """Feed ``din`` through the chain; return the current ``(i, q)`` outputs."""
        shaped = self.srrc.step(din)
        stage1 = self.imf1.step(shaped)
        stage2 = self.imf2.step(stage1)
        stage3 = self.imf3.step(stage2)
        return self.mixer.step(freq, stage3)


def impulse_response(freq=FREQ, samples=SAMPLES):
    """Drive an impulse through a fresh chain.

    Returns two lists of ``(sample, input >> 17, output)`` rows, one for the
    in-phase and one for the quadrature channel, sixteen rows per sample.
    """
    duc = Duc()
    for _ in range(_FRAME_CALLS):
        duc.step(0, freq)

    rows_i = []
    rows_q = []
    for n in range(samples + 1):
        xi = wrap(1 << 17, _DATA_BITS) if n == 0 else 0
        xq = wrap(-xi, _DATA_BITS)
        captured = []
        for j in range(_FRAME_CALLS):
            out = duc.step(xi if j < _CHANNEL_CALLS else xq, freq)
            if j >= _CHANNEL_CALLS and j % 6 < 2:
                captured.append(out)
        for yi, yq in captured[:_ROWS_PER_SAMPLE]:
            rows_i.append((n, xi >> 17, yi))
            rows_q.append((n, xq >> 17, yq))
    return rows_i, rows_q


def _format(rows):
    return [f"{n} {x} {y}\n" for n, x, y in rows]


def _normalised(lines):
    return ["".join(line.split()) for line in lines]


def _matches(lines, golden_path):
    try:
        with open(golden_path, encoding="ascii") as fp:
            golden = fp.read().splitlines()
    except OSError as exc:
        print(f"cannot read golden output: {exc}", file=sys.stderr)
        return False
    return _normalised(golden) == _normalised("".join(lines).splitlines())


def main(argv=None):
    """Run the impulse test bench and compare with the golden outputs."""
    parser = argparse.ArgumentParser(description="Up-converter impulse test bench")
    parser.add_argument("--samples", type=int, default=SAMPLES)
    parser.add_argument("--freq", type=int, default=FREQ)
    parser.add_argument("--output-i", default="duc_i.dat")
    parser.add_argument("--output-q", default="duc_q.dat")
    parser.add_argument("--golden-dir", default="golden")
    args = parser.parse_args(argv)

    rows_i, rows_q = impulse_response(args.freq, args.samples)
    ok = True
    for rows, path, name in (
        (rows_i, args.output_i, "duc_i.dat"),
        (rows_q, args.output_q, "duc_q.dat"),
    ):
        lines = _format(rows)
        with open(path, "w", encoding="ascii") as fp:
            fp.writelines(lines)
        ok = _matches(lines, os.path.join(args.golden_dir, name)) and ok

    if ok:
        print("\n *** DUC hardware test PASSED ! *** \n")
    else:
        print("\n *** DUC hardware test FAILED ! *** \n")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())