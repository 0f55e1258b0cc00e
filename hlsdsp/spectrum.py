"""Streaming spectrum analysis of a test waveform through the real FFT pipeline.

A periodic cosine is quantised to 16-bit samples and fed through the front
end, a half-length complex FFT and the back end.  Bins whose magnitude
exceeds a threshold are reported for each frame.
"""

import argparse
import itertools
import math
import sys
from dataclasses import dataclass

from hlsdsp.fixed import to_raw
from hlsdsp.realfft import REAL_FFT_LEN, RealFftFrontEnd, xfft2real
from hlsdsp.reference_fft import fft_rad2_dit_nr

__all__ = [
    "CYCLES_PER_WIN",
    "AMPLITUDE",
    "THRESHOLD",
    "FRAMES",
    "Detection",
    "generate_waveform",
    "detect_energy",
    "analyse_frames",
    "main",
]

CYCLES_PER_WIN = 192.0
AMPLITUDE = 0.9
THRESHOLD = 0.00390625
FRAMES = 8

_FULL_SCALE = 32767.0
_WIDTH = 16


@dataclass(frozen=True)
class Detection:
    """A spectral bin whose magnitude exceeded the detection threshold."""

    bin: int
    real: float
    imag: float
    magnitude: float


def generate_waveform(
    num_samples, cycles_per_win=CYCLES_PER_WIN, amplitude=AMPLITUDE, phase=0.0
):
    """Return ``num_samples`` 16-bit samples of a cosine with the given period."""
    return [
        int(
            _FULL_SCALE
            * amplitude
            * math.cos(i * 2 * math.pi * cycles_per_win / float(num_samples) + phase)
        )
        for i in range(num_samples)
    ]


def detect_energy(spectrum, threshold=THRESHOLD):
    """Return a :class:`Detection` for every bin above ``threshold``.

    Each value is taken as a signed 16-bit fixed-point complex number and
    scaled back by the full-scale value of 32767.
    """
    found = []
    for index, value in enumerate(spectrum):
        value = complex(getattr(value, "data", value))
        real = to_raw(value.real, _WIDTH, 1) / _FULL_SCALE
        imag = to_raw(value.imag, _WIDTH, 1) / _FULL_SCALE
        mag = math.sqrt(real * real + imag * imag)
        if mag > threshold:
            found.append(Detection(index, real, imag, mag))
    return found


def analyse_frames(samples, frames=FRAMES):
    """Stream ``samples`` repeatedly through the pipeline and analyse ``frames`` outputs.

    ``samples`` are signed 16-bit integers.  Returns one list of
    detections per frame.
    """
    samples = list(samples)
    if not samples:
        raise ValueError("at least one sample is needed")
    if frames < 0:
        raise ValueError(f"number of frames must not be negative, got {frames}")
    front_end = RealFftFrontEnd(REAL_FFT_LEN)
    half = REAL_FFT_LEN // 2
    source = itertools.cycle(s / 32768.0 for s in samples)
    results = []
    for _ in range(frames):
        chunk = list(itertools.islice(source, half))
        words = front_end.process(chunk)
        transformed = fft_rad2_dit_nr([w.data for w in words])
        spectrum = xfft2real(transformed, scaled=True)
        results.append(detect_energy(spectrum))
    return results


def main(argv=None):
    """Run the spectrum test program and print detected energy for each frame."""
    parser = argparse.ArgumentParser(description="Real FFT spectrum test program")
    parser.add_argument("--frames", type=int, default=FRAMES)
    args = parser.parse_args(argv)

    print("---------------------------------------")
    print("- RealFFT PL accelerator test program -")
    print("---------------------------------------")
    waveform = generate_waveform(REAL_FFT_LEN)
    for detections in analyse_frames(waveform, args.frames):
        print("\nFrame received:")
        for d in detections:
            print(
                f"Energy detected in bin {d.bin:3d} - "
                f"{{{d.real:8.5f}, {d.imag:8.5f}}}; mag = {d.magnitude:8.5f}"
            )
        print("End of frame.")
        sys.stdout.flush()
    print("***************")
    print("* End of test *")
    print("***************\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())