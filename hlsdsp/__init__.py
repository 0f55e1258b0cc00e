"""Bit-accurate models of fixed-point DSP hardware blocks and their test benches."""

__version__ = "0.1.0"

__all__ = [
    "dds",
    "duc",
    "filters",
    "fir",
    "fixed",
    "mac",
    "macc",
    "mixer",
    "realfft",
    "reference_fft",
    "sliding_win",
    "spectrum",
    "window",
]