# hlsdsp

Bit-accurate Python models of small fixed-point signal-processing blocks of
the kind built for FPGAs. The stateful blocks keep their registers between
calls, so feeding them one sample (or one clock) at a time reproduces the
integer results of the modelled hardware step by step.

Nothing outside the standard library is needed.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `hlsdsp.fixed` | Integer and fixed-point helpers: `wrap`, `wrap_unsigned`, `get_bit`, `to_raw`, `quantize` |
| `hlsdsp.fir` | `Fir`, a 32-bit integer FIR filter (11 taps by default, `DEFAULT_TAPS`), plus `ramp_signal`, `run_ramp` and the `main` test bench |
| `hlsdsp.macc` | `Macc`, a 32-bit multiply-accumulate register with a clear input |
| `hlsdsp.mac` | Width-limited multiply and multiply-accumulate primitives: `mult`, `srrc_mac`, `mac1`, `mac2`, `mac`, `symtap` |
| `hlsdsp.dds` | `Dds`, a direct digital synthesiser with a 32-entry sine table and optional noise-shaped phase truncation |
| `hlsdsp.filters` | The up-converter's polyphase interpolation filters: `Srrc`, `Imf1`, `Imf2`, `Imf3` |
| `hlsdsp.mixer` | `Mixer` and the pre-adder helpers `mix_sub_dsp`, `mix_add_dsp` |
| `hlsdsp.duc` | `Duc`, the complete digital up-converter chain, `impulse_response` and the `main` test bench |
| `hlsdsp.window` | `WindowType` (RECT, HANN, HAMMING, GAUSSIAN), `coef_calc`, `coefficient_table`, `apply_window` |
| `hlsdsp.sliding_win` | `SlidingWindow`, a half-overlap window over a sample stream |
| `hlsdsp.reference_fft` | `bitrev_sort`, `gen_twiddles` and the fixed-point radix-2 `fft_rad2_dit_nr` |
| `hlsdsp.realfft` | `AxisWord`, `RealFftFrontEnd` and `xfft2real`: a real-input FFT built around an N/2-point complex FFT |
| `hlsdsp.spectrum` | `Detection`, `generate_waveform`, `detect_energy`, `analyse_frames` and the `main` program |

## Examples

An FIR filter, one sample per call:

```python
from hlsdsp.fir import Fir

fir = Fir([0, -10, -9, 23, 56, 63, 56, 23, -9, -10, 0])
outputs = [fir.step(x) for x in range(1, 20)]
fir.reset()   # clear the shift register
```

A multiply-accumulate register:

```python
from hlsdsp.macc import Macc

macc = Macc()
macc.step(2, 21, True)         # clear, then accumulate 2 * 21 -> 42
total = macc.step(3, 4, False) # 54
```

The synthesiser on its own:

```python
from hlsdsp.dds import Dds, FREQ

dds = Dds()
sine, cosine = dds.step(FREQ)
```

The digital up-converter, driven with its impulse-response test. Each call to
`Duc.step` is one clock; the result is two lists of `(sample, input, output)`
rows for the I and Q channels:

```python
from hlsdsp.duc import impulse_response

rows_i, rows_q = impulse_response(6628, 33)
```

Windowing and the overlapping window:

```python
from hlsdsp.window import WindowType, coefficient_table
from hlsdsp.sliding_win import SlidingWindow

coeffs = coefficient_table(1024, WindowType.HAMMING)

window = SlidingWindow(1024)
frame = window.push([0.0] * 512)   # previous 512 samples followed by the new 512
```

A fixed-point reference FFT (scaled by 1/N, output in bit-reversed order):

```python
from hlsdsp.reference_fft import fft_rad2_dit_nr

spectrum = fft_rad2_dit_nr([complex(0.5, 0.0)] + [0j] * 15, False, 16, 16)
```

The real FFT: front end, half-length complex FFT, back end:

```python
from hlsdsp.realfft import RealFftFrontEnd, xfft2real
from hlsdsp.reference_fft import fft_rad2_dit_nr
from hlsdsp.window import WindowType

front = RealFftFrontEnd(1024, WindowType.HAMMING)
words = front.process([0.0] * 512)
transformed = fft_rad2_dit_nr([w.data for w in words])
bins = xfft2real(transformed, scaled=True)
```

## Commands

```
hlsdsp-fir [--samples N] [--output out.dat] [--golden out.gold.dat]
hlsdsp-duc [--samples N] [--freq F] [--output-i duc_i.dat] [--output-q duc_q.dat] [--golden-dir golden]
hlsdsp-spectrum [--frames N]
```

`hlsdsp-fir` drives the FIR filter with a triangular ramp, writes one line per
sample (index, input, output) to the output file and compares it, ignoring
whitespace, with the golden file. It prints PASS or FAIL and exits with 0 or 1.

`hlsdsp-duc` runs the up-converter impulse test, writes the I and Q rows to
their output files and compares each with the file of the same default name
in the golden directory, printing PASSED or FAILED and exiting with 0 or 1.

`hlsdsp-spectrum` generates a test tone, streams it through the real FFT
pipeline and prints, frame by frame, the bins whose magnitude exceeds the
detection threshold.

## What this package does not do

- It ships no golden reference files. `hlsdsp-fir` and `hlsdsp-duc` report
  FAIL unless you supply `out.gold.dat` or the `golden/` directory yourself.
- It does not talk to hardware. The complex FFT in the real-FFT pipeline is
  the software `fft_rad2_dit_nr`, not an FFT core, and no data is moved by DMA.
- It does not synthesise or generate hardware descriptions; it only models
  the arithmetic.