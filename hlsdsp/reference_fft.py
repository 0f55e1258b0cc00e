"""Reference radix-2 fixed-point FFT with natural-order input."""

import math

from hlsdsp.fixed import to_raw, wrap

__all__ = ["bitrev_sort", "gen_twiddles", "fft_rad2_dit_nr"]


def _check_power_of_two(n, minimum):
    if n < minimum or n & (n - 1):
        raise ValueError(f"length must be a power of two of at least {minimum}, got {n}")


def _bit_reverse(index, bits):
    if bits == 0:
        return 0
    return int(format(index, f"0{bits}b")[::-1], 2)


def bitrev_sort(values):
    """Return ``values`` reordered with bit-reversed addressing."""
    values = list(values)
    n = len(values)
    _check_power_of_two(n, 1)
    bits = n.bit_length() - 1
    return [values[_bit_reverse(i, bits)] for i in range(n)]


def gen_twiddles(n_pts):
    """Return the first ``n_pts // 2`` twiddle factors in natural order."""
    if n_pts < 1:
        raise ValueError(f"number of points must be positive, got {n_pts}")
    step = 2.0 * math.pi / n_pts
    return [complex(math.cos(step * i), -math.sin(step * i)) for i in range(n_pts // 2)]


def _half(value, width):
    # Division by two truncates toward zero, like integer division.
    quotient = abs(value) >> 1
    return wrap(-quotient if value < 0 else quotient, width)


def fft_rad2_dit_nr(x, inverse=False, io_width=16, twiddle_width=16):
    """Fixed-point radix-2 DIT FFT of normalised data, scaled by 1/N.

    Inputs and outputs use ``io_width`` bits with a single integer (sign)
    bit; twiddles use ``twiddle_width`` saturating bits.  The output comes
    out in bit-reversed order.
    """
    data = [complex(v) for v in x]
    n = len(data)
    _check_power_of_two(n, 2)
    frac = io_width - 1
    tw_frac = twiddle_width - 1

    twiddles = bitrev_sort(
        (
            to_raw(w.real, twiddle_width, 1, saturate=True),
            to_raw(w.imag, twiddle_width, 1, saturate=True),
        )
        for w in gen_twiddles(n)
    )
    re = [to_raw(v.real, io_width, 1) for v in data]
    im = [to_raw(v.imag, io_width, 1) for v in data]

    groups, dist = 1, n // 2
    while groups < n:
        for k, (wr, wi) in enumerate(twiddles[:groups]):
            if inverse:
                wi = wrap(-wi, twiddle_width)
            for j in range(2 * k * dist, (2 * k + 1) * dist):
                yr, yi = re[j], im[j]
                zr, zi = re[j + dist], im[j + dist]
                a = wrap((wr * zr - wi * zi) >> tw_frac, io_width + 1)
                b = wrap((wr * zi + wi * zr) >> tw_frac, io_width + 1)
                re[j + dist] = _half(yr - a, io_width)
                im[j + dist] = _half(yi - b, io_width)
                re[j] = _half(yr + a, io_width)
                im[j] = _half(yi + b, io_width)
        groups *= 2
        dist //= 2

    return [complex(math.ldexp(r, -frac), math.ldexp(i, -frac)) for r, i in zip(re, im)]