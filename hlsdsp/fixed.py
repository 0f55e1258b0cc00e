"""Fixed-width integer and fixed-point helpers for HLS-style arithmetic."""

import math
import operator

__all__ = ["wrap", "wrap_unsigned", "get_bit", "to_raw", "quantize"]


def _check_bits(bits):
    if bits < 1:
        raise ValueError(f"bit width must be positive, got {bits}")


def wrap(value, bits):
    """Reduce an integer to a signed two's complement value of ``bits`` bits."""
    _check_bits(bits)
    value = operator.index(value) & ((1 << bits) - 1)
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def wrap_unsigned(value, bits):
    """Reduce an integer to an unsigned value of ``bits`` bits."""
    _check_bits(bits)
    return operator.index(value) & ((1 << bits) - 1)


def get_bit(value, bit):
    """Return bit number ``bit`` (0 is the least significant) of ``value``."""
    if bit < 0:
        raise ValueError(f"bit index must not be negative, got {bit}")
    return (operator.index(value) >> bit) & 1


def to_raw(value, width, int_width, saturate=False):
    """Convert a number to the raw integer of a signed fixed-point format.

    The format has ``width`` bits in total, ``int_width`` of them (sign
    included) left of the binary point.  Extra fractional bits are
    truncated towards minus infinity; overflow saturates when
    ``saturate`` is true and wraps otherwise.
    """
    _check_bits(width)
    frac = width - int_width
    if isinstance(value, int):
        raw = value << frac if frac >= 0 else value >> -frac
    else:
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"cannot represent {value!r} in fixed point")
        raw = math.floor(math.ldexp(value, frac))
    if saturate:
        high = (1 << (width - 1)) - 1
        low = -(1 << (width - 1))
        return min(max(raw, low), high)
    return wrap(raw, width)


def quantize(value, width, int_width, saturate=False):
    """Round a number through a signed fixed-point format and return it as float."""
    raw = to_raw(value, width, int_width, saturate)
    return math.ldexp(raw, -(width - int_width))