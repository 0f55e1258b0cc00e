"""Multiply and multiply-accumulate primitives with fixed operand widths."""

from hlsdsp.fixed import wrap

__all__ = ["mult", "srrc_mac", "mac1", "mac2", "mac", "symtap"]

_COEF_BITS = 18
_PRODUCT_BITS = 36
_FILTER_ACC_BITS = 38


def mult(c, d):
    """Multiply an 18-bit ``c`` by a 19-bit ``d`` into a 37-bit result."""
    return wrap(wrap(c, 18) * wrap(d, 19), 37)


def _product(c, d):
    return wrap(wrap(c, _COEF_BITS) * wrap(d, _COEF_BITS), _PRODUCT_BITS)


def srrc_mac(c, d, s):
    """18x18 multiply added to a 40-bit sum, returned as a 38-bit accumulator."""
    total = wrap(_product(c, d) + wrap(s, 40), 40)
    return wrap(total, _FILTER_ACC_BITS)


def mac1(c, d, s):
    """18x18 multiply added to a 38-bit accumulator."""
    return wrap(_product(c, d) + wrap(s, _FILTER_ACC_BITS), _FILTER_ACC_BITS)


def mac2(c, d, s):
    """18x18 multiply added to a 38-bit accumulator."""
    return wrap(_product(c, d) + wrap(s, _FILTER_ACC_BITS), _FILTER_ACC_BITS)


def mac(c, d, s):
    """18x18 multiply added to a 48-bit accumulator."""
    return wrap(_product(c, d) + wrap(s, 48), 48)


def symtap(a, b, c):
    """Symmetric tap: ``c * (a + b)`` with a 19-bit pre-adder."""
    return mult(c, wrap(wrap(a, 18) + wrap(b, 18), 19))