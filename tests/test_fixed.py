import pytest

from hlsdsp.fixed import get_bit, quantize, to_raw, wrap, wrap_unsigned


@pytest.mark.parametrize("bits", [1, 5, 18, 37, 48])
def test_wrap_stays_in_signed_range(bits):
    for value in (-(1 << (bits + 3)), -7, 0, 3, (1 << bits) + 5, 1 << 60):
        result = wrap(value, bits)
        assert -(1 << (bits - 1)) <= result < (1 << (bits - 1))


@pytest.mark.parametrize("bits", [4, 18, 38])
def test_wrap_is_periodic(bits):
    for value in (-100, -1, 0, 1, 12345):
        assert wrap(value + (1 << bits), bits) == wrap(value, bits)


def test_wrap_keeps_in_range_values():
    for value in (-(1 << 17), -1, 0, 1, (1 << 17) - 1):
        assert wrap(value, 18) == value


def test_wrap_past_top_goes_to_bottom():
    assert wrap(1 << 17, 18) == -(1 << 17)


def test_wrap_unsigned_range_and_identity():
    for value in (-5, 0, 7, 1 << 20):
        assert 0 <= wrap_unsigned(value, 16) < (1 << 16)
    assert wrap_unsigned(6628, 16) == 6628
    assert wrap_unsigned(-1, 11) == (1 << 11) - 1


def test_get_bit_reconstructs_value():
    value = 0b1011_0110_1
    rebuilt = sum(get_bit(value, n) << n for n in range(12))
    assert rebuilt == value


@pytest.mark.parametrize("bad", [0, -3])
def test_bad_width_raises(bad):
    with pytest.raises(ValueError):
        wrap(1, bad)
    with pytest.raises(ValueError):
        wrap_unsigned(1, bad)
    with pytest.raises(ValueError):
        to_raw(0.5, bad, 1)


def test_negative_bit_index_raises():
    with pytest.raises(ValueError):
        get_bit(5, -1)


def test_non_finite_raises():
    with pytest.raises(ValueError):
        to_raw(float("nan"), 16, 1)
    with pytest.raises(ValueError):
        to_raw(float("inf"), 16, 1, saturate=True)


@pytest.mark.parametrize("value", [0.0, 0.5, -0.5, -1.0, 0.25, -0.75])
def test_exact_values_round_trip(value):
    assert quantize(value, 16, 1) == value


@pytest.mark.parametrize("value", [0.1, -0.1, 0.3333, -0.9, 0.99])
def test_truncation_rounds_down_within_one_lsb(value):
    q = quantize(value, 16, 1)
    assert q <= value
    assert value - q < 2.0 ** -15


@pytest.mark.parametrize("value", [0.123, -0.456, 0.7])
def test_quantize_is_idempotent(value):
    once = quantize(value, 16, 1, saturate=True)
    assert quantize(once, 16, 1, saturate=True) == once


def test_saturation_clamps_to_format_limits():
    top = to_raw(5.0, 16, 1, saturate=True)
    bottom = to_raw(-5.0, 16, 1, saturate=True)
    assert top == (1 << 15) - 1
    assert bottom == -(1 << 15)


def test_without_saturation_overflow_wraps():
    assert quantize(1.0, 16, 1) == -1.0


def test_integer_input_scales_by_fraction_bits():
    assert to_raw(3, 8, 4) == 3 << 4