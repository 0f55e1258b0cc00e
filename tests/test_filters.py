import random

import pytest

from hlsdsp.filters import (
    IMF1_COEFFS,
    IMF2_COEFFS,
    IMF3_COEFFS,
    SRRC_COEFFS,
    Imf1,
    Imf2,
    Imf3,
    Srrc,
)

FULL_SCALE_NEG = -(1 << 17)


@pytest.mark.parametrize("cls", [Srrc, Imf1, Imf2, Imf3])
def test_zero_input_gives_zero_output(cls):
    stage = cls()
    assert [stage.step(0) for _ in range(500)] == [0] * 500


@pytest.mark.parametrize(
    "cls,frame,expected",
    [
        (Srrc, 48, [-SRRC_COEFFS[0]] * 24 + [-SRRC_COEFFS[24]] * 24),
        (Imf1, 24, [-IMF1_COEFFS[0]] * 12 + [-IMF1_COEFFS[12]] * 12),
        (Imf2, 12, [-IMF2_COEFFS[0]] * 6 + [-IMF2_COEFFS[6]] * 6),
        (Imf3, 6, [-IMF3_COEFFS[0][0]] + [-pair[1] for pair in IMF3_COEFFS[1:]]),
    ],
)
def test_first_frame_reproduces_coefficients(cls, frame, expected):
    stage = cls()
    assert [stage.step(FULL_SCALE_NEG) for _ in range(frame)] == expected


@pytest.mark.parametrize(
    "cls,frame", [(Srrc, 48), (Imf1, 24), (Imf2, 12), (Imf3, 6)]
)
def test_input_is_latched_only_at_frame_start(cls, frame):
    rng = random.Random(1234)
    latched = [rng.randint(-50000, 50000) for _ in range(20)]
    clean = []
    noisy = []
    for value in latched:
        clean.extend([value] * frame)
        noisy.append(value)
        noisy.extend(rng.randint(-131072, 131071) for _ in range(frame - 1))
    clean_stage = cls()
    noisy_stage = cls()
    clean_out = [clean_stage.step(x) for x in clean]
    noisy_out = [noisy_stage.step(x) for x in noisy]
    assert clean_out == noisy_out


@pytest.mark.parametrize(
    "cls,frame,taps",
    [(Srrc, 48, {0, 24}), (Imf1, 24, {0, 12}), (Imf2, 12, {0, 6})],
)
def test_output_only_changes_on_output_taps(cls, frame, taps):
    rng = random.Random(99)
    stage = cls()
    outputs = [stage.step(rng.randint(-131072, 131071)) for _ in range(frame * 12)]
    assert any(v != 0 for v in outputs)
    for k in range(1, len(outputs)):
        if k % frame not in taps:
            assert outputs[k] == outputs[k - 1]


@pytest.mark.parametrize("cls", [Srrc, Imf1, Imf2, Imf3])
def test_outputs_stay_in_18_bit_range(cls):
    rng = random.Random(7)
    stage = cls()
    for _ in range(2000):
        y = stage.step(rng.choice([-131072, 131071, rng.randint(-131072, 131071)]))
        assert -131072 <= y <= 131071


@pytest.mark.parametrize(
    "cls,frame,expected",
    [
        (Srrc, 48, [-SRRC_COEFFS[0]] * 24 + [-SRRC_COEFFS[24]] * 24),
        (Imf1, 24, [-IMF1_COEFFS[0]] * 12 + [-IMF1_COEFFS[12]] * 12),
        (Imf2, 12, [-IMF2_COEFFS[0]] * 6 + [-IMF2_COEFFS[6]] * 6),
        (Imf3, 6, [-IMF3_COEFFS[0][0]] + [-pair[1] for pair in IMF3_COEFFS[1:]]),
    ],
)
def test_fresh_instances_are_independent(cls, frame, expected):
    used = cls()
    for _ in range(77):
        used.step(12345)
    fresh = cls()
    assert [fresh.step(FULL_SCALE_NEG) for _ in range(frame)] == expected