import pytest

from hlsdsp.sliding_win import SlidingWindow


def test_first_window_has_empty_history():
    win = SlidingWindow(8)
    assert win.push([1, 2, 3, 4]) == [0, 0, 0, 0, 1, 2, 3, 4]


def test_windows_overlap_by_half():
    win = SlidingWindow(6)
    win.push([1, 2, 3])
    assert win.push([4, 5, 6]) == [1, 2, 3, 4, 5, 6]
    assert win.push([7, 8, 9]) == [4, 5, 6, 7, 8, 9]


def test_accepts_iterators():
    win = SlidingWindow(4)
    win.push(iter([0.5, 0.25]))
    assert win.push(x for x in (0.125, -0.5)) == [0.5, 0.25, 0.125, -0.5]


def test_window_length_is_constant():
    win = SlidingWindow(10)
    for block in range(4):
        assert len(win.push(range(block, block + 5))) == 10


def test_wrong_block_size():
    win = SlidingWindow(8)
    with pytest.raises(ValueError):
        win.push([1, 2, 3])


@pytest.mark.parametrize("length", [0, 1, 7, -2])
def test_bad_length(length):
    with pytest.raises(ValueError):
        SlidingWindow(length)