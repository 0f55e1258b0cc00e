"""A multiply-accumulate block with a clearable accumulator."""

from hlsdsp.fixed import wrap

__all__ = ["Macc"]


class Macc:
    """32-bit multiply-accumulate register."""

    def __init__(self):
        self.accumulator = 0

    def step(self, a, b, clear=False):
        """Optionally clear, add ``a * b`` and return the accumulated value."""
        if clear:
            self.accumulator = 0
        self.accumulator = wrap(self.accumulator + wrap(a * b, 32), 32)
        return self.accumulator