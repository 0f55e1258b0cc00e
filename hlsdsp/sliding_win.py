"""Half-overlapping sliding window over a stream of samples."""

__all__ = ["SlidingWindow"]


class SlidingWindow:
    """Builds windows made of the previous half block and the new half block."""

    def __init__(self, length):
        if length < 2 or length % 2:
            raise ValueError(f"window length must be a positive even number, got {length}")
        self.length = length
        self._delayed = [0] * (length // 2)

    def push(self, samples):
        """Take ``length // 2`` new samples and return the full window."""
        fresh = list(samples)
        if len(fresh) != self.length // 2:
            raise ValueError(
                f"expected {self.length // 2} samples, got {len(fresh)}"
            )
        window = self._delayed + fresh
        self._delayed = fresh
        return window