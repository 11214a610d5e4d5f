"""Single-pass maximum"""

from collections.abc import Sequence

from patternkit.strategies.base import Strategy


class LinearScanStrategy(Strategy):
    """O(n) scan, for contrast with the O(n log n) strategies"""

    @property
    def name(self) -> str:
        return "linear"

    def _max_element(self, nums: Sequence[int]) -> int:
        best = nums[0]
        for num in nums[1:]:
            if num > best:
                best = num
        return best
