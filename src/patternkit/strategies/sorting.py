"""Sort-based maximum"""

from collections.abc import Sequence

from loguru import logger

from patternkit.strategies.base import Strategy


class SortingStrategy(Strategy):
    """Sorts ascending and reads the last element"""

    @property
    def name(self) -> str:
        return "sorting"

    def _max_element(self, nums: Sequence[int]) -> int:
        logger.debug("Array sorting technique")
        return sorted(nums)[-1]
