"""Heap-based maximum"""

import heapq
from collections.abc import Sequence

from loguru import logger

from patternkit.strategies.base import Strategy


class HeapStrategy(Strategy):
    """Builds a max-heap over all elements and reads the top"""

    @property
    def name(self) -> str:
        return "heap"

    def _max_element(self, nums: Sequence[int]) -> int:
        logger.debug("Performing heap operation")
        # heapq is a min-heap; negate to get max ordering
        max_heap = [-num for num in nums]
        heapq.heapify(max_heap)
        return -max_heap[0]
