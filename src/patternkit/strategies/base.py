"""Base strategy interface"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from patternkit.shared.exceptions import EmptyInputSequenceError


class Strategy(ABC):
    """Interchangeable max-element algorithm.

    Strategies hold no state, so one instance can be shared by any number
    of routers and threads.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Strategy name identifier"""

    def max_element(self, nums: Sequence[int]) -> int:
        """Return the largest value in ``nums``.

        Raises:
            EmptyInputSequenceError: If ``nums`` is empty
        """
        if not nums:
            raise EmptyInputSequenceError(
                f"{self.name} strategy needs at least one element"
            )
        return self._max_element(nums)

    @abstractmethod
    def _max_element(self, nums: Sequence[int]) -> int:
        """Compute the maximum of a non-empty sequence"""
