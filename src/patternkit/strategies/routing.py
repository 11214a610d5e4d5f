"""Routing of max-element requests to a fixed set of strategies"""

from collections.abc import Mapping, Sequence
from enum import Enum
from types import MappingProxyType

from loguru import logger

from patternkit.shared.exceptions import (
    IncompleteStrategyMappingError,
    UnrecognizedRoutingKeyError,
)
from patternkit.strategies.base import Strategy
from patternkit.strategies.heap import HeapStrategy
from patternkit.strategies.linear import LinearScanStrategy
from patternkit.strategies.sorting import SortingStrategy


class RoutingKey(Enum):
    """Closed set of keys a router dispatches on"""

    HEAPIFY = "heapify"
    SORTING = "sorting"
    LINEAR = "linear"

    @classmethod
    def parse(cls, text: str) -> "RoutingKey":
        """Resolve ``text`` to a member by name, ignoring case.

        Raises:
            UnrecognizedRoutingKeyError: If no member has that name
        """
        try:
            return cls[text.strip().upper()]
        except KeyError:
            raise UnrecognizedRoutingKeyError(
                text, [member.name for member in cls]
            ) from None


class StrategyRouter:
    """Dispatches requests to one strategy per RoutingKey.

    The mapping is validated and frozen at construction, so a router can be
    shared between threads without locking.
    """

    def __init__(self, strategies: Mapping[RoutingKey, Strategy]) -> None:
        unknown = [key for key in strategies if not isinstance(key, RoutingKey)]
        if unknown:
            raise IncompleteStrategyMappingError(
                f"Mapping keys must be RoutingKey members, got {unknown}"
            )

        missing = [key.name for key in RoutingKey if key not in strategies]
        if missing:
            raise IncompleteStrategyMappingError(
                f"No strategy provided for routing keys: {missing}"
            )

        self._strategies = MappingProxyType(dict(strategies))

    @property
    def strategies(self) -> Mapping[RoutingKey, Strategy]:
        return self._strategies

    def available(self) -> list[str]:
        """List the routing key names this router accepts"""
        return [key.name for key in self._strategies]

    def resolve(self, routing_key: str) -> Strategy:
        return self._strategies[RoutingKey.parse(routing_key)]

    def evaluate(self, nums: Sequence[int], routing_key: str) -> int:
        """Run the strategy selected by ``routing_key`` over ``nums``.

        Args:
            nums: Non-empty sequence of integers
            routing_key: RoutingKey name, matched case-insensitively

        Returns:
            The strategy's result, unchanged

        Raises:
            UnrecognizedRoutingKeyError: If the key names no RoutingKey
            EmptyInputSequenceError: If ``nums`` is empty
        """
        strategy = self.resolve(routing_key)
        logger.debug(f"Routing {routing_key!r} to {strategy.name} strategy")
        return strategy.max_element(nums)


def create_default_router() -> StrategyRouter:
    """Router wired with the reference strategies"""
    return StrategyRouter(
        {
            RoutingKey.HEAPIFY: HeapStrategy(),
            RoutingKey.SORTING: SortingStrategy(),
            RoutingKey.LINEAR: LinearScanStrategy(),
        }
    )
