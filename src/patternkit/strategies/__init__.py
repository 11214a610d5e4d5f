"""Strategy abstractions and the routing-key dispatcher"""

from patternkit.strategies.base import Strategy
from patternkit.strategies.heap import HeapStrategy
from patternkit.strategies.linear import LinearScanStrategy
from patternkit.strategies.routing import (
    RoutingKey,
    StrategyRouter,
    create_default_router,
)
from patternkit.strategies.sorting import SortingStrategy

__all__ = [
    "HeapStrategy",
    "LinearScanStrategy",
    "RoutingKey",
    "SortingStrategy",
    "Strategy",
    "StrategyRouter",
    "create_default_router",
]
