"""Demonstrations of the Singleton and Strategy design patterns"""

from patternkit.singleton import LogInstance, SingletonGuard
from patternkit.strategies import RoutingKey, StrategyRouter

__all__ = ["LogInstance", "RoutingKey", "SingletonGuard", "StrategyRouter"]
