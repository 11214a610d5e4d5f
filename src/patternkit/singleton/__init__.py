"""Lazily initialized single-instance registry"""

from patternkit.singleton.guard import SingletonGuard
from patternkit.singleton.instance import LogInstance

__all__ = ["LogInstance", "SingletonGuard"]
