from patternkit.application.services.command_dispatcher import CommandDispatcher
from patternkit.application.services.instance_ledger import InstanceLedger
from patternkit.application.services.strategy_runner import StrategyRunner

__all__ = ["CommandDispatcher", "InstanceLedger", "StrategyRunner"]
