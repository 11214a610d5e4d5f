import sys

from dotenv import load_dotenv
from loguru import logger

from patternkit.application.services import CommandDispatcher, StrategyRunner
from patternkit.core.config import Config
from patternkit.shared.container import DIContainer, create_container
from patternkit.shared.exceptions import ConfigurationError
from patternkit.singleton.guard import SingletonGuard
from patternkit.strategies.routing import StrategyRouter

USAGE = "Usage: patternkit singleton | patternkit strategy [KEY ...]"


def configure_logging(config: Config) -> None:
    """Send diagnostics to a rotating file at the configured level"""
    logger.add(
        "logs/patternkit_{time}.log",
        rotation="1 day",
        retention="30 days",
        level=config.log_level,
    )


def run_singleton(container: DIContainer) -> int:
    guard = container.get(SingletonGuard)
    dispatcher = CommandDispatcher(guard)
    return dispatcher.run(sys.stdin)


def run_strategy(container: DIContainer, keys: list[str]) -> int:
    config = container.get(Config)
    runner = StrategyRunner(container.get(StrategyRouter))
    if keys:
        return runner.run(sys.stdin, count=config.strategy_input_size, keys=keys)
    return runner.run(sys.stdin, count=config.strategy_input_size)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for the pattern demonstrations

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    argv = sys.argv if argv is None else argv
    load_dotenv()

    # Keep the interactive console readable; details go to the file sink
    logger.remove()
    logger.add(sys.stderr, level="WARNING")

    try:
        config = Config.from_env()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    configure_logging(config)

    if len(argv) < 2:
        logger.error(f"No demo specified. {USAGE}")
        return 1

    container = create_container(config)
    demo = argv[1]

    try:
        if demo == "singleton":
            return run_singleton(container)
        if demo == "strategy":
            return run_strategy(container, argv[2:])
    except KeyboardInterrupt:
        logger.warning("Session stopped manually.")
        return 1

    logger.error(f"Unknown demo: {demo}. {USAGE}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
