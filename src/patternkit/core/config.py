"""Configuration management for patternkit"""

import os
from dataclasses import dataclass

from loguru import logger

from patternkit.shared.exceptions import ConfigurationError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Configuration for patternkit loaded from environment variables"""

    # Append-only text log written by the singleton instance
    log_file: str = "logs/application.log"

    # Level for the diagnostic loguru sink
    log_level: str = "INFO"

    # How many integers the strategy runner reads
    strategy_input_size: int = 5

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level: {self.log_level}. Expected one of {LOG_LEVELS}"
            )
        if not self.log_file:
            raise ConfigurationError("Log file path must not be empty")
        if self.strategy_input_size < 1:
            raise ConfigurationError(
                f"Strategy input size must be positive, got {self.strategy_input_size}"
            )

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables

        Returns:
            Config instance with values from environment

        Raises:
            ConfigurationError: If an environment variable holds an invalid value
        """
        size_env = os.getenv("PATTERNKIT_STRATEGY_INPUT_SIZE")
        try:
            strategy_input_size = (
                int(size_env) if size_env else cls.strategy_input_size
            )
        except ValueError as e:
            raise ConfigurationError(
                f"PATTERNKIT_STRATEGY_INPUT_SIZE must be an integer, got {size_env!r}"
            ) from e

        config = cls(
            log_file=os.getenv("PATTERNKIT_LOG_FILE") or cls.log_file,
            log_level=os.getenv("PATTERNKIT_LOG_LEVEL") or cls.log_level,
            strategy_input_size=strategy_input_size,
        )

        logger.info("Configuration loaded:")
        logger.info(f"  Log File: {config.log_file}")
        logger.info(f"  Log Level: {config.log_level}")
        logger.info(f"  Strategy Input Size: {config.strategy_input_size}")

        return config
