"""Consolidated exceptions for patternkit.

All custom exceptions are defined here to provide a single source of truth
for error handling across the application.
"""


class PatternKitError(Exception):
    """Base exception for patternkit errors"""

    pass


class SingletonError(PatternKitError):
    """Base exception for singleton guard errors"""

    pass


class ResourceInitializationError(SingletonError):
    """Raised when the singleton's log sink cannot be opened"""

    def __init__(self, path: str, original_error: Exception | None = None):
        message = f"Cannot open log sink: {path}"
        if original_error:
            message += (
                f" | Caused by: {type(original_error).__name__}: {original_error}"
            )
        super().__init__(message)
        self.path = path
        self.original_error = original_error


class InstanceReleasedError(SingletonError):
    """Raised when logging through an instance whose sink was released"""

    pass


class InvalidLogMessageError(SingletonError):
    """Raised when a log message would span more than one line"""

    pass


class StrategyError(PatternKitError):
    """Base strategy error"""

    pass


class UnrecognizedRoutingKeyError(StrategyError):
    """Raised when a routing key matches no RoutingKey member"""

    def __init__(self, key: str, available: list[str]):
        super().__init__(
            f"Unrecognized routing key: {key!r}. Available keys: {available}"
        )
        self.key = key
        self.available = available


class EmptyInputSequenceError(StrategyError):
    """Raised when a strategy is asked for the maximum of nothing"""

    pass


class IncompleteStrategyMappingError(StrategyError):
    """Raised when a router is built without one strategy per routing key"""

    pass


class ConfigurationError(PatternKitError):
    """Raised when configuration is invalid or missing"""

    pass


class CommandError(PatternKitError):
    """Raised when a console command has missing or invalid arguments"""

    pass
