"""The value-carrying, log-file-backed object guarded by SingletonGuard"""

import threading
from pathlib import Path

from loguru import logger
from rich.console import Console

from patternkit.shared.exceptions import (
    InstanceReleasedError,
    InvalidLogMessageError,
    ResourceInitializationError,
)


class LogInstance:
    """Integer payload plus an append-mode text log sink.

    Only SingletonGuard should construct these; everything else obtains the
    shared instance through the guard.
    """

    def __init__(
        self, value: int, log_file: str | Path, console: Console | None = None
    ) -> None:
        self.value = value
        self.log_file = Path(log_file)
        self._console = console or Console()
        self._write_lock = threading.Lock()

        try:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            self._sink = self.log_file.open("a", encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to open log sink {self.log_file}: {e}")
            raise ResourceInitializationError(str(self.log_file), e) from e

        logger.info(
            f"LogInstance created (value={value}, sink={self.log_file})"
        )

    @property
    def released(self) -> bool:
        return self._sink.closed

    def log(self, message: str) -> None:
        """Append one line to the sink and echo it to the console.

        The line is flushed before returning so it is visible in the file
        immediately.

        Raises:
            InvalidLogMessageError: If the message contains a line break
            InstanceReleasedError: If release() was already called
        """
        if "\n" in message or "\r" in message:
            raise InvalidLogMessageError(
                f"Log message must be a single line, got {message!r}"
            )
        with self._write_lock:
            if self._sink.closed:
                raise InstanceReleasedError(
                    f"Log sink {self.log_file} has been released"
                )
            self._sink.write(message + "\n")
            self._sink.flush()
        self._console.print(
            f"Log : {message}", markup=False, highlight=False, soft_wrap=True
        )

    def identity(self) -> int:
        """Token equal across calls iff they refer to the same instance"""
        return id(self)

    def release(self) -> None:
        """Close the log sink. Safe to call more than once."""
        with self._write_lock:
            if self._sink.closed:
                return
            self._sink.close()
        logger.info(f"LogInstance released (sink={self.log_file})")

    def __enter__(self) -> "LogInstance":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.release()

    def __repr__(self) -> str:
        return (
            f"LogInstance(value={self.value}, identity={self.identity()}, "
            f"released={self.released})"
        )
