"""Lazy, thread-safe construction of the single LogInstance"""

import threading
from pathlib import Path

from loguru import logger
from rich.console import Console

from patternkit.singleton.instance import LogInstance


class SingletonGuard:
    """Creates at most one LogInstance, on first access.

    The guard is an ordinary object owned by the process container rather
    than a module global; every caller that shares the guard shares the
    instance.
    """

    def __init__(
        self, log_file: str | Path, console: Console | None = None
    ) -> None:
        self.log_file = Path(log_file)
        self._console = console
        self._instance: LogInstance | None = None
        self._lock = threading.Lock()
        self._construction_count = 0

    @property
    def is_initialized(self) -> bool:
        return self._instance is not None

    @property
    def construction_count(self) -> int:
        """Number of LogInstance objects this guard has built (0 or 1)"""
        return self._construction_count

    def get_instance(self, init_value: int) -> LogInstance:
        """Return the shared instance, building it on the first call.

        Double-checked locking: the common path reads the published slot
        without the lock; only a caller that finds it empty takes the lock
        and checks again before constructing. The slot is assigned only
        after LogInstance.__init__ has returned, so no caller can observe a
        partly built instance.

        Args:
            init_value: Payload used only if this call constructs the instance

        Returns:
            The one LogInstance owned by this guard

        Raises:
            ResourceInitializationError: If the log sink cannot be opened.
                Nothing is published, so a later call retries construction.
        """
        instance = self._instance
        if instance is None:
            with self._lock:
                instance = self._instance
                if instance is None:
                    instance = LogInstance(
                        init_value, self.log_file, console=self._console
                    )
                    self._construction_count += 1
                    self._instance = instance
                    logger.debug(
                        f"Singleton published with value={init_value}"
                    )
        return instance

    def release(self) -> None:
        """Release the instance's log sink if one was built"""
        instance = self._instance
        if instance is not None:
            instance.release()
