"""Index of every handle the singleton console has been given"""

from loguru import logger

from patternkit.shared.exceptions import CommandError
from patternkit.singleton.instance import LogInstance


class InstanceLedger:
    """1-based index -> handle map kept by the console.

    Every handle should be the same object; the ledger exists so the
    console can show that it is.
    """

    def __init__(self) -> None:
        self._entries: dict[int, LogInstance] = {}
        self._next_index = 1

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, instance: LogInstance) -> int:
        index = self._next_index
        self._entries[index] = instance
        self._next_index += 1
        return index

    def get(self, index: int) -> LogInstance:
        """Look up a handle by its index.

        Raises:
            CommandError: If no handle was stored under ``index``
        """
        if index not in self._entries:
            raise CommandError(
                f"No instance number {index}. Created so far: {len(self)}"
            )
        return self._entries[index]

    def items(self) -> list[tuple[int, LogInstance]]:
        return sorted(self._entries.items())

    def same(self, first: int, second: int) -> bool:
        return self.get(first) is self.get(second)

    def release_all(self) -> None:
        """Release the sink behind every stored handle"""
        for index, instance in self.items():
            logger.debug(f"Releasing instance number {index}")
            instance.release()
