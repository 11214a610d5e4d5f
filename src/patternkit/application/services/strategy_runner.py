"""Reads integers and prints the maximum chosen by each routing key"""

from collections.abc import Iterable, Sequence

from loguru import logger
from rich.console import Console
from rich.markup import escape

from patternkit.shared.exceptions import CommandError, PatternKitError
from patternkit.strategies.routing import StrategyRouter

DEFAULT_KEYS = ("Heapify", "sorting")


def read_numbers(lines: Iterable[str], count: int) -> list[int]:
    """Collect ``count`` whitespace-separated integers across input lines

    Lines after the one that completes the count are left unread.

    Raises:
        CommandError: If a token is not an integer, input ends early, or the
            completing line carries extra tokens
    """
    nums: list[int] = []
    for line in lines:
        tokens = line.split()
        for position, token in enumerate(tokens):
            try:
                nums.append(int(token))
            except ValueError:
                raise CommandError(
                    f"Expected an integer, got {token!r}"
                ) from None
            if len(nums) == count:
                extra = tokens[position + 1 :]
                if extra:
                    raise CommandError(
                        f"Expected {count} integers, got extra input: {' '.join(extra)}"
                    )
                return nums
    raise CommandError(f"Expected {count} integers, got {len(nums)}")


class StrategyRunner:
    """Feeds one input sequence through the router under several keys"""

    def __init__(
        self, router: StrategyRouter, console: Console | None = None
    ) -> None:
        self.router = router
        self.console = console or Console()

    def run(
        self,
        lines: Iterable[str],
        count: int = 5,
        keys: Sequence[str] = DEFAULT_KEYS,
    ) -> int:
        """Evaluate ``count`` integers from ``lines`` under each key

        Returns:
            Exit code (0 if every key evaluated, 1 otherwise)
        """
        try:
            nums = read_numbers(lines, count)
        except CommandError as e:
            logger.error(f"Invalid input: {e}")
            self.console.print(f"[red]✗ {escape(str(e))}[/red]")
            return 1

        exit_code = 0
        for key in keys:
            try:
                result = self.router.evaluate(nums, key)
            except PatternKitError as e:
                logger.warning(f"Evaluation with {key!r} failed: {e}")
                self.console.print(f"[red]✗ {escape(str(e))}[/red]")
                exit_code = 1
                continue
            self.console.print(result)
        return exit_code
