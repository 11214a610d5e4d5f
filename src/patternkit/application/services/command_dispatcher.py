from collections.abc import Iterable

from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from patternkit.application.commands import (
    Command,
    CompareInstancesCommand,
    CreateInstanceCommand,
    ListInstancesCommand,
    TerminateCommand,
    WriteLogCommand,
    parse_command,
)
from patternkit.application.services.instance_ledger import InstanceLedger
from patternkit.shared.exceptions import (
    CommandError,
    PatternKitError,
    ResourceInitializationError,
)
from patternkit.singleton.guard import SingletonGuard

SEPARATOR = "=" * 54

MENU = """[bold cyan]SINGLETON CONTROL CALLS[/bold cyan]
Control calls for the Singleton pattern

[yellow]0[/yellow]            - Terminate the session
[yellow]1 <value>[/yellow]    - Create a NEW INSTANCE
[yellow]2[/yellow]            - Get ALL INSTANCES
[yellow]3 <i> <j>[/yellow]    - Compare two INSTANCES to check there is a single instance
[yellow]4 <text>[/yellow]     - Write a line to the log file"""


class CommandDispatcher:
    """Dispatches singleton console commands to handlers"""

    def __init__(
        self,
        guard: SingletonGuard,
        console: Console | None = None,
        ledger: InstanceLedger | None = None,
    ) -> None:
        self.guard = guard
        self.console = console or Console()
        self.ledger = ledger or InstanceLedger()
        self._handlers = {
            TerminateCommand: self._handle_terminate,
            CreateInstanceCommand: self._handle_create,
            ListInstancesCommand: self._handle_list,
            CompareInstancesCommand: self._handle_compare,
            WriteLogCommand: self._handle_write,
        }

    def show_menu(self) -> None:
        self.console.print(Panel(MENU, border_style="cyan"))

    def dispatch(self, command: Command) -> bool:
        """Execute a command

        Args:
            command: Parsed console command

        Returns:
            False once the session should end, True otherwise
        """
        handler = self._handlers.get(type(command))
        if handler is None:
            raise CommandError(f"Unknown command: {command.name}")
        logger.debug(f"Dispatching {command}")
        return handler(command)

    def run(self, lines: Iterable[str]) -> int:
        """Read commands until terminate or end of input

        Args:
            lines: Input lines, e.g. ``sys.stdin``

        Returns:
            Exit code (0 for success, 1 if the log sink could not be opened)
        """
        self.show_menu()
        try:
            for line in lines:
                if not line.strip():
                    continue
                try:
                    if not self.dispatch(parse_command(line)):
                        break
                except ResourceInitializationError as e:
                    logger.error(f"Unrecoverable resource failure: {e}")
                    self.console.print(f"[red]✗ {escape(str(e))}[/red]")
                    return 1
                except PatternKitError as e:
                    logger.warning(f"Command failed: {e}")
                    self.console.print(f"[red]✗ {escape(str(e))}[/red]")
            return 0
        finally:
            self.ledger.release_all()

    def _banner(self, title: str) -> None:
        self.console.print(SEPARATOR)
        self.console.print(f"{title:^54}")
        self.console.print(SEPARATOR)

    def _handle_terminate(self, command: TerminateCommand) -> bool:
        self.console.print("CALL WILL END NOW")
        return False

    def _handle_create(self, command: CreateInstanceCommand) -> bool:
        self._banner("A NEW INSTANCE CREATED")
        index = self.ledger.add(self.guard.get_instance(command.value))
        logger.info(f"Stored singleton handle as instance number {index}")
        return True

    def _handle_list(self, command: ListInstancesCommand) -> bool:
        if not len(self.ledger):
            self.console.print("[yellow]No instances created yet[/yellow]")
        for index, instance in self.ledger.items():
            self.console.print(
                f"Instance number : {index} - Instance hash code : "
                f"{instance.identity()}, {instance.value}"
            )
        return True

    def _handle_compare(self, command: CompareInstancesCommand) -> bool:
        self._banner("TWO INSTANCES WILL BE CHECKED")
        same = self.ledger.same(command.first, command.second)
        self.console.print(f"Are two taken instances same ? {same}")
        return True

    def _handle_write(self, command: WriteLogCommand) -> bool:
        self.ledger.get(1).log(command.message)
        return True
