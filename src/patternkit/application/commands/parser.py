"""Parsing of the singleton console's line-based integer commands"""

from patternkit.application.commands.base import (
    Command,
    CompareInstancesCommand,
    CreateInstanceCommand,
    ListInstancesCommand,
    TerminateCommand,
    WriteLogCommand,
)
from patternkit.shared.exceptions import CommandError

TERMINATE = 0
CREATE = 1
LIST = 2
COMPARE = 3
WRITE = 4


def _int_arg(tokens: list[str], position: int, what: str) -> int:
    if len(tokens) <= position:
        raise CommandError(f"Missing {what}")
    try:
        return int(tokens[position])
    except ValueError:
        raise CommandError(
            f"{what.capitalize()} must be an integer, got {tokens[position]!r}"
        ) from None


def parse_command(line: str) -> Command:
    """Turn one input line into a Command.

    The first token is the command code; the rest are its arguments. The
    write command takes the remainder of the line verbatim.

    Raises:
        CommandError: On an empty line, unknown code or bad arguments
    """
    stripped = line.strip()
    if not stripped:
        raise CommandError("Empty command")

    code_token, _, rest = stripped.partition(" ")
    tokens = stripped.split()
    code = _int_arg(tokens, 0, "command code")

    if code == TERMINATE:
        return TerminateCommand(name="terminate")
    if code == CREATE:
        return CreateInstanceCommand(
            name="create", value=_int_arg(tokens, 1, "payload value")
        )
    if code == LIST:
        return ListInstancesCommand(name="list")
    if code == COMPARE:
        return CompareInstancesCommand(
            name="compare",
            first=_int_arg(tokens, 1, "first index"),
            second=_int_arg(tokens, 2, "second index"),
        )
    if code == WRITE:
        return WriteLogCommand(name="write", message=rest.strip())

    raise CommandError(f"Wrong command entered: {code_token}")
