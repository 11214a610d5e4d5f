from patternkit.application.commands.base import (
    Command,
    CompareInstancesCommand,
    CreateInstanceCommand,
    ListInstancesCommand,
    TerminateCommand,
    WriteLogCommand,
)
from patternkit.application.commands.parser import parse_command

__all__ = [
    "Command",
    "CompareInstancesCommand",
    "CreateInstanceCommand",
    "ListInstancesCommand",
    "TerminateCommand",
    "WriteLogCommand",
    "parse_command",
]
