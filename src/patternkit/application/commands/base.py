from dataclasses import dataclass


@dataclass
class Command:
    """Base command class"""

    name: str


@dataclass
class TerminateCommand(Command):
    """End the console session"""


@dataclass
class CreateInstanceCommand(Command):
    """Request the singleton with a payload"""

    value: int = 0


@dataclass
class ListInstancesCommand(Command):
    """Show every handle collected so far"""


@dataclass
class CompareInstancesCommand(Command):
    """Check two collected handles for identity"""

    first: int = 1
    second: int = 1


@dataclass
class WriteLogCommand(Command):
    """Append a line through the first collected handle"""

    message: str = ""
