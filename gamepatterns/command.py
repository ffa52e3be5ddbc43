"""Character actions wrapped as command objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable


class Command(ABC):
    """An action that prints and returns its message when executed."""

    @abstractmethod
    def execute(self) -> str:
        """Carry out the action."""


class Jump(Command):
    def execute(self) -> str:
        message = "character jumps"
        print(message)
        return message


class Attack(Command):
    def execute(self) -> str:
        message = "character attacks"
        print(message)
        return message


class Run(Command):
    def execute(self) -> str:
        message = "character runs"
        print(message)
        return message


def run_commands(commands: Iterable[Command | None]) -> list[str]:
    """Execute commands in order, stopping at the first missing one."""
    results = []
    for command in commands:
        if command is None:
            break
        results.append(command.execute())
    return results


def main(argv: list[str] | None = None) -> int:
    """Run a jump, a run and an attack."""
    run_commands([Jump(), Run(), Attack()])
    return 0