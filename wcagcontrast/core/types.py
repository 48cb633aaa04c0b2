"""Shared types for wcagcontrast: Command, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from wcagcontrast.core.color import Color


@dataclass
class Report:
    """Accumulates results from a command for text/JSON output."""

    command: str = ''
    entries: list[dict[str, Any]] = field(default_factory=list)

    def add(self, data: dict[str, Any]) -> None:
        """Add one result row."""
        self.entries.append(data)


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='ratio', help='Contrast ratio of two colours')

        @command.arguments
        def arguments(parser):
            parser.add_argument(...)

        @command.run
        def run(colors, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._arguments_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the argparse setup function."""
        self._arguments_fn = fn
        return fn

    def add_arguments(self, parser: Any) -> None:
        if self._arguments_fn is not None:
            self._arguments_fn(parser)

    def execute(self, colors: list[Color], report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        report.command = self.name
        self._run_fn(colors, report, args)
