"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2dokuwiki/cli/output.py
import argparse
import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.table import Table

from md2dokuwiki.rules import ruleset_registry


def should_use_rich_output(args: argparse.Namespace, stream: TextIO | None = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Rich output is used when the --rich flag is set and either --force-rich
    is set or the target stream is a TTY.
    """
    if not getattr(args, "rich", False):
        return False

    if getattr(args, "force_rich", False):
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


class ProgressReporter:
    """Report processed files, one name per line, in processing order."""

    def __init__(self, use_rich: bool = False, stream: TextIO | None = None):
        self.use_rich = use_rich
        self.stream = stream or sys.stdout
        self.console = Console(file=self.stream) if use_rich else None
        self.processed: list[Path] = []

    def file_done(self, path: Path) -> None:
        self.processed.append(path)
        if self.console is not None:
            self.console.print(f"[green]OK[/green] [cyan]{path.name}[/cyan]")
        else:
            print(path.name, file=self.stream)

    def summary(self, output_dir: Path) -> None:
        """Print a closing summary table (rich mode only)."""
        if self.console is None:
            return

        table = Table(title="Conversion Summary")
        table.add_column("Files", style="cyan")
        table.add_column("Output Directory", style="yellow")
        table.add_row(str(len(self.processed)), str(output_dir))
        self.console.print(table)


def print_rulesets(use_rich: bool = False, stream: TextIO | None = None) -> None:
    """Print the registered rule sets with their descriptions."""
    stream = stream or sys.stdout
    names = ruleset_registry.list_rulesets()

    if use_rich:
        table = Table(title="Available Rule Sets")
        table.add_column("Name", style="cyan")
        table.add_column("Rules", style="magenta")
        table.add_column("Fixups", style="magenta")
        table.add_column("Description", style="white")
        for name in names:
            ruleset = ruleset_registry.get(name)
            table.add_row(name, str(len(ruleset.rules)), str(len(ruleset.fixups)), ruleset.description)
        Console(file=stream).print(table)
        return

    for name in names:
        ruleset = ruleset_registry.get(name)
        print(f"{name}: {ruleset.description}" if ruleset.description else name, file=stream)
