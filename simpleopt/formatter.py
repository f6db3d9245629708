# Simpleopt CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Help text rendering for a set of options and subcommands.

`HelpFormatter` only reads what the parser exposes: each option's name,
shorthand, takes-value flag, description text and value placeholder, plus each
subcommand's name and description. It produces either plain text (`format`) or
Rich output on the shared console (`render`).

Plain text layout:

    Available subcommands:
      build:
        Compile the project

    Options:
    Option     Shorthand  Description
    --jobs=N   -j N       Number of parallel jobs

    --verbose  -v         Print more output

The subcommand section is only present when subcommands are declared. Rows are
sorted by option name and columns are as wide as their widest entry.
"""
from __future__ import annotations

import textwrap
from typing import Iterable

from rich.console import Console
from rich.markup import escape

from simpleopt.console import console as default_console
from simpleopt.option import Option
from simpleopt.subcommand import SubCommandTable

OPTION_HEADING = "Option"
SHORTHAND_HEADING = "Shorthand"
DESCRIPTION_HEADING = "Description"
GUTTER = 2


class HelpFormatter:
    """
    Formats option and subcommand help.

    Args:
        options (Iterable[Option]): Options to describe.
        subcommands (SubCommandTable | None): Declared subcommands.
        width (int | None): Wrap descriptions to this total line width.
        console (Console | None): Console used by `render`.
    """

    def __init__(
        self,
        options: Iterable[Option],
        subcommands: SubCommandTable | None = None,
        width: int | None = None,
        console: Console | None = None,
    ) -> None:
        self.options: list[Option] = sorted(options, key=lambda option: option.name)
        self.subcommands: SubCommandTable = subcommands or SubCommandTable()
        self.width: int | None = width
        self.console: Console = console or default_console

    @staticmethod
    def long_text(option: Option) -> str:
        if option.takes_value:
            return f"--{option.name}={option.description.value_name}"
        return f"--{option.name}"

    @staticmethod
    def short_text(option: Option) -> str:
        if option.takes_value:
            return f"-{option.shorthand} {option.description.value_name}"
        return f"-{option.shorthand}"

    def _column_widths(self) -> tuple[int, int]:
        long_width = max(
            [len(self.long_text(option)) for option in self.options]
            + [len(OPTION_HEADING)]
        )
        short_width = max(
            [len(self.short_text(option)) for option in self.options]
            + [len(SHORTHAND_HEADING)]
        )
        return long_width + GUTTER, short_width + GUTTER

    def _wrap(self, text: str, indent: int) -> str:
        if not self.width or not text:
            return text
        available = max(self.width - indent, 20)
        lines = textwrap.wrap(text, available) or [""]
        return ("\n" + " " * indent).join(lines)

    def subcommand_lines(self) -> list[str]:
        if not self.subcommands:
            return []
        lines = ["Available subcommands:"]
        for subcommand in self.subcommands:
            lines.append(f"  {subcommand.name}:")
            if subcommand.description:
                lines.append("    " + self._wrap(subcommand.description, 4))
        return lines

    def option_rows(self) -> list[tuple[str, str, str]]:
        """Return `(long, short, description)` triples, already padded."""
        long_width, short_width = self._column_widths()
        rows = []
        for option in self.options:
            rows.append(
                (
                    f"{self.long_text(option):<{long_width}}",
                    f"{self.short_text(option):<{short_width}}",
                    self._wrap(option.description.text, long_width + short_width),
                )
            )
        return rows

    def heading_row(self) -> str:
        long_width, short_width = self._column_widths()
        return (
            f"{OPTION_HEADING:<{long_width}}"
            f"{SHORTHAND_HEADING:<{short_width}}"
            f"{DESCRIPTION_HEADING}"
        )

    def format(self, header: str | None = None) -> str:
        """Return the help text as a plain string."""
        lines: list[str] = []
        if header is not None:
            lines.append(header)
        subcommand_lines = self.subcommand_lines()
        if subcommand_lines:
            lines.extend(subcommand_lines + [""])
        lines.append("Options:")
        lines.append(self.heading_row())
        for long, short, text in self.option_rows():
            lines.append(f"{long}{short}{text}".rstrip())
            lines.append("")
        return "\n".join(lines) + "\n"

    def render(self, header: str | None = None) -> None:
        """Print the help text to the console using Rich styling."""
        if header is not None:
            self.console.print(f"[bold]{escape(header)}[/bold]\n")
        if self.subcommands:
            self.console.print("[bold]Available subcommands:[/bold]")
            for line in self.subcommand_lines()[1:]:
                self.console.print(escape(line))
            self.console.print()
        self.console.print("[bold]Options:[/bold]")
        self.console.print(f"[dim]{escape(self.heading_row())}[/dim]")
        for long, short, text in self.option_rows():
            self.console.print(
                f"[bold]{escape(long)}[/bold]{escape(short)}{escape(text)}"
            )
