# Simpleopt CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Subcommand declarations.

A `SubCommandTable` is the ordered, immutable set of names accepted as the first
non-option token. An empty table tells the parser not to match subcommands at all;
the first non-option token then simply starts the remainder.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from simpleopt.exceptions import UsageError


@dataclass(frozen=True, eq=False)
class SubCommand:
    """A subcommand name plus the description shown in help output."""

    name: str
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise UsageError("Subcommand name cannot be empty")
        if self.description is None:
            object.__setattr__(self, "description", "")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SubCommand):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


SubCommandLike = SubCommand | tuple[str, str] | str


def to_subcommand(value: SubCommandLike) -> SubCommand:
    """Accept a SubCommand, a `(name, description)` pair or a bare name."""
    if isinstance(value, SubCommand):
        return value
    if isinstance(value, tuple):
        if len(value) != 2:
            raise UsageError(
                f"Subcommands must be (name, description) pairs, got {value!r}"
            )
        return SubCommand(*value)
    if isinstance(value, str):
        return SubCommand(value)
    raise UsageError(f"Cannot build a subcommand from {value!r}")


class SubCommandTable:
    """Ordered, immutable collection of known subcommands."""

    def __init__(self, subcommands: Iterable[SubCommandLike] = ()) -> None:
        entries: list[SubCommand] = []
        for value in subcommands:
            subcommand = to_subcommand(value)
            if subcommand in entries:
                raise UsageError(f"Subcommand '{subcommand.name}' is declared twice")
            entries.append(subcommand)
        self._entries: tuple[SubCommand, ...] = tuple(entries)
        self._names: frozenset[str] = frozenset(entry.name for entry in entries)

    @property
    def names(self) -> list[str]:
        return [entry.name for entry in self._entries]

    def get(self, name: str) -> SubCommand | None:
        return next((entry for entry in self._entries if entry.name == name), None)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, SubCommand):
            return item.name in self._names
        return item in self._names

    def __iter__(self) -> Iterator[SubCommand]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __repr__(self) -> str:
        return f"SubCommandTable({self.names})"
