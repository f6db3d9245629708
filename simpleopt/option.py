# Simpleopt CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Option`, the immutable declaration of a single command-line option.

An `Option` describes one CLI input: its long `name` (`--name`), its one-character
`shorthand` (`-n`), whether it is a plain flag or takes a value, how the raw value
is converted, which callbacks run when it is observed and for which subcommands it
is valid.

Options are normally created with the fluent builders in `simpleopt.builder`:

    verbose = flag("verbose").description("Print more output").build()
    jobs = value_option("jobs", int).shorthand("j").build()

Two options are equal when their names are equal, whatever their other fields.

Key Attributes:
- `name`: Long name, non-empty and without spaces.
- `shorthand`: Single character used in `-abc` chains.
- `mode`: `OptionMode.FLAG` or `OptionMode.VALUE`.
- `converter`: `str -> value` callable, present exactly for value options.
- `value_callback`: Called with the converted value (value options only).
- `callback`: Called with no arguments whenever the option is recognized.
- `description`: Help text and value placeholder.
- `validator`: Predicate over the matched subcommand name (or None).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from simpleopt.exceptions import UsageError


class OptionMode(Enum):
    """Whether an option is a bare flag or consumes a value."""

    FLAG = "flag"
    VALUE = "value"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OptionDescription:
    """Help text for an option and the placeholder shown for its value."""

    text: str = ""
    value_name: str = "VALUE"

    def __post_init__(self) -> None:
        if self.text is None:
            object.__setattr__(self, "text", "")
        if self.value_name is None:
            object.__setattr__(self, "value_name", "VALUE")


def always_valid(subcommand: str | None) -> bool:
    """Validity predicate accepting every subcommand context."""
    return True


@dataclass(frozen=True, eq=False)
class Option:
    """
    Represents a command-line option.

    Attributes:
        name (str): Long name, matched as `--name` or `--name=value`.
        shorthand (str): Single character, matched inside `-abc` chains.
        mode (OptionMode): FLAG for bare switches, VALUE for options taking a value.
        converter (Callable[[str], Any] | None): Converts the raw value. Required
            for VALUE options, always None for FLAG options.
        value_callback (Callable[[Any], None] | None): Receives the converted value.
        callback (Callable[[], None] | None): Runs whenever the option is set.
        description (OptionDescription): Help text and value placeholder.
        validator (Callable[[str | None], bool]): True when the option may be used
            with the given subcommand (None when no subcommand matched).
    """

    name: str
    shorthand: str
    mode: OptionMode = OptionMode.FLAG
    converter: Callable[[str], Any] | None = None
    value_callback: Callable[[Any], None] | None = None
    callback: Callable[[], None] | None = None
    description: OptionDescription = field(default_factory=OptionDescription)
    validator: Callable[[str | None], bool] = always_valid

    def __post_init__(self) -> None:
        validate_name(self.name)
        validate_shorthand(self.shorthand)
        if self.mode is OptionMode.FLAG and (
            self.converter is not None or self.value_callback is not None
        ):
            raise UsageError(f"Flag option '{self.name}' cannot convert values")

    @property
    def takes_value(self) -> bool:
        return self.mode is OptionMode.VALUE

    @property
    def long_flag(self) -> str:
        return f"--{self.name}"

    def is_valid_for(self, subcommand: str | None) -> bool:
        """Evaluate the validity predicate against a matched subcommand."""
        return bool(self.validator(subcommand))

    @classmethod
    def flag(
        cls,
        name: str,
        callback: Callable[[], None] | None = None,
        shorthand: str | None = None,
    ) -> Option:
        """Shortcut for `flag(name).shorthand(...).when_set(callback).build()`."""
        from simpleopt.builder import FlagOptionBuilder

        builder = FlagOptionBuilder(name).when_set(callback)
        if shorthand is not None:
            builder.shorthand(shorthand)
        return builder.build()

    @classmethod
    def with_value(
        cls,
        name: str,
        value_callback: Callable[[Any], None] | None = None,
        type_: Any = str,
        shorthand: str | None = None,
    ) -> Option:
        """Shortcut for `value_option(name, type_).callback(value_callback).build()`."""
        from simpleopt.builder import ValueOptionBuilder

        builder = ValueOptionBuilder(name, type_).callback(value_callback)
        if shorthand is not None:
            builder.shorthand(shorthand)
        return builder.build()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        if self.takes_value:
            return f"{self.long_flag}={self.description.value_name}"
        return self.long_flag

    def __repr__(self) -> str:
        return (
            f"Option(name={self.name!r}, shorthand={self.shorthand!r}, "
            f"mode={self.mode})"
        )


def validate_name(name: Any) -> None:
    """Raise UsageError unless `name` is a non-empty string without spaces."""
    if not isinstance(name, str) or not name:
        raise UsageError("Option name cannot be empty")
    if " " in name:
        raise UsageError(f"Option name cannot contain spaces: '{name}'")


def validate_shorthand(shorthand: Any) -> None:
    """Raise UsageError unless `shorthand` is a single non-space character."""
    if not isinstance(shorthand, str) or len(shorthand) != 1:
        raise UsageError(
            f"Option shorthand must be a single character: {shorthand!r}"
        )
    if shorthand == " ":
        raise UsageError("Option shorthand cannot be a space")
