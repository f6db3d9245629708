# Simpleopt CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseResult`, the immutable outcome of one `OptionParser.parse` call.

A result holds:
- `options`: read-only mapping from each set `Option` to its value (`True` for
  flags, the converted value for value options).
- `subcommand`: the matched subcommand name, or None.
- `remainder`: the tokens left after option scanning stopped, in input order.
- `warnings`: non-fatal diagnostics reported during the parse, in input order.

Results are snapshots. They are never merged or updated after construction and
can be shared freely.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from simpleopt.exceptions import UsageError
from simpleopt.option import Option


@dataclass(frozen=True, eq=False)
class ParseResult:
    """
    Resolved options, matched subcommand and remainder of a parse.

    Attributes:
        options (Mapping[Option, Any]): Values of all options that were set.
        subcommand (str | None): The matched subcommand, if any.
        remainder (tuple[str, ...]): Unconsumed trailing arguments.
        warnings (tuple[str, ...]): Diagnostics such as unknown options.
        registered (frozenset[str]): Names of the options the parser knew about.
    """

    options: Mapping[Option, Any] = field(default_factory=dict)
    subcommand: str | None = None
    remainder: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    registered: frozenset[str] = field(default=frozenset(), compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))
        object.__setattr__(self, "remainder", tuple(self.remainder))
        object.__setattr__(self, "warnings", tuple(self.warnings))
        object.__setattr__(self, "registered", frozenset(self.registered))

    def _check_registered(self, option: Option) -> None:
        if option.name not in self.registered:
            raise UsageError(f"Option '{option.name}' is not registered with the parser")

    def is_set(self, option: Option) -> bool:
        """
        Return True if `option` was set in this parse.

        Raises:
            UsageError: If `option` was never registered with the parser.
        """
        self._check_registered(option)
        return option in self.options

    def value_of(self, option: Option) -> Any:
        """
        Return the converted value of a value-taking option.

        Raises:
            UsageError: If `option` is unregistered, takes no value or was not set.
        """
        self._check_registered(option)
        if not option.takes_value:
            raise UsageError(f"Option '{option.name}' does not take a value")
        if option not in self.options:
            raise UsageError(f"Option '{option.name}' was not set")
        return self.options[option]

    def get(self, option: Option, default: Any = None) -> Any:
        """Return the option's value (True for flags) or `default` if unset."""
        return self.options.get(option, default)

    def __contains__(self, option: object) -> bool:
        return option in self.options

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParseResult):
            return NotImplemented
        return (
            dict(self.options) == dict(other.options)
            and self.subcommand == other.subcommand
            and self.remainder == other.remainder
            and self.warnings == other.warnings
        )
