# Simpleopt CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Fluent builders producing immutable `Option` declarations.

Two builders share the common setters (`shorthand`, `when_set`, `description`,
`valid_for`):

- `FlagOptionBuilder` for options that take no value.
- `ValueOptionBuilder` for options taking a value of a fixed target type. Its
  default converter is resolved from a `ConverterRegistry` when the builder is
  created and can be replaced with `converter()`.

Invalid names and shorthands fail immediately with `UsageError`, so mistakes
surface where the option is declared rather than when arguments are parsed.

Example:
    force = flag("force").when_set(lambda: print("forcing")).build()
    level = (
        value_option("level", int)
        .shorthand("l")
        .description("Compression level", "N")
        .valid_for("compress")
        .build()
    )
"""
from __future__ import annotations

from typing import Any, Callable, Hashable, TypeVar

from simpleopt.converters import Converter, ConverterRegistry, default_registry
from simpleopt.exceptions import UsageError
from simpleopt.option import (
    Option,
    OptionDescription,
    OptionMode,
    always_valid,
    validate_name,
    validate_shorthand,
)

B = TypeVar("B", bound="OptionBuilder")


class OptionBuilder:
    """Setters shared by flag and value option builders."""

    def __init__(self, name: str) -> None:
        validate_name(name)
        self.name: str = name
        self._shorthand: str | None = None
        self._callback: Callable[[], None] | None = None
        self._description: OptionDescription = OptionDescription()
        self._validator: Callable[[str | None], bool] = always_valid

    def shorthand(self: B, shorthand: str) -> B:
        """Set the single-character alias used in `-abc` chains."""
        validate_shorthand(shorthand)
        self._shorthand = shorthand
        return self

    def when_set(self: B, callback: Callable[[], None] | None) -> B:
        """Run `callback` with no arguments whenever the option is recognized."""
        if callback is not None and not callable(callback):
            raise UsageError(f"Callback for option '{self.name}' is not callable")
        self._callback = callback
        return self

    def description(self: B, text: str) -> B:
        """Set the help text, keeping the current value placeholder."""
        if text is None:
            raise UsageError("Option description cannot be None")
        self._description = OptionDescription(text, self._description.value_name)
        return self

    def valid_for(self: B, *subcommands: str) -> B:
        """
        Restrict the option to the given subcommands.

        The option stays valid when no subcommand was matched at all.
        """
        allowed = frozenset(subcommands)

        def validator(subcommand: str | None) -> bool:
            return subcommand is None or subcommand in allowed

        self._validator = validator
        return self

    def _resolved_shorthand(self) -> str:
        return self._shorthand if self._shorthand is not None else self.name[0]

    def build(self) -> Option:
        raise NotImplementedError

    def get(self) -> Option:
        """Alias for `build()`."""
        return self.build()


class FlagOptionBuilder(OptionBuilder):
    """Builds options that are either present or absent."""

    def build(self) -> Option:
        return Option(
            name=self.name,
            shorthand=self._resolved_shorthand(),
            mode=OptionMode.FLAG,
            callback=self._callback,
            description=OptionDescription(self._description.text, ""),
            validator=self._validator,
        )


class ValueOptionBuilder(OptionBuilder):
    """
    Builds options that consume a value.

    Args:
        name (str): Long option name.
        type_ (Any): Target value type used to look up the default converter.
        registry (ConverterRegistry | None): Converter source, defaults to a
            fresh `default_registry()`.
    """

    def __init__(
        self,
        name: str,
        type_: Hashable = str,
        registry: ConverterRegistry | None = None,
    ) -> None:
        super().__init__(name)
        self.type = type_
        registry = registry if registry is not None else default_registry()
        self._converter: Converter | None = registry.converter_for(type_)
        self._value_callback: Callable[[Any], None] | None = None

    def converter(self, converter: Converter) -> ValueOptionBuilder:
        """Replace the registry-provided converter."""
        if converter is None:
            raise UsageError(f"Converter for option '{self.name}' cannot be None")
        if not callable(converter):
            raise UsageError(f"Converter for option '{self.name}' is not callable")
        self._converter = converter
        return self

    def callback(self, callback: Callable[[Any], None] | None) -> ValueOptionBuilder:
        """Run `callback` with the converted value whenever the option is set."""
        if callback is not None and not callable(callback):
            raise UsageError(f"Callback for option '{self.name}' is not callable")
        self._value_callback = callback
        return self

    def description(  # type: ignore[override]
        self, text: str, value_name: str | None = "VALUE"
    ) -> ValueOptionBuilder:
        """Set the help text and the placeholder shown for the value."""
        if text is None:
            raise UsageError("Option description cannot be None")
        if value_name is None:
            raise UsageError("Option value name cannot be None")
        self._description = OptionDescription(text, value_name)
        return self

    def build(self) -> Option:
        if self._converter is None:
            raise UsageError(
                f"Option '{self.name}' has no value converter for type {self.type!r}"
            )
        return Option(
            name=self.name,
            shorthand=self._resolved_shorthand(),
            mode=OptionMode.VALUE,
            converter=self._converter,
            value_callback=self._value_callback,
            callback=self._callback,
            description=self._description,
            validator=self._validator,
        )


def flag(name: str) -> FlagOptionBuilder:
    """Start declaring an option that takes no value."""
    return FlagOptionBuilder(name)


def value_option(
    name: str, type_: Hashable = str, registry: ConverterRegistry | None = None
) -> ValueOptionBuilder:
    """Start declaring an option that takes a value converted to `type_`."""
    return ValueOptionBuilder(name, type_, registry)
