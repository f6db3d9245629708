# Simpleopt CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value conversion for option arguments.

A converter is any callable taking the raw command-line string and returning the
typed value. `ConverterRegistry` maps a requested value type to such a callable.
Registries are plain values: builders receive one explicitly, and
`default_registry()` hands out a fresh copy every time, so tests can substitute
their own converter sets without touching shared state.

Keys are either Python types (`int`, `float`, `Path`, an `Enum` subclass, ...) or
one of the width names below, which pin an integer range:

    "bool", "byte" (8-bit), "int" (32-bit), "long" (64-bit), "float",
    "double", "str", "path", "file", "bytes", "datetime"

Enumerations never need registering. `converter_for` synthesizes a matcher from
the members' names via `enum_converter`, which compares case-insensitively and
returns `None` when no member matches instead of raising.

Example:
    registry = default_registry()
    registry.converter_for("byte")("12")      # -> 12
    registry.converter_for(Color)("red")      # -> Color.RED
    registry.converter_for(Color)("purple")   # -> None
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum, EnumMeta
from pathlib import Path
from typing import Any, Callable, Hashable, Iterable, TypeVar

from dateutil import parser as date_parser

T = TypeVar("T")

Converter = Callable[[str], Any]


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts 'true', 'yes', '1', 'on' and 'false', 'no', '0', 'off' (any case).

    Raises:
        ValueError: If the string is not a recognized boolean spelling.
    """
    normalized = value.strip().lower()
    if normalized in {"true", "t", "1", "yes", "on"}:
        return True
    elif normalized in {"false", "f", "0", "no", "off"}:
        return False
    raise ValueError(f"'{value}' is not a boolean")


def _ranged_int(bits: int) -> Converter:
    low = -(2 ** (bits - 1))
    high = 2 ** (bits - 1) - 1

    def convert(value: str) -> int:
        number = int(value.strip())
        if not low <= number <= high:
            raise ValueError(f"{number} is out of range for a {bits}-bit integer")
        return number

    convert.__name__ = f"int{bits}"
    return convert


def coerce_datetime(value: str) -> datetime:
    """Parse a date/time string with dateutil."""
    try:
        return date_parser.parse(value)
    except (ValueError, OverflowError) as error:
        raise ValueError(f"'{value}' could not be parsed as a datetime") from error


def enum_converter(members: Iterable[tuple[str, T]]) -> Callable[[str], T | None]:
    """
    Build a converter matching input case-insensitively against display names.

    Args:
        members: Ordered `(display_name, value)` pairs. The first pair whose
            display name matches wins.

    Returns:
        A converter returning the matched value, or `None` when nothing matches.
    """
    pairs = [(name.casefold(), value) for name, value in members]

    def convert(text: str) -> T | None:
        wanted = text.casefold()
        for name, value in pairs:
            if name == wanted:
                return value
        return None

    return convert


def _defaults() -> dict[Hashable, Converter]:
    int8 = _ranged_int(8)
    int32 = _ranged_int(32)
    int64 = _ranged_int(64)
    return {
        bool: coerce_bool,
        "bool": coerce_bool,
        "byte": int8,
        int: int32,
        "int": int32,
        "long": int64,
        float: float,
        "float": float,
        "double": float,
        str: str,
        "str": str,
        Path: Path,
        "path": Path,
        "file": Path,
        bytes: lambda value: value.encode("utf-8"),
        "bytes": lambda value: value.encode("utf-8"),
        datetime: coerce_datetime,
        "datetime": coerce_datetime,
    }


class ConverterRegistry:
    """
    Maps value types to string converters.

    Lookups fall back to synthesizing an enum matcher for `Enum` subclasses and
    return `None` for anything else.
    """

    def __init__(self, converters: dict[Hashable, Converter] | None = None) -> None:
        self._converters: dict[Hashable, Converter] = dict(converters or {})

    def register(self, type_: Hashable, converter: Converter) -> None:
        """Add or replace the converter for `type_` on this registry."""
        if not callable(converter):
            raise TypeError(f"{converter!r} is not callable")
        self._converters[type_] = converter

    def converter_for(self, type_: Hashable) -> Converter | None:
        """Return the converter for `type_`, or None if there is none."""
        if type_ in self._converters:
            return self._converters[type_]
        if isinstance(type_, EnumMeta) and issubclass(type_, Enum):
            return enum_converter((member.name, member) for member in type_)
        return None

    def copy(self) -> ConverterRegistry:
        return ConverterRegistry(self._converters)

    def __contains__(self, type_: object) -> bool:
        return self.converter_for(type_) is not None  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"ConverterRegistry(types={len(self._converters)})"


def default_registry() -> ConverterRegistry:
    """Return a new registry populated with the built-in converters."""
    return ConverterRegistry(_defaults())
