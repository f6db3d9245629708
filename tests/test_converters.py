from datetime import datetime
from enum import Enum
from pathlib import Path

import pytest

from simpleopt.converters import (
    ConverterRegistry,
    coerce_bool,
    default_registry,
    enum_converter,
)


class Color(Enum):
    RED = "r"
    GREEN = "g"
    BLUE = "b"


@pytest.mark.parametrize(
    "type_, raw, expected",
    [
        (bool, "true", True),
        (bool, "Off", False),
        ("byte", "-128", -128),
        (int, "42", 42),
        ("int", "2147483647", 2147483647),
        ("long", "9223372036854775807", 9223372036854775807),
        (float, "3.5", 3.5),
        ("double", "1e3", 1000.0),
        (str, "hello", "hello"),
        (str, "", ""),
        (Path, "a/b.txt", Path("a/b.txt")),
        ("file", "out.log", Path("out.log")),
        (bytes, "abc", b"abc"),
    ],
)
def test_builtin_converters(type_, raw, expected):
    converter = default_registry().converter_for(type_)
    assert converter is not None
    assert converter(raw) == expected


@pytest.mark.parametrize(
    "type_, raw",
    [
        ("byte", "128"),
        (int, "2147483648"),
        ("long", "9223372036854775808"),
        (int, "forty-two"),
        (float, "pi"),
        (bool, "maybe"),
    ],
)
def test_builtin_converters_reject_bad_input(type_, raw):
    with pytest.raises(ValueError):
        default_registry().converter_for(type_)(raw)


def test_datetime_converter_uses_dateutil():
    converter = default_registry().converter_for(datetime)
    assert converter("2024-03-01 12:30") == datetime(2024, 3, 1, 12, 30)
    with pytest.raises(ValueError):
        converter("not a date")


def test_enum_converter_is_case_insensitive():
    converter = default_registry().converter_for(Color)
    assert converter("red") is Color.RED
    assert converter("Red") is Color.RED
    assert converter("RED") is Color.RED
    assert converter("bLuE") is Color.BLUE


def test_enum_converter_no_match_returns_none():
    converter = default_registry().converter_for(Color)
    assert converter("purple") is None
    assert converter("r") is None


def test_enum_converter_from_explicit_pairs():
    converter = enum_converter([("fast", 1), ("Slow", 2), ("FAST", 3)])
    assert converter("FAST") == 1
    assert converter("slow") == 2
    assert converter("medium") is None


def test_unknown_type_has_no_converter():
    class Custom:
        pass

    registry = default_registry()
    assert registry.converter_for(Custom) is None
    assert Custom not in registry
    assert int in registry


def test_register_overrides_only_that_registry():
    registry = default_registry()
    registry.register(int, lambda value: int(value, 16))
    assert registry.converter_for(int)("ff") == 255
    assert default_registry().converter_for(int)("10") == 10


def test_copy_is_independent():
    registry = ConverterRegistry({str: str.upper})
    clone = registry.copy()
    clone.register(str, str.lower)
    assert registry.converter_for(str)("Ab") == "AB"
    assert clone.converter_for(str)("Ab") == "ab"


def test_register_rejects_non_callable():
    with pytest.raises(TypeError):
        ConverterRegistry().register(int, "not callable")


def test_coerce_bool_strips_whitespace():
    assert coerce_bool(" yes ") is True
    assert coerce_bool("0") is False
