from pathlib import Path
from types import MappingProxyType

import pytest

from simpleopt import OptionParser, ParseResult, UsageError, flag, value_option


@pytest.fixture
def options():
    return {
        "verbose": flag("verbose").build(),
        "jobs": value_option("jobs", int).build(),
        "out": value_option("out", Path).build(),
    }


@pytest.fixture
def parser(options):
    parser = OptionParser("build", on_diagnostic=lambda message: None)
    parser.add_options(*options.values())
    return parser


def test_value_of_and_is_set(parser, options):
    result = parser.parse(["-v", "--jobs=2", "build"])
    assert result.is_set(options["verbose"])
    assert result.is_set(options["jobs"])
    assert not result.is_set(options["out"])
    assert result.value_of(options["jobs"]) == 2


def test_value_of_flag_is_usage_error(parser, options):
    result = parser.parse(["-v"])
    with pytest.raises(UsageError):
        result.value_of(options["verbose"])


def test_value_of_unset_option_is_usage_error(parser, options):
    result = parser.parse([])
    with pytest.raises(UsageError):
        result.value_of(options["out"])


def test_unregistered_option_queries_are_usage_errors(parser):
    stranger = value_option("stranger").build()
    result = parser.parse([])
    with pytest.raises(UsageError):
        result.is_set(stranger)
    with pytest.raises(UsageError):
        result.value_of(stranger)


def test_get_and_contains(parser, options):
    result = parser.parse(["-v"])
    assert result.get(options["verbose"]) is True
    assert result.get(options["jobs"]) is None
    assert result.get(options["jobs"], 1) == 1
    assert options["verbose"] in result
    assert options["jobs"] not in result


def test_result_is_read_only(parser, options):
    result = parser.parse(["-v"])
    assert isinstance(result.options, MappingProxyType)
    with pytest.raises(TypeError):
        result.options[options["jobs"]] = 3
    with pytest.raises(AttributeError):
        result.subcommand = "build"
    assert isinstance(result.remainder, tuple)


def test_parse_is_idempotent(parser):
    args = ["-v", "--jobs=4", "--out=a.txt", "--unknown", "build", "x", "-y"]
    first = parser.parse(args)
    second = parser.parse(args)
    assert first == second
    assert first is not second
    assert first.remainder == ("x", "-y")


def test_parse_does_not_mutate_input(parser):
    args = ["-j", "4", "build"]
    parser.parse(args)
    assert args == ["-j", "4", "build"]


def test_results_with_different_values_differ(parser):
    assert parser.parse(["--jobs=1"]) != parser.parse(["--jobs=2"])


def test_construct_directly():
    verbose = flag("verbose").build()
    result = ParseResult(
        options={verbose: True},
        remainder=["a"],
        registered=frozenset({"verbose"}),
    )
    assert result.remainder == ("a",)
    assert result.is_set(verbose)
