import pytest

from simpleopt import OptionParseError, OptionParser, ParseErrorReason, flag, value_option


def build_parser(*options):
    parser = OptionParser(on_diagnostic=lambda message: None)
    parser.add_options(*options)
    return parser


def test_short_chain_with_value_in_middle():
    a = flag("alpha").build()
    b = value_option("beta", int).build()
    c = flag("charlie").build()
    result = build_parser(a, b, c).parse(["-abc", "7", "rest"])
    assert result.options[a] is True
    assert result.options[c] is True
    assert result.value_of(b) == 7
    assert result.remainder == ("rest",)


def test_short_value_stores_converted_value():
    jobs = value_option("jobs", int).build()
    result = build_parser(jobs).parse(["-j", "4"])
    assert result.value_of(jobs) == 4


def test_short_value_token_starting_with_dash_is_still_a_value():
    offset = value_option("offset", int).build()
    result = build_parser(offset).parse(["-o", "-5"])
    assert result.value_of(offset) == -5


def test_two_value_options_in_one_chain_conflict():
    a = value_option("alpha").build()
    b = value_option("beta").build()
    with pytest.raises(OptionParseError) as excinfo:
        build_parser(a, b).parse(["-ab", "x", "y"])
    assert excinfo.value.reason is ParseErrorReason.ARG_GROUPING_CONFLICT
    assert excinfo.value.offender == "-ab"


def test_short_value_at_end_of_input_is_missing():
    a = flag("alpha").build()
    b = value_option("beta").build()
    with pytest.raises(OptionParseError) as excinfo:
        build_parser(a, b).parse(["-ab"])
    assert excinfo.value.reason is ParseErrorReason.MISSING_VALUE
    assert excinfo.value.offender == "beta"


def test_repeated_shorthand_in_chain_is_duplicate():
    verbose = flag("verbose").build()
    with pytest.raises(OptionParseError) as excinfo:
        build_parser(verbose).parse(["-vv"])
    assert excinfo.value.reason is ParseErrorReason.DUPLICATE_OPTION
    assert excinfo.value.offender == "verbose"


def test_unknown_short_option_continues_chain():
    a = flag("alpha").build()
    c = flag("charlie").build()
    warnings = []
    parser = OptionParser(on_diagnostic=warnings.append)
    parser.add_options(a, c)
    result = parser.parse(["-axc"])
    assert result.is_set(a)
    assert result.is_set(c)
    assert warnings == ["Unknown short option supplied: '-x'"]


def test_lone_dash_is_ignored():
    a = flag("alpha").build()
    result = build_parser(a).parse(["-", "file"])
    assert not result.is_set(a)
    assert result.remainder == ("file",)
    assert result.warnings == ()


def test_first_registered_option_keeps_shared_shorthand(caplog):
    verbose = flag("verbose").build()
    version = flag("version").build()
    parser = build_parser(verbose, version)
    assert "already used by 'verbose'" in caplog.text

    result = parser.parse(["-v", "--version"])
    assert result.is_set(verbose)
    assert result.is_set(version)


def test_short_value_conversion_failure():
    jobs = value_option("jobs", "byte").build()
    with pytest.raises(OptionParseError) as excinfo:
        build_parser(jobs).parse(["-j", "300"])
    assert excinfo.value.reason is ParseErrorReason.INVALID_VALUE


def test_chain_callbacks_fire_in_order():
    calls = []
    a = flag("alpha").when_set(lambda: calls.append("a")).build()
    b = value_option("beta").callback(calls.append).build()
    c = flag("charlie").when_set(lambda: calls.append("c")).build()
    build_parser(a, b, c).parse(["-abc", "value"])
    assert calls == ["a", "value", "c"]
