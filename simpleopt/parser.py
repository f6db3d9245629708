# Simpleopt CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `OptionParser`, the engine that turns an argument vector
into a `ParseResult`.

Options are declared up front (see `simpleopt.builder`) and registered with
`add_options()`. `parse()` then walks the arguments left to right:

- `--name` sets a flag, `--name=value` sets a value option. The long name may be
  followed by more text only when it is a value option followed by `=`.
- `-abc` is a chain of shorthands. At most one option in a chain may take a value;
  that value is the whole next argument.
- The first argument not starting with `-` ends option scanning. If subcommands
  were declared it must name one of them. Every argument after it is passed
  through untouched as the remainder.

After scanning, options whose validity predicate rejects the matched subcommand
are dropped with a diagnostic.

Unknown options never abort a parse. They are reported through the diagnostic
collaborator (by default printed to the console), logged, and collected in
`ParseResult.warnings`. Everything else that goes wrong while parsing raises
`OptionParseError`; mistakes in declaring options raise `UsageError`.

Example Usage:
    parser = OptionParser(("build", "Compile"), ("clean", "Remove artifacts"))
    verbose = flag("verbose").build()
    jobs = value_option("jobs", int).build()
    parser.add_options(verbose, jobs)

    result = parser.parse(["-v", "--jobs=4", "build", "--release"])
    # result.is_set(verbose) is True
    # result.value_of(jobs) == 4
    # result.subcommand == "build"
    # result.remainder == ("--release",)
"""
from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, NoReturn, Sequence

from rich.console import Console
from rich.markup import escape

from simpleopt.console import console as default_console
from simpleopt.exceptions import OptionParseError, ParseErrorReason, UsageError
from simpleopt.formatter import HelpFormatter
from simpleopt.logger import logger
from simpleopt.option import Option
from simpleopt.result import ParseResult
from simpleopt.subcommand import SubCommandLike, SubCommandTable


class OptionParser:
    """
    Parses command-line arguments against registered options.

    Args:
        *subcommands: Known subcommands, as `SubCommand`, `(name, description)`
            pairs or bare names. Without any, no subcommand matching is done.
        console (Console | None): Console for diagnostics and help output.
        on_diagnostic (Callable[[str], None] | None): Receives each non-fatal
            diagnostic. Defaults to printing it on the console.
    """

    def __init__(
        self,
        *subcommands: SubCommandLike,
        console: Console | None = None,
        on_diagnostic: Callable[[str], None] | None = None,
    ) -> None:
        self.console: Console = console or default_console
        self.subcommands: SubCommandTable = SubCommandTable(subcommands)
        self._options: dict[str, Option] = {}
        self._shorthands: dict[str, Option] = {}
        self._on_diagnostic: Callable[[str], None] = (
            on_diagnostic or self._print_diagnostic
        )

    @property
    def options(self) -> list[Option]:
        """Registered options in registration order."""
        return list(self._options.values())

    def add_options(self, *options: Option) -> None:
        """
        Register options with the parser.

        Raises:
            UsageError: If a value option has no converter, or a different option
                with the same name is already registered.
        """
        for option in options:
            if not isinstance(option, Option):
                raise UsageError(f"Expected an Option, got {option!r}")
            if option.takes_value and option.converter is None:
                raise UsageError(f"Option {option.name} has no value converter")
            existing = self._options.get(option.name)
            if existing is not None:
                if existing is option:
                    continue
                raise UsageError(f"Option '{option.name}' is already registered")
            shadowing = self._shorthands.get(option.shorthand)
            if shadowing is not None:
                logger.warning(
                    "Shorthand '-%s' of option '%s' is already used by '%s'.",
                    option.shorthand,
                    option.name,
                    shadowing.name,
                )
            else:
                self._shorthands[option.shorthand] = option
            self._options[option.name] = option
            logger.debug("Registered option %r", option)

    def get_option(self, name: str) -> Option | None:
        return self._options.get(name)

    def _print_diagnostic(self, message: str) -> None:
        # One line per diagnostic, with the user's token printed as typed.
        self.console.print(
            message, markup=False, emoji=False, highlight=False, soft_wrap=True
        )

    def _report(self, message: str, warnings: list[str]) -> None:
        logger.debug(message)
        warnings.append(message)
        self._on_diagnostic(message)

    def _convert(self, option: Option, raw: str) -> Any:
        assert option.converter is not None, "value options always have a converter"
        try:
            return option.converter(raw)
        except (ValueError, TypeError) as error:
            raise OptionParseError(
                ParseErrorReason.INVALID_VALUE, option.name, str(error)
            ) from error

    def _store(
        self, option: Option, result: dict[Option, Any], raw: str | None = None
    ) -> None:
        """Convert the value (if any), fire callbacks and record the option."""
        if option.takes_value:
            value = self._convert(option, raw)  # type: ignore[arg-type]
            result[option] = value
            if option.value_callback is not None:
                option.value_callback(value)
        else:
            result[option] = True
        if option.callback is not None:
            option.callback()

    def _match_long(self, text: str) -> Option | None:
        """
        Find the option named by the text after `--`.

        A flag must match exactly. A value option matches when its name is a
        prefix of the text; one followed by `=` is preferred, otherwise the
        longest prefix wins.
        """
        exact = self._options.get(text)
        if exact is not None and not exact.takes_value:
            return exact
        candidates = sorted(
            (
                option
                for option in self._options.values()
                if option.takes_value and text.startswith(option.name)
            ),
            key=lambda option: len(option.name),
            reverse=True,
        )
        for option in candidates:
            if text[len(option.name) :].startswith("="):
                return option
        return candidates[0] if candidates else None

    def _handle_long(
        self, token: str, result: dict[Option, Any], warnings: list[str]
    ) -> None:
        text = token[2:]
        option = self._match_long(text)
        if option is None:
            self._report(f"Unknown long option supplied: '{token}'", warnings)
            return
        if option.takes_value:
            suffix = text[len(option.name) :]
            if not suffix.startswith("=") or len(suffix) == 1:
                raise OptionParseError(ParseErrorReason.MISSING_VALUE, option.name)
            if option in result:
                raise OptionParseError(ParseErrorReason.DUPLICATE_OPTION, option.name)
            self._store(option, result, suffix[1:])
        else:
            if option in result:
                raise OptionParseError(ParseErrorReason.DUPLICATE_OPTION, option.name)
            self._store(option, result)

    def _handle_short_chain(
        self,
        args: Sequence[str],
        i: int,
        result: dict[Option, Any],
        warnings: list[str],
    ) -> int:
        """Handle a `-abc` chain at index `i` and return the next index to read."""
        token = args[i]
        value_matched = False
        for char in token[1:]:
            option = self._shorthands.get(char)
            if option is None:
                self._report(f"Unknown short option supplied: '-{char}'", warnings)
                continue
            if option in result:
                raise OptionParseError(ParseErrorReason.DUPLICATE_OPTION, option.name)
            if option.takes_value:
                if value_matched:
                    raise OptionParseError(
                        ParseErrorReason.ARG_GROUPING_CONFLICT, token
                    )
                if i + 1 >= len(args):
                    raise OptionParseError(ParseErrorReason.MISSING_VALUE, option.name)
                i += 1
                self._store(option, result, args[i])
                value_matched = True
            else:
                self._store(option, result)
        return i + 1

    def _apply_validity(
        self,
        result: dict[Option, Any],
        subcommand: str | None,
        warnings: list[str],
    ) -> None:
        for option in list(result):
            if option.is_valid_for(subcommand):
                continue
            del result[option]
            if subcommand is None:
                message = f"Option '--{option.name}' requires a subcommand"
            else:
                message = (
                    f"Option '--{option.name}' is not valid for subcommand "
                    f"'{subcommand}'"
                )
            self._report(message, warnings)

    def parse(self, args: Sequence[str] | None = None) -> ParseResult:
        """
        Parse an argument vector.

        Args:
            args (Sequence[str] | None): Arguments without the program name.
                Defaults to `sys.argv[1:]`.

        Returns:
            ParseResult: Set options, matched subcommand and remainder.

        Raises:
            OptionParseError: On duplicate options, missing values, grouping
                conflicts, unknown subcommands or values the converter rejects.
        """
        if args is None:
            args = sys.argv[1:]
        args = list(args)

        result: dict[Option, Any] = {}
        warnings: list[str] = []
        remainder: list[str] = []
        subcommand: str | None = None

        i = 0
        while i < len(args):
            token = args[i]
            if token.startswith("--"):
                self._handle_long(token, result, warnings)
                i += 1
            elif token.startswith("-"):
                i = self._handle_short_chain(args, i, result, warnings)
            else:
                if self.subcommands:
                    if token not in self.subcommands:
                        raise OptionParseError(
                            ParseErrorReason.NO_MATCHING_SUBCOMMAND, token
                        )
                    subcommand = token
                    i += 1
                remainder = args[i:]
                break

        self._apply_validity(result, subcommand, warnings)
        logger.debug(
            "Parsed %d option(s), subcommand=%r, %d remaining argument(s).",
            len(result),
            subcommand,
            len(remainder),
        )
        return ParseResult(
            options=result,
            subcommand=subcommand,
            remainder=tuple(remainder),
            warnings=tuple(warnings),
            registered=frozenset(self._options),
        )

    def parse_or_exit(
        self, args: Sequence[str] | None = None, header: str | None = None
    ) -> ParseResult:
        """
        Parse arguments, printing the error and help and exiting on failure.

        Intended for program entry points that do not handle `OptionParseError`
        themselves.
        """
        try:
            return self.parse(args)
        except OptionParseError as error:
            self.exit_with_error(error, header)

    def exit_with_error(
        self, error: OptionParseError, header: str | None = None
    ) -> NoReturn:
        logger.debug("Parse failed: %s (%s)", error, error.reason.name)
        self.console.print(
            f"[bold red]❌ {escape(str(error))}[/]", emoji=False, soft_wrap=True
        )
        self.render_help(header)
        sys.exit(1)

    def help_formatter(self, width: int | None = None) -> HelpFormatter:
        return HelpFormatter(
            self._options.values(), self.subcommands, width=width, console=self.console
        )

    def format_help(self, header: str | None = None, width: int | None = None) -> str:
        """Return the help text for all options and subcommands."""
        return self.help_formatter(width).format(header)

    def render_help(self, header: str | None = None) -> None:
        """Print the help text using Rich output."""
        self.help_formatter().render(header)

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options.values())

    def __len__(self) -> int:
        return len(self._options)

    def __str__(self) -> str:
        values = sum(option.takes_value for option in self._options.values())
        return (
            f"OptionParser(options={len(self._options)}, values={values}, "
            f"subcommands={self.subcommands.names})"
        )

    def __repr__(self) -> str:
        return str(self)
