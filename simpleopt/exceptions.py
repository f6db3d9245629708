# Simpleopt CLI Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by simpleopt.

Errors come in two tiers:

- Usage errors are programmer mistakes made while declaring or registering
  options (an empty option name, a value option without a converter, querying an
  option that was never registered). They are raised immediately, at definition
  or registration time, and are never deferred to parse time.
- Parse errors are caused by the argument vector being parsed. Each carries a
  `ParseErrorReason` and the offending option name or token, and aborts the whole
  `OptionParser.parse` call.

Exception Hierarchy:
- SimpleOptError
    ├── UsageError
    └── OptionParseError

Unknown options are deliberately not errors. The parser reports them as
diagnostics and keeps scanning.
"""
from __future__ import annotations

from enum import Enum


class ParseErrorReason(Enum):
    """
    Reason attached to every `OptionParseError`.

    Each member carries a message template; `{0}` is substituted with the
    offending option name, short-option chain or token.

    Members:
        DUPLICATE_OPTION: The same option was recognized twice in one parse call.
        MISSING_VALUE: A value option reached the end of input, or its `=value`
            suffix was absent or empty.
        ARG_GROUPING_CONFLICT: Two value options collided within one short-option
            chain.
        NO_MATCHING_SUBCOMMAND: The first non-option token does not name a
            declared subcommand.
        INVALID_VALUE: The option's converter rejected the raw value.
    """

    DUPLICATE_OPTION = "Option '{0}' is defined twice"
    MISSING_VALUE = "Option '{0}' requires an argument, but none is given"
    ARG_GROUPING_CONFLICT = (
        "Multiple options with required arguments defined in the same group '{0}'"
    )
    NO_MATCHING_SUBCOMMAND = "'{0}' is not a valid subcommand"
    INVALID_VALUE = "Invalid value for option '{0}'"

    def format(self, offender: str) -> str:
        """Render this reason's message for the given offender."""
        return self.value.replace("{0}", offender)


class SimpleOptError(Exception):
    """Base exception for simpleopt."""


class UsageError(SimpleOptError):
    """Raised when options are declared, registered or queried incorrectly."""


class OptionParseError(SimpleOptError):
    """
    Raised when an argument vector cannot be parsed unambiguously.

    Attributes:
        reason (ParseErrorReason): Why parsing failed.
        offender (str): The option name or token that caused the failure.
    """

    def __init__(
        self, reason: ParseErrorReason, offender: str, detail: str | None = None
    ) -> None:
        message = reason.format(offender)
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.reason = reason
        self.offender = offender
