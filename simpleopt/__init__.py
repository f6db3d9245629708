"""
Simpleopt CLI Option Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .builder import FlagOptionBuilder, ValueOptionBuilder, flag, value_option
from .converters import ConverterRegistry, default_registry, enum_converter
from .exceptions import OptionParseError, ParseErrorReason, SimpleOptError, UsageError
from .formatter import HelpFormatter
from .logger import logger
from .option import Option, OptionDescription, OptionMode
from .parser import OptionParser
from .result import ParseResult
from .subcommand import SubCommand, SubCommandTable

__all__ = [
    "ConverterRegistry",
    "FlagOptionBuilder",
    "HelpFormatter",
    "Option",
    "OptionDescription",
    "OptionMode",
    "OptionParseError",
    "OptionParser",
    "ParseErrorReason",
    "ParseResult",
    "SimpleOptError",
    "SubCommand",
    "SubCommandTable",
    "UsageError",
    "ValueOptionBuilder",
    "default_registry",
    "enum_converter",
    "flag",
    "logger",
    "value_option",
]
