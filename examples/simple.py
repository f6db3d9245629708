from enum import Enum
from pathlib import Path

from simpleopt import OptionParser, flag, value_option
from simpleopt.utils import setup_logging

setup_logging(log_filename=None)


class Level(Enum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3


verbose = flag("verbose").description("Print more output").build()
dry_run = (
    flag("dry-run")
    .shorthand("n")
    .when_set(lambda: print("Dry run: nothing will be written"))
    .description("Only show what would happen")
    .build()
)
output = (
    value_option("output", Path)
    .description("Where to write the result", "FILE")
    .build()
)
level = (
    value_option("level", Level)
    .callback(lambda value: print(f"Level set to {value}"))
    .description("Compression level (low, medium, high)", "LEVEL")
    .build()
)

parser = OptionParser()
parser.add_options(verbose, dry_run, output, level)

# Entry point
if __name__ == "__main__":
    result = parser.parse_or_exit(header="usage: simple.py [OPTIONS] [FILES...]")
    if result.is_set(verbose):
        print(f"output={result.get(output)} level={result.get(level)}")
    print("files:", list(result.remainder))
