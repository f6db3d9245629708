from uuid import UUID

from simpleopt import OptionParser, SubCommand, flag, value_option


def uuid_val(value: str) -> UUID:
    """Custom converter: a ValueError here surfaces as INVALID_VALUE."""
    return UUID(value)


parser = OptionParser(
    SubCommand("build", "Compile the project"),
    SubCommand("clean", "Remove build artifacts"),
    SubCommand("publish", "Upload a release"),
)

quiet = flag("quiet").description("Only print errors").build()
jobs = (
    value_option("jobs", "byte")
    .description("Number of parallel jobs", "N")
    .valid_for("build")
    .build()
)
release = (
    value_option("release", UUID)
    .converter(uuid_val)
    .description("Release identifier", "UUID")
    .valid_for("publish")
    .build()
)
parser.add_options(quiet, jobs, release)

if __name__ == "__main__":
    result = parser.parse_or_exit(header="usage: subcommands.py [OPTIONS] COMMAND")
    if result.subcommand is None:
        parser.render_help("usage: subcommands.py [OPTIONS] COMMAND")
    elif not result.is_set(quiet):
        print(f"Running {result.subcommand} with {dict(result.options)}")
        print("extra arguments:", list(result.remainder))
