import logging
import re
import sys
from typing import Annotated

import typer
from pydantic import ValidationError

from rsgen import __version__
from rsgen.core.charsets import charset_for
from rsgen.generate import generate_lines
from rsgen.options import GenerateOptions

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Generate random character strings.", add_completion=False
)

POSITIVE_VALUE_ERROR = "The argument value must be 1 or greater."
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def _parse_positive(value: str) -> int:
    """Parse a count/lines value. Raises typer.BadParameter unless >= 1."""
    if _UNSIGNED_RE.fullmatch(value) is None:
        raise typer.BadParameter(POSITIVE_VALUE_ERROR)
    parsed = int(value)
    if parsed < 1:
        raise typer.BadParameter(POSITIVE_VALUE_ERROR)
    return parsed


def _render_validation_error(err: ValidationError) -> str:
    first_error = err.errors(include_url=False)[0]
    message = first_error["msg"]
    return message.removeprefix("Value error, ")


def _stdout_is_terminal() -> bool:
    return sys.stdout.isatty()


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"rsgen {__version__}")
        raise typer.Exit()


@app.command()
def main(
    count: Annotated[
        str,
        typer.Option(
            "--count",
            "-c",
            help="The number of characters to output.",
            metavar="NUMBER_OF_CHARACTERS",
        ),
    ] = "8",
    lines: Annotated[
        str,
        typer.Option(
            "--lines",
            "-l",
            help="The number of lines to output.",
            metavar="NUMBER_OF_LINES",
        ),
    ] = "1",
    numeric: Annotated[
        bool,
        typer.Option(
            "--numeric", "-n", help="Restricts the output to be numeric."
        ),
    ] = False,
    printable_ascii: Annotated[
        bool,
        typer.Option(
            "--printable-ascii",
            "-p",
            help="Uses the printable ASCII characters without SPACE. "
            "(0x21-0x7E)",
        ),
    ] = False,
    printable_ascii_with_space: Annotated[
        bool,
        typer.Option(
            "--printable-ascii-with-space",
            "-P",
            help="Uses the printable ASCII characters WITH SPACE. (0x20-0x7E)",
        ),
    ] = False,
    fast: Annotated[
        bool,
        typer.Option(
            "--fast",
            "-f",
            help="Uses fast but NOT secure random number generating "
            "algorithm.",
        ),
    ] = False,
    only_upper_case: Annotated[
        bool,
        typer.Option(
            "--only-upper-case", help="Uses upper case letters only."
        ),
    ] = False,
    only_lower_case: Annotated[
        bool,
        typer.Option(
            "--only-lower-case", help="Uses lower case letters only."
        ),
    ] = False,
    only_latin_alphabet: Annotated[
        bool,
        typer.Option(
            "--only-latin-alphabet",
            help="Uses Latin alphabet letters without numeric figures.",
        ),
    ] = False,
    seed: Annotated[
        int | None,
        typer.Option("--seed", "-s", help="Seed for --fast (default: time)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit.",
        ),
    ] = False,
) -> None:
    """Generate random characters string(s)."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    try:
        number_of_characters = _parse_positive(count)
        number_of_lines = _parse_positive(lines)
    except typer.BadParameter as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err

    try:
        options = GenerateOptions(
            count=number_of_characters,
            lines=number_of_lines,
            numeric=numeric,
            printable_ascii=printable_ascii,
            printable_ascii_with_space=printable_ascii_with_space,
            only_upper_case=only_upper_case,
            only_lower_case=only_lower_case,
            only_latin_alphabet=only_latin_alphabet,
            fast=fast,
            seed=seed,
        )
    except ValidationError as err:
        typer.echo(f"Error: {_render_validation_error(err)}", err=True)
        raise typer.Exit(1) from err

    spec = options.charset_spec()
    logger.debug(
        "Resolved charset %s with %d symbols",
        spec.kind,
        len(charset_for(spec)),
    )
    source = options.make_source()

    # Piped output omits the newline after the last line.
    interactive = _stdout_is_terminal()
    last = options.lines - 1
    for i, line in enumerate(
        generate_lines(options.count, options.lines, spec, source)
    ):
        typer.echo(line, nl=interactive or i < last)


if __name__ == "__main__":
    app()
