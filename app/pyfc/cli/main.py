"""Main CLI application entry point.

Defines the Typer application: one command that takes two file
arguments, mixed freely with FC-style slash switches.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from pyfc import __version__
from pyfc.cli.display import (
    print_byte_difference,
    print_comparing,
    print_diagnostic,
    print_fc_error,
    print_usage,
    render_result,
)
from pyfc.cli.switches import SwitchError, apply_switches, split_arguments
from pyfc.compare.engine import FileComparator
from pyfc.core.config import ConfigError, FcConfig, load_config
from pyfc.matching.matcher import WildcardMatcher
from pyfc.models.options import CompareOptions
from pyfc.models.outcome import MatchOutcome
from pyfc.pathing.errors import PathError
from pyfc.pathing.host import to_dos
from pyfc.utils.formatting import err_console, print_error

INVALID = MatchOutcome.INVALID.exit_code

app = typer.Typer(
    name="pyfc",
    help="Compare two files or sets of files and display the differences.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pyfc version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool, quiet: bool) -> None:
    """Send log records to stderr through Rich."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def build_options(config: FcConfig, **flags: bool | int | None) -> CompareOptions:
    """Build comparison options from config defaults and long options.

    Args:
        config: Loaded configuration.
        **flags: Long option values; None means "not given".

    Returns:
        CompareOptions with every given flag applied.
    """
    options = CompareOptions(
        buffer_lines=config.buffer_lines,
        resync_lines=config.resync_lines,
        tab_size=config.expand_tabs,
    )
    for name, value in flags.items():
        if value is not None and value is not False:
            setattr(options, name, value)
    return options


@app.command()
def compare(
    arguments: Annotated[
        list[str] | None,
        typer.Argument(
            help="FILE1 FILE2, optionally with wildcards, mixed with FC switches "
            "(/A /B /C /L /LBn /N /OFF /T /U /W /nnnn /?).",
            show_default=False,
        ),
    ] = None,
    abbreviate: Annotated[
        bool,
        typer.Option("--abbreviate", "-a", help="Show only first and last line of each block."),
    ] = False,
    binary: Annotated[
        bool,
        typer.Option("--binary", "-b", help="Compare byte by byte."),
    ] = False,
    ignore_case: Annotated[
        bool,
        typer.Option("--ignore-case", "-c", help="Disregard the case of letters."),
    ] = False,
    text: Annotated[
        bool,
        typer.Option("--text", "-l", help="Compare as text, even binary extensions."),
    ] = False,
    buffer_lines: Annotated[
        int | None,
        typer.Option("--buffer-lines", min=1, help="Longest difference block in lines."),
    ] = None,
    line_numbers: Annotated[
        bool,
        typer.Option("--line-numbers", "-n", help="Show line numbers."),
    ] = False,
    offline: Annotated[
        bool,
        typer.Option("--offline", help="Do not skip offline files."),
    ] = False,
    no_tab_expand: Annotated[
        bool,
        typer.Option("--no-tab-expand", "-t", help="Do not expand tabs to spaces."),
    ] = False,
    unicode: Annotated[
        bool,
        typer.Option("--unicode", "-u", help="Compare as UTF-16 text."),
    ] = False,
    compress_whitespace: Annotated[
        bool,
        typer.Option("--compress-whitespace", "-w", help="Compress runs of tabs and spaces."),
    ] = False,
    resync_lines: Annotated[
        int | None,
        typer.Option("--resync-lines", "-r", min=1, help="Matching lines needed to resync."),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Configuration file to use."),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every compared pair."),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only log errors."),
    ] = False,
) -> None:
    """Compare two files or sets of files and display the differences.

    Either file may contain * and ? wildcards. With one pattern, each
    match is compared against the other file; with two patterns, matches
    are paired in listing order.

    Exit codes: 0 identical, 1 different, 2 file not found, 255 invalid.

    Examples:
        pyfc old.txt new.txt            # Text comparison
        pyfc /B app.dat app.bak         # Binary comparison
        pyfc ref.txt "*.txt" /N         # One file against many
        pyfc "*.cpp" "*.h"              # Pair files by position
    """
    configure_logging(verbose, quiet)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=INVALID) from e

    files, switches = split_arguments(arguments or [])
    options = build_options(
        config,
        abbreviate=abbreviate,
        binary=binary,
        ignore_case=ignore_case,
        text=text,
        buffer_lines=buffer_lines,
        line_numbers=line_numbers,
        offline=offline,
        no_tab_expand=no_tab_expand,
        unicode=unicode,
        compress_whitespace=compress_whitespace,
        resync_lines=resync_lines,
    )
    try:
        options = apply_switches(options, switches)
        if len(files) > 2:
            raise SwitchError(files[2])
    except SwitchError as e:
        print_fc_error("Invalid Switch")
        raise typer.Exit(code=INVALID) from e

    if options.show_help:
        print_usage()
        raise typer.Exit(code=INVALID)

    if len(files) < 2:
        print_fc_error("Insufficient number of file specifications")
        raise typer.Exit(code=INVALID)

    comparator = FileComparator(
        options,
        binary_extensions=config.binary_extensions,
        chunk_size=config.chunk_size,
        on_difference=print_byte_difference,
    )

    def compare_pair(left: str, right: str) -> MatchOutcome:
        print_comparing(left, right)
        result = comparator.compare(left, right)
        render_result(result, options)
        return result.outcome

    matcher = WildcardMatcher(compare_pair, sink=print_diagnostic, max_path=config.max_path)
    try:
        outcome = matcher.run(to_dos(files[0]), to_dos(files[1]))
    except PathError as e:
        print_error(f"Path error: {e}")
        raise typer.Exit(code=INVALID) from e

    raise typer.Exit(code=outcome.exit_code)


if __name__ == "__main__":
    app()
