"""Rendering of comparison results in FC format.

Core modules return results as data; this module turns them into the
classic FC console output::

    Comparing files A.TXT and B.TXT
    ***** A.TXT
    line before
    changed line
    ***** B.TXT
    line before
    edited line
    *****

Messages about files go to stderr, comparison output to stdout.
"""

from rich.markup import escape

from pyfc.compare.binary import BinaryCompareResult, ByteDifference
from pyfc.compare.engine import FileCompareResult
from pyfc.compare.streams import CannotOpenError
from pyfc.compare.text import NumberedLine, TextCompareResult
from pyfc.matching.matcher import Diagnostic
from pyfc.models.options import CompareOptions
from pyfc.pathing.host import to_native
from pyfc.utils.formatting import console, err_console, print_plain

CAPTION = "*****"

USAGE = """\
Compares two files or sets of files and displays the differences between them.

pyfc [/A] [/C] [/L] [/LBn] [/N] [/OFF[LINE]] [/T] [/U] [/W] [/nnnn] [drive1:][path1]filename1 [drive2:][path2]filename2
pyfc /B [drive1:][path1]filename1 [drive2:][path2]filename2

  /A         Displays only first and last lines for each set of differences.
  /B         Performs a binary comparison.
  /C         Disregards the case of letters.
  /L         Compares files as ASCII text.
  /LBn       Sets the maximum consecutive mismatches to the specified number of lines (default 100).
  /N         Displays the line numbers on an ASCII comparison.
  /OFF[LINE] Does not skip files with offline attribute set.
  /T         Does not expand tabs to spaces.
  /U         Compare files as UNICODE text files.
  /W         Compresses white space (tabs and spaces) for comparison.
  /nnnn      Specifies the number of consecutive lines that must match after a mismatch (default 2).
  [drive1:][path1]filename1
             Specifies the first file or set of files to compare.
  [drive2:][path2]filename2
             Specifies the second file or set of files to compare.
"""


def print_fc_error(message: str) -> None:
    """Print an ``FC:`` message on stderr."""
    err_console.print(f"[error]FC:[/] {escape(message)}", soft_wrap=True)


def print_fc_notice(message: str) -> None:
    """Print an ``FC:`` message on stdout."""
    console.print(f"[warning]FC:[/] {escape(message)}", soft_wrap=True)


def print_cannot_open(path: str) -> None:
    """Report a file or pattern that cannot be opened."""
    print_fc_error(f"cannot open {to_native(path)} - No such file or folder")


def print_diagnostic(diagnostic: Diagnostic) -> None:
    """Report a matcher diagnostic."""
    print_cannot_open(diagnostic.missing)


def print_usage() -> None:
    """Print the FC usage text."""
    print_plain(USAGE)


def print_no_difference() -> None:
    """Print the message for identical files."""
    console.print("[success]FC: no differences encountered[/]")


def print_comparing(left: str, right: str) -> None:
    """Print the header line that opens the output for one pair."""
    console.print(
        f"[header]Comparing files {escape(to_native(left))} and {escape(to_native(right))}[/]",
        soft_wrap=True,
    )


def print_byte_difference(difference: ByteDifference, wide: bool) -> None:
    """Print one differing byte as ``OFFSET: LL RR``."""
    width = 16 if wide else 8
    print_plain(
        f"{difference.offset:0{width}X}: {difference.left:02X} {difference.right:02X}",
        style="offset",
    )


def render_result(result: FileCompareResult, options: CompareOptions) -> None:
    """Print the output for one compared pair below its header.

    Byte differences of a binary comparison have already been printed
    by :func:`print_byte_difference` while the files were read.

    Args:
        result: Comparison result to render.
        options: Options the comparison ran with (/N, /A).
    """
    left, right = to_native(result.left), to_native(result.right)

    if result.error is not None:
        if isinstance(result.error, CannotOpenError):
            print_cannot_open(result.error.path)
        else:
            print_fc_error(f"cannot read from {to_native(result.error.path)}")
    elif result.same_file:
        print_no_difference()
    elif result.binary is not None:
        _render_binary(result.binary, left, right)
    elif result.text is not None:
        _render_text(result.text, left, right, options)

    console.print()


def _render_binary(result: BinaryCompareResult, left: str, right: str) -> None:
    if result.right_is_longer:
        print_fc_notice(f"{right} longer than {left}")
    elif result.left_is_longer:
        print_fc_notice(f"{left} longer than {right}")
    elif not result.difference_count:
        print_no_difference()


def _render_text(result: TextCompareResult, left: str, right: str, options: CompareOptions) -> None:
    for block in result.blocks:
        print_plain(f"{CAPTION} {left}", style="caption")
        _render_lines(block.left, options, style="left")
        print_plain(f"{CAPTION} {right}", style="caption")
        _render_lines(block.right, options, style="right")
        print_plain(CAPTION, style="caption")
        console.print()

    if result.resync_failed:
        console.print("[warning]Resync Failed.  Files are too different.[/]")
    elif not result.blocks:
        print_no_difference()


def _render_lines(lines: tuple[NumberedLine, ...], options: CompareOptions, style: str) -> None:
    if options.abbreviate and len(lines) > 2:
        shown: list[NumberedLine | None] = [lines[0], None, lines[-1]]
    else:
        shown = list(lines)

    for line in shown:
        if line is None:
            print_plain("...", style="muted")
        elif options.line_numbers:
            print_plain(f"{line.number:5d}:  {line.text}", style=style)
        else:
            print_plain(line.text, style=style)
