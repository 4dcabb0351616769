"""Comparison options.

Each field corresponds to one FC switch; the CLI fills it from long
options, FC-style slash switches, and the configuration file.
"""

from dataclasses import dataclass

DEFAULT_BUFFER_LINES = 100
DEFAULT_RESYNC_LINES = 2
DEFAULT_TAB_SIZE = 8


@dataclass(slots=True)
class CompareOptions:
    """Options controlling how a pair of files is compared.

    Attributes:
        abbreviate: /A - show only the first and last line of each block.
        binary: /B - compare byte by byte.
        ignore_case: /C - fold case when comparing lines.
        text: /L - compare as text even for binary extensions.
        buffer_lines: /LBn - longest difference block before giving up.
        line_numbers: /N - show line numbers.
        offline: /OFF[LINE] - do not skip offline files (no effect here).
        no_tab_expand: /T - keep tabs instead of expanding them.
        unicode: /U - compare as UTF-16 text.
        compress_whitespace: /W - treat whitespace runs as one space.
        resync_lines: /nnnn - matching lines needed to end a block.
        show_help: /? - print usage instead of comparing.
        tab_size: Columns per tab stop when tabs are expanded.
    """

    abbreviate: bool = False
    binary: bool = False
    ignore_case: bool = False
    text: bool = False
    buffer_lines: int = DEFAULT_BUFFER_LINES
    line_numbers: bool = False
    offline: bool = False
    no_tab_expand: bool = False
    unicode: bool = False
    compress_whitespace: bool = False
    resync_lines: int = DEFAULT_RESYNC_LINES
    show_help: bool = False
    tab_size: int = DEFAULT_TAB_SIZE

    def __post_init__(self) -> None:
        """Validate numeric options after initialization."""
        if self.buffer_lines < 1:
            msg = f"Buffer lines must be positive, got {self.buffer_lines}"
            raise ValueError(msg)
        if self.resync_lines < 1:
            msg = f"Resync lines must be positive, got {self.resync_lines}"
            raise ValueError(msg)

    @property
    def force_binary(self) -> bool:
        """Check if binary mode is requested and not overridden by /L."""
        return self.binary and not self.text
