"""FC-style slash switches.

Besides its long options, the CLI accepts the classic switches mixed in
with the file arguments (``pyfc a.txt b.txt /N /C``). A token is taken as
a switch only if it spells one; anything else, including POSIX absolute
paths such as ``/tmp/a.txt``, is a file argument.
"""

import re
from dataclasses import replace

from pyfc.models.options import CompareOptions

SWITCH_PREFIX = "/"

# Plain switches and the option each one turns on.
FLAG_SWITCHES: dict[str, str] = {
    "/A": "abbreviate",
    "/B": "binary",
    "/C": "ignore_case",
    "/L": "text",
    "/N": "line_numbers",
    "/OFF": "offline",
    "/OFFLINE": "offline",
    "/T": "no_tab_expand",
    "/U": "unicode",
    "/W": "compress_whitespace",
    "/?": "show_help",
}

_BUFFER_SWITCH = re.compile(r"/LB(.*)", re.IGNORECASE | re.DOTALL)
_RESYNC_SWITCH = re.compile(r"/(\d.*)", re.DOTALL)


class SwitchError(Exception):
    """Raised when a switch is malformed or arguments are surplus."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid switch: {token}")


def is_switch(token: str) -> bool:
    """Check whether a command-line token is an FC switch.

    Args:
        token: Raw command-line token.

    Returns:
        True for known switches and for ``/LB...`` and ``/<digit>...``
        forms (which may still turn out malformed); False for anything
        containing a second ``/``.
    """
    if not token.startswith(SWITCH_PREFIX) or SWITCH_PREFIX in token[1:]:
        return False
    if token.upper() in FLAG_SWITCHES:
        return True
    return bool(_BUFFER_SWITCH.fullmatch(token) or _RESYNC_SWITCH.fullmatch(token))


def split_arguments(tokens: list[str]) -> tuple[list[str], list[str]]:
    """Separate file arguments from switches, keeping their order.

    Returns:
        Tuple of (files, switches).
    """
    files: list[str] = []
    switches: list[str] = []
    for token in tokens:
        (switches if is_switch(token) else files).append(token)
    return files, switches


def apply_switches(options: CompareOptions, switches: list[str]) -> CompareOptions:
    """Return options updated by a list of switches.

    Args:
        options: Starting options.
        switches: Tokens accepted by :func:`is_switch`.

    Returns:
        New CompareOptions with the switches applied.

    Raises:
        SwitchError: If a ``/LBn`` or ``/nnnn`` switch has a bad number.
    """
    changes: dict[str, object] = {}
    for switch in switches:
        flag = FLAG_SWITCHES.get(switch.upper())
        if flag is not None:
            changes[flag] = True
            continue

        buffer = _BUFFER_SWITCH.fullmatch(switch)
        if buffer is not None:
            changes["buffer_lines"] = _parse_count(buffer.group(1), switch)
            continue

        resync = _RESYNC_SWITCH.fullmatch(switch)
        if resync is not None:
            changes["resync_lines"] = _parse_count(resync.group(1), switch)
            continue

        raise SwitchError(switch)

    return replace(options, **changes)


def _parse_count(digits: str, switch: str) -> int:
    if not digits.isdigit() or not digits.isascii() or int(digits) < 1:
        raise SwitchError(switch)
    return int(digits)
