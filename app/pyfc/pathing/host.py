"""Conversion between host paths and the DOS form used by the algebra.

Command-line arguments enter as host paths and are rewritten with
backslash separators; paths leave the algebra through :func:`to_native`
before any filesystem call. On POSIX hosts ``/home/a`` becomes the
rooted DOS path ``\\home\\a`` and back again.
"""

import os

from pyfc.pathing.syntax import SEP


def to_dos(path: str, *, sep: str = os.sep, altsep: str | None = os.altsep) -> str:
    """Rewrite host separators as backslashes."""
    for host_sep in (sep, altsep):
        if host_sep and host_sep != SEP:
            path = path.replace(host_sep, SEP)
    return path


def to_native(path: str, *, sep: str = os.sep) -> str:
    """Rewrite backslashes as the host separator."""
    if sep == SEP:
        return path
    return path.replace(SEP, sep)
