"""Console colors for comparison output.

The palette below can be overridden one color at a time from a
``[colors]`` table in ``~/.config/pyfc/theme.toml``::

    [colors]
    left = "#ff8800"
    right = "#0088ff"

A theme file that cannot be read or validated is ignored with a warning.
"""

import logging
import re
import tomllib
from functools import cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from pyfc.core.paths import get_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Palette used by the renderer.

    Attributes:
        header: "Comparing files" lines.
        caption: ``*****`` block captions.
        left: Lines taken from the first file.
        right: Lines taken from the second file.
        offset: Byte difference lines.
        muted: Abbreviation markers.
        info: Informational messages.
        success: "no differences encountered".
        warning: Size mismatches and resync failures.
        error: ``FC:`` errors.
    """

    model_config = ConfigDict(extra="forbid")

    header: str = "#69B9A1"
    caption: str = "#69B9A1"
    left: str = "#f5b332"
    right: str = "#0e8ac8"
    offset: str = "#ffffff"
    muted: str = "#b2bec3"
    info: str = "#0ec1c8"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"

    @field_validator("*", mode="before")
    @classmethod
    def check_hex(cls, v: object) -> str:
        """Accept only #RGB or #RRGGBB strings."""
        if not isinstance(v, str) or not _HEX_COLOR.fullmatch(v.strip()):
            msg = f"expected a #RGB or #RRGGBB color, got {v!r}"
            raise ValueError(msg)
        return v.strip()


def read_color_overrides(path: Path) -> dict[str, object]:
    """Read the ``[colors]`` table of a theme file.

    Returns:
        The table's entries; empty if the file is missing or unusable.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}
    return colors


def load_theme(path: Path | None = None) -> ThemeColors:
    """Build the palette from defaults and the user's overrides."""
    theme_path = path or get_theme_path()
    overrides = read_color_overrides(theme_path)
    if not overrides:
        return ThemeColors()

    try:
        return ThemeColors.model_validate(overrides)
    except ValidationError as e:
        logger.warning("Ignoring theme file %s: %s", theme_path, e)
        return ThemeColors()


def build_rich_theme(colors: ThemeColors) -> Theme:
    """Map the palette onto the style names used for printing."""
    styles = colors.model_dump()
    styles["caption"] = f"bold {colors.caption}"
    styles["error"] = f"bold {colors.error}"
    return Theme(styles)


@cache
def get_theme() -> Theme:
    """Rich theme for the shared consoles, loaded once."""
    return build_rich_theme(load_theme())
