"""Configuration for pyfc.

Defaults for the comparison options and the path length limit can be
set in ``~/.config/pyfc/config.toml``::

    max_path = 260
    resync_lines = 2
    buffer_lines = 100
    chunk_size = 1048576
    binary_extensions = ["EXE", "COM", "SYS", "OBJ", "LIB", "BIN"]
    expand_tabs = 8

A missing file means all defaults.
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pyfc.compare.binary import DEFAULT_CHUNK_SIZE
from pyfc.compare.engine import BINARY_EXTENSIONS
from pyfc.core.paths import get_config_path
from pyfc.models.options import DEFAULT_BUFFER_LINES, DEFAULT_RESYNC_LINES, DEFAULT_TAB_SIZE
from pyfc.pathing.errors import MAX_PATH

logger = logging.getLogger(__name__)


class FcConfig(BaseModel):
    """User configuration for pyfc.

    Attributes:
        max_path: Maximum path length, terminator included.
        resync_lines: Default number of matching lines that end a block.
        buffer_lines: Default longest difference block before giving up.
        chunk_size: Bytes read per step in binary mode.
        binary_extensions: Extensions always compared in binary mode.
        expand_tabs: Tab stop width used when tabs are expanded.
    """

    model_config = ConfigDict(extra="forbid")

    max_path: Annotated[
        int,
        Field(ge=4, le=32767, description="Maximum path length (4-32767)"),
    ] = MAX_PATH
    resync_lines: Annotated[
        int,
        Field(ge=1, description="Matching lines needed to resync"),
    ] = DEFAULT_RESYNC_LINES
    buffer_lines: Annotated[
        int,
        Field(ge=1, description="Longest difference block in lines"),
    ] = DEFAULT_BUFFER_LINES
    chunk_size: Annotated[
        int,
        Field(ge=1, description="Binary read size in bytes"),
    ] = DEFAULT_CHUNK_SIZE
    binary_extensions: Annotated[
        tuple[str, ...],
        Field(description="Extensions compared in binary mode"),
    ] = BINARY_EXTENSIONS
    expand_tabs: Annotated[
        int,
        Field(ge=1, le=32, description="Tab stop width (1-32)"),
    ] = DEFAULT_TAB_SIZE

    @field_validator("binary_extensions", mode="before")
    @classmethod
    def strip_dots(cls, v: object) -> object:
        """Accept extensions written with a leading dot."""
        if isinstance(v, list | tuple):
            return tuple(str(ext).lstrip(".") for ext in v)
        return v


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> FcConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default path.

    Returns:
        Validated FcConfig; defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or the content doesn't
            match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return FcConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return FcConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e
