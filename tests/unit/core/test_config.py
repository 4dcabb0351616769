"""Unit tests for configuration loading."""

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError
from pyfc.compare.engine import BINARY_EXTENSIONS
from pyfc.core.config import ConfigError, ConfigParseError, FcConfig, load_config
from pyfc.pathing.errors import MAX_PATH


class TestFcConfig:
    """Tests for FcConfig model."""

    def test_defaults(self) -> None:
        """Defaults match the built-in constants."""
        config = FcConfig()
        assert config.max_path == MAX_PATH
        assert config.resync_lines == 2
        assert config.buffer_lines == 100
        assert config.binary_extensions == BINARY_EXTENSIONS
        assert config.expand_tabs == 8

    def test_extension_dots_stripped(self) -> None:
        """Extensions may be written with a leading dot."""
        config = FcConfig(binary_extensions=[".dat", "IMG"])
        assert config.binary_extensions == ("dat", "IMG")

    def test_rejects_unknown_keys(self) -> None:
        """Unknown keys are an error."""
        with pytest.raises(ValidationError):
            FcConfig.model_validate({"colour": "red"})

    @pytest.mark.parametrize(
        ("field", "value"),
        [("max_path", 2), ("resync_lines", 0), ("buffer_lines", 0), ("expand_tabs", 64)],
    )
    def test_rejects_out_of_range(self, field: str, value: int) -> None:
        """Numeric settings are range-checked."""
        with pytest.raises(ValidationError):
            FcConfig.model_validate({field: value})


class TestLoadConfig:
    """Tests for load_config function."""

    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        """No config file means default settings."""
        assert load_config(tmp_path / "config.toml") == FcConfig()

    def test_default_path(self, tmp_path: Path) -> None:
        """Without an argument the XDG config path is read."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("resync_lines = 5\n")
        with patch("pyfc.core.config.get_config_path", return_value=config_file):
            assert load_config().resync_lines == 5

    def test_loads_values(self, tmp_path: Path) -> None:
        """Values in the file override the defaults."""
        config_file = tmp_path / "config.toml"
        config_file.write_text(
            'max_path = 1024\nbuffer_lines = 50\nbinary_extensions = ["DAT"]\n'
        )
        config = load_config(config_file)
        assert config.max_path == 1024
        assert config.buffer_lines == 50
        assert config.binary_extensions == ("DAT",)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Broken TOML raises ConfigParseError."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("max_path = [unclosed\n")
        with pytest.raises(ConfigParseError, match="Invalid TOML syntax"):
            load_config(config_file)

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Valid TOML with bad values raises ConfigError."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("resync_lines = 0\n")
        with pytest.raises(ConfigError, match="Invalid config content"):
            load_config(config_file)

    def test_parse_error_is_config_error(self) -> None:
        """ConfigParseError is a ConfigError."""
        assert issubclass(ConfigParseError, ConfigError)
