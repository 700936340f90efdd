"""
Unit tests for run configuration.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from rpad.config import DEFAULT_PADDING, RpadConfig, parse_padding


class TestRpadConfig:
    """Test defaults and environment overrides."""

    def test_defaults(self):
        config = RpadConfig.from_env({})
        assert config.default_padding == DEFAULT_PADDING == 30
        assert config.output_dir == Path.home()
        assert config.log_level == "INFO"

    def test_env_overrides(self, tmp_path):
        config = RpadConfig.from_env({
            "RPAD_PADDING": "12",
            "RPAD_OUTPUT_DIR": str(tmp_path),
            "RPAD_LOG_LEVEL": "debug",
        })
        assert config.default_padding == 12
        assert config.output_dir == tmp_path
        assert config.log_level == "DEBUG"

    def test_bad_env_padding(self):
        with pytest.raises(ValueError):
            RpadConfig.from_env({"RPAD_PADDING": "wide"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("RPAD_PADDING", "7")
        assert RpadConfig.from_env().default_padding == 7


class TestParsePadding:
    """Test padding argument parsing."""

    def test_valid(self):
        assert parse_padding("0") == 0
        assert parse_padding("30") == 30
        assert parse_padding("+5") == 5
        assert parse_padding("4294967295") == 2**32 - 1

    @pytest.mark.parametrize("value", [
        "-1", "3.5", "abc", "", "1_0", " 7", "7\n", "\u0667", "4294967296", "99999999999",
    ])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_padding(value)
