"""
Unit tests for the configuration system.
"""

import json

import pytest
from unittest.mock import patch

from subcrate.utils.config import (
    SubcrateConfig,
    get_config,
    load_config,
    set_config,
)
from subcrate.utils.constants import PackageKind
from subcrate.utils.exceptions import ConfigError


class TestDefaults:
    """Test default configuration values."""

    def test_defaults_without_file(self, tmp_path):
        config = SubcrateConfig(str(tmp_path / "nope.json"))
        assert config.naming.delimiter == "/"
        assert config.naming.max_depth == 1
        assert config.scaffold.default_kind == "bin"
        assert config.package_kind is PackageKind.BIN
        assert config.scaffold.strict is False
        assert config.logging.level == "WARNING"

    def test_global_config(self, default_config):
        assert get_config() is default_config

    def test_reset_global_config(self, tmp_path):
        set_config(None)
        with patch.dict("os.environ", {"SUBCRATE_CONFIG": str(tmp_path / "nope.yaml")}):
            config = get_config()
        assert config.config_file == tmp_path / "nope.yaml"
        assert get_config() is config


class TestLoading:
    """Test loading JSON and YAML files."""

    def test_yaml(self, write_config):
        path = write_config(
            "naming:\n"
            "  delimiter: '::'\n"
            "  max_depth: 3\n"
            "scaffold:\n"
            "  default_kind: lib\n"
            "  strict: true\n"
            "  edition: 2021\n"
            "logging:\n"
            "  level: DEBUG\n"
        )
        config = load_config(str(path))
        assert config.naming.delimiter == "::"
        assert config.naming.max_depth == 3
        assert config.package_kind is PackageKind.LIB
        assert config.scaffold.strict is True
        assert config.scaffold.edition == "2021"
        assert config.logging.level == "DEBUG"

    def test_json(self, write_config):
        path = write_config(json.dumps({"naming": {"max_depth": 0}}), "subcrate_config.json")
        assert load_config(str(path)).naming.max_depth == 0

    def test_empty_yaml(self, write_config):
        config = load_config(str(write_config("")))
        assert config.naming.max_depth == 1

    def test_null_depth_is_unbounded(self, write_config):
        config = load_config(str(write_config("naming:\n  max_depth: null\n")))
        assert config.naming.max_depth is None

    @pytest.mark.parametrize("content", [
        "naming:\n  max_depth: deep\n",
        "naming:\n  max_depth: -1\n",
        "naming:\n  delimiter: ''\n",
        "scaffold:\n  default_kind: app\n",
        "- just\n- a list\n",
        "naming: [unclosed\n",
    ])
    def test_invalid_values(self, write_config, content):
        with pytest.raises(ConfigError):
            load_config(str(write_config(content)))

    def test_invalid_json(self, write_config):
        with pytest.raises(ConfigError):
            load_config(str(write_config("{not json", "subcrate_config.json")))


class TestEnvironmentOverrides:
    """Test environment variable overrides."""

    def test_max_depth_override(self, tmp_path):
        with patch.dict("os.environ", {"SUBCRATE_MAX_DEPTH": "4"}):
            config = SubcrateConfig(str(tmp_path / "nope.json"))
        assert config.naming.max_depth == 4

    def test_unbounded_override(self, tmp_path):
        with patch.dict("os.environ", {"SUBCRATE_MAX_DEPTH": "none"}):
            config = SubcrateConfig(str(tmp_path / "nope.json"))
        assert config.naming.max_depth is None

    def test_strict_override(self, tmp_path):
        with patch.dict("os.environ", {"SUBCRATE_STRICT": "yes"}):
            config = SubcrateConfig(str(tmp_path / "nope.json"))
        assert config.scaffold.strict is True


class TestSaveConfig:
    """Test writing configuration back to disk."""

    @pytest.mark.parametrize("file_name", ["saved.json", "saved.yaml"])
    def test_round_trip(self, tmp_path, file_name):
        path = tmp_path / file_name
        config = SubcrateConfig(str(path))
        config.naming.max_depth = 2
        config.scaffold.default_kind = "lib"
        config.save_config()

        reloaded = load_config(str(path))
        assert reloaded.naming.max_depth == 2
        assert reloaded.package_kind is PackageKind.LIB

    def test_to_dict(self, default_config):
        data = default_config.to_dict()
        assert data["naming"] == {"delimiter": "/", "max_depth": 1}
        assert set(data) == {"naming", "scaffold", "logging"}
