"""Tests for config loading and dotted-key lookups."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from surfin.config.loader import ConfigError, get_config_value, load_config
from surfin.config.schema import CellWidthMode, SurfinConfig


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.layout.viewport_width == 80
        assert config.layout.graph_height == 8
        assert config.msw.api_key == "test-key"

    def test_unset_sections_use_defaults(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.server.port == 8080
        assert config.layout.cell_width == CellWidthMode.NARROW

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == SurfinConfig()

    def test_no_path_uses_defaults(self):
        assert load_config(None) == SurfinConfig()

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_values_rejected(self, tmp_path: Path):
        path = tmp_path / "bad.yaml"
        with open(path, "w") as f:
            yaml.dump({"layout": {"viewport_width": 5}}, f)
        with pytest.raises(ValidationError):
            load_config(path)

    def test_yaml_syntax_error(self, tmp_path: Path):
        path = tmp_path / "broken.yaml"
        path.write_text("layout: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            load_config(path)

    def test_non_mapping_document(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="Expected a mapping"):
            load_config(path)

    def test_fixtures_config(self, fixtures_dir: Path):
        config = load_config(fixtures_dir / "config_default.yaml")
        assert config.msw.max_retries == 3
        assert config.layout.to_layout().interior_width == 88


class TestGetConfigValue:
    def test_dotted_key(self):
        assert get_config_value(SurfinConfig(), "layout.viewport_width") == 90

    def test_top_level(self):
        val = get_config_value(SurfinConfig(), "server")
        assert val.host == "127.0.0.1"

    def test_invalid_key(self):
        with pytest.raises((KeyError, AttributeError)):
            get_config_value(SurfinConfig(), "nonexistent.key")
