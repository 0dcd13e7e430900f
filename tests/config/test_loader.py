"""Tests for config/loader.py module."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from treetrap.config.loader import _load_yaml, load_config
from treetrap.core.errors import ConfigError, ErrorCode


class TestLoadYaml:
    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("logging:\n  level: DEBUG\n")

        assert _load_yaml(yaml_file) == {"logging": {"level": "DEBUG"}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("logging:\n  level:\n    - invalid: [unclosed")

        with pytest.raises(ConfigError):
            _load_yaml(yaml_file)

    def test_rejects_non_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)

        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR


class TestLoadConfig:
    def test_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)

        config = load_config()

        assert config.extractor.link_invalid_nodes is True
        assert config.extractor.comment_header is True
        assert config.output.compression == "none"
        assert config.output.trap_dir == "trap"

    def test_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "treetrap.yaml"
        path.write_text("output:\n  compression: gzip\nextractor:\n  link_invalid_nodes: false\n")

        config = load_config(path)

        assert config.output.compression == "gzip"
        assert config.extractor.link_invalid_nodes is False

    def test_default_file_in_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "treetrap.yaml").write_text("output:\n  trap_dir: out\n")
        monkeypatch.chdir(tmp_path)

        assert load_config().output.trap_dir == "out"

    def test_env_overrides_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "treetrap.yaml"
        path.write_text("output:\n  trap_dir: from-yaml\n")

        with patch.dict(os.environ, {"TREETRAP__OUTPUT__TRAP_DIR": "from-env"}):
            config = load_config(path)

        assert config.output.trap_dir == "from-env"

    def test_kwargs_override_env(self, tmp_path: Path) -> None:
        path = tmp_path / "treetrap.yaml"
        path.write_text("")

        with patch.dict(os.environ, {"TREETRAP__LOGGING__LEVEL": "ERROR"}):
            config = load_config(path, logging={"level": "DEBUG"})

        assert config.logging.level == "DEBUG"

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "nope.yaml")

        assert exc_info.value.code == ErrorCode.CONFIG_FILE_NOT_FOUND

    def test_invalid_value(self, tmp_path: Path) -> None:
        path = tmp_path / "treetrap.yaml"
        path.write_text("output:\n  compression: brotli\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert "output" in exc_info.value.details["field"]
