"""Tests for slnbridge.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from slnbridge.config import (
    DEFAULT_EXECUTABLE_CANDIDATES,
    DEFAULT_KNOWN_PATHS,
    ENV_INSTALLATION_KEY,
    SlnBridgeConfig,
    load_config,
)
from slnbridge.errors import ConfigError


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch) -> None:
    monkeypatch.delenv(ENV_INSTALLATION_KEY, raising=False)


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, SlnBridgeConfig)
    assert config.root == tmp_path.resolve()
    assert config.editor.name == "Antigravity"
    assert config.editor.installation is None
    assert config.editor.known_paths == list(DEFAULT_KNOWN_PATHS)
    assert config.editor.executable_candidates == list(DEFAULT_EXECUTABLE_CANDIDATES)
    assert config.editor.goto_flag == "-g"
    assert config.generation.target_framework == "v4.7.1"
    assert config.generation.no_warn == ["0169", "0649"]
    assert config.generation.templates_dir is None
    assert config.modules_manifest_path == tmp_path.resolve() / "slnbridge.modules.yml"
    assert config.service.port == 8765


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".slnbridge.yml"
    config_file.write_text(
        """
editor:
  name: Antigravity
  installation: /opt/Antigravity/antigravity
  known_paths:
    - /opt/Antigravity/antigravity
  executable_candidates: [bin/antigravity]
  binary_dir: bin
  goto_flag: "--goto"
  new_window: false
generation:
  modules_manifest: build/modules.json
  target_framework: v4.8
  lang_version: "9.0"
  no_warn: ["0169"]
  templates_dir: templates
service:
  host: 0.0.0.0
  port: 9000
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.editor.installation == "/opt/Antigravity/antigravity"
    assert config.editor.known_paths == ["/opt/Antigravity/antigravity"]
    assert config.editor.executable_candidates == ["bin/antigravity"]
    assert config.editor.binary_dir == "bin"
    assert config.editor.goto_flag == "--goto"
    assert config.editor.new_window is False
    assert config.generation.target_framework == "v4.8"
    assert config.generation.lang_version == "9.0"
    assert config.generation.no_warn == ["0169"]
    assert config.generation.templates_dir == tmp_path.resolve() / "templates"
    assert config.modules_manifest_path == tmp_path.resolve() / "build" / "modules.json"
    assert config.service.host == "0.0.0.0"
    assert config.service.port == 9000


def test_null_goto_flag_disables_flag(tmp_path: Path) -> None:
    (tmp_path / ".slnbridge.yml").write_text("editor:\n  goto_flag: null\n", encoding="utf-8")

    assert load_config(tmp_path).editor.goto_flag == ""


def test_environment_overrides_installation(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / ".slnbridge.yml").write_text("editor:\n  installation: /a\n", encoding="utf-8")
    monkeypatch.setenv(ENV_INSTALLATION_KEY, "/b")

    assert load_config(tmp_path).editor.installation == "/b"


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".slnbridge.yml").write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_reports_yaml_errors(tmp_path: Path) -> None:
    (tmp_path / ".slnbridge.yml").write_text("editor: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)
