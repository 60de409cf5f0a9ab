"""Tests for the manifest-backed module provider."""

from __future__ import annotations

from pathlib import Path

import pytest

from slnbridge.errors import ConfigError
from slnbridge.models import Module
from slnbridge.providers import ManifestModuleProvider


def test_reads_yaml_module_list(tmp_path: Path) -> None:
    manifest = tmp_path / "slnbridge.modules.yml"
    manifest.write_text(
        """
modules:
  - name: Game.Core
    source_files:
      - Assets/Core/Player.cs
      - Assets/Core/Enemy.cs
    defines: [UNITY_EDITOR, DEBUG]
    compiled_references:
      - /Applications/Unity/Managed/UnityEngine.dll
  - name: Game.UI
    source_files: [Assets/UI/Hud.cs]
    module_references: [Game.Core]
""",
        encoding="utf-8",
    )

    modules = ManifestModuleProvider(manifest).modules()

    assert modules == [
        Module(
            name="Game.Core",
            source_files=["Assets/Core/Player.cs", "Assets/Core/Enemy.cs"],
            defines=["UNITY_EDITOR", "DEBUG"],
            compiled_references=["/Applications/Unity/Managed/UnityEngine.dll"],
            module_references=[],
        ),
        Module(
            name="Game.UI",
            source_files=["Assets/UI/Hud.cs"],
            module_references=["Game.Core"],
        ),
    ]


def test_reads_json_top_level_list(tmp_path: Path) -> None:
    manifest = tmp_path / "modules.json"
    manifest.write_text('[{"name": "A"}, {"name": "B", "module_references": ["A"]}]', encoding="utf-8")

    modules = ManifestModuleProvider(manifest).modules()

    assert [module.name for module in modules] == ["A", "B"]
    assert modules[1].module_references == ["A"]


def test_empty_manifest_yields_no_modules(tmp_path: Path) -> None:
    manifest = tmp_path / "modules.yml"
    manifest.write_text("", encoding="utf-8")

    assert ManifestModuleProvider(manifest).modules() == []


def test_missing_manifest_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        ManifestModuleProvider(tmp_path / "absent.yml").modules()


def test_duplicate_names_are_rejected(tmp_path: Path) -> None:
    manifest = tmp_path / "modules.yml"
    manifest.write_text("- name: A\n- name: A\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        ManifestModuleProvider(manifest).modules()


def test_module_without_name_is_rejected(tmp_path: Path) -> None:
    manifest = tmp_path / "modules.yml"
    manifest.write_text("- source_files: [a.cs]\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        ManifestModuleProvider(manifest).modules()
