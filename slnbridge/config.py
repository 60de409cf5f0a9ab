"""Configuration loading for slnbridge (.slnbridge.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigError

CONFIG_FILENAME = ".slnbridge.yml"
ENV_INSTALLATION_KEY = "SLNBRIDGE_EDITOR"

DEFAULT_EDITOR_NAME = "Antigravity"
DEFAULT_KNOWN_PATHS = (
    "/Applications/Antigravity.app",
    "/Applications/Antigravity.app/Contents/MacOS/Antigravity",
)
DEFAULT_EXECUTABLE_CANDIDATES = (
    "Contents/MacOS/Antigravity",
    "Contents/MacOS/Electron",
)
DEFAULT_BINARY_DIR = "Contents/MacOS"
DEFAULT_GOTO_FLAG = "-g"
DEFAULT_MODULES_MANIFEST = "slnbridge.modules.yml"


@dataclass
class EditorConfig:
    """External editor location and command-line conventions."""

    name: str = DEFAULT_EDITOR_NAME
    installation: Optional[str] = None
    known_paths: List[str] = field(default_factory=lambda: list(DEFAULT_KNOWN_PATHS))
    executable_candidates: List[str] = field(
        default_factory=lambda: list(DEFAULT_EXECUTABLE_CANDIDATES)
    )
    binary_dir: str = DEFAULT_BINARY_DIR
    goto_flag: str = DEFAULT_GOTO_FLAG
    new_window: bool = True


@dataclass
class GenerationConfig:
    """Descriptor rendering settings."""

    modules_manifest: str = DEFAULT_MODULES_MANIFEST
    target_framework: str = "v4.7.1"
    lang_version: str = "latest"
    no_warn: List[str] = field(default_factory=lambda: ["0169", "0649"])
    templates_dir: Optional[Path] = None


@dataclass
class ServiceConfig:
    """Bind address for service mode."""

    host: str = "127.0.0.1"
    port: int = 8765


@dataclass
class SlnBridgeConfig:
    """Represents the settings defined in .slnbridge.yml."""

    root: Path
    editor: EditorConfig = field(default_factory=EditorConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    service: ServiceConfig = field(default_factory=ServiceConfig)

    @property
    def modules_manifest_path(self) -> Path:
        return self.root / self.generation.modules_manifest


def load_config(config_path: Path) -> SlnBridgeConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    config = SlnBridgeConfig(root=root)
    if config_file.exists():
        data = _read_config(config_file)
        if not isinstance(data, dict):
            raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")
        _apply_editor(config.editor, _as_dict(data.get("editor")))
        _apply_generation(config.generation, _as_dict(data.get("generation")), root)
        _apply_service(config.service, _as_dict(data.get("service")))

    env_installation = os.environ.get(ENV_INSTALLATION_KEY)
    if env_installation:
        config.editor.installation = env_installation

    return config


def _apply_editor(editor: EditorConfig, data: Dict[str, Any]) -> None:
    if not data:
        return
    editor.name = _as_str(data.get("name")) or editor.name
    editor.installation = _as_str(data.get("installation")) or editor.installation
    if "known_paths" in data:
        editor.known_paths = _as_str_list(data.get("known_paths"))
    if "executable_candidates" in data:
        editor.executable_candidates = _as_str_list(data.get("executable_candidates"))
    editor.binary_dir = _as_str(data.get("binary_dir")) or editor.binary_dir
    if "goto_flag" in data:
        # An explicit null or empty string disables the flag entirely.
        editor.goto_flag = _as_str(data.get("goto_flag")) or ""
    new_window = _as_bool(data.get("new_window"))
    if new_window is not None:
        editor.new_window = new_window


def _apply_generation(generation: GenerationConfig, data: Dict[str, Any], root: Path) -> None:
    if not data:
        return
    generation.modules_manifest = (
        _as_str(data.get("modules_manifest")) or generation.modules_manifest
    )
    generation.target_framework = (
        _as_str(data.get("target_framework")) or generation.target_framework
    )
    generation.lang_version = _as_str(data.get("lang_version")) or generation.lang_version
    if "no_warn" in data:
        generation.no_warn = _as_str_list(data.get("no_warn"))
    templates_dir = _as_str(data.get("templates_dir"))
    if templates_dir:
        generation.templates_dir = root / templates_dir


def _apply_service(service: ServiceConfig, data: Dict[str, Any]) -> None:
    if not data:
        return
    service.host = _as_str(data.get("host")) or service.host
    port = _as_int(data.get("port"))
    if port is not None:
        service.port = port


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
