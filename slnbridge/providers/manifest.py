"""Module set provider backed by a YAML/JSON manifest written by the host."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Set

import yaml

from ..errors import ConfigError
from ..logging import get_logger
from ..models import Module
from .base import ModuleSetProvider


class ManifestModuleProvider(ModuleSetProvider):
    """Reads the module set from ``path`` on every call.

    The manifest is either a list of module mappings or a mapping with a
    ``modules`` key holding that list. JSON manifests parse as YAML.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self.logger = get_logger("providers.manifest")

    def modules(self) -> List[Module]:
        if not self.path.exists():
            raise FileNotFoundError(f"Module manifest not found: {self.path}")
        try:
            data = yaml.safe_load(self.path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ConfigError(f"Failed to parse {self.path.name}: {exc}") from exc

        if isinstance(data, dict):
            data = data.get("modules")
        if data is None:
            return []
        if not isinstance(data, list):
            raise ConfigError(f"{self.path.name} must contain a list of modules")

        modules: List[Module] = []
        seen: Set[str] = set()
        for index, entry in enumerate(data):
            module = _module_from_dict(entry, index, self.path.name)
            if module.name in seen:
                raise ConfigError(f"Duplicate module name '{module.name}' in {self.path.name}")
            seen.add(module.name)
            modules.append(module)
        self.logger.debug("Loaded %d module(s) from %s", len(modules), self.path)
        return modules


def _module_from_dict(entry: Any, index: int, source: str) -> Module:
    if not isinstance(entry, dict):
        raise ConfigError(f"Module #{index} in {source} must be a mapping")
    name = entry.get("name")
    if not isinstance(name, str):
        raise ConfigError(f"Module #{index} in {source} is missing a string 'name'")
    return Module(
        name=name,
        source_files=_str_list(entry, "source_files"),
        defines=_str_list(entry, "defines"),
        compiled_references=_str_list(entry, "compiled_references"),
        module_references=_str_list(entry, "module_references"),
    )


def _str_list(entry: Dict[str, Any], key: str) -> List[str]:
    value = entry.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [str(item) for item in value if item is not None]
    raise ConfigError(f"Field '{key}' of module '{entry.get('name')}' must be a list")
