"""Helper utilities for constructing throwaway module sets in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Iterable, List

from slnbridge.models import Module


class ModuleSetBuilder:
    """Collects modules and writes project files under a temporary root."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "Game"
        self.root.mkdir()
        self._modules: List[Module] = []

    def add(
        self,
        name: str,
        *,
        sources: Iterable[str] = (),
        defines: Iterable[str] = (),
        references: Iterable[str] = (),
        depends_on: Iterable[str] = (),
    ) -> Module:
        module = Module(
            name=name,
            source_files=list(sources),
            defines=list(defines),
            compiled_references=list(references),
            module_references=list(depends_on),
        )
        self._modules.append(module)
        return module

    def modules(self) -> List[Module]:
        return list(self._modules)

    def write(self, relative: str, content: str = "") -> Path:
        """Write a file below the root and return its absolute path."""
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return path


__all__ = ["ModuleSetBuilder"]
