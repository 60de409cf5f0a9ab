"""Recognition and discovery of external editor installations."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from ..models import Installation


class InstallationLocator:
    """Finds installations at known paths and recognises user-chosen paths."""

    def __init__(self, editor_name: str, known_paths: Sequence[str]) -> None:
        self.editor_name = editor_name
        self.known_paths = list(known_paths)

    def matches(self, candidate_path: str) -> bool:
        """Return True when ``candidate_path`` refers to this editor."""
        return bool(candidate_path) and self.editor_name in candidate_path

    def discover(self) -> List[Installation]:
        return [
            Installation(name=self.editor_name, path=path)
            for path in self.known_paths
            if Path(path).exists()
        ]

    def try_get_installation(self, candidate_path: str) -> Optional[Installation]:
        if not self.matches(candidate_path):
            return None
        return Installation(name=self.editor_name, path=candidate_path)


__all__ = ["InstallationLocator"]
