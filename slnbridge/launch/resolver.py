"""Resolves a concrete executable from an editor installation path."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from ..errors import ResolutionWarning
from ..logging import get_logger

BUNDLE_SUFFIX = ".app"


@dataclass(frozen=True)
class Resolution:
    """Outcome of executable probing."""

    executable: str
    warning: Optional[ResolutionWarning] = None

    @property
    def fell_back(self) -> bool:
        return self.warning is not None


class ExecutableResolver:
    """Probes an ordered list of candidate paths inside an application bundle.

    ``candidates`` are relative to the bundle root and tried in order. When
    none exists, the first file (by name) inside ``binary_dir`` is used, and
    failing that the installation path is returned unresolved.
    """

    def __init__(self, candidates: Sequence[str], binary_dir: str | None = None) -> None:
        self.candidates = list(candidates)
        self.binary_dir = binary_dir
        self.logger = get_logger("launch.resolver")

    @staticmethod
    def is_bundle(installation_path: str) -> bool:
        path = Path(installation_path)
        return installation_path.rstrip("/\\").endswith(BUNDLE_SUFFIX) or path.is_dir()

    def resolve(self, installation_path: str) -> Resolution:
        if not self.is_bundle(installation_path):
            return Resolution(executable=installation_path)

        root = Path(installation_path)
        searched: List[str] = []
        for candidate in self.candidates:
            path = root / candidate
            searched.append(str(path))
            if path.is_file():
                self.logger.debug("Resolved executable %s", path)
                return Resolution(executable=str(path))

        if self.binary_dir:
            binary_dir = root / self.binary_dir
            searched.append(str(binary_dir))
            if binary_dir.is_dir():
                files = sorted(child for child in binary_dir.iterdir() if child.is_file())
                if files:
                    self.logger.debug("Resolved executable %s from %s", files[0], binary_dir)
                    return Resolution(executable=str(files[0]))

        warning = ResolutionWarning(installation_path=installation_path, searched=searched)
        self.logger.warning(warning.message)
        return Resolution(executable=installation_path, warning=warning)


__all__ = ["BUNDLE_SUFFIX", "ExecutableResolver", "Resolution"]
