"""Core data models shared across slnbridge components."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Module:
    """A compiled unit of source code as reported by the host pipeline.

    ``module_references`` holds the names of directly referenced modules.
    Only direct references are rendered, so a cyclic reference graph does not
    stop generation, although the emitted descriptors then describe a cycle.
    """

    name: str
    source_files: List[str] = field(default_factory=list)
    defines: List[str] = field(default_factory=list)
    compiled_references: List[str] = field(default_factory=list)
    module_references: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class Installation:
    """A located instance of the external editor on disk."""

    name: str
    path: str


@dataclass
class LaunchRequest:
    """Open-file request; ``line`` and ``column`` are 1-based, 0 or None means unset."""

    installation_path: str
    target_file: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None
