"""Error types raised by descriptor generation and editor launching."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence


class SlnBridgeError(RuntimeError):
    """Base class for slnbridge failures."""


class ConfigError(SlnBridgeError):
    """Raised when a configuration or module manifest cannot be parsed."""


class GenerationError(SlnBridgeError):
    """Raised when one or more descriptor files could not be written.

    ``path`` and ``cause`` describe the first failure; ``failures`` lists every
    ``(path, cause)`` pair recorded during the pass.
    """

    def __init__(
        self,
        path: Path,
        cause: BaseException,
        failures: Sequence[tuple[Path, BaseException]] | None = None,
    ) -> None:
        self.path = path
        self.cause = cause
        self.failures: List[tuple[Path, BaseException]] = list(failures or [(path, cause)])
        message = f"Failed to write {path}: {cause}"
        if len(self.failures) > 1:
            message += f" ({len(self.failures) - 1} more file(s) failed)"
        super().__init__(message)


class LaunchError(SlnBridgeError):
    """Raised when the external editor process cannot be started."""

    def __init__(self, executable: str, cause: BaseException) -> None:
        self.executable = executable
        self.cause = cause
        super().__init__(f"Unable to start '{executable}': {cause}")


@dataclass(frozen=True)
class ResolutionWarning:
    """Executable probing found nothing and fell back to the installation path."""

    installation_path: str
    searched: List[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        tried = ", ".join(self.searched) or "(no candidates)"
        return (
            f"No executable found inside {self.installation_path} (tried {tried}); "
            "using the installation path as is"
        )


__all__ = [
    "ConfigError",
    "GenerationError",
    "LaunchError",
    "ResolutionWarning",
    "SlnBridgeError",
]
