"""Builds editor command lines and starts the editor process."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, List, Sequence

from ..errors import LaunchError, SlnBridgeError
from ..generation import DescriptorGenerator
from ..logging import get_logger
from ..models import LaunchRequest
from .resolver import BUNDLE_SUFFIX, ExecutableResolver

OPEN_BUNDLE_HELPER = "/usr/bin/open"
BUNDLE_PLATFORM = "darwin"


@dataclass(frozen=True)
class LaunchCommand:
    """Executable plus literal argument list; never passed through a shell."""

    executable: str
    args: List[str]

    @property
    def argv(self) -> List[str]:
        return [self.executable, *self.args]


class LaunchArbiter:
    """Chooses how to start the editor for the host platform and install layout."""

    def __init__(
        self,
        resolver: ExecutableResolver,
        *,
        working_directory: Path,
        generate: Callable[[], object] | None = None,
        goto_flag: str = "-g",
        new_window: bool = True,
        platform: str | None = None,
        spawner: Callable[[Sequence[str]], Any] | None = None,
    ) -> None:
        self.resolver = resolver
        self.working_directory = Path(working_directory)
        self.goto_flag = goto_flag
        self.new_window = new_window
        self.platform = platform or sys.platform
        self.logger = get_logger("launch")
        self._generate = generate
        self._spawner = spawner or self._default_spawner

    def editor_arguments(self, request: LaunchRequest) -> List[str]:
        """Return the arguments handed to the editor itself."""
        args = [str(self.working_directory)]
        if not request.target_file:
            return args

        target = Path(request.target_file)
        if not target.is_absolute():
            target = self.working_directory / target
        if not target.exists():
            self.logger.debug("Target file %s does not exist; opening workspace only", target)
            return args

        # Positions are 1-based; anything below 1 means unset.
        if request.line and request.line > 0:
            column = request.column if request.column and request.column > 0 else 1
            if self.goto_flag:
                args.append(self.goto_flag)
            args.append(f"{target}:{request.line}:{column}")
        else:
            args.append(str(target))
        return args

    def build_command(self, request: LaunchRequest) -> LaunchCommand:
        installation = request.installation_path
        args = self.editor_arguments(request)

        if self.platform == BUNDLE_PLATFORM and installation.rstrip("/").endswith(BUNDLE_SUFFIX):
            helper_args = ["-a", installation]
            if self.new_window:
                helper_args.append("-n")
            helper_args.append("--args")
            return LaunchCommand(executable=OPEN_BUNDLE_HELPER, args=helper_args + args)

        resolution = self.resolver.resolve(installation)
        return LaunchCommand(executable=resolution.executable, args=args)

    def launch(self, request: LaunchRequest) -> Any:
        """Start the editor and return the process handle without waiting on it.

        A failed regeneration is logged and the editor is started regardless.
        """
        try:
            self.ensure_descriptors()
        except (SlnBridgeError, OSError) as exc:
            self.logger.warning("Descriptor regeneration failed; launching anyway: %s", exc)
        command = self.build_command(request)
        self.logger.debug("Launching %s", " ".join(command.argv))
        try:
            return self._spawner(command.argv)
        except OSError as exc:
            raise LaunchError(command.executable, exc) from exc

    def ensure_descriptors(self) -> bool:
        """Run one generation pass when the solution file is missing.

        Returns True when generation was triggered.
        """
        solution = DescriptorGenerator.solution_path(self.working_directory)
        if solution.exists() or self._generate is None:
            return False
        self.logger.info("Solution %s missing; regenerating descriptors", solution.name)
        self._generate()
        return True

    @staticmethod
    def _default_spawner(argv: Sequence[str]) -> subprocess.Popen:
        kwargs: dict[str, Any] = {
            "stdin": subprocess.DEVNULL,
            "stdout": subprocess.DEVNULL,
            "stderr": subprocess.DEVNULL,
            "close_fds": True,
        }
        if os.name == "nt":
            kwargs["creationflags"] = getattr(subprocess, "CREATE_NO_WINDOW", 0)
        else:
            kwargs["start_new_session"] = True
        return subprocess.Popen(list(argv), **kwargs)


__all__ = ["LaunchArbiter", "LaunchCommand", "OPEN_BUNDLE_HELPER"]
