"""Renders project and solution descriptors for a module set."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePath, PureWindowsPath
from typing import Dict, List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader

from ..errors import GenerationError
from ..identifiers import allocate, braced
from ..logging import get_logger
from ..models import Module
from .constants import (
    CONFIGURATIONS,
    CSHARP_PROJECT_TYPE,
    DEFINE_SEPARATOR,
    INTERMEDIATE_ROOT,
    OUTPUT_ROOT,
    PRODUCT_VERSION,
    PROJECT_EXTENSION,
    PROJECT_TEMPLATE,
    SCHEMA_VERSION,
    SOLUTION_EXTENSION,
    SOLUTION_HEADER,
    SOLUTION_TEMPLATE,
    TOOLS_VERSION,
)


@dataclass
class GenerationResult:
    """Files written by a successful generation pass."""

    project_paths: List[Path] = field(default_factory=list)
    solution_path: Optional[Path] = None


class DescriptorGenerator:
    """Writes one ``.csproj`` per module and one ``.sln`` for the whole set."""

    def __init__(
        self,
        templates_dir: Path | None = None,
        *,
        target_framework: str = "v4.7.1",
        lang_version: str = "latest",
        no_warn: Sequence[str] | None = None,
    ) -> None:
        self.templates_dir = templates_dir
        self.target_framework = target_framework
        self.lang_version = lang_version
        self.no_warn = list(no_warn) if no_warn is not None else ["0169", "0649"]
        self.logger = get_logger("generation")
        self._env = self._create_env(templates_dir)

    # ------------------------------------------------------------------
    # Paths

    @staticmethod
    def project_path(module: Module, working_directory: Path) -> Path:
        return working_directory / f"{module.name}{PROJECT_EXTENSION}"

    @staticmethod
    def solution_path(working_directory: Path) -> Path:
        name = working_directory.resolve().name or "Solution"
        return working_directory / f"{name}{SOLUTION_EXTENSION}"

    # ------------------------------------------------------------------
    # Rendering

    def render_project(self, module: Module) -> str:
        """Return the MSBuild project XML for ``module``."""
        template = self._env.get_template(PROJECT_TEMPLATE)
        return template.render(
            tools_version=TOOLS_VERSION,
            product_version=PRODUCT_VERSION,
            schema_version=SCHEMA_VERSION,
            project_guid=braced(allocate(module.name)),
            assembly_name=module.name,
            target_framework=self.target_framework,
            lang_version=self.lang_version,
            define_constants=DEFINE_SEPARATOR.join(module.defines),
            no_warn=DEFINE_SEPARATOR.join(self.no_warn),
            outputs=_output_paths(),
            references=[
                {"name": _reference_name(reference), "path": reference}
                for reference in module.compiled_references
            ],
            sources=list(module.source_files),
            project_references=[
                {
                    "name": name,
                    "file": f"{name}{PROJECT_EXTENSION}",
                    "guid": braced(allocate(name)),
                }
                for name in module.module_references
            ],
        )

    def render_solution(self, modules: Sequence[Module]) -> str:
        """Return the solution file text listing ``modules`` in order."""
        template = self._env.get_template(SOLUTION_TEMPLATE)
        return template.render(
            header=SOLUTION_HEADER,
            project_type=braced(CSHARP_PROJECT_TYPE),
            projects=[
                {
                    "name": module.name,
                    "file": f"{module.name}{PROJECT_EXTENSION}",
                    "guid": braced(allocate(module.name)),
                }
                for module in modules
            ],
        )

    # ------------------------------------------------------------------
    # Generation pass

    def generate(self, modules: Sequence[Module], working_directory: Path) -> GenerationResult:
        """Regenerate every descriptor under ``working_directory``.

        Each module is attempted even if an earlier one failed, and the
        solution is written last. Files written before a failure are kept.
        """
        working_directory = Path(working_directory)
        result = GenerationResult()
        failures: List[tuple[Path, BaseException]] = []

        for module in modules:
            path = self.project_path(module, working_directory)
            try:
                self._write(path, self.render_project(module))
            except OSError as exc:
                self.logger.error("Failed to write project descriptor %s: %s", path, exc)
                failures.append((path, exc))
                continue
            result.project_paths.append(path)

        solution_path = self.solution_path(working_directory)
        try:
            self._write(solution_path, self.render_solution(modules))
        except OSError as exc:
            self.logger.error("Failed to write solution descriptor %s: %s", solution_path, exc)
            failures.append((solution_path, exc))
        else:
            result.solution_path = solution_path

        if failures:
            first_path, first_cause = failures[0]
            raise GenerationError(first_path, first_cause, failures)

        self.logger.info(
            "Generated %d project descriptor(s) and %s",
            len(result.project_paths),
            solution_path.name,
        )
        return result

    def _write(self, path: Path, content: str) -> None:
        path.write_text(content, encoding="utf-8", newline="\n")
        self.logger.debug("Wrote %s", path)

    @staticmethod
    def _create_env(templates_dir: Path | None) -> Environment:
        directories = []
        if templates_dir:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        loader = FileSystemLoader(directories)
        return Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )


def _reference_name(reference: str) -> str:
    # Host paths may use either separator regardless of the platform we run on.
    if "\\" in reference:
        return PureWindowsPath(reference).stem
    return PurePath(reference).stem


def _output_paths() -> Dict[str, Dict[str, str]]:
    return {
        configuration: {
            "output": f"{OUTPUT_ROOT}/{configuration}/",
            "intermediate": f"{INTERMEDIATE_ROOT}/{configuration}/",
        }
        for configuration in CONFIGURATIONS
    }


__all__ = ["DescriptorGenerator", "GenerationResult"]
