"""Host-facing editor integration: sync descriptors and open files."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from .config import SlnBridgeConfig, load_config
from .errors import LaunchError
from .generation import DescriptorGenerator, GenerationResult
from .launch import ExecutableResolver, InstallationLocator, LaunchArbiter
from .logging import get_logger
from .models import Installation, LaunchRequest
from .providers import ManifestModuleProvider, ModuleSetProvider


class EditorIntegration:
    """Coordinates module discovery, descriptor generation and editor launches."""

    def __init__(
        self,
        provider: ModuleSetProvider,
        *,
        working_directory: Path,
        config: SlnBridgeConfig | None = None,
        generator: DescriptorGenerator | None = None,
        locator: InstallationLocator | None = None,
        arbiter: LaunchArbiter | None = None,
    ) -> None:
        self.provider = provider
        self.working_directory = Path(working_directory)
        self.config = config or SlnBridgeConfig(root=self.working_directory)
        editor = self.config.editor
        generation = self.config.generation
        self.generator = generator or DescriptorGenerator(
            generation.templates_dir,
            target_framework=generation.target_framework,
            lang_version=generation.lang_version,
            no_warn=generation.no_warn,
        )
        self.locator = locator or InstallationLocator(editor.name, editor.known_paths)
        self.arbiter = arbiter or LaunchArbiter(
            ExecutableResolver(editor.executable_candidates, editor.binary_dir),
            working_directory=self.working_directory,
            generate=self.sync_all,
            goto_flag=editor.goto_flag,
            new_window=editor.new_window,
        )
        self.installation: Optional[str] = editor.installation
        self.logger = get_logger("integration")

    @classmethod
    def from_path(cls, path: str | Path) -> "EditorIntegration":
        """Build an integration for the project at ``path`` using its config file."""
        root = Path(path).expanduser().resolve()
        config = load_config(root)
        provider = ManifestModuleProvider(config.modules_manifest_path)
        return cls(provider, working_directory=root, config=config)

    @property
    def name(self) -> str:
        return self.config.editor.name

    # ------------------------------------------------------------------
    # Installations

    def installations(self) -> List[Installation]:
        return self.locator.discover()

    def try_get_installation(self, editor_path: str) -> Optional[Installation]:
        return self.locator.try_get_installation(editor_path)

    def initialize(self, installation_path: str) -> GenerationResult:
        """Select ``installation_path`` as the current editor and sync descriptors."""
        self.installation = installation_path
        return self.sync_all()

    # ------------------------------------------------------------------
    # Descriptor sync

    def sync_all(self) -> GenerationResult:
        modules = self.provider.modules()
        self.logger.debug("Syncing %d module(s) into %s", len(modules), self.working_directory)
        return self.generator.generate(modules, self.working_directory)

    def sync_if_needed(
        self,
        added: Sequence[str] = (),
        deleted: Sequence[str] = (),
        moved: Sequence[str] = (),
        moved_from: Sequence[str] = (),
        imported: Sequence[str] = (),
    ) -> GenerationResult:
        """Handle an asset-change batch; any batch regenerates everything."""
        changed = len(added) + len(deleted) + len(moved) + len(moved_from) + len(imported)
        self.logger.debug("Asset change batch with %d path(s); regenerating descriptors", changed)
        return self.sync_all()

    # ------------------------------------------------------------------
    # Launch

    def open_project(
        self,
        file_path: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> bool:
        """Open the editor at ``file_path``; return False instead of raising on failure."""
        if not self.installation:
            self.logger.error("No %s installation configured", self.name)
            return False

        request = LaunchRequest(
            installation_path=self.installation,
            target_file=file_path,
            line=line,
            column=column,
        )
        try:
            self.arbiter.launch(request)
        except LaunchError as exc:
            self.logger.error(
                "Failed to open %s (%s): %s", self.name, exc.executable, exc.cause
            )
            return False
        return True


__all__ = ["EditorIntegration"]
