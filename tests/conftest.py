from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.module_builder import ModuleSetBuilder


@pytest.fixture
def module_builder(tmp_path: Path) -> ModuleSetBuilder:
    """Provide a module set builder rooted at the pytest tmp_path."""
    return ModuleSetBuilder(tmp_path)
