"""Tests for installation recognition and discovery."""

from __future__ import annotations

from pathlib import Path

from slnbridge.launch import InstallationLocator
from slnbridge.models import Installation


def test_matches_paths_containing_editor_name() -> None:
    locator = InstallationLocator("Antigravity", [])

    assert locator.matches("/Applications/Antigravity.app") is True
    assert locator.matches(r"C:\Program Files\Antigravity\Antigravity.exe") is True
    assert locator.matches("/Applications/Visual Studio Code.app") is False
    assert locator.matches("") is False


def test_discover_returns_existing_known_paths(tmp_path: Path) -> None:
    present = tmp_path / "Antigravity.app"
    present.mkdir()
    missing = tmp_path / "Missing" / "Antigravity"

    locator = InstallationLocator("Antigravity", [str(present), str(missing)])

    assert locator.discover() == [Installation(name="Antigravity", path=str(present))]


def test_try_get_installation() -> None:
    locator = InstallationLocator("Antigravity", [])

    assert locator.try_get_installation("/opt/Antigravity/bin/antigravity") == Installation(
        name="Antigravity", path="/opt/Antigravity/bin/antigravity"
    )
    assert locator.try_get_installation("/usr/bin/vim") is None
