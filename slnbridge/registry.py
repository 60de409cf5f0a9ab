"""Explicit registry of editor integrations owned by the host."""

from __future__ import annotations

from typing import Dict, List, Optional

from .integration import EditorIntegration


class EditorRegistry:
    """Holds the integrations the host registered during startup.

    The host constructs one registry and passes it to whatever needs to look
    integrations up; nothing registers itself on import.
    """

    def __init__(self) -> None:
        self._integrations: Dict[str, EditorIntegration] = {}

    def register(self, integration: EditorIntegration) -> None:
        if not isinstance(integration, EditorIntegration):
            raise TypeError("Only EditorIntegration instances can be registered")
        key = integration.name.lower()
        if key in self._integrations:
            raise ValueError(f"An integration named '{integration.name}' is already registered")
        self._integrations[key] = integration

    def unregister(self, name: str) -> None:
        self._integrations.pop(name.lower(), None)

    def get(self, name: str) -> Optional[EditorIntegration]:
        return self._integrations.get(name.lower())

    def names(self) -> List[str]:
        return [integration.name for integration in self._integrations.values()]

    def for_path(self, editor_path: str) -> Optional[EditorIntegration]:
        """Return the first integration that recognises ``editor_path``."""
        for integration in self._integrations.values():
            if integration.try_get_installation(editor_path) is not None:
                return integration
        return None


__all__ = ["EditorRegistry"]
