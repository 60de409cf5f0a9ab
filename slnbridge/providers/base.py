"""Base class for module set providers."""

from abc import ABC, abstractmethod
from typing import List

from ..models import Module


class ModuleSetProvider(ABC):
    """Contract for collaborators that enumerate the host's compiled modules."""

    @abstractmethod
    def modules(self) -> List[Module]:
        """Return the current module set in the host's order."""


class StaticModuleProvider(ModuleSetProvider):
    """Serves a fixed module list supplied at construction time."""

    def __init__(self, modules: List[Module]) -> None:
        self._modules = list(modules)

    def modules(self) -> List[Module]:
        return list(self._modules)
