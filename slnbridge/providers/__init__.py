"""Module set providers."""

from .base import ModuleSetProvider, StaticModuleProvider
from .manifest import ManifestModuleProvider

__all__ = ["ManifestModuleProvider", "ModuleSetProvider", "StaticModuleProvider"]
