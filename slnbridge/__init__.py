"""Project descriptor generation and external editor launching."""

from .identifiers import allocate
from .integration import EditorIntegration
from .registry import EditorRegistry

__all__ = ["EditorIntegration", "EditorRegistry", "allocate"]
