"""Editor installation handling and process launching."""

from .arbiter import LaunchArbiter, LaunchCommand
from .installations import InstallationLocator
from .resolver import ExecutableResolver, Resolution

__all__ = [
    "ExecutableResolver",
    "InstallationLocator",
    "LaunchArbiter",
    "LaunchCommand",
    "Resolution",
]
