"""Deterministic project identifiers derived from module names."""

from __future__ import annotations

import hashlib
import uuid


def allocate(name: str) -> str:
    """Return the uppercase, hyphenated GUID string for ``name``.

    The MD5 digest of the UTF-8 encoded name is laid out the way a .NET
    ``Guid`` constructed from those 16 bytes prints, so identifiers agree with
    descriptors produced by editor-side tooling for the same module names.
    """
    digest = hashlib.md5(name.encode("utf-8"), usedforsecurity=False).digest()
    return str(uuid.UUID(bytes_le=digest)).upper()


def braced(identifier: str) -> str:
    """Wrap an identifier in the braces MSBuild and solution files expect."""
    return "{" + identifier + "}"


__all__ = ["allocate", "braced"]
