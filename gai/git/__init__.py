"""Git utilities package."""

from .core import GitCLI, VersionControl, run

__all__ = [
    "run",
    "VersionControl",
    "GitCLI",
]
