"""
Superpowers - layered skill library for the pi coding agent.

Discovers skills in project, personal and bundled roots, resolves them
with a fixed override order, and injects a bootstrap instruction into
the agent's context.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("pi-superpowers")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "Superpowers Contributors"

from superpowers.config import Settings  # noqa: E402
from superpowers.extension import SuperpowersExtension  # noqa: E402

__all__ = ["__version__", "__version_info__", "Settings", "SuperpowersExtension"]
