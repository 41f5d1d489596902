from __future__ import annotations

from importlib import metadata

try:
    __version__ = metadata.version("albums")
except metadata.PackageNotFoundError:
    __version__ = "1.0.0"
