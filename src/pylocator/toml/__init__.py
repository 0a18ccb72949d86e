from __future__ import annotations

from pylocator.toml.exceptions import TOMLError
from pylocator.toml.file import TOMLFile


__all__ = ["TOMLError", "TOMLFile"]
