from __future__ import annotations

from pylocator.system.filesystem import FileSystem
from pylocator.system.filesystem import LocalFileSystem
from pylocator.system.platform_info import PlatformFamily
from pylocator.system.process import ProcessLauncher
from pylocator.system.process import ProcessOutput
from pylocator.system.process import SubprocessLauncher
from pylocator.system.registry import NullRegistry
from pylocator.system.registry import Registry
from pylocator.system.registry import WindowsRegistry
from pylocator.system.registry import get_registry


__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "NullRegistry",
    "PlatformFamily",
    "ProcessLauncher",
    "ProcessOutput",
    "Registry",
    "SubprocessLauncher",
    "WindowsRegistry",
    "get_registry",
]
