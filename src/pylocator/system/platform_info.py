from __future__ import annotations

import ntpath
import posixpath
import sys

from enum import Enum
from types import ModuleType


class PlatformFamily(Enum):
    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"
    OTHER = "other"

    @classmethod
    def current(cls) -> PlatformFamily:
        return cls.from_platform(sys.platform)

    @classmethod
    def from_platform(cls, platform: str) -> PlatformFamily:
        if platform == "win32":
            return cls.WINDOWS
        if platform.startswith("linux"):
            return cls.LINUX
        if platform == "darwin":
            return cls.MACOS
        return cls.OTHER

    @property
    def is_unix(self) -> bool:
        return self in (PlatformFamily.LINUX, PlatformFamily.MACOS)

    @property
    def path_module(self) -> ModuleType:
        return ntpath if self is PlatformFamily.WINDOWS else posixpath

    @property
    def path_separator(self) -> str:
        return self.path_module.pathsep

    def join(self, directory: str, *names: str) -> str:
        result: str = self.path_module.join(directory, *names)
        return result
