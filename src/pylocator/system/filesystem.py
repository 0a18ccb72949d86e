from __future__ import annotations

import os
import string

from abc import ABC
from abc import abstractmethod

from pylocator.utils._compat import WINDOWS


# GetDriveTypeW return value for fixed disks
DRIVE_FIXED = 3


class FileSystem(ABC):
    """
    Read-only view of the filesystem used while searching for interpreters.
    """

    @abstractmethod
    def is_dir(self, path: str) -> bool: ...

    @abstractmethod
    def is_file(self, path: str) -> bool: ...

    @abstractmethod
    def fixed_drives(self) -> list[str]:
        """
        Root directories (e.g. ``C:\\``) of the fixed, ready local drives.
        Empty when the concept does not apply to the host.
        """


class LocalFileSystem(FileSystem):
    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def fixed_drives(self) -> list[str]:
        if not WINDOWS:
            return []

        import ctypes

        kernel32 = ctypes.windll.kernel32
        bitmask = kernel32.GetLogicalDrives()

        drives = []
        for i, letter in enumerate(string.ascii_uppercase):
            if not bitmask & (1 << i):
                continue

            root = f"{letter}:\\"
            if kernel32.GetDriveTypeW(root) != DRIVE_FIXED:
                continue

            # a drive is ready when its root can be listed
            if os.path.isdir(root):
                drives.append(root)

        return drives
