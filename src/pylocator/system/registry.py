from __future__ import annotations

import logging
import sys

from abc import ABC
from abc import abstractmethod


logger = logging.getLogger(__name__)


class Registry(ABC):
    """
    Read-only access to the local machine hive of the Windows registry.
    """

    @abstractmethod
    def key_exists(self, key: str) -> bool: ...


class NullRegistry(Registry):
    def key_exists(self, key: str) -> bool:
        return False


class WindowsRegistry(Registry):
    def __init__(self) -> None:
        if sys.platform != "win32":
            raise RuntimeError("The Windows registry is only available on Windows.")

    def key_exists(self, key: str) -> bool:
        import winreg

        try:
            with winreg.OpenKey(winreg.HKEY_LOCAL_MACHINE, key):
                return True
        except OSError:
            logger.debug("Registry key HKEY_LOCAL_MACHINE\\%s does not exist", key)
            return False


def get_registry() -> Registry:
    if sys.platform == "win32":
        return WindowsRegistry()
    return NullRegistry()
